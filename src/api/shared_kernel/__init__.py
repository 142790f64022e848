"""Shared Kernel module.

Components shared by bounded contexts: the access-control client protocol,
its Grafana implementation, wire models and the observation context used by
domain probes.
"""
