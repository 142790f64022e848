"""Folder Permissions bounded context.

Reconciles a declared set of folder permission grants against the remote
access-control API, treating the declaration as authoritative.
"""
