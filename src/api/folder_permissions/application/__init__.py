"""Application layer for the Folder Permissions bounded context."""
