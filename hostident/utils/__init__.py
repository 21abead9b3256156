"""Utility modules used throughout HostIdent."""
