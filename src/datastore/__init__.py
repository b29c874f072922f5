"""Namespaced key/value storage access.

This package resolves server-side namespaces into accessor objects
and manages their lifecycle over the transport.
"""
