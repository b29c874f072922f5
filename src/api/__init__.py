"""HTTP transport for the remote data service."""
