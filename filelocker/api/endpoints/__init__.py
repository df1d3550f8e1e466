"""Endpoint functions, one module per Filelocker resource."""
