"""Filelocker command line interface."""
