"""Shared settings and exceptions."""
