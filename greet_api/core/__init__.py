"""
Core utilities shared across the greeting API.

This package hosts configuration helpers (env vars) and cross-cutting
concerns such as logging setup.
"""
