"""
Use cases for the greeting API.

Routers call these services instead of manipulating sessions or the
default-greeting holder directly.
"""
