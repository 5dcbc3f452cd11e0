"""
Persistence adapters.

Services depend on these repositories rather than touching SQLAlchemy
sessions directly.
"""
