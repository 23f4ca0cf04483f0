"""
Infrastructure layer.

The infrastructure layer contains implementations of ports defined
in the application layer: SQLAlchemy-backed repositories and the
session-backed unit of work.
"""
