"""User management core: self-validating entity, storage port with two adapters, and service."""

__version__ = "0.1.0"
