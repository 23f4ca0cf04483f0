"""
Application layer.

The application layer orchestrates domain objects and defines the boundaries
of the system. It contains the services that represent the operations available
to external actors (console menus, HTTP controllers).

This layer contains:
- Services: Orchestrate domain logic and storage access
- Ports: Interfaces for storage and transactions
"""
