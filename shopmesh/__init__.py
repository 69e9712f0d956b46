"""Inventory and order services with MongoDB storage, behind a JWT-checking API gateway."""

__version__ = "0.1.0"