"""Boundary Alert Domain Layer.

This package contains the core business logic organized by bounded contexts:
- location: Positions, the target region, membership and distance
- notification: Whether and how a boundary notification is surfaced
- stories: Customer-story submission validation
"""

# Imports alphabetized per project style (isort)
from domain import location, notification, stories

__all__ = ["location", "notification", "stories"]
