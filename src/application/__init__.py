"""Application services for the boundary check.

Orchestrates domain logic around the positioning and geocoding ports.
"""

from .acquisition import GeolocationAcquirer
from .boundary_check import BoundaryChecker
from .enrichment import ContextEnricher
from .region_alert import AlertSession, RegionAlert

__all__ = [
    "AlertSession",
    "BoundaryChecker",
    "ContextEnricher",
    "GeolocationAcquirer",
    "RegionAlert",
]
