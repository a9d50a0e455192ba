"""Infrastructure adapters for the location bounded context.

Position providers and the reverse geocoder, exported for simplified imports.
"""

from .bigdatacloud_geocoder import BigDataCloudGeocoder
from .position_providers import IpPositionProvider, StaticPositionProvider

__all__ = ["BigDataCloudGeocoder", "IpPositionProvider", "StaticPositionProvider"]
