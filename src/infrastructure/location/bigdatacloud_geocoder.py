"""BigDataCloud adapter for ReverseGeocoder.

Issues one ``GET`` per lookup with ``latitude``, ``longitude`` and
``localityLanguage`` query parameters and maps the JSON body onto a domain
PlaceDescription. Every transport, status or payload problem is raised as
EnrichmentUnavailableError; callers treat enrichment as advisory.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from domain.location.errors import EnrichmentUnavailableError
from domain.location.services import compose_place_description
from domain.location.value_objects import Coordinate, PlaceDescription

# Module-level logger (reused across all calls)
logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://api.bigdatacloud.net/data/reverse-geocode-client"


class ReverseGeocodePayload(BaseModel):
    """The subset of the service response we read. Unknown keys are ignored."""

    city: str | None = None
    locality: str | None = None
    principalSubdivision: str | None = None
    countryName: str | None = None

    model_config = ConfigDict(extra="ignore")


class BigDataCloudGeocoder:
    """Reverse geocoder backed by the BigDataCloud client endpoint.

    Parameters
    ----------
    endpoint: str
        Fixed reverse-geocode URL.
    locality_language: str
        Language for locality names.
    timeout_s: float
        Request timeout when the adapter owns its client.
    client: httpx.AsyncClient | None
        Shared client; when omitted a short-lived client is opened per lookup.
    """

    def __init__(
        self,
        endpoint: str = DEFAULT_ENDPOINT,
        locality_language: str = "en",
        timeout_s: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.endpoint = endpoint
        self.locality_language = locality_language
        self.timeout_s = timeout_s
        self._client = client

    async def reverse(self, coord: Coordinate) -> PlaceDescription | None:
        params = {
            "latitude": coord.latitude,
            "longitude": coord.longitude,
            "localityLanguage": self.locality_language,
        }
        try:
            if self._client is not None:
                response = await self._client.get(self.endpoint, params=params)
            else:
                async with httpx.AsyncClient(timeout=self.timeout_s) as client:
                    response = await client.get(self.endpoint, params=params)
            response.raise_for_status()
            payload = ReverseGeocodePayload.model_validate(response.json())
        except httpx.HTTPError as e:
            raise EnrichmentUnavailableError(f"Reverse geocode request failed: {e}") from e
        except (ValueError, ValidationError) as e:
            # JSONDecodeError is a ValueError
            raise EnrichmentUnavailableError(f"Malformed reverse geocode payload: {e}") from e

        place = compose_place_description(
            payload.city or payload.locality,
            payload.principalSubdivision,
            payload.countryName,
        )
        logger.debug(
            "Reverse geocoded (%.4f, %.4f) -> %s",
            coord.latitude,
            coord.longitude,
            place.label if place else None,
        )
        return place
