"""Location Bounded Context - Value Objects.

Immutable data structures for positions, regions and boundary-check outcomes.
All validation occurs at construction time via Pydantic.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from domain.location.errors import AcquisitionFailureCause

# ---------------------------------------------------------------------------
# Positioning Constants
# ---------------------------------------------------------------------------
POSITION_TIMEOUT_MS = 10_000  # No fix within this deadline -> timeout
POSITION_MAXIMUM_AGE_MS = 300_000  # Cached fixes up to 5 minutes are acceptable


class Coordinate(BaseModel):
    """Geographic coordinate in WGS84 (Value Object).

    Invariants:
        latitude in [-90, 90]
        longitude in [-180, 180]
    """

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)

    model_config = ConfigDict(frozen=True)


class BoundingRegion(BaseModel):
    """Rectangular latitude/longitude envelope approximating a territory.

    This is a deliberate simplification of true territory containment: points
    near borders, enclaves and the corners of the box are misclassified.
    """

    north: float = Field(ge=-90, le=90)
    south: float = Field(ge=-90, le=90)
    east: float = Field(ge=-180, le=180)
    west: float = Field(ge=-180, le=180)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_ordering(self) -> "BoundingRegion":
        if not (self.north > self.south):
            raise ValueError(
                f"Invalid latitude ordering: north={self.north} <= south={self.south}"
            )
        if not (self.east > self.west):
            raise ValueError(
                f"Invalid longitude ordering: east={self.east} <= west={self.west}"
            )
        return self


class NamedPlace(BaseModel):
    """A labelled coordinate, e.g. a city used for fallback positioning."""

    name: str = Field(min_length=1)
    coordinate: Coordinate

    model_config = ConfigDict(frozen=True)


class PositionOptions(BaseModel):
    """Configuration passed to the platform positioning capability."""

    enable_high_accuracy: bool = True
    timeout_ms: int = Field(default=POSITION_TIMEOUT_MS, gt=0)
    maximum_age_ms: int = Field(default=POSITION_MAXIMUM_AGE_MS, ge=0)

    model_config = ConfigDict(frozen=True)

    @property
    def timeout_s(self) -> float:
        return self.timeout_ms / 1000


class PlaceDescription(BaseModel):
    """Human-readable locality resolved for a coordinate.

    ``label`` joins the non-empty parts in city, state, country order.
    ``country`` is the raw country field, kept separately for hints.
    """

    label: str = Field(min_length=1)
    city: str | None = None
    state: str | None = None
    country: str | None = None

    model_config = ConfigDict(frozen=True)


class MembershipResult(BaseModel):
    """Outcome of testing one coordinate against the bounding region.

    When ``determined`` is False the acquisition failed: ``is_in_region`` is
    then a default, not a finding, and ``failure`` names the cause.
    """

    is_in_region: bool
    message: str = Field(min_length=1)
    country: str | None = None
    state: str | None = None
    city: str | None = None
    distance_km: float | None = Field(default=None, ge=0)
    determined: bool = True
    failure: AcquisitionFailureCause | None = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_failure_consistency(self) -> "MembershipResult":
        if self.determined and self.failure is not None:
            raise ValueError("determined=True cannot carry an acquisition failure")
        if not self.determined and self.is_in_region:
            raise ValueError("An undetermined result cannot claim region membership")
        return self


class LocationValidation(BaseModel):
    """Result of restricting a coordinate to the target region."""

    is_valid: bool
    corrected: Coordinate
    message: str

    model_config = ConfigDict(frozen=True)
