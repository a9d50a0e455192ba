"""Stories Bounded Context - Value Objects.

Customer-story submissions and the response envelope returned to clients.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Form field names as submitted by clients
REQUIRED_FIELDS: tuple[str, ...] = (
    "title",
    "description",
    "category",
    "location",
    "authorBio",
    "authorEmail",
    "authorName",
    "organisationName",
)


class StoryCategory(str, Enum):
    BUSINESS = "BUSINESS"
    TRANSPORT = "TRANSPORT"
    HEALTHCARE = "HEALTHCARE"
    PERSONAL = "PERSONAL"
    OTHER = "OTHER"


class HttpStatus(str, Enum):
    """Status names echoed in the ``http`` field of responses."""

    CREATED = "CREATED"
    BAD_REQUEST = "BAD_REQUEST"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


_STATUS_CODES: dict[HttpStatus, int] = {
    HttpStatus.CREATED: 201,
    HttpStatus.BAD_REQUEST: 400,
    HttpStatus.INTERNAL_SERVER_ERROR: 500,
}


class StoryAttachment(BaseModel):
    """Metadata of the optional profile picture upload."""

    filename: str
    original_name: str
    size: int = Field(ge=0)
    mimetype: str

    model_config = ConfigDict(frozen=True)


class CustomerStory(BaseModel):
    """A validated submission. Category is normalised to upper case."""

    title: str
    description: str
    category: StoryCategory
    location: str
    author_bio: str
    author_email: str
    author_name: str
    organisation_name: str
    author_profile_pic: StoryAttachment | None = None

    model_config = ConfigDict(frozen=True)


class CustomerStoryResponse(BaseModel):
    """Response envelope: ``{success, message, http, statusCode}``."""

    success: bool
    message: str
    http: HttpStatus
    status_code: int = Field(serialization_alias="statusCode")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def of(cls, status: HttpStatus, message: str) -> "CustomerStoryResponse":
        return cls(
            success=status is HttpStatus.CREATED,
            message=message,
            http=status,
            status_code=_STATUS_CODES[status],
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON-compatible wire shape."""
        return self.model_dump(mode="json", by_alias=True)
