"""Stories Bounded Context - Submission Handler.

Validates a customer-story form and echoes an outcome. No persistence is
performed; accepted submissions are only logged.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from domain.stories.value_objects import (
    REQUIRED_FIELDS,
    CustomerStory,
    CustomerStoryResponse,
    HttpStatus,
    StoryAttachment,
    StoryCategory,
)

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

MSG_MISSING_FIELDS = "All required fields must be provided"
MSG_INVALID_EMAIL = "Invalid email format"
MSG_INVALID_CATEGORY = "Invalid category"
MSG_INTERNAL_ERROR = "Internal server error. Please try again later."
MSG_CREATED = (
    "Customer story submitted successfully! We'll review it and get back to you soon."
)


def _field(form: Mapping[str, Any], name: str) -> str:
    value = form.get(name)
    if value is None:
        return ""
    return str(value).strip()


def parse_customer_story(
    form: Mapping[str, Any], attachment: StoryAttachment | None = None
) -> CustomerStory | CustomerStoryResponse:
    """Validate form fields; return the story or a 400 response."""
    if any(not _field(form, name) for name in REQUIRED_FIELDS):
        return CustomerStoryResponse.of(HttpStatus.BAD_REQUEST, MSG_MISSING_FIELDS)

    email = _field(form, "authorEmail")
    if not EMAIL_RE.match(email):
        return CustomerStoryResponse.of(HttpStatus.BAD_REQUEST, MSG_INVALID_EMAIL)

    try:
        category = StoryCategory(_field(form, "category").upper())
    except ValueError:
        return CustomerStoryResponse.of(HttpStatus.BAD_REQUEST, MSG_INVALID_CATEGORY)

    return CustomerStory(
        title=_field(form, "title"),
        description=_field(form, "description"),
        category=category,
        location=_field(form, "location"),
        author_bio=_field(form, "authorBio"),
        author_email=email,
        author_name=_field(form, "authorName"),
        organisation_name=_field(form, "organisationName"),
        author_profile_pic=attachment,
    )


def handle_create_customer_story(
    form: Mapping[str, Any], attachment: StoryAttachment | None = None
) -> CustomerStoryResponse:
    """Handle a ``POST /api/customer-stories/create`` submission.

    Returns:
        201 on success, 400 on validation failure, 500 on unexpected errors.
    """
    try:
        parsed = parse_customer_story(form, attachment)
        if isinstance(parsed, CustomerStoryResponse):
            logger.info("Rejected customer story: %s", parsed.message)
            return parsed

        logger.info(
            "Customer story submission: %s",
            {
                **parsed.model_dump(mode="json", exclude={"author_profile_pic"}),
                "author_profile_pic": (
                    parsed.author_profile_pic.model_dump()
                    if parsed.author_profile_pic
                    else None
                ),
                "submitted_at": datetime.now(timezone.utc).isoformat(),
            },
        )
        return CustomerStoryResponse.of(HttpStatus.CREATED, MSG_CREATED)
    except Exception:
        logger.exception("Error creating customer story")
        return CustomerStoryResponse.of(
            HttpStatus.INTERNAL_SERVER_ERROR, MSG_INTERNAL_ERROR
        )
