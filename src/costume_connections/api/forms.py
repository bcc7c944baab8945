"""Helpers for reading costume form submissions."""

import logging

from fastapi import Request

from costume_connections.domain.costumes import FIELD_NAMES, CostumeDraft

logger = logging.getLogger(__name__)


async def read_form_data(request: Request) -> dict[str, str]:
    """Return submitted fields from a URL-encoded, multipart or JSON body."""
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except ValueError:
            logger.warning(
                "Ignoring malformed JSON body", extra={"path": request.url.path}
            )
            return {}
        if not isinstance(payload, dict):
            return {}
    else:
        payload = await request.form()
    return {
        key: str(value)
        for key, value in payload.items()
        if isinstance(value, str | int | float)
    }


def draft_from_form(data: dict[str, str]) -> CostumeDraft:
    """Build a costume draft from form fields; missing fields become empty."""
    return CostumeDraft(
        **{name: data.get(key, "") for name, key in FIELD_NAMES.items()}
    )
