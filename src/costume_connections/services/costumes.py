"""Costume catalog and moderation services."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol

from costume_connections.domain.costumes import (
    APPROVED_STATUS,
    PENDING_STATUS,
    Costume,
    CostumeDraft,
)

logger = logging.getLogger(__name__)


class CostumeRepository(Protocol):
    """Persistence interface for costume listings.

    Identifiers are opaque strings. Implementations resolve identifiers they
    cannot parse to "not found" instead of raising.
    """

    def list_by_status(self, status: str) -> list[Costume]:
        """Return costumes with the given status in insertion order."""

    def list_all(self) -> list[Costume]:
        """Return every costume in insertion order."""

    def get(self, costume_id: str) -> Costume | None:
        """Return a costume by id, if present."""

    def insert(self, draft: CostumeDraft) -> str:
        """Store a new costume and return its assigned id."""

    def replace(self, costume_id: str, draft: CostumeDraft) -> int:
        """Overwrite every field of a costume and return the matched count."""

    def delete(self, costume_id: str) -> int:
        """Remove a costume and return the deleted count."""


@dataclass
class CostumeService:
    """Application service for the public catalog and the admin pages."""

    repository: CostumeRepository

    def list_approved(self) -> list[Costume]:
        """Return costumes visible in the public catalog."""
        return self.repository.list_by_status(APPROVED_STATUS)

    def list_all(self) -> list[Costume]:
        """Return every submission regardless of status."""
        return self.repository.list_all()

    def get_by_id(self, costume_id: str) -> Costume | None:
        """Return a single costume, or None when the id matches nothing."""
        return self.repository.get(costume_id)

    def create(self, draft: CostumeDraft) -> str:
        """Store a costume exactly as given and return its id."""
        costume_id = self.repository.insert(draft)
        logger.info("costume created", extra={"costume_id": costume_id})
        return costume_id

    def submit(self, draft: CostumeDraft) -> str:
        """Store a public submission; new submissions always await review."""
        return self.create(replace(draft, status=PENDING_STATUS))

    def update(self, costume_id: str, draft: CostumeDraft) -> int:
        """Replace all fields of a costume. Returns 0 when nothing matched."""
        updated = self.repository.replace(costume_id, draft)
        logger.info(
            "costume updated",
            extra={"costume_id": costume_id, "updated": updated},
        )
        return updated

    def delete(self, costume_id: str) -> int:
        """Delete a costume. Returns 0 when nothing matched."""
        deleted = self.repository.delete(costume_id)
        logger.info(
            "costume deleted",
            extra={"costume_id": costume_id, "deleted": deleted},
        )
        return deleted
