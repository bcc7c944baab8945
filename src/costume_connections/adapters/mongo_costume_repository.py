"""MongoDB implementation for costume listings."""

from dataclasses import dataclass
from functools import lru_cache

from bson import ObjectId
from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection

from costume_connections.domain.costumes import FIELD_NAMES, Costume, CostumeDraft
from costume_connections.services.costumes import CostumeRepository


@lru_cache(maxsize=None)
def get_mongo_client(uri: str) -> MongoClient:
    """Return the process-wide client for a connection string.

    pymongo connects lazily and pools connections internally, so one client
    is shared by every request and never closed.
    """
    return MongoClient(uri)


@dataclass
class MongoCostumeRepository(CostumeRepository):
    """MongoDB-backed repository for costume listings."""

    collection: Collection

    @classmethod
    def create(
        cls, uri: str, database_name: str, collection_name: str
    ) -> "MongoCostumeRepository":
        """Create a repository on the shared client for ``uri``."""
        client = get_mongo_client(uri)
        return cls(collection=client[database_name][collection_name])

    def list_by_status(self, status: str) -> list[Costume]:
        """Return costumes with the given status in insertion order."""
        cursor = self.collection.find({"status": status}).sort("_id", ASCENDING)
        return [_parse_costume(doc) for doc in cursor]

    def list_all(self) -> list[Costume]:
        """Return every costume in insertion order."""
        cursor = self.collection.find({}).sort("_id", ASCENDING)
        return [_parse_costume(doc) for doc in cursor]

    def get(self, costume_id: str) -> Costume | None:
        """Return a costume by id, if present."""
        object_id = _parse_object_id(costume_id)
        if object_id is None:
            return None
        doc = self.collection.find_one({"_id": object_id})
        if doc is None:
            return None
        return _parse_costume(doc)

    def insert(self, draft: CostumeDraft) -> str:
        """Insert a costume document and return the generated id."""
        result = self.collection.insert_one(_to_document(draft))
        return str(result.inserted_id)

    def replace(self, costume_id: str, draft: CostumeDraft) -> int:
        """Set every listing field on the matching document."""
        object_id = _parse_object_id(costume_id)
        if object_id is None:
            return 0
        result = self.collection.update_one(
            {"_id": object_id}, {"$set": _to_document(draft)}
        )
        return result.matched_count

    def delete(self, costume_id: str) -> int:
        """Delete the matching document."""
        object_id = _parse_object_id(costume_id)
        if object_id is None:
            return 0
        result = self.collection.delete_one({"_id": object_id})
        return result.deleted_count


def _parse_object_id(value: str | None) -> ObjectId | None:
    """Convert an untrusted id string, returning None when malformed."""
    if not value or not ObjectId.is_valid(value):
        return None
    return ObjectId(value)


def _to_document(draft: CostumeDraft) -> dict[str, str]:
    return {key: getattr(draft, name) for name, key in FIELD_NAMES.items()}


def _parse_costume(doc: dict[str, object]) -> Costume:
    """Parse a costume document into a domain model."""
    values = {name: _as_text(doc.get(key)) for name, key in FIELD_NAMES.items()}
    return Costume(id=str(doc["_id"]), **values)


def _as_text(value: object) -> str:
    if value is None:
        return ""
    return str(value)
