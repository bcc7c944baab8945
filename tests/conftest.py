"""Shared test fixtures."""

from dataclasses import asdict, dataclass, field, replace
from uuid import uuid4

import pytest
from bson import ObjectId

from costume_connections.config import Settings
from costume_connections.containers import AppContainer
from costume_connections.domain.costumes import Costume, CostumeDraft
from costume_connections.services.costumes import CostumeRepository, CostumeService


@dataclass
class InMemoryCostumeRepository(CostumeRepository):
    """In-memory costume repository for tests."""

    costumes: dict[str, Costume] = field(default_factory=dict)

    def list_by_status(self, status: str) -> list[Costume]:
        return [c for c in self.costumes.values() if c.status == status]

    def list_all(self) -> list[Costume]:
        return list(self.costumes.values())

    def get(self, costume_id: str) -> Costume | None:
        return self.costumes.get(costume_id)

    def insert(self, draft: CostumeDraft) -> str:
        costume_id = uuid4().hex
        self.costumes[costume_id] = Costume(id=costume_id, **asdict(draft))
        return costume_id

    def replace(self, costume_id: str, draft: CostumeDraft) -> int:
        if costume_id not in self.costumes:
            return 0
        self.costumes[costume_id] = Costume(id=costume_id, **asdict(draft))
        return 1

    def delete(self, costume_id: str) -> int:
        return 1 if self.costumes.pop(costume_id, None) else 0


@dataclass
class FakeInsertResult:
    inserted_id: ObjectId


@dataclass
class FakeUpdateResult:
    matched_count: int
    modified_count: int


@dataclass
class FakeDeleteResult:
    deleted_count: int


@dataclass
class FakeCursor:
    docs: list[dict[str, object]]
    sorted_by: tuple[str, int] | None = None

    def sort(self, key: str, direction: int) -> "FakeCursor":
        self.sorted_by = (key, direction)
        self.docs = sorted(
            self.docs, key=lambda doc: doc[key], reverse=direction < 0
        )
        return self

    def __iter__(self):  # type: ignore[no-untyped-def]
        return iter(self.docs)


@dataclass
class FakeCollection:
    """Subset of pymongo's Collection API backed by a list."""

    docs: list[dict[str, object]] = field(default_factory=list)
    filters: list[dict[str, object]] = field(default_factory=list)
    cursors: list[FakeCursor] = field(default_factory=list)

    def _matches(self, doc: dict[str, object], query: dict[str, object]) -> bool:
        return all(doc.get(key) == value for key, value in query.items())

    def find(self, query: dict[str, object]) -> FakeCursor:
        self.filters.append(query)
        cursor = FakeCursor([dict(d) for d in self.docs if self._matches(d, query)])
        self.cursors.append(cursor)
        return cursor

    def find_one(self, query: dict[str, object]) -> dict[str, object] | None:
        self.filters.append(query)
        for doc in self.docs:
            if self._matches(doc, query):
                return dict(doc)
        return None

    def insert_one(self, document: dict[str, object]) -> FakeInsertResult:
        stored = {"_id": ObjectId(), **document}
        self.docs.append(stored)
        return FakeInsertResult(inserted_id=stored["_id"])

    def update_one(
        self, query: dict[str, object], update: dict[str, dict[str, object]]
    ) -> FakeUpdateResult:
        self.filters.append(query)
        for doc in self.docs:
            if self._matches(doc, query):
                changes = update["$set"]
                modified = any(doc.get(k) != v for k, v in changes.items())
                doc.update(changes)
                return FakeUpdateResult(matched_count=1, modified_count=int(modified))
        return FakeUpdateResult(matched_count=0, modified_count=0)

    def delete_one(self, query: dict[str, object]) -> FakeDeleteResult:
        self.filters.append(query)
        for index, doc in enumerate(self.docs):
            if self._matches(doc, query):
                del self.docs[index]
                return FakeDeleteResult(deleted_count=1)
        return FakeDeleteResult(deleted_count=0)


def make_draft(**overrides: str) -> CostumeDraft:
    """Return a fully populated draft for tests."""
    draft = CostumeDraft(
        status="pending",
        first_name="Ada",
        last_name="Lovelace",
        email="ada@example.com",
        city="London",
        image_url="https://example.com/hat.jpg",
        title="Witch Hat",
        price="12",
        size="M",
        style="Halloween",
        description="Pointy and purple.",
    )
    return replace(draft, **overrides)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        db_user="costume-user",
        db_pwd="costume-pwd",
        db_host="cluster0.example.mongodb.net",
    )


@pytest.fixture
def costume_repository() -> InMemoryCostumeRepository:
    return InMemoryCostumeRepository()


@pytest.fixture
def container(
    settings: Settings, costume_repository: InMemoryCostumeRepository
) -> AppContainer:
    return AppContainer(
        settings=settings,
        costume_service=CostumeService(costume_repository),
    )
