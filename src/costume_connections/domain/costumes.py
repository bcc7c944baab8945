"""Domain models for costume listings."""

from dataclasses import asdict, dataclass

APPROVED_STATUS = "approved"
PENDING_STATUS = "pending"

# Attribute name -> field name used in stored documents and HTML forms.
FIELD_NAMES = {
    "status": "status",
    "first_name": "firstName",
    "last_name": "lastName",
    "email": "email",
    "city": "city",
    "image_url": "imageUrl",
    "title": "title",
    "price": "price",
    "size": "size",
    "style": "style",
    "description": "description",
}


@dataclass(frozen=True)
class CostumeDraft:
    """Field set of a costume listing, without its identifier."""

    status: str = ""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    city: str = ""
    image_url: str = ""
    title: str = ""
    price: str = ""
    size: str = ""
    style: str = ""
    description: str = ""


@dataclass(frozen=True, kw_only=True)
class Costume(CostumeDraft):
    """A stored costume listing."""

    id: str

    @property
    def is_approved(self) -> bool:
        return self.status == APPROVED_STATUS

    def draft(self) -> CostumeDraft:
        """Return the listing fields without the identifier."""
        fields = asdict(self)
        fields.pop("id")
        return CostumeDraft(**fields)
