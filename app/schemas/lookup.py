import uuid
from enum import Enum

from pydantic import BaseModel


class LookupKind(str, Enum):
    IDENTIFIER = "identifier"
    NAME_OR_SLUG = "name_or_slug"


class ProductLookup(BaseModel):
    """
    Ключ поиска продукта: либо UUID, либо название/slug.

    Тип определяется один раз на входе (from_term), дальше сервис
    работает только с kind.
    """
    kind: LookupKind
    value: str

    @classmethod
    def from_term(cls, term: str) -> "ProductLookup":
        if is_uuid(term):
            return cls(kind=LookupKind.IDENTIFIER, value=term.lower())
        return cls(kind=LookupKind.NAME_OR_SLUG, value=term)


def is_uuid(term: str) -> bool:
    # Только каноничная запись вида xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx
    try:
        return str(uuid.UUID(term)) == term.lower()
    except (ValueError, AttributeError, TypeError):
        return False
