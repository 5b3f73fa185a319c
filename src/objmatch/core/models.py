"""Core domain models for catalog objects.

These models represent database catalog entities (tables, views, functions,
...) in a simple, immutable form. They are intentionally free of Databricks
SDK types and UI/CLI concerns.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class CatalogObject:
    """
    A named, typed, schema-qualified catalog object.

    Objects carry no identity beyond their field values: two objects with the
    same type, schema and name compare (and hash) equal.

    Attributes:
        type: Object type such as "Table" or "View". May be None.
        schema: Schema the object lives in. May be None.
        name: Object name. May be None.
    """

    type: str | None = None
    schema: str | None = None
    name: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> CatalogObject:
        """
        Build an object from a mapping with optional type/schema/name keys.

        Keys are matched case-insensitively, so both `type` and `Type` work.
        Unknown keys are ignored.
        """
        fields = {str(k).lower(): v for k, v in data.items()}
        return cls(
            type=_optional_str(fields.get("type")),
            schema=_optional_str(fields.get("schema")),
            name=_optional_str(fields.get("name")),
        )

    def to_dict(self) -> dict[str, str | None]:
        """Return the object as a plain dict (JSON friendly)."""
        return asdict(self)

    @property
    def qualified_name(self) -> str:
        """Return `schema.name`, leaving out whichever part is missing."""
        return ".".join(p for p in (self.schema, self.name) if p)


# A criterion is a catalog object used as a pattern; absent fields do not
# constrain the match.
Criterion = CatalogObject


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"Expected a string, got {type(value).__name__}: {value!r}")
    return value


def is_blank(value: str | None) -> bool:
    """Return True for None, empty and whitespace-only strings."""
    return value is None or not value.strip()
