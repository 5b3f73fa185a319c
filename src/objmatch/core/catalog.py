"""Candidate sources for the matcher.

Catalog objects can come from a JSON catalog file or be collected from a
live Unity Catalog through an adapter. This module also renders match
results back to JSON.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, Protocol

from objmatch.core.models import CatalogObject


class CatalogFileError(ValueError):
    """Raised when a catalog file cannot be read or has an invalid layout."""


class CatalogAdapter(Protocol):
    """Interface for catalog lookups used by `collect_objects`."""

    def list_schemas(self, catalog: str) -> list:
        """Return schemas (objects with a `.name`) in the catalog."""
        ...

    def list_objects(self, catalog: str, schema: str) -> list[CatalogObject]:
        """Return all objects in catalog.schema."""
        ...


def load_objects(path: str | Path) -> list[CatalogObject]:
    """
    Load catalog objects from a JSON file.

    The file holds either a list of objects or a mapping with an `objects`
    list. Every entry is a mapping with optional `type`, `schema` and `name`
    keys.

    Raises:
        CatalogFileError: If the file is missing, not valid JSON, or an entry
                          is not a mapping of strings.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise CatalogFileError(f"Cannot read catalog file '{path}': {exc}") from exc
    except json.JSONDecodeError as exc:
        raise CatalogFileError(f"Invalid JSON in catalog file '{path}': {exc}") from exc

    if isinstance(data, dict):
        data = data.get("objects")
    if not isinstance(data, list):
        raise CatalogFileError(
            f"Catalog file '{path}' must contain a list of objects "
            "or a mapping with an 'objects' list."
        )

    objects: list[CatalogObject] = []
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise CatalogFileError(f"Entry #{index} in '{path}' is not an object.")
        try:
            objects.append(CatalogObject.from_mapping(entry))
        except ValueError as exc:
            raise CatalogFileError(f"Entry #{index} in '{path}': {exc}") from exc
    return objects


def objects_to_json(objects: Iterable[CatalogObject], *, indent: int | None = 2) -> str:
    """Render objects as a JSON array of type/schema/name mappings."""
    return json.dumps([o.to_dict() for o in objects], indent=indent)


def collect_objects(
    adapter: CatalogAdapter,
    catalog: str,
    *,
    schema: str | None = None,
) -> list[CatalogObject]:
    """
    Collect candidate objects from a Unity Catalog catalog.

    If a schema is given only that schema is listed, otherwise every schema
    in the catalog is visited.
    """
    if schema:
        schema_names = [schema]
    else:
        schema_names = [
            s.name for s in adapter.list_schemas(catalog=catalog) if getattr(s, "name", None)
        ]

    objects: list[CatalogObject] = []
    for schema_name in schema_names:
        objects.extend(adapter.list_objects(catalog=catalog, schema=schema_name))
    return objects
