from __future__ import annotations

from dataclasses import dataclass

from databricks.sdk import WorkspaceClient

from objmatch.core.models import CatalogObject

_VIEW_TABLE_TYPES = {"VIEW", "MATERIALIZED_VIEW"}


@dataclass(frozen=True)
class UCSchema:
    """Lightweight representation of a Unity Catalog schema."""

    name: str


def _table_type_name(table_type) -> str:
    """Normalize an SDK table type (enum or string) to its upper-case name."""
    value = getattr(table_type, "value", table_type)
    return str(value or "").rsplit(".", 1)[-1].upper()


def object_type_for_table(table_type) -> str:
    """Map a Unity Catalog table type onto a catalog object type."""
    return "View" if _table_type_name(table_type) in _VIEW_TABLE_TYPES else "Table"


class UnityCatalogAdapter:
    """Adapter around Databricks SDK Unity Catalog APIs (schemas/tables/functions)."""

    def __init__(self, client: WorkspaceClient) -> None:
        self.client = client

    def list_schemas(self, catalog: str) -> list[UCSchema]:
        """List schemas in a given catalog."""
        out: list[UCSchema] = []
        for s in self.client.schemas.list(catalog_name=catalog):
            name = getattr(s, "name", None)
            full_name = getattr(s, "full_name", None)

            if not name and full_name:
                name = full_name.split(".")[-1]
            if not name:
                continue

            out.append(UCSchema(name=name))
        return out

    def list_objects(self, catalog: str, schema: str) -> list[CatalogObject]:
        """List tables, views and functions in catalog.schema as catalog objects."""
        out: list[CatalogObject] = []
        for t in self.client.tables.list(catalog_name=catalog, schema_name=schema):
            name = getattr(t, "name", None)
            if not name:
                continue
            out.append(
                CatalogObject(
                    type=object_type_for_table(getattr(t, "table_type", None)),
                    schema=getattr(t, "schema_name", None) or schema,
                    name=name,
                )
            )

        for f in self.client.functions.list(catalog_name=catalog, schema_name=schema):
            name = getattr(f, "name", None)
            if not name:
                continue
            out.append(
                CatalogObject(
                    type="Function",
                    schema=getattr(f, "schema_name", None) or schema,
                    name=name,
                )
            )
        return out
