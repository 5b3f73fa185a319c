"""Include/exclude matching of catalog objects.

Objects are first included by the include criteria, then removed by the
exclude criteria. After that the standalone schema/type filters are applied:
excluded schemas and types are removed first, then the result is narrowed to
the included schemas and types.

Examples:

    include {type=None, schema="dbo", name=None}
        -> all objects in the dbo schema

    include {type="Table", schema=None, name="Emp*"}
    include {type="View", schema=None, name="Emp*"}
        -> all tables and views whose name starts with "Emp"

    include {type="Table"}, exclude {schema="HumanResources"}
        -> all tables except those in the HumanResources schema
"""

from __future__ import annotations

from typing import Iterable

from objmatch.core.models import CatalogObject, Criterion
from objmatch.core.selectors import (
    ObjectSelector,
    OrSelector,
    SchemaSelector,
    TypeSelector,
    criterion_selector,
)


class InvalidArgument(ValueError):
    """Raised when a required argument is None."""

    def __init__(self, param_name: str):
        super().__init__(f"Argument '{param_name}' must not be None.")
        self.param_name = param_name


def _require(param_name: str, value: object) -> None:
    if value is None:
        raise InvalidArgument(param_name)


def _distinct(objects: Iterable[CatalogObject]) -> list[CatalogObject]:
    """Deduplicate by value, keeping first-seen order."""
    return list(dict.fromkeys(objects))


def _union(selectors: list[ObjectSelector], objects: list[CatalogObject]) -> list[CatalogObject]:
    return _distinct(OrSelector(selectors).select(objects))


def _remove(selector: ObjectSelector, objects: list[CatalogObject]) -> list[CatalogObject]:
    removed = set(selector.select(objects))
    return _distinct(o for o in objects if o not in removed)


def _criteria_selectors(param_name: str, criteria: list[Criterion]) -> list[ObjectSelector]:
    for criterion in criteria:
        _require(param_name, criterion)
    return [criterion_selector(c) for c in criteria]


def match(
    candidates: Iterable[CatalogObject] | None,
    include_criteria: Iterable[Criterion] | None = None,
    exclude_criteria: Iterable[Criterion] | None = None,
    include_schemas: Iterable[str] | None = None,
    exclude_schemas: Iterable[str] | None = None,
    include_types: Iterable[str] | None = None,
    exclude_types: Iterable[str] | None = None,
) -> list[CatalogObject]:
    """
    Filter candidate objects by include/exclude criteria and schema/type filters.

    Criteria in the include list are combined with OR; each criterion ANDs its
    present type/schema/name fields. Exclude criteria are removed one after
    the other from the shrinking working set. None and an empty collection
    both mean "no constraint" for every filter.

    Args:
        candidates: Objects to filter. Required.
        include_criteria: Criteria selecting the starting set. Empty keeps all.
        exclude_criteria: Criteria removing objects from the working set.
        include_schemas: Schema patterns the result is narrowed to.
        exclude_schemas: Schema patterns removed from the result.
        include_types: Types the result is narrowed to.
        exclude_types: Types removed from the result.

    Returns:
        The matching objects, in candidate order.

    Raises:
        InvalidArgument: If `candidates` or any criterion is None.
    """
    _require("candidates", candidates)
    candidates = list(candidates)
    includes = _criteria_selectors("include_criteria", list(include_criteria or []))
    excludes = _criteria_selectors("exclude_criteria", list(exclude_criteria or []))

    matched = _union(includes, candidates) if includes else candidates

    for selector in excludes:
        matched = _remove(selector, matched)

    matched = _exclude_schema_and_type(
        list(exclude_schemas or []), list(exclude_types or []), matched
    )
    return _include_schema_and_type(
        list(include_schemas or []), list(include_types or []), matched
    )


def _exclude_schema_and_type(
    schemas: list[str], types: list[str], objects: list[CatalogObject]
) -> list[CatalogObject]:
    remaining = objects
    for schema in schemas:
        remaining = _remove(SchemaSelector(schema), remaining)
    for object_type in types:
        remaining = _remove(TypeSelector(object_type), remaining)
    return remaining


def _include_schema_and_type(
    schemas: list[str], types: list[str], objects: list[CatalogObject]
) -> list[CatalogObject]:
    matched = objects
    if schemas:
        matched = _union([SchemaSelector(s) for s in schemas], matched)
    if types:
        matched = _union([TypeSelector(t) for t in types], matched)
    return matched


def match_single(
    include_criterion: Criterion | None = None,
    exclude_criterion: Criterion | None = None,
    include_schema: str | None = None,
    exclude_schema: str | None = None,
    include_type: str | None = None,
    exclude_type: str | None = None,
    candidates: Iterable[CatalogObject] | None = None,
) -> list[CatalogObject]:
    """
    Convenience form of `match` taking at most one filter of each kind.

    Each non-None value is wrapped in a one-element list; None becomes an
    empty list (no constraint).
    """

    def _one(value):
        return [] if value is None else [value]

    return match(
        candidates,
        include_criteria=_one(include_criterion),
        exclude_criteria=_one(exclude_criterion),
        include_schemas=_one(include_schema),
        exclude_schemas=_one(exclude_schema),
        include_types=_one(include_type),
        exclude_types=_one(exclude_type),
    )
