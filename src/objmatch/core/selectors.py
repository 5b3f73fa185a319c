"""Catalog object selector abstractions and implementations.

This module defines the selector system used to determine whether a catalog
object matches a given piece of criteria. Selectors encapsulate matching
logic and can be composed using logical operators (AND / OR) to express
include/exclude criteria.

All comparisons are case-insensitive. Schema and name patterns understand a
single trailing wildcard (`dbo*`) and the standalone wildcard (`*`); type
comparisons are always exact.

Selectors are pure, side-effect-free objects and are intended to be
reusable across different frontends such as CLI commands, automation
scripts, and tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable

from objmatch.core.models import is_blank

if TYPE_CHECKING:
    from objmatch.core.models import CatalogObject, Criterion

WILDCARD = "*"


def matches_pattern(pattern: str | None, value: str | None) -> bool:
    """Check whether a schema/name value satisfies a wildcard pattern.

    Patterns:
    - None, '' or whitespace -> no constraint
    - '*' -> matches everything
    - 'Emp*' -> prefix match ('Employee', 'employer', ...)
    - 'Employee' -> exact match
    """
    if is_blank(pattern) or pattern == WILDCARD:
        return True
    if value is None:
        return False

    if pattern.endswith(WILDCARD):
        return value.upper().startswith(pattern[:-1].upper())
    return value.upper() == pattern.upper()


def equals_ignore_case(expected: str | None, value: str | None) -> bool:
    """Exact case-insensitive comparison where None only equals None."""
    if expected is None or value is None:
        return expected is value
    return expected.upper() == value.upper()


class ObjectSelector(ABC):
    """
    Abstract base class for all catalog object selectors.

    An ObjectSelector encapsulates a single piece of matching logic that
    determines whether a given CatalogObject satisfies a specific criterion.
    """

    @abstractmethod
    def matches(self, obj: CatalogObject) -> bool:
        """
        Determine whether the given object matches this selector.

        Args:
            obj: CatalogObject instance to evaluate.

        Returns:
            True if the object matches the selector criteria, False otherwise.
        """
        ...

    def select(self, objects: list[CatalogObject]) -> list[CatalogObject]:
        """Return the objects matching this selector, keeping their order."""
        return [o for o in objects if self.matches(o)]


class TypeSelector(ObjectSelector):
    """
    Selector that matches objects whose type equals a given value.

    Wildcards are not interpreted: `Tab*` only matches a type literally
    named `Tab*`.
    """

    def __init__(self, object_type: str | None):
        self.object_type = object_type

    def matches(self, obj: CatalogObject) -> bool:
        return equals_ignore_case(self.object_type, obj.type)


class PatternSelector(ObjectSelector):
    """
    Selector that applies a wildcard pattern to one field of the object.
    """

    def __init__(self, pattern: str | None, field: Callable[[CatalogObject], str | None]):
        """
        Create a pattern selector.

        Args:
            pattern: Exact value, `prefix*` or `*`. Blank means match all.
            field: Accessor returning the value to test from an object.
        """
        self.pattern = pattern
        self.field = field

    def matches(self, obj: CatalogObject) -> bool:
        return matches_pattern(self.pattern, self.field(obj))


class SchemaSelector(PatternSelector):
    """Selector matching the object schema against a wildcard pattern."""

    def __init__(self, pattern: str | None):
        super().__init__(pattern, lambda o: o.schema)


class NameSelector(PatternSelector):
    """Selector matching the object name against a wildcard pattern."""

    def __init__(self, pattern: str | None):
        super().__init__(pattern, lambda o: o.name)


class AndSelector(ObjectSelector):
    """
    Composite selector that matches an object only if all child selectors match.
    """

    def __init__(self, selectors: list[ObjectSelector]):
        self.selectors = selectors

    def matches(self, obj: CatalogObject) -> bool:
        return all(s.matches(obj) for s in self.selectors)


class OrSelector(ObjectSelector):
    """
    Composite selector that matches an object if any child selector matches.
    """

    def __init__(self, selectors: list[ObjectSelector]):
        self.selectors = selectors

    def matches(self, obj: CatalogObject) -> bool:
        return any(s.matches(obj) for s in self.selectors)


def criterion_selector(criterion: Criterion) -> ObjectSelector:
    """
    Translate a criterion into a selector.

    Every present field of the criterion becomes a constraint and the
    constraints are combined with AND. A criterion without any present
    field matches everything.
    """
    selectors: list[ObjectSelector] = []
    if not is_blank(criterion.type):
        selectors.append(TypeSelector(criterion.type))
    if not is_blank(criterion.schema):
        selectors.append(SchemaSelector(criterion.schema))
    if not is_blank(criterion.name):
        selectors.append(NameSelector(criterion.name))

    if len(selectors) == 1:
        return selectors[0]
    return AndSelector(selectors)
