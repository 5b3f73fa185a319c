"""Criterion construction utilities.

This module translates user intent (such as CLI arguments or API inputs)
into Criterion instances for the matcher. A criterion is written as a
comma-separated list of `key=value` pairs, for example:

    type=Table,schema=dbo,name=Emp*

Valid keys are `type`, `schema` and `name` (case-insensitive). Each key may
appear at most once and at least one key is required.
"""

from typing import Iterable

from objmatch.core.models import Criterion

_KEYS = ("type", "schema", "name")


def build_criterion(spec: str) -> Criterion:
    """
    Parse a single criterion spec.

    Args:
        spec: String in the form `key=value[,key=value...]`.

    Returns:
        The Criterion described by the spec; keys left out are None.

    Raises:
        ValueError: If a part is not `key=value`, a key is unknown or
                    repeated, or the spec is empty.
    """
    fields: dict[str, str] = {}

    for part in spec.split(","):
        part = part.strip()
        if not part:
            continue
        if "=" not in part:
            raise ValueError(f"Invalid criterion part: '{part}' (expected key=value)")

        key, value = part.split("=", 1)
        key = key.strip().lower()
        if key not in _KEYS:
            raise ValueError(
                f"Unknown criterion key: '{key}' (expected one of {', '.join(_KEYS)})"
            )
        if key in fields:
            raise ValueError(f"Duplicate criterion key: '{key}'")
        fields[key] = value.strip()

    if not fields:
        raise ValueError(f"Empty criterion: '{spec}' (expected e.g. type=Table,name=Emp*)")

    return Criterion(**fields)


def build_criteria(specs: Iterable[str]) -> list[Criterion]:
    """Parse every spec in `specs` into a Criterion."""
    return [build_criterion(spec) for spec in specs]
