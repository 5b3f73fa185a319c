"""Terminal UI utilities for picking matched catalog objects."""

from __future__ import annotations

import questionary

from objmatch.cli.common.tui_style import QUESTIONARY_STYLE_SELECT
from objmatch.core.models import CatalogObject

_MAX_NAME_WIDTH = 96


def _truncate(text: str, max_len: int) -> str:
    """Return text capped at max_len characters using an ASCII ellipsis."""
    if max_len <= 3 or len(text) <= max_len:
        return text[:max_len]
    return f"{text[: max_len - 3]}..."


def _object_choice_title(obj: CatalogObject, *, name_width: int) -> str:
    """Format one object as `<schema.name>  (<type>)` with an aligned type column."""
    short_name = _truncate(obj.qualified_name, _MAX_NAME_WIDTH)
    return f"{short_name.ljust(name_width)}  ({obj.type or '?'})"


def select_objects(objects: list[CatalogObject]) -> list[CatalogObject]:
    """Display a checkbox prompt to select objects from a list.

    Args:
        objects: Catalog objects to choose from.

    Returns:
        The selected objects, or an empty list if none selected.
    """
    shown_names = [_truncate(o.qualified_name, _MAX_NAME_WIDTH) for o in objects]
    name_width = max((len(name) for name in shown_names), default=0)

    choices = [
        questionary.Choice(
            title=_object_choice_title(obj, name_width=name_width),
            value=obj,
        )
        for obj in objects
    ]

    return (
        questionary.checkbox(
            "Select objects:",
            choices=choices,
            style=QUESTIONARY_STYLE_SELECT,
        ).ask()
        or []
    )
