"""Commands for matching catalog objects against include/exclude criteria."""

from __future__ import annotations

from pathlib import Path

import typer
from databricks.sdk.errors import NotFound, PermissionDenied

from objmatch.cli.common.context import UCAppContext, build_uc_context
from objmatch.cli.common.criteria_builder import build_criteria
from objmatch.cli.common.exits import USAGE_ERROR, die, exit_from_exc, warn_exit
from objmatch.cli.common.options import (
    ExcludeOpt,
    ExcludeSchemaOpt,
    ExcludeTypeOpt,
    IncludeOpt,
    IncludeSchemaOpt,
    IncludeTypeOpt,
    JsonOpt,
    ProfileOpt,
    SelectOpt,
)
from objmatch.cli.common.output import out
from objmatch.cli.tui import select_objects as tui_select_objects
from objmatch.core.catalog import CatalogFileError, collect_objects, load_objects, objects_to_json
from objmatch.core.matcher import InvalidArgument, match
from objmatch.core.models import CatalogObject

app = typer.Typer(
    help="Match catalog objects against include/exclude criteria.",
    no_args_is_help=True,
)


def _run_match(
    candidates: list[CatalogObject],
    *,
    include: list[str],
    exclude: list[str],
    include_schema: list[str],
    exclude_schema: list[str],
    include_type: list[str],
    exclude_type: list[str],
    as_json: bool,
    select: bool,
) -> None:
    """Build criteria from CLI input, run the matcher and report the result."""
    try:
        include_criteria = build_criteria(include)
        exclude_criteria = build_criteria(exclude)
    except ValueError as exc:
        die(str(exc), code=USAGE_ERROR)

    try:
        matched = match(
            candidates,
            include_criteria=include_criteria,
            exclude_criteria=exclude_criteria,
            include_schemas=include_schema,
            exclude_schemas=exclude_schema,
            include_types=include_type,
            exclude_types=exclude_type,
        )
    except InvalidArgument as exc:
        exit_from_exc(exc, message=str(exc), code=USAGE_ERROR)

    if select and matched:
        matched = tui_select_objects(matched)

    if as_json:
        typer.echo(objects_to_json(matched))
        return

    if not matched:
        warn_exit(f"No objects matched ({len(candidates)} candidate(s)).", code=0)

    out.objects_table(matched, title="Matched objects")
    out.success(f"Matched {len(matched)} of {len(candidates)} object(s).")


@app.command("file")
def match_file(
    path: Path = typer.Argument(..., help="JSON catalog file with type/schema/name objects"),
    include: list[str] = IncludeOpt,
    exclude: list[str] = ExcludeOpt,
    include_schema: list[str] = IncludeSchemaOpt,
    exclude_schema: list[str] = ExcludeSchemaOpt,
    include_type: list[str] = IncludeTypeOpt,
    exclude_type: list[str] = ExcludeTypeOpt,
    as_json: bool = JsonOpt,
    select: bool = SelectOpt,
):
    """Match objects listed in a JSON catalog file."""
    try:
        candidates = load_objects(path)
    except CatalogFileError as exc:
        exit_from_exc(exc, message=str(exc), code=USAGE_ERROR)

    _run_match(
        candidates,
        include=include,
        exclude=exclude,
        include_schema=include_schema,
        exclude_schema=exclude_schema,
        include_type=include_type,
        exclude_type=exclude_type,
        as_json=as_json,
        select=select,
    )


@app.command("uc")
def match_uc(
    catalog: str = typer.Option(..., "--catalog", help="Catalog name"),
    schema: str | None = typer.Option(
        None, "--schema", help="Only list this schema (default: every schema)"
    ),
    profile: str | None = ProfileOpt,
    include: list[str] = IncludeOpt,
    exclude: list[str] = ExcludeOpt,
    include_schema: list[str] = IncludeSchemaOpt,
    exclude_schema: list[str] = ExcludeSchemaOpt,
    include_type: list[str] = IncludeTypeOpt,
    exclude_type: list[str] = ExcludeTypeOpt,
    as_json: bool = JsonOpt,
    select: bool = SelectOpt,
):
    """Match tables, views and functions of a Unity Catalog catalog."""
    appctx: UCAppContext = build_uc_context(profile)
    where = f"{catalog}.{schema}" if schema else catalog

    try:
        with out.status("Loading catalog objects..."):
            candidates = collect_objects(appctx.adapter, catalog, schema=schema)
    except NotFound as exc:
        exit_from_exc(exc, message=f"'{where}' does not exist.", code=1)
    except PermissionDenied as exc:
        exit_from_exc(exc, message=f"No permission to access '{where}'.", code=1)

    if not as_json:
        out.info(f"Source: {where} | Candidates: {len(candidates)}")

    _run_match(
        candidates,
        include=include,
        exclude=exclude,
        include_schema=include_schema,
        exclude_schema=exclude_schema,
        include_type=include_type,
        exclude_type=exclude_type,
        as_json=as_json,
        select=select,
    )
