"""Common CLI options for the CLI."""

import typer

ProfileOpt = typer.Option(
    None,
    "--profile",
    "-p",
    envvar="DATABRICKS_CONFIG_PROFILE",
    help="Databricks CLI profile (from ~/.databrickscfg)",
)

IncludeOpt = typer.Option(
    [],
    "--include",
    "-i",
    help="Include criterion (type=...,schema=...,name=...). This is reusable.",
    show_default=False,
)

ExcludeOpt = typer.Option(
    [],
    "--exclude",
    "-x",
    help="Exclude criterion (type=...,schema=...,name=...). This is reusable.",
    show_default=False,
)

IncludeSchemaOpt = typer.Option(
    [],
    "--include-schema",
    help="Only keep objects in this schema (supports trailing *). This is reusable.",
    show_default=False,
)

ExcludeSchemaOpt = typer.Option(
    [],
    "--exclude-schema",
    help="Drop objects in this schema (supports trailing *). This is reusable.",
    show_default=False,
)

IncludeTypeOpt = typer.Option(
    [],
    "--include-type",
    help="Only keep objects of this exact type (e.g. Table). This is reusable.",
    show_default=False,
)

ExcludeTypeOpt = typer.Option(
    [],
    "--exclude-type",
    help="Drop objects of this exact type. This is reusable.",
    show_default=False,
)

JsonOpt = typer.Option(
    False,
    "--json",
    help="Print matched objects as a JSON array",
)

SelectOpt = typer.Option(
    False,
    "--select",
    help="Pick from the matched objects interactively before printing",
)
