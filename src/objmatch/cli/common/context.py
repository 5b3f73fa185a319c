"""Application context management for the CLI."""

from dataclasses import dataclass

from objmatch.cli.common.exits import die
from objmatch.core.adapters.unitycatalog import UnityCatalogAdapter
from objmatch.core.auth import AuthError, get_client


@dataclass
class UCAppContext:
    """Application context holding the Unity Catalog adapter."""

    adapter: UnityCatalogAdapter


def build_uc_context(profile: str | None) -> UCAppContext:
    """Build and return the application context for Unity Catalog commands."""
    try:
        client = get_client(profile)
    except AuthError as exc:
        die(str(exc), code=1)
    return UCAppContext(adapter=UnityCatalogAdapter(client))
