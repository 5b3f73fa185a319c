from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Import the local src tree, not an installed copy of objmatch.
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from objmatch.core.models import CatalogObject  # noqa: E402


@pytest.fixture
def catalog_file(tmp_path: Path):
    """Write a small JSON catalog file and return its path."""

    def _write(content: str) -> Path:
        path = tmp_path / "catalog.json"
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_objects() -> list[CatalogObject]:
    return [
        CatalogObject(type="Table", schema="dbo", name="Employee"),
        CatalogObject(type="Table", schema="dbo", name="Customer"),
        CatalogObject(type="Table", schema="HumanResources", name="Department"),
        CatalogObject(type="View", schema="HumanResources", name="vEmployee"),
    ]
