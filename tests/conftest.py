from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.docs_builder import DocsBuilder

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def docs_builder(tmp_path: Path) -> DocsBuilder:
    """Provide a reusable docs tree rooted at the pytest tmp_path."""
    return DocsBuilder(tmp_path)


@pytest.fixture
def example_markdown() -> str:
    """Return the sample document exercising every detector."""
    return (FIXTURES / "example.md").read_text(encoding="utf-8")
