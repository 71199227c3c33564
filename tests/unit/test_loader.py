"""Tests for loading scenario documents from files."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tsungforge._internal.errors import ScenarioError
from tsungforge.dsl.loader import load_document
from tsungforge.model.document import ScenarioDocument

if TYPE_CHECKING:
    from pathlib import Path


class TestLoader:
    """Tests for the load_document function."""

    def test_load_document_from_file(self, sample_scenario_path: Path):
        """load_document returns the module-level document."""
        doc = load_document(sample_scenario_path)
        assert isinstance(doc, ScenarioDocument)
        assert [s.host for s in doc.servers] == ["target.local"]
        assert [s.name for s in doc.sessions] == ["smoke"]

    def test_load_document_nonexistent_file(self, tmp_path: Path):
        with pytest.raises(ScenarioError, match="not found"):
            load_document(tmp_path / "does_not_exist.py")

    def test_load_document_not_python_file(self, tmp_path: Path):
        path = tmp_path / "scenario.xml"
        path.write_text("<tsung/>")
        with pytest.raises(ScenarioError, match=r"must be a \.py file"):
            load_document(path)

    def test_load_document_without_document(self, tmp_path: Path):
        path = tmp_path / "empty.py"
        path.write_text("x = 42\n")
        with pytest.raises(ScenarioError, match="No ScenarioDocument found"):
            load_document(path)

    def test_load_document_import_error(self, tmp_path: Path):
        path = tmp_path / "broken.py"
        path.write_text("import nonexistent_module_12345  # noqa: F401\n")
        with pytest.raises(ScenarioError, match="Failed to import"):
            load_document(path)

    def test_first_document_wins(self, tmp_path: Path):
        path = tmp_path / "two.py"
        path.write_text(
            "from tsungforge import ScenarioDocument\n"
            "first = ScenarioDocument()\n"
            "first.add_session('a')\n"
            "second = ScenarioDocument()\n"
        )
        doc = load_document(path)
        assert [s.name for s in doc.sessions] == ["a"]
