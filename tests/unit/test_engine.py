"""Tests for the document writer and the Tsung runner."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from tsungforge._internal.errors import EngineError
from tsungforge.engine import runner as runner_module
from tsungforge.engine.runner import RunResult, TsungRunner
from tsungforge.engine.writer import write_document, write_document_to

# =========================================================================
# Writer
# =========================================================================


class TestWriteDocument:
    """Tests for write_document and write_document_to."""

    def test_writes_verbatim(self, tmp_path: Path):
        xml = '<?xml version="1.0"?><tsung>ü &amp;</tsung>'
        path = write_document(xml, directory=tmp_path)
        assert path.parent == tmp_path
        assert path.name.startswith("tsung_")
        assert path.suffix == ".xml"
        assert path.read_text(encoding="utf-8") == xml

    def test_each_call_creates_new_file(self, tmp_path: Path):
        first = write_document("<a/>", directory=tmp_path)
        second = write_document("<b/>", directory=tmp_path)
        assert first != second

    def test_missing_directory_raises(self, tmp_path: Path):
        with pytest.raises(EngineError, match="Could not create a temporary file"):
            write_document("<a/>", directory=tmp_path / "missing")

    def test_write_document_to_creates_parents(self, tmp_path: Path):
        target = tmp_path / "out" / "nested" / "scenario.xml"
        assert write_document_to("<tsung/>", target) == target
        assert target.read_text(encoding="utf-8") == "<tsung/>"

    def test_write_document_to_directory_raises(self, tmp_path: Path):
        with pytest.raises(EngineError, match="Could not write"):
            write_document_to("<tsung/>", tmp_path)


# =========================================================================
# Runner
# =========================================================================


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "tsung_test.xml"
    path.write_text("<tsung/>")
    return path


class TestTsungRunner:
    """Tests for TsungRunner with subprocess.run replaced."""

    def test_command_line(self, config_file: Path):
        assert TsungRunner("tsung").command(config_file) == (
            "tsung",
            "-f",
            str(config_file),
            "start",
        )

    def test_run_captures_output(self, config_file: Path, monkeypatch: pytest.MonkeyPatch):
        calls: list[tuple[str, ...]] = []

        def fake_run(command, **kwargs):
            calls.append(tuple(command))
            assert kwargs["capture_output"] is True
            return subprocess.CompletedProcess(command, 0, stdout="Starting Tsung\n", stderr="")

        monkeypatch.setattr(runner_module.subprocess, "run", fake_run)
        result = TsungRunner("/usr/bin/tsung").run(config_file)

        assert calls == [("/usr/bin/tsung", "-f", str(config_file), "start")]
        assert result == RunResult(
            config_path=config_file,
            command=calls[0],
            returncode=0,
            stdout="Starting Tsung\n",
            stderr="",
        )
        assert result.ok

    def test_nonzero_exit_is_reported_not_raised(
        self, config_file: Path, monkeypatch: pytest.MonkeyPatch
    ):
        monkeypatch.setattr(
            runner_module.subprocess,
            "run",
            lambda command, **kwargs: subprocess.CompletedProcess(command, 3, "", "boom"),
        )
        result = TsungRunner().run(config_file)
        assert result.returncode == 3
        assert result.stderr == "boom"
        assert not result.ok

    def test_missing_binary_raises(self, config_file: Path):
        runner = TsungRunner("tsung-binary-that-does-not-exist-12345")
        with pytest.raises(EngineError, match="executable not found"):
            runner.run(config_file)

    def test_missing_config_raises(self, tmp_path: Path):
        with pytest.raises(EngineError, match="configuration not found"):
            TsungRunner().run(tmp_path / "nope.xml")

    def test_timeout_raises(self, config_file: Path, monkeypatch: pytest.MonkeyPatch):
        def fake_run(command, **kwargs):
            raise subprocess.TimeoutExpired(command, kwargs["timeout"])

        monkeypatch.setattr(runner_module.subprocess, "run", fake_run)
        with pytest.raises(EngineError, match="did not finish within"):
            TsungRunner(timeout=1.0).run(config_file)
