"""Tests for console output helpers."""

import pytest


class TestFormatCount:
    """Tests for format_count function."""

    def test_singular_and_plural(self) -> None:
        from force_structure_name.utils.logging import format_count

        assert format_count(1, "structure") == "1 structure"
        assert format_count(3, "structure") == "3 structures"
        assert format_count(1200, "rename") == "1,200 renames"


class TestSuppressStdout:
    """Tests for suppress_stdout context manager."""

    def test_suppresses_log_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        from force_structure_name.utils.logging import log_info, suppress_stdout

        with suppress_stdout():
            log_info("hidden")
        log_info("shown")

        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "shown" in out
