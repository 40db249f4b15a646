"""Tests for naming helpers."""


class TestFormatReplacementName:
    """Tests for format_replacement_name function."""

    def test_default_format(self) -> None:
        from force_structure_name.utils import format_replacement_name

        assert format_replacement_name("S10", 2) == "S10 (2)"
        assert format_replacement_name("S10", 12) == "S10 (12)"

    def test_keeps_existing_suffix(self) -> None:
        """Names that already carry a suffix get another one appended."""
        from force_structure_name.utils import format_replacement_name

        assert format_replacement_name("S10 (2)", 2) == "S10 (2) (2)"

    def test_custom_format(self) -> None:
        from force_structure_name.utils import format_replacement_name

        assert format_replacement_name("MH", 3, "{name}_{counter:03d}") == "MH_003"


class TestNameExists:
    """Tests for name_exists function."""

    def test_exact_match(self) -> None:
        from force_structure_name.utils import name_exists

        assert name_exists("S10", ["S20", "S10"])
        assert not name_exists("S10", [])

    def test_case_sensitive(self) -> None:
        from force_structure_name.utils import name_exists

        assert not name_exists("S10", ["s10"])
