# tests/test_names.py

"""Tests for title-casing and the country lookup table."""

import json
import tempfile
import unittest
from pathlib import Path
from typing import Any

from arz.parsing.names import LookupTableError, NameLookupTable, title_case

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class TestTitleCase(unittest.TestCase):
    """Lowercase, then capitalise each whitespace-separated token."""

    def test_two_words(self) -> None:
        self.assertEqual(title_case("united states"), "United States")

    def test_mixed_case(self) -> None:
        self.assertEqual(title_case("eURo"), "Euro")

    def test_upper_case(self) -> None:
        self.assertEqual(title_case("BITCOIN CASH"), "Bitcoin Cash")

    def test_strips_outer_whitespace(self) -> None:
        self.assertEqual(title_case("  usd \n"), "Usd")

    def test_digit_leading_token(self) -> None:
        self.assertEqual(title_case("18ayar"), "18ayar")

    def test_empty(self) -> None:
        self.assertEqual(title_case(""), "")


class TestNameLookupTable(unittest.TestCase):
    """Loading and resolving from the lookup file."""

    def setUp(self) -> None:
        self.tmp_dir = Path(tempfile.mkdtemp())

    def _write(self, content: Any, raw: bool = False) -> Path:
        path = self.tmp_dir / "lookup.json"
        with open(path, "w", encoding="utf-8") as f:
            if raw:
                f.write(content)
            else:
                json.dump(content, f)
        return path

    def test_load_fixture(self) -> None:
        table = NameLookupTable.from_file(FIXTURES_DIR / "currencies.json")
        self.assertEqual(len(table), 3)
        self.assertEqual(table["us"], "US Dollar")

    def test_keys_are_lowercased(self) -> None:
        table = NameLookupTable.from_file(FIXTURES_DIR / "currencies.json")
        self.assertIn("gb", table)
        self.assertEqual(table["GB"], "British Pound")

    def test_resolve_hit(self) -> None:
        table = NameLookupTable({"european_union": "Euro"})
        self.assertEqual(
            table.resolve("european_union", fallback="eur"), "Euro"
        )

    def test_resolve_miss_title_cases_fallback(self) -> None:
        table = NameLookupTable({"us": "US Dollar"})
        self.assertEqual(table.resolve("zz", fallback="xyz"), "Xyz")

    def test_resolve_empty_key_uses_fallback(self) -> None:
        table = NameLookupTable({"": "Never"})
        self.assertEqual(table.resolve("", fallback="irr"), "Irr")

    def test_resolve_empty_english_uses_fallback(self) -> None:
        table = NameLookupTable({"us": ""})
        self.assertEqual(table.resolve("us", fallback="usd"), "Usd")

    def test_table_is_read_only(self) -> None:
        table = NameLookupTable({"us": "US Dollar"})
        with self.assertRaises(TypeError):
            table._entries["us"] = "changed"  # type: ignore[index]

    def test_missing_file_raises(self) -> None:
        with self.assertRaises(LookupTableError):
            NameLookupTable.from_file(self.tmp_dir / "missing.json")

    def test_malformed_json_raises(self) -> None:
        path = self._write('[{"country": "us", ', raw=True)
        with self.assertRaises(LookupTableError):
            NameLookupTable.from_file(path)

    def test_non_array_raises(self) -> None:
        path = self._write({"country": "us", "en": "US Dollar"})
        with self.assertRaises(LookupTableError):
            NameLookupTable.from_file(path)

    def test_non_object_entry_raises(self) -> None:
        path = self._write(["us"])
        with self.assertRaises(LookupTableError):
            NameLookupTable.from_file(path)

    def test_empty_country_raises(self) -> None:
        path = self._write([{"country": "", "en": "Nowhere"}])
        with self.assertRaises(LookupTableError):
            NameLookupTable.from_file(path)

    def test_bundled_lookup_loads(self) -> None:
        """The default file shipped with the package is valid."""
        from arz.config.settings import Settings

        table = NameLookupTable.from_file(Settings.LOOKUP_PATH)
        self.assertEqual(table["european_union"], "Euro")


if __name__ == "__main__":
    unittest.main()
