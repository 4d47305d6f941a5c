# tests/test_price_record.py

"""Tests for the PriceRecord and Snapshot models."""

import dataclasses
import unittest

from arz.models.price_record import PriceRecord, Snapshot


class TestPriceRecord(unittest.TestCase):
    """Record shape and immutability."""

    def test_to_dict_uses_published_keys(self) -> None:
        record = PriceRecord(
            code="usd",
            local_name="دلار آمریکا",
            price=95300.0,
            icon_url="https://example.com/us.svg",
            display_name="US Dollar",
        )
        self.assertEqual(
            record.to_dict(),
            {
                "code": "usd",
                "name": "دلار آمریکا",
                "price": 95300.0,
                "icon": "https://example.com/us.svg",
                "en": "US Dollar",
            },
        )

    def test_defaults(self) -> None:
        record = PriceRecord(code="btc", local_name="بیت کوین", price=1.0)
        self.assertEqual(record.icon_url, "")
        self.assertEqual(record.display_name, "")

    def test_frozen(self) -> None:
        record = PriceRecord(code="btc", local_name="", price=1.0)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            record.price = 2.0  # type: ignore[misc]


class TestSnapshot(unittest.TestCase):
    """Snapshot document shape."""

    def test_to_dict(self) -> None:
        snapshot = Snapshot(
            generated_at="1403/01/01, 12:00",
            records=(PriceRecord(code="gram", local_name="", price=2.0),),
        )
        data = snapshot.to_dict()
        self.assertEqual(data["date"], "1403/01/01, 12:00")
        self.assertEqual(data["currencies"][0]["code"], "gram")

    def test_empty_records(self) -> None:
        self.assertEqual(
            Snapshot(generated_at="x").to_dict(),
            {"date": "x", "currencies": []},
        )

    def test_default_records_is_empty_tuple(self) -> None:
        self.assertEqual(Snapshot(generated_at="x").records, ())


if __name__ == "__main__":
    unittest.main()
