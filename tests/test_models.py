"""Tests for ParsedReceipt data models."""

from pricebook.receipts.models import ParsedReceipt, ParsedReceiptItem


class TestParsedReceiptItem:
    def test_defaults(self):
        item = ParsedReceiptItem(name="Milk")
        assert item.price == 0.0
        assert item.quantity == 1
        assert item.tags == []
        assert item.original_price is None

    def test_tags_not_shared(self):
        a = ParsedReceiptItem(name="a")
        b = ParsedReceiptItem(name="b")
        a.tags.append("SALE")
        assert b.tags == []

    def test_to_dict_omits_unset(self):
        assert ParsedReceiptItem(name="Milk", price=3.49).to_dict() == {
            "name": "Milk",
            "price": 3.49,
            "quantity": 1,
            "tags": [],
        }

    def test_to_dict_camel_case(self):
        item = ParsedReceiptItem(
            name="HZ KETCHUP",
            price=5.99,
            alternative_name="Heinz Ketchup",
            weight="907g",
            unit_price=0.66,
            category="Pantry",
            original_price=6.99,
            tags=["SALE"],
            image_url="https://example.com/k.png",
        )
        data = item.to_dict()
        assert data["alternativeName"] == "Heinz Ketchup"
        assert data["unitPrice"] == 0.66
        assert data["originalPrice"] == 6.99
        assert data["imageUrl"] == "https://example.com/k.png"
        assert data["tags"] == ["SALE"]


class TestParsedReceipt:
    def test_defaults(self):
        receipt = ParsedReceipt()
        assert receipt.items == []
        assert receipt.currency == "USD"
        assert receipt.store is None

    def test_to_dict(self):
        receipt = ParsedReceipt(
            store="Target",
            store_location="123 Main St",
            date="2024-05-20",
            total=5.99,
            items=[ParsedReceiptItem(name="Milk", price=5.99)],
        )
        data = receipt.to_dict()
        assert data["store"] == "Target"
        assert data["storeLocation"] == "123 Main St"
        assert data["time"] is None
        assert data["currency"] == "USD"
        assert data["items"][0]["name"] == "Milk"
