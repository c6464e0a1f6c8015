"""
Tests for smart item and clipboard type detection.
"""
import pytest

from ai_text_processor.recognition import (
    ClipboardType,
    SmartItem,
    detect_clipboard_type,
    detect_smart_items,
)


def of_type(items, kind):
    return [i for i in items if i.type == kind]


class TestPhoneDetection:
    """Phone numbers."""

    @pytest.mark.parametrize("text", [
        "Call me at 5551234567",
        "Phone: 555-123-4567",
        "Contact: (555) 123-4567",
        "+1 555-123-4567",
        "555.123.4567",
    ])
    def test_formats(self, text):
        phones = of_type(detect_smart_items(text), "PHONE")
        assert len(phones) == 1
        assert phones[0].label == "Call"

    def test_multiple(self):
        items = detect_smart_items("Call 555-123-4567 or 555-987-6543")
        assert len(of_type(items, "PHONE")) == 2

    def test_same_number_reported_once(self):
        items = detect_smart_items("555-123-4567 or 555.123.4567")
        assert of_type(items, "PHONE") == [SmartItem("PHONE", "555-123-4567", "Call")]


class TestEmailAndLinkDetection:
    """Emails and URLs."""

    def test_email(self):
        emails = of_type(detect_smart_items("Contact: user@example.com"), "EMAIL")
        assert emails == [SmartItem("EMAIL", "user@example.com", "Email")]

    def test_email_dedup_ignores_case(self):
        items = detect_smart_items("User@Example.com and user@example.com")
        assert len(of_type(items, "EMAIL")) == 1

    def test_email_variants(self):
        assert len(of_type(detect_smart_items("first.last_name@company.co.uk"), "EMAIL")) == 1
        assert len(of_type(detect_smart_items("user1@example.com and user2@example.org"), "EMAIL")) == 2

    def test_link(self):
        links = of_type(detect_smart_items("Visit http://example.com"), "LINK")
        assert links == [SmartItem("LINK", "http://example.com", "Open")]

    def test_link_with_query(self):
        links = of_type(detect_smart_items("https://example.com?param=value&other=123"), "LINK")
        assert len(links) == 1

    def test_multiple_links(self):
        items = detect_smart_items("Visit https://site1.com and https://site2.com")
        assert len(of_type(items, "LINK")) == 2


class TestLocationAndFallbacks:
    """Locations and type based fallbacks."""

    def test_street_keyword(self):
        locations = of_type(detect_smart_items("123 Main Street, New York"), "LOCATION")
        assert locations == [SmartItem("LOCATION", "123 Main Street, New York", "Map")]

    def test_first_line_used(self):
        items = detect_smart_items("123 Main Street\nNew York, NY 10001\nUSA")
        assert of_type(items, "LOCATION")[0].value == "123 Main Street"

    def test_location_type(self):
        items = detect_smart_items("Central Park", ClipboardType.LOCATION)
        assert of_type(items, "LOCATION")[0].value == "Central Park"

    def test_phone_fallback(self):
        items = detect_smart_items("abc123", ClipboardType.PHONE)
        assert items == [SmartItem("PHONE", "abc123", "Call")]

    def test_link_fallback(self):
        items = detect_smart_items("www.example.com", ClipboardType.LINK)
        assert items == [SmartItem("LINK", "www.example.com", "Open")]

    def test_no_fallback_when_matched(self):
        items = detect_smart_items("555-123-4567", ClipboardType.PHONE)
        assert len(of_type(items, "PHONE")) == 1

    def test_mixed_content_order(self):
        text = "Contact John at john@example.com or call 555-123-4567. Visit https://example.com for more info."
        assert [i.type for i in detect_smart_items(text)] == ["PHONE", "EMAIL", "LINK"]

    @pytest.mark.parametrize("text", ["", "   \n\n   ", "!@#$%^&*()", "Just some regular text"])
    def test_nothing_found(self, text):
        assert detect_smart_items(text) == []


class TestDetectClipboardType:
    """detect_clipboard_type."""

    @pytest.mark.parametrize("text,expected", [
        ("", ClipboardType.TEXT),
        ("   ", ClipboardType.TEXT),
        ("https://www.google.com", ClipboardType.LINK),
        ("  HTTP://EXAMPLE.COM/path  ", ClipboardType.LINK),
        ("+99 9876543210", ClipboardType.PHONE),
        ("(555) 123-4567", ClipboardType.PHONE),
        ("33rd Street, Fifth Avenue, New York City", ClipboardType.LOCATION),
        ("my Password is hunter2", ClipboardType.SECURE),
        ("api_key=abc", ClipboardType.SECURE),
        ("Meeting notes: Discuss Q1 roadmap and budget allocation.", ClipboardType.TEXT),
    ])
    def test_types(self, text, expected):
        assert detect_clipboard_type(text) is expected

    def test_link_beats_keywords(self):
        assert detect_clipboard_type("https://example.com/secret") is ClipboardType.LINK
