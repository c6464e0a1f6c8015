"""Detection of actionable items and clipboard types in copied text."""

import re
from enum import Enum
from typing import List, NamedTuple, Optional

from .config import LOCATION_HINTS, LOCATION_KEYWORDS, SECURE_KEYWORDS, SMART_ITEM_LABELS

_phone_re = re.compile(r"(?:\+?\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")
_phone_strip_re = re.compile(r"[-.\s()]")
_email_re = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_link_re = re.compile(r"https?://\S+")
_whole_link_re = re.compile(r"^https?://\S+$", re.I)
_whole_phone_re = re.compile(
    r"^[+]?[(]?[0-9]{1,3}[)]?[-\s.]?[(]?[0-9]{1,4}[)]?[-\s.]?[0-9]{1,4}[-\s.]?[0-9]{1,9}$"
)
_any_space_re = re.compile(r"\s")


class ClipboardType(str, Enum):
    TEXT = "TEXT"
    SECURE = "SECURE"
    LINK = "LINK"
    PHONE = "PHONE"
    LOCATION = "LOCATION"


class SmartItem(NamedTuple):
    type: str
    value: str
    label: str


def _item(kind, value):
    return SmartItem(kind, value, SMART_ITEM_LABELS[kind])


def detect_smart_items(text: str, item_type: Optional[ClipboardType] = None) -> List[SmartItem]:
    """Find phone numbers, emails, links and locations in text.

    Args:
        text: Clipboard or note content
        item_type: Optional clipboard type used for location detection and
            as a fallback when no pattern matches

    Returns:
        Detected items, phones first, then emails, links and location.
        A value is reported once even if it appears several times.
    """
    items = []
    seen = set()

    for phone in _phone_re.findall(text):
        key = _phone_strip_re.sub("", phone)
        if key not in seen:
            items.append(_item("PHONE", phone))
            seen.add(key)

    for email in _email_re.findall(text):
        key = email.lower()
        if key not in seen:
            items.append(_item("EMAIL", email))
            seen.add(key)

    for link in _link_re.findall(text):
        if link not in seen:
            items.append(_item("LINK", link))
            seen.add(link)

    if item_type == ClipboardType.LOCATION or any(hint in text for hint in LOCATION_HINTS):
        location = text.split("\n")[0]
        if location not in seen:
            items.append(_item("LOCATION", location))
            seen.add(location)

    if item_type == ClipboardType.PHONE and not items:
        items.append(_item("PHONE", text))
    if item_type == ClipboardType.LINK and not items:
        items.append(_item("LINK", text))

    return items


def detect_clipboard_type(text: str) -> ClipboardType:
    """Guess the clipboard type of new content. Blank text is TEXT."""
    if not text or not text.strip():
        return ClipboardType.TEXT

    trimmed = text.strip()

    if _whole_link_re.match(trimmed):
        return ClipboardType.LINK
    if _whole_phone_re.match(_any_space_re.sub("", trimmed)):
        return ClipboardType.PHONE
    if any(keyword in trimmed for keyword in LOCATION_KEYWORDS):
        return ClipboardType.LOCATION

    lowered = trimmed.lower()
    if any(keyword in lowered for keyword in SECURE_KEYWORDS):
        return ClipboardType.SECURE

    return ClipboardType.TEXT
