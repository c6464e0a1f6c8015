"""Rule-based text transformations for clipboard entries and notes.

Every function here takes a string and returns a new string. Nothing is
shared between calls, so the functions can be chained in any order.
"""

import re
from enum import IntEnum

from .config import BULLET

_whitespace_re = re.compile(r"\s+")
_sentence_break_re = re.compile(r"[.!?]\s")
_sentence_split_re = re.compile(r"(?<=[.!?])\s+")
_bullet_re = re.compile(r"^[-*•]\s*")
_missing_space_re = re.compile(r"([.,!?])(?=[a-zA-Z])")
_sentence_start_re = re.compile(r"([.!?]\s+)([a-z])")
_lone_i_re = re.compile(r"\bi\b")
_word_start_re = re.compile(r"\b\w")
_sentence_case_re = re.compile(r"^\s*\w|[.!?]\s*\w")


class CaseMode(IntEnum):
    UPPER = 0
    LOWER = 1
    TITLE = 2
    SENTENCE = 3


def _upper_match(m):
    return m.group(0).upper()


def remove_duplicates(text):
    """Drop blank and repeated lines, keeping the first occurrence.

    Lines are compared and kept in their trimmed form.
    """
    seen = set()
    kept = []
    for line in text.split("\n"):
        trimmed = line.strip()
        if not trimmed or trimmed in seen:
            continue
        seen.add(trimmed)
        kept.append(trimmed)
    return "\n".join(kept)


def cleanup_format(text):
    """Collapse whitespace inside each line and drop empty lines."""
    lines = (_whitespace_re.sub(" ", line.strip()) for line in text.split("\n"))
    return "\n".join(line for line in lines if line)


def convert_to_list(text):
    """Turn free-form text into a bulleted list.

    Items are split on line breaks if there are any, otherwise on sentence
    boundaries, otherwise on commas. Existing bullet markers are replaced.
    """
    if "\n" in text:
        items = text.split("\n")
    elif _sentence_break_re.search(text):
        items = _sentence_split_re.split(text)
    elif "," in text:
        items = text.split(",")
    else:
        items = [text]

    bullets = []
    for item in items:
        item = item.strip()
        if not item:
            continue
        bullets.append(BULLET + _bullet_re.sub("", item, count=1))
    return "\n".join(bullets)


def fix_grammar(text):
    """Apply spacing and capitalization fixes.

    This flattens the text to a single line. Steps run in a fixed order and
    each works on the previous result.
    """
    text = _whitespace_re.sub(" ", text)
    text = _missing_space_re.sub(r"\1 ", text)
    text = text[:1].upper() + text[1:]
    text = _sentence_start_re.sub(lambda m: m.group(1) + m.group(2).upper(), text)
    text = _lone_i_re.sub("I", text)
    return text


def change_case(text, mode):
    """Convert text case according to ``mode``.

    Values outside ``CaseMode``, booleans included, return the text unchanged.
    """
    if isinstance(mode, bool):
        return text
    try:
        mode = CaseMode(mode)
    except ValueError:
        return text

    if mode is CaseMode.UPPER:
        return text.upper()
    if mode is CaseMode.LOWER:
        return text.lower()
    if mode is CaseMode.TITLE:
        return _word_start_re.sub(_upper_match, text.lower())
    return _sentence_case_re.sub(_upper_match, text.lower())
