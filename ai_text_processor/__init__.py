"""Rule-based cleanup for clipboard entries and notes.

Remove duplicate lines, tidy whitespace, build bulleted lists, fix basic
spacing and capitalization, and change case.
"""

from .processor import (
    CaseMode,
    change_case,
    cleanup_format,
    convert_to_list,
    fix_grammar,
    remove_duplicates,
)

__version__ = "1.0.0"

__all__ = [
    "CaseMode",
    "change_case",
    "cleanup_format",
    "convert_to_list",
    "fix_grammar",
    "remove_duplicates",
]
