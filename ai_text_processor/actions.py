"""Named actions from the editor's AI menu and pipelines built from them."""

import logging
from enum import Enum

from .config import CASE_MODE_COUNT, DEFAULT_CASE_MODE
from .processor import (
    CaseMode,
    change_case,
    cleanup_format,
    convert_to_list,
    fix_grammar,
    remove_duplicates,
)

logger = logging.getLogger(__name__)


class UnknownActionError(ValueError):
    pass


class Action(str, Enum):
    DUPLICATES = "DUPLICATES"
    CLEANUP = "CLEANUP"
    LIST = "LIST"
    GRAMMAR = "GRAMMAR"
    CASE = "CASE"


# CASE needs a mode, so it is not in the plain text -> text registry
ACTIONS = {
    Action.DUPLICATES: remove_duplicates,
    Action.CLEANUP: cleanup_format,
    Action.LIST: convert_to_list,
    Action.GRAMMAR: fix_grammar,
}


def next_case_mode(current):
    """Return the mode after ``current``, wrapping back to UPPER."""
    return CaseMode((int(current) + 1) % CASE_MODE_COUNT)


def resolve_action(action):
    if isinstance(action, Action):
        return action
    try:
        return Action(str(action).strip().upper())
    except ValueError:
        raise UnknownActionError(f"Unknown action: {action}") from None


def apply_action(text, action, case_mode=DEFAULT_CASE_MODE):
    """Run a single action on ``text``.

    Args:
        text: Input text
        action: An ``Action`` or its name, case-insensitive
        case_mode: Mode passed to ``change_case`` for the CASE action

    Returns:
        The transformed text
    """
    action = resolve_action(action)
    if action is Action.CASE:
        return change_case(text, case_mode)
    return ACTIONS[action](text)


def build_pipeline(names, case_mode=DEFAULT_CASE_MODE):
    """Create a function that applies the named actions in order.

    Raises:
        UnknownActionError: if any name is not a known action
    """
    steps = [resolve_action(name) for name in names]
    if not steps:
        logger.debug("No actions requested, using identity pipeline")
        return lambda text: text

    def pipeline(text):
        for step in steps:
            text = apply_action(text, step, case_mode)
        return text

    logger.debug("Action pipeline created | actions=%s", [s.value for s in steps])
    return pipeline
