#!/usr/bin/env python3
"""Action types and the action record dispatched to the store.

Library action types live in ActionType; applications may dispatch
actions with any other string type for their own reducers.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

__all__ = ["ActionType", "Action"]


class ActionType(str, Enum):
    """Actions understood by the polyglot reducer."""

    INIT = "@@phrasebind/INIT"  # Dispatched once when a store is created
    SET_LANGUAGE = "@@polyglot/SET_LANGUAGE"  # Replace locale and phrase tree


@dataclass(frozen=True)
class Action:
    """Action with type and payload."""

    type: str
    payload: Any = None
