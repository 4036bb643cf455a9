"""Domain Types — language codes, gestation bounds and the request record.

Invariants:
    - Language covers exactly the four supported codes (en, hi, ar, ur)
    - resolve_language() never raises: unknown codes resolve to DEFAULT_LANGUAGE
    - GestationRequest is built only after validate_content_request() accepted weeks

Design Decisions:
    - str Enum: serializes to JSON without custom encoders
    - One default language (English) shared by prompts and fallback tables
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Language(str, Enum):
    """Supported response languages."""
    EN = "en"
    HI = "hi"
    AR = "ar"
    UR = "ur"


DEFAULT_LANGUAGE = Language.EN

MIN_WEEKS = 0
MAX_WEEKS = 42


def resolve_language(code: Any) -> Language:
    """Map a raw language code to Language, English when unrecognized."""
    try:
        return Language(code)
    except ValueError:
        return DEFAULT_LANGUAGE


def format_count(value: Any) -> str:
    """Render weeks/days for interpolation into localized text.

    Whole floats drop their fraction (3.0 -> "3"); a missing value renders as 0.
    """
    if value is None:
        return "0"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class GestationRequest:
    """A validated content request. days and language are passed through as sent."""
    weeks: int
    days: Any = None
    language: Any = None

    @property
    def locale(self) -> Language:
        return resolve_language(self.language)
