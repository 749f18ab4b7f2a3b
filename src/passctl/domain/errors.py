"""Programming-error exceptions for the pass model.

INVARIANT: Expected domain conditions (capacity denials, invalid drafts)
are returned as data, never raised. Only contract violations such as an
unknown style or slot name raise, and they should surface in tests, not
in an editing session.
"""

from __future__ import annotations


class PassModelError(LookupError):
    """Base class for build-time contract violations in the pass model."""


class UnknownPassStyleError(PassModelError):
    """Raised when a style has no layout definition."""

    def __init__(self, style: object) -> None:
        super().__init__(f"Unknown pass style: {style!r}")
        self.style = style


class UnknownImageSlotError(PassModelError):
    """Raised when an image slot name is not part of the vocabulary."""

    def __init__(self, slot: object) -> None:
        super().__init__(f"Unknown image slot: {slot!r}")
        self.slot = slot


class UnknownFieldGroupError(PassModelError):
    """Raised when a field group name is not part of the vocabulary."""

    def __init__(self, group: object) -> None:
        super().__init__(f"Unknown field group: {group!r}")
        self.group = group
