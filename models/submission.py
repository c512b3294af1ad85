"""
Submission outcome types for Word Scramble.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class RejectionReason(str, Enum):
    """Why a candidate word was turned down. Exactly one is reported per rejection."""
    EMPTY = "empty"
    ALREADY_USED = "already_used"
    SAME_AS_ROOT = "same_as_root"
    NOT_SPELLABLE = "not_spellable"
    NOT_RECOGNIZED = "not_recognized"


@dataclass(frozen=True)
class SubmissionResult:
    """Result of a single submission."""
    word: str
    reason: Optional[RejectionReason] = None

    @property
    def accepted(self) -> bool:
        return self.reason is None
