"""Models module for Word Scramble Bot."""
from models.db_models import Base, WordCache
from models.submission import RejectionReason, SubmissionResult

__all__ = [
    "Base",
    "WordCache",
    "RejectionReason",
    "SubmissionResult",
]
