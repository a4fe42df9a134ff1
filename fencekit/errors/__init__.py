from .extract import ExtractionError
from .kinds import FailureKind
from .mutation import MutationError

__all__ = ["ExtractionError", "FailureKind", "MutationError"]
