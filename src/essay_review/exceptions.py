"""Exception hierarchy for structural contract violations.

Expected absences (a phrase that never occurs, a missing score label, no
focused highlight) are modelled as None or empty collections and never
raise. These exceptions are reserved for inputs that break the engine's
invariants.
"""


class EssayReviewError(Exception):
    """Base exception for all essay review errors."""


class AnnotationError(EssayReviewError):
    """Annotation inputs are structurally invalid."""


class InvalidRangeError(AnnotationError):
    """A match range is empty, reversed, or runs past the end of the text."""


class DuplicateIdError(AnnotationError):
    """Two critique items resolved to the same id within one annotation run."""
