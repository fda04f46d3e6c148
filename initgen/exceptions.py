"""
Exception hierarchy for initgen.
Every error raised by the package derives from InitGenError.
"""

__all__ = [
    "InitGenError",
    "TypeModelError",
    "UnknownTypeError",
    "FixError",
    "TargetTypeUnresolvedError",
    "OperationCancelledError",
    "DocumentEditError",
    "RequestError",
]


class InitGenError(Exception):
    """Root exception for all initgen errors."""


# ── Type model ────────────────────────────────────────────────────────────────

class TypeModelError(InitGenError):
    """Raised when the type model is malformed or cannot answer a query."""


class UnknownTypeError(TypeModelError):
    """Raised when a type name is not known to the type model."""


# ── Fixes ─────────────────────────────────────────────────────────────────────

class FixError(InitGenError):
    """Base class for errors that abort a single fix invocation."""


class TargetTypeUnresolvedError(FixError):
    """Raised when the type of the object-creation expression cannot be resolved."""


class OperationCancelledError(FixError):
    """Raised when the caller cancels a fix between member resolutions."""


# ── Document editing ──────────────────────────────────────────────────────────

class DocumentEditError(InitGenError):
    """Raised when an edit span is out of range or overlaps another edit."""


# ── CLI / requests ────────────────────────────────────────────────────────────

class RequestError(InitGenError):
    """Raised when a JSON fix request is missing fields or malformed."""
