"""
Data models for the resolver module.

Key concepts
────────────
ResolutionStrategy  — which candidate source an action draws values from
LocalBinding        — a named, typed local visible at the edit location
SourceObject        — an expression whose members supply values
MappingElement      — the value chosen for ONE target member
CancellationToken   — cooperative cancellation flag for a fix invocation
ResolveContext      — everything a resolver may consult, passed per call
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Optional

from initgen.exceptions import OperationCancelledError
from initgen.syntax.models import Expr

if TYPE_CHECKING:
    from initgen.ports import TypeModel

__all__ = [
    "ResolutionStrategy",
    "LocalBinding",
    "SourceObject",
    "MappingElement",
    "CancellationToken",
    "ResolveContext",
]


class ResolutionStrategy(str, Enum):
    """
    Candidate source for member values.

    LOCALS
        Variables, parameters and fields visible at the initializer,
        matched by name (then by exact type with a case-insensitive name).

    SCAFFOLDING
        Deterministic placeholder values per type; consults no source.

    LAMBDA_PARAMETER
        Members of the single parameter of the enclosing lambda, matched by
        name, directly or through one nested member.
    """
    LOCALS           = "locals"
    SCAFFOLDING      = "scaffolding"
    LAMBDA_PARAMETER = "lambda_parameter"


@dataclass(frozen=True)
class LocalBinding:
    name: str
    type: str

    def __str__(self) -> str:
        return f"{self.name}: {self.type}"


@dataclass(frozen=True)
class SourceObject:
    expression: str   # source text of the object, e.g. a lambda parameter name
    type:       str


@dataclass(frozen=True)
class MappingElement:
    """
    A resolved value for one member.

    `expression_type` is the static type of `expression`; resolvers only
    produce elements whose type is assignable to the member's type.
    Resolvers signal "unresolved" by returning None instead.
    """
    expression:      Expr
    expression_type: str


class CancellationToken:
    """
    Cooperative cancellation flag.

    The builder checks it between member resolutions; nothing is written to
    the document until a full pass has completed.
    """

    def __init__(self) -> None:
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled

    def raise_if_cancelled(self) -> None:
        if self._cancelled:
            raise OperationCancelledError("Fix cancelled by caller")


@dataclass
class ResolveContext:
    """
    Per-invocation context handed to every resolve() call.

    scope         — local bindings, nearest-enclosing first (LOCALS)
    source_object — object whose members are candidates (LAMBDA_PARAMETER)
    """
    type_model:    "TypeModel"
    scope:         list[LocalBinding] = field(default_factory=list)
    source_object: Optional[SourceObject] = None
    cancel_token:  Optional[CancellationToken] = None

    def raise_if_cancelled(self) -> None:
        if self.cancel_token is not None:
            self.cancel_token.raise_if_cancelled()
