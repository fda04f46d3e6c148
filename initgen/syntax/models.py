"""
Syntax models — the small slice of C# syntax the generator reads and writes.

Key concepts
────────────
Expr            — value expressions produced by resolvers
Assignment      — one `Member = value` entry of an initializer block
ObjectCreation  — `new T(args) { ... }`
InitializerSite — an empty initializer located by the host, with the
                  document span of its object-creation expression and the
                  enclosing lambda (if any)
"""

from dataclasses import dataclass, replace
from typing import Optional

__all__ = [
    "Expr",
    "Literal",
    "Identifier",
    "MemberAccess",
    "DefaultExpression",
    "Assignment",
    "ObjectCreation",
    "Span",
    "Parameter",
    "LambdaInfo",
    "InitializerSite",
]


# ── Expressions ───────────────────────────────────────────────────────────────

class Expr:
    """Base class for generated expressions."""


@dataclass(frozen=True)
class Literal(Expr):
    text: str   # source text, already escaped and suffixed

    @classmethod
    def boolean(cls, value: bool) -> "Literal":
        return cls("true" if value else "false")

    @classmethod
    def number(cls, value: int | float, suffix: str = "") -> "Literal":
        return cls(f"{value!r}{suffix}")

    @classmethod
    def string(cls, value: str) -> "Literal":
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return cls(f'"{escaped}"')

    @classmethod
    def char(cls, value: str) -> "Literal":
        if len(value) != 1:
            raise ValueError(f"char literal needs exactly one character, got {value!r}")
        escaped = {"\\": "\\\\", "'": "\\'"}.get(value, value)
        return cls(f"'{escaped}'")


@dataclass(frozen=True)
class Identifier(Expr):
    name: str


@dataclass(frozen=True)
class MemberAccess(Expr):
    target: Expr
    name:   str


@dataclass(frozen=True)
class DefaultExpression(Expr):
    type_name: str


# ── Object creation ───────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Assignment:
    name:  str
    value: Expr


@dataclass(frozen=True)
class ObjectCreation:
    """
    `new T(args) { initializer }`.

    `arguments` holds constructor argument source text verbatim; None means
    the creation was written without an argument list (`new T { }`).
    """
    type_name:   str
    arguments:   Optional[tuple[str, ...]] = ()
    initializer: tuple[Assignment, ...] = ()

    def with_initializer(self, assignments) -> "ObjectCreation":
        return replace(self, initializer=tuple(assignments))

    def with_arguments(self, arguments) -> "ObjectCreation":
        return replace(self, arguments=tuple(arguments))


# ── Located sites ─────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Span:
    start: int   # inclusive character offset
    end:   int   # exclusive

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid span: [{self.start}, {self.end})")

    def contains(self, offset: int) -> bool:
        return self.start <= offset < self.end

    def overlaps(self, other: "Span") -> bool:
        return self.start < other.end and other.start < self.end

    def encloses(self, other: "Span") -> bool:
        return self.start <= other.start and other.end <= self.end and self != other


@dataclass(frozen=True)
class Parameter:
    name: str
    type: Optional[str] = None    # None: the host could not infer it


@dataclass(frozen=True)
class LambdaInfo:
    parameters: tuple[Parameter, ...] = ()


@dataclass(frozen=True)
class InitializerSite:
    """
    An empty initializer block reported by the host.

    span             — document span of the whole object-creation expression
    initializer_span — span of the `{ }` block itself
    enclosing_lambda — nearest lambda whose body contains the creation
    """
    creation:         ObjectCreation
    span:             Span
    initializer_span: Span
    enclosing_lambda: Optional[LambdaInfo] = None
