"""
Host ports — the narrow capabilities the generator consumes.

A hosting environment (editor plugin, language server, the bundled CLI)
supplies one adapter per port.  The core only ever talks to these
protocols; in-memory adapters live in `initgen.model.registry` and
`initgen.fixer.adapters`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from initgen.model.models import MemberInfo, TypeInfo
    from initgen.resolver.models import LocalBinding
    from initgen.syntax.models import InitializerSite, Parameter, Span

__all__ = [
    "TypeModel",
    "ScopeProvider",
    "SyntaxLocator",
    "SymbolResolver",
    "DocumentEditor",
]


class TypeModel(Protocol):
    def get_type(self, name: str) -> Optional["TypeInfo"]:
        """Resolve a type name; None if unknown."""

    def declared_members(self, type_info: "TypeInfo") -> list["MemberInfo"]:
        """Members declared directly on `type_info`, in declaration order."""

    def base_type(self, type_info: "TypeInfo") -> Optional["TypeInfo"]:
        """Immediate base type, or None at the root of the chain."""

    def enum_values(self, type_info: "TypeInfo") -> list[str]:
        """Named values of an enum in declaration order; empty otherwise."""

    def is_assignable(self, source: str, target: str) -> bool:
        """True if a `source` value converts implicitly to `target`."""


class ScopeProvider(Protocol):
    def visible_bindings(self, document: str, location: int) -> list["LocalBinding"]:
        """Named, typed bindings visible at `location`, nearest-enclosing first."""


class SyntaxLocator(Protocol):
    def find_empty_initializer(self, document: str, location: int) -> Optional["InitializerSite"]:
        """The empty initializer containing `location`, if any."""

    def find_all_empty_initializers(self, document: str) -> list["InitializerSite"]:
        """Every empty initializer in the document, in document order."""


class SymbolResolver(Protocol):
    def type_of_creation(self, site: "InitializerSite") -> Optional[str]:
        """Static type of the object-creation expression; None if unresolvable."""

    def lambda_parameter_type(self, site: "InitializerSite", parameter: "Parameter") -> Optional[str]:
        """Type of an enclosing lambda's parameter; None if unresolvable."""


class DocumentEditor(Protocol):
    def replace(self, document: str, span: "Span", text: str) -> str:
        """Return a new document with `span` replaced by `text`."""

    def replace_many(self, document: str, edits: Sequence[tuple["Span", str]]) -> str:
        """Apply several non-overlapping replacements at once, or none."""
