"""
In-memory host adapters.

These back the CLI and the test-suite.  An editor integration replaces them
with adapters over its own syntax tree and compiler services.

StaticScopeProvider  — ScopeProvider over explicit scope frames
SiteTable            — SyntaxLocator + SymbolResolver over reported sites
TextDocumentEditor   — DocumentEditor for plain-text documents
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Optional, Sequence

from initgen.exceptions import DocumentEditError
from initgen.resolver.models import LocalBinding
from initgen.syntax.models import InitializerSite, Parameter, Span

if TYPE_CHECKING:
    from initgen.ports import TypeModel

__all__ = ["ScopeFrame", "StaticScopeProvider", "SiteTable", "TextDocumentEditor"]

logger = logging.getLogger(__name__)


# ── Scopes ────────────────────────────────────────────────────────────────────

@dataclass
class ScopeFrame:
    """
    Bindings declared in one lexical scope, in declaration order.
    A frame without a span covers the whole document.
    """
    bindings: list[LocalBinding] = field(default_factory=list)
    span:     Optional[Span] = None

    def covers(self, location: int) -> bool:
        return self.span is None or self.span.contains(location)

    def extent(self) -> int:
        return self.span.end - self.span.start if self.span is not None else -1


class StaticScopeProvider:
    """
    Answers visible_bindings() from a fixed list of frames.

    Frames covering the location are ordered innermost (narrowest span)
    first; a name declared in an inner frame hides the same name further out.
    """

    def __init__(self, frames: Iterable[ScopeFrame] = ()) -> None:
        self._frames = list(frames)

    @classmethod
    def flat(cls, bindings: Iterable[LocalBinding]) -> "StaticScopeProvider":
        return cls([ScopeFrame(bindings=list(bindings))])

    def visible_bindings(self, document: str, location: int) -> list[LocalBinding]:
        covering = [f for f in self._frames if f.covers(location)]
        # Stable sort keeps frame order for equal extents; document-wide last.
        covering.sort(key=lambda f: (f.span is None, f.extent()))

        visible: list[LocalBinding] = []
        seen: set[str] = set()
        for frame in covering:
            for b in frame.bindings:
                if b.name not in seen:
                    seen.add(b.name)
                    visible.append(b)
        return visible


# ── Sites / symbols ───────────────────────────────────────────────────────────

class SiteTable:
    """
    Locator and symbol resolver over sites already found by the host.

    Types are resolved against the given TypeModel: a creation or lambda
    parameter whose type name the model does not know is unresolvable.
    """

    def __init__(self, sites: Iterable[InitializerSite], type_model: "TypeModel") -> None:
        self._sites = sorted(sites, key=lambda s: (s.span.start, -s.span.end))
        self._type_model = type_model

    # ── SyntaxLocator port ────────────────────────────────────────────────

    def find_empty_initializer(self, document: str, location: int) -> Optional[InitializerSite]:
        matches = [
            s for s in self._sites
            if not s.creation.initializer and s.span.contains(location)
        ]
        if not matches:
            return None
        # Innermost creation wins for nested `new` expressions.
        return min(matches, key=lambda s: s.span.end - s.span.start)

    def find_all_empty_initializers(self, document: str) -> list[InitializerSite]:
        return [s for s in self._sites if not s.creation.initializer]

    # ── SymbolResolver port ───────────────────────────────────────────────

    def type_of_creation(self, site: InitializerSite) -> Optional[str]:
        name = site.creation.type_name
        return name if self._type_model.get_type(name) is not None else None

    def lambda_parameter_type(self, site: InitializerSite, parameter: Parameter) -> Optional[str]:
        if parameter.type is None:
            return None
        return parameter.type if self._type_model.get_type(parameter.type) is not None else None


# ── Documents ─────────────────────────────────────────────────────────────────

class TextDocumentEditor:
    """DocumentEditor over `str` documents; every edit is all-or-nothing."""

    def replace(self, document: str, span: Span, text: str) -> str:
        return self.replace_many(document, [(span, text)])

    def replace_many(self, document: str, edits: Sequence[tuple[Span, str]]) -> str:
        ordered = sorted(edits, key=lambda e: e[0].start)
        for (a, _), (b, _) in zip(ordered, ordered[1:]):
            if a.overlaps(b):
                raise DocumentEditError(f"Overlapping edits: [{a.start}, {a.end}) and [{b.start}, {b.end})")
        for span, _ in ordered:
            if span.end > len(document):
                raise DocumentEditError(
                    f"Edit [{span.start}, {span.end}) outside document of length {len(document)}"
                )

        # Last to first so earlier offsets stay valid.
        for span, text in reversed(ordered):
            document = document[:span.start] + text + document[span.end:]
        logger.debug("Applied %d edit(s)", len(ordered))
        return document
