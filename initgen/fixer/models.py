"""
Data models for the fixer module.

FixHost     — the set of host ports a FixOrchestrator works against
CodeAction  — one offered fix: a title plus a deferred apply()
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Optional

from initgen.resolver.models import CancellationToken, ResolutionStrategy

if TYPE_CHECKING:
    from initgen.ports import DocumentEditor, ScopeProvider, SymbolResolver, SyntaxLocator, TypeModel

__all__ = [
    "TITLE_LOCALS",
    "TITLE_SCAFFOLDING",
    "TITLE_LAMBDA",
    "TITLES",
    "FixHost",
    "CodeAction",
]

TITLE_LOCALS      = "Initialize with local variables"
TITLE_SCAFFOLDING = "Initialize with sample values"
TITLE_LAMBDA      = "Initialize with lambda parameter"

TITLES: dict[ResolutionStrategy, str] = {
    ResolutionStrategy.LOCALS:           TITLE_LOCALS,
    ResolutionStrategy.SCAFFOLDING:      TITLE_SCAFFOLDING,
    ResolutionStrategy.LAMBDA_PARAMETER: TITLE_LAMBDA,
}


@dataclass
class FixHost:
    """Adapters supplied by the hosting environment."""
    type_model: "TypeModel"
    scopes:     "ScopeProvider"
    locator:    "SyntaxLocator"
    symbols:    "SymbolResolver"
    editor:     "DocumentEditor"


@dataclass(frozen=True)
class CodeAction:
    """
    A fix offered for one empty initializer.

    The equivalence key is the title, so a host can batch the same action
    across many sites (see FixOrchestrator.fix_all).
    """
    title:    str
    strategy: ResolutionStrategy
    _apply:   Callable[[Optional[CancellationToken]], str] = field(repr=False, compare=False)

    @property
    def equivalence_key(self) -> str:
        return self.title

    def apply(self, cancel_token: Optional[CancellationToken] = None) -> str:
        """Return the edited document, or the original one if the fix failed."""
        return self._apply(cancel_token)

    def __str__(self) -> str:
        return f"CodeAction({self.title!r} via {self.strategy.value})"
