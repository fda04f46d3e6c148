"""
fixer — host-facing orchestration of the initializer fixes.

Public API
──────────
FixOrchestrator     — offers and applies the three actions
FixHost             — bundle of host port adapters
CodeAction          — an offered fix
StaticScopeProvider — in-memory ScopeProvider
SiteTable           — in-memory SyntaxLocator + SymbolResolver
TextDocumentEditor  — in-memory DocumentEditor
"""

from .adapters import ScopeFrame, SiteTable, StaticScopeProvider, TextDocumentEditor
from .models import TITLE_LAMBDA, TITLE_LOCALS, TITLE_SCAFFOLDING, TITLES, CodeAction, FixHost
from .orchestrator import FixOrchestrator

__all__ = [
    "FixOrchestrator",
    "FixHost",
    "CodeAction",
    "ScopeFrame",
    "SiteTable",
    "StaticScopeProvider",
    "TextDocumentEditor",
    "TITLE_LAMBDA",
    "TITLE_LOCALS",
    "TITLE_SCAFFOLDING",
    "TITLES",
]
