"""
FixOrchestrator — the boundary between the host and the resolvers.

Offered actions, in this order:
  1. "Initialize with local variables"   — always
  2. "Initialize with sample values"     — always
  3. "Initialize with lambda parameter"  — only when the initializer sits in
     a lambda with exactly one parameter whose type resolves

Applying an action builds a fresh resolver and context, runs the
InitializerBuilder and hands the new creation text to the DocumentEditor.
Any failure leaves the document untouched: the original text is returned.
"""

from __future__ import annotations

import logging
from typing import Optional

from initgen.builder.initializer_builder import build_creation
from initgen.exceptions import DocumentEditError, FixError, OperationCancelledError, TargetTypeUnresolvedError
from initgen.resolver.factory import get_resolver
from initgen.resolver.models import CancellationToken, ResolutionStrategy, ResolveContext, SourceObject
from initgen.syntax.models import InitializerSite, ObjectCreation
from initgen.syntax.render import FormatConfig, render_creation
from .models import TITLES, CodeAction, FixHost

__all__ = ["FixOrchestrator"]

logger = logging.getLogger(__name__)


class FixOrchestrator:
    """
    Offers and applies initializer fixes.

    Usage::

        orchestrator = FixOrchestrator(host)
        actions = orchestrator.offer_fixes(text, offset)
        print([a.title for a in actions])
        new_text = actions[0].apply()
    """

    def __init__(self, host: FixHost, config: Optional[FormatConfig] = None) -> None:
        self.host = host
        self.config = config or FormatConfig()

    # ── Public API ────────────────────────────────────────────────────────────

    def offer_fixes(self, document: str, location: int) -> list[CodeAction]:
        """Actions applicable to the empty initializer at `location` (may be empty)."""
        site = self.host.locator.find_empty_initializer(document, location)
        if site is None:
            logger.debug("No empty initializer at offset %d", location)
            return []

        strategies = [ResolutionStrategy.LOCALS, ResolutionStrategy.SCAFFOLDING]
        if self.source_object(site) is not None:
            strategies.append(ResolutionStrategy.LAMBDA_PARAMETER)

        return [self._make_action(document, site, s) for s in strategies]

    def apply_fix(
        self,
        document: str,
        site: InitializerSite,
        strategy: ResolutionStrategy,
        cancel_token: Optional[CancellationToken] = None,
    ) -> str:
        """Rewrite one site; the original document is returned on failure."""
        try:
            text = self.render_fix(document, site, strategy, cancel_token)
            new_document = self.host.editor.replace(document, site.span, text)
        except OperationCancelledError:
            logger.info("%s cancelled; document unchanged", TITLES[strategy])
            return document
        except (FixError, DocumentEditError) as exc:
            logger.warning("%s aborted: %s", TITLES[strategy], exc)
            return document

        logger.info("Applied %r to new %s", TITLES[strategy], site.creation.type_name)
        return new_document

    def fix_all(
        self,
        document: str,
        strategy: ResolutionStrategy | str,
        cancel_token: Optional[CancellationToken] = None,
    ) -> str:
        """
        Apply one strategy to every empty initializer in the document as a
        single edit.  Sites the strategy cannot serve (no target type, no
        single-parameter lambda) are skipped; cancellation or an editor
        error leaves the whole document unchanged.

        Sites nested in the constructor arguments of another site are
        rewritten first and their new text is spliced into the outer
        creation, so both end up in one edit.
        """
        strategy = ResolutionStrategy(strategy)
        edits: list[tuple[InitializerSite, str]] = []
        try:
            sites = self.host.locator.find_all_empty_initializers(document)
            for site in sorted(sites, key=lambda s: s.span.end - s.span.start):
                nested = _outermost([e for e in edits if site.span.encloses(e[0].span)])
                try:
                    creation = _splice_arguments(document, site, nested)
                    text = self.render_fix(document, site, strategy, cancel_token, creation)
                except OperationCancelledError:
                    raise
                except FixError as exc:
                    logger.debug("Skipping new %s: %s", site.creation.type_name, exc)
                    continue
                edits = [e for e in edits if e not in nested]
                edits.append((site, text))
            if not edits:
                return document
            new_document = self.host.editor.replace_many(document, [(s.span, t) for s, t in edits])
        except OperationCancelledError:
            logger.info("Fix-all %r cancelled; document unchanged", TITLES[strategy])
            return document
        except DocumentEditError as exc:
            logger.warning("Fix-all %r aborted: %s", TITLES[strategy], exc)
            return document

        logger.info("Fix-all %r rewrote %d initializer(s)", TITLES[strategy], len(edits))
        return new_document

    # ── Building blocks ───────────────────────────────────────────────────────

    def source_object(self, site: InitializerSite) -> Optional[SourceObject]:
        """The enclosing lambda's parameter, if there is exactly one and its type resolves."""
        lam = site.enclosing_lambda
        if lam is None or len(lam.parameters) != 1:
            return None
        param = lam.parameters[0]
        param_type = self.host.symbols.lambda_parameter_type(site, param)
        if param_type is None:
            logger.debug("Type of lambda parameter %s is unresolvable", param.name)
            return None
        return SourceObject(expression=param.name, type=param_type)

    def render_fix(
        self,
        document: str,
        site: InitializerSite,
        strategy: ResolutionStrategy,
        cancel_token: Optional[CancellationToken] = None,
        creation: Optional[ObjectCreation] = None,
    ) -> str:
        """
        Source text of the rewritten creation expression.  `creation`
        overrides the site's own creation, e.g. with rewritten arguments.

        Raises:
            TargetTypeUnresolvedError: the created type is unknown.
            FixError: the strategy needs a lambda parameter that is missing.
            OperationCancelledError: cancelled mid-way.
        """
        type_name = self.host.symbols.type_of_creation(site)
        target = self.host.type_model.get_type(type_name) if type_name else None
        if target is None:
            raise TargetTypeUnresolvedError(f"Cannot resolve created type {site.creation.type_name!r}")

        context = ResolveContext(type_model=self.host.type_model, cancel_token=cancel_token)
        if strategy is ResolutionStrategy.LOCALS:
            context.scope = self.host.scopes.visible_bindings(document, site.initializer_span.start)
        elif strategy is ResolutionStrategy.LAMBDA_PARAMETER:
            context.source_object = self.source_object(site)
            if context.source_object is None:
                raise FixError("Initializer is not inside a single-parameter lambda")

        creation = build_creation(creation or site.creation, target, get_resolver(strategy), context)
        return render_creation(creation, self.config, base_indent=_line_indent(document, site.span.start))

    # ── Internal helpers ──────────────────────────────────────────────────────

    def _make_action(self, document: str, site: InitializerSite, strategy: ResolutionStrategy) -> CodeAction:
        return CodeAction(
            title=TITLES[strategy],
            strategy=strategy,
            _apply=lambda token: self.apply_fix(document, site, strategy, token),
        )


def _outermost(edits: list[tuple[InitializerSite, str]]) -> list[tuple[InitializerSite, str]]:
    """Edits not enclosed by another edit of the list."""
    return [e for e in edits if not any(o[0].span.encloses(e[0].span) for o in edits)]


def _splice_arguments(
    document: str,
    site: InitializerSite,
    nested: list[tuple[InitializerSite, str]],
) -> ObjectCreation:
    """`site`'s creation with the rewritten text of `nested` sites substituted into its arguments."""
    if not nested or site.creation.arguments is None:
        return site.creation
    arguments = list(site.creation.arguments)
    # Left to right: identical nested texts map to successive occurrences.
    index, pos = 0, 0
    for inner, text in sorted(nested, key=lambda e: e[0].span.start):
        original = document[inner.span.start:inner.span.end]
        for i in range(index, len(arguments)):
            found = arguments[i].find(original, pos if i == index else 0)
            if found >= 0:
                arguments[i] = arguments[i][:found] + text + arguments[i][found + len(original):]
                index, pos = i, found + len(text)
                break
        else:
            logger.debug("new %s not found in arguments of new %s; left as is",
                         inner.creation.type_name, site.creation.type_name)
    return site.creation.with_arguments(arguments)


def _line_indent(document: str, offset: int) -> str:
    """Leading whitespace of the line containing `offset`."""
    line_start = document.rfind("\n", 0, offset) + 1
    line = document[line_start:offset]
    return line[:len(line) - len(line.lstrip(" \t"))]
