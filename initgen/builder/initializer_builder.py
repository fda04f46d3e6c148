"""
InitializerBuilder — drives the Member Enumerator and a resolver.

build()   → ordered (member name, expression) pairs, unresolved omitted
compose() → a copy of the object creation with those pairs as initializer

Omission is the normal outcome for unmatched members, never an error.
"""

from __future__ import annotations

import logging

from initgen.model.enumerator import members
from initgen.model.models import TypeInfo
from initgen.resolver.base import AbstractResolver
from initgen.resolver.models import ResolveContext
from initgen.syntax.models import Assignment, Expr, ObjectCreation

__all__ = ["build", "compose", "build_creation"]

logger = logging.getLogger(__name__)


def build(
    target_type: TypeInfo,
    resolver: AbstractResolver,
    context: ResolveContext,
) -> list[tuple[str, Expr]]:
    """
    Resolve every assignable member of `target_type` in enumerator order.

    Raises:
        OperationCancelledError: the context's token was cancelled between
            two member resolutions.
    """
    pairs: list[tuple[str, Expr]] = []
    for member in members(target_type, context.type_model):
        context.raise_if_cancelled()
        element = resolver.resolve(member.name, member.type, context)
        if element is None:
            logger.debug("Unresolved member %s (%s)", member, resolver.strategy.value)
            continue
        pairs.append((member.name, element.expression))

    logger.debug(
        "Resolved %d member(s) of %s via %s",
        len(pairs), target_type.name, resolver.strategy.value,
    )
    return pairs


def compose(creation: ObjectCreation, pairs: list[tuple[str, Expr]]) -> ObjectCreation:
    """Replace the initializer block; constructor arguments are kept as-is."""
    return creation.with_initializer(Assignment(name, expr) for name, expr in pairs)


def build_creation(
    creation: ObjectCreation,
    target_type: TypeInfo,
    resolver: AbstractResolver,
    context: ResolveContext,
) -> ObjectCreation:
    return compose(creation, build(target_type, resolver, context))
