"""Factory function — returns the right resolver for a given strategy."""

from __future__ import annotations

from .base import AbstractResolver
from .local_scope_resolver import LocalScopeResolver
from .models import ResolutionStrategy
from .object_member_resolver import ObjectMemberResolver
from .scaffolding_resolver import ScaffoldingResolver

__all__ = ["get_resolver"]

_RESOLVER_TYPES: dict[ResolutionStrategy, type[AbstractResolver]] = {
    ResolutionStrategy.LOCALS:           LocalScopeResolver,
    ResolutionStrategy.SCAFFOLDING:      ScaffoldingResolver,
    ResolutionStrategy.LAMBDA_PARAMETER: ObjectMemberResolver,
}


def get_resolver(strategy: ResolutionStrategy | str) -> AbstractResolver:
    """
    Return a fresh resolver instance for the given strategy.

    Parameters
    ----------
    strategy : ResolutionStrategy or its value string, e.g. "locals"

    Raises
    ------
    ValueError if the strategy is unknown.
    """
    return _RESOLVER_TYPES[ResolutionStrategy(strategy)]()
