"""
Mapping-source resolvers — decide which expression supplies each member.

Each resolver takes a member name + type and a ResolveContext and returns a
MappingElement, or None when no candidate fits.
"""

from .base import AbstractResolver
from .factory import get_resolver
from .local_scope_resolver import LocalScopeResolver
from .models import (
    CancellationToken,
    LocalBinding,
    MappingElement,
    ResolutionStrategy,
    ResolveContext,
    SourceObject,
)
from .object_member_resolver import ObjectMemberResolver
from .scaffolding_resolver import ScaffoldingResolver

__all__ = [
    "AbstractResolver",
    "get_resolver",
    "LocalScopeResolver",
    "ObjectMemberResolver",
    "ScaffoldingResolver",
    "CancellationToken",
    "LocalBinding",
    "MappingElement",
    "ResolutionStrategy",
    "ResolveContext",
    "SourceObject",
]
