"""
ObjectMemberResolver — match members against the members of a source object.

Used for `x => new Target { }` where `x` is the single lambda parameter:

  1. source type has a readable member with the same name and an
     assignable type                       → x.Member
  2. some readable member X of the source type has such a member
                                           → x.X.Member   (first X wins)
  3. otherwise unresolved

Names are the contract between the two objects: unlike LocalScopeResolver
there is no type-only fallback.
"""

from __future__ import annotations

import logging
from typing import Optional

from initgen.model.enumerator import readable_members
from initgen.model.models import Member, TypeInfo
from initgen.syntax.models import Identifier, MemberAccess
from .base import AbstractResolver
from .models import MappingElement, ResolutionStrategy, ResolveContext

__all__ = ["ObjectMemberResolver"]

logger = logging.getLogger(__name__)


class ObjectMemberResolver(AbstractResolver):
    """Resolver reading values from the members of `context.source_object`."""

    @property
    def strategy(self) -> ResolutionStrategy:
        return ResolutionStrategy.LAMBDA_PARAMETER

    def resolve(
        self,
        member_name: str,
        member_type: str,
        context: ResolveContext,
    ) -> Optional[MappingElement]:
        source = context.source_object
        if source is None:
            return None
        source_type = context.type_model.get_type(source.type)
        if source_type is None:
            logger.debug("Source type %s is unknown", source.type)
            return None

        root = Identifier(source.expression)

        direct = self._match(source_type, member_name, member_type, context)
        if direct is not None:
            return MappingElement(
                expression=MemberAccess(root, direct.name),
                expression_type=direct.type,
            )

        for outer in readable_members(source_type, context.type_model):
            outer_type = context.type_model.get_type(outer.type)
            if outer_type is None:
                continue
            nested = self._match(outer_type, member_name, member_type, context)
            if nested is not None:
                logger.debug("%s ← %s.%s.%s", member_name, source.expression, outer.name, nested.name)
                return MappingElement(
                    expression=MemberAccess(MemberAccess(root, outer.name), nested.name),
                    expression_type=nested.type,
                )

        return None

    # ── Internal helpers ──────────────────────────────────────────────────

    @staticmethod
    def _match(
        owner: TypeInfo,
        member_name: str,
        member_type: str,
        context: ResolveContext,
    ) -> Optional[Member]:
        for m in readable_members(owner, context.type_model):
            if m.name == member_name and context.type_model.is_assignable(m.type, member_type):
                return m
        return None
