"""
LocalScopeResolver — match members against bindings visible at the edit site.

Matching rules, tried in order (first success wins):
  1. exact, case-sensitive name  AND  binding type assignable to the member
  2. exact type match            AND  case-insensitive name

Within each rule the first binding in scope order wins: nearest enclosing
scope first, then earliest declared.  The rule-2 tie-break is deliberately
positional; there is no stronger signal to rank equally-typed candidates.
"""

from __future__ import annotations

import logging
from typing import Optional

from initgen.model.builtins import canonical_name
from initgen.syntax.models import Identifier
from .base import AbstractResolver
from .models import LocalBinding, MappingElement, ResolutionStrategy, ResolveContext

__all__ = ["LocalScopeResolver"]

logger = logging.getLogger(__name__)


class LocalScopeResolver(AbstractResolver):
    """Resolver for values held in local variables and parameters."""

    @property
    def strategy(self) -> ResolutionStrategy:
        return ResolutionStrategy.LOCALS

    def resolve(
        self,
        member_name: str,
        member_type: str,
        context: ResolveContext,
    ) -> Optional[MappingElement]:
        binding = self.find_binding(member_name, member_type, context)
        if binding is None:
            return None
        logger.debug("%s ← local %s", member_name, binding)
        return MappingElement(expression=Identifier(binding.name), expression_type=binding.type)

    def find_binding(
        self,
        member_name: str,
        member_type: str,
        context: ResolveContext,
    ) -> Optional[LocalBinding]:
        type_model = context.type_model

        for b in context.scope:
            if b.name == member_name and type_model.is_assignable(b.type, member_type):
                return b

        lowered = member_name.lower()
        wanted = canonical_name(member_type)
        for b in context.scope:
            if canonical_name(b.type) == wanted and b.name.lower() == lowered:
                return b

        return None
