"""
ScaffoldingResolver — deterministic placeholder values, no source needed.

Placeholders are arbitrary values of the right type, fixed so that two runs
over the same type produce byte-identical initializers:

    bool     true            char     'a'
    sbyte    1               string   "lorem ipsum"
    byte     1               decimal  2.0m
    short    16              float    1.0f
    ushort   16              double   1.0
    int      32              object   (unresolved)
    uint     32              enum     First.Value  /  default(T) if empty
    long     64              other    "ccc"
    ulong    64
"""

from __future__ import annotations

import logging
from typing import Optional

from initgen.model.models import SpecialType, TypeInfo
from initgen.syntax.models import DefaultExpression, Expr, Identifier, Literal, MemberAccess
from .base import AbstractResolver
from .models import MappingElement, ResolutionStrategy, ResolveContext

__all__ = ["ScaffoldingResolver"]

logger = logging.getLogger(__name__)

_PLACEHOLDERS: dict[SpecialType, Literal] = {
    SpecialType.BOOLEAN: Literal.boolean(True),
    SpecialType.SBYTE:   Literal.number(1),
    SpecialType.BYTE:    Literal.number(1),
    SpecialType.INT16:   Literal.number(16),
    SpecialType.UINT16:  Literal.number(16),
    SpecialType.INT32:   Literal.number(32),
    SpecialType.UINT32:  Literal.number(32),
    SpecialType.INT64:   Literal.number(64),
    SpecialType.UINT64:  Literal.number(64),
    SpecialType.SINGLE:  Literal.number(1.0, "f"),
    SpecialType.DOUBLE:  Literal.number(1.0),
    SpecialType.CHAR:    Literal.char("a"),
    SpecialType.STRING:  Literal.string("lorem ipsum"),
    SpecialType.DECIMAL: Literal.number(2.0, "m"),
}

# Used for any type without a dedicated placeholder
_OPAQUE_PLACEHOLDER = Literal.string("ccc")


class ScaffoldingResolver(AbstractResolver):
    """Resolver producing sample values for every type except object."""

    @property
    def strategy(self) -> ResolutionStrategy:
        return ResolutionStrategy.SCAFFOLDING

    # ── Public API ────────────────────────────────────────────────────────

    def resolve(
        self,
        member_name: str,
        member_type: str,
        context: ResolveContext,
    ) -> Optional[MappingElement]:
        type_info = context.type_model.get_type(member_type)
        expression = self.default_expression(type_info, context)
        if expression is None:
            logger.debug("No placeholder for %s: %s", member_name, member_type)
            return None
        return MappingElement(expression=expression, expression_type=member_type)

    def default_expression(
        self,
        type_info: Optional[TypeInfo],
        context: ResolveContext,
    ) -> Optional[Expr]:
        """
        Placeholder expression for a type; None only for the universal
        object type.  Unknown types (`type_info` None) get the opaque
        placeholder.
        """
        if type_info is not None and type_info.is_enum:
            values = context.type_model.enum_values(type_info)
            if values:
                return MemberAccess(Identifier(type_info.short_name), values[0])
            return DefaultExpression(type_info.short_name)

        special = type_info.special if type_info is not None else SpecialType.NONE
        if special is SpecialType.OBJECT:
            return None
        return _PLACEHOLDERS.get(special, _OPAQUE_PLACEHOLDER)
