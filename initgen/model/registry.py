"""
TypeRegistry — in-memory TypeModel adapter.

Hosts with a real compiler behind them supply their own TypeModel; the
registry serves the CLI and tests, and is the reference implementation of
assignment compatibility.

Usage::

    registry = TypeRegistry.from_dicts(request["types"])
    person = registry.require("Person")
    registry.is_assignable("int", "long")   # True
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from initgen.exceptions import TypeModelError, UnknownTypeError
from .builtins import OBJECT_TYPE, builtin_type, canonical_name, has_implicit_numeric_conversion
from .models import MemberInfo, TypeInfo

__all__ = ["TypeRegistry"]

logger = logging.getLogger(__name__)


class TypeRegistry:
    """Name → TypeInfo map with the built-in types pre-registered."""

    def __init__(self, types: Iterable[TypeInfo] = ()) -> None:
        self._types: dict[str, TypeInfo] = {}
        for t in types:
            self.register(t)

    @classmethod
    def from_dicts(cls, data: Iterable[dict]) -> "TypeRegistry":
        return cls(TypeInfo.from_dict(d) for d in data)

    # ── Registration ──────────────────────────────────────────────────────────

    def register(self, type_info: TypeInfo) -> None:
        name = canonical_name(type_info.name)
        if builtin_type(name) is not None:
            raise TypeModelError(f"Cannot redefine built-in type: {name}")
        if name in self._types:
            raise TypeModelError(f"Duplicate type definition: {name}")
        self._types[name] = type_info

    def __contains__(self, name: str) -> bool:
        return self.get_type(name) is not None

    # ── TypeModel port ────────────────────────────────────────────────────────

    def get_type(self, name: str) -> Optional[TypeInfo]:
        return builtin_type(name) or self._types.get(canonical_name(name))

    def require(self, name: str) -> TypeInfo:
        t = self.get_type(name)
        if t is None:
            raise UnknownTypeError(f"Unknown type: {name}")
        return t

    def declared_members(self, type_info: TypeInfo) -> list[MemberInfo]:
        return list(type_info.members)

    def base_type(self, type_info: TypeInfo) -> Optional[TypeInfo]:
        if not type_info.base:
            return None
        base = self.get_type(type_info.base)
        if base is None:
            logger.debug("Base type %s of %s is not registered", type_info.base, type_info.name)
        return base

    def enum_values(self, type_info: TypeInfo) -> list[str]:
        return list(type_info.enum_values) if type_info.is_enum else []

    def is_assignable(self, source: str, target: str) -> bool:
        """
        True when a value of type `source` may be assigned to a member of
        type `target` without an explicit conversion.
        """
        source = canonical_name(source)
        target = canonical_name(target)
        if source == target or target == OBJECT_TYPE:
            return True
        if has_implicit_numeric_conversion(source, target):
            return True
        return target in self._supertypes(source)

    # ── Internal helpers ──────────────────────────────────────────────────────

    def _supertypes(self, name: str) -> set[str]:
        """All base types and interfaces reachable from `name`."""
        seen: set[str] = set()
        worklist = [name]
        while worklist:
            t = self.get_type(worklist.pop())
            if t is None:
                continue
            for parent in ([t.base] if t.base else []) + list(t.interfaces):
                parent = canonical_name(parent)
                if parent not in seen:
                    seen.add(parent)
                    worklist.append(parent)
        return seen
