"""
Member Enumerator — lists a type's members in a stable order.

Walk order
──────────
The target type first, then its base chain, most-derived to least-derived.
Within one type, members keep their declaration order.  A name is taken
once: the most-derived declaration wins even if a base redeclares it.

The walk is an explicit worklist over the base chain plus a seen-name set;
a base-chain cycle in a malformed model stops the walk instead of looping.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from .models import Member, MemberInfo, TypeInfo

if TYPE_CHECKING:
    from initgen.ports import TypeModel

__all__ = ["members", "readable_members", "walk_members"]

logger = logging.getLogger(__name__)


def _is_assignable_target(m: MemberInfo) -> bool:
    return m.is_writable and m.is_public and not m.is_static and not m.is_indexer


def _is_readable_source(m: MemberInfo) -> bool:
    return m.is_readable and m.is_public and not m.is_static and not m.is_indexer


def walk_members(
    type_info: TypeInfo,
    type_model: "TypeModel",
    predicate: Callable[[MemberInfo], bool],
) -> list[Member]:
    """
    Enumerate members of `type_info` and its bases that satisfy `predicate`.

    Names are deduplicated before the predicate is applied, so a read-only
    or static redeclaration in a derived type hides a base member of the
    same name.  Non-public members are skipped first: they are invisible
    to the code being written and hide nothing.
    """
    result: list[Member] = []
    seen_names: set[str] = set()
    visited_types: set[str] = set()

    worklist: list[TypeInfo] = [type_info]
    while worklist:
        current = worklist.pop()
        if current.name in visited_types:
            logger.warning("Cycle in base chain of %s at %s", type_info.name, current.name)
            break
        visited_types.add(current.name)

        for m in type_model.declared_members(current):
            if not m.is_public or m.name in seen_names:
                continue
            seen_names.add(m.name)
            if predicate(m):
                result.append(Member(name=m.name, type=m.type, declaring_type=current.name))

        base = type_model.base_type(current)
        if base is not None:
            worklist.append(base)

    return result


def members(type_info: TypeInfo, type_model: "TypeModel") -> list[Member]:
    """Writable public instance members: the ones an initializer may assign."""
    return walk_members(type_info, type_model, _is_assignable_target)


def readable_members(type_info: TypeInfo, type_model: "TypeModel") -> list[Member]:
    """Readable public instance members: the ones a source object can supply."""
    return walk_members(type_info, type_model, _is_readable_source)
