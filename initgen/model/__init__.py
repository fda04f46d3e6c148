"""
Type model — types, members, built-ins and the Member Enumerator.
"""

from .builtins import BUILTIN_TYPES, OBJECT_TYPE, canonical_name
from .enumerator import members, readable_members
from .models import Member, MemberInfo, MemberKind, SpecialType, TypeInfo, TypeKind
from .registry import TypeRegistry

__all__ = [
    "BUILTIN_TYPES",
    "OBJECT_TYPE",
    "canonical_name",
    "members",
    "readable_members",
    "Member",
    "MemberInfo",
    "MemberKind",
    "SpecialType",
    "TypeInfo",
    "TypeKind",
    "TypeRegistry",
]
