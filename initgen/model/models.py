"""
Data models for the type model — the canonical TypeInfo format.

Key concepts
────────────
TypeKind     — class / struct / interface / enum
SpecialType  — classification of built-in types (drives scaffolding)
MemberInfo   — one declared property or field of a type
TypeInfo     — a named type with its declared members and base type
Member       — an enumerated member: MemberInfo + the type that declared it
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

__all__ = [
    "TypeKind",
    "SpecialType",
    "MemberKind",
    "MemberInfo",
    "TypeInfo",
    "Member",
]


class TypeKind(str, Enum):
    CLASS     = "class"
    STRUCT    = "struct"
    INTERFACE = "interface"
    ENUM      = "enum"


class SpecialType(str, Enum):
    """
    Built-in type categories.

    Every user-declared type is NONE; only the predefined types in
    `initgen.model.builtins` carry another value.
    """
    NONE    = "none"
    BOOLEAN = "boolean"
    SBYTE   = "sbyte"
    BYTE    = "byte"
    INT16   = "int16"
    UINT16  = "uint16"
    INT32   = "int32"
    UINT32  = "uint32"
    INT64   = "int64"
    UINT64  = "uint64"
    SINGLE  = "single"
    DOUBLE  = "double"
    CHAR    = "char"
    STRING  = "string"
    DECIMAL = "decimal"
    OBJECT  = "object"


class MemberKind(str, Enum):
    PROPERTY = "property"
    FIELD    = "field"


@dataclass
class MemberInfo:
    name:        str
    type:        str              # type name, resolved through a TypeModel
    kind:        MemberKind = MemberKind.PROPERTY
    is_writable: bool = True      # has a setter / is not readonly
    is_readable: bool = True      # has a getter
    is_static:   bool = False
    is_indexer:  bool = False
    is_public:   bool = True

    def to_dict(self) -> dict:
        d = {"name": self.name, "type": self.type}
        if self.kind is not MemberKind.PROPERTY:
            d["kind"] = self.kind.value
        for flag, default in (
            ("is_writable", True),
            ("is_readable", True),
            ("is_static", False),
            ("is_indexer", False),
            ("is_public", True),
        ):
            if getattr(self, flag) != default:
                d[flag] = getattr(self, flag)
        return d

    @classmethod
    def from_dict(cls, data: dict) -> "MemberInfo":
        return cls(
            name=data["name"],
            type=data["type"],
            kind=MemberKind(data.get("kind", MemberKind.PROPERTY.value)),
            is_writable=data.get("is_writable", True),
            is_readable=data.get("is_readable", True),
            is_static=data.get("is_static", False),
            is_indexer=data.get("is_indexer", False),
            is_public=data.get("is_public", True),
        )


@dataclass
class TypeInfo:
    """
    A named type as seen by the resolvers.

    `members` holds only the members declared on this type; inherited
    members are reached through `base`.  `enum_values` is meaningful only
    when kind is ENUM and keeps declaration order.
    """
    name:        str
    kind:        TypeKind = TypeKind.CLASS
    special:     SpecialType = SpecialType.NONE
    base:        Optional[str] = None
    interfaces:  list[str] = field(default_factory=list)
    members:     list[MemberInfo] = field(default_factory=list)
    enum_values: list[str] = field(default_factory=list)

    @property
    def is_enum(self) -> bool:
        return self.kind is TypeKind.ENUM

    @property
    def short_name(self) -> str:
        """Name without namespace qualification, e.g. "Gender" for "App.Gender"."""
        return self.name.rsplit(".", 1)[-1]

    def find_member(self, name: str) -> Optional[MemberInfo]:
        """Case-sensitive lookup among the declared members."""
        for m in self.members:
            if m.name == name:
                return m
        return None

    # ── Serialisation ─────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        d: dict = {"name": self.name, "kind": self.kind.value}
        if self.base:
            d["base"] = self.base
        if self.interfaces:
            d["interfaces"] = list(self.interfaces)
        if self.is_enum:
            d["values"] = list(self.enum_values)
        else:
            d["members"] = [m.to_dict() for m in self.members]
        return d

    @classmethod
    def from_dict(cls, data: dict) -> "TypeInfo":
        return cls(
            name=data["name"],
            kind=TypeKind(data.get("kind", TypeKind.CLASS.value)),
            base=data.get("base"),
            interfaces=list(data.get("interfaces", [])),
            members=[MemberInfo.from_dict(m) for m in data.get("members", [])],
            enum_values=list(data.get("values", [])),
        )


@dataclass(frozen=True)
class Member:
    """A member produced by the Member Enumerator."""
    name:           str
    type:           str
    declaring_type: str

    def __str__(self) -> str:
        return f"{self.declaring_type}.{self.name}: {self.type}"
