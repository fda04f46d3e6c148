"""
Predefined (built-in) types and the implicit numeric conversion table.

Built-ins are keyed by their C# keyword; framework names such as
"System.Int32" are accepted as aliases.
"""

from .models import SpecialType, TypeInfo, TypeKind

__all__ = [
    "BUILTIN_TYPES",
    "OBJECT_TYPE",
    "canonical_name",
    "builtin_type",
    "has_implicit_numeric_conversion",
]

OBJECT_TYPE = "object"

_KEYWORDS: dict[str, SpecialType] = {
    "bool":    SpecialType.BOOLEAN,
    "sbyte":   SpecialType.SBYTE,
    "byte":    SpecialType.BYTE,
    "short":   SpecialType.INT16,
    "ushort":  SpecialType.UINT16,
    "int":     SpecialType.INT32,
    "uint":    SpecialType.UINT32,
    "long":    SpecialType.INT64,
    "ulong":   SpecialType.UINT64,
    "float":   SpecialType.SINGLE,
    "double":  SpecialType.DOUBLE,
    "char":    SpecialType.CHAR,
    "string":  SpecialType.STRING,
    "decimal": SpecialType.DECIMAL,
    "object":  SpecialType.OBJECT,
}

_ALIASES = {
    "System.Boolean": "bool",
    "System.SByte":   "sbyte",
    "System.Byte":    "byte",
    "System.Int16":   "short",
    "System.UInt16":  "ushort",
    "System.Int32":   "int",
    "System.UInt32":  "uint",
    "System.Int64":   "long",
    "System.UInt64":  "ulong",
    "System.Single":  "float",
    "System.Double":  "double",
    "System.Char":    "char",
    "System.String":  "string",
    "System.Decimal": "decimal",
    "System.Object":  "object",
}

_STRUCT_SPECIALS = frozenset(_KEYWORDS.values()) - {SpecialType.STRING, SpecialType.OBJECT}

BUILTIN_TYPES: dict[str, TypeInfo] = {
    name: TypeInfo(
        name=name,
        kind=TypeKind.STRUCT if special in _STRUCT_SPECIALS else TypeKind.CLASS,
        special=special,
        base=None if special is SpecialType.OBJECT else OBJECT_TYPE,
    )
    for name, special in _KEYWORDS.items()
}

# source → targets reachable by an implicit numeric conversion
_IMPLICIT_NUMERIC: dict[str, frozenset[str]] = {
    "sbyte":  frozenset({"short", "int", "long", "float", "double", "decimal"}),
    "byte":   frozenset({"short", "ushort", "int", "uint", "long", "ulong",
                         "float", "double", "decimal"}),
    "short":  frozenset({"int", "long", "float", "double", "decimal"}),
    "ushort": frozenset({"int", "uint", "long", "ulong", "float", "double", "decimal"}),
    "int":    frozenset({"long", "float", "double", "decimal"}),
    "uint":   frozenset({"long", "ulong", "float", "double", "decimal"}),
    "long":   frozenset({"float", "double", "decimal"}),
    "ulong":  frozenset({"float", "double", "decimal"}),
    "char":   frozenset({"ushort", "int", "uint", "long", "ulong",
                         "float", "double", "decimal"}),
    "float":  frozenset({"double"}),
}


def canonical_name(name: str) -> str:
    """Map framework aliases onto keyword names; other names pass through."""
    return _ALIASES.get(name, name)


def builtin_type(name: str) -> TypeInfo | None:
    return BUILTIN_TYPES.get(canonical_name(name))


def has_implicit_numeric_conversion(source: str, target: str) -> bool:
    return canonical_name(target) in _IMPLICIT_NUMERIC.get(canonical_name(source), ())
