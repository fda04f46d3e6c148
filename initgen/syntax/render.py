"""
Renderer — turns expression and object-creation models into C# source text.

Rendering is purely syntactic: it never consults the type model.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .models import (
    DefaultExpression,
    Expr,
    Identifier,
    Literal,
    MemberAccess,
    ObjectCreation,
)

__all__ = ["FormatConfig", "render_expression", "render_creation"]

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class FormatConfig:
    """Layout options for the generated initializer."""
    multiline: bool = True     # one assignment per line
    indent:    str  = "    "   # added per nesting level

    @classmethod
    def from_env(cls) -> "FormatConfig":
        """
        Read INITGEN_MULTILINE and INITGEN_INDENT_SIZE; unset or invalid
        values fall back to the defaults.
        """
        config = cls()
        multiline = os.getenv("INITGEN_MULTILINE")
        if multiline is not None:
            config.multiline = multiline.strip().lower() not in _FALSE_VALUES
        size = os.getenv("INITGEN_INDENT_SIZE", "")
        if size.isdigit():
            config.indent = " " * int(size)
        return config


def render_expression(expr: Expr) -> str:
    if isinstance(expr, Literal):
        return expr.text
    if isinstance(expr, Identifier):
        return expr.name
    if isinstance(expr, MemberAccess):
        return f"{render_expression(expr.target)}.{expr.name}"
    if isinstance(expr, DefaultExpression):
        return f"default({expr.type_name})"
    raise TypeError(f"Cannot render expression: {expr!r}")


def render_creation(
    creation: ObjectCreation,
    config: FormatConfig | None = None,
    base_indent: str = "",
) -> str:
    """
    Render `new T(args) { ... }`.

    `base_indent` is the indentation of the line the expression starts on;
    in multi-line mode the braces align with it and entries are indented
    one level deeper.
    """
    config = config or FormatConfig()
    head = f"new {creation.type_name}"
    if creation.arguments is not None:
        head += f"({', '.join(creation.arguments)})"

    entries = [f"{a.name} = {render_expression(a.value)}" for a in creation.initializer]
    if not entries:
        return f"{head} {{ }}"
    if not config.multiline:
        return f"{head} {{ {', '.join(entries)} }}"

    inner = base_indent + config.indent
    body = ",\n".join(inner + e for e in entries)
    return f"{head}\n{base_indent}{{\n{body}\n{base_indent}}}"
