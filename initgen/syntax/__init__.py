"""
syntax — expression / object-creation models and their C# rendering.
"""

from .models import (
    Assignment,
    DefaultExpression,
    Expr,
    Identifier,
    InitializerSite,
    LambdaInfo,
    Literal,
    MemberAccess,
    ObjectCreation,
    Parameter,
    Span,
)
from .render import FormatConfig, render_creation, render_expression

__all__ = [
    "Assignment",
    "DefaultExpression",
    "Expr",
    "Identifier",
    "InitializerSite",
    "LambdaInfo",
    "Literal",
    "MemberAccess",
    "ObjectCreation",
    "Parameter",
    "Span",
    "FormatConfig",
    "render_creation",
    "render_expression",
]
