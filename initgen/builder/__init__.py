"""Initializer builder — assembles resolved members into an initializer block."""

from .initializer_builder import build, build_creation, compose

__all__ = ["build", "build_creation", "compose"]
