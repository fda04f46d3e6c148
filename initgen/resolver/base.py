"""Abstract base class for all resolvers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from .models import MappingElement, ResolutionStrategy, ResolveContext

__all__ = ["AbstractResolver"]


class AbstractResolver(ABC):
    """
    Chooses the value expression for one target member.

    Each concrete subclass implements one ResolutionStrategy.  Resolvers
    hold no state: everything they consult arrives in the ResolveContext,
    so one instance may serve concurrent, independent invocations.
    """

    @abstractmethod
    def resolve(
        self,
        member_name: str,
        member_type: str,
        context: ResolveContext,
    ) -> Optional[MappingElement]:
        """
        Return the MappingElement supplying `member_name`, or None when no
        candidate fits.  A returned element's type must be assignable to
        `member_type`.  Never raises for an unmatched member.
        """

    @property
    @abstractmethod
    def strategy(self) -> ResolutionStrategy:
        """The ResolutionStrategy this resolver implements."""
