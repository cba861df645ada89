"""Editions: named timelines with optional per-domain divergence points."""

from __future__ import annotations

from dataclasses import dataclass, field

from .constants import DEFAULT_EDITION


@dataclass
class DomainDivergence:
    """The sequence at which an edition diverges from main for a domain."""

    domain: str = ""
    sequence: int = 0


@dataclass
class Edition:
    """A named timeline. An empty name means the main timeline."""

    name: str = ""
    divergences: list[DomainDivergence] = field(default_factory=list)

    @classmethod
    def main_timeline(cls) -> Edition:
        """Create an edition for the main timeline (empty name)."""
        return cls()

    @classmethod
    def implicit(cls, name: str) -> Edition:
        """Create an edition with a name and no explicit divergences."""
        return cls(name=name)

    @classmethod
    def explicit(cls, name: str, divergences: list[DomainDivergence]) -> Edition:
        """Create an edition with explicit divergence points."""
        return cls(name=name, divergences=list(divergences))

    def is_empty(self) -> bool:
        return not self.name

    def is_main_timeline(self) -> bool:
        return not self.name or self.name == DEFAULT_EDITION

    def name_or_default(self) -> str:
        return self.name or DEFAULT_EDITION

    def divergence_for(self, domain: str) -> int | None:
        """Return the explicit divergence sequence for a domain, if any."""
        return next(
            (d.sequence for d in self.divergences if d.domain == domain), None
        )