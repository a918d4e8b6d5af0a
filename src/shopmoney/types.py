"""Dataclasses shared by the price facet helpers."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PriceRange:
    """Inclusive price bounds in minor units."""
    min_cents: int = 0
    max_cents: int = 0

    def clamp(self, cents: int) -> int:
        """Pull a value back inside the range."""
        if cents < self.min_cents:
            return self.min_cents
        if cents > self.max_cents:
            return self.max_cents
        return cents

    def contains(self, cents: int) -> bool:
        return self.min_cents <= cents <= self.max_cents
