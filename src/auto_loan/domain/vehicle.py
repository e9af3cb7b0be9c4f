from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Vehicle:
    id: str
    make: str
    model: str
    year: int

    @property
    def label(self) -> str:
        """Display label used on loan summaries, e.g. '2021 Toyota Corolla'."""
        return f"{self.year} {self.make} {self.model}"
