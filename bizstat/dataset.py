"""Canonical in-memory dataset types consumed by every statistical engine."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence

import numpy as np

from .errors import EmptyDatasetError, InsufficientDataError, MismatchedLengthError


@dataclass(frozen=True)
class WeightedValue:
    """One distinct observation and how many times it occurs."""

    value: float
    frequency: int = 1

    def __post_init__(self) -> None:
        if not math.isfinite(self.value):
            raise ValueError(f"Observation must be a finite number, got {self.value!r}")
        if int(self.frequency) != self.frequency or self.frequency < 1:
            raise ValueError(f"Frequency must be an integer >= 1, got {self.frequency!r}")


@dataclass(frozen=True)
class Dataset:
    """Non-empty, immutable sequence of :class:`WeightedValue`.

    The order of ``items`` is the order the values were entered. Formulas
    that need a sorted sample (median, quartiles, percentiles) use
    :meth:`expanded`, which repeats each value ``frequency`` times and sorts
    the result.
    """

    items: tuple[WeightedValue, ...]

    def __post_init__(self) -> None:
        items = tuple(self.items)
        if not items:
            raise EmptyDatasetError("Dataset requires at least one valid value.")
        object.__setattr__(self, "items", items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[WeightedValue]:
        return iter(self.items)

    @property
    def values(self) -> np.ndarray:
        return np.array([item.value for item in self.items], dtype=float)

    @property
    def frequencies(self) -> np.ndarray:
        return np.array([item.frequency for item in self.items], dtype=int)

    @property
    def total_frequency(self) -> int:
        return int(sum(item.frequency for item in self.items))

    def expanded(self) -> np.ndarray:
        """Return the frequency-expanded sample sorted ascending."""
        return np.sort(np.repeat(self.values, self.frequencies), kind="stable")


@dataclass(frozen=True)
class PairedDataset:
    """Equal-length x/y observations used for correlation.

    Raises:
        MismatchedLengthError: If ``x`` and ``y`` differ in length.
        InsufficientDataError: If fewer than two pairs are supplied.
    """

    x: tuple[float, ...]
    y: tuple[float, ...]

    def __post_init__(self) -> None:
        x = tuple(float(v) for v in self.x)
        y = tuple(float(v) for v in self.y)
        if len(x) != len(y):
            raise MismatchedLengthError(
                f"x and y must have the same length, got {len(x)} and {len(y)}."
            )
        if len(x) < 2:
            raise InsufficientDataError(
                f"Correlation requires at least 2 pairs, got {len(x)}."
            )
        if not all(math.isfinite(v) for v in x + y):
            raise ValueError("Paired observations must be finite numbers.")
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    def __len__(self) -> int:
        return len(self.x)

    @classmethod
    def from_sequences(cls, x: Sequence[float], y: Sequence[float]) -> "PairedDataset":
        return cls(tuple(x), tuple(y))

    def arrays(self) -> tuple[np.ndarray, np.ndarray]:
        return np.asarray(self.x, dtype=float), np.asarray(self.y, dtype=float)
