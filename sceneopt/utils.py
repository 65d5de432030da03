"""Shared helpers for primitive arrays and argument broadcasting."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Generic, Iterator, List, Optional, Sequence, Tuple, TypeVar

import numpy as np

Point2D = Tuple[float, float]

P = TypeVar("P")


def is_sequence(value: object) -> bool:
    """Return ``True`` for list-like arguments that should be broadcast."""

    return isinstance(value, (list, tuple, np.ndarray))


def broadcast(*columns: Any) -> List[Tuple[Any, ...]]:
    """Zip scalar and sequence arguments, cycling the shorter sequences.

    The result has as many rows as the longest sequence argument, or a single
    row when every argument is a scalar.
    """

    lengths = [len(col) for col in columns if is_sequence(col)]
    if any(length == 0 for length in lengths):
        raise ValueError("cannot broadcast an empty sequence")
    n = max(lengths, default=1)
    rows: List[Tuple[Any, ...]] = []
    for i in range(n):
        rows.append(tuple(col[i % len(col)] if is_sequence(col) else col for col in columns))
    return rows


def as_point(value: Sequence[float]) -> Point2D:
    if len(value) != 2:
        raise ValueError(f"expected an (x, y) pair, got {value!r}")
    return (as_finite(value[0], "coordinate"), as_finite(value[1], "coordinate"))


def as_finite(value: object, what: str) -> float:
    number = float(value)  # type: ignore[arg-type]
    if math.isnan(number) or math.isinf(number):
        raise ValueError(f"{what} must be finite, got {value!r}")
    return number


def as_length(value: object, what: str) -> float:
    number = as_finite(value, what)
    if number < 0:
        raise ValueError(f"{what} must be non-negative, got {value!r}")
    return number


@dataclass
class PrimitiveArray(Generic[P]):
    """Ordered primitives of a single kind; length 1 is a scalar."""

    primitives: List[P]
    tag: Optional[str] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        self.primitives = list(self.primitives)
        if not self.primitives:
            raise ValueError(f"{type(self).__name__} requires at least one primitive")
        first = type(self.primitives[0])
        for prim in self.primitives[1:]:
            if type(prim) is not first:
                raise ValueError(
                    f"{type(self).__name__} mixes {first.__name__} and {type(prim).__name__}"
                )

    def __len__(self) -> int:
        return len(self.primitives)

    def __iter__(self) -> Iterator[P]:
        return iter(self.primitives)

    def __getitem__(self, index: int) -> P:
        return self.primitives[index]

    @property
    def is_vector(self) -> bool:
        return len(self.primitives) > 1

    def select(self, indices: Sequence[int]):
        """Return a new array holding the elements at ``indices`` in order."""

        return type(self)([self.primitives[i] for i in indices], tag=self.tag)
