"""A directed, optionally weighted edge between two vertices."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Edge(Generic[T]):
    """An arc from ``source`` to ``target``; unweighted edges weigh 0."""

    source: T
    target: T
    weight: int = 0