"""Page and sort value types."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class Direction(str, Enum):
    """Sort direction."""
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class Sort:
    """A single caller-supplied order-by entry."""
    property: str
    direction: Direction = Direction.ASC
    nulls_last: bool = False

    @classmethod
    def asc(cls, prop: str, *, nulls_last: bool = False) -> Sort:
        return cls(prop, Direction.ASC, nulls_last)

    @classmethod
    def desc(cls, prop: str, *, nulls_last: bool = False) -> Sort:
        return cls(prop, Direction.DESC, nulls_last)


@dataclass
class Page(Generic[T]):
    """A bounded slice of a result set plus the total matching count."""
    content: list[T] = field(default_factory=list)
    total_count: int = 0
    offset: int = 0
    limit: int = 1

    def __len__(self) -> int:
        return len(self.content)

    def __iter__(self) -> Iterator[T]:
        return iter(self.content)

    @property
    def number(self) -> int:
        """Zero-based page index."""
        return self.offset // self.limit

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.limit)

    @property
    def has_next(self) -> bool:
        return self.offset + len(self.content) < self.total_count

    @property
    def has_previous(self) -> bool:
        return self.offset > 0

    @property
    def is_first(self) -> bool:
        return not self.has_previous

    @property
    def is_last(self) -> bool:
        return not self.has_next
