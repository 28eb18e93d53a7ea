from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from help_articles.domain.errors import DataError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    data: T


@dataclass(frozen=True)
class Failure:
    error: DataError


Result = Union[Success[T], Failure]
