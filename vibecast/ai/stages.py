"""
Explicit results for trend pipeline stage boundaries.

Each stage returns Ok(value) or Err(kind, error); the trend analyzer maps
every Err to its documented fallback.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

from vibecast.core.exceptions import VibeCastException

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Enumeration of pipeline failure kinds."""
    SOURCE_UNAVAILABLE = "source_unavailable"
    ANALYSIS_FAILURE = "analysis_failure"
    SYNTHESIS_FAILURE = "synthesis_failure"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    error: VibeCastException

    @property
    def ok(self) -> bool:
        return False


StageResult = Union[Ok[T], Err]
