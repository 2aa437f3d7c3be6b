"""Service Result — the success half of every service contract.

Invariants:
    - Every service operation returns Ok | Failure, never raises for expected outcomes
    - Ok(None) means "done, nothing to return" (logout, delete, reset)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from wordbank.core.errors import Failure

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A successful operation outcome."""
    value: T


Outcome = Union[Ok[T], Failure]
