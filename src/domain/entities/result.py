"""Result values returned by the profile state machine."""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from core.exceptions import ProfileErrorCode

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Err:
    """Failed outcome carrying a caller-visible error code."""

    code: ProfileErrorCode

    @property
    def is_ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]
