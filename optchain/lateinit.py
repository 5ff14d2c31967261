from __future__ import annotations
from typing import Any, Generic, TypeVar

from .option import NONE, Option, Some

T = TypeVar("T")

_UNSET: Any = object()


class LateInit(Generic[T]):
    """A value assigned after construction that must be set before it is read.

    Reading an unset holder raises ``UnwrapError``.
    """
    def __init__(self, name: str = "value", initial: T = _UNSET):
        self.name = name
        self._value: Option[T] = NONE if initial is _UNSET else Some(initial)

    def is_initialized(self) -> bool:
        return self._value.is_some()

    def set(self, value: T) -> None:
        self._value = Some(value)

    def get(self) -> T:
        return self._value.force_unwrap(f"{self.name} accessed before initialization")

    def reset(self) -> None:
        self._value = NONE

    def as_option(self) -> Option[T]:
        return self._value

    @property
    def value(self) -> T:
        return self.get()

    @value.setter
    def value(self, v: T) -> None:
        self.set(v)

    def __repr__(self) -> str:
        state = repr(self._value.value) if self._value.is_some() else "<unset>"  # type: ignore[attr-defined]
        return f"LateInit({self.name}={state})"
