from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, NoReturn, Optional, Tuple, Type, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class UnwrapError(BaseException):
    """A value asserted to be present was absent.

    Derives from BaseException so ``except Exception`` recovery code does not
    absorb it: it signals a broken assumption, not an expected outcome.
    """


def _fail_absent(message: Optional[str]) -> NoReturn:
    from .context import configured_logger
    msg = message or "force_unwrap on absent value"
    # Only reported when the active context carries a logger.
    log = configured_logger()
    if log.is_some():
        log.value.error("force_unwrap on absent value", reason=msg)  # type: ignore[attr-defined]
    raise UnwrapError(msg)


def _expect_option(v: Any, where: str) -> "Option[Any]":
    if not isinstance(v, Option):
        raise TypeError(f"{where} returned {type(v).__name__}, expected Option")
    return v


class Option(Generic[T]):
    """A value of type T, or its absence.

    The two variants are ``Some(value)`` and the singleton ``NONE``. Absence
    propagates through ``map``, ``flat_map`` and ``filter`` without invoking
    the supplied function; exceptions raised by that function propagate to the
    caller.
    """
    __slots__ = ()

    def is_some(self) -> bool: raise NotImplementedError
    def is_none(self) -> bool: return not self.is_some()

    def force_unwrap(self, message: Optional[str] = None) -> T:
        if self.is_some():
            return self.value  # type: ignore[attr-defined]
        _fail_absent(message)

    def unwrap_or(self, default: U) -> T | U:
        return self.value if self.is_some() else default  # type: ignore[attr-defined]

    get_or_else = unwrap_or

    def unwrap_or_else(self, supplier: Callable[[], U]) -> T | U:
        if self.is_some():
            return self.value  # type: ignore[attr-defined]
        return supplier()

    def map(self, f: Callable[[T], U]) -> "Option[U]":
        if self.is_some():
            return Some(f(self.value))  # type: ignore[attr-defined]
        return NONE

    def flat_map(self, f: Callable[[T], "Option[U]"]) -> "Option[U]":
        if self.is_some():
            return _expect_option(f(self.value), "flat_map function")  # type: ignore[attr-defined]
        return NONE

    def filter(self, p: Callable[[T], bool]) -> "Option[T]":
        if self.is_some() and p(self.value):  # type: ignore[attr-defined]
            return self
        return NONE  # type: ignore[return-value]

    def or_else(self, supplier: Callable[[], "Option[T]"]) -> "Option[T]":
        if self.is_some():
            return self
        return _expect_option(supplier(), "or_else supplier")

    def to_nullable(self) -> Optional[T]:
        return self.value if self.is_some() else None  # type: ignore[attr-defined]


@dataclass(frozen=True)
class Some(Option[T]):
    value: T
    def is_some(self) -> bool: return True


class _None(Option[Any]):
    __slots__ = ()
    _instance: "_None | None" = None

    def __new__(cls) -> "_None":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str: return "NONE"
    def __eq__(self, other: object) -> bool: return isinstance(other, _None)
    def __hash__(self) -> int: return hash(_None)
    def __reduce__(self) -> Tuple[Any, ...]: return (_None, ())
    def __copy__(self) -> "_None": return self
    def __deepcopy__(self, _memo: dict) -> "_None": return self
    def is_some(self) -> bool: return False


NONE: Option[Any] = _None()

# Marker returned by a successful optional-chained assignment.
DONE: Option[Tuple[()]] = Some(())


def from_nullable(v: Optional[T]) -> Option[T]:
    return Some(v) if v is not None else NONE


def attempt(thunk: Callable[[], T], *errors: Type[BaseException]) -> Option[T]:
    """Run ``thunk`` and turn the listed exceptions into ``NONE``.

    ``errors`` defaults to ``Exception``. Anything not listed propagates.

    Example:
        ```python
        attempt(lambda: int("45"), ValueError)   # Some(45)
        attempt(lambda: int("4x5"), ValueError)  # NONE
        ```
    """
    caught = errors or (Exception,)
    try:
        return Some(thunk())
    except caught:
        return NONE
