from __future__ import annotations
import functools
from typing import Any, Callable, Iterable, NoReturn, Optional, Tuple, TypeVar, Union

from .context import current_logger
from .option import Option, UnwrapError

T = TypeVar("T")
F = TypeVar("F", bound=Callable[..., Any])

Binding = Union[Option[Any], Callable[[], Option[Any]]]


class EarlyReturn(BaseException):
    """Raised by an exit callback to leave a ``@guarded`` function with ``value``.

    Like ``UnwrapError`` it passes through ``except Exception`` in the guarded
    body, so the exit never falls through to the code after the binding.
    """
    def __init__(self, value: Any = None):
        super().__init__(repr(value)); self.value = value


def early_return(value: Any = None) -> Callable[[], NoReturn]:
    def exit_() -> NoReturn:
        raise EarlyReturn(value)
    return exit_


def guarded(fn: F) -> F:
    """Turn an ``EarlyReturn`` raised inside ``fn`` into its return value.

    Example:
        ```python
        @guarded
        def cat_name(name: Option[str]) -> str:
            name_ = bind_or_early_return(name, early_return("Cat name was nil!"))
            return name_
        ```
    """
    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return fn(*args, **kwargs)
        except EarlyReturn as er:
            return er.value
    return wrapper  # type: ignore[return-value]


def require_or_fail(opt: Option[T], message: Optional[str] = None) -> T:
    return opt.force_unwrap(message)


def require_or_default(opt: Option[T], default: T) -> T:
    return opt.unwrap_or(default)


def bind_or_early_return(opt: Option[T], on_absent: Callable[[], NoReturn]) -> T:
    if opt.is_some():
        return opt.value  # type: ignore[attr-defined]
    on_absent()
    raise UnwrapError("on_absent returned; it must leave the caller by raising")


def bind_multiple(optionals: Iterable[Binding], on_any_absent: Callable[[], NoReturn]) -> Tuple[Any, ...]:
    """Bind several optionals at once, like a multi-clause ``guard let``.

    Entries may be Options or zero-argument callables producing one; callables
    are only evaluated once every entry before them has resolved. The first
    absent entry invokes ``on_any_absent`` and nothing after it is evaluated.
    """
    values = []
    for i, entry in enumerate(optionals):
        opt = entry() if callable(entry) else entry
        if not isinstance(opt, Option):
            raise TypeError(f"bind_multiple entry {i} is {type(opt).__name__}, expected Option")
        if opt.is_none():
            current_logger().debug("bind_multiple short-circuited", index=i)
            on_any_absent()
            raise UnwrapError("on_any_absent returned; it must leave the caller by raising")
        values.append(opt.value)  # type: ignore[attr-defined]
    return tuple(values)
