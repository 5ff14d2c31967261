from __future__ import annotations
import contextvars
from contextlib import contextmanager
from typing import Any, Dict, Iterator, TypeVar, TYPE_CHECKING

from .logger import ConsoleLogger

if TYPE_CHECKING:
    from .option import Option

A = TypeVar("A")


class Context:
    """Immutable, type-keyed set of services configuring the library.

    Example:
        ```python
        ctx = Context().with_service(ConsoleLogger, ConsoleLogger(level="DEBUG"))
        with use_context(ctx):
            chain(root, attr("child"))  # absent results are now logged
        ```
    """
    def __init__(self, values: Dict[type, Any] | None = None):
        self._values = dict(values or {})

    def get(self, t: type[A]) -> A:
        return self.find(t).unwrap_or_else(lambda: _missing(t))

    def find(self, t: type[A]) -> "Option[A]":
        from .option import Some, NONE
        return Some(self._values[t]) if t in self._values else NONE  # type: ignore[return-value]

    def with_service(self, t: type[A], v: A) -> "Context":
        return Context({**self._values, t: v})

    add = with_service


def _missing(t: type) -> Any:
    raise KeyError(f"Missing service: {t}")


# Used when the active context carries no logger; quiet below WARN.
_DEFAULT_LOGGER = ConsoleLogger("optchain", level="WARN")
_current: contextvars.ContextVar[Context] = contextvars.ContextVar("optchain_context", default=Context())


def current_context() -> Context:
    return _current.get()


@contextmanager
def use_context(ctx: Context) -> Iterator[Context]:
    """Activate ``ctx`` for the duration of the ``with`` block."""
    token = _current.set(ctx)
    try:
        yield ctx
    finally:
        _current.reset(token)


def configured_logger() -> "Option[ConsoleLogger]":
    return current_context().find(ConsoleLogger)


def current_logger() -> ConsoleLogger:
    return configured_logger().unwrap_or(_DEFAULT_LOGGER)
