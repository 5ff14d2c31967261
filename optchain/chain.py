from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Tuple

from .context import current_logger
from .option import DONE, NONE, Option, from_nullable

Step = Callable[[Any], Option[Any]]
Setter = Callable[[Any], None]


def _lift(v: Any) -> Option[Any]:
    return v if isinstance(v, Option) else from_nullable(v)


def chain(root: Option[Any], *steps: Step) -> Option[Any]:
    """Apply optional-returning ``steps`` left to right to ``root``.

    Evaluation stops at the first absent link: no later step is invoked, so
    side effects inside those steps never happen. The result is always an
    Option, and with no steps it is ``root`` itself.

    Every absent result is logged at DEBUG with ``at`` (links evaluated before
    absence was seen, 0 for an absent root) and ``skipped``.
    """
    current = root
    ran = 0
    for step in steps:
        if current.is_none():
            break
        out = step(current.value)  # type: ignore[attr-defined]
        if not isinstance(out, Option):
            raise TypeError(f"chain step {ran} returned {type(out).__name__}, expected Option")
        current = out
        ran += 1
    if current.is_none():
        current_logger().debug("chain resolved absent", at=ran, skipped=len(steps) - ran)
    return current


def chain_assign(root: Option[Any], *steps: Step, setter: Setter) -> Option[Tuple[()]]:
    """Optional-chained write.

    ``steps`` lead to the object that owns the assignment target. When they
    resolve, ``setter`` is called with that object and ``DONE`` is returned;
    otherwise ``setter`` is never called and the result is ``NONE``.
    """
    target = chain(root, *steps)
    if target.is_none():
        current_logger().debug("chain assignment skipped", steps=len(steps))
        return NONE
    setter(target.value)  # type: ignore[attr-defined]
    return DONE


# Step builders

def attr(name: str) -> Step:
    def step(obj: Any) -> Option[Any]:
        return _lift(getattr(obj, name))
    step.__qualname__ = f"attr({name!r})"
    return step


def item(key: Hashable) -> Step:
    def step(obj: Any) -> Option[Any]:
        try:
            return _lift(obj[key])
        except (KeyError, IndexError):
            return NONE
    step.__qualname__ = f"item({key!r})"
    return step


def call(name: str, *args: Any, **kwargs: Any) -> Step:
    def step(obj: Any) -> Option[Any]:
        return _lift(getattr(obj, name)(*args, **kwargs))
    step.__qualname__ = f"call({name!r})"
    return step


def set_attr(name: str, value: Any) -> Setter:
    def setter(obj: Any) -> None: setattr(obj, name, value)
    return setter


def set_item(key: Hashable, value: Any) -> Setter:
    def setter(obj: Any) -> None: obj[key] = value
    return setter


@dataclass(frozen=True)
class Chain:
    """Immutable description of an optional chain, evaluated on demand.

    Example:
        ```python
        street = Chain(from_nullable(person)).attr("residence").attr("address").attr("street").get()
        ok = Chain(from_nullable(person)).attr("residence").assign(set_attr("rooms", 3))
        ```
    """
    root: Option[Any]
    steps: Tuple[Step, ...] = ()

    def then(self, step: Step) -> "Chain":
        return Chain(self.root, self.steps + (step,))

    def attr(self, name: str) -> "Chain": return self.then(attr(name))
    def item(self, key: Hashable) -> "Chain": return self.then(item(key))
    def call(self, name: str, *args: Any, **kwargs: Any) -> "Chain": return self.then(call(name, *args, **kwargs))

    def get(self) -> Option[Any]:
        return chain(self.root, *self.steps)

    def assign(self, setter: Setter) -> Option[Tuple[()]]:
        return chain_assign(self.root, *self.steps, setter=setter)

    @property
    def depth(self) -> int:
        return len(self.steps)
