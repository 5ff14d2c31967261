"""
Optional chaining: reads, writes, and deferred initialization.

Run: python examples/optional_chaining.py
"""
from dataclasses import dataclass
from typing import Optional

from optchain import (
    Chain,
    ConsoleLogger,
    Context,
    LateInit,
    Some,
    attr,
    chain,
    set_attr,
    use_context,
)


@dataclass
class Dog:
    name: str
    owner: Optional["Person"] = None


@dataclass
class Person:
    name: str
    dog: Optional[Dog] = None


class DetailViewController:
    def fake_button_tap(self) -> None:
        print("detail view tapped")


class MasterViewController:
    def __init__(self) -> None:
        self.detail_view_controller: LateInit[DetailViewController] = LateInit("detail_view_controller")


def main():
    # Log short-circuits while exploring
    ctx = Context().with_service(ConsoleLogger, ConsoleLogger("chaining", level="DEBUG"))

    steve = Person("steve")
    with use_context(ctx):
        print("dog name =>", chain(Some(steve), attr("dog"), attr("name")))
        print("rename =>", Chain(Some(steve)).attr("dog").assign(set_attr("name", "Rex")))

    steve.dog = Dog("snoopy", owner=steve)
    print("dog name =>", chain(Some(steve), attr("dog"), attr("name")))
    print("rename =>", Chain(Some(steve)).attr("dog").assign(set_attr("name", "Rex")))
    print("owner via dog =>", Chain(Some(steve)).attr("dog").attr("owner").attr("name").get())

    master = MasterViewController()
    master.detail_view_controller.set(DetailViewController())
    master.detail_view_controller.get().fake_button_tap()


if __name__ == "__main__":
    main()
