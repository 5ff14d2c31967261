"""
Optionals basics: parsing, forced unwrap, defaults, guard-style binding, try?.

Run: python examples/optionals_basics.py
"""
from optchain import (
    Option,
    Some,
    NONE,
    UnwrapError,
    attempt,
    from_nullable,
    guarded,
    early_return,
    bind_or_early_return,
    bind_multiple,
    require_or_default,
)


@guarded
def is_cat_name(cat_name: Option[str]) -> str:
    cat_name_ = bind_or_early_return(cat_name, early_return("Cat name was nil!"))
    return cat_name_


@guarded
def square(n: Option[int]) -> int:
    value = bind_or_early_return(n, early_return(-1))
    return value * value


class NamingError(Exception):
    pass


def full_name(first: str, last: str) -> str:
    if first == "Taylor" and last == "Swift":
        raise NamingError("Taylor Swift is lame")
    return first + " " + last


@guarded
def greeting(first: Option[str], last: Option[str]) -> str:
    f, l = bind_multiple([first, last], early_return("Hello, stranger"))
    return f"Hello, {f} {l}"


def main():
    # Parsing yields an optional
    print("parse '45' =>", attempt(lambda: int("45"), ValueError))     # Some(value=45)
    print("parse 'abc' =>", attempt(lambda: int("abc"), ValueError))   # NONE

    # Forced unwrap: fine when the value must be there
    value_must_be_there = Some(12)
    print("forced =>", value_must_be_there.force_unwrap())
    try:
        NONE.force_unwrap("value was not there")
    except UnwrapError as ex:
        print("forced on absent =>", ex)

    # Defaults (nil coalescing)
    name = from_nullable(None)
    print("name =>", name.unwrap_or("Slow Freddy"))
    print("age =>", require_or_default(from_nullable(None), 40))

    # Guard-style early exit
    print("cat =>", is_cat_name(NONE), "/", is_cat_name(Some("Garfield")))
    print("square =>", square(NONE), "/", square(Some(9)))
    print("greeting =>", greeting(Some("Iggy"), Some("Pop")), "/", greeting(Some("Iggy"), NONE))

    # try? turns a throwing call into an optional
    print("try? =>", attempt(lambda: full_name("Taylor", "Swift"), NamingError))
    print("try? =>", attempt(lambda: full_name("Iggy", "Pop"), NamingError))


if __name__ == "__main__":
    main()
