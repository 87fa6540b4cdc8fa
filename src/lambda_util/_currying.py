from typing import Any, Callable, Tuple

from typing_extensions import TypeAlias

from .error import NullSourceError
from .kind import Kind

Source: TypeAlias = Callable[..., Any]

################################################################################
# Guard clauses
################################################################################


def _prepare(
    name: str,
    kind: Kind,
    arity: int,
    source: Source,
    bound: Tuple[Any, ...],
    max_bound: int,
) -> Source:
    # Runs before any closure exists, so a bad call never yields a result.
    if source is None:
        raise NullSourceError(kind.role(arity))
    if len(bound) > max_bound:
        raise TypeError(
            f"{name}() takes at most {max_bound} bound argument(s) "
            f"({len(bound)} given)"
        )
    return kind.invoker(source)


################################################################################
# Binding every argument
################################################################################


def all(kind: Kind, function: Source, first: Any) -> Callable[[], Any]:
    invoke = _prepare("all", kind, 1, function, (), 0)
    return lambda: invoke(first)


def all2(kind: Kind, bi: Source, first: Any, second: Any) -> Callable[[], Any]:
    invoke = _prepare("all2", kind, 2, bi, (), 0)
    return lambda: invoke(first, second)


def all3(
    kind: Kind, ter: Source, first: Any, second: Any, third: Any
) -> Callable[[], Any]:
    invoke = _prepare("all3", kind, 3, ter, (), 0)
    return lambda: invoke(first, second, third)


################################################################################
# Left to right
################################################################################


def left2(kind: Kind, bi: Source, *bound: Any) -> Callable[[Any], Any]:
    invoke = _prepare("left2", kind, 2, bi, bound, 1)
    if not bound:
        return lambda first: lambda second: invoke(first, second)
    (first,) = bound
    return lambda second: invoke(first, second)


def left3(kind: Kind, ter: Source, *bound: Any) -> Callable[[Any], Any]:
    invoke = _prepare("left3", kind, 3, ter, bound, 2)
    if not bound:
        return lambda first: lambda second: lambda third: invoke(first, second, third)
    if len(bound) == 1:
        (first,) = bound
        return lambda second: lambda third: invoke(first, second, third)
    first, second = bound
    return lambda third: invoke(first, second, third)


################################################################################
# Right to left
#
# Call order is reversed, but every argument still lands in its own position
# of the final call.
################################################################################


def right2(kind: Kind, bi: Source, *bound: Any) -> Callable[[Any], Any]:
    invoke = _prepare("right2", kind, 2, bi, bound, 1)
    if not bound:
        return lambda second: lambda first: invoke(first, second)
    (second,) = bound
    return lambda first: invoke(first, second)


def right3(kind: Kind, ter: Source, *bound: Any) -> Callable[[Any], Any]:
    invoke = _prepare("right3", kind, 3, ter, bound, 2)
    if not bound:
        return lambda third: lambda second: lambda first: invoke(first, second, third)
    if len(bound) == 1:
        (third,) = bound
        return lambda second: lambda first: invoke(first, second, third)
    second, third = bound
    return lambda first: invoke(first, second, third)


################################################################################
# Around the middle argument
################################################################################


def left_middle3(kind: Kind, ter: Source, second: Any) -> Callable[[Any], Any]:
    invoke = _prepare("left_middle3", kind, 3, ter, (), 0)
    return lambda first: lambda third: invoke(first, second, third)


def middle3(kind: Kind, ter: Source, first: Any, third: Any) -> Callable[[Any], Any]:
    invoke = _prepare("middle3", kind, 3, ter, (), 0)
    return lambda second: invoke(first, second, third)


def right_middle3(kind: Kind, ter: Source, second: Any) -> Callable[[Any], Any]:
    invoke = _prepare("right_middle3", kind, 3, ter, (), 0)
    return lambda third: lambda first: invoke(first, second, third)


################################################################################
# Down to two arguments
################################################################################


def bi_left3(kind: Kind, ter: Source, first: Any) -> Callable[[Any, Any], Any]:
    invoke = _prepare("bi_left3", kind, 3, ter, (), 0)
    return lambda second, third: invoke(first, second, third)


def bi_middle3(kind: Kind, ter: Source, second: Any) -> Callable[[Any, Any], Any]:
    invoke = _prepare("bi_middle3", kind, 3, ter, (), 0)
    return lambda first, third: invoke(first, second, third)


def bi_right3(kind: Kind, ter: Source, third: Any) -> Callable[[Any, Any], Any]:
    invoke = _prepare("bi_right3", kind, 3, ter, (), 0)
    return lambda first, second: invoke(first, second, third)
