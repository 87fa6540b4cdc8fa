"""
Every currying combinator under a single namespace.

The combinators here behave exactly like their counterparts in
`consumer_currying`, `function_currying` and `predicate_currying`; the only
difference is how the kind of the source is chosen:

1. the keyword-only `kind` argument, when given;
2. otherwise the class of the source, for instances of `TerConsumer`,
   `TerPredicate` and `TerFunction`;
3. otherwise `Kind.FUNCTION`.

The kind decides the shape of the outcome (nothing, a value, or a `bool`) and
the name used in the message of `NullSourceError`, e.g. `left2(None,
kind=Kind.PREDICATE)` raises "The bi-predicate must not be null".

Besides the combinators, this module offers `uncurry2`, `uncurry3` and
`flip`, which go back from, and rearrange, curried chains.
"""
from typing import Any, List, Optional

from typing_extensions import TypeVar, overload

from . import _currying
from ._typing import Function1, Function2, Function3, Thunk
from .error import NullSourceError
from .kind import Kind
from .ter import TerConsumer, TerPredicate

__all__: List[str] = [
    "Kind",
    "kind_of",
    "all",
    "all2",
    "all3",
    "left2",
    "left3",
    "right2",
    "right3",
    "left_middle3",
    "middle3",
    "right_middle3",
    "bi_left3",
    "bi_middle3",
    "bi_right3",
    "uncurry2",
    "uncurry3",
    "flip",
]

_F = TypeVar("_F")
_S = TypeVar("_S")
_T = TypeVar("_T")
_R = TypeVar("_R")


def kind_of(source: object, kind: Optional[Kind] = None) -> Kind:
    """
    Resolves the kind a source callable is curried as.
    """
    if kind is not None:
        return kind
    if isinstance(source, TerConsumer):
        return Kind.CONSUMER
    if isinstance(source, TerPredicate):
        return Kind.PREDICATE
    return Kind.FUNCTION


################################################################################
# Binding every argument
################################################################################


def all(
    function: Function1[_F, _R], first: _F, *, kind: Optional[Kind] = None
) -> Thunk[_R]:
    return _currying.all(kind_of(function, kind), function, first)


def all2(
    bi: Function2[_F, _S, _R], first: _F, second: _S, *, kind: Optional[Kind] = None
) -> Thunk[_R]:
    return _currying.all2(kind_of(bi, kind), bi, first, second)


def all3(
    ter: Function3[_F, _S, _T, _R],
    first: _F,
    second: _S,
    third: _T,
    *,
    kind: Optional[Kind] = None,
) -> Thunk[_R]:
    return _currying.all3(kind_of(ter, kind), ter, first, second, third)


################################################################################
# Left to right
################################################################################


@overload
def left2(
    bi: Function2[_F, _S, _R], /, *, kind: Optional[Kind] = None
) -> Function1[_F, Function1[_S, _R]]: ...


@overload
def left2(
    bi: Function2[_F, _S, _R], first: _F, /, *, kind: Optional[Kind] = None
) -> Function1[_S, _R]: ...


def left2(
    bi: Function2[_F, _S, _R], /, *bound: Any, kind: Optional[Kind] = None
) -> Any:
    return _currying.left2(kind_of(bi, kind), bi, *bound)


@overload
def left3(
    ter: Function3[_F, _S, _T, _R], /, *, kind: Optional[Kind] = None
) -> Function1[_F, Function1[_S, Function1[_T, _R]]]: ...


@overload
def left3(
    ter: Function3[_F, _S, _T, _R], first: _F, /, *, kind: Optional[Kind] = None
) -> Function1[_S, Function1[_T, _R]]: ...


@overload
def left3(
    ter: Function3[_F, _S, _T, _R],
    first: _F,
    second: _S,
    /,
    *,
    kind: Optional[Kind] = None,
) -> Function1[_T, _R]: ...


def left3(
    ter: Function3[_F, _S, _T, _R], /, *bound: Any, kind: Optional[Kind] = None
) -> Any:
    return _currying.left3(kind_of(ter, kind), ter, *bound)


################################################################################
# Right to left
################################################################################


@overload
def right2(
    bi: Function2[_F, _S, _R], /, *, kind: Optional[Kind] = None
) -> Function1[_S, Function1[_F, _R]]: ...


@overload
def right2(
    bi: Function2[_F, _S, _R], second: _S, /, *, kind: Optional[Kind] = None
) -> Function1[_F, _R]: ...


def right2(
    bi: Function2[_F, _S, _R], /, *bound: Any, kind: Optional[Kind] = None
) -> Any:
    return _currying.right2(kind_of(bi, kind), bi, *bound)


@overload
def right3(
    ter: Function3[_F, _S, _T, _R], /, *, kind: Optional[Kind] = None
) -> Function1[_T, Function1[_S, Function1[_F, _R]]]: ...


@overload
def right3(
    ter: Function3[_F, _S, _T, _R], third: _T, /, *, kind: Optional[Kind] = None
) -> Function1[_S, Function1[_F, _R]]: ...


@overload
def right3(
    ter: Function3[_F, _S, _T, _R],
    second: _S,
    third: _T,
    /,
    *,
    kind: Optional[Kind] = None,
) -> Function1[_F, _R]: ...


def right3(
    ter: Function3[_F, _S, _T, _R], /, *bound: Any, kind: Optional[Kind] = None
) -> Any:
    return _currying.right3(kind_of(ter, kind), ter, *bound)


################################################################################
# Around the middle argument
################################################################################


def left_middle3(
    ter: Function3[_F, _S, _T, _R], second: _S, *, kind: Optional[Kind] = None
) -> Function1[_F, Function1[_T, _R]]:
    return _currying.left_middle3(kind_of(ter, kind), ter, second)


def middle3(
    ter: Function3[_F, _S, _T, _R],
    first: _F,
    third: _T,
    *,
    kind: Optional[Kind] = None,
) -> Function1[_S, _R]:
    return _currying.middle3(kind_of(ter, kind), ter, first, third)


def right_middle3(
    ter: Function3[_F, _S, _T, _R], second: _S, *, kind: Optional[Kind] = None
) -> Function1[_T, Function1[_F, _R]]:
    return _currying.right_middle3(kind_of(ter, kind), ter, second)


################################################################################
# Down to two arguments
################################################################################


def bi_left3(
    ter: Function3[_F, _S, _T, _R], first: _F, *, kind: Optional[Kind] = None
) -> Function2[_S, _T, _R]:
    return _currying.bi_left3(kind_of(ter, kind), ter, first)


def bi_middle3(
    ter: Function3[_F, _S, _T, _R], second: _S, *, kind: Optional[Kind] = None
) -> Function2[_F, _T, _R]:
    return _currying.bi_middle3(kind_of(ter, kind), ter, second)


def bi_right3(
    ter: Function3[_F, _S, _T, _R], third: _T, *, kind: Optional[Kind] = None
) -> Function2[_F, _S, _R]:
    return _currying.bi_right3(kind_of(ter, kind), ter, third)


################################################################################
# Working with curried chains
################################################################################


def uncurry2(curried: Function1[_F, Function1[_S, _R]]) -> Function2[_F, _S, _R]:
    """
    The inverse of `left2`: `uncurry2(left2(f))(first, second)` computes
    `f(first, second)`.
    """
    if curried is None:
        raise NullSourceError("curried function")
    return lambda first, second: curried(first)(second)


def uncurry3(
    curried: Function1[_F, Function1[_S, Function1[_T, _R]]]
) -> Function3[_F, _S, _T, _R]:
    """
    The inverse of `left3`.
    """
    if curried is None:
        raise NullSourceError("curried function")
    return lambda first, second, third: curried(first)(second)(third)


def flip(
    curried: Function1[_F, Function1[_S, _R]]
) -> Function1[_S, Function1[_F, _R]]:
    """
    Swaps the first two steps of a curried chain, so `flip(left2(f))`
    behaves like `right2(f)`.
    """
    if curried is None:
        raise NullSourceError("curried function")
    return lambda second: lambda first: curried(first)(second)
