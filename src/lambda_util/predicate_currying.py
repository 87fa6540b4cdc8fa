"""
Currying and partial application of predicates. Closures returned here
always give back a `bool`.
"""
from typing import Any, List

from typing_extensions import TypeVar, overload

from . import _currying
from ._typing import Function1, Function2, Function3, Thunk
from .kind import Kind

__all__: List[str] = [
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
]

_F = TypeVar("_F")
_S = TypeVar("_S")
_T = TypeVar("_T")

################################################################################
# Boolean suppliers
################################################################################


def all(predicate: Function1[_F, bool], first: _F) -> Thunk[bool]:
    return _currying.all(Kind.PREDICATE, predicate, first)


def all2(bi_predicate: Function2[_F, _S, bool], first: _F, second: _S) -> Thunk[bool]:
    return _currying.all2(Kind.PREDICATE, bi_predicate, first, second)


def all3(
    ter_predicate: Function3[_F, _S, _T, bool], first: _F, second: _S, third: _T
) -> Thunk[bool]:
    return _currying.all3(Kind.PREDICATE, ter_predicate, first, second, third)


################################################################################
# Chains of unary predicates
################################################################################


@overload
def left2(
    bi_predicate: Function2[_F, _S, bool], /
) -> Function1[_F, Function1[_S, bool]]: ...


@overload
def left2(
    bi_predicate: Function2[_F, _S, bool], first: _F, /
) -> Function1[_S, bool]: ...


def left2(bi_predicate: Function2[_F, _S, bool], /, *bound: Any) -> Any:
    return _currying.left2(Kind.PREDICATE, bi_predicate, *bound)


@overload
def left3(
    ter_predicate: Function3[_F, _S, _T, bool], /
) -> Function1[_F, Function1[_S, Function1[_T, bool]]]: ...


@overload
def left3(
    ter_predicate: Function3[_F, _S, _T, bool], first: _F, /
) -> Function1[_S, Function1[_T, bool]]: ...


@overload
def left3(
    ter_predicate: Function3[_F, _S, _T, bool], first: _F, second: _S, /
) -> Function1[_T, bool]: ...


def left3(ter_predicate: Function3[_F, _S, _T, bool], /, *bound: Any) -> Any:
    return _currying.left3(Kind.PREDICATE, ter_predicate, *bound)


@overload
def right2(
    bi_predicate: Function2[_F, _S, bool], /
) -> Function1[_S, Function1[_F, bool]]: ...


@overload
def right2(
    bi_predicate: Function2[_F, _S, bool], second: _S, /
) -> Function1[_F, bool]: ...


def right2(bi_predicate: Function2[_F, _S, bool], /, *bound: Any) -> Any:
    return _currying.right2(Kind.PREDICATE, bi_predicate, *bound)


@overload
def right3(
    ter_predicate: Function3[_F, _S, _T, bool], /
) -> Function1[_T, Function1[_S, Function1[_F, bool]]]: ...


@overload
def right3(
    ter_predicate: Function3[_F, _S, _T, bool], third: _T, /
) -> Function1[_S, Function1[_F, bool]]: ...


@overload
def right3(
    ter_predicate: Function3[_F, _S, _T, bool], second: _S, third: _T, /
) -> Function1[_F, bool]: ...


def right3(ter_predicate: Function3[_F, _S, _T, bool], /, *bound: Any) -> Any:
    return _currying.right3(Kind.PREDICATE, ter_predicate, *bound)


def left_middle3(
    ter_predicate: Function3[_F, _S, _T, bool], second: _S
) -> Function1[_F, Function1[_T, bool]]:
    return _currying.left_middle3(Kind.PREDICATE, ter_predicate, second)


def middle3(
    ter_predicate: Function3[_F, _S, _T, bool], first: _F, third: _T
) -> Function1[_S, bool]:
    return _currying.middle3(Kind.PREDICATE, ter_predicate, first, third)


def right_middle3(
    ter_predicate: Function3[_F, _S, _T, bool], second: _S
) -> Function1[_T, Function1[_F, bool]]:
    return _currying.right_middle3(Kind.PREDICATE, ter_predicate, second)


################################################################################
# Binary predicates
################################################################################


def bi_left3(
    ter_predicate: Function3[_F, _S, _T, bool], first: _F
) -> Function2[_S, _T, bool]:
    return _currying.bi_left3(Kind.PREDICATE, ter_predicate, first)


def bi_middle3(
    ter_predicate: Function3[_F, _S, _T, bool], second: _S
) -> Function2[_F, _T, bool]:
    return _currying.bi_middle3(Kind.PREDICATE, ter_predicate, second)


def bi_right3(
    ter_predicate: Function3[_F, _S, _T, bool], third: _T
) -> Function2[_F, _S, bool]:
    return _currying.bi_right3(Kind.PREDICATE, ter_predicate, third)
