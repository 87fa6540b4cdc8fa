"""
Currying and partial application of consumers, i.e. operations that are run
for their side effects. Every closure returned here gives back `None`, even
when the source itself returns something.
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


def all(consumer: Function1[_F, Any], first: _F) -> Thunk[None]:
    return _currying.all(Kind.CONSUMER, consumer, first)


def all2(bi_consumer: Function2[_F, _S, Any], first: _F, second: _S) -> Thunk[None]:
    return _currying.all2(Kind.CONSUMER, bi_consumer, first, second)


def all3(
    ter_consumer: Function3[_F, _S, _T, Any], first: _F, second: _S, third: _T
) -> Thunk[None]:
    return _currying.all3(Kind.CONSUMER, ter_consumer, first, second, third)


@overload
def left2(
    bi_consumer: Function2[_F, _S, Any], /
) -> Function1[_F, Function1[_S, None]]: ...


@overload
def left2(bi_consumer: Function2[_F, _S, Any], first: _F, /) -> Function1[_S, None]: ...


def left2(bi_consumer: Function2[_F, _S, Any], /, *bound: Any) -> Any:
    """`left2(c)(first)(second)` or `left2(c, first)(second)`."""
    return _currying.left2(Kind.CONSUMER, bi_consumer, *bound)


@overload
def left3(
    ter_consumer: Function3[_F, _S, _T, Any], /
) -> Function1[_F, Function1[_S, Function1[_T, None]]]: ...


@overload
def left3(
    ter_consumer: Function3[_F, _S, _T, Any], first: _F, /
) -> Function1[_S, Function1[_T, None]]: ...


@overload
def left3(
    ter_consumer: Function3[_F, _S, _T, Any], first: _F, second: _S, /
) -> Function1[_T, None]: ...


def left3(ter_consumer: Function3[_F, _S, _T, Any], /, *bound: Any) -> Any:
    """`left3(c)(first)(second)(third)`, binding up to two leading arguments."""
    return _currying.left3(Kind.CONSUMER, ter_consumer, *bound)


@overload
def right2(
    bi_consumer: Function2[_F, _S, Any], /
) -> Function1[_S, Function1[_F, None]]: ...


@overload
def right2(
    bi_consumer: Function2[_F, _S, Any], second: _S, /
) -> Function1[_F, None]: ...


def right2(bi_consumer: Function2[_F, _S, Any], /, *bound: Any) -> Any:
    """`right2(c)(second)(first)` or `right2(c, second)(first)`."""
    return _currying.right2(Kind.CONSUMER, bi_consumer, *bound)


@overload
def right3(
    ter_consumer: Function3[_F, _S, _T, Any], /
) -> Function1[_T, Function1[_S, Function1[_F, None]]]: ...


@overload
def right3(
    ter_consumer: Function3[_F, _S, _T, Any], third: _T, /
) -> Function1[_S, Function1[_F, None]]: ...


@overload
def right3(
    ter_consumer: Function3[_F, _S, _T, Any], second: _S, third: _T, /
) -> Function1[_F, None]: ...


def right3(ter_consumer: Function3[_F, _S, _T, Any], /, *bound: Any) -> Any:
    """`right3(c)(third)(second)(first)`, binding up to two trailing arguments."""
    return _currying.right3(Kind.CONSUMER, ter_consumer, *bound)


def left_middle3(
    ter_consumer: Function3[_F, _S, _T, Any], second: _S
) -> Function1[_F, Function1[_T, None]]:
    return _currying.left_middle3(Kind.CONSUMER, ter_consumer, second)


def middle3(
    ter_consumer: Function3[_F, _S, _T, Any], first: _F, third: _T
) -> Function1[_S, None]:
    return _currying.middle3(Kind.CONSUMER, ter_consumer, first, third)


def right_middle3(
    ter_consumer: Function3[_F, _S, _T, Any], second: _S
) -> Function1[_T, Function1[_F, None]]:
    return _currying.right_middle3(Kind.CONSUMER, ter_consumer, second)


def bi_left3(
    ter_consumer: Function3[_F, _S, _T, Any], first: _F
) -> Function2[_S, _T, None]:
    return _currying.bi_left3(Kind.CONSUMER, ter_consumer, first)


def bi_middle3(
    ter_consumer: Function3[_F, _S, _T, Any], second: _S
) -> Function2[_F, _T, None]:
    return _currying.bi_middle3(Kind.CONSUMER, ter_consumer, second)


def bi_right3(
    ter_consumer: Function3[_F, _S, _T, Any], third: _T
) -> Function2[_F, _S, None]:
    return _currying.bi_right3(Kind.CONSUMER, ter_consumer, third)
