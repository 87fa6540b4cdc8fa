"""
Currying and partial application of value-producing functions.

Every combinator checks its source function eagerly: passing `None` raises
`NullSourceError` straight away, before any closure is returned. Bound
arguments are captured as they are, `None` included. The source function is
called only once the last remaining argument has been supplied.
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
_R = TypeVar("_R")

################################################################################
# Binding every argument
################################################################################


def all(function: Function1[_F, _R], first: _F) -> Thunk[_R]:
    """
    Returns a thunk computing `function(first)`.

    The thunk is not memoised: every call applies `function` again.
    """
    return _currying.all(Kind.FUNCTION, function, first)


def all2(bi_function: Function2[_F, _S, _R], first: _F, second: _S) -> Thunk[_R]:
    """
    Returns a thunk computing `bi_function(first, second)`.
    """
    return _currying.all2(Kind.FUNCTION, bi_function, first, second)


def all3(
    ter_function: Function3[_F, _S, _T, _R], first: _F, second: _S, third: _T
) -> Thunk[_R]:
    """
    Returns a thunk computing `ter_function(first, second, third)`.
    """
    return _currying.all3(Kind.FUNCTION, ter_function, first, second, third)


################################################################################
# Left to right
################################################################################


@overload
def left2(
    bi_function: Function2[_F, _S, _R], /
) -> Function1[_F, Function1[_S, _R]]: ...


@overload
def left2(bi_function: Function2[_F, _S, _R], first: _F, /) -> Function1[_S, _R]: ...


def left2(bi_function: Function2[_F, _S, _R], /, *bound: Any) -> Any:
    """
    Curries `bi_function` from left to right.

    - `left2(f)(first)(second)` computes `f(first, second)`.
    - `left2(f, first)(second)` computes `f(first, second)`.
    """
    return _currying.left2(Kind.FUNCTION, bi_function, *bound)


@overload
def left3(
    ter_function: Function3[_F, _S, _T, _R], /
) -> Function1[_F, Function1[_S, Function1[_T, _R]]]: ...


@overload
def left3(
    ter_function: Function3[_F, _S, _T, _R], first: _F, /
) -> Function1[_S, Function1[_T, _R]]: ...


@overload
def left3(
    ter_function: Function3[_F, _S, _T, _R], first: _F, second: _S, /
) -> Function1[_T, _R]: ...


def left3(ter_function: Function3[_F, _S, _T, _R], /, *bound: Any) -> Any:
    """
    Curries `ter_function` from left to right, after binding up to two
    leading arguments.

    - `left3(f)(first)(second)(third)`
    - `left3(f, first)(second)(third)`
    - `left3(f, first, second)(third)`

    all compute `f(first, second, third)`.
    """
    return _currying.left3(Kind.FUNCTION, ter_function, *bound)


################################################################################
# Right to left
################################################################################


@overload
def right2(
    bi_function: Function2[_F, _S, _R], /
) -> Function1[_S, Function1[_F, _R]]: ...


@overload
def right2(bi_function: Function2[_F, _S, _R], second: _S, /) -> Function1[_F, _R]: ...


def right2(bi_function: Function2[_F, _S, _R], /, *bound: Any) -> Any:
    """
    Curries `bi_function` from right to left. The arguments are supplied in
    reverse, but each one keeps its position in the final call.

    - `right2(f)(second)(first)` computes `f(first, second)`.
    - `right2(f, second)(first)` computes `f(first, second)`.
    """
    return _currying.right2(Kind.FUNCTION, bi_function, *bound)


@overload
def right3(
    ter_function: Function3[_F, _S, _T, _R], /
) -> Function1[_T, Function1[_S, Function1[_F, _R]]]: ...


@overload
def right3(
    ter_function: Function3[_F, _S, _T, _R], third: _T, /
) -> Function1[_S, Function1[_F, _R]]: ...


@overload
def right3(
    ter_function: Function3[_F, _S, _T, _R], second: _S, third: _T, /
) -> Function1[_F, _R]: ...


def right3(ter_function: Function3[_F, _S, _T, _R], /, *bound: Any) -> Any:
    """
    Curries `ter_function` from right to left, after binding up to two
    trailing arguments.

    - `right3(f)(third)(second)(first)`
    - `right3(f, third)(second)(first)`
    - `right3(f, second, third)(first)`

    all compute `f(first, second, third)`.
    """
    return _currying.right3(Kind.FUNCTION, ter_function, *bound)


################################################################################
# Around the middle argument
################################################################################


def left_middle3(
    ter_function: Function3[_F, _S, _T, _R], second: _S
) -> Function1[_F, Function1[_T, _R]]:
    """
    Binds the middle argument, then takes the first and the third in turn:
    `left_middle3(f, second)(first)(third)`.
    """
    return _currying.left_middle3(Kind.FUNCTION, ter_function, second)


def middle3(
    ter_function: Function3[_F, _S, _T, _R], first: _F, third: _T
) -> Function1[_S, _R]:
    """
    Binds the outer arguments, leaving the middle one:
    `middle3(f, first, third)(second)`.
    """
    return _currying.middle3(Kind.FUNCTION, ter_function, first, third)


def right_middle3(
    ter_function: Function3[_F, _S, _T, _R], second: _S
) -> Function1[_T, Function1[_F, _R]]:
    """
    Binds the middle argument, then takes the third and the first in turn:
    `right_middle3(f, second)(third)(first)`.
    """
    return _currying.right_middle3(Kind.FUNCTION, ter_function, second)


################################################################################
# Down to two arguments
################################################################################


def bi_left3(
    ter_function: Function3[_F, _S, _T, _R], first: _F
) -> Function2[_S, _T, _R]:
    """
    Binds the first argument: `bi_left3(f, first)(second, third)`.
    """
    return _currying.bi_left3(Kind.FUNCTION, ter_function, first)


def bi_middle3(
    ter_function: Function3[_F, _S, _T, _R], second: _S
) -> Function2[_F, _T, _R]:
    """
    Binds the second argument: `bi_middle3(f, second)(first, third)`.
    """
    return _currying.bi_middle3(Kind.FUNCTION, ter_function, second)


def bi_right3(
    ter_function: Function3[_F, _S, _T, _R], third: _T
) -> Function2[_F, _S, _R]:
    """
    Binds the third argument: `bi_right3(f, third)(first, second)`.
    """
    return _currying.bi_right3(Kind.FUNCTION, ter_function, third)
