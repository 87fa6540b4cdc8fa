from typing import Callable

from typing_extensions import TypeAlias, TypeVar

_F = TypeVar("_F")
_S = TypeVar("_S")
_T = TypeVar("_T")
_R = TypeVar("_R")

Thunk: TypeAlias = Callable[[], _R]
Function1: TypeAlias = Callable[[_F], _R]
Function2: TypeAlias = Callable[[_F, _S], _R]
Function3: TypeAlias = Callable[[_F, _S, _T], _R]
