from abc import ABCMeta, abstractmethod
from typing import Any, Callable, Generic, List

from typing_extensions import TypeVar, final, override

from .error import NullSourceError
from .kind import Kind

__all__: List[str] = [
    "TerConsumer",
    "TerFunction",
    "TerPredicate",
    "ter_consumer",
    "ter_function",
    "ter_predicate",
]

_F = TypeVar("_F")
_S = TypeVar("_S")
_T = TypeVar("_T")
_R = TypeVar("_R")
_V = TypeVar("_V")

################################################################################
# Operations of three arguments returning no result
################################################################################


class TerConsumer(Generic[_F, _S, _T], metaclass=ABCMeta):
    """
    An operation that accepts three arguments and returns no result.
    This is the three-argument counterpart of a plain one-argument consumer,
    and is expected to operate via side effects.
    """

    @abstractmethod
    def accept(self, first: _F, second: _S, third: _T) -> None:
        """
        Performs this operation on the given arguments.
        """

    def __call__(self, first: _F, second: _S, third: _T) -> None:
        self.accept(first, second, third)

    def and_then(self, after: Callable[[_F, _S, _T], Any]) -> "TerConsumer[_F, _S, _T]":
        """
        Returns a composed consumer that performs this operation followed by
        `after`, both on the same three arguments.

        If this operation raises, `after` is not performed and the exception
        reaches the caller of the composed consumer unchanged.
        """
        if after is None:
            raise NullSourceError("after-operation")

        def accept(first: _F, second: _S, third: _T) -> None:
            self.accept(first, second, third)
            after(first, second, third)

        return _CallableTerConsumer(accept)


@final
class _CallableTerConsumer(TerConsumer[_F, _S, _T]):
    def __init__(self, consumer: Callable[[_F, _S, _T], Any]) -> None:
        self._consumer = consumer

    @override
    def accept(self, first: _F, second: _S, third: _T) -> None:
        self._consumer(first, second, third)


def ter_consumer(consumer: Callable[[_F, _S, _T], Any]) -> TerConsumer[_F, _S, _T]:
    """
    Views a plain three-argument callable as a `TerConsumer`. Works as a
    decorator. Instances of `TerConsumer` are returned as they are.
    """
    if consumer is None:
        raise NullSourceError(Kind.CONSUMER.role(3))
    if isinstance(consumer, TerConsumer):
        return consumer
    return _CallableTerConsumer(consumer)


################################################################################
# Functions of three arguments
################################################################################


class TerFunction(Generic[_F, _S, _T, _R], metaclass=ABCMeta):
    """
    A function that accepts three arguments and produces a result.
    """

    @abstractmethod
    def apply(self, first: _F, second: _S, third: _T) -> _R:
        """
        Applies this function to the given arguments.
        """

    def __call__(self, first: _F, second: _S, third: _T) -> _R:
        return self.apply(first, second, third)

    def and_then(self, after: Callable[[_R], _V]) -> "TerFunction[_F, _S, _T, _V]":
        """
        Returns a composed function that first applies this function and then
        applies `after` to its result.
        """
        if after is None:
            raise NullSourceError("after-function")

        def apply(first: _F, second: _S, third: _T) -> _V:
            return after(self.apply(first, second, third))

        return _CallableTerFunction(apply)


@final
class _CallableTerFunction(TerFunction[_F, _S, _T, _R]):
    def __init__(self, function: Callable[[_F, _S, _T], _R]) -> None:
        self._function = function

    @override
    def apply(self, first: _F, second: _S, third: _T) -> _R:
        return self._function(first, second, third)


def ter_function(function: Callable[[_F, _S, _T], _R]) -> TerFunction[_F, _S, _T, _R]:
    """
    Views a plain three-argument callable as a `TerFunction`. Works as a
    decorator. Instances of `TerFunction` are returned as they are.
    """
    if function is None:
        raise NullSourceError(Kind.FUNCTION.role(3))
    if isinstance(function, TerFunction):
        return function
    return _CallableTerFunction(function)


################################################################################
# Predicates of three arguments
################################################################################


class TerPredicate(Generic[_F, _S, _T], metaclass=ABCMeta):
    """
    A boolean-valued function of three arguments.

    Besides the named combinators, predicates compose with the bitwise
    operators: `p & q` is `p.and_(q)`, `p | q` is `p.or_(q)` and `~p` is
    `p.negate()`.
    """

    @abstractmethod
    def test(self, first: _F, second: _S, third: _T) -> bool:
        """
        Evaluates this predicate on the given arguments.
        """

    def __call__(self, first: _F, second: _S, third: _T) -> bool:
        return self.test(first, second, third)

    def and_(self, other: Callable[[_F, _S, _T], bool]) -> "TerPredicate[_F, _S, _T]":
        """
        Returns the short-circuiting logical AND of this predicate and
        `other`. When this predicate is false, `other` is not evaluated.
        """
        if other is None:
            raise NullSourceError("other-predicate")

        def test(first: _F, second: _S, third: _T) -> bool:
            return self.test(first, second, third) and bool(
                other(first, second, third)
            )

        return _CallableTerPredicate(test)

    def or_(self, other: Callable[[_F, _S, _T], bool]) -> "TerPredicate[_F, _S, _T]":
        """
        Returns the short-circuiting logical OR of this predicate and
        `other`. When this predicate is true, `other` is not evaluated.
        """
        if other is None:
            raise NullSourceError("other-predicate")

        def test(first: _F, second: _S, third: _T) -> bool:
            return self.test(first, second, third) or bool(
                other(first, second, third)
            )

        return _CallableTerPredicate(test)

    def negate(self) -> "TerPredicate[_F, _S, _T]":
        """
        Returns the logical negation of this predicate.
        """

        def test(first: _F, second: _S, third: _T) -> bool:
            return not self.test(first, second, third)

        return _CallableTerPredicate(test)

    def __and__(
        self, other: Callable[[_F, _S, _T], bool]
    ) -> "TerPredicate[_F, _S, _T]":
        return self.and_(other)

    def __or__(self, other: Callable[[_F, _S, _T], bool]) -> "TerPredicate[_F, _S, _T]":
        return self.or_(other)

    def __invert__(self) -> "TerPredicate[_F, _S, _T]":
        return self.negate()


@final
class _CallableTerPredicate(TerPredicate[_F, _S, _T]):
    def __init__(self, predicate: Callable[[_F, _S, _T], bool]) -> None:
        self._predicate = predicate

    @override
    def test(self, first: _F, second: _S, third: _T) -> bool:
        return bool(self._predicate(first, second, third))


def ter_predicate(predicate: Callable[[_F, _S, _T], bool]) -> TerPredicate[_F, _S, _T]:
    """
    Views a plain three-argument callable as a `TerPredicate`. Works as a
    decorator. Instances of `TerPredicate` are returned as they are.
    """
    if predicate is None:
        raise NullSourceError(Kind.PREDICATE.role(3))
    if isinstance(predicate, TerPredicate):
        return predicate
    return _CallableTerPredicate(predicate)
