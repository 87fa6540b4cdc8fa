from enum import Enum
from typing import Any, Callable


class Kind(Enum):
    """
    The flavour of a source callable: an operation run for its side effect
    (consumer), an operation producing a value (function), or a boolean-valued
    operation (predicate).
    """

    CONSUMER = "consumer"
    FUNCTION = "function"
    PREDICATE = "predicate"

    def role(self, arity: int) -> str:
        """
        The name of a source of this kind with the given arity, as used in
        error messages, e.g. "bi-predicate" for a two-argument predicate.
        """
        return {
            1: self.value,
            2: f"bi-{self.value}",
            3: f"ter-{self.value}",
        }[arity]

    def invoker(self, source: Callable[..., Any]) -> Callable[..., Any]:
        """
        Wrap `source` so that calling the result yields the outcome shape of
        this kind: nothing for consumers, the value for functions, and a
        `bool` for predicates.
        """
        if self is Kind.CONSUMER:

            def accept(*args: Any) -> None:
                source(*args)

            return accept

        if self is Kind.PREDICATE:

            def test(*args: Any) -> bool:
                return bool(source(*args))

            return test

        return source
