from dataclasses import dataclass


@dataclass(frozen=True)
class LambdaUtilError(Exception):
    pass


@dataclass(frozen=True)
class NullSourceError(LambdaUtilError, TypeError, ValueError):
    """
    Raised when a combinator or a composition method receives `None` where a
    callable is required. The check happens when the combinator is called,
    never when the returned closure is invoked.

    Both `TypeError` and `ValueError` are bases, so callers that treat a
    missing callable as either kind of bad argument can catch it.
    """

    role: str

    def __str__(self) -> str:
        return f"The {self.role} must not be null"
