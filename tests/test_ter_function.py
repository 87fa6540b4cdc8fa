from typing import List

import pytest

from lambda_util import NullSourceError, TerFunction, ter_function


def substring(s: str, begin: int, end: int) -> str:
    return s[begin:end]


def test_apply() -> None:
    function = ter_function(substring)
    assert function.apply("prefix-", 0, 3) == "pre"
    assert function("prefix-", 3, 6) == "fix"


def test_and_then() -> None:
    function = ter_function(substring).and_then(str.upper)
    assert function("prefix-", 0, 3) == "PRE"
    assert function.and_then(len)("prefix-", 0, 6) == 6


def test_and_then_stops_when_this_raises() -> None:
    calls: List[str] = []

    def fail(s: str, begin: int, end: int) -> str:
        raise ValueError(s)

    def after(result: str) -> str:
        calls.append(result)
        return result

    with pytest.raises(ValueError, match="prefix-"):
        ter_function(fail).and_then(after)("prefix-", 0, 3)
    assert calls == []


def test_and_then_with_none() -> None:
    with pytest.raises(NullSourceError) as excinfo:
        ter_function(substring).and_then(None)  # type: ignore[arg-type]
    assert str(excinfo.value) == "The after-function must not be null"


def test_ter_function_with_none() -> None:
    with pytest.raises(NullSourceError) as excinfo:
        ter_function(None)  # type: ignore[arg-type]
    assert str(excinfo.value) == "The ter-function must not be null"


def test_decorator() -> None:
    @ter_function
    def volume(x: int, y: int, z: int) -> int:
        return x * y * z

    assert isinstance(volume, TerFunction)
    assert volume.and_then(str)(2, 3, 4) == "24"
