from typing import List

import pytest

from lambda_util import NullSourceError, TerPredicate, ter_predicate

S = "prefix-"
I = 3
F = 1.1


def ter(s: str, i: int, f: float) -> bool:
    return len(s) > i and i > f


def ter_reverse(s: str, i: int, f: float) -> bool:
    return len(s) < i and i < f


def test_test() -> None:
    assert ter(S, I, F)
    predicate = ter_predicate(ter)
    assert predicate.test(S, I, F) is True
    assert predicate(S, I, F) is True


def test_and() -> None:
    assert ter_predicate(ter).and_(ter_reverse)(S, I, F) is False
    assert (ter_predicate(ter) & ter_reverse)(S, I, F) is False


def test_or() -> None:
    assert ter_predicate(ter).or_(ter_reverse)(S, I, F) is True
    assert (ter_predicate(ter) | ter_reverse)(S, I, F) is True


def test_negate() -> None:
    predicate = ter_predicate(ter)
    assert predicate.negate()(S, I, F) is False
    assert (~predicate)(S, I, F) is False
    assert predicate(S, I, F) is True


def test_short_circuit() -> None:
    calls: List[str] = []

    def record(s: str, i: int, f: float) -> bool:
        calls.append(s)
        return True

    assert ter_predicate(ter_reverse).and_(record)(S, I, F) is False
    assert ter_predicate(ter).or_(record)(S, I, F) is True
    assert calls == []
    assert ter_predicate(ter).and_(record)(S, I, F) is True
    assert ter_predicate(ter_reverse).or_(record)(S, I, F) is True
    assert calls == [S, S]


def test_failure_skips_other() -> None:
    calls: List[str] = []

    def fail(s: str, i: int, f: float) -> bool:
        raise RuntimeError("boom")

    def record(s: str, i: int, f: float) -> bool:
        calls.append(s)
        return True

    for composed in [ter_predicate(fail).and_(record), ter_predicate(fail).or_(record)]:
        with pytest.raises(RuntimeError, match="boom"):
            composed(S, I, F)
    assert calls == []


@pytest.mark.parametrize(
    "method", [TerPredicate.and_, TerPredicate.or_]
)  # type: ignore[misc]
def test_compose_with_none(method: object) -> None:
    with pytest.raises(NullSourceError) as excinfo:
        method(ter_predicate(ter), None)  # type: ignore[operator]
    assert str(excinfo.value) == "The other-predicate must not be null"
    assert isinstance(excinfo.value, TypeError)
    assert isinstance(excinfo.value, ValueError)


def test_ter_predicate_with_none() -> None:
    with pytest.raises(NullSourceError) as excinfo:
        ter_predicate(None)  # type: ignore[arg-type]
    assert str(excinfo.value) == "The ter-predicate must not be null"


def test_results_are_booleans() -> None:
    predicate = ter_predicate(lambda s, i, f: s)  # type: ignore[arg-type, return-value]
    assert predicate("x", 0, 0.0) is True
    assert predicate("", 0, 0.0) is False


def test_subclass() -> None:
    class LongerThan(TerPredicate[str, int, float]):
        def test(self, s: str, i: int, f: float) -> bool:
            return len(s) > i

    assert LongerThan().negate()("abc", 5, 0.0) is True
    assert LongerThan().and_(ter)(S, I, F) is True
