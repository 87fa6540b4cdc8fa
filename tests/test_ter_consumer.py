from typing import List, Tuple

import pytest

from lambda_util import NullSourceError, TerConsumer, ter_consumer


def test_accept() -> None:
    log: List[str] = []
    consumer = ter_consumer(lambda f, s, t: log.append(f + s + t))
    consumer.accept("1", "2", "3")
    consumer("4", "5", "6")
    assert log == ["123", "456"]


def test_and_then_runs_both_with_the_same_arguments() -> None:
    log: List[Tuple[str, str, str, str]] = []
    consumer = ter_consumer(lambda f, s, t: log.append(("this", f, s, t)))
    composed = consumer.and_then(lambda f, s, t: log.append(("after", f, s, t)))
    assert composed("1", "2", "3") is None
    assert log == [("this", "1", "2", "3"), ("after", "1", "2", "3")]


def test_and_then_leaves_the_original_untouched() -> None:
    log: List[str] = []
    consumer = ter_consumer(lambda f, s, t: log.append("this"))
    composed = consumer.and_then(lambda f, s, t: log.append("after"))
    assert composed is not consumer
    consumer(1, 2, 3)
    assert log == ["this"]


def test_and_then_stops_when_this_raises() -> None:
    log: List[str] = []

    def fail(first: int, second: int, third: int) -> None:
        raise RuntimeError("boom")

    composed = ter_consumer(fail).and_then(lambda f, s, t: log.append("after"))
    with pytest.raises(RuntimeError, match="boom"):
        composed(1, 2, 3)
    assert log == []


def test_and_then_relays_failures_of_after() -> None:
    log: List[str] = []

    def fail(first: int, second: int, third: int) -> None:
        raise KeyError(first)

    composed = ter_consumer(lambda f, s, t: log.append("this")).and_then(fail)
    with pytest.raises(KeyError):
        composed(1, 2, 3)
    assert log == ["this"]


def test_and_then_with_none() -> None:
    log: List[str] = []
    consumer = ter_consumer(lambda f, s, t: log.append("this"))
    with pytest.raises(NullSourceError) as excinfo:
        consumer.and_then(None)  # type: ignore[arg-type]
    assert str(excinfo.value) == "The after-operation must not be null"
    assert log == []


def test_ter_consumer_with_none() -> None:
    with pytest.raises(NullSourceError) as excinfo:
        ter_consumer(None)  # type: ignore[arg-type]
    assert str(excinfo.value) == "The ter-consumer must not be null"


def test_ter_consumer_keeps_instances() -> None:
    consumer = ter_consumer(lambda f, s, t: None)
    assert ter_consumer(consumer) is consumer


def test_subclass() -> None:
    class Store(TerConsumer[str, str, str]):
        def __init__(self) -> None:
            self.stored = ""

        def accept(self, first: str, second: str, third: str) -> None:
            self.stored = first + second + third

    store = Store()
    log: List[str] = []
    store.and_then(lambda f, s, t: log.append(store.stored))("1", "2", "3")
    assert log == ["123"]
