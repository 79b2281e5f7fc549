"""Shared pytest fixtures and test helpers for domain-rater tests."""

import pytest

from domain_rater import config
from domain_rater.scoring.report import RatingReport


@pytest.fixture(autouse=True)
def _default_weights(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ignore any weights file present on the machine running the tests."""
    monkeypatch.setattr(config, "CONFIG", {})


@pytest.fixture
def report() -> RatingReport:
    return RatingReport()


def deltas(messages: list) -> list:
    """Score deltas carried by the detail lines of a message log."""
    out = []
    for message in messages:
        if message.startswith("\t["):
            out.append(int(message[2 : message.index("]")]))
    return out
