"""Tests for the ordered source fallback."""
import random
from unittest.mock import MagicMock

import pytest

from models.enums import Stage
from models.series import PriceSeries
from monitor.errors import SourceUnavailable, SyntheticDataError
from monitor.fallback import FallbackOrchestrator
from monitor.synthetic import SyntheticDataGenerator
from tests.helpers import fixed_clock, make_series, stub_client


@pytest.fixture
def synthetic():
    return SyntheticDataGenerator(rng=random.Random(1), clock=fixed_clock())


def _stages(*clients):
    return list(zip((Stage.PRIMARY, Stage.SECONDARY, Stage.TERTIARY), clients))


def test_first_success_short_circuits(synthetic):
    primary = stub_client("cryptocompare", make_series([1.0], [2.0], source="cryptocompare"))
    secondary = stub_client("coinbase", make_series([1.0], [2.0]))
    tertiary = stub_client("coingecko", make_series([1.0], [2.0]))
    outcome = FallbackOrchestrator(_stages(primary, secondary, tertiary), synthetic).run()

    assert outcome.stage == Stage.PRIMARY
    assert outcome.source == "cryptocompare"
    assert outcome.attempts == 1
    assert not outcome.is_demo
    secondary.fetch.assert_not_called()
    tertiary.fetch.assert_not_called()


def test_falls_through_in_order(synthetic):
    calls = []
    primary = stub_client("cryptocompare", error=SourceUnavailable("HTTP 500"))
    secondary = stub_client("coinbase", error=SourceUnavailable("timeout"))
    tertiary = stub_client("coingecko", make_series([1.0], [2.0]))
    for c in (primary, secondary, tertiary):
        c.fetch.side_effect = _recording(c, calls)

    outcome = FallbackOrchestrator(_stages(primary, secondary, tertiary), synthetic).run()

    assert calls == ["cryptocompare", "coinbase", "coingecko"]
    assert outcome.stage == Stage.TERTIARY
    assert outcome.attempts == 3
    assert len(outcome.errors) == 2
    assert "HTTP 500" in outcome.errors[0]
    assert "secondary" in outcome.errors[1]


def _recording(client, calls):
    original = client.fetch.side_effect
    value = client.fetch.return_value

    def fetch():
        calls.append(client.NAME)
        if isinstance(original, Exception):
            raise original
        return value
    return fetch


def test_all_fail_yields_synthetic(synthetic):
    clients = [stub_client(n, error=SourceUnavailable("down")) for n in ("a", "b", "c")]
    outcome = FallbackOrchestrator(_stages(*clients), synthetic).run()

    assert outcome.is_demo
    assert outcome.stage == Stage.SYNTHETIC
    assert outcome.source == "synthetic"
    assert outcome.attempts == 4
    assert len(outcome.errors) == 3
    assert len(outcome.series) == 731


def test_unexpected_exception_is_contained(synthetic):
    primary = stub_client("cryptocompare", error=KeyError("Data"))
    secondary = stub_client("coinbase", make_series([1.0], [2.0]))
    outcome = FallbackOrchestrator(_stages(primary, secondary), synthetic).run()
    assert outcome.stage == Stage.SECONDARY


def test_empty_side_goes_straight_to_synthetic(synthetic):
    primary = stub_client("cryptocompare", PriceSeries(btc=make_series([1.0], [2.0]).btc, eth=()))
    secondary = stub_client("coinbase", make_series([1.0], [2.0]))
    outcome = FallbackOrchestrator(_stages(primary, secondary), synthetic).run()

    assert outcome.is_demo
    assert outcome.attempts == 2
    assert "0 ETH" in outcome.errors[0]
    secondary.fetch.assert_not_called()


def test_synthetic_failure_propagates():
    generator = MagicMock()
    generator.generate.side_effect = SyntheticDataError("boom")
    clients = [stub_client("a", error=SourceUnavailable("down"))]
    with pytest.raises(SyntheticDataError):
        FallbackOrchestrator(_stages(*clients), generator).run()


def test_synthetic_stage_directly(synthetic):
    outcome = FallbackOrchestrator([], synthetic).synthetic("manual", attempts=2, errors=["x"])
    assert outcome.attempts == 3
    assert outcome.errors == ["x"]
    assert outcome.is_demo
