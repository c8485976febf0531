"""
Tests for short id generation strategies.
"""
import string

import pytest

from shorten_app.exceptions import ShortIdGenerationError
from shorten_app.services.short_id_strategies import (
    NanoIdShortIdStrategy,
    RandomShortIdStrategy
)
from shorten_app.services.short_id_factory import (
    ShortIdFactory,
    ShortIdStrategyType
)


def never_taken(short_id: str) -> bool:
    return False


class TestNanoIdStrategy:
    """Test the default NanoID strategy"""

    def test_generates_correct_length(self):
        strategy = NanoIdShortIdStrategy(length=10)

        assert len(strategy.generate(never_taken)) == 10

    def test_uses_url_safe_alphabet(self):
        strategy = NanoIdShortIdStrategy(length=10)
        allowed = set(string.ascii_letters + string.digits + "_-")

        for _ in range(100):
            assert set(strategy.generate(never_taken)) <= allowed

    def test_skips_taken_ids(self):
        strategy = NanoIdShortIdStrategy(length=10, max_retries=5)
        seen = []

        def taken_once(short_id: str) -> bool:
            seen.append(short_id)
            return len(seen) == 1

        code = strategy.generate(taken_once)

        assert len(seen) == 2
        assert code == seen[1]

    def test_raises_when_everything_is_taken(self):
        strategy = NanoIdShortIdStrategy(length=10, max_retries=3)
        calls = []

        def always_taken(short_id: str) -> bool:
            calls.append(short_id)
            return True

        with pytest.raises(ShortIdGenerationError):
            strategy.generate(always_taken)

        assert len(calls) == 3


class TestRandomStrategy:
    """Test the alphanumeric strategy"""

    def test_generates_correct_length(self):
        strategy = RandomShortIdStrategy(length=10)

        assert len(strategy.generate(never_taken)) == 10

    def test_alphanumeric_only(self):
        strategy = RandomShortIdStrategy(length=10)

        for _ in range(100):
            assert strategy.generate(never_taken).isalnum()

    def test_codes_differ(self):
        strategy = RandomShortIdStrategy(length=10)

        codes = {strategy.generate(never_taken) for _ in range(100)}

        assert len(codes) == 100


class TestShortIdFactory:
    """Test short id factory"""

    def setup_method(self):
        ShortIdFactory.clear_instances()

    def teardown_method(self):
        ShortIdFactory.clear_instances()

    def test_default_strategy_from_settings(self):
        strategy = ShortIdFactory.create_strategy()

        assert isinstance(strategy, NanoIdShortIdStrategy)
        assert strategy.length == 10

    def test_create_random_strategy(self):
        strategy = ShortIdFactory.create_strategy(ShortIdStrategyType.RANDOM)

        assert isinstance(strategy, RandomShortIdStrategy)

    def test_instances_are_cached(self):
        first = ShortIdFactory.create_strategy(ShortIdStrategyType.NANOID)
        second = ShortIdFactory.create_strategy(ShortIdStrategyType.NANOID)

        assert first is second

    def test_create_strategy_from_string(self):
        strategy = ShortIdFactory.create_strategy("random")

        assert isinstance(strategy, RandomShortIdStrategy)
        assert strategy is ShortIdFactory.create_strategy(ShortIdStrategyType.RANDOM)

    def test_unknown_strategy(self):
        with pytest.raises(ValueError):
            ShortIdFactory.create_strategy("base62")
