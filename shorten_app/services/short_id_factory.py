"""
Factory for creating short id generation strategies.
Uses caching to avoid creating multiple instances.
"""

from enum import Enum
from typing import Union

from shorten_app.services.short_id_strategies import (
    ShortIdStrategy,
    NanoIdShortIdStrategy,
    RandomShortIdStrategy
)
from shorten_app.config import settings


class ShortIdStrategyType(Enum):
    """Available short id generation strategies"""
    NANOID = "nanoid"
    RANDOM = "random"


class ShortIdFactory:
    """Factory for creating short id generation strategies with caching"""

    _instances = {}  # Cache for strategy instances

    @classmethod
    def create_strategy(
        cls,
        strategy_type: Union[ShortIdStrategyType, str, None] = None
    ) -> ShortIdStrategy:
        """
        Create or return cached short id generation strategy.

        Args:
            strategy_type: Type of strategy to create.
                          If None, uses value from settings.

        Returns:
            A cached instance of a ShortIdStrategy

        Raises:
            ValueError: If strategy_type is unknown
        """
        # Use default from settings if not specified
        if strategy_type is None:
            strategy_type = settings.short_id_strategy

        # Accepts enum members and their string values alike
        strategy_type = ShortIdStrategyType(strategy_type)

        if strategy_type in cls._instances:
            return cls._instances[strategy_type]

        if strategy_type == ShortIdStrategyType.NANOID:
            instance = NanoIdShortIdStrategy(
                length=settings.short_id_length,
                max_retries=settings.max_retries
            )
        else:
            instance = RandomShortIdStrategy(
                length=settings.short_id_length,
                max_retries=settings.max_retries
            )

        cls._instances[strategy_type] = instance
        return instance

    @classmethod
    def clear_instances(cls):
        """Clear cached instances (for testing)"""
        cls._instances = {}
