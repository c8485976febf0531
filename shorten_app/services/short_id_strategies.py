"""
Short id generation strategies for the URL shortener.
Uses Strategy Pattern to allow different generation algorithms.
"""

import string
import secrets
from abc import ABC, abstractmethod
from typing import Callable

from nanoid import generate as nanoid_generate

from shorten_app.exceptions import ShortIdGenerationError


class ShortIdStrategy(ABC):
    """Abstract base class for short id generation strategies"""

    def __init__(self, length: int = 10, max_retries: int = 5):
        self.length = length
        self.max_retries = max_retries

    def generate(self, exists: Callable[[str], bool]) -> str:
        """
        Generate a short id that is not taken yet.

        Args:
            exists: Returns True when a candidate id is already stored

        Returns:
            A unique short id string

        Raises:
            ShortIdGenerationError: If every attempt produced a taken id
        """
        for attempt in range(self.max_retries):
            short_id = self._generate_candidate()
            if not exists(short_id):
                return short_id

        raise ShortIdGenerationError(
            f"Could not generate unique short id after {self.max_retries} attempts"
        )

    @abstractmethod
    def _generate_candidate(self) -> str:
        """Generate one random candidate of `self.length` characters"""
        pass


class NanoIdShortIdStrategy(ShortIdStrategy):
    """
    NanoID generation strategy (default).
    URL-safe alphabet of 64 symbols: A-Z, a-z, 0-9, '_' and '-'.

    Pros: Cryptographically random, large id space (64^10)
    Cons: '_' and '-' look odd in some fonts
    """

    ALPHABET = "_-" + string.digits + string.ascii_lowercase + string.ascii_uppercase

    def _generate_candidate(self) -> str:
        return nanoid_generate(alphabet=self.ALPHABET, size=self.length)


class RandomShortIdStrategy(ShortIdStrategy):
    """
    Alphanumeric generation strategy.
    Draws from A-Z, a-z and 0-9 only (62^10 ids).
    """

    def __init__(self, length: int = 10, max_retries: int = 5):
        super().__init__(length=length, max_retries=max_retries)
        self.characters = string.ascii_letters + string.digits

    def _generate_candidate(self) -> str:
        return ''.join(secrets.choice(self.characters) for _ in range(self.length))
