"""Base generator class for synthetic ledger data."""

from __future__ import annotations

import random
from abc import ABC

from faker import Faker


class BaseGenerator(ABC):
    """Base class for all data generators.

    Generators return field dicts ready for ``Collection.add(**fields)``;
    ids are left to the storage gateway.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_IE``).
    """

    def __init__(self, seed: int | None = None, locale: str = "en_IE") -> None:
        self.fake = Faker(locale)
        self.random = random.Random(seed)
        if seed is not None:
            self.fake.seed_instance(seed)

    def money(self, low: int, high: int) -> int:
        """Whole-unit amount rounded to the nearest 10."""
        return round(self.random.randint(low, high), -1)
