"""Base generator class for all data generators."""

from __future__ import annotations

import random
from abc import ABC

from faker import Faker


class BaseGenerator(ABC):
    """Base class for all data generators.

    Provides common initialization: a Faker instance and the random source
    every draw goes through. Each generator owns its own source, so two
    generators never share state.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_US``).
    rng : random.Random | None
        Injected random source. When provided it takes precedence over the
        Faker instance's own generator and ``seed`` is ignored.
    """

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_US",
        rng: random.Random | None = None,
    ) -> None:
        self.fake = Faker(locale)
        # Gives the instance a private Random; seed=None draws from OS entropy
        self.fake.seed_instance(seed)
        self.rng = rng if rng is not None else self.fake.random
