"""Small source of random names, prices and coin flips for seed data."""

from __future__ import annotations

import math
import random

_FIRST_NAMES = (
    "Ada", "Alma", "Amir", "Ana", "Bea", "Bruno", "Carla", "Cesar", "Dana",
    "Diego", "Elena", "Emil", "Fatima", "Felix", "Gia", "Hugo", "Ines", "Ivan",
    "Jada", "Jonas", "Kira", "Luis", "Mara", "Mateo", "Nadia", "Omar", "Paula",
    "Rafael", "Rosa", "Sami", "Tara", "Tomas", "Uma", "Vera", "Wes", "Yara",
)

_LAST_NAMES = (
    "Alvarez", "Baker", "Castillo", "Dalton", "Estrada", "Fischer", "Garcia",
    "Hughes", "Ibarra", "Jensen", "Kowalski", "Lopez", "Morales", "Nguyen",
    "Ortiz", "Perez", "Quinn", "Ramos", "Santos", "Torres", "Underwood",
    "Vargas", "Walker", "Young", "Zamora",
)

_ADJECTIVES = (
    "adorable", "brave", "bright", "calm", "clever", "eager", "fierce",
    "gentle", "happy", "jolly", "kind", "lively", "mighty", "nimble", "proud",
    "quick", "quiet", "steady", "swift", "tidy", "vivid", "witty", "zealous",
)

_NOUNS = (
    "apple", "badger", "canyon", "comet", "eagle", "falcon", "forest", "garden",
    "harvest", "island", "lantern", "meadow", "orchard", "otter", "river",
    "rocket", "summit", "thunder", "valley", "willow",
)


class Faker:
    """Random values for seeding, driven by a single random generator."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    def first_name(self) -> str:
        return self.rng.choice(_FIRST_NAMES)

    def last_name(self) -> str:
        return self.rng.choice(_LAST_NAMES)

    def crew_name(self) -> str:
        """A descriptive adjective followed by a common noun."""
        return f"{self.rng.choice(_ADJECTIVES)} {self.rng.choice(_NOUNS)}"

    def float_range(self, low: float, high: float) -> float:
        """A float in [low, high); low itself when the bounds are equal."""
        if low == high:
            return low
        return self.rng.random() * (high - low) + low

    def price(self, low: float, high: float) -> float:
        """A price in [low, high) truncated to whole cents."""
        return math.floor(self.float_range(low, high) * 100) / 100

    def flip_a_coin(self) -> str:
        return "Heads" if self.rng.random() < 0.5 else "Tails"