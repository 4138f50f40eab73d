"""Human-facing order confirmation codes."""

from __future__ import annotations

import random

MIN_CONFIRMATION_NUMBER = 100_000_000
MAX_CONFIRMATION_NUMBER = 999_999_999


class ConfirmationNumberGenerator:
    """Draws nine-digit codes uniformly at random.

    Codes are cosmetic and may repeat across orders; the order ID is the
    key. Pass a seeded ``random.Random`` for reproducible codes.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def generate(self) -> int:
        return self._rng.randint(MIN_CONFIRMATION_NUMBER, MAX_CONFIRMATION_NUMBER)
