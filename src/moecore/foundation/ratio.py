"""Exact rational probabilities for variation rates and per-gene coins."""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction

import numpy as np

from .exceptions import InvalidConfigurationError


@dataclass(frozen=True)
class Ratio:
    """
    Probability ``numerator / denominator``.

    Sampling uses integer draws so that ``Ratio(1, n)`` fires with probability
    exactly ``1/n`` instead of going through a float comparison.
    """

    numerator: int
    denominator: int

    def __post_init__(self) -> None:
        if self.denominator <= 0:
            raise InvalidConfigurationError(
                f"Ratio denominator must be positive, got {self.denominator}.",
                numerator=self.numerator,
                denominator=self.denominator,
            )
        if not 0 <= self.numerator <= self.denominator:
            raise InvalidConfigurationError(
                f"Ratio {self.numerator}/{self.denominator} is not a probability.",
                "Use 0 <= numerator <= denominator",
                numerator=self.numerator,
                denominator=self.denominator,
            )

    @property
    def probability(self) -> float:
        return self.numerator / self.denominator

    def sample(self, rng: np.random.Generator) -> bool:
        return bool(rng.integers(0, self.denominator) < self.numerator)

    def sample_mask(self, rng: np.random.Generator, size: int) -> np.ndarray:
        """Return ``size`` independent draws as a boolean mask."""
        draws = np.asarray(rng.integers(0, self.denominator, size=size))
        return draws < self.numerator

    @classmethod
    def parse(cls, value: Ratio | str | float | int, n_var: int | None = None) -> Ratio:
        """
        Build a Ratio from the usual ways rates are written.

        Accepts an existing Ratio, ``"a/b"`` strings, ``"k/n"`` strings (``n`` is
        the number of decision variables and must then be given) and plain
        floats in ``[0, 1]``.

        >>> Ratio.parse("3/10")
        Ratio(numerator=3, denominator=10)
        >>> Ratio.parse("1/n", n_var=4)
        Ratio(numerator=1, denominator=4)
        """
        if isinstance(value, Ratio):
            return value
        if isinstance(value, str):
            text = value.strip().lower()
            num_str, sep, den_str = text.partition("/")
            if not sep:
                return cls.parse(_to_float(value), n_var=n_var)
            num_str = num_str.strip() or "1"
            den_str = den_str.strip()
            if den_str == "n":
                if n_var is None:
                    raise InvalidConfigurationError(
                        f"Rate '{value}' refers to n but the number of variables is unknown.",
                        "Pass n_var or use an explicit denominator",
                    )
                den_str = str(n_var)
            try:
                return cls(int(num_str), int(den_str))
            except ValueError as exc:
                raise InvalidConfigurationError(f"Cannot parse rate '{value}'.") from exc
        prob = _to_float(value)
        if not 0.0 <= prob <= 1.0:
            raise InvalidConfigurationError(f"Rate {value!r} is not a probability.", "Use a value in [0, 1]")
        frac = Fraction(prob).limit_denominator(1_000_000)
        return cls(frac.numerator, frac.denominator)

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


def _to_float(value: object) -> float:
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise InvalidConfigurationError(f"Cannot parse rate {value!r}.") from exc


__all__ = ["Ratio"]
