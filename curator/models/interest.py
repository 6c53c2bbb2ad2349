from collections.abc import Callable, Iterable
from decimal import Decimal
from typing import Any, NamedTuple

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class InterestKey(NamedTuple):
    """A (dimension, value) tag, e.g. ("genre", "Action")."""

    dimension: str
    value: str

    def __str__(self) -> str:
        return f"{self.dimension}:{self.value}"

    @classmethod
    def parse(cls, raw: str) -> "InterestKey":
        dimension, _, value = raw.partition(":")
        return cls(dimension, value)


def _to_decimal(weight: Any) -> Decimal:
    return weight if isinstance(weight, Decimal) else Decimal(str(weight))


def _as_external(weights: dict[InterestKey, Decimal]) -> dict[str, float]:
    return {str(key): float(weight) for key, weight in weights.items()}


class InterestProfile(BaseModel):
    """
    Additive interest profile.

    Weights are accumulated with exact decimal arithmetic so the final map does
    not depend on the order interactions were recorded in. There is no decay
    and no normalization: a weight can only grow during a session.

    The ``"dimension:value"`` string form is used only when the profile is
    serialized.
    """

    model_config = ConfigDict(frozen=True)

    weights: dict[InterestKey, Decimal] = Field(default_factory=dict)

    @field_validator("weights", mode="before")
    @classmethod
    def parse_weights(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        return {
            (InterestKey.parse(key) if isinstance(key, str) else InterestKey(*key)): _to_decimal(weight)
            for key, weight in value.items()
        }

    @field_serializer("weights")
    def serialize_weights(self, weights: dict[InterestKey, Decimal]) -> dict[str, float]:
        return _as_external(weights)

    def __len__(self) -> int:
        return len(self.weights)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, str):
            key = InterestKey.parse(key)
        return key in self.weights

    def weight(self, key: InterestKey | str) -> float:
        if isinstance(key, str):
            key = InterestKey.parse(key)
        return float(self.weights.get(key, Decimal(0)))

    def items(self) -> list[tuple[InterestKey, float]]:
        return [(key, float(weight)) for key, weight in self.weights.items()]

    def add(self, pairs: Iterable[tuple[str, str]], increment: float) -> "InterestProfile":
        """Return a new profile with ``increment`` added to every pair."""
        step = _to_decimal(increment)
        weights = dict(self.weights)
        for dimension, value in pairs:
            key = InterestKey(dimension, value)
            weights[key] = weights.get(key, Decimal(0)) + step
        return self.model_copy(update={"weights": weights})

    def get_top_interests(
        self,
        limit: int = 5,
        min_weight: float = 0.0,
        eligible: Callable[[InterestKey], bool] | None = None,
    ) -> list[tuple[InterestKey, float]]:
        """Top N keys by weight. Ties keep insertion order."""
        threshold = _to_decimal(min_weight)
        ranked = [
            (key, weight)
            for key, weight in self.weights.items()
            if weight >= threshold and (eligible is None or eligible(key))
        ]
        ranked.sort(key=lambda x: x[1], reverse=True)
        return [(key, float(weight)) for key, weight in ranked[:limit]]

    def as_dict(self) -> dict[str, float]:
        return _as_external(self.weights)
