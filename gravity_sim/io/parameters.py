"""Initial and reset parameters for bodies, validated once at the boundary."""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple


class ConfigError(ValueError):
    """Raised when configuration or body parameters are invalid."""


@dataclass(frozen=True)
class BodyParams:
    """Position, radius and velocity of one body."""
    x: float
    y: float
    radius: float
    vx: float = 0.0
    vy: float = 0.0

    def __post_init__(self):
        for field_name in ("x", "y", "radius", "vx", "vy"):
            value = getattr(self, field_name)
            try:
                value = float(value)
            except (TypeError, ValueError):
                raise ConfigError(f"{field_name} must be a number, got {value!r}") from None
            if not math.isfinite(value):
                raise ConfigError(f"{field_name} must be finite, got {value}")
            object.__setattr__(self, field_name, value)
        if self.radius <= 0:
            raise ConfigError(f"radius must be positive, got {self.radius}")

    @property
    def velocity(self) -> Tuple[float, float]:
        return (self.vx, self.vy)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BodyParams":
        """Build from ``{x, y, radius, velocity: {x, y}}``.

        Args:
            data: Parameter mapping, velocity may be omitted

        Returns:
            Validated BodyParams
        """
        try:
            velocity = data.get("velocity") or {}
            return cls(
                x=data["x"],
                y=data["y"],
                radius=data["radius"],
                vx=velocity.get("x", 0.0),
                vy=velocity.get("y", 0.0),
            )
        except KeyError as e:
            raise ConfigError(f"Missing body parameter: {e.args[0]}") from None
        except AttributeError:
            raise ConfigError(f"Malformed body parameters: {data!r}") from None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "radius": self.radius,
            "velocity": {"x": self.vx, "y": self.vy},
        }


class ParameterSource(ABC):
    """Supplies initial or reset values for named bodies."""

    @abstractmethod
    def read_body(self, name: str) -> BodyParams:
        """Return parameters for the body called ``name``."""
        pass


class MappingParameterSource(ParameterSource):
    """Parameter source backed by a name -> BodyParams mapping."""

    def __init__(self, params: Mapping[str, BodyParams]):
        self.params = dict(params)

    def read_body(self, name: str) -> BodyParams:
        if name not in self.params:
            raise KeyError(f"No parameters for body '{name}'. Available: {list(self.params.keys())}")
        return self.params[name]

    def update(self, name: str, params: BodyParams):
        """Replace the parameters of one body, as an input field edit would."""
        self.params[name] = params
