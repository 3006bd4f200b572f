"""Configuration management."""

import json
import yaml
from typing import Any, Dict, List, Optional, Tuple
from pathlib import Path
from dataclasses import dataclass, field
from gravity_sim.io.parameters import BodyParams, ConfigError, MappingParameterSource
from gravity_sim.physics.forces import UPDATE_SCHEMES


@dataclass
class BodyConfig:
    """One configured body."""
    name: str
    color: str
    params: BodyParams

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BodyConfig":
        if not isinstance(data, dict) or "name" not in data:
            raise ConfigError(f"Body entry must be a mapping with a name: {data!r}")
        params = {key: value for key, value in data.items() if key not in ("name", "color")}
        return cls(
            name=str(data["name"]),
            color=str(data.get("color", "black")),
            params=BodyParams.from_dict(params),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {"name": self.name, "color": self.color}
        data.update(self.params.to_dict())
        return data


def _default_bodies() -> List[BodyConfig]:
    return [
        BodyConfig("circle1", "red", BodyParams(x=-5.0, y=0.0, radius=20.0, vx=0.0, vy=0.05)),
        BodyConfig("circle2", "green", BodyParams(x=5.0, y=0.0, radius=20.0, vx=0.0, vy=-0.05)),
        BodyConfig("circle3", "blue", BodyParams(x=0.0, y=5.0, radius=10.0, vx=0.05, vy=0.0)),
    ]


@dataclass
class Config:
    """Simulation configuration."""
    bodies: List[BodyConfig] = field(default_factory=_default_bodies)

    # Simulation parameters
    scheme: str = "sequential"
    tick_rate: float = 60.0
    max_ticks: int = 3600

    # Rendering parameters
    render: bool = False
    xlim: Tuple[float, float] = (-10.0, 10.0)
    ylim: Tuple[float, float] = (-10.0, 10.0)

    def __post_init__(self):
        names = [body.name for body in self.bodies]
        if len(set(names)) != len(names):
            raise ConfigError(f"Body names must be unique, got {names}")
        if self.tick_rate <= 0:
            raise ConfigError(f"tick_rate must be positive, got {self.tick_rate}")
        if not isinstance(self.scheme, str) or self.scheme.lower() not in UPDATE_SCHEMES:
            raise ConfigError(f"Unknown update scheme: {self.scheme}. Available: {list(UPDATE_SCHEMES.keys())}")
        self.xlim = tuple(float(v) for v in self.xlim)
        self.ylim = tuple(float(v) for v in self.ylim)

    def get_body(self, name: str) -> BodyConfig:
        for body in self.bodies:
            if body.name == name:
                return body
        raise KeyError(f"No body named '{name}'")

    def parameter_source(self) -> MappingParameterSource:
        """Parameter source over the configured bodies."""
        return MappingParameterSource({body.name: body.params for body in self.bodies})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "bodies": [body.to_dict() for body in self.bodies],
            "scheme": self.scheme,
            "tick_rate": self.tick_rate,
            "max_ticks": self.max_ticks,
            "render": self.render,
            "xlim": list(self.xlim),
            "ylim": list(self.ylim),
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Config":
        data = dict(data or {})
        if "bodies" in data:
            data["bodies"] = [BodyConfig.from_dict(body) for body in data["bodies"]]
        try:
            return cls(**data)
        except TypeError as e:
            raise ConfigError(f"Invalid configuration: {e}") from None


def default_config() -> Config:
    """Three-body configuration used when no file is given."""
    return Config()


def load_config(config_path: str) -> Config:
    """Load configuration from file.

    Args:
        config_path: Path to config file (.json or .yaml)

    Returns:
        Config object
    """
    config_path = Path(config_path)

    with open(config_path, 'r') as f:
        try:
            if config_path.suffix in ('.yaml', '.yml'):
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigError(f"Could not parse {config_path}: {e}") from e

    if data is not None and not isinstance(data, dict):
        raise ConfigError(f"Top level of {config_path} must be a mapping")
    return Config.from_dict(data)


def save_config(config: Config, output_path: str):
    """Save configuration to file.

    Args:
        config: Config object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    data = config.to_dict()

    with open(output_path, 'w') as f:
        if output_path.suffix in ('.yaml', '.yml'):
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
        else:
            json.dump(data, f, indent=2)
