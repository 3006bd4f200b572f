"""Parameter input for initial and reset body state."""

from gravity_sim.io.parameters import BodyParams, ConfigError, ParameterSource, MappingParameterSource

__all__ = ["BodyParams", "ConfigError", "ParameterSource", "MappingParameterSource"]
