"""Configuration utilities."""

from gravity_sim.utils.config import load_config, save_config, default_config, Config, BodyConfig

__all__ = ["load_config", "save_config", "default_config", "Config", "BodyConfig"]
