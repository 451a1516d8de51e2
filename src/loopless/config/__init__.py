from .loader import ConfigError, load_config, load_raw_config, parse_config

__all__ = ["ConfigError", "load_config", "load_raw_config", "parse_config"]
