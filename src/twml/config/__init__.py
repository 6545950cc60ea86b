from twml.config.factory import TwmlConfig, get_config, load_config

__all__ = ["TwmlConfig", "get_config", "load_config"]
