"""
Config loading: discovery, output, extractor and logging sections from src/config/config.yaml.
Add new providers (env, vault, etc.) by implementing ConfigProvider.
"""

from commons.config.loader import ConfigProvider, YamlConfigProvider, get_config, section

_config_instance = None


def load_config(path=None):
    """Load config once per process; optional path for tests or overrides."""
    global _config_instance
    if _config_instance is None:
        _config_instance = YamlConfigProvider(path=path).load()
    return _config_instance


# Module-level dict read by components for their defaults
config = load_config()

__all__ = ["ConfigProvider", "YamlConfigProvider", "get_config", "load_config", "section", "config"]
