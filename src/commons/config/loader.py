"""Config provider protocol and implementations. Extend by adding new providers."""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

# Load .env so VERBOSE / EXTRACTOR_COMMAND overrides come from env
_project_root = Path(__file__).resolve().parent.parent.parent.parent
load_dotenv(_project_root / ".env")


class ConfigProvider:
    """Protocol for config sources. Implement to add env, vault, remote, etc."""

    def load(self) -> Dict[str, Any]:
        """Return the full config dict."""
        raise NotImplementedError


class YamlConfigProvider(ConfigProvider):
    """Load config from a YAML file. An empty file yields an empty dict."""

    def __init__(self, path: Optional[Path] = None):
        self.path = path or (
            Path(__file__).resolve().parent.parent.parent / "config" / "config.yaml"
        )

    def load(self) -> Dict[str, Any]:
        with open(self.path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}


def get_config(provider: Optional[ConfigProvider] = None) -> Dict[str, Any]:
    """Get config from the given provider, or default YAML."""
    if provider is None:
        provider = YamlConfigProvider()
    return provider.load()


def section(cfg: Dict[str, Any], name: str) -> Dict[str, Any]:
    """Return a config section as a dict (missing or null sections become {})."""
    return cfg.get(name) or {}
