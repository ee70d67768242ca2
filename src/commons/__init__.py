"""
Extendible commons package.

Subpackages:
  config   - ConfigProvider, YamlConfigProvider; add env/vault by implementing ConfigProvider
  io       - FileReader, FileWriter; add SharePoint/S3 by implementing these
  folder   - FileDiscoverer, companion_path; add remote stores via new discoverers

Public API: config, load_config, Constants, setup_logging; config_pkg, io_pkg, folder_pkg for extension.
"""

from commons.config import config, load_config
from commons.constants import Constants
from commons.log import setup_logging

# Extendible modules (use these to plug in new implementations)
from commons import config as config_pkg
from commons import io as io_pkg
from commons import folder as folder_pkg

__all__ = [
    "config",
    "load_config",
    "Constants",
    "setup_logging",
    "config_pkg",
    "io_pkg",
    "folder_pkg",
]
