"""Configuration defaults and config file loading."""

from .settings import CALCULATOR, LOGGING, COLUMNS, read_config_file, load_config

__all__ = ['CALCULATOR', 'LOGGING', 'COLUMNS', 'read_config_file', 'load_config']
