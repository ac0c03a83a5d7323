# word_index/utils/__init__.py
# logging and config helpers shared across the package

from .logger_utils import Log, log
from .config_manager import Config

__all__ = ["Log", "log", "Config"]
