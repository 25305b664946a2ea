from .logger_utils import Log
from .config_manager import Config

__all__ = ["Log", "Config"]
