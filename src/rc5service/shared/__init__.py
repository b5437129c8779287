from .config import Config, load_config
from .logger import Logger

__all__ = ["Config", "Logger", "load_config"]
