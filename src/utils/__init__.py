from src.utils.logging_config import setup_logging
from src.utils.singleton import Singleton

__all__ = ["Singleton", "setup_logging"]
