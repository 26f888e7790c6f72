from .logger import LoggerManager

__all__ = ["LoggerManager"]
