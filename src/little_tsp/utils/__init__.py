from little_tsp.utils.logging_config import setup_logger

__all__ = [
    "setup_logger",
]
