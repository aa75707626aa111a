"""ETL utilities package: logging."""

from scorebot.etl.utils.logger import setup_logger

__all__ = ["setup_logger"]
