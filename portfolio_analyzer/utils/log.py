"""
Logging utilities for the portfolio analyzer.

Provides colorful CLI logging using the rich library.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


# Global console instance
console = Console()

# Logger instances cache
_loggers: dict = {}


def setup_logger(
    name: str = "portfolio_analyzer",
    level: int = logging.INFO,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Set up and configure a logger with rich formatting.
    
    Args:
        name: Logger name
        level: Logging level (default: INFO)
        log_file: Optional file path to write logs
        
    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    
    # Clear existing handlers
    logger.handlers.clear()
    
    console_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        markup=True,
        rich_tracebacks=True
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    console_handler.setLevel(level)
    logger.addHandler(console_handler)
    
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        file_handler.setLevel(level)
        logger.addHandler(file_handler)
    
    _loggers[name] = logger
    return logger


def get_logger(name: str = "portfolio_analyzer") -> logging.Logger:
    """
    Get or create a child logger of the package logger.
    
    Args:
        name: Area name (e.g. 'contrast', 'renderer')
        
    Returns:
        Logger instance
    """
    if name == "portfolio_analyzer":
        if name not in _loggers:
            return setup_logger(name)
        return _loggers[name]
    
    # Child loggers propagate to the package logger configured by setup_logger
    return logging.getLogger(f"portfolio_analyzer.{name}")


def print_status(message: str, style: str = "bold blue") -> None:
    """
    Print a styled status message.
    
    Args:
        message: Message to print
        style: Rich style string
    """
    console.print(f"[{style}]{message}[/{style}]")


def print_error(message: str) -> None:
    """Print an error message."""
    print_status(f"❌ {message}", "bold red")


def print_success(message: str) -> None:
    """Print a success message."""
    print_status(f"✅ {message}", "bold green")


def print_warning(message: str) -> None:
    """Print a warning message."""
    print_status(f"⚠️ {message}", "bold yellow")


def print_info(message: str) -> None:
    """Print an info message."""
    print_status(f"ℹ️ {message}", "bold cyan")
