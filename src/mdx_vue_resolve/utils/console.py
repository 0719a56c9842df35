"""
Logging and Console Utilities.

Output from the rewriter goes through the standard `logging` library, formatted
by `rich`. The Rich console sits behind a small proxy so that a host build tool
(or a test) can redirect output to another destination via `set_console`
without re-importing anything.

Attributes:
    console (_ConsoleProxy): Stable module-level reference to the active Rich Console.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

LOGGER_NAME = "mdx_vue_resolve"

# Between INFO (20) and WARNING (30)
SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

_THEME = Theme(
  {
    "logging.level.success": "green",
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "green",
    "code": "bold magenta",
  }
)


def get_logger() -> logging.Logger:
  """
  Returns the package logger.

  Returns:
      logging.Logger: The `mdx_vue_resolve` logger.
  """
  return logging.getLogger(LOGGER_NAME)


class _ConsoleProxy:
  """
  Proxy around `rich.console.Console`.

  Printing is forwarded to a swappable backend. Swapping the backend also
  re-binds the package logger's `RichHandler` so log records follow it.
  """

  def __init__(self) -> None:
    self._backend: Console = Console(theme=_THEME, stderr=True)
    self._configure_logging()

  def set_backend(self, new_console: Console) -> None:
    """
    Injects a new Console backend and updates logging handlers.

    Args:
        new_console (Console): The Rich Console instance to use.
    """
    self._backend = new_console
    self._configure_logging()

  def reset(self) -> None:
    """Restores a fresh standard error console."""
    self._backend = Console(theme=_THEME, stderr=True)
    self._configure_logging()

  @property
  def backend(self) -> Console:
    return self._backend

  def _configure_logging(self) -> None:
    logger = get_logger()
    for handler in list(logger.handlers):
      if isinstance(handler, RichHandler):
        logger.removeHandler(handler)

    rich_handler = RichHandler(
      console=self._backend,
      show_time=False,
      show_path=False,
      markup=True,
      rich_tracebacks=True,
    )
    logger.addHandler(rich_handler)
    # Records would print twice once a host configures the root logger.
    logger.propagate = False
    if logger.level == logging.NOTSET:
      logger.setLevel(logging.INFO)

  def print(self, *args: Any, **kwargs: Any) -> None:
    self._backend.print(*args, **kwargs)

  def __getattr__(self, name: str) -> Any:
    return getattr(self._backend, name)


console = _ConsoleProxy()


def set_console(new_console: Console) -> None:
  """
  Redirects console output and package logging to `new_console`.

  Args:
      new_console (Console): The configured Rich console, e.g. one recording
          into a buffer (`Console(file=io.StringIO())`).
  """
  console.set_backend(new_console)


def reset_console() -> None:
  """Resets logging and console output to standard error."""
  console.reset()


def get_console() -> Console:
  return console.backend


def log_info(msg: str) -> None:
  """
  Logs an informational message.

  Args:
      msg (str): The message content. May include rich markup.
  """
  get_logger().info(msg, extra={"markup": True})


def log_success(msg: str) -> None:
  get_logger().log(SUCCESS_LEVEL_NUM, msg, extra={"markup": True})


def log_warning(msg: str) -> None:
  get_logger().warning(msg, extra={"markup": True})


def log_error(msg: str) -> None:
  get_logger().error(msg, extra={"markup": True})
