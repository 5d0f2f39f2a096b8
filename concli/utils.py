# Concli CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import functools
import inspect
import logging
import os
from typing import Any, Awaitable, Callable, TypeVar

import pythonjsonlogger.json
from rich.logging import RichHandler

T = TypeVar("T")


def is_coroutine(function: Callable[..., Any]) -> bool:
    return inspect.iscoroutinefunction(function)


def ensure_async(function: Callable[..., T]) -> Callable[..., Awaitable[T]]:
    if not callable(function):
        raise TypeError(f"{function} is not callable")

    if is_coroutine(function):
        return function  # type: ignore

    @functools.wraps(function)
    async def async_wrapper(*args, **kwargs) -> T:
        result = function(*args, **kwargs)
        if inspect.isawaitable(result):
            return await result
        return result

    return async_wrapper


class CaseInsensitiveDict(dict):
    """A case-insensitive dictionary that treats all keys as lowercase."""

    def _normalize_key(self, key):
        return key.lower() if isinstance(key, str) else key

    def __setitem__(self, key, value):
        super().__setitem__(self._normalize_key(key), value)

    def __getitem__(self, key):
        return super().__getitem__(self._normalize_key(key))

    def __contains__(self, key):
        return super().__contains__(self._normalize_key(key))

    def get(self, key, default=None):
        return super().get(self._normalize_key(key), default)

    def pop(self, key, default=None):
        return super().pop(self._normalize_key(key), default)

    def update(self, other=None, **kwargs):
        items = {}
        if other:
            items.update({self._normalize_key(k): v for k, v in other.items()})
        items.update({self._normalize_key(k): v for k, v in kwargs.items()})
        super().update(items)


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
    except OSError:
        return False
    return any(
        marker in content for marker in ("docker", "kubepods", "containerd", "podman")
    )


JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def _json_formatter() -> logging.Formatter:
    return pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT)


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Route the "concli" parse and dispatch trace to the console and optionally a file.

    Concli never installs handlers on import. `CommandLine.run()` calls this when
    `CliConfig.log_mode` is set; applications may also call it once at startup.
    The root logger is reset on every call, so calling it again replaces the
    previous setup instead of stacking handlers.

    Args:
        mode (str | None): "cli" for Rich formatted console records, "json" for one
            JSON object per record. Falls back to `CONCLI_LOG_MODE`, then to "json"
            inside a container and "cli" elsewhere.
        log_filename (str | None): Also write records to this file when given.
        json_log_to_file (bool): Write file records as JSON instead of plain text.
        file_log_level (int): Threshold for the file handler.
        console_log_level (int): Threshold for the console handler. The default of
            WARNING hides the parser's DEBUG trace unless lowered.

    Raises:
        ValueError: If `mode` is neither "cli" nor "json".
    """
    if not mode:
        mode = os.getenv("CONCLI_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    if root.hasHandlers():
        root.handlers.clear()

    if mode == "cli":
        console_handler: logging.Handler = RichHandler(
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    elif mode == "json":
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(_json_formatter())
    else:
        raise ValueError(f"Invalid log mode: {mode}")

    console_handler.setLevel(console_log_level)
    root.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(file_log_level)
        file_handler.setFormatter(
            _json_formatter()
            if json_log_to_file
            else logging.Formatter(
                "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root.addHandler(file_handler)

    logging.getLogger("asyncio").setLevel(logging.WARNING)

    logger = logging.getLogger("concli")
    logger.propagate = True
    logger.debug("Logging initialized in '%s' mode.", mode)
