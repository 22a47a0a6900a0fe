"""Telemetry services built directly on telelog.

The buffers only need a narrow surface:

``configure(...)`` -- override or preset the telelog configuration
``get_logger(name)`` -- fetch (and cache) a configured logger
``record_event(name, ...)`` -- emit structured events at a chosen level
``span(name, ...)`` -- profile a block and optionally track it as a component
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "DEFERRED_EDIT_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "deferred_edit")
DEFAULT_LOG_LEVEL = "WARNING"

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def _env_flag(name: str, default: bool) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set, bytes)) else str(value)


def _format_pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), _stringify(value)) for key, value in data.items()]


def _build_preset_config(preset: str) -> Any:
    config = tl.Config()
    key = preset.lower()

    if key == "development":
        config.with_min_level("DEBUG")
        config.with_console_output(True)
        config.with_colored_output(True)
        config.with_json_format(False)
    elif key == "production":
        config.with_min_level("INFO")
        config.with_console_output(False)
        config.with_file_output(_env("LOG_FILE") or "deferred_edit.log")
        config.with_buffering(True)
    else:
        raise ValueError(f"Unknown preset '{preset}'.")

    config.with_profiling(True)
    return config


def _build_default_config() -> Any:
    config = tl.Config()
    config.with_min_level((_env("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper())

    if _env_flag("DISABLE_CONSOLE", False):
        config.with_console_output(False)
    else:
        config.with_console_output(True)
        config.with_colored_output(not _env_flag("NO_COLOR", False))

    if _env_flag("LOG_JSON", False):
        config.with_json_format(True)

    log_file = _env("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)

    config.with_profiling(True)
    return config


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Replace the active telelog configuration.

    ``config`` is an explicit ``tl.Config``; ``preset`` names one of
    ``"development"`` or ``"production"``. The two are mutually exclusive.
    Cached loggers are dropped so the next ``get_logger`` picks up the change.
    """

    global _ACTIVE_CONFIG
    if config and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if preset:
        config = _build_preset_config(preset)
    elif config is None:
        config = _build_default_config()

    _ACTIVE_CONFIG = config
    _LOGGER_CACHE.clear()


def _ensure_config() -> Any:
    global _ACTIVE_CONFIG
    if _ACTIVE_CONFIG is None:
        _ACTIVE_CONFIG = _build_default_config()
    return _ACTIVE_CONFIG


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached ``telelog.Logger`` for ``name``."""

    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGER_CACHE:
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(
            logger_name, _ensure_config()
        )
    return _LOGGER_CACHE[logger_name]


def _resolve_level_method(logger: Any, level: Any) -> Tuple[Any, bool]:
    name = str(level).lower()
    with_attr = getattr(logger, f"{name}_with", None)
    if with_attr is not None:
        return with_attr, True

    attr = getattr(logger, name, None)
    if attr is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    return attr, False


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit a structured ``event::<name>`` record."""

    log = get_logger(logger_name)
    payload = {"event": name, **(data or {})}
    method, accepts_data = _resolve_level_method(log, level)
    message = f"event::{name}"
    if accepts_data:
        method(message, _format_pairs(payload))
    else:
        method(f"{message} {payload}")


@dataclass
class SpanHandle:
    """Handle yielded by ``span`` for attaching metadata mid-flight."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def fail(self, reason: str) -> None:
        payload = {"span": self.span_name, **self.metadata, "reason": reason}
        if self.component_name:
            payload["component"] = self.component_name

        method, accepts = _resolve_level_method(self.logger, "error")
        if accepts:
            method("span::fail", _format_pairs(payload))
        else:
            method(f"span::fail {payload}")


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a code block and, optionally, track it as a component.

    Parameters
    ----------
    name:
        Operation name passed to ``logger.profile``.
    logger_name:
        Target logger; defaults to the package logger.
    component:
        ``True`` reuses ``name`` as the component identifier, a string names
        the component explicitly.
    metadata:
        Key/value pairs pushed as logger context for the duration of the block.
    """

    log = get_logger(logger_name)
    component_name = None
    if component is True:
        component_name = name
    elif isinstance(component, str):
        component_name = component

    context_keys = []
    metadata_payload: Dict[str, Any] = {}
    for key, value in (metadata or {}).items():
        serialized = _stringify(value)
        metadata_payload[key] = serialized
        log.add_context(key, serialized)
        context_keys.append(key)

    with ExitStack() as stack:
        if component_name:
            stack.enter_context(log.track_component(component_name))

        stack.enter_context(log.profile(name))
        handle = SpanHandle(
            logger=log,
            span_name=name,
            component_name=component_name,
            metadata=metadata_payload,
        )

        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise
        finally:
            for key in context_keys:
                log.remove_context(key)


configure()

__all__ = [
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
