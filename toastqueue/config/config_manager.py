"""Configuration loading and access helpers for the toast queue."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

import yaml

from toastqueue.notifications.notification_manager import NotificationKind


CONFIG_SCHEMA_VERSION = "1"

DEFAULT_AUTO_CLOSE_MS = 3000


def _default_auto_close() -> Dict[NotificationKind, Optional[int]]:
    return {kind: DEFAULT_AUTO_CLOSE_MS for kind in NotificationKind}


@dataclass
class ToastPolicy:
    max_visible: int = 0  # 0 = unlimited
    auto_close_ms: Dict[NotificationKind, Optional[int]] = field(default_factory=_default_auto_close)

    def auto_close_for(self, kind: NotificationKind) -> Optional[int]:
        return self.auto_close_ms.get(kind, DEFAULT_AUTO_CLOSE_MS)


@dataclass
class UIConfig:
    title: str = "Notifications"
    width: int = 420


@dataclass
class AppConfig:
    schema_version: str = CONFIG_SCHEMA_VERSION
    toasts: ToastPolicy = field(default_factory=ToastPolicy)
    ui: UIConfig = field(default_factory=UIConfig)


def _load_yaml(path: Path) -> Dict:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid configuration format in {path}")
    return data


def _section(raw: Dict, key: str, path: Path) -> Dict:
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"Invalid configuration format in {path}: '{key}' must be a mapping")
    return value


def _parse_delay(value) -> Optional[int]:
    if value is None:
        return None
    return int(value)


def load_config(path: Path) -> AppConfig:
    raw = _load_yaml(path)
    schema_version = raw.get("schema_version", CONFIG_SCHEMA_VERSION)
    if str(schema_version) != CONFIG_SCHEMA_VERSION:
        raise ValueError(
            f"Unsupported config schema_version={schema_version}; expected {CONFIG_SCHEMA_VERSION}."
        )

    toasts_raw = _section(raw, "toasts", path)
    auto_close = _default_auto_close()
    for kind_name, delay in _section(toasts_raw, "auto_close_ms", path).items():
        auto_close[NotificationKind.coerce(kind_name)] = _parse_delay(delay)
    toasts = ToastPolicy(
        max_visible=int(toasts_raw.get("max_visible", 0)),
        auto_close_ms=auto_close,
    )

    ui_raw = _section(raw, "ui", path)
    ui = UIConfig(
        title=str(ui_raw.get("title", "Notifications")),
        width=int(ui_raw.get("width", 420)),
    )

    config = AppConfig(
        schema_version=CONFIG_SCHEMA_VERSION,
        toasts=toasts,
        ui=ui,
    )
    validate_config(config)
    return config


def ensure_config(path: Path) -> AppConfig:
    if not path.exists():
        default = AppConfig()
        save_config(default, path)
        return default
    return load_config(path)


def validate_config(config: AppConfig) -> None:
    def ensure(condition: bool, message: str) -> None:
        if not condition:
            raise ValueError(message)

    toasts = config.toasts
    ensure(toasts.max_visible >= 0, f"toasts.max_visible must be non-negative (got {toasts.max_visible}).")
    for kind, delay in toasts.auto_close_ms.items():
        ensure(isinstance(kind, NotificationKind), f"toasts.auto_close_ms has unknown kind {kind!r}.")
        if delay is not None:
            ensure(delay >= 0, f"toasts.auto_close_ms.{kind.value} must be non-negative or null (got {delay}).")

    ensure(config.ui.width > 0, f"ui.width must be positive (got {config.ui.width}).")


def save_config(config: AppConfig, path: Path) -> None:
    validate_config(config)
    data = {
        "schema_version": config.schema_version,
        "toasts": {
            "max_visible": config.toasts.max_visible,
            "auto_close_ms": {
                kind.value: delay for kind, delay in config.toasts.auto_close_ms.items()
            },
        },
        "ui": {
            "title": config.ui.title,
            "width": config.ui.width,
        },
    }
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(data, handle, sort_keys=False)
