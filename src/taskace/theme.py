# src/taskace/theme.py

from __future__ import annotations

import logging

from .core.ports import KeyValueStore

logger = logging.getLogger(__name__)

THEME_KEY = "theme"
THEMES: tuple[str, str] = ("dark", "light")


class ThemePreference:
    """
    Two-valued UI theme ("dark" / "light") persisted under its own key.

    Stored as the plain string. Unknown stored values fall back to the default.
    Write failures are logged; the in-memory value still changes.
    """

    def __init__(self, kv: KeyValueStore, *, key: str = THEME_KEY, default: str = "dark") -> None:
        self._kv = kv
        self._key = key
        self._default = default if default in THEMES else THEMES[0]
        self._value = self._default
        self.last_persist_error: Exception | None = None

    @property
    def value(self) -> str:
        return self._value

    def load(self) -> str:
        try:
            raw = self._kv.get(self._key)
        except Exception:
            logger.exception("Failed to read theme key=%s; using %s.", self._key, self._default)
            raw = None
        self._value = raw if raw in THEMES else self._default
        return self._value

    def set(self, value: str) -> str:
        value = (value or "").strip().lower()
        if value not in THEMES:
            return self._value
        self._value = value
        try:
            self._kv.set(self._key, value)
            self.last_persist_error = None
        except Exception as e:
            self.last_persist_error = e
            logger.exception("Failed to persist theme=%s.", value)
        return self._value

    def toggle(self) -> str:
        return self.set("light" if self._value == "dark" else "dark")
