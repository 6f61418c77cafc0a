"""Durable kiosk flag with a change-notification channel.

Every write broadcasts a payload-free "kiosk flag changed" signal. Listeners
re-read the store when notified; delivery is fire-and-forget to whoever is
connected at the time of the write.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
import logging
from pathlib import Path

from PySide6.QtCore import QObject, QSettings, Signal

from survey_app.constants.kiosk_constants import (
    KIOSK_SETTINGS_KEY,
    SETTINGS_APPLICATION,
    SETTINGS_ORGANIZATION,
)

logger = logging.getLogger(__name__)

Unsubscribe = Callable[[], None]


class KioskChannel(QObject):
    """Broadcast channel carrying no payload beyond "the flag changed"."""

    changed = Signal()


class KioskStateStore(ABC):
    """Read/write surface for the persistent kiosk flag."""

    def __init__(self, channel: KioskChannel | None = None) -> None:
        self._channel = channel or KioskChannel()

    @abstractmethod
    def get(self) -> bool:
        """Return the durable kiosk flag (False when unset)."""

    @abstractmethod
    def _write(self, enabled: bool | None) -> None:
        """Persist ``enabled``; ``None`` removes the entry."""

    def set(self, enabled: bool) -> None:
        self._write(bool(enabled))
        self.notify()

    def clear(self) -> None:
        self._write(None)
        self.notify()

    def on_change(self, callback: Callable[[], None]) -> Unsubscribe:
        self._channel.changed.connect(callback)

        def unsubscribe() -> None:
            self._channel.changed.disconnect(callback)

        return unsubscribe

    def notify(self) -> None:
        self._channel.changed.emit()


class InMemoryKioskStore(KioskStateStore):
    """Process-local store, handy for tests and single-window sessions."""

    def __init__(self, initial: bool = False, channel: KioskChannel | None = None) -> None:
        super().__init__(channel)
        self._values: dict[str, bool] = {}
        if initial:
            self._values[KIOSK_SETTINGS_KEY] = True

    def get(self) -> bool:
        return self._values.get(KIOSK_SETTINGS_KEY, False)

    def _write(self, enabled: bool | None) -> None:
        if enabled is None:
            self._values.pop(KIOSK_SETTINGS_KEY, None)
        else:
            self._values[KIOSK_SETTINGS_KEY] = enabled


class SettingsKioskStore(KioskStateStore):
    """Kiosk flag persisted through ``QSettings``.

    Other processes write the same settings file; call :meth:`reload` when
    the file may have changed to pick up their writes and notify listeners.
    """

    def __init__(self, settings: QSettings | None = None, channel: KioskChannel | None = None) -> None:
        super().__init__(channel)
        self._settings = settings or QSettings(SETTINGS_ORGANIZATION, SETTINGS_APPLICATION)
        self._last_known = self.get()

    @classmethod
    def from_file(cls, path: Path, channel: KioskChannel | None = None) -> "SettingsKioskStore":
        return cls(QSettings(str(path), QSettings.Format.IniFormat), channel)

    def get(self) -> bool:
        return bool(self._settings.value(KIOSK_SETTINGS_KEY, False, type=bool))

    def _write(self, enabled: bool | None) -> None:
        if enabled is None:
            self._settings.remove(KIOSK_SETTINGS_KEY)
        else:
            self._settings.setValue(KIOSK_SETTINGS_KEY, enabled)
        self._settings.sync()
        self._last_known = self.get()

    def reload(self) -> bool:
        """Re-read the settings file; notify listeners if the flag changed.

        Returns True when a change was observed.
        """
        self._settings.sync()
        current = self.get()
        if current == self._last_known:
            return False
        logger.info("Kiosk flag changed externally: %s", current)
        self._last_known = current
        self.notify()
        return True
