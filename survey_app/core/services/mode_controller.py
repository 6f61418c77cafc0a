"""State machine selecting the active view and tracking kiosk mode."""

from __future__ import annotations

from collections.abc import Callable
import logging

from PySide6.QtCore import QObject, Signal

from survey_app.constants.kiosk_constants import (
    EMERGENCY_ADMIN_SHORTCUT,
    EMERGENCY_DISABLE_KIOSK_SHORTCUT,
)
from survey_app.core.errors import InvalidTransitionError
from survey_app.core.kiosk_store import KioskStateStore
from survey_app.core.models import LandingVariant, View

logger = logging.getLogger(__name__)


class ModeController(QObject):
    """Drives the landing / survey / admin views for one execution context.

    The view is local to the controller. The kiosk flag is mirrored from the
    shared store: every controller re-reads it whenever the store broadcasts
    a change, so flips made in one context show up in all the others.
    """

    view_changed = Signal(object)
    kiosk_mode_changed = Signal(bool)

    def __init__(self, kiosk_store: KioskStateStore, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._store = kiosk_store
        self._view = View.LANDING
        self._kiosk_mode = kiosk_store.get()
        self._unsubscribe: Callable[[], None] | None = kiosk_store.on_change(self._on_store_changed)
        self._events: dict[str, Callable[[], None]] = {
            "startSurvey": self.start_survey,
            "cancel": self.cancel,
            "adminLogin": self.admin_login,
            "logout": self.logout,
            "emergencyDisableKiosk": self.emergency_disable_kiosk,
            "emergencyAdminAccess": self.emergency_admin_access,
        }
        self._shortcuts: dict[str, Callable[[], None]] = {
            _normalize_shortcut(EMERGENCY_DISABLE_KIOSK_SHORTCUT): self.emergency_disable_kiosk,
            _normalize_shortcut(EMERGENCY_ADMIN_SHORTCUT): self.emergency_admin_access,
        }

    @property
    def view(self) -> View:
        return self._view

    @property
    def kiosk_mode(self) -> bool:
        return self._kiosk_mode

    @property
    def landing_variant(self) -> LandingVariant:
        return LandingVariant.KIOSK if self._kiosk_mode else LandingVariant.STANDARD

    def is_admin_navigation_visible(self) -> bool:
        return not self._kiosk_mode

    # --- Ordinary input events ---

    def start_survey(self) -> None:
        self._require(View.LANDING, event="startSurvey")
        self._set_view(View.SURVEY)

    def cancel(self) -> None:
        self._require(View.SURVEY, event="cancel")
        self._set_view(View.LANDING)

    def admin_login(self) -> None:
        self._require(View.LANDING, View.SURVEY, event="adminLogin")
        if self._kiosk_mode:
            raise InvalidTransitionError("Admin login is hidden while kiosk mode is on.")
        self._set_view(View.ADMIN)

    def logout(self) -> None:
        self._require(View.ADMIN, event="logout")
        self._set_view(View.LANDING)

    # --- Emergency overrides, honoured regardless of kiosk state ---

    def emergency_admin_access(self) -> None:
        logger.warning("Admin access via emergency shortcut")
        self._set_view(View.ADMIN)

    def emergency_disable_kiosk(self) -> None:
        logger.warning("Kiosk mode disabled via emergency shortcut")
        self._store.clear()
        # No-op unless this controller was already closed.
        self._apply_kiosk_mode(False)

    # --- Admin surface writer ---

    def set_kiosk_mode(self, enabled: bool) -> None:
        self._store.set(enabled)
        self._apply_kiosk_mode(self._store.get())

    # --- Dispatch from the input boundary ---

    def handle_event(self, name: str) -> None:
        handler = self._events.get(name)
        if handler is None:
            raise ValueError(f"Unknown input event: {name!r}")
        handler()

    def handle_shortcut(self, shortcut: str) -> bool:
        """Run the emergency action bound to ``shortcut``; return whether it matched."""
        handler = self._shortcuts.get(_normalize_shortcut(shortcut))
        if handler is None:
            return False
        handler()
        return True

    def close(self) -> None:
        """Stop observing the kiosk store."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_store_changed(self) -> None:
        self._apply_kiosk_mode(self._store.get())

    def _apply_kiosk_mode(self, enabled: bool) -> None:
        if enabled == self._kiosk_mode:
            return
        self._kiosk_mode = enabled
        logger.info("Kiosk mode %s", "enabled" if enabled else "disabled")
        self.kiosk_mode_changed.emit(enabled)

    def _set_view(self, view: View) -> None:
        if view is self._view:
            return
        logger.debug("View %s -> %s", self._view.name, view.name)
        self._view = view
        self.view_changed.emit(view)

    def _require(self, *allowed: View, event: str) -> None:
        if self._view not in allowed:
            raise InvalidTransitionError(f"'{event}' is not available from {self._view.name}.")


def _normalize_shortcut(shortcut: str) -> str:
    parts = [part.strip().lower() for part in shortcut.split("+")]
    *modifiers, key = parts
    return "+".join(sorted(modifiers) + [key])
