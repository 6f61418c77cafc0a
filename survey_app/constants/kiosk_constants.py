"""Kiosk mode and input-surface constants."""

KIOSK_SETTINGS_KEY: str = "kioskMode"
SETTINGS_ORGANIZATION: str = "Valenzuela"
SETTINGS_APPLICATION: str = "CSMSurveyKiosk"

EMERGENCY_DISABLE_KIOSK_SHORTCUT: str = "Ctrl+Shift+K"
EMERGENCY_ADMIN_SHORTCUT: str = "Ctrl+Shift+A"
