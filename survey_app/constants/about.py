"""Static metadata describing the CSM survey kiosk."""

APP_NAME = "CSM Survey Kiosk"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "Client Satisfaction Measurement survey core: collects ARTA-compliant "
    "citizen feedback on unattended kiosks and lets administrators edit "
    "questions, manage users, and review aggregated results."
)
