"""Application entry point for the CSM survey core."""

from __future__ import annotations

from survey_app.constants.about import APP_NAME, APP_VERSION
from survey_app.core.kiosk_store import SettingsKioskStore
from survey_app.core.survey_manager import SurveyManager
from survey_app.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, load the seeded survey state, and report its status."""
    logger = configure_logging()
    logger.info("Starting %s %s…", APP_NAME, APP_VERSION)

    manager = SurveyManager.with_seed_data(kiosk_store=SettingsKioskStore())
    summary = manager.get_summary()
    logger.info(
        "View %s, kiosk mode %s, %d questions, %d responses (average %.2f)",
        manager.get_view().name,
        "on" if manager.is_kiosk_mode() else "off",
        len(manager.get_questions()),
        summary.total_responses,
        summary.average_satisfaction,
    )
    manager.close()


if __name__ == "__main__":
    main()
