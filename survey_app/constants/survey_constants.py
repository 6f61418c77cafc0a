"""Survey-related constants shared across the core layers."""

SQD_FIELDS: tuple[str, ...] = tuple(f"sqd{index}" for index in range(9))
CC_FIELDS: tuple[str, ...] = ("cc1", "cc2", "cc3")

NA_ANSWER: str = "na"
LIKERT_MIN: int = 1
LIKERT_MAX: int = 5

# Average reported when every SQD answer is "na".
ALL_NA_AVERAGE: float = 0.0
AVERAGE_DISPLAY_DIGITS: int = 1

REF_ID_PREFIX: str = "VZM-CSM"
