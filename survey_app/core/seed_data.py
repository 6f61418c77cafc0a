"""Default questionnaire, sample responses, and accounts for a fresh install."""

from __future__ import annotations

from survey_app.constants.survey_constants import SQD_FIELDS
from survey_app.core.models import (
    QuestionCategory,
    QuestionType,
    SurveyQuestion,
    SurveyResponse,
    User,
)
from survey_app.core.services.score_calculator import compute_average

_SQD_TEXTS = [
    "I am satisfied with the service that I availed.",
    "I spent a reasonable amount of time for my transaction.",
    "The office followed the transaction's requirements and steps based on the information provided.",
    "The steps (including payment) I needed to do for my transaction were easy and simple.",
    "I easily found information about my transaction from the office or its website.",
    "I paid a reasonable amount of fees for my transaction. (If service was free, mark the 'N/A' column.)",
    'I feel the office was fair to everyone, or "walang palakasan", during my transaction.',
    "I was treated courteously by the staff, and (if asked for help) the staff was helpful.",
    "I got what I needed from the government office, or (if denied) denial of request was sufficiently explained to me.",
]

_CC_QUESTIONS = [
    (
        "cc1",
        "Which of the following best describes your awareness of a Citizen's Charter?",
        [
            "1. I know what a CC is and I saw this office's CC.",
            "2. I know what a CC is but I did NOT see this office's CC.",
            "3. I learned of the CC only when I saw this office's CC.",
            "4. I do not know what a CC is and I did not see one in this office.",
        ],
    ),
    (
        "cc2",
        "If aware of CC, would you say that the CC of this office was...?",
        [
            "1. Easy to see",
            "2. Somewhat easy to see",
            "3. Difficult to see",
            "4. Not visible at all",
            "5. N/A",
        ],
    ),
    (
        "cc3",
        "If aware of CC (answered 1-3 in CC1), how much did the CC help you in your transaction?",
        [
            "1. Helped very much",
            "2. Somewhat helped",
            "3. Did not help",
            "4. N/A",
        ],
    ),
]

_SEED_TIMESTAMP = 1759662846524


def default_questions() -> list[SurveyQuestion]:
    questions = [
        SurveyQuestion(
            id=f"sqd{index}",
            text=text,
            type=QuestionType.LIKERT,
            required=True,
            category=QuestionCategory.SQD,
            order=index + 1,
        )
        for index, text in enumerate(_SQD_TEXTS)
    ]
    for offset, (key, text, choices) in enumerate(_CC_QUESTIONS, start=len(questions) + 1):
        questions.append(
            SurveyQuestion(
                id=key,
                text=text,
                type=QuestionType.RADIO,
                required=True,
                category=QuestionCategory.CC,
                order=offset,
                choices=list(choices),
            )
        )
    return questions


def _response(**fields) -> SurveyResponse:
    sqd_avg = compute_average([fields[name] for name in SQD_FIELDS])
    return SurveyResponse(sqd_avg=sqd_avg, **fields)


def default_responses() -> list[SurveyResponse]:
    """Sample responses, most recent first, as shipped with the dashboard demo."""
    return [
        _response(
            id=1, ref_id="VZM-CSM-1759662846524-3555", date="2025-10-05",
            client_type="Business", sex="male", age="35", region="ncr",
            service="Business Permit", service_other="",
            cc1="1", cc2="1", cc3="1",
            sqd0="5", sqd1="5", sqd2="5", sqd3="4", sqd4="5", sqd5="5", sqd6="5", sqd7="5", sqd8="4",
            suggestions="Very efficient service!", email="test@example.com",
            timestamp=_SEED_TIMESTAMP,
        ),
        _response(
            id=2, ref_id="VZM-CSM-1759662846524-3556", date="2025-10-05",
            client_type="Citizen", sex="female", age="28", region="ncr",
            service="Civil Registry Services", service_other="",
            cc1="2", cc2="2", cc3="2",
            sqd0="5", sqd1="4", sqd2="5", sqd3="4", sqd4="4", sqd5="na", sqd6="5", sqd7="5", sqd8="4",
            suggestions="Good but can improve waiting time", email="",
            timestamp=_SEED_TIMESTAMP,
        ),
        _response(
            id=3, ref_id="VZM-CSM-1759662846524-3557", date="2025-10-05",
            client_type="Business", sex="male", age="42", region="region3",
            service="Building Permit", service_other="",
            cc1="1", cc2="1", cc3="1",
            sqd0="5", sqd1="5", sqd2="5", sqd3="4", sqd4="5", sqd5="4", sqd6="5", sqd7="5", sqd8="5",
            suggestions="Staff very helpful", email="builder@test.com",
            timestamp=_SEED_TIMESTAMP,
        ),
    ]


def default_users() -> list[User]:
    return [
        User(id=1, name="Admin User", email="admin@valenzuela.gov.ph", role="Admin", status="Active"),
        User(id=2, name="Staff Member", email="staff@valenzuela.gov.ph", role="Staff", status="Active"),
        User(id=3, name="Enumerator", email="enumerator@valenzuela.gov.ph", role="Enumerator", status="Active"),
    ]
