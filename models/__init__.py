"""
Модели данных бота онбординга
"""
from .enums import OnboardingState, DialogueEvent, CallbackAction, QUESTION_ORDER, ANSWER_FIELDS
from .session import OnboardingSession, Profile, iso_timestamp

__all__ = [
    "OnboardingState",
    "DialogueEvent",
    "CallbackAction",
    "QUESTION_ORDER",
    "ANSWER_FIELDS",
    "OnboardingSession",
    "Profile",
    "iso_timestamp",
]
