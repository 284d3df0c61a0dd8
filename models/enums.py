"""
Перечисления для бота онбординга
"""
from enum import Enum


class OnboardingState(Enum):
    """Шаги диалога настройки"""
    NICHE = "niche"
    KEYWORDS = "keywords"
    COUNTRY = "country"

    # Сводка показана, ждем кнопку
    CONFIRMATION = "confirmation"
    # Идет запись в таблицу
    SAVING = "saving"


class DialogueEvent(Enum):
    """Входящие события диалога"""
    START = "start"
    TEXT = "text"
    CONFIRM = "confirm"
    RESTART = "restart"
    SAVE_SUCCEEDED = "save_succeeded"
    SAVE_FAILED = "save_failed"


class CallbackAction(str, Enum):
    """callback_data кнопок подтверждения"""
    CONFIRM = "confirm"
    RESTART = "restart"


# Вопросы задаются строго в этом порядке
QUESTION_ORDER = (
    OnboardingState.NICHE,
    OnboardingState.KEYWORDS,
    OnboardingState.COUNTRY,
)

# Поле сессии, в которое пишется ответ на шаге
ANSWER_FIELDS = {
    OnboardingState.NICHE: "niche",
    OnboardingState.KEYWORDS: "keywords",
    OnboardingState.COUNTRY: "country",
    OnboardingState.CONFIRMATION: "country",
}
