#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Машина состояний диалога настройки.

Три вопроса идут строго по порядку: ниша -> ключевые слова -> страна,
затем сводка с двумя кнопками. Функция transition() ничего не отправляет
и ни к чему не обращается: она только возвращает новое состояние и список
эффектов, которые исполняет handlers.onboarding.
"""

from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple

from models.enums import ANSWER_FIELDS, QUESTION_ORDER, DialogueEvent, OnboardingState


@dataclass(frozen=True)
class Effect:
    """Базовый класс эффекта"""


@dataclass(frozen=True)
class ResetAnswers(Effect):
    pass


@dataclass(frozen=True)
class StoreAnswer(Effect):
    field: str
    value: str


@dataclass(frozen=True)
class AskQuestion(Effect):
    step: OnboardingState


@dataclass(frozen=True)
class ShowSummary(Effect):
    pass


@dataclass(frozen=True)
class SaveProfile(Effect):
    pass


@dataclass(frozen=True)
class SendNotice(Effect):
    key: str


@dataclass(frozen=True)
class TriggerFirstPost(Effect):
    pass


@dataclass(frozen=True)
class EndDialogue(Effect):
    pass


class Transition(NamedTuple):
    state: Optional[OnboardingState]
    effects: Tuple[Effect, ...]


_NEXT_QUESTION = dict(zip(QUESTION_ORDER, QUESTION_ORDER[1:]))


def transition(
    state: Optional[OnboardingState],
    event: DialogueEvent,
    text: Optional[str] = None,
) -> Transition:
    """
    Вычислить переход

    Args:
        state: Текущий шаг (None - диалог не активен)
        event: Пришедшее событие
        text: Текст сообщения для DialogueEvent.TEXT

    Returns:
        Transition с новым состоянием и эффектами в порядке исполнения.
        Неподходящее для шага событие оставляет состояние без изменений.
    """
    if event is DialogueEvent.START:
        return Transition(
            OnboardingState.NICHE,
            (ResetAnswers(), AskQuestion(OnboardingState.NICHE)),
        )

    if event is DialogueEvent.TEXT and state in ANSWER_FIELDS:
        answer = StoreAnswer(ANSWER_FIELDS[state], text if text is not None else "")
        next_step = _NEXT_QUESTION.get(state)
        if next_step is not None:
            return Transition(next_step, (answer, AskQuestion(next_step)))
        # Страна (или ее исправление до нажатия кнопки)
        return Transition(OnboardingState.CONFIRMATION, (answer, ShowSummary()))

    if state is OnboardingState.CONFIRMATION:
        if event is DialogueEvent.CONFIRM:
            return Transition(OnboardingState.SAVING, (SaveProfile(),))
        if event is DialogueEvent.RESTART:
            return Transition(None, (SendNotice("restart"), EndDialogue()))

    if state is OnboardingState.SAVING:
        if event is DialogueEvent.SAVE_SUCCEEDED:
            return Transition(None, (
                SendNotice("saved"),
                TriggerFirstPost(),
                SendNotice("done"),
                EndDialogue(),
            ))
        if event is DialogueEvent.SAVE_FAILED:
            return Transition(None, (SendNotice("save_failed"), EndDialogue()))

    return Transition(state, ())
