from models.session import OnboardingSession
from utils.formatters import create_confirm_keyboard, format_summary
from utils.logger import mask_secret


def test_summary_contains_answers(messages):
    session = OnboardingSession(chat_id=1, niche="Yoga studio", keywords="asanas, breath", country="Spain")

    text = format_summary(messages["summary"], session)

    assert "Yoga studio" in text
    assert "asanas, breath" in text
    assert "Spain" in text


def test_summary_escapes_markdown(messages):
    session = OnboardingSession(chat_id=1, niche="*bold* and_under", keywords="[link]", country="`code`")

    text = format_summary(messages["summary"], session)

    assert "\\*bold\\* and\\_under" in text
    assert "\\[link]" in text
    assert "\\`code\\`" in text


def test_confirm_keyboard_has_two_buttons(messages):
    markup = create_confirm_keyboard(messages["buttons"])

    assert len(markup.inline_keyboard) == 1
    confirm, restart = markup.inline_keyboard[0]
    assert (confirm.callback_data, restart.callback_data) == ("confirm", "restart")
    assert confirm.text == messages["buttons"]["confirm"]


def test_mask_secret():
    assert mask_secret("telegram_token", "123456:ABCDEF") == "***CDEF"
    assert mask_secret("webhook_secret", "") == "НЕ УСТАНОВЛЕН"
    assert mask_secret("port", 3000) == "3000"


def test_summary_fits_telegram_limit_for_long_answers(messages):
    session = OnboardingSession(chat_id=1, niche="*" * 4096, keywords="_" * 4096, country="x" * 4096)

    text = format_summary(messages["summary"], session)

    assert len(text) <= 4096
    assert "…" in text
    # Сохраняется полный ответ, обрезается только эхо
    assert len(session.niche) == 4096
