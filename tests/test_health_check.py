from types import SimpleNamespace

from services.health_check import SESSION_STORE_KEY, health_check_handler, status_handler


async def test_health_returns_ok():
    response = await health_check_handler(SimpleNamespace(app={}))
    assert response.status == 200
    assert response.text == "OK"


async def test_status_reports_active_dialogues(session_store):
    session_store.start(1, 10)
    session_store.start(2, 20)

    response = await status_handler(SimpleNamespace(app={SESSION_STORE_KEY: session_store}))

    assert "Активных диалогов: 2" in response.text
