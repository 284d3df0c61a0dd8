from models.enums import OnboardingState


def test_start_replaces_previous_session(session_store):
    first = session_store.start(1001, 42)
    first.state = OnboardingState.COUNTRY
    first.niche = "old"

    second = session_store.start(1001, 42)

    assert second is not first
    assert session_store.get(1001) is second
    assert second.state is None
    assert second.niche is None


def test_delete_is_idempotent(session_store):
    session_store.start(1001, 42)

    session_store.delete(1001)
    session_store.delete(1001)

    assert session_store.get(1001) is None
    assert session_store.get_session_count() == 0
