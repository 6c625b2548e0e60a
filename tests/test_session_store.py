from src.integrations.clients.mocks.contracts import MockContractPortalClient
from src.portal.controller import ContractViewController
from src.portal.session_store import ViewSessionStore


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def _store(clock, **kwargs):
    client = MockContractPortalClient(contracts=[])
    return ViewSessionStore(lambda: ContractViewController(client), clock=clock, **kwargs)


def test_same_session_id_returns_same_controller():
    store = _store(FakeClock())

    sid, first = store.get_or_create(None)
    same_sid, second = store.get_or_create(sid)

    assert same_sid == sid
    assert second is first


def test_unknown_session_id_gets_a_new_session():
    store = _store(FakeClock())

    sid, _ = store.get_or_create("forged-id")

    assert sid != "forged-id"
    assert len(store) == 1


def test_idle_sessions_expire():
    clock = FakeClock()
    store = _store(clock, ttl_seconds=60)
    sid, first = store.get_or_create(None)

    clock.now = 61
    new_sid, second = store.get_or_create(sid)

    assert new_sid != sid
    assert second is not first
    assert len(store) == 1


def test_oldest_session_is_evicted_at_capacity():
    clock = FakeClock()
    store = _store(clock, max_sessions=2)
    oldest, _ = store.get_or_create(None)
    clock.now = 1
    store.get_or_create(None)
    clock.now = 2
    store.get_or_create(None)

    assert len(store) == 2
    new_sid, _ = store.get_or_create(oldest)
    assert new_sid != oldest
