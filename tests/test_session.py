import asyncio

from locationsearch.client import TransportError
from locationsearch.session import SearchListener, SearchSession

from fakes import PARIS_FR, PARIS_FR_LOWER, PARIS_TX, PARMA, FakeGeocoder, settle


class RecordingListener(SearchListener):
    def __init__(self):
        self.statuses = []
        self.lists = []
        self.selected = []

    def on_status_change(self, state, message):
        self.statuses.append(state)

    def on_suggestions_change(self, items, highlight_index):
        self.lists.append((items, highlight_index))

    def on_selection(self, candidate):
        self.selected.append(candidate)


async def _open_with(session, geo, query, results):
    session.on_input(query)
    await asyncio.sleep(0.05)
    geo.reply(query.strip()).set_result(results)
    await settle()

def test_typing_burst_issues_one_lookup_and_keyboard_selects():
    geo = FakeGeocoder()
    ui = RecordingListener()

    async def scenario():
        session = SearchSession(geo, ui, debounce_ms=10)
        session.on_input('Pa')
        session.on_input('Par')
        await _open_with(session, geo, ' Paris ', [PARIS_FR, PARIS_FR_LOWER, PARIS_TX])
        assert geo.started == ['Paris']
        assert ui.lists[-1] == ([PARIS_FR, PARIS_TX], -1)
        session.on_key('ArrowDown')
        session.on_key('ArrowDown')
        session.on_key('Enter')
        assert not session.suggestions.is_open

    asyncio.run(scenario())
    assert ui.selected == [PARIS_TX]
    assert ui.statuses == ['searching', 'idle']

def test_keys_ignored_while_closed():
    ui = RecordingListener()
    session = SearchSession(FakeGeocoder(), ui)
    session.on_key('ArrowDown')
    session.on_key('Enter')
    assert ui.lists == []
    assert ui.selected == []

def test_escape_and_outside_click_close():
    geo = FakeGeocoder()
    ui = RecordingListener()

    async def scenario():
        session = SearchSession(geo, ui, debounce_ms=5)
        await _open_with(session, geo, 'Paris', [PARIS_FR, PARIS_TX])
        session.on_key('Escape')
        assert not session.suggestions.is_open
        await _open_with(session, geo, 'Parma', [PARMA])
        assert session.suggestions.is_open
        session.on_outside_click()
        assert not session.suggestions.is_open

    asyncio.run(scenario())
    assert ui.selected == []

def test_pointer_hover_and_click():
    geo = FakeGeocoder()
    ui = RecordingListener()

    async def scenario():
        session = SearchSession(geo, ui, debounce_ms=5)
        await _open_with(session, geo, 'Paris', [PARIS_FR, PARIS_TX])
        session.on_pointer('hover', 1)
        assert session.suggestions.highlight_index == 1
        session.on_pointer('click', 0)

    asyncio.run(scenario())
    assert ui.selected == [PARIS_FR]

def test_no_matches_keeps_list_open_and_empty():
    geo = FakeGeocoder()
    ui = RecordingListener()

    async def scenario():
        session = SearchSession(geo, ui, debounce_ms=5)
        await _open_with(session, geo, 'Qwxz', [])
        assert session.suggestions.is_open

    asyncio.run(scenario())
    assert ui.statuses[-1] == 'no-results'
    assert ui.lists[-1] == ([], -1)

def test_transport_failure_closes_list():
    geo = FakeGeocoder()
    ui = RecordingListener()

    async def scenario():
        session = SearchSession(geo, ui, debounce_ms=5)
        await _open_with(session, geo, 'Paris', [PARIS_FR])
        session.on_input('Parisx')
        await asyncio.sleep(0.05)
        geo.reply('Parisx').set_exception(TransportError('Proxy returned 500', 500))
        await settle()
        assert not session.suggestions.is_open

    asyncio.run(scenario())
    assert ui.statuses[-1] == 'error'
    assert ui.lists[-1] == ([], -1)

def test_clearing_input_aborts_lookup_and_resets():
    geo = FakeGeocoder()
    ui = RecordingListener()

    async def scenario():
        session = SearchSession(geo, ui, debounce_ms=5)
        await _open_with(session, geo, 'Paris', [PARIS_FR])
        session.on_input('Pari')
        await asyncio.sleep(0.05)
        session.on_input('   ')
        await asyncio.sleep(0.05)
        await settle()
        assert not session.suggestions.is_open
        assert not session.coordinator.pending

    asyncio.run(scenario())
    assert geo.aborted == ['Pari']
    assert ui.statuses[-1] == 'idle'
    assert 'error' not in ui.statuses

def test_aclose_drops_scheduled_search():
    geo = FakeGeocoder()

    async def scenario():
        session = SearchSession(geo, debounce_ms=20)
        session.on_input('Paris')
        await session.aclose()
        await asyncio.sleep(0.05)

    asyncio.run(scenario())
    assert geo.started == []
