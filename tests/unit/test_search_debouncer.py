# -*- coding: utf-8 -*-
"""
Тесты для core/search_debouncer.py
"""
import asyncio

from core import events
from core import status_texts
from core.errors import GatewayError
from core.event_bus import EventBus
from core.models.suggestion import Suggestion
from core.search_debouncer import SearchDebouncer, SearchState
from tests.fakes import EventRecorder, FakeSearchClient

DELAY = 0.05

PARIS = [
    Suggestion(name="Paris", country="France", state="Île-de-France", lat=48.85, lon=2.35),
    Suggestion(name="Paris", country="United States", state="Texas", lat=33.66, lon=-95.55),
]


def build(client):
    bus = EventBus("test")
    recorder = EventRecorder(bus)
    return SearchDebouncer(client, bus=bus, delay=DELAY), recorder


async def test_fast_typing_is_coalesced_into_one_request():
    client = FakeSearchClient({"Par": PARIS})
    debouncer, recorder = build(client)

    for text in ["P", "Pa", "Par"]:
        await debouncer.on_input(text)
        await asyncio.sleep(DELAY / 5)
    await debouncer.wait_idle()

    assert client.calls == ["Par"]
    results = recorder.of(events.SEARCH_RESULTS)
    assert len(results) == 1
    assert results[0]["query"] == "Par"
    assert results[0]["suggestions"] == PARIS
    assert debouncer.suggestions == PARIS
    assert debouncer.status_text is None
    assert debouncer.state == SearchState.IDLE


async def test_searching_status_only_when_request_is_sent():
    client = FakeSearchClient({"Rome": []}, delay=DELAY)
    debouncer, recorder = build(client)

    await debouncer.on_input("Rome")
    assert debouncer.state == SearchState.PENDING_DELAY
    assert recorder.of(events.SEARCH_STATUS) == []

    await asyncio.sleep(DELAY * 1.5)
    assert debouncer.state == SearchState.IN_FLIGHT
    assert recorder.of(events.SEARCH_STATUS)[-1]["text"] == status_texts.SEARCH_SEARCHING

    await debouncer.wait_idle()
    assert debouncer.state == SearchState.IDLE


async def test_superseded_request_is_never_rendered():
    client = FakeSearchClient({"Lon": [Suggestion("Lonoke", "United States")],
                               "London": [Suggestion("London", "United Kingdom")]}, delay=DELAY * 2)
    debouncer, recorder = build(client)

    await debouncer.on_input("Lon")
    await asyncio.sleep(DELAY * 1.5)
    assert client.calls == ["Lon"]

    await debouncer.on_input("London")
    await debouncer.wait_idle()

    assert client.calls == ["Lon", "London"]
    results = recorder.of(events.SEARCH_RESULTS)
    assert [r["query"] for r in results] == ["London"]
    assert debouncer.suggestions[0].name == "London"


async def test_empty_query_cancels_pending_search():
    client = FakeSearchClient({"Par": PARIS})
    debouncer, recorder = build(client)

    await debouncer.on_input("Par")
    await debouncer.on_input("   ")
    await asyncio.sleep(DELAY * 2)

    assert client.calls == []
    assert debouncer.state == SearchState.IDLE
    assert debouncer.suggestions == []
    assert debouncer.status_text == status_texts.SEARCH_START_TYPING
    assert recorder.of(events.SEARCH_RESULTS)[-1]["suggestions"] == []


async def test_no_results_status():
    debouncer, recorder = build(FakeSearchClient())

    await debouncer.on_input("Qwxz")
    await debouncer.wait_idle()

    assert debouncer.suggestions == []
    assert debouncer.status_text == status_texts.SEARCH_NO_RESULTS
    assert recorder.of(events.SEARCH_STATUS)[-1]["text"] == status_texts.SEARCH_NO_RESULTS


async def test_failed_search_clears_list_and_shows_status():
    debouncer, recorder = build(FakeSearchClient({"Oslo": GatewayError("timeout")}))
    debouncer.suggestions = list(PARIS)

    await debouncer.on_input("Oslo")
    await debouncer.wait_idle()

    assert debouncer.suggestions == []
    assert debouncer.status_text == status_texts.SEARCH_FAILED
    assert debouncer.state == SearchState.IDLE
    assert recorder.of(events.SEARCH_RESULTS)[-1]["suggestions"] == []


async def test_unexpected_search_error_returns_to_idle():
    debouncer, recorder = build(FakeSearchClient({"Oslo": ConnectionResetError("connection reset by peer")}))

    await debouncer.on_input("Oslo")
    await debouncer.wait_idle()

    assert debouncer.state == SearchState.IDLE
    assert debouncer.suggestions == []
    assert debouncer.status_text == status_texts.SEARCH_FAILED
    assert recorder.of(events.SEARCH_RESULTS)[-1]["suggestions"] == []


async def test_select_returns_name_and_resets():
    debouncer, recorder = build(FakeSearchClient({"Paris": PARIS}))
    await debouncer.on_input("Paris")
    await debouncer.wait_idle()

    name = await debouncer.select(1)

    assert name == "Paris"
    assert debouncer.state == SearchState.IDLE
    assert debouncer.suggestions == []
    selected = recorder.of(events.LOCATION_SELECTED)[0]
    assert selected["suggestion"].state == "Texas"


async def test_select_out_of_range_returns_none():
    debouncer, recorder = build(FakeSearchClient())

    assert await debouncer.select(0) is None
    assert recorder.of(events.LOCATION_SELECTED) == []


async def test_cancel_drops_pending_search():
    client = FakeSearchClient({"Kyiv": []})
    debouncer, recorder = build(client)

    await debouncer.on_input("Kyiv")
    debouncer.cancel()
    await asyncio.sleep(DELAY * 2)

    assert client.calls == []
    assert recorder.of(events.SEARCH_RESULTS) == []
    assert debouncer.state == SearchState.IDLE
