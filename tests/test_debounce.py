import asyncio

from locationsearch.debounce import debounce


def test_burst_fires_once_with_last_args():
    calls = []

    async def scenario():
        trigger = debounce(lambda *args: calls.append(args), 20)
        for i in range(5):
            trigger(i)
        assert trigger.pending
        await asyncio.sleep(0.1)
        assert not trigger.pending

    asyncio.run(scenario())
    assert calls == [(4,)]

def test_quiet_gap_lets_each_burst_fire():
    calls = []

    async def scenario():
        trigger = debounce(calls.append, 20)
        trigger('a')
        await asyncio.sleep(0.08)
        trigger('b')
        trigger('c')
        await asyncio.sleep(0.08)

    asyncio.run(scenario())
    assert calls == ['a', 'c']

def test_nothing_fires_before_delay():
    calls = []

    async def scenario():
        trigger = debounce(calls.append, 200)
        trigger('a')
        await asyncio.sleep(0.02)
        assert calls == []
        trigger.cancel()

    asyncio.run(scenario())
    assert calls == []

def test_cancel_drops_scheduled_call():
    calls = []

    async def scenario():
        trigger = debounce(calls.append, 10)
        trigger('a')
        trigger.cancel()
        assert not trigger.pending
        await asyncio.sleep(0.05)

    asyncio.run(scenario())
    assert calls == []

def test_coroutine_callback_is_scheduled():
    seen = []

    async def handler(value):
        await asyncio.sleep(0)
        seen.append(value)

    async def scenario():
        trigger = debounce(handler, 10)
        trigger('first')
        trigger('second')
        await asyncio.sleep(0.05)

    asyncio.run(scenario())
    assert seen == ['second']

def test_failing_coroutine_callback_is_logged(caplog):
    async def handler(value):
        raise RuntimeError(f"boom {value}")

    async def scenario():
        trigger = debounce(handler, 5)
        trigger('x')
        await asyncio.sleep(0.05)

    asyncio.run(scenario())
    assert 'Debounced callback failed: boom x' in caplog.text
