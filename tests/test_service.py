import asyncio
from random import Random

import pytest

from docexplain.errors import EXPLANATION_FAILURE_MESSAGE, ExplanationError, SessionBusyError
from docexplain.fallbacks import SHORT_CONTENT_FALLBACK, URL_CONTENT_FALLBACK
from docexplain.service import ExplanationService, ExplanationSession

LONG_TEXT = (
    "```js\nconst [count, setCount] = useState(0);\n```\n"
    "The useState hook adds a state variable to your component."
)


class RecordingSleeper:
    def __init__(self):
        self.calls = []

    async def __call__(self, seconds):
        self.calls.append(seconds)


class BrokenDispatcher:
    def run(self, raw):
        raise RuntimeError("template bank exploded")


def test_explain_waits_a_bounded_delay_then_returns_artifact():
    sleeper = RecordingSleeper()
    service = ExplanationService(rng=Random(3), sleep=sleeper)

    artifact = asyncio.run(service.explain(LONG_TEXT, "paste"))

    assert len(sleeper.calls) == 1
    assert 1.0 <= sleeper.calls[0] < 3.5
    assert artifact.code_example == "const [count, setCount] = useState(0);"


def test_next_delay_stays_in_half_open_range():
    service = ExplanationService(rng=Random(11), latency_seconds=(1.0, 3.5))

    delays = [service.next_delay() for _ in range(200)]

    assert all(1.0 <= delay < 3.5 for delay in delays)


def test_next_delay_with_equal_bounds_is_fixed():
    service = ExplanationService(latency_seconds=(0.0, 0.0))

    assert service.next_delay() == 0.0


def test_invalid_latency_bounds_are_rejected():
    with pytest.raises(ValueError):
        ExplanationService(latency_seconds=(2.0, 1.0))


def test_explain_short_and_url_inputs_use_fallbacks():
    service = ExplanationService(sleep=RecordingSleeper())

    short = asyncio.run(service.explain("tiny", "paste"))
    url = asyncio.run(service.explain("https://example.com/docs", "url"))

    assert short is SHORT_CONTENT_FALLBACK
    assert url is URL_CONTENT_FALLBACK


def test_explain_wraps_unexpected_failures():
    service = ExplanationService(sleep=RecordingSleeper(), dispatcher=BrokenDispatcher())

    with pytest.raises(ExplanationError) as excinfo:
        asyncio.run(service.explain(LONG_TEXT, "paste"))

    assert str(excinfo.value) == EXPLANATION_FAILURE_MESSAGE
    assert isinstance(excinfo.value.__cause__, RuntimeError)


def test_explain_rejects_unknown_channel_with_opaque_error():
    service = ExplanationService(sleep=RecordingSleeper())

    with pytest.raises(ExplanationError):
        asyncio.run(service.explain(LONG_TEXT, "fax"))


def test_session_stores_latest_artifact():
    session = ExplanationSession(ExplanationService(sleep=RecordingSleeper()))

    artifact = asyncio.run(session.submit(LONG_TEXT, "paste"))

    assert session.current is artifact
    assert session.busy is False
    snapshot = session.snapshot()
    assert snapshot["explanation"]["codeExample"] == artifact.code_example
    assert snapshot["error"] is None


def test_session_records_failure_message_and_clears_slot():
    session = ExplanationSession(
        ExplanationService(sleep=RecordingSleeper(), dispatcher=BrokenDispatcher())
    )

    with pytest.raises(ExplanationError):
        asyncio.run(session.submit(LONG_TEXT, "paste"))

    assert session.current is None
    assert session.last_error == EXPLANATION_FAILURE_MESSAGE
    assert session.busy is False


def test_session_rejects_resubmission_while_busy():
    async def scenario():
        gate = asyncio.Event()

        async def sleeper(seconds):
            await gate.wait()

        session = ExplanationSession(ExplanationService(sleep=sleeper))
        first = asyncio.create_task(session.submit(LONG_TEXT, "paste"))
        await asyncio.sleep(0)

        assert session.busy is True
        with pytest.raises(SessionBusyError):
            await session.submit(LONG_TEXT, "paste")

        gate.set()
        artifact = await first
        return session, artifact

    session, artifact = asyncio.run(scenario())

    assert session.busy is False
    assert session.current is artifact


def test_cleared_session_discards_in_flight_result():
    async def scenario():
        gate = asyncio.Event()

        async def sleeper(seconds):
            await gate.wait()

        session = ExplanationSession(ExplanationService(sleep=sleeper))
        first = asyncio.create_task(session.submit(LONG_TEXT, "paste"))
        await asyncio.sleep(0)

        session.clear()
        gate.set()
        artifact = await first
        return session, artifact

    session, artifact = asyncio.run(scenario())

    assert artifact.summary
    assert session.current is None
    assert session.busy is False
