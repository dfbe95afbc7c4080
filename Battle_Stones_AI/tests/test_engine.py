"""Background engine handle: futures, cancellation, and lifecycle."""

import threading

import pytest

from Battle_Stones_AI.Board import BLACK, WHITE, Board, GameType
from Battle_Stones_AI.ai.config import Difficulty
from Battle_Stones_AI.ai.engine import AIEngine, MoveRequest


def test_submit_resolves_future_with_move():
    b = Board(size=9)
    for x in range(1, 5):
        b.place(x, 4, WHITE)
    b.place(0, 4, BLACK)
    with AIEngine() as engine:
        assert engine.running
        future = engine.submit(MoveRequest(b, WHITE, GameType.GOMOKU, Difficulty.HARD, budget_seconds=5))
        assert future.result(timeout=30) == (5, 4)
    assert not engine.running


def test_submit_requires_a_running_engine():
    engine = AIEngine()
    with pytest.raises(RuntimeError):
        engine.submit(MoveRequest(Board(size=9), BLACK))
    engine.start()
    engine.stop(timeout=5)
    with pytest.raises(RuntimeError):
        engine.submit(MoveRequest(Board(size=9), BLACK))


def test_failures_surface_on_the_future():
    with AIEngine() as engine:
        future = engine.submit(MoveRequest(Board(size=9), 0))
        with pytest.raises(ValueError):
            future.result(timeout=10)


def test_cancelled_request_is_skipped():
    started = threading.Event()
    release = threading.Event()
    calls = []

    engine = AIEngine()

    def slow(request):
        calls.append(request)
        started.set()
        release.wait(5)
        return (0, 0)

    engine._compute = slow
    engine.start()
    first = engine.submit(MoveRequest(Board(size=9), BLACK))
    assert started.wait(5)
    second = engine.submit(MoveRequest(Board(size=9), WHITE))
    assert second.cancel()
    release.set()
    assert first.result(timeout=5) == (0, 0)
    engine.stop(timeout=5)
    assert len(calls) == 1
    assert second.cancelled()


def test_stop_cancels_queued_requests():
    release = threading.Event()
    started = threading.Event()

    engine = AIEngine()

    def slow(request):
        started.set()
        release.wait(5)
        return (1, 1)

    engine._compute = slow
    engine.start()
    first = engine.submit(MoveRequest(Board(size=9), BLACK))
    assert started.wait(5)
    queued = engine.submit(MoveRequest(Board(size=9), WHITE))
    engine.stop(timeout=0.1)
    assert queued.cancelled()
    release.set()
    assert first.result(timeout=5) == (1, 1)


def test_options_are_forwarded_to_the_move_picker():
    b = Board(size=9)
    request = MoveRequest(
        b,
        BLACK,
        GameType.GO,
        Difficulty.HARD,
        budget_seconds=5,
        options={"tier_overrides": {"hard": {"lookahead": False}}, "komi": 6.5},
    )
    with AIEngine() as engine:
        move = engine.submit(request).result(timeout=30)
    assert move in {(4, 4), (2, 2), (6, 2), (2, 6), (6, 6)}
