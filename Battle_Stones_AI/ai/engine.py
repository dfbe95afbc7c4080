"""Caller-owned background engine: a request queue drained by one worker thread."""

from __future__ import annotations

import logging
import queue
import threading
from concurrent.futures import Future
from dataclasses import dataclass, field
from typing import Optional

from ..Board import Board, GameType
from ..utils import timer
from .config import Difficulty
from .strategy import get_ai_move

LOGGER = logging.getLogger(__name__)

_STOP = object()


@dataclass
class MoveRequest:
    board: Board
    player: int
    game_type: GameType = GameType.GO
    difficulty: Difficulty = Difficulty.MEDIUM
    previous_hash: Optional[int] = None
    budget_seconds: Optional[float] = None
    move_number: Optional[int] = None
    history: tuple = ()
    options: dict = field(default_factory=dict)


class AIEngine:
    """
    Explicit handle around get_ai_move for interactive callers.

    start() spins up the worker, submit() queues a request and returns a Future,
    stop() drains pending requests (cancelling their futures) and joins the worker.
    A request whose future was cancelled before it ran is skipped.
    """

    def __init__(self, suggester=None, name="ai-engine"):
        self.suggester = suggester
        self.name = name
        self._queue: queue.Queue = queue.Queue()
        self._thread: Optional[threading.Thread] = None
        self._lock = threading.Lock()

    @property
    def running(self):
        return self._thread is not None and self._thread.is_alive()

    def start(self):
        with self._lock:
            if self.running:
                return self
            self._thread = threading.Thread(target=self._worker, name=self.name, daemon=True)
            self._thread.start()
            LOGGER.debug("%s started", self.name)
        return self

    def stop(self, timeout=None):
        with self._lock:
            thread = self._thread
            if thread is None:
                return
            self._thread = None
        while True:
            try:
                item = self._queue.get_nowait()
            except queue.Empty:
                break
            if item is not _STOP:
                item[1].cancel()
        self._queue.put(_STOP)
        thread.join(timeout)
        LOGGER.debug("%s stopped", self.name)

    def submit(self, request: MoveRequest) -> Future:
        if not self.running:
            raise RuntimeError("engine is not running; call start() first")
        future: Future = Future()
        self._queue.put((request, future))
        return future

    def _worker(self):
        while True:
            item = self._queue.get()
            if item is _STOP:
                return
            request, future = item
            if not future.set_running_or_notify_cancel():
                continue
            try:
                future.set_result(self._compute(request))
            except Exception as exc:
                LOGGER.exception("move computation failed")
                future.set_exception(exc)

    def _compute(self, request: MoveRequest):
        deadline = timer.deadline_after(request.budget_seconds) if request.budget_seconds is not None else None
        return get_ai_move(
            request.board,
            request.player,
            request.game_type,
            request.difficulty,
            request.previous_hash,
            move_number=request.move_number,
            deadline=deadline,
            suggester=self.suggester,
            history=request.history,
            **request.options,
        )

    def __enter__(self):
        return self.start()

    def __exit__(self, exc_type, exc, tb):
        self.stop()
