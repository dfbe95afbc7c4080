"""Helpers for per-move time budgets (epoch-second deadlines; None means unlimited)."""

import time


def deadline_after(seconds):
    if seconds is None:
        return None
    return time.time() + seconds


def time_remaining(deadline):
    if deadline is None:
        return float("inf")
    return deadline - time.time()


def expired(deadline):
    return deadline is not None and time.time() > deadline
