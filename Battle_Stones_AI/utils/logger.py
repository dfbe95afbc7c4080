"""Lightweight match logging: timestamped lines for game events."""

import datetime


def log_event(message, stream=None):
    timestamp = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {message}", file=stream)


def describe_move(color, move):
    side = "B" if color == -1 else "W"
    if move is None:
        return f"{side} pass"
    return f"{side} {move}"
