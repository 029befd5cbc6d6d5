"""Straight-key input model

Turns key press durations into dots and dashes and groups them into
characters once the key has been idle long enough.
"""

from telegraph_line.morse import morse_to_text

DOT_THRESHOLD_MS = 200
CHARACTER_BREAK_MS = 800


def classify_press(duration_ms: float) -> str:
    """Return '.' for a press shorter than the dot threshold, '-' otherwise"""
    if duration_ms < 0:
        raise ValueError("Press duration cannot be negative")
    return '.' if duration_ms < DOT_THRESHOLD_MS else '-'


class TelegraphKey:
    """Accumulates key presses into Morse characters

    Presses build up the pending symbol group; an idle gap longer than
    CHARACTER_BREAK_MS closes it and appends it to the transmission.
    """

    def __init__(self):
        self.pending = ''
        self.characters: list[str] = []

    def press(self, duration_ms: float) -> str:
        symbol = classify_press(duration_ms)
        self.pending += symbol
        return symbol

    def idle(self, elapsed_ms: float) -> str | None:
        """Report time since the last release; returns a completed character group"""
        if elapsed_ms < 0:
            raise ValueError("Idle time cannot be negative")
        if elapsed_ms > CHARACTER_BREAK_MS:
            return self.flush()
        return None

    def flush(self) -> str | None:
        if not self.pending:
            return None
        group, self.pending = self.pending, ''
        self.characters.append(group)
        return group

    def clear(self) -> None:
        self.pending = ''
        self.characters = []

    @property
    def morse(self) -> str:
        return ' '.join(self.characters)

    @property
    def text(self) -> str:
        return morse_to_text(self.morse)
