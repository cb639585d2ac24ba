"""
Meeting Cost Navigator — Feedback & Clipboard
Transient confirmation messages and the clipboard collaborator.
"""
import logging
import time


class Feedback:
    """Holds one message at a time; it expires after `seconds` and a newer one replaces it."""

    def __init__(self, seconds=3, clock=time.monotonic):
        self.seconds = seconds
        self.clock = clock
        self._message = None
        self._expires = 0

    def show(self, message):
        self._message = message
        self._expires = self.clock() + self.seconds

    @property
    def current(self):
        if self._message is not None and self.clock() >= self._expires:
            self._message = None
        return self._message


class BufferClipboard:
    """Server-side clipboard: remembers the last copied text for the client to fetch."""

    def __init__(self):
        self.text = None

    def copy(self, text):
        self.text = text
        return True


def copy_to_clipboard(clipboard, text):
    try:
        return bool(clipboard.copy(text))
    except Exception as e:
        logging.error(f"Failed to copy to clipboard: {type(e).__name__}: {e}")
        return False
