"""Non-blocking single-key input on a cbreak terminal."""

from __future__ import annotations

import codecs
import logging
import os
import select
import sys
import termios
import tty
from typing import Optional, TextIO

log = logging.getLogger(__name__)


class KeyboardHandler:
    """Reads single keypresses from stdin without waiting for enter.

    The terminal is switched to cbreak mode on construction and restored by
    :meth:`stop`. Construction raises ``termios.error`` when stdin is not a
    terminal.

    Bytes are read straight from the file descriptor, one at a time, so that
    what ``select`` reports and what has been consumed never drift apart.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream if stream is not None else sys.stdin
        self.fd = self.stream.fileno()
        self.old_settings = termios.tcgetattr(self.fd)
        tty.setcbreak(self.fd)
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        log.debug("Terminal switched to cbreak mode")

    def _ready(self, timeout: float) -> bool:
        ready, _, _ = select.select([self.fd], [], [], timeout)
        return bool(ready)

    def get_key(self, timeout: float = 0.0) -> Optional[str]:
        """Return one key, waiting at most ``timeout`` seconds, or None."""
        if not self._ready(timeout):
            return None
        key = ""
        while not key:
            data = os.read(self.fd, 1)
            if not data:
                return None
            key = self._decoder.decode(data)
            # rest of a multi-byte character
            if not key and not self._ready(0):
                return None
        return key

    def stop(self) -> None:
        """Restore the terminal settings saved on construction."""
        if self.old_settings is None:
            return
        termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
        self.old_settings = None
        log.debug("Terminal settings restored")

    def __enter__(self) -> KeyboardHandler:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()
