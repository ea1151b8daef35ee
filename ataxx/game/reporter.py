from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

logger = logging.getLogger(__name__)


class TextReporter:
    """Writes game messages as plain lines of text."""

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self.out = out or sys.stdout

    def err_msg(self, fmt: str, *args: object) -> None:
        text = fmt % args if args else fmt
        logger.debug("error reported: %s", text)
        self._write(text)

    def move_msg(self, fmt: str, *args: object) -> None:
        self._write(fmt % args if args else fmt)

    def outcome_msg(self, fmt: str, *args: object) -> None:
        text = fmt % args if args else fmt
        logger.info("outcome: %s", text)
        self._write(text)

    def info_msg(self, text: str) -> None:
        self._write(text)

    def _write(self, text: str) -> None:
        print(text, file=self.out)
        self.out.flush()
