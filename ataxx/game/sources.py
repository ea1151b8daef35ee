from __future__ import annotations

import io
import sys
from typing import Iterable, List, Optional, TextIO

from ataxx.core import CommandError


class LineSource:
    """Reads command lines from a text stream, prompting when interactive."""

    def __init__(
        self,
        stream: TextIO,
        *,
        interactive: bool = False,
        prompt_out: Optional[TextIO] = None,
        name: str = "<stream>",
        owned: bool = False,
    ) -> None:
        self.stream = stream
        self.interactive = interactive
        self.prompt_out = prompt_out or sys.stdout
        self.name = name
        self._owned = owned

    @classmethod
    def from_text(cls, text: str, name: str = "<text>") -> "LineSource":
        return cls(io.StringIO(text), name=name)

    @classmethod
    def from_lines(cls, lines: Iterable[str], name: str = "<lines>") -> "LineSource":
        return cls.from_text("".join(f"{line}\n" for line in lines), name=name)

    def read_line(self, prompt: str = "") -> Optional[str]:
        if self.interactive and prompt:
            self.prompt_out.write(prompt)
            self.prompt_out.flush()
        line = self.stream.readline()
        if line == "":
            return None
        return line.rstrip("\r\n")

    def close(self) -> None:
        if self._owned:
            self.stream.close()


class CommandSources:
    """Stack of line sources; ``load`` pushes a file on top of the current input."""

    def __init__(self, sources: Optional[Iterable[LineSource]] = None) -> None:
        self._sources: List[LineSource] = list(sources or [])

    def __len__(self) -> int:
        return len(self._sources)

    def add_source(self, source: LineSource) -> None:
        self._sources.append(source)

    def push_file(self, path: str) -> None:
        try:
            stream = open(path, "r", encoding="utf-8")
        except OSError as exc:
            raise CommandError(f"Cannot open file {path}") from exc
        self.add_source(LineSource(stream, name=path, owned=True))

    def get_line(self, prompt: str = "") -> Optional[str]:
        """Next non-blank, non-comment line, or None once every source is exhausted."""
        while self._sources:
            source = self._sources[-1]
            line = source.read_line(prompt)
            if line is None:
                self._sources.pop()
                source.close()
                continue
            text = line.strip()
            if not text or text.startswith("#"):
                continue
            return text
        return None
