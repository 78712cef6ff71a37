"""Line-oriented record scanner shared by the resource loaders."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional, Sequence

# Characters removed by trim(): space and every ASCII control character.
TRIM_CHARS = "".join(chr(code) for code in range(0x21))


@dataclass(frozen=True)
class ScannedLine:
    raw: str
    text: str
    last: bool


def trim(text: str) -> str:
    return text.strip(TRIM_CHARS)


def read_lines(path: Path, encoding: str = "ascii") -> Iterator[str]:
    """Yield the lines of a text resource without their terminators.

    Universal newline mode folds ``\\r\\n`` and ``\\r`` into ``\\n``, so only
    the trailing ``\\n`` has to be dropped here.
    """
    with Path(path).open("r", encoding=encoding) as handle:
        for line in handle:
            yield line[:-1] if line.endswith("\n") else line


def _with_lookahead(lines: Iterable[str]) -> Iterator[ScannedLine]:
    iterator = iter(lines)
    current: Optional[str] = next(iterator, None)
    while current is not None:
        following = next(iterator, None)
        yield ScannedLine(raw=current, text=trim(current), last=following is None)
        current = following


def scan_records(
    lines: Iterable[str],
    is_terminator: Callable[[ScannedLine, Sequence[str]], bool],
    finalize: Callable[[List[str]], None],
    flush_at_eof: bool = False,
) -> int:
    """Split ``lines`` into records and hand each one to ``finalize``.

    ``is_terminator`` sees every line together with the trimmed lines
    buffered so far. A terminating line is consumed; any other line is
    buffered when its trimmed form is non-empty. A record still open at the
    end of input is only finalized when ``flush_at_eof`` is set.
    """
    buffer: List[str] = []
    records = 0
    for line in _with_lookahead(lines):
        if is_terminator(line, buffer):
            finalize(buffer)
            buffer = []
            records += 1
        elif line.text:
            buffer.append(line.text)

    if flush_at_eof and buffer:
        finalize(buffer)
        records += 1
    return records
