"""Keyword-to-response store loaded from a response map resource.

Resource grammar, one record per blank-line separated block::

    hi,hello
    Hello there!
    How can I help?

The header line lists comma-separated alias keys; the following lines form
the response text. Every stored response starts with ``\\n`` and ends with
``\\n``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .scanner import ScannedLine, read_lines, scan_records

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeywordEntry:
    keys: Tuple[str, ...]
    response: str


def split_keys(header: str) -> Tuple[str, ...]:
    keys = header.split(",")
    # Trailing empty keys are discarded, leading and inner ones are kept.
    while keys and keys[-1] == "":
        keys.pop()
    return tuple(keys)


def parse_response_map(lines: Iterable[str], flush_at_eof: bool = False) -> List[KeywordEntry]:
    """Parse response map records into entries, in file order.

    In the default mode the final line of the input always closes an open
    record without being added to it. ``flush_at_eof`` keeps that line.
    """
    entries: List[KeywordEntry] = []

    def is_terminator(line: ScannedLine, buffer: Sequence[str]) -> bool:
        if not buffer:
            return False
        return line.text == "" or (line.last and not flush_at_eof)

    def finalize(buffer: List[str]) -> None:
        header, body = buffer[0], buffer[1:]
        response = "".join("\n" + text for text in body) + "\n"
        entries.append(KeywordEntry(keys=split_keys(header), response=response))

    scan_records(lines, is_terminator, finalize, flush_at_eof=flush_at_eof)
    return entries


def build_response_map(entries: Iterable[KeywordEntry]) -> Dict[str, str]:
    mapping: Dict[str, str] = {}
    for entry in entries:
        for key in entry.keys:
            mapping[key] = entry.response  # last record wins
    return mapping


def load_response_map(
    path: Path,
    encoding: str = "ascii",
    flush_at_eof: bool = False,
) -> Dict[str, str]:
    """Load a response map, returning an empty mapping if it cannot be read."""
    entries = _load_entries(Path(path), encoding, flush_at_eof)
    return build_response_map(entries)


def _load_entries(path: Path, encoding: str, flush_at_eof: bool) -> List[KeywordEntry]:
    try:
        return parse_response_map(read_lines(path, encoding), flush_at_eof=flush_at_eof)
    except FileNotFoundError:
        logger.error("Unable to open %s", path)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("A problem was encountered reading %s: %s", path, exc)
    return []


class KeywordResponseStore:
    def __init__(
        self,
        path: Path,
        encoding: str = "ascii",
        flush_at_eof: bool = False,
    ) -> None:
        self._path = Path(path)
        self._entries = _load_entries(self._path, encoding, flush_at_eof)
        self._registry = build_response_map(self._entries)
        logger.debug(
            "Loaded %d keywords from %d records in %s",
            len(self._registry), len(self._entries), self._path,
        )

    def match(self, word: str) -> Optional[str]:
        return self._registry.get(word)

    def entries(self) -> List[KeywordEntry]:
        return list(self._entries)

    def keywords(self) -> Dict[str, str]:
        return dict(self._registry)

    def __contains__(self, word: object) -> bool:
        return word in self._registry

    def __len__(self) -> int:
        return len(self._registry)
