"""Default responses used when no keyword matches."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Iterable, List, Sequence, Tuple

from .scanner import ScannedLine, read_lines, scan_records, trim

logger = logging.getLogger(__name__)

FALLBACK_RESPONSE = "Could you elaborate on that?"


def parse_default_responses(lines: Iterable[str], flush_at_eof: bool = False) -> List[str]:
    """Parse blank-line separated responses.

    Only a truly empty line ends a record; a whitespace-only line is skipped
    but keeps the record open. A last record with no empty line after it is
    dropped unless ``flush_at_eof`` is set.
    """
    responses: List[str] = []

    def is_terminator(line: ScannedLine, buffer: Sequence[str]) -> bool:
        return line.raw == "" and bool(buffer)

    def finalize(buffer: List[str]) -> None:
        response = "".join("\n" + text for text in buffer)
        if trim(response):
            responses.append(response)

    scan_records(lines, is_terminator, finalize, flush_at_eof=flush_at_eof)
    return responses


def load_default_responses(
    path: Path,
    encoding: str = "ascii",
    flush_at_eof: bool = False,
    fallback: str = FALLBACK_RESPONSE,
) -> List[str]:
    """Load the default pool. The result always holds at least one response."""
    path = Path(path)
    responses: List[str] = []
    try:
        responses = parse_default_responses(read_lines(path, encoding), flush_at_eof=flush_at_eof)
    except FileNotFoundError:
        logger.error("Unable to open %s", path)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("A problem was encountered reading %s: %s", path, exc)

    if not responses:
        logger.warning("No default responses in %s, using fallback", path)
        responses.append(fallback)
    return responses


class DefaultResponsePool:
    def __init__(
        self,
        path: Path,
        encoding: str = "ascii",
        flush_at_eof: bool = False,
        fallback: str = FALLBACK_RESPONSE,
    ) -> None:
        self._path = Path(path)
        self._responses = load_default_responses(
            self._path, encoding=encoding, flush_at_eof=flush_at_eof, fallback=fallback
        )
        logger.debug("Loaded %d default responses from %s", len(self._responses), self._path)

    def pick(self, rng: random.Random) -> Tuple[int, str]:
        index = rng.randrange(len(self._responses))
        return index, self._responses[index]

    def responses(self) -> List[str]:
        return list(self._responses)

    def __len__(self) -> int:
        return len(self._responses)
