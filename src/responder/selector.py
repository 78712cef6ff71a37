"""Response selection: first known keyword wins, otherwise a random default."""

from __future__ import annotations

import logging
import random
import uuid
from typing import Iterable, Optional

from .config import ResponderConfig
from .defaults import DefaultResponsePool
from .keywords import KeywordResponseStore
from .observability import SelectionRecord

logger = logging.getLogger(__name__)


class Responder:
    """
    Generates a response for a set of input words.

    Both resources are read once, at construction. A missing or unreadable
    resource is logged and leaves the matching store degraded (no keywords,
    or only the fallback default), so construction always succeeds.

    With several known keywords in the input, the one returned depends on the
    iteration order of ``words``, which is arbitrary for a set.
    """

    def __init__(
        self,
        config: Optional[ResponderConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._config = config or ResponderConfig()
        self._keywords = KeywordResponseStore(
            self._config.response_map_path,
            encoding=self._config.encoding,
            flush_at_eof=self._config.flush_at_eof,
        )
        self._defaults = DefaultResponsePool(
            self._config.default_responses_path,
            encoding=self._config.encoding,
            flush_at_eof=self._config.flush_at_eof,
            fallback=self._config.fallback_response,
        )
        self._rng = rng or random.Random(self._config.seed)
        logger.info(
            "Responder ready: %d keywords, %d default responses",
            len(self._keywords), len(self._defaults),
        )

    @property
    def keywords(self) -> KeywordResponseStore:
        return self._keywords

    @property
    def defaults(self) -> DefaultResponsePool:
        return self._defaults

    def generate_response(self, words: Iterable[str]) -> str:
        return self.select(words).response

    def select(self, words: Iterable[str], request_id: Optional[str] = None) -> SelectionRecord:
        request_id = request_id or uuid.uuid4().hex
        words_checked = 0
        for word in words:
            words_checked += 1
            response = self._keywords.match(word)
            if response is not None:
                record = SelectionRecord(
                    request_id=request_id,
                    layer="keyword",
                    response=response,
                    words_checked=words_checked,
                    keyword_hit=word,
                )
                logger.debug("request=%s keyword=%r", request_id, word)
                return record

        # None of the words is known: fall back to a random default.
        index, response = self._defaults.pick(self._rng)
        logger.debug("request=%s default_index=%d", request_id, index)
        return SelectionRecord(
            request_id=request_id,
            layer="default",
            response=response,
            words_checked=words_checked,
            default_index=index,
        )
