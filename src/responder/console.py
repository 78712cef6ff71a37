#!/usr/bin/env python3
"""
Canned Responder console

A text-based support dialog on top of the Responder:
  each input line → lowercase word set → canned or default response
  "bye"           → ends the dialog

Usage:
  canned-responder --config config/responder.defaults.yml
  RESPONDER_SEED=7 python -m responder.console
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from typing import Callable, List, Optional, Set, TextIO

from .config import ResponderConfig, load_config
from .selector import Responder

logger = logging.getLogger(__name__)

EXIT_WORD = "bye"

WELCOME = (
    "Welcome to the DodgySoft Technical Support System.\n"
    "\n"
    "Please tell us about your problem.\n"
    "We will assist you with any problem you might have.\n"
    "Please type 'bye' to exit our system."
)

GOODBYE = "Nice talking to you. Bye..."


class InputReader:
    """Reads a line of input and turns it into a set of lowercase words."""

    def __init__(self, read: Optional[Callable[[str], str]] = None) -> None:
        self._read = read or input

    def get_input(self, prompt: str = "> ") -> Set[str]:
        try:
            line = self._read(prompt)
        except EOFError:
            return {EXIT_WORD}
        return set(line.strip().lower().split())


class SupportSystem:
    def __init__(
        self,
        responder: Responder,
        reader: Optional[InputReader] = None,
        output: Optional[TextIO] = None,
    ) -> None:
        self._responder = responder
        self._reader = reader or InputReader()
        self._output = output

    def _say(self, text: str) -> None:
        print(text, file=self._output or sys.stdout)

    def start(self) -> int:
        """Run the dialog until the user says bye. Returns the number of replies."""
        replies = 0
        self._say(WELCOME)
        while True:
            words = self._reader.get_input()
            if words == {EXIT_WORD}:
                break
            self._say(self._responder.generate_response(words))
            replies += 1
        self._say(GOODBYE)
        logger.info("Dialog finished after %d replies", replies)
        return replies


def build_config(config_path: Optional[str], seed: Optional[int]) -> ResponderConfig:
    cfg = load_config(config_path) if config_path else ResponderConfig()
    if seed is not None:
        cfg = replace(cfg, seed=seed)
    return cfg


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Keyword-triggered canned response console")
    parser.add_argument("--config", help="YAML config file (default: built-in defaults)")
    parser.add_argument("--seed", type=int, help="Seed for default response selection")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    responder = Responder(build_config(args.config, args.seed))
    SupportSystem(responder).start()
    return 0


if __name__ == "__main__":
    sys.exit(main())
