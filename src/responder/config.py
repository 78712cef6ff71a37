"""Configuration loader for the responder."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import FALLBACK_RESPONSE

TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ResponderConfig:
    response_map_path: Path = Path("response_map.txt")
    default_responses_path: Path = Path("default.txt")
    encoding: str = "ascii"
    fallback_response: str = FALLBACK_RESPONSE
    flush_at_eof: bool = False
    seed: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResponderConfig":
        resources = data.get("resources", {})
        seed = data.get("seed")
        return cls(
            response_map_path=Path(resources.get("response_map", "response_map.txt")),
            default_responses_path=Path(resources.get("default_responses", "default.txt")),
            encoding=resources.get("encoding", "ascii"),
            fallback_response=data.get("fallback_response", FALLBACK_RESPONSE),
            flush_at_eof=_as_bool(data.get("flush_at_eof", False)),
            seed=int(seed) if seed is not None else None,
        )


ENV_MAP = {
    "resources.response_map": "RESPONSE_MAP_PATH",
    "resources.default_responses": "DEFAULT_RESPONSES_PATH",
    "resources.encoding": "RESPONDER_ENCODING",
    "fallback_response": "RESPONDER_FALLBACK",
    "flush_at_eof": "RESPONDER_FLUSH_AT_EOF",
    "seed": "RESPONDER_SEED",
}


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in TRUTHY
    return bool(value)


def load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def merge_env_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
    merged = json.loads(json.dumps(config_data))  # deep copy via json

    for dotted_key, env_name in ENV_MAP.items():
        if env_name not in os.environ:
            continue
        value: Any = os.environ[env_name]
        target = merged
        parts = dotted_key.split(".")
        for part in parts[:-1]:
            target = target.setdefault(part, {})
        last = parts[-1]
        if last == "seed":
            value = int(value)
        elif last == "flush_at_eof":
            value = _as_bool(value)
        target[last] = value

    return merged


def load_config(config_path: str | Path = "config/responder.defaults.yml") -> ResponderConfig:
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    data = load_yaml(path)
    data = merge_env_overrides(data)
    return ResponderConfig.from_dict(data)
