"""Client configuration: endpoints, user agent and request timeout."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

PRODUCTION_ENDPOINT = "https://api.exchange.coinbase.com"
SANDBOX_ENDPOINT = "https://api-public.sandbox.exchange.coinbase.com"
DEFAULT_TIMEOUT = 10.0

ENDPOINT_ALIASES: dict[str, str] = {
    "production": PRODUCTION_ENDPOINT,
    "sandbox": SANDBOX_ENDPOINT,
}


@dataclass(frozen=True, slots=True)
class ClientSettings:
    """Everything the client needs to reach the public API.

    The exchange rejects anonymous requests, so ``user_agent`` has no default.
    """

    user_agent: str
    base_url: str = PRODUCTION_ENDPOINT
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if not self.user_agent or not self.user_agent.strip():
            raise ValueError("user_agent must be a non-empty string")
        if self.timeout <= 0:
            raise ValueError("timeout must be a positive number of seconds")
        if not self.base_url.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got {self.base_url!r}")


def resolve_endpoint(name_or_url: str) -> str:
    """Map ``production``/``sandbox`` to their hosts; pass explicit URLs through."""

    return ENDPOINT_ALIASES.get(name_or_url.strip().lower(), name_or_url).rstrip("/")


def settings_from_mapping(data: Mapping[str, Any]) -> ClientSettings:
    """Build :class:`ClientSettings` from a parsed configuration mapping."""

    endpoint = data.get("endpoint") or data.get("base_url") or PRODUCTION_ENDPOINT
    timeout = data.get("timeout")
    return ClientSettings(
        user_agent=str(data.get("user_agent") or ""),
        base_url=resolve_endpoint(str(endpoint)),
        timeout=float(timeout) if timeout is not None else DEFAULT_TIMEOUT,
    )


def load_config(path: str | os.PathLike[str]) -> dict[str, Any]:
    """Load a YAML configuration file and expand environment variables.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Parsed configuration dictionary. Returns an empty dict if the file is
        empty.
    """

    raw_text = Path(path).read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(os.path.expandvars(raw_text)) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, Mapping):
        raise ValueError(f"Config root must be a mapping, got {type(data)!r}")
    return dict(data)


def load_settings(path: str | os.PathLike[str]) -> ClientSettings:
    """Read :class:`ClientSettings` from a YAML file."""

    return settings_from_mapping(load_config(path))
