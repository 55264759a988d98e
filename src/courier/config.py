"""Client configuration loading."""

import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import yaml

DEFAULT_API_ENDPOINT = "https://pubsub.googleapis.com"


@dataclass
class ClientConfig:
    """Connection settings for one project."""

    project_id: str
    api_endpoint: str = DEFAULT_API_ENDPOINT
    access_token: Optional[str] = None
    timeout_seconds: float = 60.0
    # Worker threads used by bulk delete fan-out
    max_workers: int = 8

    @property
    def base_url(self) -> str:
        return f"{self.api_endpoint.rstrip('/')}/v1"


def _from_mapping(raw: Mapping[str, Any]) -> ClientConfig:
    emulator_host = raw.get("emulator_host")
    api_endpoint = raw.get("api_endpoint", DEFAULT_API_ENDPOINT)
    if emulator_host:
        api_endpoint = f"http://{emulator_host}"
    return ClientConfig(
        project_id=raw["project_id"],
        api_endpoint=api_endpoint,
        access_token=None if emulator_host else raw.get("access_token"),
        timeout_seconds=float(raw.get("timeout_seconds", 60.0)),
        max_workers=int(raw.get("max_workers", 8)),
    )


def load_config(path: str) -> ClientConfig:
    """Load a YAML configuration file and return a ClientConfig."""
    with open(path, "r") as fh:
        raw = yaml.safe_load(fh) or {}

    return _from_mapping(raw)


def config_from_env(environ: Optional[Mapping[str, str]] = None) -> ClientConfig:
    """
    Build a ClientConfig from environment variables.

    ``PUBSUB_EMULATOR_HOST`` (host:port) points the client at a local
    emulator over plain HTTP and disables the bearer token.

    Raises:
        KeyError: if neither ``PUBSUB_PROJECT_ID`` nor ``GOOGLE_CLOUD_PROJECT`` is set
    """
    env = os.environ if environ is None else environ
    project_id = env.get("PUBSUB_PROJECT_ID") or env.get("GOOGLE_CLOUD_PROJECT")
    if not project_id:
        raise KeyError("PUBSUB_PROJECT_ID")

    raw: dict[str, Any] = {"project_id": project_id}
    if "PUBSUB_EMULATOR_HOST" in env:
        raw["emulator_host"] = env["PUBSUB_EMULATOR_HOST"]
    if "PUBSUB_API_ENDPOINT" in env:
        raw["api_endpoint"] = env["PUBSUB_API_ENDPOINT"]
    if "PUBSUB_ACCESS_TOKEN" in env:
        raw["access_token"] = env["PUBSUB_ACCESS_TOKEN"]
    if "PUBSUB_TIMEOUT_SECONDS" in env:
        raw["timeout_seconds"] = env["PUBSUB_TIMEOUT_SECONDS"]
    return _from_mapping(raw)
