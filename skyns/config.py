# skyns/config.py
"""
Client configuration.

Example config.yaml:
    portal_url: https://siasky.net
    timeout: 30
    get_entry_timeout: 5
    uri_scheme: skyns
"""

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict

import yaml

from .registry import DEFAULT_PORTAL_URL, SkynetRegistryClient


@dataclass
class Config:
    """Settings for talking to a portal."""
    portal_url: str = DEFAULT_PORTAL_URL
    timeout: float = 30
    get_entry_timeout: int = 5
    uri_scheme: str = "skyns"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        return cls(**data)

    @classmethod
    def from_yaml(cls, yaml_content: str) -> "Config":
        data = yaml.safe_load(yaml_content) or {}
        if not isinstance(data, dict):
            raise ValueError("Config must be a YAML mapping")
        return cls.from_dict(data)

    @classmethod
    def from_file(cls, path: Path | str) -> "Config":
        with open(path, "r") as f:
            return cls.from_yaml(f.read())

    def with_overrides(self, **overrides) -> "Config":
        """Copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def create_client(self) -> SkynetRegistryClient:
        return SkynetRegistryClient(
            portal_url=self.portal_url,
            timeout=self.timeout,
            get_entry_timeout=self.get_entry_timeout,
        )
