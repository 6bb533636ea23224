"""Loader options and helpers for settingstree."""

from __future__ import annotations

import codecs
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, cast

from omegaconf import OmegaConf
from pydantic import BaseModel, Field, field_validator

DEFAULT_CANDIDATES = (Path("settings.local"), Path("settings.default"))
FILES_ENV_VAR = "SETTINGSTREE_FILES"


def default_candidates() -> List[Path]:
    """Return candidate files from ``SETTINGSTREE_FILES`` or the local/default pair."""
    raw = os.environ.get(FILES_ENV_VAR)
    if raw:
        return [Path(part) for part in raw.split(os.pathsep) if part.strip()]
    return list(DEFAULT_CANDIDATES)


class LoaderConfig(BaseModel):
    """Options controlling how settings files are located and parsed."""

    candidates: List[Path] = Field(
        default_factory=default_candidates,
        description="Files tried in order when no explicit paths are given.",
    )
    encoding: str = Field(default="utf-8", description="Text encoding of settings files.")
    strict_levels: bool = Field(
        default=False,
        description="Reject children indented more than one level below their parent.",
    )

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding '{value}'") from exc
        return value


def load_config(
    config_path: Optional[Path] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> LoaderConfig:
    """
    Build LoaderConfig from defaults, an optional YAML file and keyword overrides.

    ``None`` override values are skipped so unset CLI options keep file values.
    """
    merged: Dict[str, Any] = LoaderConfig().model_dump()

    if config_path:
        file_conf = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)
        if not isinstance(file_conf, dict):
            raise ValueError(f"Options file {config_path} must contain a mapping")
        merged.update(cast(Dict[str, Any], file_conf))

    if overrides:
        merged.update({key: value for key, value in overrides.items() if value is not None})

    return LoaderConfig.model_validate(merged)
