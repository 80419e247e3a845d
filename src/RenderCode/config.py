from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping

import yaml

from .errors import ConfigError
from .printer import PrefixMode


@dataclass(frozen=True)
class RenderConfig:
    """Settings for one preview render.

    Attributes:
        prefix_mode: Namespace-qualified or bare constructor names.
        show_details: Produce the debug dump of the parsed document.
        html_preview: Render the HTML preview next to the generated code.
    """

    prefix_mode: PrefixMode = PrefixMode.BARE
    show_details: bool = False
    html_preview: bool = True

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RenderConfig":
        """Build a config from a mapping; unknown keys are ignored."""
        valid = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in valid}
        if "prefix_mode" in values:
            values["prefix_mode"] = parse_prefix_mode(values["prefix_mode"])
        for key in ("show_details", "html_preview"):
            if key in values and not isinstance(values[key], bool):
                raise ConfigError(f"{key} must be true or false, got {values[key]!r}")
        return cls(**values)


def parse_prefix_mode(value: Any) -> PrefixMode:
    if isinstance(value, PrefixMode):
        return value
    if isinstance(value, str):
        try:
            return PrefixMode(value.strip().lower())
        except ValueError:
            pass
    choices = ", ".join(mode.value for mode in PrefixMode)
    raise ConfigError(f"prefix_mode must be one of {choices}, got {value!r}")


def load_config(path: str | Path) -> RenderConfig:
    """Read a YAML config file; an empty file yields the defaults."""
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError("Config root must be a mapping with defined fields.")
    return RenderConfig.from_dict(data)
