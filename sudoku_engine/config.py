from __future__ import annotations
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional
import yaml

MIN_GIVENS = 17
MAX_GIVENS = 81
DEFAULT_GIVENS = 32


def clamp_givens(givens: int) -> int:
    return max(MIN_GIVENS, min(MAX_GIVENS, int(givens)))


@dataclass
class GeneratorConfig:
    givens: int = DEFAULT_GIVENS  # target clue count; clamped when used
    seed: Optional[int] = None    # None -> OS entropy

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "GeneratorConfig":
        data = dict(data or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown generator option(s): {', '.join(unknown)}")
        if "givens" in data:
            givens = data["givens"]
            if isinstance(givens, bool):
                raise ValueError(f"givens must be an integer, got {givens!r}")
            try:
                data["givens"] = int(givens)
            except (TypeError, ValueError):
                raise ValueError(f"givens must be an integer, got {givens!r}") from None
        seed = data.get("seed")
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            raise ValueError(f"seed must be an integer or null, got {seed!r}")
        return cls(**data)


def load_yaml(path: str | Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    # a 'generator:' section is optional
    return dict(data.get("generator", data))


def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg


def load_config(path: str | Path | None = None, **overrides) -> GeneratorConfig:
    """YAML file (optional) first, then non-None overrides on top."""
    cfg = load_yaml(path) if path else {}
    return GeneratorConfig.from_mapping(merge_overrides(cfg, **overrides))
