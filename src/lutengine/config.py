from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class EngineConfig:
    default_intensity: float = 100.0
    clip_output: bool = False
    max_workers: int = 2
    band_rows: int = 64


@dataclass
class AppConfig:
    engine: EngineConfig = field(default_factory=EngineConfig)
    log_level: str = "INFO"
    log_file: Path | None = None


def _expand_path(value: str | None, base: Path) -> Path | None:
    if value in (None, ""):
        return None
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = (base / path).resolve()
    return path


def _validate(engine: EngineConfig) -> None:
    if not 0.0 <= engine.default_intensity <= 100.0:
        raise ValueError("engine.default_intensity must be within 0..100")
    if engine.max_workers < 1:
        raise ValueError("engine.max_workers must be at least 1")
    if engine.band_rows < 1:
        raise ValueError("engine.band_rows must be at least 1")


def load_config(path: str | Path) -> AppConfig:
    try:
        import yaml  # type: ignore
    except Exception as exc:
        raise RuntimeError("PyYAML is required for config loading. Install with: pip install PyYAML") from exc

    cfg_path = Path(path).expanduser().resolve()
    with cfg_path.open("r", encoding="utf-8") as f:
        raw: dict[str, Any] = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"config root must be a mapping: {cfg_path}")

    base = cfg_path.parent
    engine_raw = raw.get("engine", {}) or {}

    engine = EngineConfig(
        default_intensity=float(engine_raw.get("default_intensity", 100.0)),
        clip_output=bool(engine_raw.get("clip_output", False)),
        max_workers=int(engine_raw.get("max_workers", 2)),
        band_rows=int(engine_raw.get("band_rows", 64)),
    )
    _validate(engine)

    return AppConfig(
        engine=engine,
        log_level=str(raw.get("log_level", "INFO")),
        log_file=_expand_path(raw.get("log_file"), base),
    )
