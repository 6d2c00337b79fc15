from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from dotenv import load_dotenv

from .translator import DEFAULT_TRANSLATE_URL, DEFAULT_USER_AGENT

load_dotenv()


def _parse_int(value: str | None, default: int) -> int:
    try:
        return int(value) if value is not None else default
    except ValueError:
        return default


def _parse_float(value: str | None, default: float) -> float:
    try:
        return float(value) if value is not None else default
    except ValueError:
        return default


def _parse_list(value: str | None) -> List[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    licenses_dir: Path
    data_dir: Path
    output_root: Path
    base_language: str = "en"
    target_languages: List[str] = field(default_factory=lambda: ["zh-cn"])
    translate_url: str = DEFAULT_TRANSLATE_URL
    translate_user_agent: str = DEFAULT_USER_AGENT
    translate_timeout: float = 30.0
    translation_workers: int = 0

    @property
    def base_output_dir(self) -> Path:
        return self.output_root / self.base_language


def load_settings() -> Settings:
    return Settings(
        licenses_dir=Path(os.getenv("LICENSES_DIR", "./choosealicense.com/_licenses")),
        data_dir=Path(os.getenv("DATA_DIR", "./choosealicense.com/_data")),
        output_root=Path(os.getenv("OUTPUT_ROOT", "./data")),
        base_language=os.getenv("BASE_LANGUAGE", "en"),
        target_languages=_parse_list(os.getenv("TARGET_LANGUAGES", "zh-cn")),
        translate_url=os.getenv("TRANSLATE_URL", DEFAULT_TRANSLATE_URL),
        translate_user_agent=os.getenv("TRANSLATE_USER_AGENT", DEFAULT_USER_AGENT),
        translate_timeout=_parse_float(os.getenv("TRANSLATE_TIMEOUT"), 30.0),
        translation_workers=_parse_int(os.getenv("TRANSLATION_WORKERS"), 0),
    )


def ensure_directories(settings: Settings) -> None:
    settings.base_output_dir.mkdir(parents=True, exist_ok=True)
