from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .config import Settings, ensure_directories
from .emitter import emit_dataset
from .fanout import LanguageResult, fan_out
from .licenses import load_licenses
from .metadata import load_metadata
from .schema import LicenseDataset
from .translator import BaseTranslator, GoogleTranslator

LOGGER = logging.getLogger(__name__)


@dataclass
class BuildReport:
    """Outcome of one full rebuild."""

    written: List[Path] = field(default_factory=list)
    languages: List[LanguageResult] = field(default_factory=list)
    public_count: int = 0
    full_count: int = 0

    @property
    def failed_languages(self) -> List[LanguageResult]:
        return [result for result in self.languages if not result.ok]

    @property
    def ok(self) -> bool:
        return not self.failed_languages


def build_dataset(settings: Settings) -> LicenseDataset:
    """Load and reshape every input document. Nothing is written here."""
    collections = load_licenses(settings.licenses_dir)
    metadata = load_metadata(settings.data_dir)
    return LicenseDataset(
        licenses=collections.public,
        licenses_full=collections.full,
        rules=metadata["rules"],
        fields=metadata["fields"],
        meta=metadata["meta"],
    )


def build_translator(settings: Settings) -> GoogleTranslator:
    return GoogleTranslator(
        url=settings.translate_url,
        user_agent=settings.translate_user_agent,
        timeout=settings.translate_timeout,
    )


def run_pipeline(settings: Settings, translator: Optional[BaseTranslator] = None) -> BuildReport:
    """
    Rebuild the base-language JSON files, then every translated copy.

    Input errors (malformed or schema-invalid documents) propagate before any
    file is written. Base files are complete before translation starts, and
    every language unit has finished when this returns.
    """
    dataset = build_dataset(settings)

    ensure_directories(settings)
    report = BuildReport(public_count=len(dataset.licenses), full_count=len(dataset.licenses_full))
    report.written.extend(emit_dataset(dataset, settings.base_output_dir))

    if not settings.target_languages:
        LOGGER.info("No target languages configured; skipping translation.")
        return report

    if translator is None:
        translator = build_translator(settings)
    report.languages = fan_out(
        dataset,
        translator,
        source=settings.base_language,
        languages=settings.target_languages,
        output_root=settings.output_root,
        workers=settings.translation_workers,
    )
    for result in report.languages:
        report.written.extend(result.written)
    return report
