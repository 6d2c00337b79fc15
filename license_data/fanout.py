from __future__ import annotations

import copy
import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from .emitter import emit_dataset
from .schema import RULE_CATEGORIES, LicenseDataset
from .translator import BaseTranslator

LOGGER = logging.getLogger(__name__)

LICENSE_TEXT_FIELDS = ("description", "how")
RULE_TEXT_FIELDS = ("label", "description")


@dataclass
class LanguageResult:
    language: str
    ok: bool
    out_dir: Path
    reason: str = ""
    calls: int = 0
    written: List[Path] = field(default_factory=list)
    duration_sec: float = 0.0


class _CountingTranslator:
    """Binds one source/target pair and counts the calls made through it."""

    def __init__(self, translator: BaseTranslator, source: str, target: str) -> None:
        self.translator = translator
        self.source = source
        self.target = target
        self.calls = 0

    def __call__(self, text: str) -> str:
        self.calls += 1
        return self.translator.translate(text, self.source, self.target)


def _translate_licenses(licenses: Dict[str, Dict], translate: _CountingTranslator) -> None:
    for entry in licenses.values():
        for key in LICENSE_TEXT_FIELDS:
            entry[key] = translate(entry[key])


def translate_dataset(
    dataset: LicenseDataset,
    translator: BaseTranslator,
    source: str,
    target: str,
) -> Tuple[LicenseDataset, int]:
    """Return a translated deep copy of ``dataset`` and the number of translate calls.

    The base dataset is never modified. Only natural-language fields change;
    keys, booleans and tag lists are copied as-is.
    """
    translated = copy.deepcopy(dataset)
    translate = _CountingTranslator(translator, source, target)

    _translate_licenses(translated.licenses, translate)
    _translate_licenses(translated.licenses_full, translate)

    if translated.rules is not None:
        for category in RULE_CATEGORIES:
            for entry in translated.rules.get(category, {}).values():
                for key in RULE_TEXT_FIELDS:
                    entry[key] = translate(entry[key])

    if translated.fields is not None:
        for name, description in translated.fields.items():
            translated.fields[name] = translate(description)

    if translated.meta is not None:
        for entry in translated.meta.values():
            entry["description"] = translate(entry["description"])

    return translated, translate.calls


def run_language(
    dataset: LicenseDataset,
    translator: BaseTranslator,
    source: str,
    target: str,
    out_dir: Path,
) -> LanguageResult:
    """Translate and write one language.

    A translation failure is returned as a failed result and nothing is
    written for that language. Filesystem errors while writing propagate.
    """
    start = time.time()
    LOGGER.info("[TRANSLATE] %s -> %s", source, target)
    try:
        translated, calls = translate_dataset(dataset, translator, source, target)
    except Exception as exc:  # isolated per language
        LOGGER.exception("[FAIL] Translation to %s failed", target)
        return LanguageResult(
            language=target,
            ok=False,
            out_dir=out_dir,
            reason=f"{type(exc).__name__}: {exc}",
            duration_sec=time.time() - start,
        )
    written = emit_dataset(translated, out_dir)
    return LanguageResult(
        language=target,
        ok=True,
        out_dir=out_dir,
        calls=calls,
        written=written,
        duration_sec=time.time() - start,
    )


def fan_out(
    dataset: LicenseDataset,
    translator: BaseTranslator,
    source: str,
    languages: Sequence[str],
    output_root: Path,
    workers: Optional[int] = None,
) -> List[LanguageResult]:
    """Run one translation unit per language and wait for all of them."""
    if not languages:
        return []
    max_workers = workers if workers and workers > 0 else len(languages)
    results: List[LanguageResult] = []
    with ThreadPoolExecutor(max_workers=max_workers) as ex:
        futs = [
            ex.submit(run_language, dataset, translator, source, language, output_root / language)
            for language in languages
        ]
        for f in as_completed(futs):
            result = f.result()
            results.append(result)
            if result.ok:
                LOGGER.info(
                    "[DONE] %s: %d file(s), %d translation(s) in %.1fs",
                    result.language,
                    len(result.written),
                    result.calls,
                    result.duration_sec,
                )
    return results
