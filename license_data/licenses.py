from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable

from .frontmatter import ParsedDocument, load_documents
from .schema import LicenseRecord

LOGGER = logging.getLogger(__name__)


@dataclass
class LicenseCollections:
    """Public and full license maps, keyed by lowercased SPDX id."""

    public: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    full: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    @property
    def skipped(self) -> int:
        return len(self.full) - len(self.public)


def normalize_document(document: ParsedDocument) -> LicenseRecord:
    return LicenseRecord.from_frontmatter(document.frontmatter, document.body, str(document.path))


def build_collections(records: Iterable[LicenseRecord]) -> LicenseCollections:
    collections = LicenseCollections()
    for record in records:
        key = record.key
        if key in collections.full:
            LOGGER.warning("[DUPLICATE] %s appears more than once; keeping %s", key, record.title)
            collections.public.pop(key, None)
        collections.full[key] = record.to_dict()
        if record.is_public:
            collections.public[key] = record.to_dict()
            LOGGER.info("[OK] Processed: %s", record.title)
        else:
            LOGGER.info("[SKIP] Hidden license: %s", record.title)
    return collections


def load_licenses(directory: Path) -> LicenseCollections:
    """Read every license document in ``directory`` and build both collections."""
    LOGGER.info("Reading license documents from %s", directory)
    records = [normalize_document(document) for document in load_documents(directory)]
    collections = build_collections(records)
    LOGGER.info(
        "Loaded %d license(s): %d public, %d hidden",
        len(collections.full),
        len(collections.public),
        collections.skipped,
    )
    return collections
