from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

import yaml

from .schema import (
    RULE_CATEGORIES,
    FieldEntry,
    MetaFieldEntry,
    RuleEntry,
    SchemaError,
    require_list,
    require_mapping,
)

LOGGER = logging.getLogger(__name__)


def transform_rules(data: Any, context: str = "rules.yml") -> Dict[str, Dict[str, Dict[str, str]]]:
    """Re-key each rule category by tag: ``{category: {tag: {label, description}}}``."""
    document = require_mapping(data, context)
    formatted: Dict[str, Dict[str, Dict[str, str]]] = {}
    for category in RULE_CATEGORIES:
        if category not in document:
            raise SchemaError(f"{context} is missing required key '{category}'")
        items = require_list(document[category], f"{context}: '{category}'")
        formatted[category] = {}
        for index, item in enumerate(items):
            entry = RuleEntry.from_item(item, f"{context}: {category}[{index}]")
            formatted[category][entry.tag] = entry.to_dict()
    return formatted


def transform_fields(data: Any, context: str = "fields.yml") -> Dict[str, str]:
    formatted: Dict[str, str] = {}
    for index, item in enumerate(require_list(data, context)):
        entry = FieldEntry.from_item(item, f"{context}[{index}]")
        formatted[entry.name] = entry.description
    return formatted


def _meta_items(data: Any, context: str) -> Iterable[tuple]:
    if isinstance(data, Mapping):
        return ((f"{context}: {key}", item) for key, item in data.items())
    items = require_list(data, context)
    return ((f"{context}[{index}]", item) for index, item in enumerate(items))


def transform_meta(data: Any, context: str = "meta.yml") -> Dict[str, Dict[str, Any]]:
    """Re-key meta-field declarations by their nested ``name`` property."""
    formatted: Dict[str, Dict[str, Any]] = {}
    for item_context, item in _meta_items(data, context):
        entry = MetaFieldEntry.from_item(item, item_context)
        formatted[entry.name] = entry.to_dict()
    return formatted


@dataclass(frozen=True)
class AuxiliaryDocument:
    """A YAML document under the data directory and how to reshape it."""

    source_name: str
    attribute: str
    transform: Callable[[Any, str], Any]

    @property
    def output_name(self) -> str:
        return Path(self.source_name).with_suffix(".json").name


AUXILIARY_DOCUMENTS: List[AuxiliaryDocument] = [
    AuxiliaryDocument("rules.yml", "rules", transform_rules),
    AuxiliaryDocument("fields.yml", "fields", transform_fields),
    AuxiliaryDocument("meta.yml", "meta", transform_meta),
]


def load_auxiliary(data_dir: Path, document: AuxiliaryDocument) -> Optional[Any]:
    """Load and reshape one auxiliary document; ``None`` when the file is missing."""
    path = data_dir / document.source_name
    if not path.exists():
        LOGGER.warning("[MISSING] %s not found; %s will not be generated", path, document.output_name)
        return None
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    formatted = document.transform(data, str(path))
    LOGGER.debug("Transformed %s (%d top-level entries)", path, len(formatted))
    return formatted


def load_metadata(data_dir: Path) -> Dict[str, Optional[Any]]:
    """Transform every known auxiliary document, keyed by dataset attribute."""
    return {document.attribute: load_auxiliary(data_dir, document) for document in AUXILIARY_DOCUMENTS}
