"""
Build choosealicense.com license data as JSON, with machine-translated copies.
"""

from .config import Settings, ensure_directories, load_settings  # noqa: F401
from .frontmatter import MalformedDocumentError, parse_frontmatter, split_document  # noqa: F401
from .licenses import LicenseCollections, build_collections, load_licenses  # noqa: F401
from .metadata import load_metadata, transform_fields, transform_meta, transform_rules  # noqa: F401
from .emitter import emit_dataset  # noqa: F401
from .fanout import LanguageResult, fan_out, translate_dataset  # noqa: F401
from .pipeline import BuildReport, build_dataset, run_pipeline  # noqa: F401
from .schema import LicenseDataset, LicenseRecord, SchemaError, Visibility  # noqa: F401
from .translator import BaseTranslator, GoogleTranslator, TranslationError  # noqa: F401

__all__ = [
    "Settings",
    "ensure_directories",
    "load_settings",
    "MalformedDocumentError",
    "parse_frontmatter",
    "split_document",
    "LicenseCollections",
    "build_collections",
    "load_licenses",
    "load_metadata",
    "transform_fields",
    "transform_meta",
    "transform_rules",
    "emit_dataset",
    "LanguageResult",
    "fan_out",
    "translate_dataset",
    "BuildReport",
    "build_dataset",
    "run_pipeline",
    "LicenseDataset",
    "LicenseRecord",
    "SchemaError",
    "Visibility",
    "BaseTranslator",
    "GoogleTranslator",
    "TranslationError",
]
