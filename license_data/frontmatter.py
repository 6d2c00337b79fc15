from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, List, Tuple

import yaml

from .schema import SchemaError

DELIMITER = re.compile(r"---")


class MalformedDocumentError(ValueError):
    """Raised when a document does not split into front matter and body."""


class MissingInputError(FileNotFoundError):
    """Raised when an input directory the run cannot do without is absent."""


@dataclass
class ParsedDocument:
    path: Path
    frontmatter: Dict[str, Any]
    body: str


def split_document(text: str) -> Tuple[str, str]:
    """
    Split a document into its YAML block and its free-text body.

    The text is cut at every ``---``; segments that are blank once stripped
    are dropped, and exactly two must remain.
    """
    parts = [part for part in DELIMITER.split(text) if part.strip()]
    if len(parts) != 2:
        raise MalformedDocumentError(
            f"expected front matter and body separated by '---', found {len(parts)} section(s)"
        )
    yaml_part, body = parts
    return yaml_part.strip(), body.strip()


def parse_frontmatter(text: str) -> Tuple[Dict[str, Any], str]:
    yaml_part, body = split_document(text)
    parsed = yaml.safe_load(yaml_part)
    if not isinstance(parsed, dict):
        raise SchemaError(f"front matter must be a mapping, got {type(parsed).__name__}")
    return parsed, body


def iter_license_files(directory: Path) -> List[Path]:
    if not directory.is_dir():
        raise MissingInputError(f"License directory not found: {directory}")
    return sorted(p for p in directory.iterdir() if p.is_file() and not p.name.startswith("."))


def load_document(path: Path) -> ParsedDocument:
    text = path.read_text(encoding="utf-8")
    try:
        frontmatter, body = parse_frontmatter(text)
    except MalformedDocumentError as exc:
        raise MalformedDocumentError(f"{path}: {exc}") from exc
    except SchemaError as exc:
        raise SchemaError(f"{path}: {exc}") from exc
    return ParsedDocument(path=path, frontmatter=frontmatter, body=body)


def load_documents(directory: Path) -> Iterator[ParsedDocument]:
    for path in iter_license_files(directory):
        yield load_document(path)
