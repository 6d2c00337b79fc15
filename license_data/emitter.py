from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List

from .metadata import AUXILIARY_DOCUMENTS
from .schema import LicenseDataset

LOGGER = logging.getLogger(__name__)

LICENSES_FILE = "licenses.json"
LICENSES_FULL_FILE = "licenses-full.json"


def write_json(path: Path, data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
        f.write("\n")
    LOGGER.info("[WRITE] %s", path)
    return path


def emit_dataset(dataset: LicenseDataset, out_dir: Path) -> List[Path]:
    """Write the license maps and every produced auxiliary map into ``out_dir``."""
    out_dir.mkdir(parents=True, exist_ok=True)
    written = [
        write_json(out_dir / LICENSES_FILE, dataset.licenses),
        write_json(out_dir / LICENSES_FULL_FILE, dataset.licenses_full),
    ]
    for document in AUXILIARY_DOCUMENTS:
        data = getattr(dataset, document.attribute)
        if data is None:
            continue
        written.append(write_json(out_dir / document.output_name, data))
    return written
