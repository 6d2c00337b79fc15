#!/usr/bin/env python3
"""Build the choosealicense.com license data as JSON.

Reads the license documents under ``_licenses/`` (YAML front matter followed
by the license text) and the ``rules.yml``, ``fields.yml`` and ``meta.yml``
documents under ``_data/``, then writes:

- ``<output-root>/en/licenses.json``: licenses marked ``hidden: false``
- ``<output-root>/en/licenses-full.json``: every license
- ``<output-root>/en/rules.json``, ``fields.json``, ``meta.json``

and the same five files under ``<output-root>/<lang>/`` for each target
language, with descriptions and labels machine translated.

Settings come from the environment (or a ``.env`` file); flags override them.
Every run is a full rebuild.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

import yaml

from license_data.config import Settings, load_settings
from license_data.frontmatter import MalformedDocumentError, MissingInputError
from license_data.pipeline import run_pipeline
from license_data.schema import SchemaError

LOGGER = logging.getLogger("build_license_data")

EXIT_INPUT_ERROR = 1
EXIT_TRANSLATION_FAILED = 3


def configure_logging(verbosity: int) -> None:
    level = logging.DEBUG if verbosity > 0 else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s [%(levelname)s] %(message)s")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Convert choosealicense.com license documents to JSON and translate them.",
    )
    parser.add_argument("--licenses-dir", type=Path, help="Folder of license documents (LICENSES_DIR)")
    parser.add_argument("--data-dir", type=Path, help="Folder holding rules.yml, fields.yml, meta.yml (DATA_DIR)")
    parser.add_argument("--output-root", type=Path, help="Parent folder of the per-language outputs (OUTPUT_ROOT)")
    parser.add_argument("--languages", help="Comma-separated target languages, e.g. zh-cn,ja (TARGET_LANGUAGES)")
    parser.add_argument("--no-translate", action="store_true", help="Only write the base-language files")
    parser.add_argument("--workers", type=int, help="Concurrent translation units (TRANSLATION_WORKERS)")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Enable debug logging")
    return parser.parse_args(argv)


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    if args.licenses_dir:
        settings.licenses_dir = args.licenses_dir
    if args.data_dir:
        settings.data_dir = args.data_dir
    if args.output_root:
        settings.output_root = args.output_root
    if args.languages is not None:
        settings.target_languages = [lang.strip() for lang in args.languages.split(",") if lang.strip()]
    if args.no_translate:
        settings.target_languages = []
    if args.workers is not None:
        settings.translation_workers = args.workers
    return settings


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)
    settings = apply_overrides(load_settings(), args)

    try:
        report = run_pipeline(settings)
    except (MalformedDocumentError, SchemaError, yaml.YAMLError, MissingInputError) as exc:
        LOGGER.error("Aborting, no files written: %s", exc)
        return EXIT_INPUT_ERROR

    LOGGER.info(
        "[DONE] %d public / %d total licenses, %d file(s) written",
        report.public_count,
        report.full_count,
        len(report.written),
    )
    if not report.ok:
        return EXIT_TRANSLATION_FAILED
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
