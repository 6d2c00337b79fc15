import threading
from pathlib import Path
from typing import List, Tuple

import pytest

from license_data.config import Settings
from license_data.translator import BaseTranslator

MIT = """---
title: MIT License
spdx-id: MIT
featured: true
hidden: false

description: A short and simple permissive license.
how: Create a text file named LICENSE and copy the text of the license into it.

permissions:
  - commercial-use
  - modifications

conditions:
  - include-copyright

limitations:
  - liability
  - warranty

---

MIT License

Copyright (c) [year] [fullname]
"""

APACHE = """---
title: Apache License 2.0
spdx-id: Apache-2.0
hidden: false

description: A permissive license whose main conditions require preservation of notices.
how: Create a text file named LICENSE and copy the text of the license into it.

permissions:
  - commercial-use
  - patent-use

conditions:
  - include-copyright
  - document-changes

limitations:
  - trademark-use

---

                                 Apache License
                           Version 2.0, January 2004
"""

# No `hidden` key at all.
AFL = """---
title: Academic Free License v3.0
spdx-id: AFL-3.0

description: The Academic Free License is a variant of the Open Software License.
how: Create a text file named LICENSE and copy the text of the license into it.

permissions:
  - commercial-use

conditions:
  - include-copyright

limitations:
  - trademark-use

---

Academic Free License ("AFL") v. 3.0
"""

WTFPL = """---
title: Do What The F*ck You Want To Public License
spdx-id: WTFPL
hidden: true

description: The easiest license out there.
how: Create a text file named LICENSE and copy the text of the license into it.

permissions:
  - commercial-use

conditions: []

limitations: []

---

DO WHAT THE FUCK YOU WANT TO PUBLIC LICENSE
"""

RULES = """permissions:
- description: The licensed material and derivatives may be used for commercial purposes.
  label: Commercial use
  tag: commercial-use
- description: The licensed material may be modified.
  label: Modification
  tag: modifications

conditions:
- description: A copy of the license and copyright notice must be included.
  label: License and copyright notice
  tag: include-copyright

limitations:
- description: This license includes a limitation of liability.
  label: Liability
  tag: liability
"""

FIELDS = """- name: fullname
  description: The full name or username of the repository owner
- name: year
  description: The current year
"""

META = """- name: title
  description: The license full name specified by https://spdx.org/licenses/
  required: true
- name: spdx-id
  description: Short identifier specified by https://spdx.org/licenses/
  required: true
- name: featured
  description: Whether the license should be featured on the main page
  required: false
"""


class RecordingTranslator(BaseTranslator):
    """Tags every string with the target language and records each call."""

    def __init__(self, fail_for: Tuple[str, ...] = ()) -> None:
        self.fail_for = fail_for
        self.calls: List[Tuple[str, str, str]] = []
        self._lock = threading.Lock()

    def translate(self, text: str, source: str, target: str) -> str:
        if target in self.fail_for:
            raise RuntimeError(f"service unavailable for {target}")
        with self._lock:
            self.calls.append((text, source, target))
        return f"[{target}] {text}"

    def calls_for(self, target: str) -> List[Tuple[str, str, str]]:
        return [call for call in self.calls if call[2] == target]


def write_tree(root: Path, licenses=None, data=None) -> Tuple[Path, Path]:
    licenses_dir = root / "_licenses"
    data_dir = root / "_data"
    licenses_dir.mkdir(parents=True)
    data_dir.mkdir(parents=True)
    if licenses is None:
        licenses = {"mit.txt": MIT, "apache-2.0.txt": APACHE, "afl-3.0.txt": AFL, "wtfpl.txt": WTFPL}
    if data is None:
        data = {"rules.yml": RULES, "fields.yml": FIELDS, "meta.yml": META}
    for name, text in licenses.items():
        (licenses_dir / name).write_text(text, encoding="utf-8")
    for name, text in data.items():
        (data_dir / name).write_text(text, encoding="utf-8")
    return licenses_dir, data_dir


@pytest.fixture
def source_tree(tmp_path):
    return write_tree(tmp_path / "src")


@pytest.fixture
def settings(tmp_path, source_tree):
    licenses_dir, data_dir = source_tree
    return Settings(
        licenses_dir=licenses_dir,
        data_dir=data_dir,
        output_root=tmp_path / "out",
        target_languages=["zh-cn"],
    )


@pytest.fixture
def translator():
    return RecordingTranslator()
