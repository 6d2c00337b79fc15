from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence

RULE_CATEGORIES: Sequence[str] = ("permissions", "conditions", "limitations")


class SchemaError(ValueError):
    """Raised when a parsed document does not have the expected shape."""


class Visibility(Enum):
    """Normalized visibility state of a license record.

    Only ``PUBLIC`` records are published in ``licenses.json``. A source
    document has to say ``hidden: false`` to get there; a missing or
    non-boolean ``hidden`` value is ``HIDDEN_BY_DEFAULT``.
    """

    PUBLIC = "public"
    HIDDEN = "hidden"
    HIDDEN_BY_DEFAULT = "hidden_by_default"

    @classmethod
    def from_source(cls, value: Any) -> "Visibility":
        if value is False:
            return cls.PUBLIC
        if value is True:
            return cls.HIDDEN
        return cls.HIDDEN_BY_DEFAULT

    @property
    def hidden(self) -> bool:
        return self is not Visibility.PUBLIC


def require_mapping(value: Any, context: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise SchemaError(f"{context} must be a mapping, got {type(value).__name__}")
    return value


def require_list(value: Any, context: str) -> List[Any]:
    if not isinstance(value, list):
        raise SchemaError(f"{context} must be a list, got {type(value).__name__}")
    return value


def require_str(data: Mapping[str, Any], key: str, context: str) -> str:
    if key not in data:
        raise SchemaError(f"{context} is missing required key '{key}'")
    value = data[key]
    if not isinstance(value, str):
        raise SchemaError(f"{context}: '{key}' must be a string, got {type(value).__name__}")
    return value


def require_str_list(data: Mapping[str, Any], key: str, context: str) -> List[str]:
    if key not in data:
        raise SchemaError(f"{context} is missing required key '{key}'")
    values = require_list(data[key], f"{context}: '{key}'")
    for item in values:
        if not isinstance(item, str):
            raise SchemaError(f"{context}: '{key}' must only contain strings, got {item!r}")
    return list(values)


def optional_bool(data: Mapping[str, Any], key: str, context: str) -> Optional[bool]:
    if key not in data or data[key] is None:
        return None
    value = data[key]
    if not isinstance(value, bool):
        raise SchemaError(f"{context}: '{key}' must be a boolean, got {value!r}")
    return value


@dataclass(frozen=True)
class LicenseRecord:
    """One license document after normalization."""

    title: str
    spdx_id: str
    visibility: Visibility
    description: str
    how: str
    permissions: Sequence[str]
    conditions: Sequence[str]
    limitations: Sequence[str]
    body: str
    featured: Optional[bool] = None

    @property
    def key(self) -> str:
        return self.spdx_id.lower()

    @property
    def hidden(self) -> bool:
        return self.visibility.hidden

    @property
    def is_public(self) -> bool:
        return self.visibility is Visibility.PUBLIC

    @classmethod
    def from_frontmatter(cls, data: Mapping[str, Any], body: str, context: str) -> "LicenseRecord":
        return cls(
            title=require_str(data, "title", context),
            spdx_id=require_str(data, "spdx-id", context),
            visibility=Visibility.from_source(data.get("hidden")),
            description=require_str(data, "description", context),
            how=require_str(data, "how", context),
            permissions=tuple(require_str_list(data, "permissions", context)),
            conditions=tuple(require_str_list(data, "conditions", context)),
            limitations=tuple(require_str_list(data, "limitations", context)),
            body=body.strip(),
            featured=optional_bool(data, "featured", context),
        )

    def to_dict(self) -> Dict[str, Any]:
        # `featured` is left out entirely when the source document omits it.
        data: Dict[str, Any] = {"title": self.title, "spdx-id": self.spdx_id}
        if self.featured is not None:
            data["featured"] = self.featured
        data.update(
            {
                "hidden": self.hidden,
                "description": self.description,
                "how": self.how,
                "permissions": list(self.permissions),
                "conditions": list(self.conditions),
                "limitations": list(self.limitations),
                "body": self.body,
            }
        )
        return data


@dataclass(frozen=True)
class RuleEntry:
    tag: str
    label: str
    description: str

    @classmethod
    def from_item(cls, item: Any, context: str) -> "RuleEntry":
        data = require_mapping(item, context)
        return cls(
            tag=require_str(data, "tag", context),
            label=require_str(data, "label", context),
            description=require_str(data, "description", context),
        )

    def to_dict(self) -> Dict[str, str]:
        return {"label": self.label, "description": self.description}


@dataclass(frozen=True)
class FieldEntry:
    name: str
    description: str

    @classmethod
    def from_item(cls, item: Any, context: str) -> "FieldEntry":
        data = require_mapping(item, context)
        return cls(
            name=require_str(data, "name", context),
            description=require_str(data, "description", context),
        )


@dataclass(frozen=True)
class MetaFieldEntry:
    name: str
    description: str
    required: bool

    @classmethod
    def from_item(cls, item: Any, context: str) -> "MetaFieldEntry":
        data = require_mapping(item, context)
        required = optional_bool(data, "required", context)
        if required is None:
            raise SchemaError(f"{context} is missing required key 'required'")
        return cls(
            name=require_str(data, "name", context),
            description=require_str(data, "description", context),
            required=required,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"description": self.description, "required": self.required}


@dataclass
class LicenseDataset:
    """Everything one language's output directory is written from.

    ``licenses`` and ``licenses_full`` map lowercased SPDX ids to record
    dictionaries. The auxiliary maps stay ``None`` when their source file
    was missing, and nothing is written for them.
    """

    licenses: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    licenses_full: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    rules: Optional[Dict[str, Dict[str, Dict[str, str]]]] = None
    fields: Optional[Dict[str, str]] = None
    meta: Optional[Dict[str, Dict[str, Any]]] = None
