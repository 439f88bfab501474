"""Typed description of the SEO report the AI service must return.

The tree is the single source for two things: the JSON schema sent along with
the generation request, and the shape check applied to whatever comes back.
Only shape is checked; value ranges (e.g. 0-100 scores) are not enforced.
"""

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class NumberField:
    def to_json_schema(self) -> dict:
        return {"type": "number"}


@dataclass(frozen=True)
class StringField:
    def to_json_schema(self) -> dict:
        return {"type": "string"}


@dataclass(frozen=True)
class BooleanField:
    def to_json_schema(self) -> dict:
        return {"type": "boolean"}


@dataclass(frozen=True)
class ArrayField:
    items: "FieldKind"

    def to_json_schema(self) -> dict:
        return {"type": "array", "items": self.items.to_json_schema()}


@dataclass(frozen=True)
class ObjectField:
    """Object node. An empty `properties` mapping means a free-form bag."""

    properties: dict[str, "FieldKind"] = field(default_factory=dict)

    def to_json_schema(self) -> dict:
        schema: dict[str, Any] = {"type": "object"}
        if self.properties:
            schema["properties"] = {name: kind.to_json_schema() for name, kind in self.properties.items()}
            schema["required"] = list(self.properties)
        return schema


FieldKind = Union[NumberField, StringField, BooleanField, ArrayField, ObjectField]


def _strings() -> ArrayField:
    return ArrayField(StringField())


SEO_ANALYSIS_SCHEMA = ObjectField(
    {
        "overallScore": NumberField(),
        "titleAnalysis": ObjectField(
            {
                "score": NumberField(),
                "length": NumberField(),
                "issues": _strings(),
                "suggestions": _strings(),
            }
        ),
        "metaDescription": ObjectField(
            {
                "score": NumberField(),
                "length": NumberField(),
                "exists": BooleanField(),
                "suggestions": _strings(),
            }
        ),
        "contentAnalysis": ObjectField(
            {
                "score": NumberField(),
                "wordCount": NumberField(),
                "readabilityScore": NumberField(),
                "headingStructure": ObjectField(),
                "suggestions": _strings(),
            }
        ),
        "keywordAnalysis": ObjectField(
            {
                "score": NumberField(),
                "extractedKeywords": _strings(),
                "suggestedKeywords": _strings(),
                "keywordDensity": ObjectField(),
            }
        ),
        "technicalSEO": ObjectField(
            {
                "score": NumberField(),
                "issues": _strings(),
                "improvements": _strings(),
            }
        ),
        "actionableInsights": _strings(),
        "priorityActions": _strings(),
    }
)


def validate(value: object, kind: FieldKind = SEO_ANALYSIS_SCHEMA, path: str = "$") -> list[str]:
    """Return a list of shape errors for `value`; empty when it matches."""
    # bool is a subclass of int, so it is checked before numbers.
    if isinstance(kind, BooleanField):
        return [] if isinstance(value, bool) else [f"{path}: expected boolean"]

    if isinstance(kind, NumberField):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return [f"{path}: expected number"]
        return []

    if isinstance(kind, StringField):
        return [] if isinstance(value, str) else [f"{path}: expected string"]

    if isinstance(kind, ArrayField):
        if not isinstance(value, list):
            return [f"{path}: expected array"]
        errors: list[str] = []
        for index, item in enumerate(value):
            errors.extend(validate(item, kind.items, f"{path}[{index}]"))
        return errors

    if not isinstance(value, dict):
        return [f"{path}: expected object"]
    errors = []
    for name, child in kind.properties.items():
        if name not in value:
            errors.append(f"{path}.{name}: missing")
            continue
        errors.extend(validate(value[name], child, f"{path}.{name}"))
    return errors
