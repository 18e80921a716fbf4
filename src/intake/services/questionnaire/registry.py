"""Questionnaire registry: field lookup by type and form validators."""

from __future__ import annotations

import functools
import json
import logging
from pathlib import Path
from typing import Callable, Iterable, Optional, Sequence

from ...config import settings
from ...errors import QuestionnaireNotFoundError
from ...models.domain import FieldAnswer, FieldMeta, FieldType, Questionnaire, Section
from .defaults import default_questionnaires

logger = logging.getLogger(__name__)

FieldValidator = Callable[[Sequence[FieldAnswer]], list[str]]


class QuestionnaireRegistry:
    """Questionnaire definitions addressed by their logical identifier."""

    def __init__(self, questionnaires: Iterable[Questionnaire] = ()) -> None:
        self._questionnaires: dict[str, Questionnaire] = {}
        for questionnaire in questionnaires:
            self.register(questionnaire)

    def register(self, questionnaire: Questionnaire) -> None:
        self._questionnaires[questionnaire.identifier] = questionnaire

    def identifiers(self) -> list[str]:
        return sorted(self._questionnaires)

    def get(self, identifier: str) -> Questionnaire:
        try:
            return self._questionnaires[identifier]
        except KeyError:
            raise QuestionnaireNotFoundError(identifier) from None

    def field_types(self, identifier: str) -> dict[str, FieldType]:
        return {meta.id: meta.type for meta in self.get(identifier).field_metas()}

    def get_fields_by_type(
        self,
        identifier: str,
        fields: Sequence[FieldAnswer],
        field_type: FieldType | str,
    ) -> list[FieldAnswer]:
        """Return the submitted answers whose field meta has ``field_type``, in submitted order."""

        wanted = FieldType(field_type)
        types = self.field_types(identifier)
        return [answer for answer in fields if types.get(answer.meta) == wanted]

    def get_validator(self, identifier: str) -> FieldValidator:
        """Build a validator returning the list of violations for a set of answers."""

        questionnaire = self.get(identifier)
        metas = {meta.id: meta for meta in questionnaire.field_metas()}

        def validate(fields: Sequence[FieldAnswer]) -> list[str]:
            violations: list[str] = []
            seen: set[str] = set()
            for index, answer in enumerate(fields):
                if not answer.meta:
                    violations.append(f"Field #{index} is missing a meta key")
                    continue
                meta = metas.get(answer.meta)
                if meta is None:
                    violations.append(f"Unknown field '{answer.meta}'")
                    continue
                if answer.meta in seen:
                    violations.append(f"Duplicate field '{answer.meta}'")
                    continue
                seen.add(answer.meta)
                violation = _check_value(meta, answer.value)
                if violation:
                    violations.append(violation)

            answered = {answer.meta for answer in fields if answer.value and answer.value.strip()}
            for meta in metas.values():
                if meta.required and meta.id not in answered:
                    violations.append(f"Field '{meta.id}' is required")
            return violations

        return validate


def _check_value(meta: FieldMeta, value: Optional[str]) -> Optional[str]:
    if meta.type is FieldType.RADIO and meta.choices and value:
        if value not in meta.choices:
            return f"Invalid choice '{value}' for field '{meta.id}'"
    return None


def _parse_questionnaire(identifier: str, payload: dict) -> Questionnaire:
    sections = []
    for section in payload.get("sections", []):
        metas = [
            FieldMeta(
                id=str(entry["id"]),
                label=str(entry.get("label") or entry["id"]),
                type=FieldType(entry.get("type", FieldType.TEXT.value)),
                required=bool(entry.get("required", False)),
                choices=tuple(str(choice) for choice in entry.get("choices") or ()),
            )
            for entry in section.get("fields", [])
        ]
        sections.append(Section(name=str(section.get("name", "")), fields=metas))
    return Questionnaire(identifier=identifier, name=str(payload.get("name", identifier)), sections=sections)


@functools.lru_cache(maxsize=1)
def load_questionnaires(source: Optional[Path] = None) -> tuple[Questionnaire, ...]:
    """Load questionnaire definitions from a JSON file, or the built-in ones."""

    path = source or settings.questionnaire_file
    if path is None:
        return default_questionnaires()
    if not path.exists():
        raise FileNotFoundError(f"Questionnaire file not found: {path}")

    with path.open(mode="r", encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, dict):
        raise ValueError(f"Questionnaire file '{path}' must contain an object keyed by identifier.")

    questionnaires = tuple(_parse_questionnaire(identifier, payload) for identifier, payload in data.items())
    logger.info(f"Loaded {len(questionnaires)} questionnaire(s) from {path}")
    return questionnaires


@functools.lru_cache(maxsize=1)
def get_registry() -> QuestionnaireRegistry:
    return QuestionnaireRegistry(load_questionnaires())
