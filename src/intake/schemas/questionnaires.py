"""Questionnaire definition schemas."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel

from ..models.domain import Questionnaire


class FieldMetaModel(BaseModel):
    id: str
    label: str
    type: str
    required: bool
    choices: List[str]


class SectionModel(BaseModel):
    name: str
    fields: List[FieldMetaModel]


class QuestionnaireModel(BaseModel):
    identifier: str
    name: str
    sections: List[SectionModel]

    @classmethod
    def from_domain(cls, questionnaire: Questionnaire) -> "QuestionnaireModel":
        return cls(
            identifier=questionnaire.identifier,
            name=questionnaire.name,
            sections=[
                SectionModel(
                    name=section.name,
                    fields=[
                        FieldMetaModel(
                            id=meta.id,
                            label=meta.label,
                            type=meta.type.value,
                            required=meta.required,
                            choices=list(meta.choices),
                        )
                        for meta in section.fields
                    ],
                )
                for section in questionnaire.sections
            ],
        )
