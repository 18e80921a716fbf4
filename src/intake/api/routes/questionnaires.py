"""Questionnaire definition endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ...errors import QuestionnaireNotFoundError
from ...schemas.questionnaires import QuestionnaireModel
from ...services.questionnaire import QuestionnaireRegistry, get_registry

router = APIRouter(prefix="/questionnaires", tags=["questionnaires"])


@router.get("", response_model=List[str], status_code=status.HTTP_200_OK)
def list_questionnaires(registry: QuestionnaireRegistry = Depends(get_registry)) -> List[str]:
    return registry.identifiers()


@router.get("/{identifier}", response_model=QuestionnaireModel, status_code=status.HTTP_200_OK)
def get_questionnaire(
    identifier: str,
    registry: QuestionnaireRegistry = Depends(get_registry),
) -> QuestionnaireModel:
    try:
        return QuestionnaireModel.from_domain(registry.get(identifier))
    except QuestionnaireNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
