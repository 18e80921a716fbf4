"""Questionnaire definitions and validation."""

from .defaults import CUSTOMER_QUESTIONNAIRE
from .registry import FieldValidator, QuestionnaireRegistry, get_registry, load_questionnaires

__all__ = [
    "CUSTOMER_QUESTIONNAIRE",
    "FieldValidator",
    "QuestionnaireRegistry",
    "get_registry",
    "load_questionnaires",
]
