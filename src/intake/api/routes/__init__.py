"""Route group exports."""

from . import customers, food, health, questionnaires

__all__ = ["customers", "food", "health", "questionnaires"]
