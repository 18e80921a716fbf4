"""Domain models for customers, questionnaires and the food catalogue."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import Optional, Sequence


class CustomerStatus(str, Enum):
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"
    PENDING = "Pending"
    INACTIVE = "Inactive"


class FieldType(str, Enum):
    TEXT = "text"
    TEXTAREA = "textarea"
    DATE = "date"
    RADIO = "radio"
    CHECKBOX = "checkbox"
    ADDRESS = "address"
    TABLE = "table"


@dataclass(slots=True)
class Location:
    lat: float
    lng: float


@dataclass(slots=True)
class Dependant:
    """A household member living with the customer."""

    name: Optional[str] = None
    relationship: Optional[str] = None
    date_of_birth: Optional[date] = None

    def __post_init__(self) -> None:
        self.name = self.name.strip() if self.name else self.name
        self.relationship = self.relationship.strip() if self.relationship else self.relationship


@dataclass(slots=True)
class FieldAnswer:
    """A questionnaire answer keyed by the id of its field meta."""

    meta: str
    value: Optional[str] = None


@dataclass(slots=True)
class Customer:
    """An applicant registered through the intake questionnaire.

    ``location`` is derived by geocoding the address answers in ``fields``
    and is never supplied by the applicant.
    """

    id: int
    first_name: str
    last_name: str
    email: str
    middle_name: Optional[str] = None
    status: CustomerStatus = CustomerStatus.PENDING
    location: Optional[Location] = None
    household: list[Dependant] = field(default_factory=list)
    disclaimer_agree: Optional[bool] = None
    disclaimer_sign: Optional[str] = None
    packing_list: list[str] = field(default_factory=list)
    assigned_to: Optional[int] = None
    food_preferences: list[str] = field(default_factory=list)
    fields: list[FieldAnswer] = field(default_factory=list)
    date_received: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    last_packed: Optional[datetime] = None
    last_delivered: Optional[datetime] = None

    def __post_init__(self) -> None:
        if self.disclaimer_sign:
            self.disclaimer_sign = self.disclaimer_sign.strip()

    @property
    def full_name(self) -> str:
        parts = (self.first_name, self.middle_name, self.last_name)
        return " ".join(part for part in parts if part)

    @property
    def household_summary(self) -> str:
        return summarize_household(self.household)


def _age_in_months(born: date | datetime | None, today: date) -> int:
    if born is None:
        return 0
    if isinstance(born, datetime):
        born = born.date()
    months = (today.year - born.year) * 12 + (today.month - born.month)
    if today.day < born.day:
        months -= 1
    return max(months, 0)


def summarize_household(household: Sequence[Dependant], today: date | None = None) -> str:
    """Summarize a household as ``#<count> -`` followed by each dependant's age.

    Ages of a year or more are given in whole years (``3y``), younger
    dependants in whole months (``8m``).
    """

    if not household:
        return "None"
    today = today or date.today()
    summary = f"#{len(household)} -"
    for dependant in household:
        months = _age_in_months(dependant.date_of_birth, today)
        years = months // 12
        summary += f" {years}y" if years else f" {months}m"
    return summary


@dataclass(slots=True)
class FieldMeta:
    """Definition of a single questionnaire field."""

    id: str
    label: str
    type: FieldType = FieldType.TEXT
    required: bool = False
    choices: tuple[str, ...] = ()


@dataclass(slots=True)
class Section:
    name: str
    fields: list[FieldMeta] = field(default_factory=list)


@dataclass(slots=True)
class Questionnaire:
    identifier: str
    name: str
    sections: list[Section] = field(default_factory=list)

    def field_metas(self) -> list[FieldMeta]:
        return [meta for section in self.sections for meta in section.fields]


@dataclass(slots=True)
class FoodItem:
    id: str
    name: str
    category_id: Optional[str] = None
    quantity: Optional[int] = None


@dataclass(slots=True)
class FoodCategory:
    """A food category owning an ordered list of items."""

    id: str
    category: str
    items: list[FoodItem] = field(default_factory=list)
