"""Customer-facing API schemas."""

from __future__ import annotations

from datetime import date, datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from ..models.domain import Customer, CustomerStatus, Dependant, FieldAnswer

StatusValue = Literal["Accepted", "Rejected", "Pending", "Inactive"]


class LocationModel(BaseModel):
    lat: float
    lng: float


class DependantModel(BaseModel):
    name: Optional[str] = None
    relationship: Optional[str] = None
    dateOfBirth: Optional[date] = None


class FieldAnswerModel(BaseModel):
    meta: str = Field(..., description="Id of the questionnaire field this answer belongs to.")
    value: Optional[str] = None


class CustomerRequest(BaseModel):
    """Questionnaire submission used to create or replace a customer."""

    firstName: str
    middleName: Optional[str] = None
    lastName: str
    email: str
    status: Optional[StatusValue] = Field(default=None, description="Omitted on update to keep the stored status.")
    household: List[DependantModel] = Field(default_factory=list)
    disclaimerAgree: Optional[bool] = None
    disclaimerSign: Optional[str] = None
    packingList: List[str] = Field(default_factory=list)
    assignedTo: Optional[int] = Field(default=None, description="Omitted on update to keep the stored volunteer.")
    foodPreferences: List[str] = Field(default_factory=list)
    fields: List[FieldAnswerModel] = Field(default_factory=list)

    def changes(self) -> dict:
        """Keyword arguments for the domain ``Customer`` (everything but the id)."""

        changes = {
            "first_name": self.firstName,
            "middle_name": self.middleName,
            "last_name": self.lastName,
            "email": self.email,
            "household": [
                Dependant(name=member.name, relationship=member.relationship, date_of_birth=member.dateOfBirth)
                for member in self.household
            ],
            "disclaimer_agree": self.disclaimerAgree,
            "disclaimer_sign": self.disclaimerSign,
            "packing_list": list(self.packingList),
            "food_preferences": list(self.foodPreferences),
            "fields": [FieldAnswer(meta=answer.meta, value=answer.value) for answer in self.fields],
        }
        if self.status is not None:
            changes["status"] = CustomerStatus(self.status)
        if "assignedTo" in self.model_fields_set:
            changes["assigned_to"] = self.assignedTo
        return changes


class CustomerCreateRequest(CustomerRequest):
    id: int = Field(..., description="Id of the User record this customer belongs to.")
    status: StatusValue = "Pending"

    def to_domain(self) -> Customer:
        return Customer(id=self.id, **self.changes())


class CustomerStatusRequest(BaseModel):
    status: StatusValue


class CustomerAssignRequest(BaseModel):
    assignedTo: Optional[int] = Field(default=None, description="Volunteer id, or null to unassign.")


class CustomerResponse(BaseModel):
    id: int
    firstName: str
    middleName: Optional[str] = None
    lastName: str
    email: str
    fullName: str
    status: StatusValue
    location: Optional[LocationModel] = None
    household: List[DependantModel]
    householdSummary: str
    disclaimerAgree: Optional[bool] = None
    disclaimerSign: Optional[str] = None
    packingList: List[str]
    assignedTo: Optional[int] = None
    foodPreferences: List[str]
    fields: List[FieldAnswerModel]
    dateReceived: datetime
    lastPacked: Optional[datetime] = None
    lastDelivered: Optional[datetime] = None

    @classmethod
    def from_domain(cls, customer: Customer) -> "CustomerResponse":
        return cls(
            id=customer.id,
            firstName=customer.first_name,
            middleName=customer.middle_name,
            lastName=customer.last_name,
            email=customer.email,
            fullName=customer.full_name,
            status=customer.status.value,
            location=(
                LocationModel(lat=customer.location.lat, lng=customer.location.lng) if customer.location else None
            ),
            household=[
                DependantModel(name=member.name, relationship=member.relationship, dateOfBirth=member.date_of_birth)
                for member in customer.household
            ],
            householdSummary=customer.household_summary,
            disclaimerAgree=customer.disclaimer_agree,
            disclaimerSign=customer.disclaimer_sign,
            packingList=customer.packing_list,
            assignedTo=customer.assigned_to,
            foodPreferences=customer.food_preferences,
            fields=[FieldAnswerModel(meta=answer.meta, value=answer.value) for answer in customer.fields],
            dateReceived=customer.date_received,
            lastPacked=customer.last_packed,
            lastDelivered=customer.last_delivered,
        )
