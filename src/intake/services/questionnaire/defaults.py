"""Built-in questionnaire definitions."""

from __future__ import annotations

from ...models.domain import FieldMeta, FieldType, Questionnaire, Section

CUSTOMER_QUESTIONNAIRE = "qCustomers"


def default_questionnaires() -> tuple[Questionnaire, ...]:
    customers = Questionnaire(
        identifier=CUSTOMER_QUESTIONNAIRE,
        name="Customer Application",
        sections=[
            Section(
                name="Contact Information",
                fields=[
                    FieldMeta(id="phone", label="Phone Number", required=True),
                    FieldMeta(id="street", label="Street Address", type=FieldType.ADDRESS, required=True),
                    FieldMeta(id="apartment", label="Apartment / Unit", type=FieldType.ADDRESS),
                    FieldMeta(id="city", label="City", type=FieldType.ADDRESS, required=True),
                    FieldMeta(id="state", label="State / Province", type=FieldType.ADDRESS, required=True),
                    FieldMeta(id="zip", label="Postal Code", type=FieldType.ADDRESS, required=True),
                ],
            ),
            Section(
                name="Household",
                fields=[
                    FieldMeta(
                        id="income",
                        label="Monthly Household Income",
                        type=FieldType.RADIO,
                        choices=("Under 1000", "1000 - 2000", "2000 - 3000", "Over 3000"),
                    ),
                    FieldMeta(
                        id="assistance",
                        label="Other Assistance Received",
                        type=FieldType.CHECKBOX,
                        choices=("SNAP", "WIC", "TANF", "None"),
                    ),
                    FieldMeta(id="dependants", label="Household Members", type=FieldType.TABLE),
                ],
            ),
            Section(
                name="Delivery",
                fields=[
                    FieldMeta(id="deliveryInstructions", label="Delivery Instructions", type=FieldType.TEXTAREA),
                    FieldMeta(id="dietaryRestrictions", label="Dietary Restrictions", type=FieldType.TEXTAREA),
                    FieldMeta(id="referredBy", label="How did you hear about us?"),
                ],
            ),
        ],
    )
    return (customers,)
