"""
FeatureSet Model
================

The fixed schema of customer attributes submitted for prediction,
its canonical default record and the structural update operation.
"""

import math
from typing import Any, Dict, List, Literal, Tuple

from pydantic import BaseModel, ConfigDict, Field

YesNo = Literal["Yes", "No"]
InternetAddOn = Literal["No", "Yes", "No internet service"]

FIELD_OPTIONS: Dict[str, Tuple[str, ...]] = {
    "gender": ("Female", "Male"),
    "Partner": ("Yes", "No"),
    "Dependents": ("Yes", "No"),
    "PhoneService": ("Yes", "No"),
    "MultipleLines": ("No phone service", "No", "Yes"),
    "InternetService": ("DSL", "Fiber optic", "No"),
    "OnlineSecurity": ("No", "Yes", "No internet service"),
    "OnlineBackup": ("No", "Yes", "No internet service"),
    "DeviceProtection": ("No", "Yes", "No internet service"),
    "TechSupport": ("No", "Yes", "No internet service"),
    "StreamingTV": ("No", "Yes", "No internet service"),
    "StreamingMovies": ("No", "Yes", "No internet service"),
    "Contract": ("Month-to-month", "One year", "Two year"),
    "PaperlessBilling": ("Yes", "No"),
    "PaymentMethod": (
        "Electronic check",
        "Mailed check",
        "Bank transfer (automatic)",
        "Credit card (automatic)",
    ),
}

# SeniorCitizen is rendered as a select whose option values are 0 and 1
SENIOR_CITIZEN_OPTIONS: Dict[int, str] = {0: "No", 1: "Yes"}

INTEGER_FIELDS = ("SeniorCitizen", "tenure")
DECIMAL_FIELDS = ("MonthlyCharges", "TotalCharges")

# Bounds advertised by the numeric controls; never enforced
ADVERTISED_BOUNDS: Dict[str, Tuple[float, Any]] = {
    "tenure": (0, 100),
    "MonthlyCharges": (0, None),
    "TotalCharges": (0, None),
}

FIELD_LABELS: Dict[str, str] = {
    "gender": "Gender",
    "SeniorCitizen": "Senior Citizen",
    "Partner": "Partner",
    "Dependents": "Dependents",
    "tenure": "Tenure (months)",
    "PhoneService": "Phone Service",
    "MultipleLines": "Multiple Lines",
    "InternetService": "Internet Service",
    "OnlineSecurity": "Online Security",
    "OnlineBackup": "Online Backup",
    "DeviceProtection": "Device Protection",
    "TechSupport": "Tech Support",
    "StreamingTV": "Streaming TV",
    "StreamingMovies": "Streaming Movies",
    "Contract": "Contract",
    "PaperlessBilling": "Paperless Billing",
    "PaymentMethod": "Payment Method",
    "MonthlyCharges": "Monthly Charges ($)",
    "TotalCharges": "Total Charges ($)",
}

FORM_SECTIONS: List[Tuple[str, List[str]]] = [
    ("Demographics", ["gender", "SeniorCitizen", "Partner", "Dependents", "tenure"]),
    (
        "Services",
        [
            "PhoneService",
            "MultipleLines",
            "InternetService",
            "OnlineSecurity",
            "OnlineBackup",
            "DeviceProtection",
            "TechSupport",
            "StreamingTV",
            "StreamingMovies",
        ],
    ),
    (
        "Contract & Billing",
        ["Contract", "PaperlessBilling", "PaymentMethod", "MonthlyCharges", "TotalCharges"],
    ),
]


class FeatureSet(BaseModel):
    """Complete customer-attribute record submitted for prediction."""

    # Demographics
    gender: Literal["Female", "Male"] = Field("Female", alias="gender")
    senior_citizen: int = Field(0, alias="SeniorCitizen", description="Senior citizen flag (0 or 1)")
    partner: YesNo = Field("Yes", alias="Partner")
    dependents: YesNo = Field("No", alias="Dependents")
    tenure_months: int = Field(12, alias="tenure", description="Months since customer joined")

    # Services
    phone_service: YesNo = Field("Yes", alias="PhoneService")
    multiple_lines: Literal["No phone service", "No", "Yes"] = Field("No", alias="MultipleLines")
    internet_service: Literal["DSL", "Fiber optic", "No"] = Field("DSL", alias="InternetService")
    online_security: InternetAddOn = Field("No", alias="OnlineSecurity")
    online_backup: InternetAddOn = Field("Yes", alias="OnlineBackup")
    device_protection: InternetAddOn = Field("No", alias="DeviceProtection")
    tech_support: InternetAddOn = Field("No", alias="TechSupport")
    streaming_tv: InternetAddOn = Field("No", alias="StreamingTV")
    streaming_movies: InternetAddOn = Field("No", alias="StreamingMovies")

    # Contract & billing
    contract: Literal["Month-to-month", "One year", "Two year"] = Field("Month-to-month", alias="Contract")
    paperless_billing: YesNo = Field("Yes", alias="PaperlessBilling")
    payment_method: Literal[
        "Electronic check",
        "Mailed check",
        "Bank transfer (automatic)",
        "Credit card (automatic)",
    ] = Field("Electronic check", alias="PaymentMethod")
    monthly_charges: float = Field(65.5, alias="MonthlyCharges", description="Advertised as >= 0")
    total_charges: float = Field(786.0, alias="TotalCharges", description="Advertised as >= 0")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


# Wire name -> attribute name, in declaration order
WIRE_TO_ATTRIBUTE: Dict[str, str] = {
    field.alias: name for name, field in FeatureSet.model_fields.items()
}
WIRE_NAMES: List[str] = list(WIRE_TO_ATTRIBUTE)


def default_features() -> FeatureSet:
    """Return the canonical default record."""
    return FeatureSet()


def resolve_field(name: str) -> str:
    """Map a wire or attribute name onto the FeatureSet attribute name."""
    if name in WIRE_TO_ATTRIBUTE:
        return WIRE_TO_ATTRIBUTE[name]
    if name in FeatureSet.model_fields:
        return name
    raise KeyError(f"Unknown feature field: {name!r}")


def wire_name(name: str) -> str:
    """Map a wire or attribute name onto its wire name."""
    return FeatureSet.model_fields[resolve_field(name)].alias


def update_field(features: FeatureSet, name: str, value: Any) -> FeatureSet:
    """
    Return a copy of ``features`` with one field replaced.

    No validation is performed; callers coerce the value first.
    """
    return features.model_copy(update={resolve_field(name): value})


def _jsonable(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def to_payload(features: FeatureSet) -> Dict[str, Dict[str, Any]]:
    """Build the request body ``{"features": {...}}`` keyed by wire names."""
    return {
        "features": {
            wire: _jsonable(getattr(features, attribute))
            for wire, attribute in WIRE_TO_ATTRIBUTE.items()
        }
    }
