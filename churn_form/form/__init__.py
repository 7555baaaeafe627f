"""Form data model and input coercion."""

from .features import (
    FIELD_LABELS,
    FIELD_OPTIONS,
    FORM_SECTIONS,
    FeatureSet,
    default_features,
    to_payload,
    update_field,
)
from .coercion import apply_input, coerce_value

__all__ = [
    "FeatureSet",
    "FIELD_LABELS",
    "FIELD_OPTIONS",
    "FORM_SECTIONS",
    "default_features",
    "update_field",
    "to_payload",
    "coerce_value",
    "apply_input",
]
