"""
Churn Prediction Form
=====================

Browser form that collects Telco customer attributes, submits them to a
remote churn prediction service and renders the returned probability.

Modules:
    - form: FeatureSet model and input coercion
    - client: HTTP transport to the prediction service
    - session: Form state and submission controller
    - results: Result interpretation and display formatting
    - dashboard: Streamlit frontend
    - utils: Utility functions
"""

__version__ = "1.0.0"
