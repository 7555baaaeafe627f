"""Streamlit frontend."""
