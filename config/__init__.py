"""Configuration module for the Churn Prediction Form."""

import os
from pathlib import Path

import yaml

# Project root directory
ROOT_DIR = Path(__file__).parent.parent.absolute()

# Load configuration
CONFIG_PATH = Path(__file__).parent / "config.yaml"

LOGS_DIR = ROOT_DIR / "logs"


def load_config(path: Path = CONFIG_PATH) -> dict:
    """Load configuration from YAML file."""
    with open(path, "r") as f:
        config = yaml.safe_load(f) or {}
    return config


def get_config() -> dict:
    """Get configuration dictionary with environment overrides applied."""
    config = load_config()

    api_url = os.getenv("CHURN_API_URL")
    if api_url:
        config.setdefault("api", {})["url"] = api_url

    return config
