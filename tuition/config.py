"""
Runtime Configuration

Environment settings (optionally from a .env file) plus the YAML file that
holds demo data defaults.
"""
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# "overwrite": last registration wins, "reject": raise DuplicateTutorError
TUTOR_DUPLICATE_POLICY = os.getenv("TUTOR_DUPLICATE_POLICY", "overwrite").lower()
DUPLICATE_POLICIES = ("overwrite", "reject")

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "tuition_config.yaml"
CONFIG_PATH = os.getenv("TUITION_CONFIG_PATH", str(DEFAULT_CONFIG_PATH))

DEMO_DEFAULTS: Dict[str, Any] = {
    "num_tutors": 4,
    "num_students": 6,
    "lessons_per_student": 4,
    "review_rate": 0.6,
    "seed": 42,
}


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for entry points"""
    logging.basicConfig(level=level or LOG_LEVEL, format=LOG_FORMAT)


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from YAML.

    Args:
        config_path: File to read, defaults to TUITION_CONFIG_PATH

    Returns:
        Parsed mapping, empty if the file does not exist

    Raises:
        yaml.YAMLError: If the file is not valid YAML
        ValueError: If the top level is not a mapping
    """
    path = Path(config_path or CONFIG_PATH)
    try:
        with open(path, "r") as f:
            config = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning(f"Config file not found at {path}, using defaults")
        return {}

    if not isinstance(config, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(config).__name__}")
    return config


def get_demo_settings(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Demo data settings: file values under "demo" override DEMO_DEFAULTS"""
    settings = dict(DEMO_DEFAULTS)
    settings.update(load_config(config_path).get("demo") or {})
    return settings


def validate_duplicate_policy(policy: str) -> str:
    """
    Check a duplicate tutor policy name.

    Raises:
        ValueError: If policy is not one of DUPLICATE_POLICIES
    """
    if policy not in DUPLICATE_POLICIES:
        raise ValueError(
            f"Invalid TUTOR_DUPLICATE_POLICY: {policy}. "
            f"Must be one of: {', '.join(DUPLICATE_POLICIES)}"
        )
    return policy


def get_duplicate_policy() -> str:
    """Validated duplicate tutor policy from the environment"""
    return validate_duplicate_policy(TUTOR_DUPLICATE_POLICY)
