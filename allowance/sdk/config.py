"""Configuration management for Pay Allowance.

Configuration is split into two files:

1. settings.json - Machine-specific settings
   - profile: path to profile.yaml (optional, if not colocated)
   - default_output_format: "text" or "json" for the schedule command

2. profile.yaml - The user's spending plan
   - plan: budget, pay_day, saturday_budget

Config directory resolution:
1. ALLOWANCE_CONFIG_PATH environment variable (if set)
2. ~/.config/allowance/ (XDG_CONFIG_HOME fallback)

Profile resolution:
1. settings.json "profile" key (if set via CLI)
2. profile.yaml in the config directory
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from .schemas import PlanConfig

logger = logging.getLogger(__name__)

APP_NAME = "allowance"
SETTINGS_FILENAME = "settings.json"
PROFILE_FILENAME = "profile.yaml"


class ProfileNotFoundError(Exception):
    """Raised when no profile is found."""
    pass


class PlanConfigError(ValueError):
    """Raised when plan values in the profile are invalid."""
    pass


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Resolution order:
    1. ALLOWANCE_CONFIG_PATH environment variable
    2. ~/.config/allowance/ (XDG_CONFIG_HOME)
    """
    env_path = os.environ.get("ALLOWANCE_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_settings_path() -> Path:
    return get_config_dir() / SETTINGS_FILENAME


def load_settings() -> dict:
    """Load machine-specific settings from settings.json.

    Returns:
        Settings dictionary (empty dict if file doesn't exist)
    """
    settings_file = get_settings_path()

    if not settings_file.exists():
        return {}

    with open(settings_file, "r") as f:
        return json.load(f)


def save_settings(settings: dict) -> Path:
    """Save machine-specific settings to settings.json.

    Returns:
        Path to the saved settings file
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)

    settings_file = config_dir / SETTINGS_FILENAME

    with open(settings_file, "w") as f:
        json.dump(settings, f, indent=2)

    return settings_file


def get_setting(key: str, default: Any = None) -> Any:
    return load_settings().get(key, default)


def set_setting(key: str, value: Any) -> Path:
    settings = load_settings()
    settings[key] = value
    return save_settings(settings)


def get_profile_path(require_exists: bool = False) -> Path:
    """Get the path to the profile.yaml file.

    Resolution order:
    1. settings.json "profile" key (if set)
    2. profile.yaml in config directory

    Args:
        require_exists: If True, raises ProfileNotFoundError if not found

    Raises:
        ProfileNotFoundError: If require_exists=True and no profile found
    """
    custom_profile = get_setting("profile")
    if custom_profile:
        profile_path = Path(custom_profile)
        if require_exists and not profile_path.exists():
            raise ProfileNotFoundError(
                f"Profile not found at configured path: {profile_path}\n\n"
                f"Update with: allowance settings set-profile /path/to/profile.yaml"
            )
        return profile_path

    profile_path = get_config_dir() / PROFILE_FILENAME
    if require_exists and not profile_path.exists():
        raise ProfileNotFoundError(
            f"No profile found at {profile_path}\n\n"
            f"Create one with: allowance profile init"
        )

    return profile_path


def load_profile(require_exists: bool = True) -> dict:
    """Load the user profile from profile.yaml.

    Returns:
        Profile dictionary (empty dict if not required and not found)

    Raises:
        ProfileNotFoundError: If require_exists=True and no profile found
    """
    profile_path = get_profile_path(require_exists=require_exists)

    if not profile_path.exists():
        return {}

    with open(profile_path, "r") as f:
        return yaml.safe_load(f) or {}


def save_profile(profile: dict, path: Optional[Path] = None) -> Path:
    """Save the user profile to profile.yaml.

    Args:
        profile: Profile dictionary to save
        path: Optional custom path (uses default if not specified)
    """
    if path is None:
        path = get_profile_path(require_exists=False)

    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        yaml.dump(profile, f, default_flow_style=False, sort_keys=False)

    return path


def set_plan_value(key: str, value: Any) -> Path:
    """Set a single plan value in profile.yaml after validating it.

    Raises:
        PlanConfigError: If the key is unknown or the value is invalid
    """
    profile = load_profile(require_exists=False)
    plan = dict(profile.get("plan") or {})
    plan[key] = value

    validated = _validate_plan(plan)
    profile["plan"] = {k: getattr(validated, k) for k in plan}
    return save_profile(profile)


def _validate_plan(values: Dict[str, Any]) -> PlanConfig:
    try:
        return PlanConfig(**values)
    except ValidationError as e:
        problems = []
        for error in e.errors():
            location = ".".join(str(part) for part in error["loc"])
            problems.append(f"plan.{location}: {error['msg']}")
        raise PlanConfigError("Invalid plan configuration: " + "; ".join(problems)) from e


def load_plan_config(overrides: Optional[Dict[str, Any]] = None) -> PlanConfig:
    """Build the effective plan configuration.

    Precedence (lowest to highest): built-in defaults, the `plan` section
    of profile.yaml, then any non-None overrides.

    Raises:
        ProfileNotFoundError: If settings.json points at a missing profile
        PlanConfigError: If the merged values are invalid
    """
    custom_profile = get_setting("profile")
    profile = load_profile(require_exists=bool(custom_profile))

    values = dict(profile.get("plan") or {})
    for key, value in (overrides or {}).items():
        if value is not None:
            values[key] = value

    config = _validate_plan(values)
    logger.debug(f"plan config: {config.model_dump()}")
    return config
