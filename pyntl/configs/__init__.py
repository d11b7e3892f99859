"""Configuration package for pyntl.

This package provides configuration management for the number-theory
engine: primality trial counts, enumeration guards, irreducibility
shortcuts and the default log level.

Usage:
    from pyntl.configs import active_config, use_profile, list_profiles

    # List available profiles
    profiles = list_profiles()

    # Switch to a profile (merged over base.yaml)
    use_profile("thorough")
    trials = active_config()["primality"]["num_trials"]
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

CONFIGS_DIR = Path(__file__).parent
PROFILES_DIR = CONFIGS_DIR / "profiles"

_ACTIVE: Optional[Dict[str, Any]] = None


def load_base_config() -> Dict[str, Any]:
    """Load the base configuration.

    Returns
    -------
    Dict[str, Any]
        Base configuration dictionary.
    """
    base_path = CONFIGS_DIR / "base.yaml"
    if not base_path.exists():
        return {}

    with open(base_path, "r") as f:
        return yaml.safe_load(f) or {}


def load_profile(name: str) -> Dict[str, Any]:
    """Load a profile configuration with base inheritance.

    Parameters
    ----------
    name : str
        Profile name (without .yaml extension).

    Returns
    -------
    Dict[str, Any]
        Merged configuration dictionary.

    Raises
    ------
    FileNotFoundError
        If profile file doesn't exist.
    """
    profile_path = PROFILES_DIR / f"{name}.yaml"
    if not profile_path.exists():
        raise FileNotFoundError(f"Profile not found: {profile_path}")

    config = load_base_config()

    with open(profile_path, "r") as f:
        profile = yaml.safe_load(f) or {}

    return _deep_merge(config, profile)


def list_profiles() -> List[str]:
    """List available profiles.

    Returns
    -------
    List[str]
        List of profile names.
    """
    if not PROFILES_DIR.exists():
        return []
    return sorted(f.stem for f in PROFILES_DIR.glob("*.yaml"))


def active_config() -> Dict[str, Any]:
    """Return the configuration currently in use.

    The base configuration is loaded lazily on first access.

    Returns
    -------
    Dict[str, Any]
        Active configuration dictionary.
    """
    global _ACTIVE
    if _ACTIVE is None:
        _ACTIVE = load_base_config()
    return _ACTIVE


def use_profile(name: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Make a profile (plus optional overrides) the active configuration.

    Parameters
    ----------
    name : str
        Profile name.
    overrides : Dict[str, Any], optional
        Extra values merged over the profile.

    Returns
    -------
    Dict[str, Any]
        The new active configuration.
    """
    global _ACTIVE
    config = load_profile(name)
    if overrides:
        config = _deep_merge(config, overrides)
    _ACTIVE = config
    return _ACTIVE


def reset_config() -> None:
    """Drop any profile and fall back to base.yaml on next access."""
    global _ACTIVE
    _ACTIVE = None


def get_setting(section: str, key: str, default: Any = None) -> Any:
    """Read one value from the active configuration.

    Parameters
    ----------
    section : str
        Top-level section (e.g. "primality").
    key : str
        Key inside the section.
    default : Any, optional
        Returned when the section or key is absent.

    Returns
    -------
    Any
        Configured value or default.
    """
    return active_config().get(section, {}).get(key, default)


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """Deep merge two dictionaries.

    Parameters
    ----------
    base : Dict
        Base dictionary.
    override : Dict
        Override dictionary (values take precedence).

    Returns
    -------
    Dict
        Merged dictionary.
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


__all__ = [
    "load_base_config",
    "load_profile",
    "list_profiles",
    "active_config",
    "use_profile",
    "reset_config",
    "get_setting",
    "CONFIGS_DIR",
    "PROFILES_DIR",
]
