"""Configuration of branch versioning: config file and user properties."""

import configparser
import os
import platform
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

from branchver.constants import (
    DEFAULT_MAIN_RELEASE_BRANCH,
    DEFAULT_RELEASE_BRANCH_PREFIXES,
    DISABLE_BRANCH_VERSIONING_PROPERTY_KEY,
    MAIN_RELEASE_BRANCH_PROPERTY_KEY,
    RELEASE_BRANCH_PREFIXES_PROPERTY_KEY,
)

APP_NAME = "branchver"
CONFIG_SECTION = "branch-versioning"

_home = os.path.expanduser("~")

xdg_config_home = os.environ.get("XDG_CONFIG_HOME") or os.path.join(_home, ".config")

if platform.system() == "Darwin":
    # macOS
    config_dir = Path("~/Library/Application Support/branchver").expanduser()
else:
    # Linux or others
    config_dir = Path(os.path.join(xdg_config_home, APP_NAME))


def get_config_file(execution_root: Optional[Path] = None) -> Path:
    """
    Locate the config file: ``branchver.cfg`` in the execution root when it
    exists there, otherwise the one in the user config directory.
    """
    if execution_root is not None:
        local = Path(execution_root) / f"{APP_NAME}.cfg"
        if local.exists():
            return local
    return config_dir / f"{APP_NAME}.cfg"


_BOOLEAN_STATES = {**configparser.ConfigParser.BOOLEAN_STATES, "": False}


def parse_bool(value: Any) -> bool:
    """Parse a boolean the way configparser does, accepting an empty string as false."""
    if isinstance(value, bool):
        return value
    try:
        return _BOOLEAN_STATES[str(value).strip().lower()]
    except KeyError:
        raise ValueError(f"Not a boolean: {value!r}") from None


def parse_prefixes(value: str) -> Tuple[str, ...]:
    """Split a comma separated prefix list, dropping blanks."""
    return tuple(p.strip() for p in value.split(",") if p.strip())


class ConfigAccessor:
    """
    A dict-like accessor for configuration files.

    This class provides a way to access configuration options with a dictionary-like
    interface while handling missing sections or keys gracefully.

    Usage:
        config = ConfigAccessor()
        value = config.get('section', 'key', default='default')
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize a ConfigAccessor with an optional config file path.

        Args:
            config_path: Path to the configuration file. If None, uses the default path.

        Raises:
            ValueError: If the file exists but is not a valid INI file
        """
        if config_path is None:
            self.config_path = get_config_file()
        else:
            self.config_path = Path(config_path)

        # Values are plain strings, a "%" in a prefix is not interpolated
        self.config = configparser.ConfigParser(interpolation=None)
        if self.config_path.exists():
            try:
                self.config.read(self.config_path)
            except configparser.Error as e:
                raise ValueError(f"Malformed config file {self.config_path}: {e}") from e

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """
        Get a configuration value from the specified section and key.

        Args:
            section: The configuration section
            key: The configuration key
            default: Value to return if the section or key doesn't exist

        Returns:
            The configuration value if it exists, otherwise the default value
        """
        try:
            return self.config[section][key]
        except (KeyError, configparser.NoSectionError, configparser.NoOptionError):
            return default


class BranchVersioningConfig(BaseModel):
    """Settled configuration of one versioning run."""

    model_config = ConfigDict(frozen=True)

    main_release_branch: str = DEFAULT_MAIN_RELEASE_BRANCH
    release_branch_prefixes: Tuple[str, ...] = DEFAULT_RELEASE_BRANCH_PREFIXES
    disabled: bool = False

    @field_validator("main_release_branch")
    @classmethod
    def validate_main_release_branch(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must be a non-empty string")
        return v.strip()

    @field_validator("release_branch_prefixes", mode="before")
    @classmethod
    def validate_release_branch_prefixes(cls, v):
        if isinstance(v, str):
            v = parse_prefixes(v)
        # Sorted so that equal prefix sets give equal configs
        return tuple(sorted(set(v)))


def load_config(
    execution_root: Optional[Path] = None,
    user_properties: Optional[Dict[str, str]] = None,
    config_path: Optional[Path] = None,
) -> BranchVersioningConfig:
    """
    Build the configuration from the config file and user properties.

    User properties (``-D key=value``) take precedence over the
    ``[branch-versioning]`` section of the config file.

    Raises:
        ValueError: If a value cannot be parsed
    """
    if config_path is None:
        config_path = get_config_file(execution_root)
    accessor = ConfigAccessor(config_path)
    properties = user_properties or {}

    values: Dict[str, Any] = {}

    main_branch = properties.get(
        MAIN_RELEASE_BRANCH_PROPERTY_KEY,
        accessor.get(CONFIG_SECTION, "main_release_branch"),
    )
    if main_branch is not None:
        values["main_release_branch"] = main_branch

    prefixes = properties.get(
        RELEASE_BRANCH_PREFIXES_PROPERTY_KEY,
        accessor.get(CONFIG_SECTION, "release_branch_prefixes"),
    )
    if prefixes is not None:
        values["release_branch_prefixes"] = prefixes

    disabled = properties.get(
        DISABLE_BRANCH_VERSIONING_PROPERTY_KEY,
        accessor.get(CONFIG_SECTION, "disable"),
    )
    if disabled is not None:
        values["disabled"] = parse_bool(disabled)

    return BranchVersioningConfig(**values)
