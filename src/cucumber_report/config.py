"""
Configuration management for the cucumber report generator.
"""

import logging
import os
import threading
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .exceptions import ReportError

logger = logging.getLogger(__name__)

# Module-level lock for thread-safe config loading
_config_lock = threading.Lock()

PACKAGE_DIR = Path(__file__).parent
DEFAULT_LOGO = str(PACKAGE_DIR / "logos" / "cucumber-logo.svg")
DEFAULT_NAME = "index.html"
DEFAULT_DEST = "./reports"

ENV_PREFIX = "CUCUMBER_REPORT_"


class ConfigurationError(ReportError):
    """Raised when configuration is invalid or cannot be loaded."""

    pass


@dataclass
class ReportOptions:
    """Options controlling where results are read from and the report goes."""

    source: Optional[str] = None
    template: Optional[str] = None
    name: str = DEFAULT_NAME
    dest: str = DEFAULT_DEST
    logo: str = DEFAULT_LOGO
    # Directory of extra images to embed; None disables screenshots
    screenshots: Optional[str] = None
    # Any other keys are passed through to the template untouched
    extra: Dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> Dict[str, Any]:
        data = dict(self.extra)
        data.update(
            source=self.source,
            template=self.template,
            name=self.name,
            dest=self.dest,
            logo=self.logo,
            screenshots=self.screenshots,
        )
        return data


_OPTION_KEYS = {f.name for f in fields(ReportOptions)} - {"extra"}


def _split_options(data: Dict[str, Any]) -> ReportOptions:
    known = {k: v for k, v in data.items() if k in _OPTION_KEYS}
    extra = dict(data.get("extra") or {})
    extra.update({k: v for k, v in data.items() if k not in _OPTION_KEYS and k != "extra"})
    return resolve_defaults(ReportOptions(extra=extra, **known))


def resolve_defaults(options: ReportOptions) -> ReportOptions:
    """
    Restore defaults for options that were left empty.

    A logo path shorter than three characters cannot name a real image
    and falls back to the bundled logo.
    """
    if not options.name:
        options.name = DEFAULT_NAME
    if not options.dest:
        options.dest = DEFAULT_DEST
    if not options.logo or len(options.logo) < 3:
        options.logo = DEFAULT_LOGO
    if not options.screenshots:
        options.screenshots = None
    return options


def load_options(config_file: Optional[str] = None, **overrides: Any) -> ReportOptions:
    """
    Load report options from file, environment variables and overrides.

    Configuration precedence (highest to lowest):
    1. Explicit overrides (values of None are ignored)
    2. Environment variables
    3. Configuration file
    4. Default values

    Args:
        config_file: Path to YAML configuration file (optional)
        **overrides: Option values, typically from the command line

    Returns:
        ReportOptions with merged configuration

    Raises:
        FileNotFoundError: If config_file is specified but doesn't exist
        ConfigurationError: If the config file is invalid or unreadable
    """
    with _config_lock:
        config_data: Dict[str, Any] = {}

        if config_file:
            logger.info("Loading configuration from %s", config_file)
            try:
                with open(config_file, "r") as f:
                    file_config = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in config file '{config_file}': {e}")
            except FileNotFoundError:
                raise FileNotFoundError(f"Configuration file not found: {config_file}")
            except PermissionError:
                raise ConfigurationError(f"Permission denied reading config file '{config_file}'")
            except OSError as e:
                raise ConfigurationError(f"Unable to read config file '{config_file}': {e}")
            if not isinstance(file_config, dict):
                raise ConfigurationError(
                    f"Config file '{config_file}' must contain a mapping, "
                    f"got {type(file_config).__name__}"
                )
            config_data.update(file_config)

        env_overrides = _load_from_env()
        config_data.update(env_overrides)
        if env_overrides:
            logger.debug("Applied environment variable overrides: %s", list(env_overrides.keys()))

        config_data.update({k: v for k, v in overrides.items() if v is not None})

        try:
            return _split_options(config_data)
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration: {e}")


def _load_from_env() -> Dict[str, Any]:
    """
    Load options from environment variables.

    Supported environment variables:
    - CUCUMBER_REPORT_SOURCE: Path to the cucumber JSON results
    - CUCUMBER_REPORT_TEMPLATE: Path to an alternate template
    - CUCUMBER_REPORT_NAME: Output file name
    - CUCUMBER_REPORT_DEST: Output directory
    - CUCUMBER_REPORT_LOGO: Path to the logo image
    - CUCUMBER_REPORT_SCREENSHOTS: Directory of screenshots to embed

    Returns:
        Dictionary of option values from environment
    """
    env_config: Dict[str, Any] = {}
    for key in ("source", "template", "name", "dest", "logo", "screenshots"):
        var_name = ENV_PREFIX + key.upper()
        if var_name in os.environ:
            env_config[key] = os.environ[var_name]
    return env_config


def validate_options(options: ReportOptions) -> List[str]:
    """
    Validate options and return list of errors.

    Args:
        options: ReportOptions to validate

    Returns:
        List of error messages (empty if valid)
    """
    errors: List[str] = []

    if not options.source or not os.path.exists(options.source):
        errors.append(f"Input file {options.source} does not exist! Aborting")

    if options.template is not None and not os.path.exists(options.template):
        errors.append(f"Template file {options.template} does not exist! Aborting")

    if options.screenshots is not None and not os.path.isdir(options.screenshots):
        errors.append(f"Screenshots directory {options.screenshots} does not exist! Aborting")

    return errors


def require_valid_options(options: ReportOptions) -> ReportOptions:
    """
    Raise on the first validation error.

    Raises:
        ConfigurationError: If the options name a missing input or template
    """
    errors = validate_options(options)
    if errors:
        raise ConfigurationError(errors[0])
    return options
