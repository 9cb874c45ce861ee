"""Configuration for the tfmkit CLI.

Settings live in a ``[tfmkit]`` table of ``tfmkit.toml`` or in the
``[tool.tfmkit]`` table of ``pyproject.toml``. The first match wins:

1. the file named by ``--config`` or ``TFMKIT_CONFIG``
2. ``./tfmkit.toml``
3. ``./pyproject.toml``, if it has a ``[tool.tfmkit]`` table

Example (``tfmkit.toml``)::

    [tfmkit]
    default_target = "net40-client"
    output_format = "json"

Every option is checked when the file is loaded, so a bad moniker in
``default_target`` fails at startup and not on first use.
"""

from __future__ import annotations

import tomli as tomllib
from pathlib import Path
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, Optional

from tfmkit.exceptions import ConfigError
from tfmkit.utils.logger import get_logger
from tfmkit.models.framework import FrameworkName
from tfmkit.core.framework_parser import parse_framework_name
from tfmkit.constants import DEFAULT_OUTPUT_FORMAT, DEFAULT_TARGET, OUTPUT_FORMATS

logger = get_logger("config")

CONFIG_FILE_NAME = "tfmkit.toml"
PYPROJECT_FILE_NAME = "pyproject.toml"


@dataclass
class TfmKitConfig:
    """Validated tfmkit settings.

    Attributes:
        default_target: Moniker ``compat`` and ``select`` use when no
            ``--target`` is given.
        output_format: Format every command uses when no ``--format`` is
            given.
        source_path: File the settings came from; ``None`` for defaults.
    """

    default_target: Optional[str] = DEFAULT_TARGET
    output_format: str = DEFAULT_OUTPUT_FORMAT

    source_path: Optional[Path] = field(default=None, repr=False)

    @property
    def target_framework(self) -> Optional[FrameworkName]:
        """``default_target`` parsed into a framework, if set."""
        if self.default_target is None:
            return None
        return parse_framework_name(self.default_target)

    def to_log_dict(self) -> Dict[str, Any]:
        """The user-facing options, for debug logging."""
        return {
            "default_target": self.default_target,
            "output_format": self.output_format,
        }


def _candidate_files(directory: Path) -> Iterator[Path]:
    yield directory / CONFIG_FILE_NAME
    yield directory / PYPROJECT_FILE_NAME


def discover_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Locate the configuration file.

    Args:
        explicit_path: A path given by the user; it must exist.

    Returns:
        The file to load, or ``None`` when there is none.

    Raises:
        ConfigError: ``explicit_path`` does not exist.
    """
    if explicit_path is not None:
        if not explicit_path.is_file():
            raise ConfigError(
                f"Configuration file not found: {explicit_path}",
                config_path=str(explicit_path),
            )
        return explicit_path.resolve()

    for candidate in _candidate_files(Path.cwd()):
        if not candidate.is_file():
            continue
        if candidate.name == PYPROJECT_FILE_NAME and not _pyproject_has_tfmkit_section(
            candidate
        ):
            continue
        logger.debug("Discovered configuration file %s", candidate)
        return candidate

    return None


def _pyproject_has_tfmkit_section(path: Path) -> bool:
    """True if ``path`` parses and has a ``[tool.tfmkit]`` table.

    A broken ``pyproject.toml`` belongs to someone else's project and is
    skipped rather than reported.
    """
    try:
        document = _read_toml(path)
    except ConfigError as exc:
        logger.debug("Skipping %s: %s", path, exc)
        return False
    return "tfmkit" in document.get("tool", {})


def load_config(config_path: Optional[Path] = None) -> TfmKitConfig:
    """Find, read and validate the configuration.

    Args:
        config_path: Explicit file; ``None`` runs
            :func:`discover_config_file`.

    Returns:
        The validated settings; defaults when no file is found.

    Raises:
        ConfigError: The file is unreadable, is not TOML, or holds an
            unknown or invalid option.
    """
    path = discover_config_file(config_path)
    if path is None:
        logger.debug("No configuration file, using defaults")
        return TfmKitConfig()

    document = _read_toml(path)
    if path.name == PYPROJECT_FILE_NAME:
        table = document.get("tool", {}).get("tfmkit", {})
    else:
        table = document.get("tfmkit", {})

    config = _parse_section(table, config_path=str(path))
    config.source_path = path
    logger.info("Loaded configuration from %s: %s", path, config.to_log_dict())
    return config


def _read_toml(path: Path) -> Dict[str, Any]:
    """Parse ``path`` as TOML.

    Raises:
        ConfigError: The file cannot be read or is not valid TOML.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(
            f"Cannot read {path}: {exc.strerror or exc}",
            config_path=str(path),
        ) from exc

    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path.name}: {exc}", config_path=str(path)) from exc


def _require_str(option: str, value: Any, config_path: str) -> str:
    if not isinstance(value, str):
        raise ConfigError(
            f"{option} must be a string, got {type(value).__name__}",
            config_path=config_path,
            option=option,
        )
    return value


def _check_default_target(value: Any, config_path: str) -> str:
    moniker = _require_str("default_target", value, config_path)
    try:
        framework = parse_framework_name(moniker)
    except ValueError as exc:
        raise ConfigError(
            f"default_target is not a framework moniker: {exc}",
            config_path=config_path,
            option="default_target",
        ) from exc

    if framework.is_unsupported:
        raise ConfigError(
            f"default_target {moniker!r} is not a supported framework",
            config_path=config_path,
            option="default_target",
        )
    return moniker


def _check_output_format(value: Any, config_path: str) -> str:
    name = _require_str("output_format", value, config_path).lower()
    if name not in OUTPUT_FORMATS:
        raise ConfigError(
            f"output_format must be one of {', '.join(OUTPUT_FORMATS)}, got {value!r}",
            config_path=config_path,
            option="output_format",
        )
    return name


#: Option name -> validator returning the normalized value.
_OPTION_CHECKS: Dict[str, Callable[[Any, str], Any]] = {
    "default_target": _check_default_target,
    "output_format": _check_output_format,
}


def _parse_section(section: Dict[str, Any], *, config_path: str) -> TfmKitConfig:
    """Validate a ``[tfmkit]`` / ``[tool.tfmkit]`` table.

    Raises:
        ConfigError: An option is unknown or has an invalid value.
    """
    unknown = sorted(set(section) - set(_OPTION_CHECKS))
    if unknown:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(unknown)}",
            config_path=config_path,
        )

    values = {
        option: _OPTION_CHECKS[option](value, config_path)
        for option, value in section.items()
    }
    return TfmKitConfig(**values)
