"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from enum import StrEnum, auto
from pathlib import Path

from treepath._vocab import DEFAULT_MAX_DEPTH


class ConfigError(Exception):
    """Error in treepath configuration."""


class OutputFormat(StrEnum):
    """How evaluation results are printed."""

    TEXT = auto()  # One N3 term per line
    JSON = auto()  # PathResult document
    TABLE = auto()  # Rich table


@dataclass(slots=True, frozen=True)
class TreepathConfig:
    """Configuration loaded from pyproject.toml.

    All relative paths are resolved from the project root (directory containing pyproject.toml).
    """

    data: Path | None = None
    path: Path | None = None
    path_entry: str | None = None
    max_depth: int = DEFAULT_MAX_DEPTH
    format: OutputFormat = OutputFormat.TEXT
    project_root: Path | None = None


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            # Reached filesystem root
            return None
        current = parent


def _parse_file_path(section: dict[str, object], key: str, project_root: Path) -> Path | None:
    if key not in section:
        return None
    value = section[key]
    if not isinstance(value, str):
        msg = f"Invalid [tool.treepath].{key}: expected string path"
        raise ConfigError(msg)
    file_path = Path(value)
    if not file_path.is_absolute():
        file_path = project_root / file_path
    return file_path


def load_config(pyproject_path: Path) -> TreepathConfig:
    """Load and validate [tool.treepath] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed TreepathConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    project_root = pyproject_path.parent

    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    section = data.get("tool", {}).get("treepath", {})

    if not section:
        # No [tool.treepath] section - return empty config
        return TreepathConfig(project_root=project_root)

    path_entry = section.get("path-entry")
    if path_entry is not None and not isinstance(path_entry, str):
        msg = "Invalid [tool.treepath].path-entry: expected string IRI"
        raise ConfigError(msg)

    max_depth = section.get("max-depth", DEFAULT_MAX_DEPTH)
    # bool is an int subclass
    if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 1:
        msg = f"Invalid [tool.treepath].max-depth: expected positive integer, got {max_depth!r}"
        raise ConfigError(msg)

    format_value = section.get("format", OutputFormat.TEXT.value)
    try:
        output_format = OutputFormat(format_value)
    except ValueError as e:
        choices = ", ".join(f.value for f in OutputFormat)
        msg = f"Invalid [tool.treepath].format: expected one of {choices}, got {format_value!r}"
        raise ConfigError(msg) from e

    return TreepathConfig(
        data=_parse_file_path(section, "data", project_root),
        path=_parse_file_path(section, "path", project_root),
        path_entry=path_entry,
        max_depth=max_depth,
        format=output_format,
        project_root=project_root,
    )


def get_config() -> TreepathConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        TreepathConfig (may be empty if no pyproject.toml or no [tool.treepath] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return TreepathConfig()
    return load_config(pyproject_path)
