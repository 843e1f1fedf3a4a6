"""Key/value config file helpers.

Stores the notes directory and the editor name as ``key=value`` lines.
The file is created with commented defaults and kept at mode 0600.
Malformed lines are skipped rather than failing the load.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "notenav"
CONFIG_FILENAME = "config"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
LEGACY_CONFIG_PATH = Path.home() / ".nnav"
CONFIG_PATH = DEFAULT_CONFIG_PATH

DEFAULT_NOTES_SUBDIR = "notes"
DEFAULT_EDITOR = "vim"
CONFIG_FILE_MODE = 0o600

DEFAULT_CONFIG_TEXT = """\
# notenav configuration
# notesdir: path to your notes directory (e.g., ~/notes). Must be readable by your user.
# editor: which editor to launch. Allowed values: vim, nvim, vi, nano, hx, emacs
notesdir=~/notes
editor=vim
"""


def _config_path() -> Path:
    """Return preferred config path, falling back to legacy location when needed."""
    if CONFIG_PATH.exists():
        return CONFIG_PATH
    if CONFIG_PATH == DEFAULT_CONFIG_PATH and LEGACY_CONFIG_PATH.exists():
        return LEGACY_CONFIG_PATH
    return CONFIG_PATH


def ensure_config() -> Path:
    """Make sure the config file exists and is private to the user.

    Missing files are created with defaults; existing ones get their mode
    reset to 0600. Returns the path that will be read.
    """
    config_path = _config_path()
    if not config_path.exists():
        config_path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(config_path, os.O_RDWR | os.O_CREAT | os.O_TRUNC, CONFIG_FILE_MODE)
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(DEFAULT_CONFIG_TEXT)
        logger.info("created default config at %s", config_path)
    try:
        os.chmod(config_path, CONFIG_FILE_MODE)
    except OSError as exc:
        logger.warning("cannot restrict permissions on %s: %s", config_path, exc)
    return config_path


def parse_config(text: str) -> dict[str, str]:
    """Parse ``key=value`` lines; comments, blanks, and malformed lines are skipped."""
    values: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if not sep:
            continue
        values[key.strip().lower()] = value.strip()
    return values


def load_config() -> dict[str, str]:
    """Load config values, creating the file first when it is missing."""
    config_path = ensure_config()
    return parse_config(config_path.read_text(encoding="utf-8"))


def expand_tilde(value: str) -> str:
    """Expand a leading ``~`` or ``~/`` to the home directory; nothing else."""
    if value == "~":
        return str(Path.home())
    if value.startswith("~/"):
        return str(Path.home() / value[2:])
    return value


def notes_root(override: str | None = None) -> Path:
    """Return the effective notes directory as an absolute path.

    Priority: ``override`` (CLI), then ``notesdir`` from config, then
    ``~/notes``. Config read failures fall through to the default.
    """
    raw = (override or "").strip()
    if not raw:
        try:
            raw = load_config().get("notesdir", "").strip()
        except OSError as exc:
            logger.warning("cannot read config: %s", exc)
            raw = ""
    if raw:
        return Path(os.path.abspath(expand_tilde(raw)))
    return Path.home() / DEFAULT_NOTES_SUBDIR


def configured_editor() -> str:
    """Return the raw ``editor`` value from config, defaulting to ``vim``."""
    try:
        raw = load_config().get("editor", "").strip()
    except OSError as exc:
        logger.warning("cannot read config: %s", exc)
        raw = ""
    return raw or DEFAULT_EDITOR


__all__ = [
    "CONFIG_PATH",
    "DEFAULT_CONFIG_TEXT",
    "ensure_config",
    "parse_config",
    "load_config",
    "expand_tilde",
    "notes_root",
    "configured_editor",
]
