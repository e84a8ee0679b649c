"""XDG-compliant path management for dsclean.

Only the configuration directory is used, and only for reading an
optional theme override. dsclean never writes to it.
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "dsclean"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/dsclean/ (or XDG_CONFIG_HOME/dsclean/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_user_theme_path() -> Path:
    """Get the user theme override path.

    Returns:
        Path to ~/.config/dsclean/theme.toml.
    """
    return get_config_dir() / "theme.toml"
