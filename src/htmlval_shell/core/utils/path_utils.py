# src/htmlval_shell/core/utils/path_utils.py
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class PathUtils:
    """
    A central utility for reliably retrieving important package and user paths.
    """

    # --- Package specific paths

    @staticmethod
    def get_shell_package_root() -> Path:
        """
        Returns the absolute path of the installed 'htmlval_shell' package.
        (e.g., /path/to/site-packages/htmlval_shell)
        """
        return Path(__file__).resolve().parents[2]

    @staticmethod
    def get_settings_file() -> Path:
        return PathUtils.get_shell_package_root() / "settings.json"

    # --- User specific paths ---

    @staticmethod
    def get_user_config_dir() -> Path:
        """
        Returns the path to the user's .htmlval config directory.
        (e.g., ~/.htmlval/)
        """
        return Path.home() / ".htmlval"

    @staticmethod
    def get_user_settings_file() -> Path:
        """
        Returns the path to the optional user settings override.
        (e.g., ~/.htmlval/settings.json)
        """
        return PathUtils.get_user_config_dir() / "settings.json"
