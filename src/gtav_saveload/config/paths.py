"""Default paths for GTA V profiles and the helper's own files"""

import os
from pathlib import Path

from ..errors import MissingEnvironmentError


class GamePaths:
    """Default paths for GTA V saves and application data.

    Paths are resolved from environment variables at call time so that
    a missing home variable is reported when the run starts, not on import.
    """

    HOME_ENV_VAR = "USERPROFILE"
    APPDATA_ENV_VAR = "APPDATA"

    # Layout below the home directory
    GAME_SUBDIR = Path("Documents") / "Rockstar Games" / "GTA V"
    PROFILES_DIRNAME = "Profiles"
    SLOTS_DIRNAME = "Slots"
    SAVE_FILES_DIRNAME = "Save Files"

    # Application data
    CONFIG_DIRNAME = "GTAVSaveLoad"
    FALLBACK_CONFIG_DIRNAME = ".gtav_saveload"
    CONFIG_FILENAME = "configuration.xml"

    @classmethod
    def home_dir(cls) -> Path:
        """Get the user's home directory.

        Returns:
            Path taken from %USERPROFILE%

        Raises:
            MissingEnvironmentError: If %USERPROFILE% is not set
        """
        value = os.environ.get(cls.HOME_ENV_VAR)
        if not value:
            raise MissingEnvironmentError(cls.HOME_ENV_VAR)
        return Path(value)

    @classmethod
    def game_dir(cls) -> Path:
        """Default GTA V base directory (Documents/Rockstar Games/GTA V)."""
        return cls.home_dir() / cls.GAME_SUBDIR

    @classmethod
    def config_dir(cls) -> Path:
        """Directory holding configuration.xml and the log file.

        Uses %APPDATA%/GTAVSaveLoad when APPDATA is set, otherwise
        <home>/.gtav_saveload.
        """
        appdata = os.environ.get(cls.APPDATA_ENV_VAR)
        if appdata:
            return Path(appdata) / cls.CONFIG_DIRNAME
        return cls.home_dir() / cls.FALLBACK_CONFIG_DIRNAME

    @classmethod
    def config_file(cls) -> Path:
        return cls.config_dir() / cls.CONFIG_FILENAME

    @classmethod
    def expand_path(cls, path_str: str) -> Path:
        """Expand environment variables and ~ in a path string.

        Args:
            path_str: Path string potentially containing environment variables

        Returns:
            Path object with expanded variables
        """
        return Path(os.path.expandvars(path_str)).expanduser()
