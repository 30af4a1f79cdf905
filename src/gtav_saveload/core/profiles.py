"""Locate GTA V profile directories"""

from pathlib import Path
from typing import Optional

from ..config.paths import GamePaths
from ..logging_config import get_logger
from .scanner import list_directories

logger = get_logger("profiles")


class ProfileLocator:
    """Find the profile directories under <base>/Profiles.

    The base directory defaults to <home>/Documents/Rockstar Games/GTA V.
    """

    def __init__(self, base_dir: Optional[Path] = None):
        self.base_dir = base_dir or GamePaths.game_dir()

    def profiles_dir(self) -> Path:
        return self.base_dir / GamePaths.PROFILES_DIRNAME

    def find_profiles(self) -> Optional[list[Path]]:
        """List every profile directory, sorted by name.

        Returns:
            Profile paths, or None if the Profiles directory does not exist
        """
        profiles_dir = self.profiles_dir()
        if not profiles_dir.is_dir():
            logger.warning(f"Missing profile directory: {profiles_dir}")
            return None

        profiles = sorted((entry.path for entry in list_directories(profiles_dir)), key=lambda p: p.name)
        logger.debug(f"Found {len(profiles)} profiles in {profiles_dir}")
        return profiles
