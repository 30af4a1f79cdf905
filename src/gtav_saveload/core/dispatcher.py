"""Apply the requested save/load operations to every profile"""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from ..config.paths import GamePaths
from ..config.schema import Settings
from ..logging_config import get_logger
from .profiles import ProfileLocator
from .scanner import list_name_contains
from .slots import (
    dated_slot_name,
    delete_slot,
    ensure_slot,
    ensure_slot_root,
    find_nth_newest_slot,
    list_slots_by_age,
)
from .transfer import delete_save_files, transfer_save_files

logger = get_logger("dispatcher")


@dataclass
class Command:
    """The operations requested for one run.

    Every field is optional and they combine freely; each profile gets
    the enabled operations in field order.
    """
    save: Optional[str] = None
    load: Optional[str] = None
    load_save_file: Optional[str] = None
    save_dated: bool = False
    clear_profile: bool = False
    load_nth_newest_slot: Optional[int] = None
    delete_nth_newest_slot: Optional[int] = None
    list_slots: bool = False

    def is_empty(self) -> bool:
        return (
            self.save is None
            and self.load is None
            and self.load_save_file is None
            and not self.save_dated
            and not self.clear_profile
            and self.load_nth_newest_slot is None
            and self.delete_nth_newest_slot is None
            and not self.list_slots
        )


class CommandDispatcher:
    """Runs a Command against every profile found under the base directory."""

    def __init__(
        self,
        settings: Settings,
        locator: Optional[ProfileLocator] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.settings = settings
        self.locator = locator or ProfileLocator(settings.base_dir)
        self.clock = clock

    @property
    def prefix(self) -> str:
        return self.settings.save_file_prefix

    def run(self, command: Command) -> bool:
        """Apply command to each profile in turn.

        Returns:
            False if the Profiles directory is missing (nothing was done)

        Raises:
            OSError: On the first failed filesystem operation
            SaveLoadError: For invalid slot names
        """
        profiles = self.locator.find_profiles()
        if profiles is None:
            print(f"Missing profile directory: {self.locator.base_dir}")
            return False

        for profile in profiles:
            logger.info(f"Processing profile {profile.name}")
            self.apply(profile, command)

        return True

    def apply(self, profile: Path, command: Command) -> None:
        """Apply command to a single profile."""
        if command.save is not None:
            self.save(profile, command.save)

        if command.load is not None:
            self.load(profile, command.load)

        if command.load_save_file is not None:
            self.load_save_file(profile, command.load_save_file)

        if command.save_dated:
            self.save_dated(profile)

        if command.clear_profile:
            self.clear_profile(profile)

        if command.load_nth_newest_slot is not None:
            self.load_nth_newest_slot(profile, command.load_nth_newest_slot)

        if command.delete_nth_newest_slot is not None:
            self.delete_nth_newest_slot(profile, command.delete_nth_newest_slot)

        if command.list_slots:
            self.list_slots(profile)

    def save(self, profile: Path, slot_name: str) -> Path:
        """Save the profile's current save files into a slot."""
        slot = ensure_slot(profile, slot_name)
        self._transfer(profile, slot)
        return slot

    def load(self, profile: Path, slot_name: str) -> Path:
        """Load a slot's save files into the profile.

        A slot that does not exist yet is created empty, so loading it
        leaves the profile without save files.
        """
        existed = (ensure_slot_root(profile) / slot_name).is_dir()
        slot = ensure_slot(profile, slot_name)
        if not existed:
            logger.warning(f"Slot {slot_name} did not exist in {profile.name}; profile will be cleared")
        self._transfer(slot, profile)
        return slot

    def load_save_file(self, profile: Path, name: str) -> Optional[Path]:
        """Load the greatest-named Save Files directory containing name.

        Raises:
            OSError: If <profile>/Save Files cannot be read
        """
        matches = list_name_contains(profile / GamePaths.SAVE_FILES_DIRNAME, name)
        if not matches:
            logger.info(f"No save file set matching {name!r} in {profile.name}")
            return None

        source = max(matches, key=lambda entry: entry.name).path
        self._transfer(source, profile)
        return source

    def save_dated(self, profile: Path) -> Path:
        """Save the profile into a new dated-<timestamp> slot."""
        name = dated_slot_name(self.clock(), self.settings.dated_slot_format)
        return self.save(profile, name)

    def clear_profile(self, profile: Path) -> int:
        return delete_save_files(profile, self.prefix)

    def load_nth_newest_slot(self, profile: Path, nth: int) -> Optional[Path]:
        slot = find_nth_newest_slot(profile, nth)
        if slot is not None:
            self._transfer(slot, profile)
        return slot

    def delete_nth_newest_slot(self, profile: Path, nth: int) -> Optional[Path]:
        slot = find_nth_newest_slot(profile, nth)
        if slot is not None:
            delete_slot(slot, self.prefix)
        return slot

    def list_slots(self, profile: Path) -> None:
        slots = list_slots_by_age(profile)
        print(f"{profile.name}: {len(slots)} slots")
        for rank, slot in enumerate(slots):
            print(f"  {rank:>3}  {slot.modified:%Y-%m-%d %H:%M:%S}  {slot.name}")

    def _transfer(self, src: Path, dst: Path) -> int:
        return transfer_save_files(src, dst, self.prefix, self.settings.transfer_mode)
