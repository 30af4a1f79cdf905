"""Slot management for a single profile.

Slots live in <profile>/Slots/<slot-name>. A slot is created on demand the
first time a save or load references it, and can also be addressed by its
recency rank (0 = most recently modified).
"""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..config.path_validator import resolve_slot_path
from ..config.paths import GamePaths
from ..config.schema import DEFAULT_DATED_SLOT_FORMAT
from ..logging_config import get_logger
from .scanner import list_directories
from .transfer import delete_save_files

logger = get_logger("slots")

DATED_SLOT_PREFIX = "dated-"


@dataclass
class SlotInfo:
    """A slot directory with its last modification time."""
    name: str
    path: Path
    modified: datetime
    modified_ns: int = 0  # ordering key; modified is for display


def ensure_slot_root(profile: Path) -> Path:
    """Ensure that the Slots directory exists and return it.

    Args:
        profile: Profile directory

    Returns:
        Path to <profile>/Slots
    """
    slots = profile / GamePaths.SLOTS_DIRNAME
    if not slots.is_dir():
        logger.debug(f"Creating slot directory {slots}")
        slots.mkdir()
    return slots


def ensure_slot(profile: Path, name: str) -> Path:
    """Get or create the slot directory for name.

    Raises:
        InvalidSlotNameError: If name would leave the Slots directory
    """
    slot = resolve_slot_path(ensure_slot_root(profile), name)
    if not slot.is_dir():
        logger.info(f"Creating slot {slot}")
        slot.mkdir()
    return slot


def dated_slot_name(now: Optional[datetime] = None, fmt: str = DEFAULT_DATED_SLOT_FORMAT) -> str:
    """Build a slot name like dated-2024-03-01_174502 from local time."""
    when = now or datetime.now()
    return f"{DATED_SLOT_PREFIX}{when.strftime(fmt)}"


def list_slots_by_age(profile: Path) -> list[SlotInfo]:
    """List the profile's slots, most recently modified first.

    Slots with equal modification times keep their directory order.
    """
    slot_root = ensure_slot_root(profile)

    slots = []
    for entry in list_directories(slot_root):
        mtime_ns = entry.path.stat().st_mtime_ns
        slots.append(SlotInfo(
            name=entry.name,
            path=entry.path,
            modified=datetime.fromtimestamp(mtime_ns / 1e9),
            modified_ns=mtime_ns,
        ))

    slots.sort(key=lambda s: s.modified_ns, reverse=True)
    return slots


def find_nth_newest_slot(profile: Path, nth: int) -> Optional[Path]:
    """Find the nth newest slot.

    Args:
        profile: Profile directory
        nth: Recency rank, 0 being the newest

    Returns:
        Path to the slot, or None if there are nth or fewer slots
    """
    if nth < 0:
        raise ValueError(f"Slot rank must be non-negative, got {nth}")

    slots = list_slots_by_age(profile)
    if nth >= len(slots):
        logger.info(f"No slot at rank {nth} in {profile} ({len(slots)} slots)")
        return None
    return slots[nth].path


def delete_slot(slot: Path, prefix: str) -> bool:
    """Delete a slot's save files, then try to remove the directory.

    Failure to remove the directory (e.g. other files remain) is reported
    but not raised.

    Returns:
        True if the directory was removed
    """
    delete_save_files(slot, prefix)

    try:
        slot.rmdir()
    except OSError as e:
        print(f"Failed to remove directory: {e}")
        logger.warning(f"Failed to remove slot directory {slot}: {e}")
        return False

    logger.info(f"Removed slot {slot}")
    return True
