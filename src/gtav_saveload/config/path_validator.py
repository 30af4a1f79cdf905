"""Path validation utilities to prevent dangerous file operations.

Slot names come straight from the command line and are joined onto
<profile>/Slots, so they are checked for:
- Path traversal (".." and path separators)
- Resolved paths landing outside the Slots directory
"""

from pathlib import Path

from ..errors import InvalidSlotNameError
from ..logging_config import get_logger

logger = get_logger("path_validator")

# Both separators are rejected regardless of platform
_SEPARATORS = ("/", "\\")


def is_path_under_root(path: Path, root: Path) -> bool:
    """Check if a path is under a given root directory.

    Args:
        path: The path to check
        root: The root directory

    Returns:
        True if path is under root, False otherwise
    """
    try:
        path_resolved = path.resolve()
        root_resolved = root.resolve()
        return path_resolved == root_resolved or root_resolved in path_resolved.parents
    except (OSError, ValueError) as e:
        logger.warning("Failed to check path relationship: %s", e)
        return False


def validate_slot_name(name: str) -> tuple[bool, str]:
    """Validate a slot name before joining it onto a Slots directory.

    Args:
        name: The slot name as given by the user

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not name or not name.strip():
        return False, "Slot name is empty"

    if name in (".", ".."):
        return False, "Slot name refers to a relative directory"

    for sep in _SEPARATORS:
        if sep in name:
            return False, "Slot name contains a path separator"

    if "\0" in name:
        return False, "Slot name contains a null byte"

    return True, ""


def resolve_slot_path(slot_root: Path, name: str) -> Path:
    """Join a validated slot name onto slot_root.

    Args:
        slot_root: The profile's Slots directory
        name: Slot name from the command line

    Returns:
        slot_root / name

    Raises:
        InvalidSlotNameError: If the name is invalid or escapes slot_root
    """
    is_valid, error = validate_slot_name(name)
    if not is_valid:
        raise InvalidSlotNameError(name, error)

    slot = slot_root / name
    if not is_path_under_root(slot, slot_root):
        raise InvalidSlotNameError(name, f"Path must be under slot directory: {slot_root}")

    return slot
