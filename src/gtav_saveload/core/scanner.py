"""Directory scanning with entry-type and name predicates"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from ..logging_config import get_logger

logger = get_logger("scanner")

EntryPredicate = Callable[[Path], bool]
NamePredicate = Callable[[str], bool]


@dataclass(frozen=True)
class DirEntry:
    """A directory entry that passed both predicates."""
    name: str
    path: Path


def is_file(path: Path) -> bool:
    return path.is_file()


def is_dir(path: Path) -> bool:
    return path.is_dir()


def _is_decodable(name: str) -> bool:
    """Names the OS handed back with undecodable bytes carry surrogates."""
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def find_matching(path: Path, kind: EntryPredicate, name_matches: NamePredicate) -> list[DirEntry]:
    """Find entries directly under path matching both predicates.

    Args:
        path: Directory to scan
        kind: Entry-type predicate, e.g. is_file or is_dir
        name_matches: Predicate on the entry's file name

    Returns:
        Matching entries in directory order (no ordering guarantee)

    Raises:
        OSError: If the directory cannot be read
    """
    out = []
    for entry in path.iterdir():
        name = entry.name
        if not _is_decodable(name):
            logger.debug(f"Skipping entry with undecodable name in {path}")
            continue

        if kind(entry) and name_matches(name):
            out.append(DirEntry(name=name, path=entry))

    return out


def list_save_files(path: Path, prefix: str) -> list[DirEntry]:
    """List files under path whose name starts with prefix."""
    return find_matching(path, is_file, lambda name: name.startswith(prefix))


def list_name_contains(path: Path, fragment: str) -> list[DirEntry]:
    """List directories under path whose name contains fragment."""
    return find_matching(path, is_dir, lambda name: fragment in name)


def list_directories(path: Path) -> list[DirEntry]:
    """List every directory directly under path."""
    return find_matching(path, is_dir, lambda name: True)
