"""Copy, move and delete save files between a profile and its slots.

Every delete and every copy is echoed to stdout, one line per file:

    delete: <path>
    <source> -> <destination>

Operations abort on the first I/O error; nothing is rolled back.
"""

import errno
import shutil
from pathlib import Path

from ..config.schema import TransferMode
from ..errors import SaveLoadError
from ..logging_config import get_logger
from .scanner import list_save_files

logger = get_logger("transfer")


def delete_save_files(path: Path, prefix: str) -> int:
    """Delete save files directly under path.

    Args:
        path: Profile or slot directory
        prefix: Save file name prefix

    Returns:
        Number of files deleted

    Raises:
        OSError: If the directory cannot be read or a file cannot be removed
    """
    count = 0
    for save_file in list_save_files(path, prefix):
        print(f"delete: {save_file.path}")
        save_file.path.unlink()
        count += 1

    logger.info(f"Deleted {count} save files from {path}")
    return count


def copy_save_files(src: Path, dst: Path, prefix: str) -> int:
    """Copy save files from src to dst, deleting any existing save files in dst.

    The source directory is left untouched.

    Returns:
        Number of files copied
    """
    _check_distinct(src, dst)
    delete_save_files(dst, prefix)

    count = 0
    for save_file in list_save_files(src, prefix):
        dest = _destination(dst, save_file.name)
        print(f"{save_file.path} -> {dest}")
        shutil.copy2(str(save_file.path), str(dest))
        count += 1

    logger.info(f"Copied {count} save files from {src} to {dst}")
    return count


def move_save_files(src: Path, dst: Path, prefix: str) -> int:
    """Move save files from src to dst, deleting any existing save files in dst.

    Unlike copy_save_files, src holds no save files afterwards.

    Returns:
        Number of files moved
    """
    _check_distinct(src, dst)
    delete_save_files(dst, prefix)

    count = 0
    for save_file in list_save_files(src, prefix):
        dest = _destination(dst, save_file.name)
        print(f"{save_file.path} -> {dest}")
        shutil.move(str(save_file.path), str(dest))
        count += 1

    logger.info(f"Moved {count} save files from {src} to {dst}")
    return count


def transfer_save_files(src: Path, dst: Path, prefix: str, mode: TransferMode) -> int:
    """Transfer save files from src to dst using the given mode."""
    if mode is TransferMode.MOVE:
        return move_save_files(src, dst, prefix)
    return copy_save_files(src, dst, prefix)


def _destination(dst: Path, name: str) -> Path:
    """Target path for a save file; a directory in the way is an error."""
    dest = dst / name
    # shutil would otherwise drop the file inside that directory
    if dest.is_dir():
        raise IsADirectoryError(errno.EISDIR, "Destination save file is a directory", str(dest))
    return dest


def _check_distinct(src: Path, dst: Path) -> None:
    # dst is cleared first, so a transfer onto itself would lose every save
    if src.resolve() == dst.resolve():
        raise SaveLoadError(f"Source and destination are the same directory: {src}")
