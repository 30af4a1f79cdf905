"""Configuration data models"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

DEFAULT_SAVE_FILE_PREFIX = "SGTA"
DEFAULT_DATED_SLOT_FORMAT = "%Y-%m-%d_%H%M%S"


class TransferMode(Enum):
    """How save files travel between a profile and a slot"""
    COPY = "copy"  # source is left untouched
    MOVE = "move"  # source save files are removed after the transfer


@dataclass
class Settings:
    """Application settings"""
    save_file_prefix: str = DEFAULT_SAVE_FILE_PREFIX
    transfer_mode: TransferMode = TransferMode.COPY
    dated_slot_format: str = DEFAULT_DATED_SLOT_FORMAT
    base_dir: Optional[Path] = None  # None = Documents/Rockstar Games/GTA V


@dataclass
class AppConfiguration:
    """Complete application configuration"""
    settings: Settings = field(default_factory=Settings)
