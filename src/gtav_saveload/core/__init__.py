"""Core business logic module.

This module contains the save-file handling shared by every command.

Submodules:
    scanner: find_matching() and the save-file / directory listings built on it
    slots: Slot directory creation, recency ranking, and deletion
    transfer: Copy/move/delete of save files between directories
    profiles: ProfileLocator for discovering profile directories
    dispatcher: Command and CommandDispatcher applying a run to every profile

Save files are identified purely by name prefix (SGTA by default); their
content is never read.
"""

from .dispatcher import Command, CommandDispatcher
from .profiles import ProfileLocator

__all__ = [
    "Command",
    "CommandDispatcher",
    "ProfileLocator",
]
