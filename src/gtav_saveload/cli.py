"""Command-line argument parsing"""

import argparse
from pathlib import Path
from typing import Optional, Sequence

from . import __app_name__, __version__
from .core.dispatcher import Command


def non_negative_int(value: str) -> int:
    """argparse type for slot ranks."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gtav-saveload",
        description=f"{__app_name__} - Manages GTA V Save Files",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    ops = parser.add_argument_group("operations (applied to every profile)")
    ops.add_argument("--save", metavar="slot",
                     help="Saves the current save files in the given slot.")
    ops.add_argument("--load", metavar="slot",
                     help="Loads the current save files in the given slot.")
    ops.add_argument("--load-save-file", metavar="name",
                     help="Loads the current save file from the Save Files folder.")
    ops.add_argument("--save-dated", action="store_true",
                     help="Saves the current save files in a dated slot.")
    ops.add_argument("--clear-profile", action="store_true",
                     help="Removes the current save files.")
    ops.add_argument("--load-nth-newest-slot", metavar="nth", type=non_negative_int,
                     help="Load the nth newest slot (0 is the newest).")
    ops.add_argument("--delete-nth-newest-slot", metavar="nth", type=non_negative_int,
                     help="Delete the nth newest slot (0 is the newest).")
    ops.add_argument("--list-slots", action="store_true",
                     help="List slots, newest first.")

    opts = parser.add_argument_group("options")
    opts.add_argument("--move", action="store_true",
                      help="Move save files instead of copying them (the source is emptied).")
    opts.add_argument("--base-dir", metavar="path", type=Path,
                      help="GTA V directory containing Profiles "
                           "(default: %%USERPROFILE%%/Documents/Rockstar Games/GTA V).")
    opts.add_argument("--config", metavar="path", type=Path,
                      help="Configuration file to use instead of the default.")
    opts.add_argument("--debug", action="store_true",
                      help="Also log to the console.")

    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def command_from_args(args: argparse.Namespace) -> Command:
    """Convert parsed arguments into a Command."""
    return Command(
        save=args.save,
        load=args.load,
        load_save_file=args.load_save_file,
        save_dated=args.save_dated,
        clear_profile=args.clear_profile,
        load_nth_newest_slot=args.load_nth_newest_slot,
        delete_nth_newest_slot=args.delete_nth_newest_slot,
        list_slots=args.list_slots,
    )
