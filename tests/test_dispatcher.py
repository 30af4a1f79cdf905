"""Tests for applying commands across profiles"""

import errno
from datetime import datetime

import pytest

from gtav_saveload.config.schema import Settings, TransferMode
from gtav_saveload.core import transfer
from gtav_saveload.core.dispatcher import Command, CommandDispatcher


@pytest.fixture
def settings(game_dir):
    return Settings(base_dir=game_dir)


@pytest.fixture
def dispatcher(settings):
    return CommandDispatcher(settings, clock=lambda: datetime(2024, 3, 1, 17, 45, 2))


def contents(directory, save_names):
    return {name: (directory / name).read_bytes() for name in save_names(directory)}


def test_save_then_load_restores_profile(profile, dispatcher, make_files, save_names):
    original = make_files(profile, "SGTA001", "SGTA002")

    dispatcher.run(Command(save="slot1"))
    dispatcher.run(Command(clear_profile=True))
    assert save_names(profile) == []

    dispatcher.run(Command(load="slot1"))

    assert contents(profile, save_names) == original
    assert save_names(profile / "Slots" / "slot1") == ["SGTA001", "SGTA002"]


def test_load_nth_newest_slot_loads_most_recent(profile, dispatcher, make_files, set_mtime, save_names):
    make_files(profile, "SGTA50000", content=b"current")
    for name, when in [("a", 1_000_000), ("b", 3_000_000), ("c", 2_000_000)]:
        make_files(profile / "Slots" / name, f"SGTA5000{name}", content=name.encode())
        set_mtime(profile / "Slots" / name, when)

    dispatcher.run(Command(load_nth_newest_slot=0))

    assert contents(profile, save_names) == {"SGTA5000b": b"b"}


def test_load_nth_newest_slot_out_of_range_does_nothing(profile, dispatcher, make_files, save_names):
    make_files(profile, "SGTA50000")

    dispatcher.run(Command(load_nth_newest_slot=0))

    assert save_names(profile) == ["SGTA50000"]


def test_clear_profile_removes_all_save_files(profile, dispatcher, make_files, save_names):
    make_files(profile, "SGTA50000", "SGTA50001", "SGTA50002", "pc_settings.bin")

    dispatcher.run(Command(clear_profile=True))

    assert save_names(profile) == []
    assert (profile / "pc_settings.bin").exists()


def test_save_overwrites_existing_slot(profile, dispatcher, make_files, save_names):
    make_files(profile / "Slots" / "slot1", "SGTA50009")
    make_files(profile, "SGTA50000")

    dispatcher.run(Command(save="slot1"))

    assert save_names(profile / "Slots" / "slot1") == ["SGTA50000"]


def test_load_missing_slot_creates_it_and_clears_profile(profile, dispatcher, make_files, save_names):
    make_files(profile, "SGTA50000")

    dispatcher.run(Command(load="never-saved"))

    assert (profile / "Slots" / "never-saved").is_dir()
    assert save_names(profile) == []


def test_load_save_file_picks_greatest_matching_name(profile, dispatcher, make_files, save_names):
    archive = profile / "Save Files"
    make_files(archive / "2023 - 100%", "SGTA2023")
    make_files(archive / "2024 - 100%", "SGTA2024")
    make_files(archive / "2025 - 50%", "SGTA2025")
    make_files(profile, "SGTA50000")

    dispatcher.run(Command(load_save_file="100%"))

    assert save_names(profile) == ["SGTA2024"]
    assert save_names(archive / "2024 - 100%") == ["SGTA2024"]


def test_load_save_file_without_match_does_nothing(profile, dispatcher, make_files, save_names):
    (profile / "Save Files" / "story").mkdir(parents=True)
    make_files(profile, "SGTA50000")

    dispatcher.run(Command(load_save_file="100%"))

    assert save_names(profile) == ["SGTA50000"]


def test_load_save_file_without_save_files_directory_fails(profile, dispatcher):
    with pytest.raises(OSError):
        dispatcher.run(Command(load_save_file="100%"))


def test_save_dated_uses_clock(profile, dispatcher, make_files, save_names):
    make_files(profile, "SGTA50000")

    dispatcher.run(Command(save_dated=True))

    assert save_names(profile / "Slots" / "dated-2024-03-01_174502") == ["SGTA50000"]
    assert save_names(profile) == ["SGTA50000"]


def test_delete_nth_newest_slot(profile, dispatcher, make_files, set_mtime):
    for name, when in [("keep", 1_000_000), ("drop", 2_000_000)]:
        make_files(profile / "Slots" / name, "SGTA50000")
        set_mtime(profile / "Slots" / name, when)

    dispatcher.run(Command(delete_nth_newest_slot=0))

    assert sorted(p.name for p in (profile / "Slots").iterdir()) == ["keep"]


def test_list_slots(profile, dispatcher, make_files, set_mtime, capsys):
    for name, when in [("older", 1_000_000), ("newer", 2_000_000)]:
        make_files(profile / "Slots" / name, "SGTA50000")
        set_mtime(profile / "Slots" / name, when)

    dispatcher.run(Command(list_slots=True))

    out = capsys.readouterr().out.splitlines()
    assert out[0] == "3F2A91C0: 2 slots"
    assert out[1].endswith("newer")
    assert out[2].endswith("older")


def test_every_profile_is_processed(game_dir, dispatcher, make_files, save_names):
    profiles = [game_dir / "Profiles" / name for name in ("AAAA", "BBBB")]
    for path in profiles:
        make_files(path, f"SGTA{path.name}")

    dispatcher.run(Command(save="shared"))

    for path in profiles:
        assert save_names(path / "Slots" / "shared") == [f"SGTA{path.name}"]


def test_combined_flags_run_in_order(profile, dispatcher, make_files, save_names):
    make_files(profile, "SGTA50000")

    dispatcher.run(Command(save="backup", clear_profile=True))

    assert save_names(profile / "Slots" / "backup") == ["SGTA50000"]
    assert save_names(profile) == []


def test_move_mode_empties_profile_on_save(game_dir, profile, make_files, save_names):
    make_files(profile, "SGTA50000")
    dispatcher = CommandDispatcher(Settings(base_dir=game_dir, transfer_mode=TransferMode.MOVE))

    dispatcher.run(Command(save="slot1"))

    assert save_names(profile) == []
    assert save_names(profile / "Slots" / "slot1") == ["SGTA50000"]


def test_missing_profiles_directory_is_a_no_op(tmp_path, capsys):
    dispatcher = CommandDispatcher(Settings(base_dir=tmp_path / "GTA V"))

    assert dispatcher.run(Command(save="slot1")) is False
    assert capsys.readouterr().out.strip() == f"Missing profile directory: {tmp_path / 'GTA V'}"


def test_command_is_empty():
    assert Command().is_empty()
    assert not Command(save_dated=True).is_empty()
    assert not Command(load_nth_newest_slot=0).is_empty()


def test_failed_copy_aborts_the_run(game_dir, dispatcher, make_files, save_names, monkeypatch):
    first, second = (game_dir / "Profiles" / name for name in ("AAAA", "BBBB"))
    make_files(first, "SGTA50000", "SGTA50001")
    make_files(second, "SGTA50000", "SGTA50001")
    attempts = []

    def failing_copy(src, dst):
        attempts.append(src)
        raise PermissionError(errno.EACCES, "Permission denied", src)

    monkeypatch.setattr(transfer.shutil, "copy2", failing_copy)

    with pytest.raises(PermissionError):
        dispatcher.run(Command(save="backup", clear_profile=True))

    # first file failed, the second was never tried
    assert len(attempts) == 1
    assert save_names(first / "Slots" / "backup") == []
    # clear_profile did not run
    assert save_names(first) == ["SGTA50000", "SGTA50001"]
    # the next profile was not touched
    assert not (second / "Slots").exists()
    assert save_names(second) == ["SGTA50000", "SGTA50001"]
