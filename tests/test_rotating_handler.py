import gzip
from pathlib import Path

import pytest

from logarchive.archive import ArchiveHooks, FileLifecycleHooks
from logarchive.logger import ArchivingTimedRotatingFileHandler


def _backups(directory, count):
    names = [f"app.log.2024-01-{day:02d}_00-00-00" for day in range(1, count + 1)]
    for name in names:
        (directory / name).write_text(name)
    return names


def test_expiring_backups_are_archived(tmp_path):
    archive = tmp_path / "archive"
    names = _backups(tmp_path, 4)
    handler = ArchivingTimedRotatingFileHandler(
        tmp_path / "app.log",
        when="S",
        backupCount=2,
        delay=True,
        hooks=ArchiveHooks(target_directory=str(archive)),
    )
    try:
        expiring = handler.getFilesToDelete()
    finally:
        handler.close()

    assert sorted(Path(p).name for p in expiring) == names[:2]
    assert sorted(p.name for p in archive.iterdir()) == [n + ".gz" for n in names[:2]]
    with gzip.open(archive / (names[0] + ".gz"), "rt") as f:
        assert f.read() == names[0]


def test_default_hooks_change_nothing(tmp_path):
    _backups(tmp_path, 3)
    handler = ArchivingTimedRotatingFileHandler(
        tmp_path / "app.log", when="S", backupCount=1, delay=True
    )
    try:
        expiring = handler.getFilesToDelete()
    finally:
        handler.close()

    assert len(expiring) == 2
    assert not list(tmp_path.glob("*.gz"))


def test_hook_failure_propagates(tmp_path):
    class Broken(FileLifecycleHooks):
        def on_file_deleting(self, path):
            raise PermissionError(path)

    _backups(tmp_path, 3)
    handler = ArchivingTimedRotatingFileHandler(
        tmp_path / "app.log", when="S", backupCount=1, delay=True, hooks=Broken()
    )
    try:
        with pytest.raises(PermissionError):
            handler.getFilesToDelete()
    finally:
        handler.close()


def test_rollover_skips_archives_beside_the_log(tmp_path):
    (tmp_path / "app.log").write_text("current")
    for day in (1, 2, 3):
        (tmp_path / f"app.log.2000-01-0{day}").write_text(f"day {day}")
    # archives from earlier rollovers, written next to the log by default hooks
    for day in (1, 2):
        with gzip.open(tmp_path / f"app.log.2000-01-0{day}.gz", "wt") as f:
            f.write(f"day {day}")

    handler = ArchivingTimedRotatingFileHandler(
        tmp_path / "app.log", when="D", backupCount=2, delay=True, hooks=ArchiveHooks()
    )
    try:
        handler.doRollover()
    finally:
        handler.close()

    names = sorted(p.name for p in tmp_path.iterdir())
    assert not any(n.endswith(".gz.gz") for n in names)

    archives = [n for n in names if n.endswith(".gz")]
    backups = [n for n in names if n.startswith("app.log.") and not n.endswith(".gz")]
    assert archives == ["app.log.2000-01-01.gz", "app.log.2000-01-02.gz"]
    # day 3 plus the file just rolled over
    assert len(backups) == 2
    assert "app.log.2000-01-03" in backups

    with gzip.open(tmp_path / "app.log.2000-01-02.gz", "rt") as f:
        assert f.read() == "day 2"


def test_archives_do_not_count_as_backups(tmp_path):
    for day in (1, 2, 3):
        (tmp_path / f"app.log.2000-01-0{day}").write_text(f"day {day}")
        (tmp_path / f"app.log.2000-01-0{day}.gz").write_bytes(b"")
    handler = ArchivingTimedRotatingFileHandler(
        tmp_path / "app.log", when="D", backupCount=2, delay=True, hooks=ArchiveHooks()
    )
    try:
        expiring = handler.getFilesToDelete()
    finally:
        handler.close()

    assert [Path(p).name for p in expiring] == ["app.log.2000-01-01"]
