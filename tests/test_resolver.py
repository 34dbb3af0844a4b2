from datetime import datetime, timezone
from pathlib import Path

from logarchive.archive import (
    ArchiveConfiguration,
    CompressionLevel,
    UtcDateTokenExpander,
    resolve_destination,
)


def _fixed_clock():
    return datetime(2024, 3, 9, 12, 0, tzinfo=timezone.utc)


def test_compressed_name_gets_gz_suffix(tmp_path):
    config = ArchiveConfiguration(compression_level=CompressionLevel.FASTEST)

    dest = resolve_destination(tmp_path / "app_2024-01-01.log", config)

    assert dest.target_file_name == "app_2024-01-01.log.gz"


def test_uncompressed_name_is_unchanged(tmp_path):
    config = ArchiveConfiguration(
        compression_level=CompressionLevel.NO_COMPRESSION,
        target_directory=str(tmp_path / "archive"),
    )

    dest = resolve_destination(tmp_path / "app_2024-01-01.log", config)

    assert dest.target_file_name == "app_2024-01-01.log"
    assert dest.target_path == tmp_path / "archive" / "app_2024-01-01.log"


def test_no_target_uses_source_directory(tmp_path):
    source = tmp_path / "logs" / "app.log"

    dest = resolve_destination(source, ArchiveConfiguration())

    assert dest.target_directory == tmp_path / "logs"


def test_tokenised_target_is_expanded_per_call(tmp_path):
    ticks = iter(
        [
            datetime(2024, 1, 31, tzinfo=timezone.utc),
            datetime(2024, 2, 1, tzinfo=timezone.utc),
        ]
    )
    config = ArchiveConfiguration(
        target_directory=str(tmp_path) + "/{UtcDate:%Y-%m}",
        token_expander=UtcDateTokenExpander(clock=lambda: next(ticks)),
    )

    first = resolve_destination("app.log", config)
    second = resolve_destination("app.log", config)

    assert first.target_directory == tmp_path / "2024-01"
    assert second.target_directory == tmp_path / "2024-02"


def test_resolver_does_not_touch_filesystem(tmp_path):
    config = ArchiveConfiguration(target_directory=str(tmp_path / "missing"))

    resolve_destination(tmp_path / "app.log", config)

    assert not (tmp_path / "missing").exists()


def test_expander_detects_date_tokens():
    expander = UtcDateTokenExpander(clock=_fixed_clock)

    assert expander.is_tokenised("/a/{UtcDate:%Y}/b")
    assert not expander.is_tokenised("/a/b")
    assert not expander.is_tokenised("/a/$HOME/b")


def test_expander_formats_multiple_tokens():
    expander = UtcDateTokenExpander(clock=_fixed_clock)

    assert expander.expand("/a/{UtcDate:%Y}/{UtcDate:%m-%d}") == "/a/2024/03-09"


def test_expander_expands_environment_variables(monkeypatch):
    monkeypatch.setenv("ARCHIVE_ROOT", "/srv/archive")
    expander = UtcDateTokenExpander(clock=_fixed_clock)

    assert expander.expand("$ARCHIVE_ROOT/{UtcDate:%Y}") == "/srv/archive/2024"
    assert Path(expander.expand("${ARCHIVE_ROOT}/fixed")) == Path("/srv/archive/fixed")


def test_date_token_from_environment_variable_is_tokenised(monkeypatch):
    monkeypatch.setenv("ARCHIVE_ROOT", "/srv/archive/{UtcDate:%Y}")
    expander = UtcDateTokenExpander(clock=_fixed_clock)

    assert expander.is_tokenised("$ARCHIVE_ROOT/app")
    assert expander.expand("$ARCHIVE_ROOT/app") == "/srv/archive/2024/app"


def test_limit_rejected_when_environment_variable_brings_a_token(monkeypatch):
    import pytest

    from logarchive.archive import ArchiveConfigError

    monkeypatch.setenv("ARCHIVE_ROOT", "/srv/archive/{UtcDate:%Y}")

    with pytest.raises(ArchiveConfigError, match="tokenised"):
        ArchiveConfiguration(target_directory="$ARCHIVE_ROOT", retained_file_count_limit=3)
