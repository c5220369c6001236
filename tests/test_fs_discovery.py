import os
from pathlib import Path

import pytest

from desklaunch.entry_source import EntrySource
from desklaunch.fs_discovery import find_all, program_from_source, scan
from desklaunch.models import Action

FIREFOX = """
[Desktop Entry]
Name=Firefox
Comment=Browse the Web
Exec=firefox %u
Icon=firefox
Version=1.0
Categories=GNOME;GTK;Network;WebBrowser;
Actions=new-window;private;

[Desktop Action new-window]
Name=New Window
Exec=firefox --new-window %u

[Desktop Action private]
Exec=firefox --private-window %u
"""


def names(results):
    return sorted(r.name for r in results)


def test_entry_fields_are_extracted(tmp_path: Path, write_entry) -> None:
    write_entry(tmp_path, "firefox.desktop", FIREFOX)

    [program] = find_all([tmp_path])
    assert program.name == "Firefox"
    assert program.description == "Browse the Web"
    assert program.exec == "firefox "
    assert program.icon == "firefox"
    assert program.version == "1.0"
    assert program.category == "WEB BROWSER"
    assert program.source == str(tmp_path / "firefox.desktop")
    assert program.actions == (
        Action(name="New Window", exec="firefox --new-window "),
        Action(name="Unnamed Action", exec="firefox --private-window "),
    )


def test_defaults_for_optional_keys(tmp_path: Path, write_entry) -> None:
    write_entry(tmp_path, "bare.desktop", "[Desktop Entry]\nExec=bare")

    [program] = find_all([tmp_path])
    assert program.name == "Unnamed Application"
    assert program.description == ""
    assert program.category == "APPLICATION"
    assert program.icon is None
    assert program.version is None
    assert program.actions is None


def test_no_display_entry_is_skipped(tmp_path: Path, write_entry) -> None:
    write_entry(tmp_path, "hidden.desktop", "[Desktop Entry]\nName=Helper\nExec=helper\nNoDisplay=true")
    write_entry(tmp_path, "normal.desktop", "[Desktop Entry]\nName=Editor\nExec=editor")

    assert names(find_all([tmp_path])) == ["Editor"]


def test_hidden_entry_is_skipped(tmp_path: Path, write_entry) -> None:
    write_entry(tmp_path, "gone.desktop", "[Desktop Entry]\nName=Gone\nExec=gone\nHidden=true")
    write_entry(tmp_path, "shown.desktop", "[Desktop Entry]\nName=Shown\nExec=shown\nHidden=false\nNoDisplay=false")

    assert names(find_all([tmp_path])) == ["Shown"]


def test_entry_without_exec_is_skipped(tmp_path: Path, write_entry) -> None:
    write_entry(tmp_path, "noexec.desktop", "[Desktop Entry]\nName=Link only\nURL=https://example.org")
    write_entry(tmp_path, "blank.desktop", "[Desktop Entry]\nName=Only placeholders\nExec=%U")

    report = scan([tmp_path])
    assert report.results == []
    assert report.errors == []


def test_action_without_exec_is_reported(tmp_path: Path, write_entry) -> None:
    broken = write_entry(tmp_path, "broken.desktop", """
        [Desktop Entry]
        Name=Broken
        Exec=broken
        Actions=open;edit

        [Desktop Action open]
        Name=Open

        [Desktop Action edit]
        Name=Edit
        Exec=broken --edit
    """)
    write_entry(tmp_path, "ok.desktop", "[Desktop Entry]\nName=Fine\nExec=fine")

    report = scan([tmp_path])
    assert names(report.results) == ["Fine"]
    assert len(report.errors) == 1
    assert report.errors[0].path == str(broken)
    assert "open" in report.errors[0].message


def test_action_without_section_is_reported(tmp_path: Path, write_entry) -> None:
    write_entry(tmp_path, "ghost.desktop", "[Desktop Entry]\nName=Ghost\nExec=ghost\nActions=missing;")

    report = scan([tmp_path])
    assert report.results == []
    assert [e.path for e in report.errors] == [str(tmp_path / "ghost.desktop")]


def test_empty_action_tokens_mean_no_actions(tmp_path: Path, write_entry) -> None:
    write_entry(tmp_path, "app.desktop", "[Desktop Entry]\nName=App\nExec=app\nActions=;;")

    [program] = find_all([tmp_path])
    assert program.actions is None


def test_nested_directories_are_walked(tmp_path: Path, write_entry) -> None:
    write_entry(tmp_path, "top.desktop", "[Desktop Entry]\nName=Top\nExec=top")
    write_entry(tmp_path / "a", "one.desktop", "[Desktop Entry]\nName=One\nExec=one")
    write_entry(tmp_path / "a" / "b", "two.desktop", "[Desktop Entry]\nName=Two\nExec=two")
    write_entry(tmp_path / "a" / "b" / "c", "three.desktop", "[Desktop Entry]\nName=Three\nExec=three")

    assert names(find_all([tmp_path])) == ["One", "Three", "Top", "Two"]


def test_multiple_roots_and_missing_root(tmp_path: Path, write_entry) -> None:
    write_entry(tmp_path / "user", "mine.desktop", "[Desktop Entry]\nName=Mine\nExec=mine")
    write_entry(tmp_path / "system", "theirs.desktop", "[Desktop Entry]\nName=Theirs\nExec=theirs")

    roots = [tmp_path / "user", tmp_path / "does-not-exist", tmp_path / "system"]
    assert names(find_all(roots)) == ["Mine", "Theirs"]


def test_overlapping_roots_are_not_duplicated(tmp_path: Path, write_entry) -> None:
    write_entry(tmp_path / "apps", "one.desktop", "[Desktop Entry]\nName=One\nExec=one")

    assert names(find_all([tmp_path, tmp_path / "apps", tmp_path])) == ["One"]


def test_other_files_are_ignored(tmp_path: Path, write_entry) -> None:
    write_entry(tmp_path, "notes.txt", "[Desktop Entry]\nName=Notes\nExec=notes")
    write_entry(tmp_path, "app.desktop.bak", "[Desktop Entry]\nName=Backup\nExec=backup")
    write_entry(tmp_path, "real.desktop", "[Desktop Entry]\nName=Real\nExec=real")

    assert names(find_all([tmp_path])) == ["Real"]


def test_malformed_file_is_skipped(tmp_path: Path, write_entry) -> None:
    write_entry(tmp_path, "garbage.desktop", "this is not an entry file")
    (tmp_path / "binary.desktop").write_bytes(b"\xff\xfe\x00garbage")
    write_entry(tmp_path, "good.desktop", "[Desktop Entry]\nName=Good\nExec=good")

    report = scan([tmp_path])
    assert names(report.results) == ["Good"]
    assert sorted(Path(e.path).name for e in report.errors) == ["binary.desktop", "garbage.desktop"]


def test_unlistable_directory_is_skipped(tmp_path: Path, write_entry, monkeypatch: pytest.MonkeyPatch) -> None:
    locked = tmp_path / "locked"
    write_entry(locked, "secret.desktop", "[Desktop Entry]\nName=Secret\nExec=secret")
    write_entry(tmp_path / "open", "public.desktop", "[Desktop Entry]\nName=Public\nExec=public")

    real_iterdir = Path.iterdir

    def iterdir(self):
        if self == locked:
            raise PermissionError(13, "Permission denied", str(self))
        return real_iterdir(self)

    monkeypatch.setattr(Path, "iterdir", iterdir)
    assert names(find_all([tmp_path])) == ["Public"]


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="needs symlinks")
def test_symlink_loop_terminates(tmp_path: Path, write_entry) -> None:
    apps = tmp_path / "apps"
    write_entry(apps, "one.desktop", "[Desktop Entry]\nName=One\nExec=one")
    os.symlink(apps, apps / "loop")

    assert names(find_all([apps])) == ["One"]


def test_flags_must_be_exactly_false_to_show() -> None:
    src = EntrySource.from_string("[Desktop Entry]\nName=Shown\nExec=shown\nNoDisplay=false\nHidden=false")
    assert program_from_source(src).name == "Shown"

    for value in ("False", "FALSE", "0", "true"):
        src = EntrySource.from_string(f"[Desktop Entry]\nName=Caps\nExec=caps\nNoDisplay={value}")
        assert program_from_source(src) is None


BROKEN_ACTION = """
    [Desktop Entry]
    Name={name}
    {extra}
    Actions=open;

    [Desktop Action open]
    Name=Open
"""


def test_broken_action_is_reported_even_when_entry_is_filtered(tmp_path: Path, write_entry) -> None:
    hidden = write_entry(tmp_path, "hidden.desktop", BROKEN_ACTION.format(name="Hidden", extra="Exec=hidden\n    NoDisplay=true"))
    noexec = write_entry(tmp_path, "noexec.desktop", BROKEN_ACTION.format(name="No Exec", extra="Comment=nothing to run"))

    report = scan([tmp_path])
    assert report.results == []
    assert sorted(e.path for e in report.errors) == sorted([str(hidden), str(noexec)])
