"""Tests for the shell around the cleaner — config loading, file I/O, CLI."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest

from trash_cleaner import CleanerConfig, ConfigError, build_config, load_config, load_from_yaml
from trash_cleaner.cli import _build_config, _build_parser, main
from trash_cleaner.files import BackupError, SourceNotFoundError, read_source, write_changes


SOURCE = """export const bangs: Bang[] = [
  { c: "Research", d: "ru.wikipedia.org", r: 9, s: "Russian Wikipedia" },
  { c: "Online Services", d: "yandex.ru", r: 0, s: "Yandex.ru" },
  { c: "Tech", d: "doc.rust-lang.org", r: 67, s: "Rust Documentation" },
];
"""


@pytest.fixture
def bang_file(tmp_path):
    path = tmp_path / "bang.ts"
    path.write_text(SOURCE, encoding="utf-8")
    return path


# ── Config ───────────────────────────────────────────────────────────

def test_load_config_nested():
    cfg = load_config({"trash_cleaner": {"forbidden_patterns": [".de", " x "], "backup": True}})
    assert cfg == {"forbidden_patterns": (".de", "x"), "create_backup": True}


def test_load_config_flat_with_string_patterns():
    cfg = load_config({"forbidden_patterns": ".gov, custom,,", "file": "a.ts", "dry_run": 1})
    assert cfg == {"forbidden_patterns": (".gov", "custom"), "file_path": "a.ts", "dry_run": True}


def test_load_config_rejects_bad_patterns():
    with pytest.raises(ConfigError):
        load_config({"forbidden_patterns": 3})


def test_build_config_layers_over_defaults():
    config = build_config(overrides={"dry_run": True})
    assert config.dry_run
    assert config.forbidden_patterns == CleanerConfig().forbidden_patterns


def test_load_from_yaml(tmp_path):
    path = tmp_path / "cleaner.yaml"
    path.write_text("trash_cleaner:\n  forbidden_patterns:\n    - .de\n  backup: true\n")
    assert load_from_yaml(path) == {"forbidden_patterns": (".de",), "create_backup": True}


def test_load_from_yaml_invalid(tmp_path):
    path = tmp_path / "cleaner.yaml"
    path.write_text("forbidden_patterns: [unclosed\n")
    with pytest.raises(ConfigError):
        load_from_yaml(path)


def test_load_from_yaml_missing(tmp_path):
    with pytest.raises(ConfigError):
        load_from_yaml(tmp_path / "nope.yaml")


# ── Argument parsing ─────────────────────────────────────────────────

def test_flags():
    config = _build_config(_build_parser().parse_args(["--dry-run", "--backup"]))
    assert config.dry_run
    assert config.create_backup


def test_file_and_patterns():
    args = _build_parser().parse_args(["--file=custom/path.ts", "--patterns=.gov,custom"])
    config = _build_config(args)
    assert config.file_path == "custom/path.ts"
    assert config.forbidden_patterns == (".gov", "custom")


def test_cli_overrides_yaml(tmp_path):
    path = tmp_path / "cleaner.yaml"
    path.write_text("forbidden_patterns: [.de]\nfile: from-yaml.ts\ndry_run: true\n")
    config = _build_config(_build_parser().parse_args(["--config", str(path), "--file", "cli.ts"]))
    assert config.file_path == "cli.ts"
    assert config.forbidden_patterns == (".de",)
    assert config.dry_run


# ── Files ────────────────────────────────────────────────────────────

def test_read_source_missing(tmp_path):
    with pytest.raises(SourceNotFoundError):
        read_source(tmp_path / "missing.ts")


def test_read_source_keeps_crlf(tmp_path):
    path = tmp_path / "bang.ts"
    path.write_bytes(b"a\r\nb\r\n")
    assert read_source(path) == "a\r\nb\r\n"


def test_write_changes_with_backup(bang_file):
    backup = write_changes(bang_file, SOURCE, "new", create_backup=True)
    assert backup == bang_file.with_name("bang.ts.backup")
    assert backup.read_text(encoding="utf-8") == SOURCE
    assert bang_file.read_text(encoding="utf-8") == "new"


def test_failed_backup_leaves_target(bang_file):
    bang_file.with_name("bang.ts.backup").mkdir()
    with pytest.raises(BackupError):
        write_changes(bang_file, SOURCE, "new", create_backup=True)
    assert bang_file.read_text(encoding="utf-8") == SOURCE


# ── CLI ──────────────────────────────────────────────────────────────

def test_cli_cleans_file(bang_file, capsys):
    assert main(["--file", str(bang_file)]) == 0
    content = bang_file.read_text(encoding="utf-8")
    assert "ru.wikipedia.org" not in content
    assert "yandex.ru" not in content
    assert "doc.rust-lang.org" in content
    assert not bang_file.with_name("bang.ts.backup").exists()

    out = capsys.readouterr().out
    assert "Successfully removed 2 out of 3 bangs" in out
    assert "Removed 2/3 bangs (66.7%)" in out


def test_cli_backup(bang_file):
    assert main(["--file", str(bang_file), "--backup"]) == 0
    backup = bang_file.with_name("bang.ts.backup").read_text(encoding="utf-8")
    assert "ru.wikipedia.org" in backup
    assert "yandex.ru" in backup


def test_cli_dry_run(bang_file, capsys):
    assert main(["--file", str(bang_file), "--dry-run", "--backup"]) == 0
    assert bang_file.read_text(encoding="utf-8") == SOURCE
    assert not bang_file.with_name("bang.ts.backup").exists()

    out = capsys.readouterr().out
    assert "[DRY RUN]" in out
    assert "Would remove" in out
    assert "out of 3 bangs." in out


def test_cli_nothing_to_remove(tmp_path, capsys):
    path = tmp_path / "bang.ts"
    path.write_text('{ c: "Tech", d: "example.com", s: "Docs" },\n', encoding="utf-8")
    assert main(["--file", str(path), "--backup"]) == 0
    assert path.read_text(encoding="utf-8") == '{ c: "Tech", d: "example.com", s: "Docs" },\n'
    assert not path.with_name("bang.ts.backup").exists()
    assert "No bangs with forbidden patterns found" in capsys.readouterr().out


def test_cli_yaml_patterns(tmp_path):
    path = tmp_path / "bang.ts"
    path.write_text('{ d: "a.com", s: "Alpha" },\n{ d: "b.com", s: "Beta" },\n', encoding="utf-8")
    config = tmp_path / "cleaner.yaml"
    config.write_text("trash_cleaner:\n  forbidden_patterns: [beta]\n  backup: true\n")

    assert main(["--config", str(config), "--file", str(path)]) == 0
    assert path.read_text(encoding="utf-8") == '{ d: "a.com", s: "Alpha" },'
    assert path.with_name("bang.ts.backup").exists()


def test_cli_missing_file(tmp_path, capsys):
    assert main(["--file", str(tmp_path / "missing.ts")]) == 1
    assert "File not found" in capsys.readouterr().out


def test_cli_bad_config(tmp_path, bang_file, capsys):
    config = tmp_path / "cleaner.yaml"
    config.write_text("forbidden_patterns: [unclosed\n")
    assert main(["--config", str(config), "--file", str(bang_file)]) == 1
    assert bang_file.read_text(encoding="utf-8") == SOURCE
    assert "Config error" in capsys.readouterr().out


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
