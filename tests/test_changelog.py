import subprocess
from unittest import mock

import pytest

from forgecli.changelog import (
    CHANGELOG_HEADER,
    ChangelogEntry,
    CommitGroups,
    GitLogError,
    classify_commits,
    generate_changelog,
    git_log_since,
    last_commit_from_changelog,
    merge_changelog,
)


def feed(monkeypatch, answers):
    replies = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(replies)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


def fake_runner(git_output):
    calls = []

    def run(cmd, **kwargs):
        calls.append(cmd)
        if cmd[0] == "git":
            return subprocess.CompletedProcess(cmd, 0, stdout=git_output)
        return subprocess.CompletedProcess(cmd, 0)

    return run, calls


def test_render_full_entry():
    entry = ChangelogEntry(
        version="1.0.0",
        date="2024-01-01",
        features=["feat: a"],
        fixes=["fix: b"],
        others=["docs: c"],
        latest_hash="abc123def456",
    )
    assert entry.render() == (
        "### Version 1.0.0 - 2024-01-01\n\n"
        "### Features\n- feat: a\n\n"
        "### Fixes\n- fix: b\n\n"
        "### Other commits\n- docs: c\n\n"
        "<!-- last-commit: abc123def456 -->\n"
    )


def test_render_without_sections():
    entry = ChangelogEntry(version="2.0.0", date="2024-02-02")
    assert entry.render() == "### Version 2.0.0 - 2024-02-02\n\n"


def test_last_commit_missing_file(tmp_path):
    assert last_commit_from_changelog(tmp_path / "CHANGELOG.md") == ""


def test_last_commit_before_version(tmp_path):
    path = tmp_path / "CHANGELOG.md"
    path.write_text("# Changelog\nlast-commit: abc123\n### Version 1\n")
    assert last_commit_from_changelog(path) == "abc123"


def test_last_commit_after_version_is_ignored(tmp_path):
    path = tmp_path / "CHANGELOG.md"
    path.write_text("# Changelog\n### Version 1\nlast-commit: abc123\n")
    assert last_commit_from_changelog(path) == ""


def test_last_commit_line_with_extra_colons_is_skipped(tmp_path):
    path = tmp_path / "CHANGELOG.md"
    path.write_text("note: last-commit: x\nlast-commit: good\n")
    assert last_commit_from_changelog(path) == "good"


def test_classify_commits():
    groups = classify_commits(
        ["h1|feat: add x", "h2|fix(core): bug", "h3|chore: y", "garbage"]
    )
    assert groups == CommitGroups(
        features=["feat: add x"],
        fixes=["fix(core): bug"],
        others=["chore: y"],
        latest_hash="h1",
    )


def test_classify_commits_pattern_edges():
    groups = classify_commits(["h1|feature: x", "h2|feat(): y", "h3|feat(ui): z"])
    assert groups.features == ["feat(ui): z"]
    assert groups.others == ["feature: x", "feat(): y"]


def test_classify_latest_hash_only_from_first_line():
    groups = classify_commits(["", "h2|feat: a"])
    assert groups.latest_hash == ""
    assert groups.features == ["feat: a"]


def test_classify_empty_output():
    assert classify_commits([""]) == CommitGroups()


def test_merge_into_empty_adds_header():
    entry = "### Version 1.0.0 - d\n\n"
    assert merge_changelog("", entry) == CHANGELOG_HEADER + "\n" + entry


def test_merge_without_existing_version_appends():
    assert merge_changelog("# Title\n", "ENTRY\n") == "# Title\nENTRY\n"


def test_merge_inserts_before_first_version():
    existing = "# Changelog\n\n### Version 0.1.0 - d\n- old\n"
    merged = merge_changelog(existing, "### Version 0.2.0 - e\n\n")
    assert merged == (
        "# Changelog\n\n### Version 0.2.0 - e\n\n\n### Version 0.1.0 - d\n- old\n"
    )


def test_git_log_since_with_commit():
    run, calls = fake_runner("h1|feat: a\nh2|fix: b")
    with mock.patch("subprocess.run", side_effect=run):
        lines = git_log_since("abc")
    assert calls[0] == ["git", "log", "abc..HEAD", "--pretty=format:%H|%s"]
    assert lines == ["h1|feat: a", "h2|fix: b"]


def test_git_log_since_without_commit():
    run, calls = fake_runner("")
    with mock.patch("subprocess.run", side_effect=run):
        lines = git_log_since("")
    assert calls[0] == ["git", "log", "--pretty=format:%H|%s"]
    assert lines == [""]


def test_git_log_failure_raises():
    error = subprocess.CalledProcessError(128, ["git", "log"])
    with mock.patch("subprocess.run", side_effect=error):
        with pytest.raises(GitLogError):
            git_log_since("")


def test_generate_changelog_creates_file(tmp_path, monkeypatch):
    feed(monkeypatch, ["1.0.0", "2024-05-01", "", "", ""])
    run, _ = fake_runner("h1|feat: add\nh2|fix: bug\nh3|docs: x")
    with mock.patch("subprocess.run", side_effect=run):
        path = generate_changelog(tmp_path)
    expected_entry = ChangelogEntry(
        "1.0.0", "2024-05-01", ["feat: add"], ["fix: bug"], ["docs: x"], "h1"
    ).render()
    assert path == tmp_path / "CHANGELOG.md"
    assert path.read_text() == CHANGELOG_HEADER + "\n" + expected_entry


def test_generate_changelog_prepends_new_version(tmp_path, monkeypatch):
    feed(monkeypatch, ["1.0.0", "2024-05-01", "", "", ""])
    run, _ = fake_runner("h1|feat: add")
    with mock.patch("subprocess.run", side_effect=run):
        generate_changelog(tmp_path)
    feed(monkeypatch, ["1.1.0", "2024-06-01", ""])
    run, _ = fake_runner("h4|feat: more")
    with mock.patch("subprocess.run", side_effect=run):
        generate_changelog(tmp_path)
    content = (tmp_path / "CHANGELOG.md").read_text()
    assert content.index("Version 1.1.0") < content.index("Version 1.0.0")
    assert content.count("# Changelog") == 1
    assert "<!-- last-commit: h4 -->" in content


def test_generate_changelog_deselect_all(tmp_path, monkeypatch):
    feed(monkeypatch, ["", "3.0.0", "2024-07-07", "-"])
    run, _ = fake_runner("h9|feat: skip me")
    with mock.patch("subprocess.run", side_effect=run):
        path = generate_changelog(tmp_path)
    content = path.read_text()
    assert "feat: skip me" not in content
    assert "### Version 3.0.0 - 2024-07-07" in content


def test_generate_changelog_git_error(tmp_path, monkeypatch, capsys):
    feed(monkeypatch, ["1.0.0", ""])

    def run(cmd, **kwargs):
        if cmd[0] == "git":
            raise subprocess.CalledProcessError(128, cmd)
        return subprocess.CompletedProcess(cmd, 0)

    with mock.patch("subprocess.run", side_effect=run):
        result = generate_changelog(tmp_path)
    assert result is None
    assert not (tmp_path / "CHANGELOG.md").exists()
    assert "Error getting git log" in capsys.readouterr().out