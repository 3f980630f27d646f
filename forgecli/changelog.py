"""Generate or extend CHANGELOG.md from the git commit history."""

from __future__ import annotations

import datetime
import re
import subprocess
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from forgecli.terminal import ask_text, clear_screen, multi_select

CHANGELOG_NAME = "CHANGELOG.md"

CHANGELOG_HEADER = """# Changelog

All notable changes to this project will be documented in this file.

The format is based on Keep a Changelog (1.0.0),
and this project adheres to Semantic Versioning (2.0.0).
"""

VERSION_MARKER = "### Version"

FEAT_PATTERN = re.compile(r"^feat(\(.+\))?:")
FIX_PATTERN = re.compile(r"^fix(\(.+\))?:")


class GitLogError(RuntimeError):
    """Raised when ``git log`` cannot be run or fails."""


@dataclass
class CommitGroups:
    """Commit messages sorted into sections, plus the newest commit hash."""

    features: list[str] = field(default_factory=list)
    fixes: list[str] = field(default_factory=list)
    others: list[str] = field(default_factory=list)
    latest_hash: str = ""


@dataclass
class ChangelogEntry:
    """One version section of the changelog."""

    version: str
    date: str
    features: list[str] = field(default_factory=list)
    fixes: list[str] = field(default_factory=list)
    others: list[str] = field(default_factory=list)
    latest_hash: str = ""

    def render(self) -> str:
        """Return the Markdown text of this entry."""
        parts = [f"{VERSION_MARKER} {self.version} - {self.date}\n\n"]
        for title, items in (
            ("Features", self.features),
            ("Fixes", self.fixes),
            ("Other commits", self.others),
        ):
            if items:
                parts.append(f"### {title}\n")
                parts.extend(f"- {item}\n" for item in items)
                parts.append("\n")
        if self.latest_hash:
            parts.append(f"<!-- last-commit: {self.latest_hash} -->\n")
        return "".join(parts)


def last_commit_from_changelog(path: str | Path = CHANGELOG_NAME) -> str:
    """Return the tracked last commit found before the first version heading."""
    try:
        text = Path(path).read_text(encoding="utf-8", errors="surrogateescape")
    except OSError:
        return ""
    for line in text.splitlines():
        if "last-commit:" in line:
            pieces = line.split(":")
            if len(pieces) == 2:
                return pieces[1].strip()
        if line.startswith(VERSION_MARKER):
            break
    return ""


def git_log_since(last_commit: str = "", cwd: str | Path | None = None) -> list[str]:
    """Return ``hash|subject`` lines of commits after ``last_commit`` (or all)."""
    command = ["git", "log"]
    if last_commit:
        command.append(f"{last_commit}..HEAD")
    command.append("--pretty=format:%H|%s")
    try:
        result = subprocess.run(
            command,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as exc:
        raise GitLogError(str(exc)) from exc
    return result.stdout.split("\n")


def classify_commits(lines: Iterable[str]) -> CommitGroups:
    """Sort ``hash|subject`` lines into features, fixes and other commits."""
    groups = CommitGroups()
    for index, line in enumerate(lines):
        pieces = line.split("|", 1)
        if len(pieces) != 2:
            continue
        commit_hash, message = (piece.strip() for piece in pieces)
        if index == 0:
            groups.latest_hash = commit_hash
        if FEAT_PATTERN.match(message):
            groups.features.append(message)
        elif FIX_PATTERN.match(message):
            groups.fixes.append(message)
        else:
            groups.others.append(message)
    return groups


def merge_changelog(existing: str, entry_text: str) -> str:
    """Insert a new entry before the first version section of ``existing``."""
    if not existing:
        return f"{CHANGELOG_HEADER}\n{entry_text}"
    head, marker, rest = existing.partition(VERSION_MARKER)
    if not marker:
        return head + entry_text
    return f"{head}{entry_text}\n{VERSION_MARKER}{rest}"


def generate_changelog(directory: str | Path | None = None) -> Path | None:
    """Interactively build a changelog entry and write it to CHANGELOG.md.

    Returns the path written, or ``None`` when the work was abandoned.
    """
    base = Path(directory) if directory is not None else Path(".")
    changelog_path = base / CHANGELOG_NAME

    version = ask_text(
        "Enter the version for this changelog (e.g., 1.0.0):", required=True
    )
    date = ask_text(
        "Enter the date for this changelog:",
        default=datetime.date.today().strftime("%Y-%m-%d"),
    )

    clear_screen()
    last_commit = last_commit_from_changelog(changelog_path)
    try:
        lines = git_log_since(last_commit, cwd=base)
    except GitLogError as exc:
        print("❌ Error getting git log:", exc)
        return None

    groups = classify_commits(lines)
    entry = ChangelogEntry(
        version=version,
        date=date,
        features=multi_select(
            "Select features to include:", groups.features, groups.features
        ),
        fixes=multi_select("Select fixes to include:", groups.fixes, groups.fixes),
        others=multi_select(
            "Select other commits to include:", groups.others, groups.others
        ),
        latest_hash=groups.latest_hash,
    )

    try:
        existing = changelog_path.read_bytes().decode("utf-8", "surrogateescape")
    except OSError:
        existing = ""
    content = merge_changelog(existing, entry.render())

    try:
        changelog_path.write_text(
            content, encoding="utf-8", errors="surrogateescape", newline=""
        )
    except OSError as exc:
        print("❌ Error writing changelog:", exc)
        return None

    print("✅ CHANGELOG.md generated successfully!")
    return changelog_path