# forgecli

A small developer toolkit for the terminal. It bundles interactive helpers
for routine project chores:

- **Changelog generator**: builds or updates `CHANGELOG.md` from your git
  commit history.
- **README generator**: writes a `README.md` from guided questions or from
  free-form text.

## Installation

```
pip install .
```

Python 3.10 or later is required. The changelog generator runs `git log`, so
`git` must be on your `PATH`.

## Usage

Start the interactive menu:

```
forge-cli
```

Or go straight to a single tool:

```
forge-cli changelog
forge-cli readme
forge-cli help
```

All files are read from and written to the current directory.

### Answering prompts

- **Menus** list numbered options. Type a number, or the option's exact
  text. Pressing Enter picks the first option.
- **Multiple choice** lists numbered options with `[x]` next to the ones that
  are marked. Type numbers separated by commas or spaces to pick those, press
  Enter to keep the marked ones, or type `-` to pick none.
- **Text questions** show their default in parentheses; pressing Enter
  accepts it. A required question is asked again until you answer it.

If the input closes before a prompt is answered, or you press Ctrl+C, the
command prints `Error:` with the reason and exits with status 1.

### Changelog

`forge-cli changelog` asks for a version (required) and a date (today, in
`YYYY-MM-DD` form, by default). It then runs `git log` and sorts the commit
subjects into groups:

- subjects that start with `feat:` or `feat(scope):` go under **Features**
- subjects that start with `fix:` or `fix(scope):` go under **Fixes**
- all other subjects go under **Other commits**

Every commit starts out marked; you choose which to keep in each group. Empty
groups are left out of the new section. The hash of the newest commit is
written at the end of the section in a comment:

```
<!-- last-commit: abc123def456 -->
```

Before listing commits, the tool looks in an existing `CHANGELOG.md` for a
line containing `last-commit:` that comes before the first `### Version`
heading. If it finds one, only commits after that hash are listed; otherwise
the whole history is listed.

Where the new section goes:

- If `CHANGELOG.md` is missing or empty, it is created with a standard
  header followed by the new section.
- If it has a `### Version` heading, the new section is inserted just before
  the first one.
- Otherwise the new section is added at the end.

If `git log` fails (for example, outside a git repository), an error is
printed and nothing is written.

### README

`forge-cli readme` offers three choices:

- **Generate from template**: asks for the project name (required), a
  description, installation steps and usage, then the licence, and writes
  `README.md` with *Installation*, *Usage* and *License* sections. An empty
  licence becomes `MIT`.
- **Generate from scratch**: lets you type the content yourself, then asks
  for a file name (`README` by default; `.md` is added for you). The text is
  written exactly as typed.
- **Back to main menu**: does nothing.

When typing text over several lines, put `:done` on a line of its own to
finish (the end of input also finishes).

### Help

`forge-cli help` shows an overview and lets you open help pages on the
changelog generator, the README generator and contributing, until you choose
**Back to main menu**.

## What it does not do

The help overview mentions a `.gitignore` generator and project templates as
upcoming features; neither exists in this package. Menus are answered by
typing, not with arrow keys.

## Using it from Python

The parts of the tools that do not ask questions can be used on their own:

```python
from forgecli.changelog import ChangelogEntry, classify_commits, merge_changelog

groups = classify_commits(["abc123|feat: add login", "def456|fix: typo"])
entry = ChangelogEntry(
    version="1.0.0",
    date="2024-01-01",
    features=groups.features,
    fixes=groups.fixes,
    others=groups.others,
    latest_hash=groups.latest_hash,
)
print(merge_changelog("", entry.render()))
```

`forgecli.changelog` also provides `git_log_since(last_commit, cwd)`, which
returns `hash|subject` lines and raises `GitLogError` if `git log` fails, and
`last_commit_from_changelog(path)`.

```python
from forgecli.readme import ReadmeTemplateData

data = ReadmeTemplateData(
    project_name="demo",
    description="A demo project.",
    installation="pip install demo",
    usage="demo --help",
    license="MIT",
)
print(data.render())
```

The help pages are available as text from `forgecli.help`:
`help_index_text()`, `changelog_help_text()`, `readme_help_text()` and
`contribute_help_text()`.

The command can also be run from Python with `forgecli.cli.main(argv)`,
which returns the exit status.