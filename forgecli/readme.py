"""Generate README files from a guided template or from free-form text."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from forgecli.terminal import ask_text, clear_screen, select

README_NAME = "README.md"
DEFAULT_LICENSE = "MIT"
DONE_MARKER = ":done"

MENU_SCRATCH = "Generate from scratch"
MENU_TEMPLATE = "Generate from template"
MENU_BACK = "Back to main menu"


@dataclass
class ReadmeTemplateData:
    """Answers used to fill the README template."""

    project_name: str = ""
    description: str = ""
    installation: str = ""
    usage: str = ""
    license: str = DEFAULT_LICENSE

    def render(self) -> str:
        """Return the README text for these answers."""
        return (
            f"# {self.project_name}\n"
            "\n"
            f"{self.description}\n"
            "\n"
            "## Installation\n"
            "\n"
            f"{self.installation}\n"
            "\n"
            "## Usage\n"
            "\n"
            f"{self.usage}\n"
            "\n"
            "## License\n"
            "\n"
            f"{self.license}\n"
        )


def _read_until_done() -> str:
    lines: list[str] = []
    while True:
        try:
            line = input("> ")
        except EOFError:
            break
        if line.strip() == DONE_MARKER:
            break
        lines.append(line)
    return "\n".join(lines)


def read_multiline_input(prompt: str) -> str:
    """Read lines until ':done' or end of input and join them."""
    print(f"{prompt} (type '{DONE_MARKER}' to finish):")
    return _read_until_done()


def read_freeform_content(prompt: str) -> str:
    """Read free-form content until ':done' on its own line or end of input."""
    print(prompt)
    print(f"(Type '{DONE_MARKER}' on a new line to finish)")
    return _read_until_done()


def _base(directory: str | Path | None) -> Path:
    return Path(directory) if directory is not None else Path(".")


def generate_readme_from_template(directory: str | Path | None = None) -> Path | None:
    """Ask guided questions and write README.md from the template.

    Returns the path written, or ``None`` if the file could not be written.
    """
    data = ReadmeTemplateData()
    data.project_name = ask_text("What is the project name?", required=True)
    data.description = read_multiline_input("Enter project description")
    data.installation = read_multiline_input("Enter installation instructions")
    data.usage = read_multiline_input("Enter usage examples")
    data.license = ask_text("License type (default MIT):") or DEFAULT_LICENSE

    path = _base(directory) / README_NAME
    try:
        path.write_text(data.render(), encoding="utf-8", newline="")
    except OSError as exc:
        print(f"Error writing to {README_NAME}:", exc)
        return None

    print("✅ README.md generated successfully!")
    return path


def generate_readme_from_scratch(directory: str | Path | None = None) -> Path | None:
    """Write user-typed content to ``<name>.md``, the name defaulting to README."""
    content = read_freeform_content("Write your README content from scratch:")
    file_name = ask_text("file name (default README):", default="README")

    path = _base(directory) / f"{file_name}.md"
    try:
        path.write_text(content, encoding="utf-8", newline="")
    except OSError as exc:
        print(f"Error writing to {file_name}.md:", exc)
        return None

    print(f"{file_name}.md created successfully from scratch!")
    return path


def readme_menu() -> Path | None:
    """Offer the README generation choices in the current directory."""
    clear_screen()
    choice = select(
        "What do you want to do?", [MENU_SCRATCH, MENU_TEMPLATE, MENU_BACK]
    )
    if choice == MENU_SCRATCH:
        return generate_readme_from_scratch()
    if choice == MENU_TEMPLATE:
        return generate_readme_from_template()
    return None