"""Help pages for the toolkit."""

from __future__ import annotations

from forgecli.terminal import clear_screen, select

_RULE = "-----------------------------------------------------"

TOPIC_CHANGELOG = "Changelog Generator"
TOPIC_README = "README Generator"
TOPIC_CONTRIBUTE = "How to Contribute"
TOPIC_BACK = "Back to main menu"


def _page(*lines: str) -> str:
    return "\n".join(lines) + "\n"


def help_index_text() -> str:
    """Return the overview shown at the top of the help screen."""
    return _page(
        "ForgeCLI - Help",
        _RULE,
        "ForgeCLI is an open-source developer toolkit CLI.",
        "It provides useful commands to automate repetitive tasks,",
        "speed up project setup, and improve workflow efficiency.",
        "",
        "📦 Current features:",
        "• Changelog Generator",
        "• README Generator",
        "",
        "🛠️ Upcoming features:",
        "• .gitignore file generator",
        "• Project templates (Go, Node.js, PHP, and more)",
        "",
        "Use the arrow keys in interactive mode to navigate between help topics.",
        _RULE,
    )


def changelog_help_text() -> str:
    """Return the help page for the changelog generator."""
    return _page(
        "📝 Changelog Generator - Help",
        _RULE,
        "This command generates or updates your CHANGELOG.md file based on your Git commit history.",
        "",
        "🔹 Usage:",
        "  forge-cli changelog",
        "",
        "🔹 How it works:",
        "  - Only commits with prefixes 'feat:' and 'fix:' are categorized as Features and Fixes.",
        "  - Other commits will appear under 'Other commits'.",
        "  - You'll be able to manually select which commits to include in each section.",
        "  - Commits already registered in a previous changelog will be skipped automatically.",
        "  - The latest commit hash is tracked via:",
        "    <!-- last-commit: abc123def456 -->",
        "",
        "✅ Tip:",
        "  Make sure all your changes are committed before running this command.",
    )


def readme_help_text() -> str:
    """Return the help page for the README generator."""
    return _page(
        "📄 README Generator - Help",
        _RULE,
        "This command helps you create a structured README.md for your project.",
        "",
        "🔹 Usage:",
        "  forge-cli readme",
        "",
        "🔹 Options:",
        "  • Generate from template: Answer guided questions to auto-generate a standard README.",
        "  • Generate from scratch: Write your own content using a multi-line editor.",
        "",
        "💡 Notes:",
        "  - When writing from scratch, end the input with ':done' to finish.",
        "  - For license selection, if left blank, it defaults to 'MIT'.",
        "",
        "✅ Tip:",
        "  Keep your README clear and concise. This helps contributors and users understand your project.",
    )


def contribute_help_text() -> str:
    """Return the help page on contributing."""
    return _page(
        "🤝 How to Contribute - Help",
        _RULE,
        "We welcome contributions from the community! To get started:",
        "",
        "🔹 Fork the repository on GitHub",
        "🔹 Clone your fork and create a new branch",
        "🔹 Make your changes and follow the commit message guidelines (use feat:, fix:, refactor:, etc.)",
        "🔹 Test your code locally",
        "🔹 Submit a Pull Request (PR) with a clear description of what was changed and why",
        "",
        "📄 You can also contribute by:",
        "  - Creating issues for bugs or feature suggestions",
        "  - Improving documentation",
        "  - Helping review pull requests",
        "",
        "✅ Tip:",
        "  Always sync your fork with the original repo before starting new changes.",
    )


_TOPICS = {
    TOPIC_CHANGELOG: changelog_help_text,
    TOPIC_README: readme_help_text,
    TOPIC_CONTRIBUTE: contribute_help_text,
}


def show_help() -> None:
    """Show the help index and let the user browse topics until they go back."""
    clear_screen()
    print(help_index_text(), end="")
    while True:
        choice = select(
            "Which topic would you like help with?", [*_TOPICS, TOPIC_BACK]
        )
        page = _TOPICS.get(choice)
        if page is None:
            return
        clear_screen()
        print(page(), end="")
        print()