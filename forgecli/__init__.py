"""Interactive developer toolkit that generates changelogs from git history and READMEs."""

__version__ = "0.1.0"
__all__ = ["__version__"]