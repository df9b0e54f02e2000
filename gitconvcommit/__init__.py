"""Interactive conventional commit authoring for git repositories."""

__version__ = "0.1.0"
