"""Filter VS Code problem exports by include and exclude terms."""

__version__ = "0.1.0"
