"""Status lines, rust-project.json generation and worked exercise solutions."""

__version__ = "5.6.1"