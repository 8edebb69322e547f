"""Build the versioned documentation content and data files for the website."""

__version__ = "0.1.0"
