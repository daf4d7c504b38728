"""A terminal note-taking application with Markdown, tags and images."""

__version__ = "0.1.0"