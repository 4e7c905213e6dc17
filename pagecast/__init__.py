"""Pagecast — RSS feeds synthesized from HTML index pages."""

__version__ = "0.1.0"
