"""Pagecast command-line interface."""
