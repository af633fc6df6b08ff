"""Plugins bundled with keyscript, loadable by their short name."""
