"""Bundled data files for dsclean."""
