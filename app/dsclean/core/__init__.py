"""Core configuration, paths, and theming for dsclean."""
