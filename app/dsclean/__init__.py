"""dsclean - Move .DS_Store junk files to the system trash."""

__version__ = "0.1.0"
