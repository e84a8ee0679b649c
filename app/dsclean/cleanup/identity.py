"""Identity check for the files this tool is allowed to remove.

This is the single source of truth for "is this a .DS_Store file". It is
called by the orchestrator while filtering and again by the trash operator
right before removal.
"""

import os

# Exact, case-sensitive name of the Finder metadata file we clean up
TARGET_FILENAME = ".DS_Store"


def is_target_file(path: str | bytes | os.PathLike[str] | os.PathLike[bytes]) -> bool:
    """Check whether the final path component is exactly ``.DS_Store``.

    Names that cannot be decoded as text are never targets, whether they
    arrive as undecodable bytes or as a str carrying surrogate escapes.

    Args:
        path: Path to check. Only its final component is inspected.

    Returns:
        True if the final component equals TARGET_FILENAME, False otherwise.
    """
    raw = os.fspath(path)

    if isinstance(raw, bytes):
        try:
            name = os.path.basename(raw).decode("utf-8")
        except UnicodeDecodeError:
            return False
    else:
        name = os.path.basename(raw)
        try:
            name.encode("utf-8")
        except UnicodeEncodeError:
            return False

    return name == TARGET_FILENAME
