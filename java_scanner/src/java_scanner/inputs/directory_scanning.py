# --- Directory scanning convenience -----------------------------------------
import os
from pathlib import Path

JAVA_SUFFIX = ".java"
EXCLUDED_DIRS = {"target", "build"}  # maven / gradle output


def is_excluded_dir(name: str) -> bool:
    return name in EXCLUDED_DIRS or name.startswith(".")


def find_java_files(root) -> list[Path]:
    """
    Recursively collect all .java files under root, skipping build output and
    hidden directories. A path to a single .java file yields just that file;
    a missing path yields nothing. Unreadable directories are skipped.
    """
    root = Path(root).absolute()
    if root.is_file():
        return [root] if root.name.endswith(JAVA_SUFFIX) else []
    if not root.is_dir():
        return []

    found = []
    for dirpath, dirnames, filenames in os.walk(root):
        # prune in place so os.walk never descends into them
        dirnames[:] = [d for d in dirnames if not is_excluded_dir(d)]
        for fn in filenames:
            if fn.endswith(JAVA_SUFFIX):
                found.append(Path(dirpath) / fn)
    return sorted(found, key=str)
