"""Staged file replacement for export outputs.

Each output is first written in full to a ``.part`` file beside its target
and only then renamed into place, so a reader never sees a half-written file.
"""

from pathlib import Path


def part_path_for(path: Path) -> Path:
    """Return the staging path used for ``path``."""
    return path.with_suffix(path.suffix + ".part")


def write_part(path: Path, text: str) -> Path:
    """Write ``text`` to the staging file for ``path`` without touching ``path``.

    Returns:
        The staging file path.

    Raises:
        OSError: If the directory cannot be created or the file written.  No
            staging file is left behind in that case.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    part_path = part_path_for(path)
    try:
        with part_path.open("w", newline="", encoding="utf-8") as f:
            f.write(text)
    except OSError:
        part_path.unlink(missing_ok=True)
        raise
    return part_path


def discard_part(path: Path) -> None:
    """Remove the staging file for ``path`` if one exists."""
    part_path_for(path).unlink(missing_ok=True)


def atomic_write_text(path: Path, text: str) -> None:
    """Write ``text`` to ``path`` via its staging file.

    Raises:
        OSError: If the file cannot be written or renamed into place.
    """
    part_path = write_part(path, text)
    try:
        part_path.replace(path)
    except OSError:
        part_path.unlink(missing_ok=True)
        raise
