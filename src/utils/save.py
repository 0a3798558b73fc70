"""
Save stub: appends raw bytes to a named file.
"""

from pathlib import Path

from .logger import get_logger

logger = get_logger(__name__)


def append_save(path: str, data: bytes) -> int:
    """
    Append raw bytes to a save file, creating it (and parent dirs) if needed.

    Returns:
        Number of bytes written
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    with open(target, 'ab') as f:
        written = f.write(data)
    logger.info(f"Appended {written} bytes to {target}")
    return written
