import re
import logging
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)

EXAMPLE_FILE_PATTERN = re.compile(r"Example\d+\.java")


def find_example_files(directory) -> List[Path]:
    """Return every Example<N>.java file below ``directory``, sorted by path."""
    root = Path(directory)
    if not root.is_dir():
        logger.warning(f"Example directory does not exist: {root}")
        return []

    example_files = sorted(
        path for path in root.rglob("*")
        if path.is_file() and EXAMPLE_FILE_PATTERN.fullmatch(path.name)
    )
    logger.debug(f"Found {len(example_files)} Example#.java files in {root}")
    return example_files
