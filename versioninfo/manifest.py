"""
Locate and load the project manifest (package.json).
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from .domain import Manifest
from .exit_codes import ManifestError

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "package.json"


def find_manifest(start: Optional[Union[str, Path]] = None,
                  filename: str = MANIFEST_FILENAME) -> Path:
    """
    Search up the folder hierarchy for the first manifest file.

    If the filesystem root is reached without finding one, the path at
    the root is returned anyway so the caller reports it as missing.

    Args:
        start: Directory to start from (default: current directory)
        filename: Manifest file name

    Returns:
        Path of the manifest file
    """
    folder = Path(start if start is not None else '.').resolve()
    while not (folder / filename).exists():
        parent = folder.parent
        if parent == folder:
            break
        folder = parent
    return folder / filename


def load_manifest(start: Optional[Union[str, Path]] = None,
                  filename: str = MANIFEST_FILENAME) -> Manifest:
    """
    Load information about this project from its package.json.

    Raises:
        ManifestError: If no manifest is found or it is not a JSON object
    """
    path = find_manifest(start, filename)
    logger.debug(f"Loading manifest from {path}")
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ManifestError(f"No {filename} found in {Path(start or '.').resolve()} or any parent directory") from e
    except OSError as e:
        raise ManifestError(f"Could not read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ManifestError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ManifestError(f"{path} must contain a JSON object")

    return Manifest(path=path, data=data)
