import json
import logging
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "selector_builder"
LOG_FORMAT = "%(asctime)s] %(name)s %(levelname)s %(message)s"


def get_logger(name: str) -> logging.Logger:
    """
    Return the named logger.

    Records propagate up to the package logger, which carries a single
    NullHandler until enable_console_logging() is called.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not package_logger.handlers:
        package_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)


def enable_console_logging(level: str = "INFO") -> logging.Logger:
    """
    Print package records to stderr with LOG_FORMAT.

    Replaces whatever handlers the package logger had and stops
    propagation, so each record is printed exactly once.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False
    return package_logger


logger = get_logger(__name__)


def load_json_from_project(json_path: str, project_root: Optional[str] = None) -> dict:
    """
    Search for a JSON file inside the project and return it as a dict.

    json_path: filename or relative path (e.g. "selectors.json" or "config/selectors.json")
    project_root: root directory to search from (defaults to cwd)
    """
    root = Path(project_root) if project_root else Path.cwd()

    target = Path(json_path)

    # Case 1: direct relative/absolute path exists
    if target.is_absolute() or (root / target).exists():
        path = target if target.is_absolute() else root / target
    else:
        # Case 2: search by filename inside project
        matches = list(root.rglob(target.name))
        if not matches:
            raise FileNotFoundError(f"JSON file not found in project: {json_path}")
        if len(matches) > 1:
            raise FileExistsError(
                f"Multiple JSON files named '{target.name}' found: {matches}"
            )
        path = matches[0]

    logger.debug(f"Loading JSON from {path}")
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
