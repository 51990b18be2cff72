"""
Utility functions for the searchbox package.
"""

import os


def get_project_root() -> str:
    """
    Get the project root directory (parent of src/searchbox).

    Returns:
        Absolute path to the project root directory
    """
    return os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def env_flag(value: str | None, default: bool = False) -> bool:
    """Interpret an environment variable as a boolean flag."""
    if value is None or not value.strip():
        return default
    return value.strip().lower() == "true"
