"""
Re-scan boundary: the directory a caller should associate with the current input.

Callers compare the boundary of consecutive inputs. While it stays the same,
the previous listing can be filtered locally; when it changes, suggestions
must be requested again.
"""

from pathcomplete.entities.path_query import SEPARATOR
from pathcomplete.utils.home import expand_home_shorthand


def extract_dir(text: str, home_directory: str) -> str:
    """
    Return the directory portion of ``text``, ending in "/".

    Args:
        text: Raw input typed so far, possibly starting with "~/"
        home_directory: Absolute path substituted for "~/"

    Returns:
        The expanded input itself when it ends in "/", otherwise everything up
        to and including its last "/"; "" for empty input or input without
        any separator
    """
    if not text:
        return ""

    expanded = expand_home_shorthand(text, home_directory)
    if expanded.endswith(SEPARATOR):
        return expanded

    idx = expanded.rfind(SEPARATOR)
    if idx < 0:
        return ""
    return expanded[: idx + 1]


def needs_rescan(previous: str, current: str, home_directory: str) -> bool:
    """True when ``current`` crosses into a different directory than ``previous``."""
    return extract_dir(previous, home_directory) != extract_dir(current, home_directory)
