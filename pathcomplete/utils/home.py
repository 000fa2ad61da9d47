"""Home-directory shorthand utilities.

A leading "~/" in user input stands for the home directory. Expansion turns it
into an absolute path before listing; contraction puts it back on results so
suggestions read the way the user typed them.
"""

from pathcomplete.entities.path_query import SEPARATOR

HOME_SHORTHAND = "~" + SEPARATOR


def uses_home_shorthand(text: str) -> bool:
    return text.startswith(HOME_SHORTHAND)


def expand_home_shorthand(text: str, home_directory: str) -> str:
    """Replace a leading "~/" with ``home_directory + "/"``.

    Everything after the shorthand is kept verbatim, trailing separator
    included. Input without the shorthand is returned unchanged.
    """
    if not uses_home_shorthand(text):
        return text
    return home_directory + SEPARATOR + text[len(HOME_SHORTHAND) :]


def contract_home_shorthand(path: str, home_directory: str) -> str:
    """Re-express an absolute path under ``home_directory`` with "~/"."""
    home_prefix = home_directory
    if not home_prefix.endswith(SEPARATOR):
        home_prefix += SEPARATOR
    if path.startswith(home_prefix):
        path = path[len(home_prefix) :]
    return HOME_SHORTHAND + path
