"""
Path query entity: the directory to list and the name prefix to filter by.
"""

from dataclasses import dataclass

SEPARATOR = "/"
ROOT = SEPARATOR
LOCAL_DIRECTORY = "."


@dataclass(frozen=True)
class PathQuery:
    """Directory / prefix pair decomposed from an expanded path."""

    directory: str
    prefix: str = ""

    @classmethod
    def from_expanded(cls, expanded: str) -> "PathQuery":
        """
        Split an expanded (shorthand-free) path into directory and prefix.

        A trailing separator means "list this directory"; otherwise the last
        segment is the prefix. The directory is never empty: it falls back to
        the root, or to "." when the path has no separator at all.

        Args:
            expanded: Path with any home shorthand already substituted

        Returns:
            PathQuery for exactly one listing call
        """
        if expanded.endswith(SEPARATOR):
            directory = expanded[: -len(SEPARATOR)]
            return cls(directory=directory or ROOT, prefix="")

        idx = expanded.rfind(SEPARATOR)
        if idx < 0:
            return cls(directory=LOCAL_DIRECTORY, prefix=expanded)
        return cls(directory=expanded[:idx] or ROOT, prefix=expanded[idx + 1 :])

    def directory_with_separator(self) -> str:
        """Directory normalized to end with exactly one separator."""
        if self.directory.endswith(SEPARATOR):
            return self.directory
        return self.directory + SEPARATOR

    def matches(self, name: str) -> bool:
        """Case-sensitive prefix match; an empty prefix matches everything."""
        return not self.prefix or name.startswith(self.prefix)


def split_dir_prefix(expanded: str) -> PathQuery:
    """Decompose an expanded path; see ``PathQuery.from_expanded``."""
    return PathQuery.from_expanded(expanded)
