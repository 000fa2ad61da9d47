"""pathcomplete package: directory-path suggestions for interactive path input.

The two entry points most callers need are re-exported here.
"""

from pathcomplete.use_cases.suggestions.list_suggestions import list_suggestions
from pathcomplete.use_cases.suggestions.rescan_boundary import extract_dir

__all__: list[str] = ["extract_dir", "list_suggestions"]
