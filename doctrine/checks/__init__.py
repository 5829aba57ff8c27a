"""Documentation checks over a loaded corpus."""

from .catalog import check_catalog
from .documents import check_titles, check_unreadable
from .extends import check_extends
from .footnotes import check_footnotes
from .links import check_links
from .runner import DEFAULT_CHECKS, run_checks

__all__ = [
    "DEFAULT_CHECKS",
    "check_catalog",
    "check_extends",
    "check_footnotes",
    "check_links",
    "check_titles",
    "check_unreadable",
    "run_checks",
]
