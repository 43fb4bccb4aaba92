from .junit import write_junit
from .summary import write_summary

__all__ = [
    "write_junit",
    "write_summary",
]
