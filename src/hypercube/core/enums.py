# hypercube/core/enums.py

from enum import Enum

class OutputFormat(str, Enum):
    PLAIN = "plain"
    JSON = "json"

__all__ = [
    "OutputFormat",
]
