"""Utility modules for ddldoc.

Provides:
- text: encode_entities, heading_anchor for Markdown output
- logger: get_logger for logging
"""

from ddldoc.utils.logger import get_logger
from ddldoc.utils.text import encode_entities, heading_anchor

__all__ = [
    "encode_entities",
    "get_logger",
    "heading_anchor",
]
