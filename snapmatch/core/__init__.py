"""Comparison engine: normalization, masking, format handlers and matching.

See: snapmatch.core.normalize for the pure tree normalization API
"""

from .mask import EXCLUDED_TOKEN, coerce_patterns, mask_text, merge_patterns
from .normalize import DYNAMIC_TOKEN, canonical_json, normalize, tree_equal
from .options import ComparisonOptions, SnapshotFormat, parse_format, resolve_options
from .handlers import FormatHandler, StructuredHandler, TextHandler, handler_for

__all__ = [
    # Text masking
    "EXCLUDED_TOKEN",
    "coerce_patterns",
    "mask_text",
    "merge_patterns",
    # Tree normalization
    "DYNAMIC_TOKEN",
    "canonical_json",
    "normalize",
    "tree_equal",
    # Options
    "ComparisonOptions",
    "SnapshotFormat",
    "parse_format",
    "resolve_options",
    # Handlers
    "FormatHandler",
    "StructuredHandler",
    "TextHandler",
    "handler_for",
]
