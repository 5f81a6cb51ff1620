"""
Core Package.

This package provides the data model, constants and file helpers for el2md.
"""

from el2md.core.models import (
    Block,
    ConversionConfig,
    InlineSpan,
    Metadata,
    OutputToken,
    SourceDocument,
)
from el2md.core.utils import ensure_dir_exists, get_file_contents, readme_path_for, write_file_contents

__all__ = [
    # Models
    "Block",
    "ConversionConfig",
    "InlineSpan",
    "Metadata",
    "OutputToken",
    "SourceDocument",
    # Utilities
    "ensure_dir_exists",
    "get_file_contents",
    "readme_path_for",
    "write_file_contents",
]
