"""
Unified test infrastructure for textpp.

This package contains common utilities and helpers
used across all tests to avoid code duplication.

Modules:
- file_utils: Utilities for creating files and directories
- rendering_utils: Utilities for rendering documents
- cli_utils: Utilities for running the CLI in a subprocess
"""

from .file_utils import write, write_document
from .rendering_utils import make_engine, render
from .cli_utils import run_cli

__all__ = [
    "write",
    "write_document",
    "make_engine",
    "render",
    "run_cli",
]
