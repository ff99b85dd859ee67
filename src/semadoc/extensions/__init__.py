#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Block macro extensions recognized by the AsciiDoc parser."""

from semadoc.extensions.lorem import LoremGenerator

__all__ = ["LoremGenerator"]
