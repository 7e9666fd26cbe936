# SPDX-License-Identifier: MIT
"""Build file writers for ninjawriter."""

from ninjawriter.generators.generator import BaseWriter, Writer
from ninjawriter.generators.ninja import DocumentWriter

__all__ = [
    "BaseWriter",
    "DocumentWriter",
    "Writer",
]
