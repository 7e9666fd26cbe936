# SPDX-License-Identifier: MIT
"""
ninjawriter: generate Ninja build files from Python.

Describe rules, build edges, variables and pools as plain values and
let DocumentWriter escape, wrap and write them:

    from ninjawriter import BuildEdge, DocumentWriter, RuleDefinition

    with DocumentWriter("build.ninja") as w:
        w.rule(RuleDefinition("cc", "cc -c $in -o $out"))
        w.build(BuildEdge(["foo.o"], "cc").with_inputs(["foo.c"]))
"""

from ninjawriter.core.config import WriterConfig
from ninjawriter.core.entities import (
    BuildEdge,
    PoolDefinition,
    RuleDefinition,
    VariableBinding,
)
from ninjawriter.core.errors import (
    ConfigureError,
    GenerateError,
    NinjaWriterError,
    PersistenceError,
)
from ninjawriter.core.syntax import escape_path, wrap_line
from ninjawriter.generators import DocumentWriter

__version__ = "0.1.0"

__all__ = [
    "BuildEdge",
    "ConfigureError",
    "DocumentWriter",
    "GenerateError",
    "NinjaWriterError",
    "PersistenceError",
    "PoolDefinition",
    "RuleDefinition",
    "VariableBinding",
    "WriterConfig",
    "escape_path",
    "wrap_line",
]
