# SPDX-License-Identifier: MIT
"""Ninja build file writer.

DocumentWriter turns rules, build edges, variables and pools into
Ninja syntax. Paths are escaped, long lines are wrapped with ` $`
continuations, and the result is written to disk on finalize.

Usage:
    with DocumentWriter("build/build.ninja") as w:
        w.comment("Generated file, do not edit")
        w.variable("cflags", "-O2 -Wall")
        w.rule(RuleDefinition("cc", "gcc $cflags -c $in -o $out"))
        w.build(BuildEdge(["foo.o"], "cc").with_inputs(["foo.c"]))
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from pathlib import Path

from ninjawriter.core.config import WriterConfig
from ninjawriter.core.entities import (
    BuildEdge,
    PathLike,
    PoolDefinition,
    RuleDefinition,
    VariableBinding,
)
from ninjawriter.core.syntax import escape_path, escape_paths, wrap_line
from ninjawriter.generators.generator import BaseWriter


class DocumentWriter(BaseWriter):
    """Writer that produces a Ninja build file.

    Every emit method appends to the in-memory document and returns the
    writer, so calls can be chained.

    Example output:
        rule cc
          command = gcc -c $in -o $out
          depfile = $out.d
          deps = gcc
        build foo.o: cc foo.c | config.h
    """

    def __init__(
        self,
        path: Path | str,
        *,
        config: WriterConfig | None = None,
        width: int | None = None,
    ) -> None:
        """Create a writer for a Ninja file.

        Args:
            path: Destination file, written on finalize.
            config: Layout and encoding settings.
            width: Overrides ``config.width`` when given.
        """
        config = config or WriterConfig()
        if width is not None:
            config = WriterConfig(width=width, encoding=config.encoding)
        super().__init__("ninja", path, config=config)

    def _line(self, text: str, indent: int = 0) -> None:
        self._write(wrap_line(text, indent, self.width))

    def comment(self, text: str) -> DocumentWriter:
        self._write(f"# {text}\n")
        return self

    def newline(self) -> DocumentWriter:
        self._write("\n")
        return self

    def variable(self, name: str, value: str, indent: int = 0) -> DocumentWriter:
        """Write `name = value`. The value is not escaped."""
        self._line(f"{name} = {value}", indent)
        return self

    def variable_list(
        self, name: str, values: Iterable[str], indent: int = 0
    ) -> DocumentWriter:
        """Write a variable whose value is the space-joined ``values``."""
        return self.variable(name, " ".join(values), indent)

    def pool(self, name: str, depth: int) -> DocumentWriter:
        self._write(f"pool {name}\n")
        self.variable("depth", str(depth), 1)
        return self

    def rule(self, rule: RuleDefinition) -> DocumentWriter:
        """Write a rule block.

        The command always follows the header; optional fields come after
        it in a fixed order and only when set.
        """
        self._line(f"rule {rule.name}")
        self.variable("command", rule.command, 1)
        if rule.description:
            self.variable("description", rule.description, 1)
        if rule.depfile:
            self.variable("depfile", rule.depfile, 1)
        if rule.generator:
            self.variable("generator", "1", 1)
        if rule.pool:
            self.variable("pool", rule.pool, 1)
        if rule.restat:
            self.variable("restat", "1", 1)
        if rule.rspfile:
            self.variable("rspfile", rule.rspfile, 1)
        if rule.rspfile_content:
            self.variable("rspfile_content", rule.rspfile_content, 1)
        if rule.deps:
            self.variable("deps", rule.deps, 1)
        return self

    def build(self, edge: BuildEdge) -> DocumentWriter:
        """Write a build statement followed by its edge-scoped bindings.

        Format:
            build <outputs> [| <implicit outputs>]: <rule> <inputs>
                [| <implicit>] [|| <order only>]
        """
        outputs = escape_paths(edge.outputs)
        if edge.implicit_outputs:
            outputs.append("|")
            outputs.extend(escape_paths(edge.implicit_outputs))

        inputs = [edge.rule, *escape_paths(edge.inputs)]
        if edge.implicit:
            inputs.append("|")
            inputs.extend(escape_paths(edge.implicit))
        if edge.order_only:
            inputs.append("||")
            inputs.extend(escape_paths(edge.order_only))

        self._line(f"build {' '.join(outputs)}: {' '.join(inputs)}")

        if edge.pool:
            self.variable("pool", edge.pool, 1)
        if edge.dyndep:
            self.variable("dyndep", edge.dyndep, 1)
        for name, value in edge.variables.items():
            self.variable(name, value, 1)
        return self

    def default(self, paths: Iterable[PathLike]) -> DocumentWriter:
        """Write a `default` statement naming the targets built by default."""
        if isinstance(paths, (str, os.PathLike)):
            paths = [paths]
        self._line(" ".join(["default", *escape_paths(paths)]))
        return self

    def include(self, path: PathLike) -> DocumentWriter:
        self._line(f"include {escape_path(path)}")
        return self

    def subninja(self, path: PathLike) -> DocumentWriter:
        self._line(f"subninja {escape_path(path)}")
        return self

    # Bulk helpers. Each is equivalent to calling the single-item method
    # in order, with a newline() after every item when add_newlines is set.

    def write_variables(
        self, variables: Sequence[VariableBinding], add_newlines: bool = False
    ) -> DocumentWriter:
        for binding in variables:
            self.variable(binding.name, binding.value, binding.indent_level)
            if add_newlines:
                self.newline()
        return self

    def write_rules(
        self, rules: Sequence[RuleDefinition], add_newlines: bool = False
    ) -> DocumentWriter:
        for rule in rules:
            self.rule(rule)
            if add_newlines:
                self.newline()
        return self

    def write_builds(
        self, builds: Sequence[BuildEdge], add_newlines: bool = False
    ) -> DocumentWriter:
        for edge in builds:
            self.build(edge)
            if add_newlines:
                self.newline()
        return self

    def write_pools(
        self, pools: Sequence[PoolDefinition], add_newlines: bool = False
    ) -> DocumentWriter:
        for pool in pools:
            self.pool(pool.name, pool.depth)
            if add_newlines:
                self.newline()
        return self
