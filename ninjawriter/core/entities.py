# SPDX-License-Identifier: MIT
"""Value types describing what goes into a Ninja file.

These are plain frozen dataclasses. Each ``with_*`` method returns an
updated copy and leaves the original untouched, so values can be
shared and extended freely:

    base = RuleDefinition("cc", "$cc -c $in -o $out")
    rule = base.with_depfile("$out.d").with_deps("gcc")
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace

PathLike = str | os.PathLike[str]


def _tokens(paths: Iterable[PathLike]) -> tuple[str, ...]:
    # A bare string is one path, not a sequence of characters.
    if isinstance(paths, (str, os.PathLike)):
        paths = [paths]
    return tuple(os.fspath(p) for p in paths)


@dataclass(frozen=True)
class VariableBinding:
    """A top-level or nested `name = value` line.

    Attributes:
        name: Variable name.
        value: Raw value, written without escaping.
        indent_level: Nesting level (0 for top level).
    """

    name: str
    value: str
    indent_level: int = 0

    def __post_init__(self) -> None:
        if self.indent_level < 0:
            raise ValueError(f"indent_level must be >= 0, got {self.indent_level}")


@dataclass(frozen=True)
class RuleDefinition:
    """A named command template.

    Optional string fields that are None or empty are not written.
    ``generator`` and ``restat`` are written as ``1`` when true.
    """

    name: str
    command: str
    description: str | None = None
    depfile: str | None = None
    generator: bool = False
    pool: str | None = None
    restat: bool = False
    rspfile: str | None = None
    rspfile_content: str | None = None
    deps: str | None = None

    def with_name(self, name: str) -> RuleDefinition:
        return replace(self, name=name)

    def with_command(self, command: str) -> RuleDefinition:
        return replace(self, command=command)

    def with_description(self, description: str) -> RuleDefinition:
        return replace(self, description=description)

    def with_depfile(self, depfile: str) -> RuleDefinition:
        return replace(self, depfile=depfile)

    def with_generator(self, generator: bool = True) -> RuleDefinition:
        return replace(self, generator=generator)

    def with_pool(self, pool: str) -> RuleDefinition:
        return replace(self, pool=pool)

    def with_restat(self, restat: bool = True) -> RuleDefinition:
        return replace(self, restat=restat)

    def with_rspfile(self, rspfile: str) -> RuleDefinition:
        return replace(self, rspfile=rspfile)

    def with_rspfile_content(self, rspfile_content: str) -> RuleDefinition:
        return replace(self, rspfile_content=rspfile_content)

    def with_deps(self, deps: str) -> RuleDefinition:
        return replace(self, deps=deps)


@dataclass(frozen=True)
class BuildEdge:
    """One build statement: outputs produced from inputs by a rule.

    Path sequences are stored as tuples of strings and escaped only when
    written. ``rule`` is a name; nothing checks that the rule exists.

    Attributes:
        outputs: Explicit outputs.
        rule: Name of the rule to run.
        inputs: Explicit inputs ($in).
        implicit: Implicit dependencies, written after `|`.
        order_only: Order-only dependencies, written after `||`.
        implicit_outputs: Implicit outputs, written after `|` among outputs.
        pool: Pool override for this edge.
        dyndep: Dynamic dependency file.
        variables: Edge-scoped variables, written in insertion order.
    """

    outputs: tuple[str, ...]
    rule: str
    inputs: tuple[str, ...] = ()
    implicit: tuple[str, ...] = ()
    order_only: tuple[str, ...] = ()
    implicit_outputs: tuple[str, ...] = ()
    pool: str | None = None
    dyndep: str | None = None
    variables: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for name in ("outputs", "inputs", "implicit", "order_only", "implicit_outputs"):
            object.__setattr__(self, name, _tokens(getattr(self, name)))
        object.__setattr__(self, "variables", dict(self.variables))

    def with_outputs(self, outputs: Iterable[PathLike]) -> BuildEdge:
        return replace(self, outputs=_tokens(outputs))

    def with_rule(self, rule: str) -> BuildEdge:
        return replace(self, rule=rule)

    def with_inputs(self, inputs: Iterable[PathLike]) -> BuildEdge:
        return replace(self, inputs=_tokens(inputs))

    def with_implicit(self, implicit: Iterable[PathLike]) -> BuildEdge:
        return replace(self, implicit=_tokens(implicit))

    def with_order_only(self, order_only: Iterable[PathLike]) -> BuildEdge:
        return replace(self, order_only=_tokens(order_only))

    def with_implicit_outputs(self, implicit_outputs: Iterable[PathLike]) -> BuildEdge:
        return replace(self, implicit_outputs=_tokens(implicit_outputs))

    def with_pool(self, pool: str) -> BuildEdge:
        return replace(self, pool=pool)

    def with_dyndep(self, dyndep: str) -> BuildEdge:
        return replace(self, dyndep=dyndep)

    def with_variables(self, variables: Mapping[str, str]) -> BuildEdge:
        """Replace all edge variables."""
        return replace(self, variables=dict(variables))

    def with_variable(self, name: str, value: str) -> BuildEdge:
        """Add or override a single edge variable."""
        variables = dict(self.variables)
        variables[name] = value
        return replace(self, variables=variables)


@dataclass(frozen=True)
class PoolDefinition:
    """A named pool limiting how many edges run at once."""

    name: str
    depth: int

    def __post_init__(self) -> None:
        if self.depth < 0:
            raise ValueError(f"depth must be >= 0, got {self.depth}")
