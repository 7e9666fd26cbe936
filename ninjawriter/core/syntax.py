# SPDX-License-Identifier: MIT
"""Ninja syntax primitives: path escaping and line wrapping.

Path-like tokens (outputs, inputs, implicit and order-only deps) must be
escaped before they go into a build line. Commands, variable values and
pool names are written verbatim since they may contain variable
references such as $in and $out.

Long lines are wrapped at spaces using Ninja's ` $` continuation marker:

    build out1 out2 out3: cc in1 in2 $
        in3 in4
"""

from __future__ import annotations

import os
import re
from collections.abc import Iterable

DEFAULT_WIDTH = 78
INDENT = "  "
CONTINUATION = " $\n"

# A word followed by the run of spaces after it.
_WORD_RE = re.compile(r"([^ ]*)( *)")


def escape_path(token: str | os.PathLike[str]) -> str:
    """Escape a path for use in a build, default, or include line.

    `$` must be handled first so the dollars added for spaces and colons
    are not doubled.
    """
    return os.fspath(token).replace("$", "$$").replace(" ", "$ ").replace(":", "$:")


def escape_paths(tokens: Iterable[str | os.PathLike[str]]) -> list[str]:
    """Escape each token, preserving order."""
    return [escape_path(t) for t in tokens]


def _words(text: str) -> list[tuple[str, str]]:
    return [
        (m.group(1), m.group(2))
        for m in _WORD_RE.finditer(text)
        if m.group(0)
    ]


def wrap_line(text: str, indent: int = 0, width: int = DEFAULT_WIDTH) -> str:
    """Wrap one logical line into Ninja physical lines.

    Lines are filled greedily and broken only at spaces. Indentation counts
    toward the usable width of ``width - 2 * indent``. A word longer than the
    usable width is kept whole on its own line. Spaces inside escaped `$ `
    sequences are break points too; Ninja reads `a$ $` + newline as an
    escaped space followed by a continuation, so the token survives.

    Args:
        text: Logical line, already escaped.
        indent: Indent level of the first line; continuation lines get one more.
        width: Configured line width.

    Returns:
        The physical lines, each terminated by a newline, all but the last
        ending with ` $`.
    """
    leading = INDENT * indent
    subsequent = INDENT * (indent + 1)
    limit = width - len(leading)

    lines: list[str] = []
    line = leading
    pending = ""
    has_words = False
    for word, space in _words(text):
        if has_words and len(line) + len(pending) + len(word) > limit:
            lines.append(line)
            line = subsequent
        elif has_words:
            line += pending
        line += word
        pending = space
        has_words = True
    lines.append(line)

    return CONTINUATION.join(lines) + "\n"
