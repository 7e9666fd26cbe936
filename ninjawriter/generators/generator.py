# SPDX-License-Identifier: MIT
"""Writer protocol and buffered-output base class.

Writers accumulate the whole document in memory and write it to disk
in a single operation when finalized. Finalization happens exactly once:
explicitly via finalize(), on leaving a ``with`` block, or, as a last
resort, when the writer is garbage collected or the interpreter exits.
"""

from __future__ import annotations

import io
import logging
import weakref
from pathlib import Path
from typing import Protocol, TypeVar, runtime_checkable

from ninjawriter.core.config import WriterConfig
from ninjawriter.core.errors import GenerateError, PersistenceError

logger = logging.getLogger(__name__)

_W = TypeVar("_W", bound="BaseWriter")


@runtime_checkable
class Writer(Protocol):
    """Protocol for build file writers."""

    @property
    def name(self) -> str:
        """Writer name (e.g., 'ninja')."""
        ...

    def finalize(self) -> None:
        """Write the generated document to its destination."""
        ...


def _flush(path: Path, buffer: io.StringIO, encoding: str) -> None:
    text = buffer.getvalue()
    logger.debug("Writing %d characters to %s", len(text), path)
    try:
        with open(path, "w", encoding=encoding, newline="") as f:
            f.write(text)
    except OSError as e:
        logger.error("Failed to write %s: %s", path, e)
        raise PersistenceError(path, e.strerror or str(e)) from e


def _flush_at_teardown(path: Path, buffer: io.StringIO, encoding: str) -> None:
    logger.warning("%s was not finalized; writing it at teardown", path)
    _flush(path, buffer, encoding)


class BaseWriter:
    """Base class holding the output buffer and its destination.

    Subclasses append text with ``_write()``; callers persist it with
    ``finalize()`` or by using the writer as a context manager.
    """

    def __init__(
        self,
        name: str,
        path: Path | str,
        *,
        config: WriterConfig | None = None,
    ) -> None:
        """Initialize a writer.

        Args:
            name: Writer name.
            path: File the document is written to on finalize.
            config: Layout and encoding settings.
        """
        self._name = name
        self._path = Path(path)
        self._config = config or WriterConfig()
        self._buffer = io.StringIO()
        # Holds only the path and buffer, never self, so the writer can
        # still be collected.
        self._finalizer = weakref.finalize(
            self, _flush_at_teardown, self._path, self._buffer, self._config.encoding
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def path(self) -> Path:
        return self._path

    @property
    def config(self) -> WriterConfig:
        return self._config

    @property
    def width(self) -> int:
        return self._config.width

    @property
    def closed(self) -> bool:
        """True once the document has been finalized."""
        return not self._finalizer.alive

    def getvalue(self) -> str:
        """Return the text generated so far."""
        return self._buffer.getvalue()

    def _write(self, text: str) -> None:
        if self.closed:
            raise GenerateError("writer has already been finalized", self._path)
        self._buffer.write(text)

    def finalize(self) -> None:
        """Write the buffered document to the destination.

        The file is created or truncated and written in one call. Calling
        this again after it has run is a no-op, including after a failure.

        Raises:
            PersistenceError: If the destination cannot be written.
        """
        if self.closed:
            return
        self._finalizer.detach()
        _flush(self._path, self._buffer, self._config.encoding)

    def __enter__(self: _W) -> _W:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.finalize()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r}, {str(self._path)!r})"
