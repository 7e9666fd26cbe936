# SPDX-License-Identifier: MIT
"""Custom exceptions for ninjawriter.

All ninjawriter exceptions inherit from NinjaWriterError, which includes
an optional file path for better error messages.
"""

from __future__ import annotations

import os


class NinjaWriterError(Exception):
    """Base class for all ninjawriter exceptions.

    Attributes:
        message: The error message.
        path: Optional file the error relates to.
    """

    def __init__(
        self,
        message: str,
        path: str | os.PathLike[str] | None = None,
    ) -> None:
        self.message = message
        self.path = path
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.path is not None:
            return f"{os.fspath(self.path)}: {self.message}"
        return self.message


class ConfigureError(NinjaWriterError):
    """Invalid writer configuration.

    Raised when a config value is out of range, a config file cannot
    be read, or it contains unknown keys.
    """


class GenerateError(NinjaWriterError):
    """Error during the generate phase.

    Raised when the writer is used after it has been finalized.
    """


class PersistenceError(GenerateError):
    """The generated file could not be written.

    The original OSError is chained as __cause__.
    """

    def __init__(self, path: str | os.PathLike[str], reason: str) -> None:
        self.reason = reason
        super().__init__(f"cannot write build file: {reason}", path)
