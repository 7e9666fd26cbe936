# SPDX-License-Identifier: MIT
"""Writer configuration.

WriterConfig holds the settings that control how a document is laid
out and persisted. It can be built directly, from a mapping, or loaded
from a JSON file:

    {"width": 100, "encoding": "utf-8"}
"""

from __future__ import annotations

import codecs
import json
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from ninjawriter.core.errors import ConfigureError
from ninjawriter.core.syntax import DEFAULT_WIDTH


@dataclass(frozen=True)
class WriterConfig:
    """Settings for a DocumentWriter.

    Attributes:
        width: Maximum physical line width used when wrapping.
        encoding: Text encoding of the written file.
    """

    width: int = DEFAULT_WIDTH
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if isinstance(self.width, bool) or not isinstance(self.width, int):
            raise ConfigureError(f"width must be an integer, got {self.width!r}")
        if self.width <= 0:
            raise ConfigureError(f"width must be positive, got {self.width}")
        try:
            codecs.lookup(self.encoding)
        except (LookupError, TypeError):
            raise ConfigureError(f"unknown encoding: {self.encoding!r}") from None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> WriterConfig:
        """Build a config from a mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigureError(f"unknown config keys: {', '.join(unknown)}")
        return cls(**dict(data))

    @classmethod
    def load(cls, path: Path | str) -> WriterConfig:
        """Load a config from a JSON file.

        Args:
            path: File containing a JSON object.

        Raises:
            ConfigureError: If the file can't be read or isn't a valid config.
        """
        path = Path(path)
        try:
            with open(path) as f:
                data = json.load(f)
        except OSError as e:
            raise ConfigureError(f"cannot read config: {e.strerror}", path) from e
        except json.JSONDecodeError as e:
            raise ConfigureError(f"invalid JSON: {e.msg}", path) from e

        if not isinstance(data, dict):
            raise ConfigureError("config must be a JSON object", path)
        try:
            return cls.from_dict(data)
        except ConfigureError as e:
            raise ConfigureError(e.message, path) from None
