"""File operation domain types."""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict

StrPath = str | os.PathLike[str]


class CopyOptions(BaseModel):
    """Flags for a single copy call, like the switches given to ``cp``."""

    model_config = ConfigDict(frozen=True)

    recursive: bool = False  # -R
    preserve_links: bool = False  # -P
    preserve_timestamps: bool = False  # -p
