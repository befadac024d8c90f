from __future__ import annotations

import os
from typing import Optional

from .base import DateResolver, NullResolver


def get_resolver(name: Optional[str] = None) -> DateResolver:
    """Build the date resolver named by ``name`` or ``GENIE_DATE_RESOLVER``."""
    name = (name or os.getenv("GENIE_DATE_RESOLVER", "parsedatetime")).strip().lower()

    if name == "parsedatetime":
        from .parsedatetime_resolver import ParsedatetimeResolver

        return ParsedatetimeResolver()
    if name == "mock":
        from .mock_resolver import MockResolver

        return MockResolver()
    if name in {"none", "off", ""}:
        return NullResolver()

    raise ValueError(f"Unknown date resolver: {name}")
