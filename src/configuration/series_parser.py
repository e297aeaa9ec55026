"""Parse series literals such as ``"0, 0.9, 1.2"`` into lists of floats.

Quirks handled:
- Either ``,`` or ``;`` separates values
- Whitespace around values is ignored
- An empty slot (``"0, , 1.2"``) is kept as ``None`` so lookups treat it
  as normal conditions
- A blank literal is an empty series
"""

import math
import re
from typing import List, Optional

from src.configuration.config import SERIES_SEPARATORS
from src.configuration.config_source import ConfigurationError

_SPLIT_RE = re.compile(f"[{re.escape(SERIES_SEPARATORS)}]")


def parse_series(text: str) -> List[Optional[float]]:
    """Parse a series literal.

    Raises:
        ConfigurationError: If any slot is not a finite number.
    """
    if text is None or not text.strip():
        return []

    values: List[Optional[float]] = []
    for index, token in enumerate(_SPLIT_RE.split(text)):
        token = token.strip()
        if not token:
            values.append(None)
            continue
        try:
            value = float(token)
        except ValueError:
            raise ConfigurationError(
                f"Malformed series value {token!r} at position {index} in {text!r}"
            ) from None
        if not math.isfinite(value):
            raise ConfigurationError(
                f"Non-finite series value {token!r} at position {index} in {text!r}"
            )
        values.append(value)

    return values
