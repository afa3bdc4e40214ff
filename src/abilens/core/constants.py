from __future__ import annotations

# default registry TTL (milliseconds)
ONE_DAY_MS = 24 * 60 * 60 * 1000

# selector widths, hex chars without 0x
FUNCTION_SELECTOR_HEX_LEN = 8

# "0x" + 40 hex digits
ADDRESS_HEX_LEN = 42

# log-path integer types rendered as decimal strings
LOG_NUMERIC_TYPES = frozenset({"uint256", "uint8", "int"})
