"""
Hex heuristics — recover sender32 and payload from an unstructured tx page.

Best-effort fallback for when the LayerZero Scan API omits fields: scan the
page text for long 0x-prefixed hex tokens and classify them by length.
Brittle to markup changes by nature; never the primary source.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# 0x + at least 32 bytes of hex; greedy so longer runs are taken whole
HEX_TOKEN_RE = re.compile(r"0x[0-9a-fA-F]{64,}")

# "0x" + 64 hex chars
BYTES32_HEX_LEN = 66


@dataclass(frozen=True)
class HexCandidates:
    sender32: str | None = None
    payload: str | None = None


def find_hex_tokens(text: str) -> list[str]:
    """All qualifying tokens in scan order, exact duplicates removed."""
    return list(dict.fromkeys(HEX_TOKEN_RE.findall(text or "")))


def extract_hex_candidates(text: str) -> HexCandidates:
    """
    Classify hex tokens found in text.

    sender32: first token of exactly 66 chars (32 bytes).
    payload: first token longer than 66 chars with even length (whole bytes).
    The length predicates are disjoint, so the two fields never hold the same token.
    """
    tokens = find_hex_tokens(text)
    sender32 = next((t for t in tokens if len(t) == BYTES32_HEX_LEN), None)
    payload = next(
        (t for t in tokens if len(t) > BYTES32_HEX_LEN and len(t) % 2 == 0),
        None,
    )
    return HexCandidates(sender32=sender32, payload=payload)
