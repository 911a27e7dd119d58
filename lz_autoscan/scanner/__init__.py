"""
Scanner package — LayerZero Scan client, field probing, hex heuristics, pending-message service.
"""

from lz_autoscan.scanner.client import LayerZeroScanClient
from lz_autoscan.scanner.heuristics import HexCandidates, extract_hex_candidates
from lz_autoscan.scanner.models import PendingMessageSummary, UpstreamResult
from lz_autoscan.scanner.pending import PendingMessageService

__all__ = [
    "HexCandidates",
    "LayerZeroScanClient",
    "PendingMessageService",
    "PendingMessageSummary",
    "UpstreamResult",
    "extract_hex_candidates",
]
