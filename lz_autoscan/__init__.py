"""
LayerZero Auto-Scan — read-only watcher for pending cross-chain messages.

Polls LayerZero Scan for messages sent by one owner address, keeps those
whose executor is still WAITING, and enriches them with sender and payload.
No private keys; observes public message state only.
"""

__version__ = "0.1.0"
