"""
Tests for the tx-page hex heuristics (sender32 / payload recovery).
"""

from __future__ import annotations

from lz_autoscan.scanner.heuristics import extract_hex_candidates, find_hex_tokens

SENDER = "0x" + "a1" * 32  # 66 chars
PAYLOAD = "0x" + "Bc" * 64  # 130 chars


def test_sender_and_payload_from_page():
    """One 66-char token and one 130-char token are split into sender32 and payload."""
    html = f'<div>sender <code>{SENDER}</code></div><pre data-x="1">{PAYLOAD}</pre>'
    out = extract_hex_candidates(html)
    assert out.sender32 == SENDER
    assert out.payload == PAYLOAD


def test_no_tokens_returns_none():
    html = "<html>tx 0x1234 nonce 0xdeadbeef address 0x" + "f" * 40 + "</html>"
    out = extract_hex_candidates(html)
    assert out.sender32 is None
    assert out.payload is None


def test_empty_text():
    out = extract_hex_candidates("")
    assert out.sender32 is None
    assert out.payload is None


def test_odd_length_token_is_not_payload():
    odd = "0x" + "a" * 65  # 67 chars
    out = extract_hex_candidates(f"x {odd} y")
    assert out.sender32 is None
    assert out.payload is None


def test_first_match_wins_in_scan_order():
    second_sender = "0x" + "22" * 32
    second_payload = "0x" + "cd" * 40
    text = " ".join([PAYLOAD, SENDER, second_payload, second_sender])
    out = extract_hex_candidates(text)
    assert out.sender32 == SENDER
    assert out.payload == PAYLOAD


def test_duplicates_removed_preserving_order():
    text = f"{SENDER} {PAYLOAD} {SENDER} {PAYLOAD}"
    assert find_hex_tokens(text) == [SENDER, PAYLOAD]


def test_greedy_match_swallows_adjacent_hex():
    """A 64-digit token followed directly by more hex is one longer token, not a sender."""
    glued = SENDER + "ff"
    out = extract_hex_candidates(glued)
    assert out.sender32 is None
    assert out.payload == glued


def test_sender_and_payload_never_equal():
    samples = [
        SENDER,
        PAYLOAD,
        f"{SENDER}\n{PAYLOAD}",
        "0x" + "0" * 64 + " 0x" + "0" * 66,
        "0x" + "e" * 200,
    ]
    for text in samples:
        out = extract_hex_candidates(text)
        if out.sender32 is not None and out.payload is not None:
            assert out.sender32 != out.payload
