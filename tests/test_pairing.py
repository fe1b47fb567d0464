# tests/test_pairing.py
from __future__ import annotations

from color_token_report.report.color import Color
from color_token_report.report.pairing import (
    ColorPair,
    PairingCollision,
    group_by_namespace,
    group_by_pair,
)
from color_token_report.report.token import ColorToken

"""
pairing tests
=============

Does: Check first-encounter ordering of namespaces and base names, side
      assignment, unmatched tokens, and last-write-wins with diagnostics.
"""


def _tok(name: str, shade: float = 0.0) -> ColorToken:
    return ColorToken(id=f"id:{name}", name=name, color=Color(shade, shade, shade))


def test_group_by_namespace_keeps_first_seen_order():
    tokens = [_tok("B/Background"), _tok("A/Background"), _tok("Foreground"), _tok("B/Foreground")]
    groups = group_by_namespace(tokens)
    assert list(groups) == ["b", "a", "global"]
    assert [t.name for t in groups["b"]] == ["B/Background", "B/Foreground"]


def test_group_by_pair_assigns_sides():
    bg, fg = _tok("Primary/Background", 1.0), _tok("Primary/Foreground")
    paired = group_by_pair(group_by_namespace([fg, bg]))
    pair = paired["primary"]["primary"]
    assert pair.background is bg
    assert pair.foreground is fg
    assert pair.complete


def test_group_by_pair_base_name_order_and_unmatched():
    tokens = [
        _tok("Surface/Muted Foreground"),
        _tok("Surface/Background"),
        _tok("Surface/Muted"),
        _tok("Surface/Foreground 2"),
    ]
    pairs = group_by_pair(group_by_namespace(tokens))["surface"]
    assert list(pairs) == ["muted", "surface", "background 2"]
    assert pairs["surface"].foreground is None
    assert pairs["background 2"].background is None
    assert pairs["background 2"].tokens() == [tokens[3]]


def test_last_write_wins_without_diagnostics():
    first, second = _tok("Primary/Background", 0.1), _tok("Primary/Background", 0.9)
    pairs = group_by_pair(group_by_namespace([first, second]))
    assert pairs["primary"]["primary"].background is second


def test_collisions_are_reported_when_asked():
    first = _tok("Button/Primary", 0.1)
    second = _tok("Button/ primary ", 0.9)
    diagnostics: list[PairingCollision] = []
    pairs = group_by_pair(group_by_namespace([first, second]), diagnostics=diagnostics)
    assert pairs["button"]["primary"].background is second
    assert diagnostics == [PairingCollision("button", "primary", "background", first, second)]


def test_empty_input():
    assert group_by_namespace([]) == {}
    assert group_by_pair({}) == {}


def test_color_pair_defaults():
    pair = ColorPair()
    assert pair.background is None and pair.foreground is None
    assert not pair.complete
    assert pair.tokens() == []


def test_explicit_global_namespace_pairs_with_bare_names():
    bg, fg = _tok("Background", 1.0), _tok("Global/Foreground")
    pairs = group_by_pair(group_by_namespace([bg, fg]))
    assert list(pairs) == ["global"]
    assert list(pairs["global"]) == ["background"]
    assert pairs["global"]["background"].background is bg
    assert pairs["global"]["background"].foreground is fg


def test_token_named_after_its_namespace_collides_with_background():
    same, bg = _tok("Primary/Primary", 0.2), _tok("Primary/Background", 1.0)
    diagnostics: list[PairingCollision] = []
    pairs = group_by_pair(group_by_namespace([same, bg]), diagnostics=diagnostics)
    assert pairs["primary"]["primary"].background is bg
    assert diagnostics == [PairingCollision("primary", "primary", "background", same, bg)]
