import pytest

from hsluv_palette.packing import TRANSPARENT, alpha_int
from hsluv_palette.palette_data import ALIASES, NAMED, NAMED_COLOURS, PALETTE, build_palette


def test_palette_size_and_lookup():
    assert len(PALETTE) == len(NAMED_COLOURS) == 50
    assert PALETTE.get("transparent") == TRANSPARENT
    assert PALETTE.get("no-such-colour") == TRANSPARENT
    assert PALETTE.get("no-such-colour", 7) == 7
    assert "mint" in PALETTE
    assert "nope" not in PALETTE
    assert NAMED["red"] == 0xFE7FFF08


def test_every_word_keeps_dead_alpha_bit_clear():
    for _, packed, _ in NAMED_COLOURS:
        assert (packed >> 24) & 1 == 0


def test_aliases_resolve_to_targets():
    for alias, target in ALIASES:
        assert NAMED[alias] == NAMED[target]
        assert alias not in PALETTE.names
    assert NAMED["grey"] == NAMED["gray"]


def test_orderings_cover_canonical_names():
    canonical = {name for name, _, _ in NAMED_COLOURS}
    assert list(PALETTE.names) == sorted(canonical)
    assert set(PALETTE.names_by_hue) == canonical
    assert set(PALETTE.names_by_lightness) == canonical
    assert PALETTE.names_by_hue[0] == "transparent"
    assert PALETTE.colors_by_hue == tuple(NAMED[n] for n in PALETTE.names_by_hue)


def test_lightness_order_is_monotonic():
    lights = [NAMED[n] >> 16 & 0xFF for n in PALETTE.names_by_lightness]
    assert lights == sorted(lights)


def test_greys_come_before_chromatic_colours():
    order = PALETTE.names_by_hue
    assert order.index("black") < order.index("gray") < order.index("white") < order.index("red")


def test_entries_carry_reference_hex():
    entry = PALETTE.entry("red")
    assert entry is not None
    assert entry.rgba_hex == "#ff0000ff"
    assert alpha_int(entry.packed) == 254
    assert PALETTE.entry("grey") is None


def test_named_is_read_only():
    with pytest.raises(TypeError):
        NAMED["red"] = 0  # type: ignore[index]


def test_build_palette_rejects_duplicates():
    with pytest.raises(ValueError):
        build_palette([("a", 1, "#000000ff"), ("a", 2, "#000000ff")], [])


def test_build_palette_rejects_dangling_alias():
    with pytest.raises(ValueError):
        build_palette([("a", 1, "#000000ff")], [("b", "missing")])
