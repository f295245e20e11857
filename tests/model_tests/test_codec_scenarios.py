# tests/model_tests/test_codec_scenarios.py
# This file is part of Vectime - Causal Indexing for Vector Clocks
#
# Tests for text, byte and compact clock encodings

"""Clock codec – lossless encodings and rejection of malformed input."""

import pytest
from model.codec import decode, encode, from_text, parse_compact, to_compact, to_text
from model.exceptions import ClockFormatError
from model.vector_clock import INT64_MAX, INT64_MIN, VectorClock as VC

ROUND_TRIP_CLOCKS = [
    VC(),
    VC({"A": 1, "B": 2, "C": 3}),
    VC({"node-1": 7, "ünïcode": 2}),
    VC({"A": INT64_MAX, "B": INT64_MIN}),
]


class TestTextForm:
    def test_canonical_json(self):
        assert to_text(VC({"B": 2, "A": 1})) == '{"A": 1, "B": 2}'
        assert to_text(VC()) == "{}"

    @pytest.mark.parametrize("clock", ROUND_TRIP_CLOCKS)
    def test_text_round_trip(self, clock):
        decoded = from_text(to_text(clock))
        assert decoded == clock
        assert decoded.entries == clock.entries

    @pytest.mark.parametrize(
        "text",
        [
            "not json",
            "[1, 2]",
            '"A"',
            '{"A": "1"}',
            '{"A": 1.0}',
            '{"A": true}',
            '{"A": 9223372036854775808}',
        ],
    )
    def test_malformed_text(self, text):
        with pytest.raises(ClockFormatError):
            from_text(text)

    def test_deep_nesting_is_malformed(self):
        with pytest.raises(ClockFormatError, match="nested too deeply"):
            from_text("[" * 100000 + "]" * 100000)


class TestByteForm:
    @pytest.mark.parametrize("clock", ROUND_TRIP_CLOCKS)
    def test_byte_round_trip(self, clock):
        raw = encode(clock)
        assert isinstance(raw, bytes)
        assert decode(raw) == clock

    def test_decode_accepts_buffer_types(self):
        raw = encode(VC({"A": 1}))
        assert decode(bytearray(raw)) == VC({"A": 1})
        assert decode(memoryview(raw)) == VC({"A": 1})

    def test_invalid_utf8(self):
        with pytest.raises(ClockFormatError, match="UTF-8"):
            decode(b"\xff\xfe{}")


class TestCompactForm:
    def test_parse(self):
        assert parse_compact("PA:1;PB:2;PC:0") == VC({"PA": 1, "PB": 2})
        assert parse_compact(" A : 3 ; ") == VC({"A": 3})

    def test_empty_is_empty_clock(self):
        assert parse_compact("") == VC()
        assert parse_compact("   ") == VC()

    def test_render(self):
        assert to_compact(VC({"B": 2, "A": 1})) == "A:1;B:2"
        assert parse_compact(to_compact(VC({"B": 2, "A": 1}))) == VC({"A": 1, "B": 2})

    @pytest.mark.parametrize("text", ["A", "A:x", ":3", "A:1;B"])
    def test_malformed_components(self, text):
        with pytest.raises(ClockFormatError):
            parse_compact(text)

    @pytest.mark.parametrize("text", ["A:1;A:2", "A:1; A :2", "B:0;B:0"])
    def test_duplicate_ids(self, text):
        with pytest.raises(ClockFormatError, match="Duplicate id"):
            parse_compact(text)

    @pytest.mark.parametrize(
        "clock",
        [VC({"node-1": 7, "ünïcode": 2}), VC({"a b": 1, "_x": -4}), VC()],
    )
    def test_compact_round_trip(self, clock):
        decoded = parse_compact(to_compact(clock))
        assert decoded == clock
        assert decoded.entries == clock.entries

    @pytest.mark.parametrize("pid", ["a:b", "a;b", " A", "A ", "\tA", ""])
    def test_unrepresentable_ids_are_refused(self, pid):
        with pytest.raises(ClockFormatError, match="compact form"):
            to_compact(VC({pid: 1}))
