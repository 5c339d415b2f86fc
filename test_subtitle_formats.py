#!/usr/bin/env python3
"""
Tests for the subtitle block model and the SBV codec.
"""

import sys
from pathlib import Path

import pytest

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from core.line_fixer import LineFixer
from core.subtitle_formats import SubtitleBlock, SBVCodec, SubtitleFormatFactory
from utils.constants import SubtitleFormat


def test_parse_splits_timing_from_text():
    block = SubtitleBlock.parse("0:00:42.267,0:00:45.520\nשורה אחת\nשורה שתיים")
    assert block.timing == "0:00:42.267,0:00:45.520"
    assert block.text == "שורה אחת\nשורה שתיים"
    assert block.lines() == ["שורה אחת", "שורה שתיים"]


def test_parse_without_text_gives_empty_text():
    block = SubtitleBlock.parse("0:00:01.000,0:00:02.000")
    assert block.timing == "0:00:01.000,0:00:02.000"
    assert block.text == ""


def test_fix_text_fixes_each_line_independently():
    block = SubtitleBlock.parse(
        "0:00:42.267,0:00:45.520\nגולגולת חשמלית, ארמון\nהקריסטל שלנו היה מוצף בהן."
    )
    block.fix_text()
    assert block.text == "גולגולת חשמלית, ארמון\n.הקריסטל שלנו היה מוצף בהן"
    assert block.timing == "0:00:42.267,0:00:45.520"


def test_fix_text_never_touches_timing():
    block = SubtitleBlock(timing="!timing?", text="שלום!")
    block.fix_text(LineFixer())
    assert block.timing == "!timing?"
    assert block.text == "!שלום"


def test_decode_lf_document():
    blocks = SBVCodec.decode("0:00:05.065,0:00:06.218\nגארנט!\n\n0:00:07.082,0:00:08.600\nאמטיסט!\n")
    assert blocks == [
        SubtitleBlock("0:00:05.065,0:00:06.218", "גארנט!"),
        SubtitleBlock("0:00:07.082,0:00:08.600", "אמטיסט!\n"),
    ]


def test_decode_crlf_document():
    blocks = SBVCodec.decode("0:00:05.065,0:00:06.218\r\nגארנט!\r\n\r\n0:00:07.082,0:00:08.600\r\nאמטיסט!")
    assert [block.timing for block in blocks] == ["0:00:05.065,0:00:06.218", "0:00:07.082,0:00:08.600"]
    assert [block.text for block in blocks] == ["גארנט!", "אמטיסט!"]


def test_decode_empty_document():
    assert SBVCodec.decode("") == []
    assert SBVCodec.encode([]) == ""


def test_encode_separates_blocks_with_blank_line_and_no_trailing_separator():
    blocks = [
        SubtitleBlock("0:00:01.000,0:00:02.000", "!שלום"),
        SubtitleBlock("0:00:03.000,0:00:04.000", "שורה\n.שנייה"),
    ]
    assert SBVCodec.encode(blocks) == (
        "0:00:01.000,0:00:02.000\n!שלום\n\n0:00:03.000,0:00:04.000\nשורה\n.שנייה"
    )


def test_decode_of_encoded_fixed_blocks_round_trips():
    blocks = SBVCodec.decode(
        "0:00:02.367,0:00:03.830\r\nאנחנו אבני הקריסטל.\r\n\r\n"
        "0:00:42.267,0:00:45.520\r\nגולגולת חשמלית, ארמון\r\nהקריסטל שלנו היה מוצף בהן.\r\n\r\n"
        "0:00:57.000,0:00:58.306\r\nששש..."
    )
    for block in blocks:
        block.fix_text()

    decoded = SBVCodec.decode(SBVCodec.encode(blocks))
    assert [(b.timing, b.text) for b in decoded] == [(b.timing, b.text) for b in blocks]


def test_codec_lookup_by_extension():
    assert SubtitleFormatFactory.get_codec_for_path(Path("episode.SBV")) is SBVCodec
    with pytest.raises(ValueError):
        SubtitleFormatFactory.get_codec_for_path(Path("episode.srt"))
    assert SubtitleFormatFactory.get_codec(SubtitleFormat.SBV) is SBVCodec


def test_trailing_blank_line_decodes_as_empty_last_block():
    blocks = SBVCodec.decode("0:00:01.000,0:00:02.000\nשלום!\n\n")
    assert [(b.timing, b.text) for b in blocks] == [("0:00:01.000,0:00:02.000", "שלום!"), ("", "")]
    assert SBVCodec.encode(blocks) == "0:00:01.000,0:00:02.000\nשלום!\n\n\n"
