import pytest

from wordle_assist.engine import (ALL_CORRECT, Feedback, InvalidFeedback, InvalidWord,
                                  decode_pattern, encode_pattern, format_pattern, parse_feedback,
                                  vec_to_word, word_to_vec)


def test_pattern_codec_round_trip_all_codes():
    for code in range(243):
        assert encode_pattern(decode_pattern(code)) == code


def test_pattern_weights_are_base3_little_endian():
    assert encode_pattern([0, 2, 1, 1, 1]) == 2 * 3 + 9 + 27 + 81
    assert encode_pattern([Feedback.CORRECT] * 5) == ALL_CORRECT == 242
    assert encode_pattern([Feedback.ABSENT] * 5) == 0


@pytest.mark.parametrize("text,expected", [
    ("-GYYY", "-GYYY"),
    ("_gyyy", "-GYYY"),
    (".GYYY", "-GYYY"),
    ("  ggggg ", "GGGGG"),
    ("0", "-----"),
    ("242", "GGGGG"),
])
def test_parse_feedback_accepts_common_forms(text, expected):
    assert format_pattern(parse_feedback(text)) == expected


@pytest.mark.parametrize("text", ["GGGG", "GGGGGG", "GGXGG", "243", "", "-1"])
def test_parse_feedback_rejects(text):
    with pytest.raises(InvalidFeedback):
        parse_feedback(text)


def test_decode_rejects_out_of_range():
    with pytest.raises(InvalidFeedback):
        decode_pattern(243)
    with pytest.raises(InvalidFeedback):
        decode_pattern(True)


def test_word_vector_round_trip():
    assert word_to_vec("crane") == (3, 18, 1, 14, 5)
    assert word_to_vec("CRANE") == (3, 18, 1, 14, 5)
    assert vec_to_word((3, 18, 1, 14, 5)) == "crane"
    assert vec_to_word(word_to_vec("zebra")) == "zebra"


@pytest.mark.parametrize("bad", ["cranes", "cran", "cr4ne", "crâne"])
def test_word_to_vec_rejects(bad):
    with pytest.raises(InvalidWord):
        word_to_vec(bad)


def test_vec_to_word_rejects_symbols_outside_alphabet():
    with pytest.raises(InvalidWord):
        vec_to_word((0, 1, 2, 3, 4))
    with pytest.raises(InvalidWord):
        vec_to_word((1, 2, 3, 4, 27))
