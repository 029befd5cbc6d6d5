import pytest

from telegraph_line.morse import (
    CHAR_GAP_MS,
    DASH_MS,
    DOT_MS,
    ELEMENT_GAP_MS,
    ERROR_MARKER,
    MORSE_CODE,
    REVERSE_MORSE_CODE,
    WORD_GAP_MS,
    invalid_tokens,
    is_valid_morse,
    morse_to_text,
    morse_to_timing,
    text_to_morse,
    total_duration_ms,
)

NON_STRINGS = [None, 42, 3.5, ["..."], {"a": 1}, b"...", object()]


class TestCodeTable:
    def test_reverse_table_has_same_size(self):
        assert len(REVERSE_MORSE_CODE) == len(MORSE_CODE)

    def test_values_are_dots_and_dashes(self):
        for char, code in MORSE_CODE.items():
            if char == ' ':
                assert code == '/'
            else:
                assert code and set(code) <= {'.', '-'}, char

    def test_covers_letters_digits_and_punctuation(self):
        for char in "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789.,?'!/()&:;=+-_\"$@ ":
            assert char in MORSE_CODE

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            MORSE_CODE['#'] = '.-.-'

    @pytest.mark.parametrize("char", sorted(MORSE_CODE))
    def test_forward_and_reverse_are_inverses(self, char):
        code = MORSE_CODE[char]
        assert REVERSE_MORSE_CODE[code] == char
        assert text_to_morse(char) == code
        assert morse_to_text(code) == char


class TestTextToMorse:
    def test_hello(self):
        assert text_to_morse("HELLO") == ".... . .-.. .-.. ---"

    def test_lowercase_is_normalised(self):
        assert text_to_morse("sos") == "... --- ..."

    def test_space_becomes_word_separator(self):
        assert text_to_morse("HI MOM") == ".... .. / -- --- --"

    def test_empty(self):
        assert text_to_morse("") == ""

    @pytest.mark.parametrize("value", NON_STRINGS)
    def test_non_string_degrades_to_empty(self, value):
        assert text_to_morse(value) == ""

    def test_unknown_characters_are_dropped(self):
        assert text_to_morse("S#O~S") == text_to_morse("SOS")

    def test_only_unknown_characters(self):
        assert text_to_morse("#%^") == ""

    def test_no_double_separators_when_dropping(self):
        morse = text_to_morse("A*B")
        assert morse == ".- -..."
        assert "  " not in morse


class TestMorseToText:
    def test_hello(self):
        assert morse_to_text(".... . .-.. .-.. ---") == "HELLO"

    def test_word_separator(self):
        assert morse_to_text(".... .. / -- --- --") == "HI MOM"

    @pytest.mark.parametrize("value", NON_STRINGS)
    def test_non_string_degrades_to_empty(self, value):
        assert morse_to_text(value) == ""

    @pytest.mark.parametrize("value", ["", " ", "   \t  "])
    def test_blank_input(self, value):
        assert morse_to_text(value) == ""

    def test_multiple_spaces_are_skipped(self):
        assert morse_to_text("...   ---  ...") == "SOS"

    def test_invalid_token_is_marked(self):
        decoded = morse_to_text(".- ........ -...")
        assert decoded == "A" + ERROR_MARKER + "B"

    def test_one_marker_per_invalid_token(self):
        decoded = morse_to_text("........ ... x ---------- ---")
        assert decoded.count(ERROR_MARKER) == 3
        assert decoded == ERROR_MARKER + "S" + ERROR_MARKER + ERROR_MARKER + "O"

    def test_error_marker_is_not_in_alphabet(self):
        assert len(ERROR_MARKER) == 1
        assert not ERROR_MARKER.isalnum()
        assert ERROR_MARKER not in MORSE_CODE


class TestRoundTrip:
    @pytest.mark.parametrize("text", [
        "HELLO WORLD",
        "sos",
        "What hath God wrought?",
        "CQ CQ DE W1AW 73",
        "PRICE: $5 (NET) = 3+2; ASK @ DESK_1!",
        "'QUOTED' \"TEXT\" A/B & C-D, E.",
    ])
    def test_round_trip_is_uppercase(self, text):
        assert morse_to_text(text_to_morse(text)) == text.upper()

    def test_unknown_characters_vanish_in_round_trip(self):
        assert morse_to_text(text_to_morse("A#B%C")) == "ABC"


class TestMorseToTiming:
    def test_letter_a(self):
        assert morse_to_timing(".-") == [100, 100, 300]

    def test_letter_a_from_text(self):
        assert morse_to_timing(text_to_morse("A")) == [DOT_MS, ELEMENT_GAP_MS, DASH_MS]

    def test_character_gap(self):
        assert morse_to_timing(". .") == [100, CHAR_GAP_MS, 100]

    def test_word_gap(self):
        assert morse_to_timing(".- / -...") == [
            100, 100, 300,
            0, WORD_GAP_MS,
            300, 100, 100, 100, 100, 100, 100,
        ]

    def test_trailing_word_separator_emits_nothing(self):
        assert morse_to_timing(".- /") == [100, 100, 300]

    def test_leading_word_separator(self):
        assert morse_to_timing("/ .") == [0, WORD_GAP_MS, 100]

    def test_no_character_gap_before_empty_token(self):
        assert morse_to_timing(".  .") == [100, 100]

    @pytest.mark.parametrize("value", NON_STRINGS + ["", "   "])
    def test_degrades_to_empty(self, value):
        assert morse_to_timing(value) == []

    def test_unknown_symbols_contribute_no_duration(self):
        assert morse_to_timing("x") == []
        assert morse_to_timing(".x") == [100, 100]

    def test_values_are_known_constants(self):
        timing = morse_to_timing(text_to_morse("THE QUICK BROWN FOX 1234567890"))
        assert timing
        assert set(timing) <= {0, 100, 300, 700}
        assert all(isinstance(value, int) and value >= 0 for value in timing)

    def test_deterministic(self):
        morse = text_to_morse("PARIS PARIS")
        assert morse_to_timing(morse) == morse_to_timing(morse)

    def test_paris_is_fifty_units(self):
        # PARIS plus one trailing word gap is the standard 50-unit word
        timing = morse_to_timing(text_to_morse("PARIS"))
        assert total_duration_ms(timing) + WORD_GAP_MS == 50 * DOT_MS


class TestValidation:
    def test_valid(self):
        assert is_valid_morse("... --- ... / .-")
        assert invalid_tokens("... --- ...") == []

    def test_invalid_tokens_in_order(self):
        assert invalid_tokens(".- ........ -... abc") == ["........", "abc"]
        assert not is_valid_morse(".- ........")

    @pytest.mark.parametrize("value", [None, "", "  ", 7])
    def test_blank_is_not_valid(self, value):
        assert not is_valid_morse(value)
