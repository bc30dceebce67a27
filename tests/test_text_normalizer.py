"""Unit tests for transcript normalization."""
import pytest

from normalizer import SpellingDictionary, TextNormalizer, basic_normalize, normalize


class TestNumberFolding:
    """Spoken numbers end up as digit strings."""

    def test_year(self):
        assert "2021" in normalize("twenty twenty one")

    def test_bare_year(self):
        assert normalize("twenty twenty") == "2020"

    def test_year_inside_sentence(self):
        assert normalize("in twenty twenty one") == "in 2021"

    def test_compound_with_multiplier(self):
        assert "925" in normalize("nine hundred twenty five")

    def test_simple_compound(self):
        assert "21" in normalize("twenty one")

    def test_decimal(self):
        assert "21.5" in normalize("twenty one point five")

    def test_leading_point(self):
        assert "0.5" in normalize("point five")

    def test_thousands_separator(self):
        assert normalize("Revenue was 1,000 dollars") == "revenue was 1000 dollars"

    def test_ordinal_suffix_kept_attached(self):
        assert normalize("the 21st century") == "the 21st century"

    def test_sentence(self):
        # Act
        result = normalize("Revenue grew to nine hundred twenty five million")

        # Assert
        assert result == "revenue grew to 925000000"


class TestRewriting:
    """Abbreviations, contractions, spelling and cleanup."""

    def test_abbreviation_and_contraction(self):
        # Act
        result = normalize("Dr. Mr. Smith can't go")

        # Assert
        assert "doctor" in result
        assert "mister" in result
        assert "can not" in result

    def test_repetition_collapse(self):
        assert normalize("we, we, we are going").startswith("we are going")

    def test_british_spelling(self):
        assert normalize("The colour of the programme (laughs) um changed") == "the color of the program changed"

    def test_fillers_removed(self):
        assert normalize("um I think uh yes") == "i think yes"

    def test_stutter_removed(self):
        assert normalize("th- the cat") == "the cat"

    def test_annotations_removed(self):
        assert normalize("[inaudible] hello <noise> world") == "hello world"

    def test_symbols_spelled_out(self):
        assert normalize("$5 & 50%") == "dollar 5 and 50 percent"

    def test_letter_digit_split(self):
        assert normalize("covid19") == "covid 19"

    def test_clock_markers_follow_numbers(self):
        assert normalize("at 7pm") == "at 7 p m"

    def test_am_verb_untouched(self):
        assert normalize("I am here") == "i am here"

    def test_gday(self):
        assert normalize("G'day mate") == "good day mate"

    def test_punctuation_and_whitespace(self):
        assert normalize("Hello,   World!") == "hello world"

    def test_empty(self):
        assert normalize("") == ""


class TestIdempotence:

    @pytest.mark.parametrize("text", [
        "Dr. Mr. Smith can't go",
        "we, we, we are going",
        "twenty one point five percent",
        "Revenue grew to nine hundred twenty five million in twenty twenty one",
        "The colour of the programme (laughs) um changed",
        "Net income was $1,250 or 3.5% higher",
        "point five",
        "covid19 cases in the 21st century",
        "I'm here",
        "twenty twenty",
        "we met at 7 am",
    ])
    def test_normalize_twice_is_stable(self, text):
        once = normalize(text)
        assert normalize(once) == once


class TestNormalizerConstruction:

    def test_custom_spelling_dictionary(self):
        # Arrange
        spelling = SpellingDictionary.from_mapping({"Flavour": "Flavor"})
        normalizer = TextNormalizer(spelling=spelling)

        # Act
        result = normalizer("Flavour of the month")

        # Assert
        assert result == "flavor of the month"

    def test_empty_dictionary_is_tolerated(self):
        normalizer = TextNormalizer(spelling=SpellingDictionary())

        assert normalizer.normalize("The colour") == "the colour"

    def test_missing_dictionary_file_yields_empty(self, tmp_path):
        spelling = SpellingDictionary.from_file(tmp_path / "missing.json")

        assert spelling.is_empty
        assert len(spelling) == 0

    def test_malformed_dictionary_file_yields_empty(self, tmp_path):
        # Arrange
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        # Act
        spelling = SpellingDictionary.from_file(path)

        # Assert
        assert spelling.is_empty

    def test_default_dictionary_is_shared_and_read_only(self):
        first = SpellingDictionary.default()
        second = SpellingDictionary.default()

        assert first is second
        assert first.mapping["colour"] == "color"
        with pytest.raises(TypeError):
            first.mapping["colour"] = "colour"  # type: ignore[index]


class TestBasicNormalize:

    def test_remove_diacritics(self):
        result = basic_normalize("Café [noise] (laughs) déjà-vu!", remove_diacritics=True)

        assert result == "cafe deja vu"

    def test_keep_diacritics(self):
        assert basic_normalize("Café, déjà vu!") == "café déjà vu"

    def test_special_letters_folded(self):
        assert basic_normalize("Straße Øre", remove_diacritics=True) == "strasse ore"

    def test_no_linguistic_rewriting(self):
        assert basic_normalize("Dr. Smith can't") == "dr smith can t"

    def test_empty(self):
        assert basic_normalize("") == ""
