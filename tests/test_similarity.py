import pytest

from correction import STOP_WORDS, are_similar, common_prefix_length, common_suffix_length


class TestAreSimilar:

    def test_stop_word_never_matches(self):
        assert not are_similar("the", "thee")
        assert not are_similar("thee", "the")

    def test_substring_matches(self):
        assert are_similar("erik", "erikson")
        assert are_similar("erikson", "erik")

    def test_small_edit_matches(self):
        assert are_similar("smyth", "smith")

    def test_shared_prefix_allows_extra_edit(self):
        # distance 2, threshold 2, shared "ja" prefix
        assert are_similar("jain", "jane")
        # distance 1 after dropping "c"
        assert are_similar("erickson", "erikson")

    def test_unrelated_words(self):
        assert not are_similar("cat", "dog")
        assert not are_similar("report", "erikson")

    def test_short_words_rejected(self):
        assert not are_similar("ab", "abc")

    def test_length_guard_precedes_substring(self):
        assert not are_similar("abcdefghij", "abc")

    @pytest.mark.parametrize("a,b", [("nguyen", "win"), ("kubernetes", "cooper"), ("jain", "jane")])
    def test_symmetric(self, a, b):
        assert are_similar(a, b) == are_similar(b, a)


def test_common_affixes():
    assert common_prefix_length("erikson", "erik") == 4
    assert common_suffix_length("jackson", "erikson") == 4
    assert common_prefix_length("", "abc") == 0


def test_stop_words_cover_numbers_and_pronouns():
    assert {"one", "billion", "they", "with"} <= STOP_WORDS
