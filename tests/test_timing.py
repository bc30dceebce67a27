from correction import KeywordDetection, TokenTiming, WordTiming, build_word_timings, find_best_overlap


def _tokens(*items):
    return [TokenTiming(token, start, end) for token, start, end in items]


class TestBuildWordTimings:

    def test_merges_subword_units(self):
        # Arrange
        timings = _tokens(
            ("▁thanks", 0.0, 0.4),
            ("▁w", 0.5, 0.6),
            ("in", 0.6, 0.8),
            ("▁up", 1.2, 1.4),
            ("date", 1.4, 1.6),
        )

        # Act
        words = build_word_timings(timings)

        # Assert
        assert words == [
            WordTiming("thanks", 0.0, 0.4),
            WordTiming("win", 0.5, 0.8),
            WordTiming("update", 1.2, 1.6),
        ]

    def test_first_unit_starts_a_word_without_marker(self):
        words = build_word_timings(_tokens(("he", 0.0, 0.1), ("llo", 0.1, 0.3), ("▁there", 0.4, 0.6)))

        assert [w.word for w in words] == ["hello", "there"]
        assert words[0].start_time == 0.0
        assert words[0].end_time == 0.3

    def test_placeholder_tokens_skipped(self):
        words = build_word_timings(_tokens(
            ("<blank>", 0.0, 0.1), ("▁go", 0.1, 0.2), ("<pad>", 0.2, 0.3), ("", 0.3, 0.3), ("od", 0.3, 0.4),
        ))

        assert words == [WordTiming("good", 0.1, 0.4)]

    def test_empty(self):
        assert build_word_timings([]) == []


class TestFindBestOverlap:

    def setup_method(self):
        self.words = [
            WordTiming("thanks", 0.0, 0.4),
            WordTiming("win", 0.5, 0.8),
            WordTiming("for", 0.9, 1.0),
        ]

    def test_largest_overlap_wins(self):
        detection = KeywordDetection("Nguyen", 2.0, 0.55, 0.85)

        assert find_best_overlap(detection, self.words) == 1

    def test_midpoint_alone_qualifies(self):
        detection = KeywordDetection("Nguyen", 2.0, 0.95, 0.95)

        assert find_best_overlap(detection, self.words) == 2

    def test_no_candidate(self):
        detection = KeywordDetection("Nguyen", 2.0, 5.0, 6.0)

        assert find_best_overlap(detection, self.words) is None

    def test_tie_keeps_earliest(self):
        words = [WordTiming("a", 0.0, 1.0), WordTiming("b", 2.0, 3.0)]
        detection = KeywordDetection("x", 1.0, 0.5, 2.5)

        # both overlap 0.5; only the midpoint 1.5 falls in neither
        assert find_best_overlap(detection, words) == 0
