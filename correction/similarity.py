"""Fuzzy word similarity used to match keywords against transcript words."""
from __future__ import annotations

from evaluation.metrics import edit_distance

# Common English words that are never replaced by keyword matching.
STOP_WORDS = frozenset({
    # Pronouns
    "i", "you", "he", "she", "it", "we", "they", "me", "him", "her", "us", "them",
    "my", "your", "his", "its", "our", "their", "mine", "yours", "hers", "ours", "theirs",
    "this", "that", "these", "those", "who", "whom", "what", "which", "whose",
    # Verbs
    "is", "are", "was", "were", "be", "been", "being", "am",
    "have", "has", "had", "having", "do", "does", "did", "doing", "done",
    "will", "would", "shall", "should", "may", "might", "must", "can", "could",
    "get", "got", "getting", "go", "goes", "went", "going", "gone",
    "come", "came", "coming", "see", "saw", "seen", "know", "knew", "known",
    "think", "thought", "make", "made", "take", "took", "taken", "give", "gave", "given",
    "say", "said", "tell", "told", "ask", "asked", "use", "used", "want", "wanted",
    "need", "needed", "try", "tried", "let", "put", "keep", "kept", "look", "looked",
    # Articles and determiners
    "a", "an", "the", "some", "any", "no", "every", "each", "all", "both", "few", "many",
    "much", "more", "most", "other", "another", "such",
    # Prepositions
    "in", "on", "at", "to", "for", "of", "with", "by", "from", "up", "down", "out",
    "about", "into", "over", "after", "before", "between", "under", "through", "during",
    # Conjunctions
    "and", "or", "but", "so", "yet", "nor", "if", "then", "than", "because", "while",
    "although", "unless", "since", "when", "where", "as",
    # Adverbs
    "not", "very", "just", "also", "only", "even", "still", "already", "always", "never",
    "often", "sometimes", "usually", "really", "well", "now", "here", "there", "how", "why",
    # Everyday words
    "yes", "okay", "ok", "thank", "thanks", "please", "sorry", "hello", "hi", "bye",
    "good", "great", "bad", "new", "old", "first", "last", "long", "short", "big", "small",
    "high", "low", "right", "left", "next", "back", "same", "different", "own", "able",
    "way", "thing", "things", "time", "times", "year", "years", "day", "days", "week", "weeks",
    "part", "place", "case", "point", "fact", "end", "kind", "lot", "set",
    # Numbers
    "one", "two", "three", "four", "five", "six", "seven", "eight", "nine", "ten",
    "hundred", "thousand", "million", "billion",
})

MIN_WORD_LENGTH = 3
EDIT_RATIO = 0.4


def is_stop_word(word: str) -> bool:
    return word in STOP_WORDS


def common_prefix_length(a: str, b: str) -> int:
    count = 0
    for ca, cb in zip(a, b):
        if ca != cb:
            break
        count += 1
    return count


def common_suffix_length(a: str, b: str) -> int:
    return common_prefix_length(a[::-1], b[::-1])


def are_similar(a: str, b: str) -> bool:
    """
    Decide whether two lowercase words plausibly name the same thing.

    Stop words and words shorter than three characters never match. A word
    contained in the other always matches ("erik" / "erikson"). Otherwise
    the edit distance must stay within 40% of the longer word (at least 2),
    with one extra edit allowed when the words share a two-letter prefix or
    suffix.

    Args:
        a: First word, already lowercased and stripped of punctuation
        b: Second word, same form

    Returns:
        True if the words are similar
    """
    if a in STOP_WORDS or b in STOP_WORDS:
        return False

    max_len = max(len(a), len(b))
    min_len = min(len(a), len(b))
    if min_len < MIN_WORD_LENGTH:
        return False

    if abs(len(a) - len(b)) > max(3, max_len // 2):
        return False

    if a in b or b in a:
        return True

    threshold = max(2, int(max_len * EDIT_RATIO))
    distance = edit_distance(a, b)
    if common_prefix_length(a, b) >= 2 or common_suffix_length(a, b) >= 2:
        return distance <= threshold + 1
    return distance <= threshold
