"""Static rule tables for transcript normalization.

Every table is an ordered tuple of ``(pattern, replacement)`` pairs. The
order is part of the normalization contract: entries are applied one after
another, and the contraction table in particular relies on literal
substring replacement, so an earlier entry shadows any later one that
would match the same text.
"""
from __future__ import annotations

from typing import Dict, Tuple

Rule = Tuple[str, str]

# Characters that do not decompose under NFKD but still carry a diacritic.
DIACRITICS: Tuple[Rule, ...] = (
    ("œ", "oe"), ("Œ", "OE"),
    ("ø", "o"), ("Ø", "O"),
    ("æ", "ae"), ("Æ", "AE"),
    ("ß", "ss"), ("ẞ", "SS"),
    ("đ", "d"), ("Đ", "D"),
    ("ð", "d"), ("Ð", "D"),
    ("þ", "th"), ("Þ", "th"),
    ("ł", "l"), ("Ł", "L"),
)

DIACRITIC_TRANSLATION: Dict[int, str] = str.maketrans(dict(DIACRITICS))

ABBREVIATIONS: Tuple[Rule, ...] = (
    # Titles and names
    ("mr", "mister"),
    ("mrs", "missus"),
    ("ms", "miss"),
    ("dr", "doctor"),
    ("prof", "professor"),
    ("st", "saint"),
    ("jr", "junior"),
    ("sr", "senior"),
    ("esq", "esquire"),
    # Government and military
    ("capt", "captain"),
    ("gov", "governor"),
    ("ald", "alderman"),
    ("gen", "general"),
    ("sen", "senator"),
    ("rep", "representative"),
    ("pres", "president"),
    ("rev", "reverend"),
    ("hon", "honorable"),
    ("asst", "assistant"),
    ("assoc", "associate"),
    ("lt", "lieutenant"),
    ("col", "colonel"),
    # Business
    ("vs", "versus"),
    ("inc", "incorporated"),
    ("ltd", "limited"),
    ("co", "company"),
    # Date
    ("ad", "ad"),
    ("bc", "bc"),
)

# Clock markers, only expanded right after a number ("7pm", "7 am").
TIME_MARKERS: Tuple[Rule, ...] = (
    ("am", "a m"),
    ("pm", "p m"),
)

FILLER_WORDS: Tuple[str, ...] = ("hmm", "mm", "mhm", "mmm", "uh", "um", "er", "ah", "eh", "huh")

SYMBOL_WORDS: Tuple[Rule, ...] = (
    ("$", " dollar "),
    ("&", " and "),
    ("%", " percent "),
)

CURRENCY_WORDS: Tuple[Rule, ...] = (
    ("€", " euro "),
    ("£", " pound "),
    ("¥", " yen "),
    ("©", " copyright "),
    ("®", " registered "),
    ("™", " trademark "),
)

# Applied with str.replace, top to bottom.
CONTRACTIONS: Tuple[Rule, ...] = (
    # Perfect tenses
    ("'d been", " had been"),
    ("'s been", " has been"),
    ("'d gone", " had gone"),
    ("'s gone", " has gone"),
    ("'d done", " had done"),
    ("'s got", " has got"),
    # Informal
    ("y'all", "you all"),
    ("i'ma", "i am going to"),
    ("imma", "i am going to"),
    ("ma'am", "madam"),
    ("wanna", "want to"),
    ("gonna", "going to"),
    ("gotta", "got to"),
    ("woulda", "would have"),
    ("coulda", "could have"),
    ("shoulda", "should have"),
    # Irregular
    ("can't", "can not"),
    ("won't", "will not"),
    ("ain't", "aint"),
    ("let's", "let us"),
    # Pronoun and wh- contractions
    ("it's", "it is"),
    ("that's", "that is"),
    ("there's", "there is"),
    ("where's", "where is"),
    ("here's", "here is"),
    ("what's", "what is"),
    ("who's", "who is"),
    ("how's", "how is"),
    ("i'm", "i am"),
    ("you're", "you are"),
    ("we're", "we are"),
    ("they're", "they are"),
    ("you've", "you have"),
    ("we've", "we have"),
    ("they've", "they have"),
    ("i've", "i have"),
    ("you'll", "you will"),
    ("we'll", "we will"),
    ("they'll", "they will"),
    ("i'll", "i will"),
    ("you'd", "you would"),
    ("we'd", "we would"),
    ("they'd", "they would"),
    ("i'd", "i would"),
    ("she's", "she is"),
    ("he's", "he is"),
    ("she'll", "she will"),
    ("he'll", "he will"),
    ("she'd", "she would"),
    ("he'd", "he would"),
    # Generic suffixes
    ("n't", " not"),
    ("'re", " are"),
    ("'ve", " have"),
    ("'ll", " will"),
    ("'d", " would"),
    ("'m", " am"),
    ("'t", " not"),
    ("'s", " is"),
)

ONES_WORDS: Tuple[str, ...] = ("one", "two", "three", "four", "five", "six", "seven", "eight", "nine")

TENS: Tuple[Tuple[str, int], ...] = (
    ("twenty", 20), ("thirty", 30), ("forty", 40), ("fifty", 50),
    ("sixty", 60), ("seventy", 70), ("eighty", 80), ("ninety", 90),
)

TEENS: Tuple[Rule, ...] = (
    ("ten", "10"), ("eleven", "11"), ("twelve", "12"), ("thirteen", "13"),
    ("fourteen", "14"), ("fifteen", "15"), ("sixteen", "16"), ("seventeen", "17"),
    ("eighteen", "18"), ("nineteen", "19"),
)

# Words folded into digit runs by the number parser.
UNIT_VALUES: Dict[str, int] = {
    "zero": 0, "oh": 0,
    "one": 1, "two": 2, "three": 3, "four": 4, "five": 5,
    "six": 6, "seven": 7, "eight": 8, "nine": 9, "ten": 10,
    "eleven": 11, "twelve": 12, "thirteen": 13, "fourteen": 14, "fifteen": 15,
    "sixteen": 16, "seventeen": 17, "eighteen": 18, "nineteen": 19,
    "twenty": 20, "thirty": 30, "forty": 40, "fifty": 50,
    "sixty": 60, "seventy": 70, "eighty": 80, "ninety": 90,
}

MULTIPLIERS: Dict[str, int] = {
    "hundred": 100,
    "thousand": 1_000,
    "million": 1_000_000,
    "billion": 1_000_000_000,
}

# Residual single-word numbers and ordinals, applied after the number parser.
NUMBER_WORDS: Tuple[Rule, ...] = (
    # English
    ("zero", "0"), ("one", "1"), ("two", "2"), ("three", "3"), ("four", "4"),
    ("five", "5"), ("six", "6"), ("seven", "7"), ("eight", "8"), ("nine", "9"),
    ("ten", "10"), ("eleven", "11"), ("twelve", "12"), ("thirteen", "13"),
    ("fourteen", "14"), ("fifteen", "15"), ("sixteen", "16"), ("seventeen", "17"),
    ("eighteen", "18"), ("nineteen", "19"), ("twenty", "20"), ("thirty", "30"),
    ("forty", "40"), ("fifty", "50"), ("sixty", "60"), ("seventy", "70"),
    ("eighty", "80"), ("ninety", "90"), ("hundred", "100"), ("thousand", "1000"),
    ("billion", "1000000000"),
    ("first", "1st"), ("second", "2nd"), ("third", "3rd"), ("fourth", "4th"),
    ("fifth", "5th"), ("sixth", "6th"), ("seventh", "7th"), ("eighth", "8th"),
    ("ninth", "9th"), ("tenth", "10th"), ("eleventh", "11th"), ("twelfth", "12th"),
    ("thirteenth", "13th"), ("fourteenth", "14th"), ("fifteenth", "15th"),
    ("sixteenth", "16th"), ("seventeenth", "17th"), ("eighteenth", "18th"),
    ("nineteenth", "19th"), ("twentieth", "20th"), ("thirtieth", "30th"),
    ("fortieth", "40th"), ("fiftieth", "50th"), ("sixtieth", "60th"),
    ("seventieth", "70th"), ("eightieth", "80th"), ("ninetieth", "90th"),
    ("hundredth", "100th"), ("thousandth", "1000th"),
    # Italian
    ("uno", "1"), ("due", "2"), ("tre", "3"), ("quattro", "4"), ("cinque", "5"),
    ("sei", "6"), ("sette", "7"), ("otto", "8"), ("nove", "9"), ("dieci", "10"),
    ("undici", "11"), ("dodici", "12"), ("tredici", "13"), ("quattordici", "14"),
    ("quindici", "15"), ("sedici", "16"), ("diciassette", "17"), ("diciotto", "18"),
    ("diciannove", "19"), ("venti", "20"), ("trenta", "30"), ("quaranta", "40"),
    ("cinquanta", "50"), ("sessanta", "60"), ("settanta", "70"), ("ottanta", "80"),
    ("novanta", "90"), ("cento", "100"), ("mila", "1000"), ("milione", "1000000"),
    ("milioni", "1000000"), ("miliardo", "1000000000"), ("miliardi", "1000000000"),
    ("primo", "1st"), ("secondo", "2nd"), ("terzo", "3rd"), ("quarto", "4th"),
    ("quinto", "5th"), ("sesto", "6th"), ("settimo", "7th"), ("ottavo", "8th"),
    ("nono", "9th"), ("decimo", "10th"), ("undicesimo", "11th"), ("dodicesimo", "12th"),
    ("tredicesimo", "13th"), ("quattordicesimo", "14th"), ("quindicesimo", "15th"),
    ("ventesimo", "20th"), ("trentesimo", "30th"), ("centesimo", "100th"),
    # French ("six" is shared with English)
    ("zéro", "0"), ("un", "1"), ("deux", "2"), ("trois", "3"), ("quatre", "4"),
    ("cinq", "5"), ("sept", "7"), ("huit", "8"), ("neuf", "9"),
    ("dix", "10"), ("onze", "11"), ("douze", "12"), ("treize", "13"), ("quatorze", "14"),
    ("quinze", "15"), ("seize", "16"), ("dix-sept", "17"), ("dix-huit", "18"),
    ("dix-neuf", "19"), ("vingt", "20"), ("trente", "30"), ("quarante", "40"),
    ("cinquante", "50"), ("soixante", "60"), ("soixante-dix", "70"), ("quatre-vingts", "80"),
    ("quatre-vingt-dix", "90"), ("cent", "100"), ("mille", "1000"), ("million", "1000000"),
    ("millions", "1000000"), ("milliard", "1000000000"), ("milliards", "1000000000"),
    ("premier", "1st"), ("première", "1st"), ("deuxième", "2nd"), ("troisième", "3rd"),
    ("quatrième", "4th"), ("cinquième", "5th"), ("sixième", "6th"), ("septième", "7th"),
    ("huitième", "8th"), ("neuvième", "9th"), ("dixième", "10th"), ("onzième", "11th"),
    ("douzième", "12th"), ("treizième", "13th"), ("quatorzième", "14th"), ("quinzième", "15th"),
    ("seizième", "16th"), ("vingtième", "20th"), ("trentième", "30th"), ("centième", "100th"),
)
