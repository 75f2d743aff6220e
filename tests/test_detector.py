"""Behavioural tests for the tiered language detector.

The n-gram tier is disabled here so every assertion exercises the
heuristic tiers (stopword → script → diacritic → fallback) only.
"""

from __future__ import annotations

import pytest

from langservice.detection.detector import LanguageDetector
from langservice.detection.evaluation import FIXTURE_SAMPLES, evaluate
from langservice.detection.result import DetectionMethod
from langservice.detection.stopwords import StopwordStrategy
from langservice.detection.tables import DEFAULT_TABLES, LATIN, ReferenceTables
from langservice.detection.thresholds import Thresholds

ACCEPTANCE_THRESHOLD = 0.5


@pytest.fixture
def detector() -> LanguageDetector:
    return LanguageDetector(use_ngram=False)


# ── Observed fixture ────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "text, expected",
    [(s.text, s.expected) for s in FIXTURE_SAMPLES],
)
def test_fixture_scenarios(detector: LanguageDetector, text: str, expected: str):
    result = detector.detect(text)
    assert result.language == expected
    assert result.method is DetectionMethod.STOPWORD


def test_fixture_accuracy_is_perfect(detector: LanguageDetector):
    report = evaluate(detector)
    assert report.total == 5
    assert report.correct == 5
    assert report.accuracy == 100.0


def test_evaluate_with_no_samples(detector: LanguageDetector):
    report = evaluate(detector, [])
    assert report.total == 0
    assert report.accuracy == 0.0


# ── Stopword-dominated samples ──────────────────────────────────────────────

STOPWORD_SAMPLES = {
    "en": "the and of with this that would they",
    "es": "el los las pero muy porque también usted",
    "fr": "je nous vous avec dans mais très pour",
    "de": "und der nicht ich ist mit auch sehr",
    "it": "il della questo molto perché sono anche gli",
    "pt": "você não obrigado também isso minha muito agora",
    "nl": "het een niet zijn ook maar naar wij",
    "ru": "и в не на я что он с",
    "el": "και το να είναι η ο με για",
    "ar": "في من على إلى هذا أن لا ما",
    "he": "של את על זה לא הוא עם כי",
    "hi": "और का की के है में से को",
    "ko": "나는 그리고 하지만 그 이 저는 우리는 있다",
}


@pytest.mark.parametrize("code, text", sorted(STOPWORD_SAMPLES.items()))
def test_stopword_samples_are_confident(detector: LanguageDetector, code: str, text: str):
    result = detector.detect(text)
    assert result.language == code
    assert result.method is DetectionMethod.STOPWORD
    assert result.confidence >= ACCEPTANCE_THRESHOLD
    assert 0.0 <= result.confidence <= 1.0


@pytest.mark.parametrize(
    "profile",
    [p for p in DEFAULT_TABLES.profiles if p.stopwords and DEFAULT_TABLES.system_of(p.code) != LATIN],
    ids=lambda p: p.code,
)
def test_every_spaced_script_has_its_own_stopwords(detector: LanguageDetector, profile):
    result = detector.detect(" ".join(sorted(profile.stopwords)[:6]))
    assert result.language == profile.code
    assert result.method is DetectionMethod.STOPWORD
    assert result.confidence >= ACCEPTANCE_THRESHOLD


def test_only_unspaced_scripts_lack_stopwords():
    # Thai, CJK and the Southeast Asian scripts do not separate words with spaces
    without = {p.code for p in DEFAULT_TABLES.profiles if not p.stopwords}
    assert without == {"th", "ja", "zh", "my", "km", "lo"}


def test_single_word_is_less_certain_than_a_sentence(detector: LanguageDetector):
    word = detector.detect("hello")
    sentence = detector.detect("hello how are you today")
    assert word.language == sentence.language == "en"
    assert word.method is DetectionMethod.STOPWORD
    assert word.confidence == 0.25
    assert word.confidence < sentence.confidence
    assert not word.is_confident(ACCEPTANCE_THRESHOLD)


@pytest.mark.parametrize("text, expected", [("hola", "es"), ("hi", "en")])
def test_one_word_is_never_fully_confident(detector: LanguageDetector, text: str, expected: str):
    result = detector.detect(text)
    assert result.language == expected
    assert result.confidence < ACCEPTANCE_THRESHOLD


def test_german_sentence_with_content_words(detector: LanguageDetector):
    result = detector.detect("Ich bin müde und möchte schlafen")
    # 4 of 6 tokens are German function words, no other language scores
    assert result.confidence == pytest.approx(0.6667)
    assert result.is_confident(ACCEPTANCE_THRESHOLD)


# ── Boundaries ──────────────────────────────────────────────────────────────

@pytest.mark.parametrize("text", ["", "   ", "\n\t  \r\n", "123 456 !!!", "¿?"])
def test_blank_input_falls_back_at_minimum_confidence(detector: LanguageDetector, text: str):
    result = detector.detect(text)
    assert result.language == "en"
    assert result.confidence == 0.0
    assert result.method is DetectionMethod.FALLBACK


def test_unrecognised_words_fall_back_with_low_confidence(detector: LanguageDetector):
    result = detector.detect("xyzzy qwrtp")
    assert result.language == "en"
    assert result.confidence == 0.1
    assert result.method is DetectionMethod.FALLBACK


def test_custom_default_language():
    detector = LanguageDetector(tables=DEFAULT_TABLES.with_default("de"), use_ngram=False)
    assert detector.detect("").language == "de"
    assert detector.detect("xyzzy qwrtp").language == "de"


@pytest.mark.parametrize("value", [None, 12345, b"\xff\xfe"])
def test_non_text_input_never_raises(detector: LanguageDetector, value):
    result = detector.detect(value)
    assert DEFAULT_TABLES.is_supported(result.language)
    assert result.method is DetectionMethod.FALLBACK


def test_utf8_bytes_are_decoded(detector: LanguageDetector):
    result = detector.detect("Hola cómo estás hoy".encode("utf-8"))
    assert result.language == "es"


def test_very_long_input_is_truncated(detector: LanguageDetector):
    result = detector.detect("the weather " * 200_000)
    assert result.language == "en"
    assert result.method is DetectionMethod.STOPWORD


# ── Determinism ─────────────────────────────────────────────────────────────

def test_repeated_calls_are_identical(detector: LanguageDetector):
    text = "Bonjour comment allez vous"
    assert detector.detect(text) == detector.detect(text)
    assert LanguageDetector(use_ngram=False).detect(text) == detector.detect(text)


def test_diacritic_tie_resolves_by_priority(detector: LanguageDetector):
    # ñ (es) and ß (de) carry the same weight; es precedes de
    results = {detector.detect("ñ ß") for _ in range(5)}
    assert len(results) == 1
    result = results.pop()
    assert result.language == "es"
    assert result.method is DetectionMethod.DIACRITIC


def test_stopword_tie_resolves_by_priority():
    # "de la" matches Spanish and French equally
    detector = LanguageDetector(thresholds=Thresholds(stopword_min_margin=0.0), use_ngram=False)
    result = detector.detect("de la")
    assert result.language == "es"
    assert result.method is DetectionMethod.STOPWORD
    # full tie, two tokens: 0.5 * (1.0 + 0.0) scaled by 2/4
    assert result.confidence == 0.25


def test_tie_follows_table_order():
    fr_first = ReferenceTables(
        profiles=(
            DEFAULT_TABLES.profile("en"),
            DEFAULT_TABLES.profile("fr"),
            DEFAULT_TABLES.profile("es"),
        ),
        scripts=(),
    )
    strategy = StopwordStrategy(fr_first, Thresholds(stopword_min_margin=0.0))
    detector = LanguageDetector(tables=fr_first, strategies=[strategy])
    assert detector.detect("de la").language == "fr"


def test_tie_without_margin_is_not_a_stopword_decision(detector: LanguageDetector):
    result = detector.detect("de la")
    assert result.method is not DetectionMethod.STOPWORD


# ── Secondary tiers ─────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "text, expected",
    [
        ("Привет мир", "ru"),
        ("Καλημέρα κόσμε", "el"),
        ("مرحبا بالعالم", "ar"),
        ("שלום עולם", "he"),
        ("नमस्ते दुनिया", "hi"),
        ("สวัสดีชาวโลก", "th"),
        ("こんにちは世界", "ja"),
        ("你好世界", "zh"),
        ("안녕하세요 세계", "ko"),
        ("সোনার বাংলা", "bn"),
        ("வணக்கம் உலகம்", "ta"),
        ("నమస్కారం ప్రపంచం", "te"),
        ("ನಮಸ್ಕಾರ ಪ್ರಪಂಚ", "kn"),
        ("നമസ്കാരം ലോകം", "ml"),
        ("ආයුබෝවන් ලෝකය", "si"),
        ("નમસ્તે દુનિયા", "gu"),
        ("ਸਤ ਸ੍ਰੀ ਅਕਾਲ", "pa"),
        ("ନମସ୍କାର ଦୁନିଆ", "or"),
        ("မင်္ဂလာပါ ကမ္ဘာ", "my"),
        ("សួស្តី ពិភពលោក", "km"),
        ("ສະບາຍດີ ໂລກ", "lo"),
        ("გამარჯობა მსოფლიო", "ka"),
        ("Բարեւ աշխարհ", "hy"),
        ("ሰላም ዓለም", "am"),
    ],
)
def test_non_latin_scripts(detector: LanguageDetector, text: str, expected: str):
    result = detector.detect(text)
    assert result.language == expected
    assert result.method is DetectionMethod.SCRIPT
    assert 0.6 <= result.confidence <= 0.95


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Hello Привет мир как дела", "ru"),
        ("Hello Привет мир дела", "ru"),
        ("Hello how are you Иван", "en"),
        ("Merci καλημέρα κόσμε", "el"),
    ],
)
def test_mixed_scripts_follow_the_dominant_one(detector: LanguageDetector, text: str, expected: str):
    assert detector.detect(text).language == expected


@pytest.mark.parametrize(
    "text, expected",
    [("Straße", "de"), ("niño", "es"), ("façon cœur", "fr"), ("perciò", "it"), ("canções", "pt")],
)
def test_diacritics_decide_short_input(detector: LanguageDetector, text: str, expected: str):
    result = detector.detect(text)
    assert result.language == expected
    assert result.method is DetectionMethod.DIACRITIC
    assert 0.0 < result.confidence <= 0.7


# ── Failure isolation ───────────────────────────────────────────────────────

class _ExplodingStrategy:
    method = DetectionMethod.NGRAM

    def attempt(self, text):
        raise RuntimeError("boom")


def test_failing_strategy_is_skipped():
    strategies = [_ExplodingStrategy(), StopwordStrategy(DEFAULT_TABLES, Thresholds())]
    detector = LanguageDetector(strategies=strategies)
    result = detector.detect("Hello how are you today")
    assert result.language == "en"
    assert result.method is DetectionMethod.STOPWORD


def test_only_failing_strategies_fall_back():
    detector = LanguageDetector(strategies=[_ExplodingStrategy()])
    result = detector.detect("Hello how are you today")
    assert result.method is DetectionMethod.FALLBACK
    assert result.confidence == 0.1
