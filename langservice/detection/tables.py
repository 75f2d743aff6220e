"""Static reference tables for language detection.

Every table is built once at import time and exposed through the frozen
``DEFAULT_TABLES`` bundle.  Profiles are stored in **priority order**: when
two languages score equally under any strategy, the one listed first wins.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Iterable, Mapping

# Locale used when a code has no speech mapping (and for "auto").
DEFAULT_SPEECH_LOCALE = "en-US"

# Writing system of every language without a script range of its own
LATIN = "latin"


@dataclass(frozen=True)
class LanguageProfile:
    """Reference data for one supported language."""

    code: str
    name: str
    speech_locale: str
    stopwords: frozenset[str] = frozenset()
    # Character or letter sequence -> weight added per occurrence
    markers: Mapping[str, float] = field(default_factory=lambda: MappingProxyType({}))


@dataclass(frozen=True)
class ScriptRange:
    """Inclusive Unicode block whose letters point at ``code``."""

    code: str
    first: int
    last: int

    def contains(self, ch: str) -> bool:
        return self.first <= ord(ch) <= self.last


@dataclass(frozen=True)
class ReferenceTables:
    """Immutable bundle shared by every ``detect`` call."""

    profiles: tuple[LanguageProfile, ...]
    scripts: tuple[ScriptRange, ...]
    default_language: str = "en"

    def __post_init__(self) -> None:
        if not self.profiles:
            raise ValueError("At least one language profile is required")
        if self.default_language not in self.codes:
            raise ValueError(
                f"Default language '{self.default_language}' is not supported"
            )
        for script in self.scripts:
            if script.code not in self.codes:
                raise ValueError(f"Script range for unknown language '{script.code}'")

    @property
    def codes(self) -> tuple[str, ...]:
        return tuple(p.code for p in self.profiles)

    def is_supported(self, code: str) -> bool:
        return code in self.codes

    def profile(self, code: str) -> LanguageProfile | None:
        for p in self.profiles:
            if p.code == code:
                return p
        return None

    def priority(self, code: str) -> int:
        """Position in the tie-break ordering (lower wins)."""
        try:
            return self.codes.index(code)
        except ValueError:
            return len(self.profiles)

    def ranked(self, scores: Mapping[str, float]) -> list[tuple[str, float]]:
        """Sort ``scores`` best-first, breaking ties by priority order."""
        return sorted(scores.items(), key=lambda kv: (-kv[1], self.priority(kv[0])))

    def writing_system(self, token: str) -> str:
        """Script of the token's first letter: a script-range code or ``LATIN``."""
        for ch in token:
            if not ch.isalpha():
                continue
            for script in self.scripts:
                if script.contains(ch):
                    return script.code
            return LATIN
        return LATIN

    def system_of(self, code: str) -> str:
        """Writing system a language's stopwords are written in."""
        if any(script.code == code for script in self.scripts):
            return code
        return LATIN

    def with_default(self, code: str) -> "ReferenceTables":
        return replace(self, default_language=code)


def _words(words: Iterable[str]) -> frozenset[str]:
    return frozenset(unicodedata.normalize("NFC", w).lower() for w in words)


def _markers(**weights: float) -> Mapping[str, float]:
    return MappingProxyType(dict(weights))


# ── Latin-script languages (stopwords + diacritic markers) ──────────────────

_ENGLISH = LanguageProfile(
    code="en",
    name="English",
    speech_locale="en-US",
    stopwords=_words({
        "a", "about", "after", "all", "also", "am", "an", "and", "any", "are",
        "as", "at", "back", "be", "because", "been", "but", "by", "can",
        "come", "could", "day", "did", "do", "does", "even", "first", "for",
        "from", "get", "give", "go", "good", "had", "has", "have", "he",
        "hello", "her", "here", "hi", "him", "his", "how", "i", "if", "in",
        "into", "is", "it", "its", "just", "know", "like", "look", "make",
        "many", "me", "most", "much", "my", "new", "no", "not", "now", "of",
        "on", "one", "only", "or", "other", "our", "out", "over", "people",
        "please", "say", "see", "she", "should", "so", "some", "take", "than",
        "thanks", "that", "the", "their", "them", "then", "there", "these",
        "they", "think", "this", "time", "to", "today", "two", "up", "us",
        "use", "very", "want", "was", "way", "we", "well", "were", "what",
        "when", "where", "which", "who", "why", "will", "with", "work",
        "would", "year", "yes", "you", "your",
    }),
)

_SPANISH = LanguageProfile(
    code="es",
    name="Spanish",
    speech_locale="es-ES",
    stopwords=_words({
        "a", "al", "algo", "aquí", "así", "año", "años", "bien", "buenas",
        "buenos", "cómo", "como", "con", "cuál", "cuando", "cuándo", "de",
        "del", "dónde", "donde", "el", "él", "ella", "ellos", "en", "entre",
        "era", "es", "esa", "ese", "eso", "esta", "está", "estás", "estoy",
        "este", "esto", "gracias", "hay", "hola", "hoy", "la", "las", "le",
        "les", "lo", "los", "más", "me", "mi", "muy", "nada", "no", "nos",
        "nosotros", "o", "para", "pero", "poco", "por", "porque", "qué",
        "que", "quién", "se", "sí", "si", "sin", "sobre", "su", "sus",
        "también", "tengo", "tiene", "todo", "tu", "tú", "un", "una", "uno",
        "usted", "y", "ya", "yo",
    }),
    markers=_markers(**{
        "ñ": 2.0, "¿": 2.0, "¡": 2.0,
        "á": 0.5, "í": 0.5, "ó": 0.5, "ú": 0.5,
    }),
)

_FRENCH = LanguageProfile(
    code="fr",
    name="French",
    speech_locale="fr-FR",
    stopwords=_words({
        "à", "a", "ai", "allez", "au", "aujourd", "aussi", "avec", "avez",
        "avoir", "bien", "bonjour", "bonsoir", "c", "ça", "ce", "cela", "ces",
        "cette", "comme", "comment", "dans", "de", "des", "du", "elle", "en",
        "est", "et", "être", "il", "ils", "j", "je", "l", "la", "le", "les",
        "leur", "lui", "m", "ma", "mais", "merci", "moi", "mon", "n", "ne",
        "nous", "on", "ou", "où", "par", "pas", "peu", "plus", "pour", "qu",
        "que", "qui", "s", "sa", "salut", "se", "ses", "son", "sont", "sur",
        "t", "te", "toi", "ton", "tout", "très", "tu", "un", "une", "vous",
        "votre", "vos", "y",
    }),
    markers=_markers(**{
        "ç": 1.0, "œ": 2.0, "ê": 1.0, "ë": 1.0, "î": 1.0, "ï": 1.0, "û": 1.0,
        "à": 0.5, "â": 0.5, "è": 0.5, "é": 0.5, "ô": 0.5,
    }),
)

_GERMAN = LanguageProfile(
    code="de",
    name="German",
    speech_locale="de-DE",
    stopwords=_words({
        "aber", "alle", "als", "am", "an", "auch", "auf", "aus", "bei", "bin",
        "bist", "bitte", "da", "danke", "das", "dass", "dem", "den", "der",
        "des", "die", "dir", "doch", "du", "ein", "eine", "einem", "einen",
        "einer", "er", "es", "für", "guten", "hallo", "hat", "haben", "ich",
        "ihr", "im", "in", "ist", "ja", "kann", "mein", "meine", "mich",
        "mir", "mit", "möchte", "nach", "nein", "nicht", "noch", "nur",
        "oder", "schon", "sehr", "sein", "sich", "sie", "sind", "so", "über",
        "um", "und", "uns", "von", "vor", "war", "was", "wie", "wir", "wird",
        "zu", "zum", "zur",
    }),
    markers=_markers(**{
        "ß": 2.0, "ä": 1.0, "ö": 1.0, "ü": 1.0, "sch": 0.5,
    }),
)

_ITALIAN = LanguageProfile(
    code="it",
    name="Italian",
    speech_locale="it-IT",
    stopwords=_words({
        "a", "al", "alla", "anche", "buongiorno", "c", "che", "chi", "ci",
        "ciao", "come", "con", "cosa", "da", "del", "della", "di", "dove",
        "e", "è", "gli", "grazie", "ha", "ho", "i", "il", "in", "io", "la",
        "le", "lei", "lo", "lui", "ma", "mi", "mio", "molto", "ne", "noi",
        "non", "oggi", "per", "perché", "più", "quando", "quello", "questo",
        "se", "sei", "si", "sì", "sono", "sta", "stai", "sto", "su", "ti",
        "tu", "tutto", "un", "una", "uno", "voi",
    }),
    markers=_markers(**{
        "ì": 2.0, "ò": 2.0, "ù": 1.0, "à": 0.5, "è": 0.5,
    }),
)

_PORTUGUESE = LanguageProfile(
    code="pt",
    name="Portuguese",
    speech_locale="pt-BR",
    stopwords=_words({
        "a", "ao", "aos", "agora", "aqui", "as", "até", "bem", "bom", "com",
        "como", "da", "das", "de", "do", "dos", "e", "é", "ela", "ele",
        "eles", "em", "está", "estou", "eu", "isso", "isto", "já", "mais",
        "mas", "me", "meu", "minha", "muito", "na", "não", "nas", "no", "nos",
        "nós", "o", "obrigado", "obrigada", "olá", "onde", "os", "ou", "para",
        "pela", "pelo", "por", "porque", "quando", "que", "se", "sem", "seu",
        "sua", "também", "tem", "tudo", "um", "uma", "você", "vocês",
    }),
    markers=_markers(**{
        "ã": 2.0, "õ": 2.0, "ç": 1.0,
        "â": 0.5, "ê": 0.5, "ô": 0.5, "á": 0.5, "é": 0.5,
    }),
)

_DUTCH = LanguageProfile(
    code="nl",
    name="Dutch",
    speech_locale="nl-NL",
    stopwords=_words({
        "aan", "al", "alles", "als", "ben", "bij", "dag", "dank", "dat", "de",
        "die", "dit", "doen", "een", "en", "er", "geen", "goed", "goedemorgen",
        "hallo", "heb", "hebben", "het", "hier", "hij", "hoe", "ik", "in",
        "is", "ja", "je", "jij", "kan", "maar", "me", "met", "mijn", "na",
        "naar", "nee", "niet", "nog", "nu", "of", "om", "ook", "op", "over",
        "te", "tot", "uit", "van", "veel", "voor", "wat", "we", "wij",
        "wordt", "zal", "zij", "zijn", "zo",
    }),
    markers=_markers(ij=1.0),
)

# ── Non-Latin scripts ───────────────────────────────────────────────────────
# Languages written with spaces between words carry stopwords so the word
# tier can decide them.  Scripts without word spacing (th, ja, zh, my, km,
# lo) are decided by Unicode block alone.

_SCRIPT_PROFILES = (
    LanguageProfile(
        code="ru", name="Russian", speech_locale="ru-RU",
        stopwords=_words({
            "и", "в", "не", "на", "я", "что", "он", "с", "как", "это", "она",
            "мы", "вы", "они", "но", "да", "нет", "так", "все", "его", "по",
            "за", "из", "у", "о", "к", "от", "же", "бы", "был", "было", "для",
            "ты", "меня", "мне", "спасибо",
        }),
    ),
    LanguageProfile(
        code="el", name="Greek", speech_locale="el-GR",
        stopwords=_words({
            "και", "το", "να", "είναι", "η", "ο", "με", "για", "του", "της",
            "τα", "οι", "σε", "από", "που", "δεν", "θα", "αυτό", "ένα", "μια",
            "στο", "στη", "τι", "εγώ", "εσύ",
        }),
    ),
    LanguageProfile(
        code="ar", name="Arabic", speech_locale="ar-SA",
        stopwords=_words({
            "في", "من", "على", "إلى", "عن", "مع", "هذا", "هذه", "أن", "إن",
            "لا", "ما", "هو", "هي", "كان", "كل", "التي", "الذي", "ذلك", "أنا",
            "نحن", "هل", "قد", "لم", "بعد",
        }),
    ),
    LanguageProfile(
        code="he", name="Hebrew", speech_locale="he-IL",
        stopwords=_words({
            "של", "את", "על", "זה", "לא", "הוא", "היא", "עם", "כי", "אני",
            "מה", "גם", "אבל", "יש", "אם", "או", "כל", "היה", "אנחנו",
        }),
    ),
    LanguageProfile(
        code="hi", name="Hindi", speech_locale="hi-IN",
        stopwords=_words({
            "और", "का", "की", "के", "है", "में", "से", "को", "यह", "वह", "हैं",
            "था", "थी", "पर", "भी", "नहीं", "एक", "तो", "हम", "मैं", "आप",
            "क्या", "लिए", "कि", "जो",
        }),
    ),
    LanguageProfile(code="th", name="Thai", speech_locale="th-TH"),
    LanguageProfile(code="ja", name="Japanese", speech_locale="ja-JP"),
    LanguageProfile(code="zh", name="Chinese", speech_locale="zh-CN"),
    LanguageProfile(
        code="ko", name="Korean", speech_locale="ko-KR",
        stopwords=_words({
            "그리고", "하지만", "그", "이", "저", "저는", "나는", "우리는",
            "있다", "없다", "것", "수", "등", "및", "또는", "그런데", "그래서",
            "제가", "이것", "그것", "입니다", "있습니다", "합니다", "네", "아니요",
        }),
    ),
    LanguageProfile(
        code="bn", name="Bengali", speech_locale="bn-BD",
        stopwords=_words({
            "এবং", "এই", "না", "করে", "আমি", "তুমি", "সে", "যে", "কি", "ও",
            "থেকে", "জন্য", "আছে", "একটি", "আমার",
        }),
    ),
    LanguageProfile(
        code="ta", name="Tamil", speech_locale="ta-IN",
        stopwords=_words({
            "மற்றும்", "ஒரு", "இது", "அது", "என்று", "நான்", "நீ", "அவர்",
            "இந்த", "அந்த", "உள்ள", "இல்லை", "என்ன", "போது", "மேலும்",
        }),
    ),
    LanguageProfile(
        code="te", name="Telugu", speech_locale="te-IN",
        stopwords=_words({
            "మరియు", "ఒక", "ఇది", "అది", "నేను", "మీరు", "అతను", "ఆమె",
            "కాదు", "ఈ", "ఆ", "లో", "కూడా", "ఏమి", "ఉంది",
        }),
    ),
    LanguageProfile(
        code="kn", name="Kannada", speech_locale="kn-IN",
        stopwords=_words({
            "ಮತ್ತು", "ಒಂದು", "ಇದು", "ಅದು", "ನಾನು", "ನೀವು", "ಅವನು", "ಅವಳು",
            "ಈ", "ಆ", "ಇಲ್ಲ", "ಏನು", "ಸಹ", "ಇದೆ",
        }),
    ),
    LanguageProfile(
        code="ml", name="Malayalam", speech_locale="ml-IN",
        stopwords=_words({
            "ഒരു", "ഈ", "ആ", "ഞാൻ", "നിങ്ങൾ", "അവൻ", "അവൾ", "ഇത്", "അത്",
            "ഇല്ല", "എന്ത്", "ആണ്", "ഉണ്ട്", "പക്ഷേ",
        }),
    ),
    LanguageProfile(
        code="si", name="Sinhala", speech_locale="si-LK",
        stopwords=_words({
            "සහ", "මේ", "ඒ", "මම", "ඔබ", "ඔහු", "ඇය", "නැහැ", "කුමක්ද",
            "වගේ", "නම්", "තමයි",
        }),
    ),
    LanguageProfile(
        code="gu", name="Gujarati", speech_locale="gu-IN",
        stopwords=_words({
            "અને", "એક", "આ", "તે", "હું", "તમે", "છે", "નથી", "શું", "પણ",
            "માં", "થી", "માટે", "હતું",
        }),
    ),
    LanguageProfile(
        code="pa", name="Punjabi", speech_locale="pa-IN",
        stopwords=_words({
            "ਅਤੇ", "ਇੱਕ", "ਇਹ", "ਉਹ", "ਮੈਂ", "ਤੁਸੀਂ", "ਹੈ", "ਹਨ", "ਨਹੀਂ",
            "ਕੀ", "ਵੀ", "ਵਿੱਚ", "ਨੂੰ", "ਦਾ", "ਦੀ", "ਦੇ",
        }),
    ),
    LanguageProfile(
        code="or", name="Odia", speech_locale="or-IN",
        stopwords=_words({
            "ଏବଂ", "ଏହି", "ସେହି", "ମୁଁ", "ତୁମେ", "ସେ", "ନାହିଁ", "କଣ", "ଓ",
            "ପାଇଁ", "ରେ", "ଅଛି",
        }),
    ),
    LanguageProfile(code="my", name="Myanmar", speech_locale="my-MM"),
    LanguageProfile(code="km", name="Khmer", speech_locale="km-KH"),
    LanguageProfile(code="lo", name="Lao", speech_locale="lo-LA"),
    LanguageProfile(
        code="ka", name="Georgian", speech_locale="ka-GE",
        stopwords=_words({
            "და", "არის", "ეს", "ის", "მე", "შენ", "ჩვენ", "არა", "რა",
            "როგორ", "თუ", "მაგრამ", "ან", "კი", "ძალიან",
        }),
    ),
    LanguageProfile(
        code="hy", name="Armenian", speech_locale="hy-AM",
        stopwords=_words({
            "և", "եմ", "ես", "է", "են", "այս", "այդ", "որ", "ինչ", "չէ",
            "մենք", "դուք", "նա", "բայց", "համար",
        }),
    ),
    LanguageProfile(
        code="am", name="Amharic", speech_locale="am-ET",
        stopwords=_words({
            "እና", "ነው", "ይህ", "ያ", "እኔ", "አንተ", "እሱ", "እሷ", "አይደለም",
            "ምን", "ግን", "ውስጥ", "ላይ", "ጋር", "ናቸው",
        }),
    ),
)

_SCRIPT_RANGES = (
    ScriptRange("ru", 0x0400, 0x04FF),  # Cyrillic
    ScriptRange("el", 0x0370, 0x03FF),  # Greek
    ScriptRange("ar", 0x0600, 0x06FF),  # Arabic
    ScriptRange("he", 0x0590, 0x05FF),  # Hebrew
    ScriptRange("hi", 0x0900, 0x097F),  # Devanagari
    ScriptRange("th", 0x0E00, 0x0E7F),  # Thai
    ScriptRange("ja", 0x3040, 0x30FF),  # Hiragana + Katakana
    ScriptRange("zh", 0x4E00, 0x9FFF),  # CJK Unified Ideographs
    ScriptRange("ko", 0xAC00, 0xD7AF),  # Hangul syllables
    ScriptRange("ko", 0x1100, 0x11FF),  # Hangul Jamo
    ScriptRange("bn", 0x0980, 0x09FF),  # Bengali
    ScriptRange("ta", 0x0B80, 0x0BFF),  # Tamil
    ScriptRange("te", 0x0C00, 0x0C7F),  # Telugu
    ScriptRange("kn", 0x0C80, 0x0CFF),  # Kannada
    ScriptRange("ml", 0x0D00, 0x0D7F),  # Malayalam
    ScriptRange("si", 0x0D80, 0x0DFF),  # Sinhala
    ScriptRange("gu", 0x0A80, 0x0AFF),  # Gujarati
    ScriptRange("pa", 0x0A00, 0x0A7F),  # Gurmukhi
    ScriptRange("or", 0x0B00, 0x0B7F),  # Odia
    ScriptRange("my", 0x1000, 0x109F),  # Myanmar
    ScriptRange("km", 0x1780, 0x17FF),  # Khmer
    ScriptRange("lo", 0x0E80, 0x0EFF),  # Lao
    ScriptRange("ka", 0x10A0, 0x10FF),  # Georgian
    ScriptRange("hy", 0x0530, 0x058F),  # Armenian
    ScriptRange("am", 0x1200, 0x137F),  # Ethiopic
)

DEFAULT_TABLES = ReferenceTables(
    profiles=(
        _ENGLISH, _SPANISH, _FRENCH, _GERMAN, _ITALIAN, _PORTUGUESE, _DUTCH,
        *_SCRIPT_PROFILES,
    ),
    scripts=_SCRIPT_RANGES,
    default_language="en",
)

# Display names for codes the detector may meet from other systems
# (n-gram candidates, stored preferences), supported or not.
LANGUAGE_NAMES: Mapping[str, str] = MappingProxyType({
    "en": "English", "es": "Spanish", "fr": "French", "pt": "Portuguese",
    "de": "German", "it": "Italian", "ru": "Russian", "ja": "Japanese",
    "ko": "Korean", "zh": "Chinese", "ar": "Arabic", "hi": "Hindi",
    "th": "Thai", "vi": "Vietnamese", "tr": "Turkish", "cs": "Czech",
    "pl": "Polish", "hu": "Hungarian", "fi": "Finnish", "sv": "Swedish",
    "da": "Danish", "no": "Norwegian", "is": "Icelandic", "he": "Hebrew",
    "bn": "Bengali", "ta": "Tamil", "te": "Telugu", "ml": "Malayalam",
    "kn": "Kannada", "gu": "Gujarati", "pa": "Punjabi", "or": "Odia",
    "as": "Assamese", "ne": "Nepali", "si": "Sinhala", "my": "Myanmar",
    "km": "Khmer", "lo": "Lao", "ka": "Georgian", "hy": "Armenian",
    "am": "Amharic", "sw": "Swahili", "yo": "Yoruba", "ha": "Hausa",
    "ig": "Igbo", "zu": "Zulu", "af": "Afrikaans", "mt": "Maltese",
    "eu": "Basque", "cy": "Welsh", "ga": "Irish", "gd": "Scottish Gaelic",
    "br": "Breton", "ca": "Catalan", "gl": "Galician", "co": "Corsican",
    "nl": "Dutch", "be": "Belarusian", "uk": "Ukrainian", "bg": "Bulgarian",
    "hr": "Croatian", "sr": "Serbian", "bs": "Bosnian", "mk": "Macedonian",
    "sl": "Slovenian", "sk": "Slovak", "ro": "Romanian", "lv": "Latvian",
    "lt": "Lithuanian", "et": "Estonian", "sq": "Albanian", "el": "Greek",
    "id": "Indonesian", "ms": "Malay", "tl": "Filipino", "ceb": "Cebuano",
    "jw": "Javanese", "su": "Sundanese", "mg": "Malagasy", "haw": "Hawaiian",
    "mi": "Maori", "fo": "Faroese", "kl": "Greenlandic", "se": "Northern Sami",
    "fa": "Persian", "ur": "Urdu", "ti": "Tigrinya", "mn": "Mongolian",
    "kk": "Kazakh", "ky": "Kyrgyz", "uz": "Uzbek", "tg": "Tajik",
})


def language_name(code: str, tables: ReferenceTables = DEFAULT_TABLES) -> str:
    """Return the English name for ``code``, or the upper-cased code."""
    profile = tables.profile(code)
    if profile:
        return profile.name
    return LANGUAGE_NAMES.get(code, code.upper())


def speech_locale(code: str, tables: ReferenceTables = DEFAULT_TABLES) -> str:
    """Map a language code to a speech-recognition locale (``en`` → ``en-US``).

    ``"auto"`` and unknown codes resolve to ``en-US``.
    """
    profile = tables.profile(code)
    return profile.speech_locale if profile else DEFAULT_SPEECH_LOCALE
