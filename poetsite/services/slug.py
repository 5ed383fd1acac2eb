"""Slug generation for content URLs, plus the uniqueness check against the store."""

import re
import time
import unicodedata

from sqlalchemy.orm import Session

MAX_SLUG_LENGTH = 100

# Bengali block, ASCII lowercase letters and digits, whitespace, hyphen.
_DISALLOWED = re.compile(r"[^\u0980-\u09ffa-z0-9\s-]")
_NON_LATIN = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")

# Nukta letters: NFC keeps these decomposed (base consonant + U+09BC).
_BENGALI_DIGRAPHS: dict[str, str] = {
    "\u09a1\u09bc": "r",
    "\u09a2\u09bc": "rh",
    "\u09af\u09bc": "y",
}

_BENGALI_TO_LATIN: dict[str, str] = {
    # independent vowels
    "অ": "o", "আ": "a", "ই": "i", "ঈ": "i", "উ": "u", "ঊ": "u",
    "ঋ": "ri", "এ": "e", "ঐ": "oi", "ও": "o", "ঔ": "ou",
    # consonants
    "ক": "k", "খ": "kh", "গ": "g", "ঘ": "gh", "ঙ": "ng",
    "চ": "ch", "ছ": "chh", "জ": "j", "ঝ": "jh", "ঞ": "n",
    "ট": "t", "ঠ": "th", "ড": "d", "ঢ": "dh", "ণ": "n",
    "ত": "t", "থ": "th", "দ": "d", "ধ": "dh", "ন": "n",
    "প": "p", "ফ": "ph", "ব": "b", "ভ": "bh", "ম": "m",
    "য": "j", "র": "r", "ল": "l", "শ": "sh", "ষ": "sh",
    "স": "s", "হ": "h", "ৎ": "t",
    # vowel signs
    "া": "a", "ি": "i", "ী": "i", "ু": "u", "ূ": "u",
    "ৃ": "ri", "ে": "e", "ৈ": "oi", "ো": "o", "ৌ": "ou",
    # virama: no inherent vowel on the preceding consonant
    "্": "",
    # anusvara, visarga, chandrabindu
    "ং": "ng", "ঃ": "h", "ঁ": "n",
    # digits
    "০": "0", "১": "1", "২": "2", "৩": "3", "৪": "4",
    "৫": "5", "৬": "6", "৭": "7", "৮": "8", "৯": "9",
}

_CONSONANTS = frozenset("কখগঘঙচছজঝঞটঠডঢণতথদধনপফবভমযরলশষসহ")
_VIRAMA = "\u09cd"


def fallback_slug(prefix: str = "post") -> str:
    """Synthetic slug used when a title has nothing slug-worthy in it."""
    return f"{prefix}-{time.time_ns() // 1_000_000}"


def _collapse(text: str, disallowed: re.Pattern[str]) -> str:
    slug = disallowed.sub("", text.lower())
    slug = _WHITESPACE.sub("-", slug)
    slug = _HYPHENS.sub("-", slug).strip("-")
    return slug[:MAX_SLUG_LENGTH].strip("-")


def generate_slug(title: str, prefix: str = "post") -> str:
    """
    Normalize a title into a URL-safe slug, keeping Bengali letters.

    Lowercases, drops anything outside the Bengali block, ASCII alphanumerics,
    whitespace and hyphens, turns whitespace runs into single hyphens and
    trims hyphens from both ends. Falls back to ``<prefix>-<epoch millis>``
    when nothing is left. Uniqueness is the caller's job (see unique_slug).
    """
    slug = _collapse(unicodedata.normalize("NFC", title or ""), _DISALLOWED)
    if not slug or slug == "-":
        return fallback_slug(prefix)
    return slug


def _blocks_inherent_vowel(ch: str) -> bool:
    """Vowel signs (U+09BE..U+09CC) and the virama replace a consonant's inherent 'o'."""
    return "\u09be" <= ch <= "\u09cc" or ch == _VIRAMA


def transliterate(text: str) -> str:
    """
    Map Bengali characters to their Latin equivalents; other characters pass through.

    A consonant not followed by a vowel sign or virama carries the inherent
    vowel, written as "o": "কবিতা" -> "kobita".
    """
    text = unicodedata.normalize("NFC", text or "")
    out: list[str] = []
    i = 0
    while i < len(text):
        pair = text[i:i + 2]
        if pair in _BENGALI_DIGRAPHS:
            out.append(_BENGALI_DIGRAPHS[pair])
            is_consonant = True
            i += 2
        else:
            ch = text[i]
            out.append(_BENGALI_TO_LATIN.get(ch, ch))
            is_consonant = ch in _CONSONANTS
            i += 1
        if is_consonant and (i >= len(text) or not _blocks_inherent_vowel(text[i])):
            out.append("o")
    return "".join(out)


def transliterate_slug(title: str, prefix: str = "post") -> str:
    """Latin-only slug: transliterate Bengali, then normalize like generate_slug."""
    slug = _collapse(transliterate(title), _NON_LATIN)
    if not slug or slug == "-":
        return fallback_slug(prefix)
    return slug


def unique_slug(db: Session, model: type, base: str, exclude_id: int | None = None) -> str:
    """
    Return base, or base-1, base-2, ... whichever is not yet used by model.slug.

    Lookup and insert are not atomic; the unique index on slug columns turns a
    lost race into an IntegrityError at commit.
    """
    candidate = base
    counter = 1
    while _slug_taken(db, model, candidate, exclude_id):
        candidate = f"{base}-{counter}"
        counter += 1
    return candidate


def _slug_taken(db: Session, model: type, slug: str, exclude_id: int | None) -> bool:
    query = db.query(model.id).filter(model.slug == slug)
    if exclude_id is not None:
        query = query.filter(model.id != exclude_id)
    return query.first() is not None
