# src/utils/text_utils.py
"""
Text Utilities Module
Arabic text normalization and letter-run tokenization
"""
import re
import unicodedata
from itertools import groupby
from typing import List

from src.utils.errors import require_text

# Tatweel (kashida)
TATWEEL = "\u0640"

# Harakat, tanwin, shadda, sukun, Quranic marks and superscript alef
ARABIC_DIACRITICS = re.compile("[\u064b-\u065f\u0670]")

# أ إ آ ٱ -> ا
ALEF_VARIANTS = re.compile("[\u0622\u0623\u0625\u0671]")
ALEF = "\u0627"

# ى -> ي
ALEF_MAQSURA = "\u0649"
YA = "\u064a"


def normalize_text(text: str) -> str:
    """
    Collapse runs of whitespace into single spaces.

    Args:
        text: Input text

    Returns:
        Normalized text
    """
    if not text:
        return ""
    cleaned_text = re.sub(r'\s+', ' ', text)
    return cleaned_text.strip()


def normalize_arabic(
        text: str,
        unicode_nfc: bool = True,
        strip_diacritics: bool = True,
        strip_tatweel: bool = True,
        fold_alef: bool = True,
        fold_ya: bool = True,
        lowercase: bool = True
    ) -> str:
    """
    Deterministic Arabic string normalization.

    Args:
        text: Input text
        unicode_nfc: Apply Unicode NFC composition first
        strip_diacritics: Remove tashkil (harakat, tanwin, shadda, sukun)
        strip_tatweel: Remove the kashida elongation character
        fold_alef: Map hamza/madda alef forms to bare alef
        fold_ya: Map alef maqsura to ya
        lowercase: Casefold non-Arabic letters

    Returns:
        Normalized text
    """
    text = require_text(text)
    if not text:
        return ""

    if unicode_nfc:
        text = unicodedata.normalize("NFC", text)
    if strip_diacritics:
        text = ARABIC_DIACRITICS.sub("", text)
    if strip_tatweel:
        text = text.replace(TATWEEL, "")
    if fold_alef:
        text = ALEF_VARIANTS.sub(ALEF, text)
    if fold_ya:
        text = text.replace(ALEF_MAQSURA, YA)
    if lowercase:
        text = text.casefold()
    return text


def _is_word_char(ch: str) -> bool:
    # Combining marks stay inside the letter run they decorate
    return ch.isalpha() or unicodedata.category(ch) == "Mn"


def split_letter_runs(text: str) -> List[str]:
    """
    Split text into maximal runs of letters.

    Whitespace, digits (any script), punctuation and symbols act as
    separators and are dropped. A run made only of combining marks is not
    a token.
    """
    tokens = []
    for is_word, chars in groupby(text, key=_is_word_char):
        if not is_word:
            continue
        token = "".join(chars)
        if any(ch.isalpha() for ch in token):
            tokens.append(token)
    return tokens


def tokenize_arabic(text: str, **normalize_options) -> List[str]:
    """
    Normalize and tokenize Arabic (or mixed-script) text.

    Args:
        text: Raw text. None is rejected with InvalidArgumentError.
        **normalize_options: Flags forwarded to normalize_arabic

    Returns:
        Ordered list of tokens, possibly empty
    """
    text = require_text(text)
    if not text.strip():
        return []
    return split_letter_runs(normalize_arabic(text, **normalize_options))
