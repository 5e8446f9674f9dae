# src/data/preprocessor.py
"""
Preprocessor Module
Normalize and tokenize Arabic text for TF-IDF scoring
"""
from typing import Any, Dict, List, Optional

from src.utils.errors import require_text
from src.utils.logger import setup_logger
from src.utils.text_utils import normalize_arabic, normalize_text, split_letter_runs

logger = setup_logger("preprocessor")

NORMALIZATION_FLAGS = (
    "unicode_nfc",
    "strip_diacritics",
    "strip_tatweel",
    "fold_alef",
    "fold_ya",
    "lowercase",
)


class ArabicPreprocessor:
    """
    Document preprocessor turning raw Arabic text into letter-run tokens.
    Stopwords are kept and no stemming is applied.
    """

    def __init__(
            self,
            unicode_nfc: bool = True,
            strip_diacritics: bool = True,
            strip_tatweel: bool = True,
            fold_alef: bool = True,
            fold_ya: bool = True,
            lowercase: bool = True
        ):
        self.unicode_nfc = unicode_nfc
        self.strip_diacritics = strip_diacritics
        self.strip_tatweel = strip_tatweel
        self.fold_alef = fold_alef
        self.fold_ya = fold_ya
        self.lowercase = lowercase

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]] = None) -> "ArabicPreprocessor":
        """
        Build a preprocessor from the `preprocessing` config section.

        Args:
            config: Dict of normalization flags. Unknown keys are ignored.

        Returns:
            ArabicPreprocessor instance
        """
        config = config or {}
        unknown = set(config) - set(NORMALIZATION_FLAGS)
        if unknown:
            logger.warning(f"Ignoring unknown preprocessing options: {sorted(unknown)}")
        options = {key: bool(config[key]) for key in NORMALIZATION_FLAGS if key in config}
        return cls(**options)

    @property
    def options(self) -> Dict[str, bool]:
        "Normalization flags as keyword arguments"
        return {key: getattr(self, key) for key in NORMALIZATION_FLAGS}

    def preprocess(self, document: str) -> str:
        """
        Normalize document text.

        Args:
            document: Raw document text

        Returns:
            Normalized text with collapsed whitespace
        """
        document = require_text(document, "document")
        if not document:
            return ""
        return normalize_text(normalize_arabic(document, **self.options))

    def tokenize(self, document: str) -> List[str]:
        """
        Normalize and split document text into tokens.

        Args:
            document: Raw document text. None raises InvalidArgumentError.

        Returns:
            Ordered list of tokens, possibly empty
        """
        cleaned_text = self.preprocess(document)
        if not cleaned_text:
            return []
        return split_letter_runs(cleaned_text)

    def normalize_term(self, term: str) -> str:
        """
        Normalize a single lookup term the same way document tokens are.

        Returns an empty string when the term holds no letters.
        """
        return " ".join(self.tokenize(term))

    def __call__(self, document: str) -> List[str]:
        return self.tokenize(document)
