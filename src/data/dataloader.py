# src/data/dataloader.py
"""
Data Loader Module
Load raw document texts from JSON or plain-text files
"""
import json
import os
from typing import Any, List

from src.utils.logger import setup_logger

logger = setup_logger("dataloader")


class CorpusLoader:
    """
    Loader for corpus documents.

    Supported formats:
        .json  - list of strings, or list of objects holding `text_field`
        other  - UTF-8 text, one document per non-blank line
    """

    def __init__(self, encoding: str = "utf-8", text_field: str = "text"):

        self.encoding = encoding
        self.text_field = text_field

    def load(self, file_path: str) -> List[str]:
        """
        Load document texts from file.

        Args:
            file_path: Path to a .json or text file

        Returns:
            List of document texts in file order
        """
        if not os.path.exists(file_path):
            logger.error(f"File not found: {file_path}")
            raise FileNotFoundError(f"File not found: {file_path}")

        logger.info(f"Loading documents from {file_path}")
        if file_path.lower().endswith(".json"):
            texts = self._load_json(file_path)
        else:
            texts = self._load_lines(file_path)
        logger.info(f"Successfully loaded {len(texts)} documents")
        return texts

    def _load_json(self, file_path: str) -> List[str]:
        try:
            with open(file_path, "r", encoding=self.encoding) as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Error decoding JSON: {e}")
            raise ValueError(f"Invalid JSON in {file_path}: {e}") from e

        if not isinstance(data, list):
            raise ValueError(f"Expected a JSON list of documents in {file_path}")
        return [self._extract_text(record, i) for i, record in enumerate(data)]

    def _extract_text(self, record: Any, position: int) -> str:
        if isinstance(record, str):
            return record
        if isinstance(record, dict) and isinstance(record.get(self.text_field), str):
            return record[self.text_field]
        raise ValueError(
            f"Record {position} has no string field '{self.text_field}'"
        )

    def _load_lines(self, file_path: str) -> List[str]:
        with open(file_path, "r", encoding=self.encoding) as f:
            return [line.strip() for line in f if line.strip()]
