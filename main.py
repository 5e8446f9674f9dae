"""
Main script to score query documents against an Arabic corpus
Loads config, builds the corpus from a file, and prints TF-IDF scores
"""
import sys
import os
import argparse
from typing import List, Optional

from tqdm import tqdm

# Add project root to path
current_dir = os.path.dirname(os.path.abspath(__file__))
sys.path.append(current_dir)

from config.config import AppConfig, DEFAULT_CONFIG_PATH
from src.data.dataloader import CorpusLoader
from src.retrieval.tfidf_retriever import TFIDFCalculator
from src.utils.logger import set_log_level, setup_logger

logger = setup_logger("main")


def build_calculator(config: dict, corpus_path: Optional[str] = None) -> TFIDFCalculator:
    """
    Create a calculator and fill its corpus from corpus_path.

    Args:
        config: Parsed configuration dict
        corpus_path: Optional .json or text file with documents

    Returns:
        TFIDFCalculator with the loaded corpus
    """
    calculator = TFIDFCalculator.from_config(config)
    if not corpus_path:
        logger.warning("No corpus given, every term will have idf 0")
        return calculator

    corpus_config = config.get('corpus', {}) or {}
    loader = CorpusLoader(
        encoding=corpus_config.get('encoding', 'utf-8'),
        text_field=corpus_config.get('text_field', 'text')
    )
    texts = loader.load(corpus_path)
    calculator.corpus.add_documents(tqdm(texts, desc="Adding documents", unit="doc"))
    logger.info(f"Corpus ready: {calculator.corpus.document_count()} documents")
    return calculator


def score_queries(calculator: TFIDFCalculator, queries: List[str], explain: bool = False) -> List[float]:
    """Score each query and print the result."""
    scores = []
    for query in queries:
        score = calculator.calculate_document_tfidf(query)
        scores.append(score)
        print(f"{score:.4f}\t{query}")
        if explain:
            for ts in calculator.explain(query):
                print(
                    f"  {ts.term}: count={ts.count} tf={ts.tf:.4f} "
                    f"df={ts.df} idf={ts.idf:.4f} contribution={ts.contribution:.4f}"
                )
    return scores


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Arabic TF-IDF document scorer")
    parser.add_argument(
        "--config",
        type=str,
        default=DEFAULT_CONFIG_PATH,
        help="Path to config file"
    )
    parser.add_argument(
        "--corpus",
        type=str,
        default=None,
        help="Corpus file (.json list or one document per line)"
    )
    parser.add_argument(
        "--query",
        action="append",
        default=[],
        help="Query document to score (repeatable)"
    )
    parser.add_argument(
        "--explain",
        action="store_true",
        help="Print the per-term breakdown of each score"
    )
    args = parser.parse_args(argv)

    try:
        app_config = AppConfig(args.config)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Failed to load config: {e}")
        return 1
    config = app_config.config

    log_level = app_config.section('logging').get('level')
    if log_level:
        set_log_level(log_level)

    if not args.query:
        logger.error("Nothing to score, pass at least one --query")
        return 2

    try:
        calculator = build_calculator(config, args.corpus)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Failed to load corpus: {e}")
        return 1

    score_queries(calculator, args.query, explain=args.explain)
    return 0


if __name__ == "__main__":
    sys.exit(main())
