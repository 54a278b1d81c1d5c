import json
import os
from typing import Any, Dict, List
import logging

from utils.nlp.types import Document

logger = logging.getLogger(__name__)


def _to_documents(records: Any, source: str = "") -> List[Document]:
    if not isinstance(records, list):
        raise ValueError(f"Expected a JSON array of documents, got {type(records).__name__}")
    return [Document.from_dict(r if isinstance(r, dict) else {}, source=source) for r in records]


def load_documents(data_file_path: str, source: str = "") -> List[Document]:
    """
    Load documents from a JSON file.

    The file is either an array of ``{title, body}`` records or an object keyed
    by source type (``{"social": [...], "media": [...]}``); in the latter case
    each document is tagged with its key.

    Args:
        data_file_path: JSON file path
        source: source tag applied to untagged records of a plain array

    Returns:
        List[Document]: documents in file order
    """
    try:
        with open(data_file_path, 'r', encoding='utf-8') as f:
            raw = json.load(f)

        if isinstance(raw, dict):
            documents: List[Document] = []
            for key, records in raw.items():
                documents.extend(_to_documents(records, source=key))
        else:
            documents = _to_documents(raw, source=source)

        logger.info(f"Loaded {len(documents)} documents from {data_file_path}")
        return documents

    except Exception as e:
        logger.error(f"Failed to load documents from {data_file_path}: {e}")
        raise


def save_documents(documents: List[Document], output_path: str) -> bool:
    """Write fetched documents as a JSON array so later runs can replay them."""
    try:
        os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump([d.to_dict() for d in documents], f, ensure_ascii=False, indent=2)

        logger.info(f"Saved {len(documents)} documents to {output_path}")
        return True

    except Exception as e:
        logger.error(f"Failed to save documents: {e}")
        return False


def save_analysis_results(results: Dict[str, Any], output_path: str) -> bool:
    """
    Save analysis results as JSON.

    Args:
        results: JSON-ready result dict
        output_path: target file path

    Returns:
        bool: whether the file was written
    """
    try:
        os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(results, f, ensure_ascii=False, indent=2)

        logger.info(f"Saved analysis results to {output_path}")
        return True

    except Exception as e:
        logger.error(f"Failed to save analysis results: {e}")
        return False
