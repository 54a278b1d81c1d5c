"""
Base data source interfaces.
"""
from __future__ import annotations

from typing import List

from utils.nlp.types import Document


class BaseDataSource:
    """Abstract interface for document sources."""

    def load_documents(self) -> List[Document]:
        raise NotImplementedError
