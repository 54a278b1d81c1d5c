"""
JSON data source implementation.
"""
from __future__ import annotations

from typing import Callable, List, Optional

from utils.data_sources.base import BaseDataSource
from utils.nlp.types import Document
from utils import data_loader


class JsonDataSource(BaseDataSource):
    """Load documents from a JSON file."""

    def __init__(self, path: str, source: str = "", loader: Optional[Callable] = None):
        self.path = path
        self.source = source
        self._load_documents = loader or data_loader.load_documents

    def load_documents(self) -> List[Document]:
        return self._load_documents(self.path, source=self.source)
