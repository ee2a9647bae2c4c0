# termindex/DocumentManager.py
"""
Reads documents from disk and feeds their tokens to an InvertedIndex.

Doc ids are assigned 1..n in the order the paths are given. A file that
cannot be opened is reported and skipped; the rest of the run continues
and the index just lacks that document's terms.
"""

import logging
import os
from typing import Dict, Iterator, List, Optional

import numpy as np

from termindex.Indexer import MAX_NAME_LEN, InputTooLongError, InvertedIndex
from termindex.tokenizer import Tokenizer

logger = logging.getLogger(__name__)


class DocumentManager:
    def __init__(self, tokenizer: Optional[Tokenizer] = None):
        self.tokenizer = tokenizer or Tokenizer()
        self.paths: List[str] = []
        self.id_to_path: Dict[int, str] = {}
        self.lengths = np.zeros(0, dtype=np.uint32)
        self.skipped_tokens = 0
        self.failed: List[str] = []

    @property
    def N(self) -> int:
        return len(self.paths)

    def initialize(self, filepaths) -> Iterator[int]:
        """
        Assign doc ids and return a generator over them
        """
        self.paths = list(filepaths)
        self.id_to_path = {i + 1: p for i, p in enumerate(self.paths)}
        # index 0 unused, doc ids start at 1
        self.lengths = np.zeros(len(self.paths) + 1, dtype=np.uint32)
        self.failed = []
        self.skipped_tokens = 0
        yield from self.id_to_path

    def get_key(self, doc_id: int) -> str:
        return self.id_to_path[doc_id]

    def get_length(self, doc_id: int) -> int:
        return int(self.lengths[doc_id])

    def total_tokens(self) -> int:
        return int(self.lengths.sum())

    def read_document_stream(self, filepath: str) -> Iterator[str]:
        with open(filepath, "r", encoding="utf8", errors="replace") as f:
            for line in f:
                yield line

    def index_document(self, index: InvertedIndex, doc_id: int, filepath: str) -> int:
        """
        Record every token of one file. Returns the number of tokens indexed.
        Raises OSError if the file cannot be read.
        """
        doc_name = os.path.basename(filepath)
        if len(doc_name) > MAX_NAME_LEN:
            raise InputTooLongError("document name", doc_name, MAX_NAME_LEN)

        count = 0
        for token in self.tokenizer.token_stream(self.read_document_stream(filepath)):
            try:
                index.record(token, doc_id, doc_name)
            except InputTooLongError as e:
                self.skipped_tokens += 1
                logger.warning("Skipping token in [%s]: %s", filepath, e)
                continue
            count += 1
        return count

    def build(self, index: InvertedIndex, filepaths) -> np.ndarray:
        """
        Index all files in order. Returns token counts per doc id.
        """
        for doc_id in self.initialize(filepaths):
            filepath = self.id_to_path[doc_id]
            logger.info("Indexing file [%s] ...", filepath)
            try:
                self.lengths[doc_id] = self.index_document(index, doc_id, filepath)
            except InputTooLongError as e:
                self.failed.append(filepath)
                logger.warning("Skipping document: %s", e)
            except OSError as e:
                self.failed.append(filepath)
                logger.warning("Cannot open file [%s], make sure it exists: %s", filepath, e)
        return self.lengths
