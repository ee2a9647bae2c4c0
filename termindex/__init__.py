from termindex.Indexer import InputTooLongError, InvertedIndex, normalize
from termindex.TermTable import TABLE_SIZE, TermTable, bkdr_hash

__all__ = ["InputTooLongError", "InvertedIndex", "normalize", "TABLE_SIZE", "TermTable", "bkdr_hash"]
