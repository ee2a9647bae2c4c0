# termindex/Query.py
"""
QueryProcessor: single-term lookups and console rendering.

The index returns postings in stored order. Ordering by frequency is an
explicit, separate step (rank_postings) that callers opt into.
"""
from typing import List, Optional, Sequence, Tuple

from termindex.Indexer import InvertedIndex

NAME_HEADER = "Document"
FREQ_HEADER = "Count"


def rank_postings(postings: Sequence[Tuple[int, str, int]]) -> List[Tuple[int, str, int]]:
    """
    Stable sort of (doc_id, doc_name, frequency): frequency descending,
    then doc_id ascending.
    """
    return sorted(postings, key=lambda p: (-p[2], p[0]))


def format_results(query: str, results: Sequence[Tuple[str, int]]) -> str:
    if not results:
        return f'No documents contain "{query}".'

    lines = [
        f'>>> Results for "{query}" <<<',
        "%-20s | %-10s" % (NAME_HEADER, FREQ_HEADER),
        "-" * 32,
    ]
    for name, freq in results:
        lines.append("%-20s | %-10d" % (name, freq))
    return "\n".join(lines)


class QueryProcessor:
    def __init__(self, index: InvertedIndex, sort: bool = False):
        self.index = index
        self.sort = sort

    def search(self, query: str, sort: Optional[bool] = None) -> List[Tuple[str, int]]:
        """
        (doc_name, frequency) pairs for the query term, ranked only when
        sorting is enabled.
        """
        query = query.strip()
        if not query:
            return []
        if sort is None:
            sort = self.sort
        if not sort:
            return self.index.lookup(query)
        return [(name, freq) for _doc_id, name, freq in rank_postings(self.index.get_postings(query))]

    def render(self, query: str) -> str:
        return format_results(query.strip(), self.search(query))
