# termindex/Indexer.py
"""
Indexer module: the insert/query engine over a TermTable.

 - record(token, doc_id, doc_name): count one occurrence of a token in a document
 - lookup(query): every (doc_name, frequency) pair for an exact-match term

Both operations fold case the same way, so a query matches regardless of
how the term was capitalised in the documents. Results come back in stored
order; sorting them is up to the caller (see Query.rank_postings).
"""

from typing import List, Optional, Tuple

from termindex.TermTable import TABLE_SIZE, Occurrence, TermEntry, TermTable

MAX_TERM_LEN = 49
MAX_NAME_LEN = 49


class InputTooLongError(ValueError):
    """
    A term or document name is longer than the index accepts.
    """
    def __init__(self, kind: str, value: str, limit: int):
        self.kind = kind
        self.value = value
        self.limit = limit
        super().__init__(f"{kind} longer than {limit} characters: {value[:limit]!r}...")


def normalize(text: str) -> str:
    return text.lower()


class InvertedIndex:
    def __init__(self, table: Optional[TermTable] = None, capacity: int = TABLE_SIZE,
                 max_load: Optional[float] = None):
        # An explicit table wins over capacity/max_load
        self.table = table if table is not None else TermTable(capacity, max_load=max_load)
        # Tokens lost to MemoryError during record
        self.dropped = 0

    def __len__(self) -> int:
        return len(self.table)

    # ---------------------------------------------------------
    # INSERTION
    # ---------------------------------------------------------
    def record(self, token: str, doc_id: int, doc_name: str) -> None:
        """
        Count one occurrence of `token` in document `doc_id`.

        Empty tokens are ignored. Raises InputTooLongError when the
        normalized term or the document name is too long; nothing is stored
        in that case. Running out of memory drops the token instead of
        aborting the run.
        """
        if isinstance(doc_id, bool) or not isinstance(doc_id, int) or doc_id < 1:
            raise ValueError(f"doc_id must be a positive integer, got {doc_id!r}")

        term = normalize(token)
        if not term:
            return
        if len(term) > MAX_TERM_LEN:
            raise InputTooLongError("term", term, MAX_TERM_LEN)
        if len(doc_name) > MAX_NAME_LEN:
            raise InputTooLongError("document name", doc_name, MAX_NAME_LEN)

        try:
            entry = self.table.find_term(term)
            if entry is None:
                # a new term is linked only once its first occurrence exists
                entry = TermEntry(term)
                entry.occurrences[doc_id] = Occurrence(doc_id, doc_name)
                self.table.add_term(entry)
                return
            occ = entry.occurrences.get(doc_id)
            if occ is not None:
                # first-seen doc_name is kept
                occ.frequency += 1
            else:
                entry.occurrences[doc_id] = Occurrence(doc_id, doc_name)
        except MemoryError:
            self.dropped += 1

    # ---------------------------------------------------------
    # QUERY
    # ---------------------------------------------------------
    def get_postings(self, query: str) -> List[Tuple[int, str, int]]:
        """
        (doc_id, doc_name, frequency) for every document containing the
        query term, in stored order. Empty when the term is unknown.
        """
        term = normalize(query)
        if not term or len(term) > MAX_TERM_LEN:
            return []
        entry = self.table.find_term(term)
        if entry is None:
            return []
        return [(o.doc_id, o.doc_name, o.frequency) for o in entry.occurrences.values()]

    def lookup(self, query: str) -> List[Tuple[str, int]]:
        return [(name, freq) for _doc_id, name, freq in self.get_postings(query)]

    def frequency(self, query: str, doc_id: int) -> int:
        entry = self.table.find_term(normalize(query))
        if entry is None:
            return 0
        occ = entry.occurrences.get(doc_id)
        return occ.frequency if occ else 0

    def vocab(self) -> List[str]:
        return sorted(entry.term for entry in self.table.terms())
