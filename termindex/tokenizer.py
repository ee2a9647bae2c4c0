# termindex/tokenizer.py
"""
Tokenizer module.

Raw text is split into candidate terms on whitespace and common
punctuation using nltk's RegexpTokenizer. Case folding is left to the
index, which normalizes every token it records.

Stopword removal and Porter stemming are available but off by default.
"""

import re
from typing import Iterable, Iterator, List, Optional

from nltk.tokenize import RegexpTokenizer

# Characters that separate tokens
DELIMITERS = " ,.?!\"\n\t\r[](){}"


class Tokenizer:
    """
    The Tokenizer class.

    Parameters:
        custom_stopwords : Optional[Iterable[str]]
            Words to drop, compared case-insensitively. None keeps everything.
        use_stemmer : bool
            Whether to reduce tokens to their Porter stem.
        delimiters : str
            Characters that separate tokens.
    """
    def __init__(self, custom_stopwords: Optional[Iterable[str]] = None, use_stemmer: bool = False,
                 delimiters: str = DELIMITERS):
        if not delimiters:
            raise ValueError("At least one delimiter is required.")
        self.stopwords = {w.lower() for w in custom_stopwords} if custom_stopwords else set()
        self._splitter = RegexpTokenizer("[" + re.escape(delimiters) + "]+", gaps=True)

        self.use_stemmer = use_stemmer
        if self.use_stemmer:
            from nltk.stem.porter import PorterStemmer
            self.stemmer = PorterStemmer()

    def tokenize(self, text: str) -> List[str]:
        if text is None:
            return []

        tokens = []
        for token in self._splitter.tokenize(text):
            if token.lower() in self.stopwords:
                continue
            if self.use_stemmer:
                token = self.stemmer.stem(token)
            tokens.append(token)
        return tokens

    def token_stream(self, lines: Iterable[str]) -> Iterator[str]:
        """
        Tokenize an iterable of lines, keeping document order.
        """
        for line in lines:
            yield from self.tokenize(line)
