"""Vector space model: corpus index, document vectors and query ranking.

Everything is computed once when the model is built and is read-only
afterwards, so a single model can serve concurrent queries without locking.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Optional, Protocol, Sequence, runtime_checkable

import tfidf
from logger import setup_logger
from rules import PUNCTUATION_RULE, NormalizationRule

logger = setup_logger("vsm.model")


class EmptyCorpus(ValueError):
    """Raised when a model is built from a collection with no documents."""


@runtime_checkable
class Document(Protocol):
    def get_text(self) -> str:
        ...


def extract_text(document) -> str:
    """Plain strings are their own text; anything else must provide get_text()."""
    if isinstance(document, str):
        return document
    return document.get_text()


@dataclass(frozen=True)
class CorpusIndex:
    """Term counts and document frequencies for a fixed collection."""

    documents: tuple
    term_frequencies: tuple
    document_frequency: MappingProxyType
    vocabulary: frozenset

    @property
    def size(self) -> int:
        return len(self.documents)

    @classmethod
    def build(cls, documents: Sequence[Document], rule: NormalizationRule) -> "CorpusIndex":
        documents = tuple(documents)
        if not documents:
            raise EmptyCorpus("Cannot build an index from an empty document collection")

        term_frequencies = tuple(
            MappingProxyType(dict(tfidf.count_terms(tfidf.tokenize(extract_text(doc), rule))))
            for doc in documents
        )
        df = tfidf.document_frequencies(term_frequencies)
        return cls(
            documents=documents,
            term_frequencies=term_frequencies,
            document_frequency=MappingProxyType(df),
            vocabulary=frozenset(df),
        )


@dataclass(frozen=True)
class VectorEntry:
    document: object
    weights: MappingProxyType
    norm: float


class VectorSpace:
    """Sparse TF-IDF vector per document, in corpus order."""

    def __init__(self, entries: Sequence[VectorEntry]):
        self._entries = tuple(entries)

    @classmethod
    def build(cls, index: CorpusIndex, idf: dict, tf_scheme: str = "raw") -> "VectorSpace":
        entries = []
        for document, tf in zip(index.documents, index.term_frequencies):
            weights = tfidf.compute_weights(tf, idf, tf_scheme)
            entries.append(VectorEntry(document, MappingProxyType(weights), tfidf.vector_norm(weights)))
        return cls(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple]:
        for entry in self._entries:
            yield entry.document, entry.weights

    def vector_for(self, position: int) -> MappingProxyType:
        return self._entries[position].weights

    def scored_entries(self) -> Iterator[tuple]:
        for entry in self._entries:
            yield entry.document, entry.weights, entry.norm


class VectorSpaceModel:
    """Ranks documents against free-text queries by cosine similarity.

    The normalization rule given here is reused for every query. Passing a
    different rule to :meth:`search` is allowed but only makes sense if it
    cleans text the same way, otherwise query terms miss the vocabulary.
    """

    def __init__(self, documents: Sequence[Document], rule: NormalizationRule = PUNCTUATION_RULE,
                 tf_scheme: str = "raw", idf_scheme: str = "plain"):
        # Validate scheme names before doing any work.
        tfidf.get_scheme(tfidf.TF_SCHEMES, tf_scheme, "TF")
        tfidf.get_scheme(tfidf.IDF_SCHEMES, idf_scheme, "IDF")

        index = CorpusIndex.build(documents, rule)
        idf = tfidf.compute_idf(index.document_frequency, index.size, idf_scheme)

        self._rule = rule
        self._tf_scheme = tf_scheme
        self._idf_scheme = idf_scheme
        self._index = index
        self._idf = MappingProxyType(idf)
        self._space = VectorSpace.build(index, idf, tf_scheme)

        logger.info(
            "Built model: %d documents, vocabulary size %d (rule=%s, tf=%s, idf=%s)",
            index.size, len(index.vocabulary), rule.name, tf_scheme, idf_scheme,
        )

    @classmethod
    def build(cls, documents: Sequence[Document], rule: NormalizationRule = PUNCTUATION_RULE,
              tf_scheme: str = "raw", idf_scheme: str = "plain") -> "VectorSpaceModel":
        return cls(documents, rule, tf_scheme, idf_scheme)

    @property
    def rule(self) -> NormalizationRule:
        return self._rule

    @property
    def tf_scheme(self) -> str:
        return self._tf_scheme

    @property
    def idf_scheme(self) -> str:
        return self._idf_scheme

    @property
    def documents(self) -> tuple:
        return self._index.documents

    @property
    def corpus_size(self) -> int:
        return self._index.size

    @property
    def vocabulary(self) -> frozenset:
        return self._index.vocabulary

    @property
    def document_frequency(self) -> MappingProxyType:
        return self._index.document_frequency

    @property
    def term_frequencies(self) -> tuple:
        return self._index.term_frequencies

    @property
    def idf(self) -> MappingProxyType:
        return self._idf

    @property
    def space(self) -> VectorSpace:
        return self._space

    def idf_of(self, term: str) -> float:
        return self._idf.get(term, 0.0)

    def query_vector(self, query: str, rule: Optional[NormalizationRule] = None) -> dict:
        terms = tfidf.count_terms(tfidf.tokenize(query, rule or self._rule))
        return tfidf.compute_weights(terms, self._idf, self._tf_scheme)

    def search(self, query: str, rule: Optional[NormalizationRule] = None,
               top_k: Optional[int] = None) -> list[tfidf.Hit]:
        """Return (document, score) hits for every document, best first."""
        query_tfidf = self.query_vector(query, rule)
        if not query_tfidf:
            logger.debug("Query %r has no indexed terms", query)
        hits = tfidf.ranking(query_tfidf, self._space.scored_entries(), top_k)
        logger.debug("Query %r scored %d documents", query, len(hits))
        return hits
