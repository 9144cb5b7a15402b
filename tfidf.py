import math
from collections import Counter
from typing import Iterable, NamedTuple, Optional

from rules import NormalizationRule


class Hit(NamedTuple):
    document: object
    score: float


def tokenize(text: str, rule: NormalizationRule) -> list[str]:
    """Clean text with the rule, split on whitespace and lower-case."""
    cleaned = rule.apply(text)
    return [token.lower() for token in cleaned.split() if token]


def count_terms(tokens: Iterable[str]) -> Counter:
    return Counter(tokens)


def document_frequencies(tf_maps: Iterable[dict]) -> dict:
    df = {}
    for tf in tf_maps:
        for term in tf:
            df[term] = df.get(term, 0) + 1
    return df


def _idf_plain(total_docs: int, doc_count: int) -> float:
    return math.log(total_docs / doc_count)


def _idf_smooth(total_docs: int, doc_count: int) -> float:
    return math.log(1 + total_docs / doc_count)


def _idf_plus_one(total_docs: int, doc_count: int) -> float:
    return 1.0 + math.log(total_docs / doc_count)


IDF_SCHEMES = {
    "plain": _idf_plain,
    "smooth": _idf_smooth,
    "plus_one": _idf_plus_one,
}


def compute_idf(df: dict, total_docs: int, scheme: str = "plain") -> dict:
    """Map every term in df to its inverse document frequency.

    ``plain`` is ln(N / df) and is zero for a term found in every document.
    """
    idf_fn = get_scheme(IDF_SCHEMES, scheme, "IDF")
    return {term: idf_fn(total_docs, doc_count) for term, doc_count in df.items()}


def _tf_raw(count: int, total: int) -> float:
    return float(count)


def _tf_log(count: int, total: int) -> float:
    return 1.0 + math.log10(count)


def _tf_normalized(count: int, total: int) -> float:
    return count / total


TF_SCHEMES = {
    "raw": _tf_raw,
    "log": _tf_log,
    "normalized": _tf_normalized,
}


def compute_weights(tf: dict, idf: dict, tf_scheme: str = "raw") -> dict:
    """TF-IDF weight of every term of ``tf`` known to ``idf``.

    Terms missing from ``idf`` are outside the vocabulary and are skipped.
    """
    tf_fn = get_scheme(TF_SCHEMES, tf_scheme, "TF")
    total = sum(tf.values())
    weights = {}
    for term, count in tf.items():
        if count <= 0 or term not in idf:
            continue
        weights[term] = tf_fn(count, total) * idf[term]
    return weights


def vector_norm(vec: dict) -> float:
    return math.sqrt(sum(val**2 for val in vec.values()))


def dot_product(vec1: dict, vec2: dict) -> float:
    if len(vec1) > len(vec2):
        vec1, vec2 = vec2, vec1
    return sum(weight * vec2[term] for term, weight in vec1.items() if term in vec2)


def cosine_similarity(vec1: dict, vec2: dict, norm1: Optional[float] = None,
                      norm2: Optional[float] = None) -> float:
    if norm1 is None:
        norm1 = vector_norm(vec1)
    if norm2 is None:
        norm2 = vector_norm(vec2)
    if norm1 == 0 or norm2 == 0:
        return 0.0
    return dot_product(vec1, vec2) / (norm1 * norm2)


def ranking(query_tfidf: dict, entries: Iterable[tuple], top_k: Optional[int] = None) -> list[Hit]:
    """Score every (document, vector, norm) entry against the query.

    Sorting is stable so equal scores keep corpus order.
    """
    query_norm = vector_norm(query_tfidf)
    scores = []
    for document, doc_tfidf, doc_norm in entries:
        score = cosine_similarity(query_tfidf, doc_tfidf, query_norm, doc_norm)
        scores.append(Hit(document, score))
    scores.sort(key=lambda x: x.score, reverse=True)
    if top_k is not None:
        return scores[:top_k]
    return scores


def get_scheme(schemes: dict, name: str, kind: str):
    try:
        return schemes[name]
    except KeyError as exc:
        raise ValueError(
            f"Unknown {kind} scheme '{name}'. Available: {', '.join(sorted(schemes))}"
        ) from exc
