"""
Near-duplicate detection against the corpus of published ideas.

Similarity is a weighted blend of two Jaccard scores over the normalized
customer profile, product idea and pain points: one on the set of words
longer than three characters and one on the set of character bigrams.
The whole corpus is vectorized at once into binary indicator matrices so
every comparison is a sparse dot product.
"""

import logging
from typing import Iterable, List, Optional, Sequence, Set, Union

import numpy as np
from sklearn.feature_extraction.text import CountVectorizer

from .data_models import DuplicateCheck, ExistingIdea, Submission, coerce_ideas
from .text import normalize_text

WORD_WEIGHT = 0.7
BIGRAM_WEIGHT = 0.3
MIN_WORD_LENGTH = 4
DEFAULT_THRESHOLD = 0.70


def comparison_text(item: Union[Submission, ExistingIdea]) -> str:
    """Normalized profile + idea + pain points used for comparisons."""
    if isinstance(item, ExistingIdea):
        idea = item.product_idea or item.preview
        raw = f"{item.ideal_customer_profile} {idea} {item.pain_points}"
    else:
        raw = (
            f"{item.text_of('ideal_customer_profile')} "
            f"{item.text_of('product_idea')} "
            f"{item.text_of('pain_points')}"
        )
    return normalize_text(raw)


def _long_words(text: str) -> Set[str]:
    return {word for word in text.split(" ") if len(word) >= MIN_WORD_LENGTH}


def _bigrams(text: str) -> Set[str]:
    return {text[i:i + 2] for i in range(len(text) - 1)}


def _jaccard_against_first(documents: List[str], analyzer) -> np.ndarray:
    """Jaccard similarity of documents[0] against each of documents[1:]."""
    vectorizer = CountVectorizer(analyzer=analyzer, binary=True)
    try:
        matrix = vectorizer.fit_transform(documents)
    except ValueError:
        # Empty vocabulary: no document produced a single feature.
        return np.zeros(len(documents) - 1)

    sizes = np.asarray(matrix.sum(axis=1)).ravel().astype(float)
    intersections = (matrix[1:] @ matrix[0].T).toarray().ravel().astype(float)
    unions = sizes[1:] + sizes[0] - intersections
    return np.divide(
        intersections,
        unions,
        out=np.zeros_like(intersections),
        where=unions > 0,
    )


def similarity_scores(candidate_text: str, corpus_texts: Sequence[str]) -> np.ndarray:
    """Blended similarity of one normalized text against many."""
    if not corpus_texts:
        return np.zeros(0)

    documents = [candidate_text] + list(corpus_texts)
    word_scores = _jaccard_against_first(documents, _long_words)
    bigram_scores = _jaccard_against_first(documents, _bigrams)
    scores = WORD_WEIGHT * word_scores + BIGRAM_WEIGHT * bigram_scores

    for i, text in enumerate(corpus_texts):
        if not candidate_text or not text:
            scores[i] = 0.0
        elif text == candidate_text:
            scores[i] = 1.0
    return scores


def calculate_similarity(text1: str, text2: str) -> float:
    """Similarity of two already-normalized texts, from 0.0 to 1.0."""
    return float(similarity_scores(text1, [text2])[0])


def _percent(similarity: float) -> int:
    return int(similarity * 100 + 0.5)


class DuplicateDetector:
    """
    Flags a submission that closely matches an idea already published.
    """

    def __init__(self, threshold: float = DEFAULT_THRESHOLD):
        self.threshold = threshold
        self.logger = logging.getLogger(__name__)

    def check(
        self,
        submission: Submission,
        existing_ideas: Optional[Iterable[Union[ExistingIdea, dict]]] = None,
    ) -> DuplicateCheck:
        ideas = coerce_ideas(existing_ideas)
        if not ideas:
            self.logger.debug("No existing ideas to compare against")
            return DuplicateCheck(is_duplicate=False)

        candidate = comparison_text(Submission.from_dict(submission))
        scores = similarity_scores(candidate, [comparison_text(idea) for idea in ideas])

        over = np.flatnonzero(scores > self.threshold)
        if over.size == 0:
            return DuplicateCheck(is_duplicate=False)

        index = int(over[0])
        similarity = float(scores[index])
        self.logger.debug(f"Submission matches existing idea {index} at {similarity:.2f}")
        return DuplicateCheck(
            is_duplicate=True,
            reason=f"Very similar idea already exists ({_percent(similarity)}% similarity)",
            similarity=similarity,
            matched_index=index,
        )


def check_duplicates(
    submission: Submission,
    existing_ideas: Optional[Iterable[Union[ExistingIdea, dict]]] = None,
    threshold: float = DEFAULT_THRESHOLD,
) -> DuplicateCheck:
    return DuplicateDetector(threshold=threshold).check(submission, existing_ideas)
