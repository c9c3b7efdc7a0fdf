# app/core/matching.py

"""
Fuzzy matching of invoice descriptions against the parts catalog.

Similarity is the Dice coefficient over character bigrams of the
normalized strings, with a small boost when one string contains the
other. Below the threshold an item keeps its raw description.
"""

from collections import Counter
from typing import Iterable, Optional

from app.models import CatalogMatch
from app.core.normalizers import normalize_text, strip_accents

MATCH_THRESHOLD = 0.82
CONTAINMENT_BOOST = 0.08


def _bigrams(s: str) -> Counter:
    return Counter(s[i:i + 2] for i in range(len(s) - 1))


def dice_coefficient(a_raw: str, b_raw: str) -> float:
    """
    Bigram Dice coefficient between two strings, 0.0 to 1.0.

    Each shared bigram occurrence is counted once (multiset
    intersection).
    """
    a = normalize_text(a_raw)
    b = normalize_text(b_raw)

    if not a or not b:
        return 0.0
    if a == b:
        return 1.0
    if len(a) < 2 or len(b) < 2:
        return 1.0 if a == b else 0.0

    matches = sum((_bigrams(a) & _bigrams(b)).values())
    return (2 * matches) / ((len(a) - 1) + (len(b) - 1))


def similarity(description: str, candidate: str) -> float:
    """Dice score plus the containment boost, capped at 1.0."""
    desc = normalize_text(description)
    cand = normalize_text(candidate)
    if not desc or not cand:
        return 0.0

    score = dice_coefficient(desc, cand)
    if desc in cand or cand in desc:
        score = min(1.0, score + CONTAINMENT_BOOST)
    return score


def dedupe_candidates(candidates: Iterable[Optional[str]]) -> list[str]:
    """Drop blanks and case/accent-insensitive duplicates, keeping first spelling."""
    seen: set[str] = set()
    unique: list[str] = []

    for name in candidates:
        if not name or not name.strip():
            continue
        key = strip_accents(name).casefold().strip()
        if key in seen:
            continue
        seen.add(key)
        unique.append(name)

    return unique


def best_catalog_match(
    description: str,
    candidates: Iterable[str],
    unique: bool = False,
) -> CatalogMatch | None:
    """
    Highest-scoring candidate regardless of threshold. Ties keep the first.

    Pass unique=True when the candidates already went through
    dedupe_candidates.
    """
    if not normalize_text(description):
        return None

    best: CatalogMatch | None = None
    for name in candidates if unique else dedupe_candidates(candidates):
        if not normalize_text(name):
            continue
        score = similarity(description, name)
        if best is None or score > best.score:
            best = CatalogMatch(name=name, score=score)

    return best


def match_catalog_name(
    description: str,
    candidates: Iterable[str],
    threshold: float = MATCH_THRESHOLD,
    unique: bool = False,
) -> CatalogMatch | None:
    """Best candidate if it clears the threshold, else None."""
    best = best_catalog_match(description, candidates, unique=unique)
    if best is None or best.score < threshold:
        return None
    return best
