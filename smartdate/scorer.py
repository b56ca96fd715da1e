"""Scoring and selection of date candidates."""
from .models import DateCandidate

TIME_ONLY_WEIGHT = 1
DATE_ONLY_WEIGHT = 2
DATE_TIME_WEIGHT = 3


def type_weight(candidate: DateCandidate) -> int:
    if not candidate.date_provided:
        return TIME_ONLY_WEIGHT
    return DATE_TIME_WEIGHT if candidate.has_time else DATE_ONLY_WEIGHT


def score_candidate(candidate: DateCandidate) -> tuple[int, int, int]:
    """Sort key: type weight, then span length, then later start."""
    return (type_weight(candidate), len(candidate.match), candidate.match.start)


def select_best(candidates: list[DateCandidate]) -> DateCandidate | None:
    """Highest score wins; exact ties keep the first candidate seen."""
    best: DateCandidate | None = None
    best_score = None
    for c in candidates:
        score = score_candidate(c)
        if best is None or score > best_score:
            best, best_score = c, score
    return best
