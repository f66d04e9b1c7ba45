#------------------------------------------------------------
#                     language_service.py
#        Aggregates language byte sizes across repositories
#               and selects the top languages.

import math
from typing import Dict, Iterable, List, Sequence, Tuple
from ..config import DEFAULT_TOP_LANGUAGES, FALLBACK_LANGUAGE_COLOR
from ..models import LanguageAggregate, LanguageEdge, TopLanguage
from .icon_service import resolve_icon_url

def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))

# This function does sum language sizes across every repository.
# The first colour seen for a language is kept; ignored names are skipped entirely.
def aggregate_languages(
    repositories: Iterable[Sequence[LanguageEdge]],
    ignored_languages: Iterable[str] = (),
) -> Tuple[Dict[str, LanguageAggregate], int]:
    ignored = {name.strip().lower() for name in ignored_languages}
    aggregates: Dict[str, LanguageAggregate] = {}
    total = 0

    for edges in repositories:
        for edge in edges:
            if edge.name.strip().lower() in ignored:
                continue
            aggregate = aggregates.get(edge.name)
            if aggregate is None:
                aggregate = aggregates[edge.name] = LanguageAggregate(size=0, color=edge.color)
            aggregate.size += edge.size
            total += edge.size

    return aggregates, total

# This function does turn aggregates into the ordered top language list.
# An empty list is returned when no bytes were recorded.
def select_top_languages(
    aggregates: Dict[str, LanguageAggregate],
    total: int,
    limit: int = DEFAULT_TOP_LANGUAGES,
) -> List[TopLanguage]:
    if total <= 0:
        return []

    languages = [
        TopLanguage(
            name=name,
            color=aggregate.color or FALLBACK_LANGUAGE_COLOR,
            percent=_round_half_up(aggregate.size / total * 100),
            size=aggregate.size,
            icon_url=resolve_icon_url(name),
        )
        for name, aggregate in aggregates.items()
    ]
    languages.sort(key=lambda language: language.size, reverse=True)
    return languages[:limit]

def build_top_languages(
    repositories: Iterable[Sequence[LanguageEdge]],
    ignored_languages: Iterable[str] = (),
    limit: int = DEFAULT_TOP_LANGUAGES,
) -> List[TopLanguage]:
    aggregates, total = aggregate_languages(repositories, ignored_languages)
    return select_top_languages(aggregates, total, limit)
