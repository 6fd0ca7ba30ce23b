"""
Zone Relevance Scoring

Each page has three zones (title, description, content). A page earns a
fixed weight for every zone that contains the query.
"""

from dataclasses import dataclass


@dataclass
class RelevanceConfig:
    """Zone weights."""

    title_weight: int = 10
    description_weight: int = 7
    content_weight: int = 5


class ZoneScorer:
    """
    Additive zone scorer.

    score = title_weight * [q in title]
          + description_weight * [q in description]
          + content_weight * [q in content]

    All arguments are expected to be normalized already.
    """

    def __init__(self, config: RelevanceConfig | None = None):
        self.config = config or RelevanceConfig()

    def score(self, query: str, title: str, description: str, content: str) -> int:
        relevance = 0
        if query in title:
            relevance += self.config.title_weight
        if query in description:
            relevance += self.config.description_weight
        if query in content:
            relevance += self.config.content_weight
        return relevance
