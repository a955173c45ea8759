"""Keyword FAQ matcher."""

import logging
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)

MATCH_THRESHOLD = 30.0

EMPTY_QUERY_MESSAGE = (
    "Please ask a question! Try asking about policies, tools, Lunim, or how to get started."
)

DEFAULT_TOPICS = (
    "Company mission and values",
    "Lunim product features",
    "Leave and time off policies",
    "Expense reimbursement",
    "Slack channels",
    "Tools and access",
    "First week guidance",
    "Benefits and perks",
)


@dataclass(frozen=True, slots=True)
class FAQEntry:
    """A curated question with its answer and matching keywords."""

    id: str
    question: str
    answer: str
    keywords: frozenset[str]
    category: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "question": self.question,
            "answer": self.answer,
            "keywords": sorted(self.keywords),
            "category": self.category,
        }


@dataclass(frozen=True, slots=True)
class FAQMatch:
    entry: FAQEntry
    score: float


def score_text(query: str, text: str) -> float:
    """Score how well ``query`` matches ``text`` on a 0-100 scale.

    The whole query appearing in the text scores 100. Otherwise the score is
    the fraction of query words found in the text, scaled to 80.
    """
    q = query.lower()
    t = text.lower()

    if q in t:
        return 100.0

    words = q.split()
    if not words:
        return 0.0
    matched = sum(1 for word in words if word in t)
    return matched / len(words) * 80


def _keyword_score(query: str, keyword: str) -> float:
    # "what is pto" should hit the keyword "pto" outright
    if re.search(rf"\b{re.escape(keyword.lower())}\b", query.lower()):
        return 100.0
    return score_text(query, keyword)


class FAQMatcher:
    """Finds the best FAQ entry for a free-text question."""

    def __init__(
        self,
        entries: Iterable[FAQEntry],
        threshold: float = MATCH_THRESHOLD,
        topics: Iterable[str] = DEFAULT_TOPICS,
        escalation: str = "ask your manager or in #ask-anything",
    ):
        """Initialize FAQMatcher.

        Args:
            entries: FAQ table, in priority order (earlier entries win ties)
            threshold: A match must score strictly above this value
            topics: Topics listed when nothing matches
            escalation: Where to go when the FAQ has no answer
        """
        self._entries: List[FAQEntry] = list(entries)
        self._threshold = threshold
        self._topics = tuple(topics)
        self._escalation = escalation

    @property
    def entries(self) -> List[FAQEntry]:
        return list(self._entries)

    def score(self, query: str, entry: FAQEntry) -> float:
        """Best of the question score, keyword score and half the answer score."""
        question_score = score_text(query, entry.question)
        keyword_score = max((_keyword_score(query, k) for k in entry.keywords), default=0.0)
        answer_score = score_text(query, entry.answer) * 0.5
        return max(question_score, keyword_score, answer_score)

    def match(self, query: str) -> Optional[FAQMatch]:
        """Return the best matching entry, or None if nothing clears the threshold."""
        if not query or not query.strip():
            return None

        best: Optional[FAQEntry] = None
        best_score = 0.0
        for entry in self._entries:
            entry_score = self.score(query, entry)
            if entry_score > best_score:
                best, best_score = entry, entry_score

        if best is None or best_score <= self._threshold:
            logger.debug("No FAQ match for %r (best score %.1f)", query, best_score)
            return None

        logger.debug("FAQ match for %r: %s (score %.1f)", query, best.id, best_score)
        return FAQMatch(entry=best, score=best_score)

    def answer(self, query: str) -> str:
        """Answer text for ``query``, or guidance when nothing matches."""
        if not query or not query.strip():
            return EMPTY_QUERY_MESSAGE

        found = self.match(query)
        if found is not None:
            return found.entry.answer

        topics = "\n".join(f"• {topic}" for topic in self._topics)
        return (
            f'I couldn\'t find a matching FAQ for "{query}". Try asking about:\n'
            f"{topics}\n"
            f"Or {self._escalation}!"
        )

    def by_category(self, category: str) -> List[FAQEntry]:
        return [e for e in self._entries if e.category == category]

    def format_all(self) -> str:
        """All questions grouped by category, in first-seen category order."""
        categories = list(dict.fromkeys(e.category for e in self._entries))
        sections = []
        for category in categories:
            questions = "\n".join(f"• {e.question}" for e in self.by_category(category))
            sections.append(f"*{category.capitalize()}*\n{questions}")
        return "\n\n".join(sections)
