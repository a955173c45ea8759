"""FAQ matching."""

from buddy.faq.matcher import FAQEntry, FAQMatch, FAQMatcher, score_text

__all__ = ["FAQEntry", "FAQMatch", "FAQMatcher", "score_text"]
