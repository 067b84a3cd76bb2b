"""
Pattern and keyword tables used by the submission checks.

Each regex table is an ordered tuple of PatternRule entries; checks walk the
table in order and the first match wins. Bump PATTERN_TABLE_VERSION whenever
a table changes so stored verdicts can be traced back to the rules that
produced them.
"""

import re
from dataclasses import dataclass
from typing import Pattern, Tuple

PATTERN_TABLE_VERSION = "2024.3"

PROMOTIONAL_REASON = "Contains promotional/marketing content"
LOW_DENSITY_REASON = "Low content quality detected"
REPETITION_REASON = "Excessive word repetition detected"
PERSONAL_INFO_REASON = "Contains personal information"


@dataclass(frozen=True)
class PatternRule:
    name: str
    pattern: Pattern
    reason: str

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


def _rule(name: str, expression: str, reason: str, flags: int = 0) -> PatternRule:
    return PatternRule(name=name, pattern=re.compile(expression, flags), reason=reason)


SPAM_PATTERNS: Tuple[PatternRule, ...] = (
    # Marketing phrases
    _rule("buy_now", r"buy\s+now", PROMOTIONAL_REASON, re.IGNORECASE),
    _rule("discount", r"discount", PROMOTIONAL_REASON, re.IGNORECASE),
    _rule("limited_time", r"limited\s+time", PROMOTIONAL_REASON, re.IGNORECASE),
    _rule("click_here", r"click\s+here", PROMOTIONAL_REASON, re.IGNORECASE),
    _rule("free_trial", r"free\s+trial", PROMOTIONAL_REASON, re.IGNORECASE),
    _rule("act_now", r"act\s+now", PROMOTIONAL_REASON, re.IGNORECASE),
    _rule("special_offer", r"special\s+offer", PROMOTIONAL_REASON, re.IGNORECASE),
    _rule("make_money_fast", r"make\s+money\s+fast", PROMOTIONAL_REASON, re.IGNORECASE),
    _rule("earn_dollars", r"earn\s+\$\d+", PROMOTIONAL_REASON, re.IGNORECASE),
    _rule("guaranteed_results", r"guaranteed\s+results", PROMOTIONAL_REASON, re.IGNORECASE),
    # Links
    _rule("url", r"https?://", PROMOTIONAL_REASON, re.IGNORECASE),
    _rule("www_link", r"\bwww\.", PROMOTIONAL_REASON, re.IGNORECASE),
    # Shouting
    _rule("repeated_exclamation", r"!{3,}", PROMOTIONAL_REASON),
    _rule("repeated_question", r"\?{3,}", PROMOTIONAL_REASON),
    _rule("excessive_caps", r"[A-Z]{10,}", PROMOTIONAL_REASON),
    # Crypto/investment
    _rule("crypto", r"bitcoin|cryptocurrency|forex|trading", PROMOTIONAL_REASON, re.IGNORECASE),
)

PRIVACY_PATTERNS: Tuple[PatternRule, ...] = (
    _rule("email", r"\b[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}\b", PERSONAL_INFO_REASON, re.IGNORECASE),
    _rule("phone", r"\b(?:\+?\d{1,3}[-.\s]?)?(?:\(?\d{3}\)?[-.\s]?){2}\d{4}\b", PERSONAL_INFO_REASON),
    _rule("ssn", r"\b\d{3}-\d{2}-\d{4}\b", PERSONAL_INFO_REASON),
    _rule("credit_card", r"\b\d{4}[-\s]?\d{4}[-\s]?\d{4}[-\s]?\d{4}\b", PERSONAL_INFO_REASON),
    _rule(
        "street_address",
        r"\b\d{2,5}\s+[A-Za-z]+(?:\s[A-Za-z]+)*\s(?:street|st|avenue|ave|road|rd|drive|dr|lane|ln|way|blvd|boulevard)\b",
        PERSONAL_INFO_REASON,
        re.IGNORECASE,
    ),
    _rule(
        "identity_document",
        r"\b(?:driver['\s]?s?\s?license|passport|license\s+number|social\s+security)\b",
        PERSONAL_INFO_REASON,
        re.IGNORECASE,
    ),
)

# Quality scoring keyword tables

PROBLEM_KEYWORDS = (
    "problem", "issue", "challenge", "difficulty", "struggle",
    "frustration", "pain", "bottleneck", "obstacle", "barrier",
)

AUDIENCE_KEYWORDS = (
    "age", "years old", "professional", "student", "business",
    "company", "industry", "income", "location", "demographic",
)

SOLUTION_KEYWORDS = (
    "solution", "solve", "help", "enable", "provide",
    "platform", "app", "system", "service", "tool",
)

COMPETITIVE_KEYWORDS = (
    "different", "better", "unique", "unlike", "compared to",
    "competitor", "alternative", "existing", "current", "market",
)

RESEARCH_KEYWORDS = (
    "research", "data", "evidence", "study", "analysis",
    "validate", "test", "prototype", "feedback", "iterate",
)

VAGUE_KEYWORDS = (
    "maybe", "might", "could be", "sort of", "kind of",
    "probably", "possibly", "perhaps", "i think",
)

# Advisory keyword tables

COMPLEXITY_INDICATORS = (
    "ai", "machine learning", "blockchain", "quantum",
    "neural network", "cryptocurrency", "autonomous",
)

SIMPLICITY_INDICATORS = (
    "simple", "basic", "straightforward", "easy to build",
    "minimal viable product", "mvp",
)

MARKET_KEYWORDS = (
    "target market", "market research", "competitive analysis", "user research",
    "customer interviews", "market size", "addressable market", "market opportunity",
)

MINIMAL_EFFORT_PHRASES = (
    "i need help", "please help", "any ideas", "what do you think",
    "not sure", "dont know", "maybe something", "just an idea",
)

BUSINESS_KEYWORDS = (
    "revenue", "profit", "business model", "monetize", "pricing",
    "market size", "customers", "demand", "value proposition",
)
