"""
Keyword fallback classifier.

Rule-based category matching used when the zero-shot model is disabled or
fails. Always available and never fails.

Precedence is the table order below: the first category with any keyword
present in the lowercased description wins, so "threatened me at gunpoint"
is Harassment even though it also carries an Assault keyword.

Keywords are regular expressions searched in the lowercased text. Short
stems anchor at a word start so "begun" and "establish" do not read as
"gun" and "stab".
"""

import re
from typing import Optional, Sequence, Tuple

from saferoute.models.incident import Category

FALLBACK_KEYWORDS: Sequence[Tuple[Category, Tuple[str, ...]]] = (
    (Category.HARASSMENT, ("harass", "intimidat", "threaten", r"\bstalk", "catcall")),
    (Category.ASSAULT, ("assault", "attack", "hit", "fight", r"\bpunch", r"\bstab", r"\bgun", "weapon", "mugged")),
    (Category.LIGHTING_ISSUE, ("light", "dark", "visibility", "lamp")),
    (Category.SUSPICIOUS_BEHAVIOR, ("suspicious", "strange", "weird", "loiter", "lurking")),
)


def match_keywords(text: str, table: Sequence[Tuple[Category, Tuple[str, ...]]]) -> Optional[Category]:
    for category, keywords in table:
        if any(re.search(keyword, text) for keyword in keywords):
            return category
    return None


def classify_by_keywords(description: Optional[str]) -> Category:
    """Deterministic category from keywords; Other when nothing matches."""
    desc_lower = (description or "").lower()
    return match_keywords(desc_lower, FALLBACK_KEYWORDS) or Category.OTHER
