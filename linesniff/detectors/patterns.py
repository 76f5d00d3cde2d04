"""
Pattern Registry
────────────────
Declarative table of weighted line signals. Each entry couples a compiled
matcher with a weight, a human-readable reason and the side it argues for.

Patterns deliberately overlap: one line can fire several of them and every
firing is counted once, no matter how many times the matcher hits the line.

The tables are built at import time and never mutated afterwards.
"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from linesniff.detectors.models import Label


@dataclass(frozen=True)
class Pattern:
    matcher: re.Pattern
    weight: float
    reason: str
    polarity: Label

    def matches(self, text: str) -> bool:
        return self.matcher.search(text) is not None


# Block comments may span lines, line comments stop at the newline.
# Shared with the structure analyzer, which counts spans across the snippet
COMMENT_RE = re.compile(r"/\*[\s\S]*?\*/|//.*$", re.MULTILINE)


# ─── General Patterns ───────────────────────────────────────────────────────

GENERAL_PATTERNS: Tuple[Pattern, ...] = (
    Pattern(
        COMMENT_RE,
        0.3,
        "Contains verbose or generic comments typical of AI generation",
        Label.AI,
    ),
    Pattern(
        re.compile(r"\b(result|response|data|item|element|value|temp|obj|arr)\d*\b", re.IGNORECASE),
        0.4,
        "Uses generic variable names common in AI-generated code",
        Label.AI,
    ),
    Pattern(
        re.compile(r"\b(try|finally)\s*[{:]|\bcatch\s*\("),
        0.2,
        "Contains comprehensive error handling patterns",
        Label.AI,
    ),
    Pattern(
        re.compile(r"\b(\w+)\s*=\s*\1\b"),
        0.3,
        "Contains repetitive assignment patterns",
        Label.AI,
    ),
    Pattern(
        re.compile(r"(TODO|FIXME|NOTE|HACK):", re.IGNORECASE),
        0.5,
        "Contains TODO/FIXME comments suggesting human planning",
        Label.HUMAN,
    ),
    Pattern(
        re.compile(r"/(?:\\.|[^/\\\n])+/[gimsuy]*"),
        0.3,
        "Contains complex regex patterns",
        Label.HUMAN,
    ),
    Pattern(
        re.compile(r"\s{3,}|\t\s+|\s+\t"),
        0.2,
        "Has inconsistent spacing typical of human editing",
        Label.HUMAN,
    ),
    Pattern(
        re.compile(r"\b(btn|txt|img|nav|auth|admin|cfg|opts|params|args|ctx|req|res|db|api)\b", re.IGNORECASE),
        0.3,
        "Uses domain-specific abbreviations common in human code",
        Label.HUMAN,
    ),
)


# ─── Language-specific Patterns ─────────────────────────────────────────────

LANGUAGE_PATTERNS: Mapping[str, Tuple[Pattern, ...]] = MappingProxyType({
    "javascript": (
        Pattern(
            re.compile(r"console\.(log|debug)\([^)]*\)"),
            0.2,
            "Contains debug console.log statements",
            Label.HUMAN,
        ),
        Pattern(
            re.compile(r"function\s+\w+\s*\([^)]*\)\s*\{"),
            0.1,
            "Uses function declarations",
            Label.AI,
        ),
    ),
    "python": (
        Pattern(
            re.compile(r"\bprint\([^)]*\)"),
            0.2,
            "Contains debug print statements",
            Label.HUMAN,
        ),
        Pattern(
            re.compile(r"def\s+\w+\s*\([^)]*\)\s*(->\s*[^:]+)?:"),
            0.1,
            "Uses function definitions",
            Label.AI,
        ),
    ),
    "typescript": (
        Pattern(
            re.compile(r":\s*(string|number|boolean|any|unknown|void|never)\b"),
            0.2,
            "Contains explicit type annotations",
            Label.AI,
        ),
    ),
})


def patterns_for(language: str) -> Tuple[Pattern, ...]:
    """Language-specific patterns, or an empty tuple for unknown languages."""
    return LANGUAGE_PATTERNS.get(language, ())
