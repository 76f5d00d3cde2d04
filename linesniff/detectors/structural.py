"""
Structural Regularity Engine
────────────────────────────
One whole-snippet scalar in [0, 1] built from three signals:

1. Indentation consistency
   AI output indents with one unit and sticks to it. We take the first
   indented line as the reference and count how many lines agree with it.

2. Comment density
   Comment spans per non-blank line. Generated code narrates itself.

3. Defensive-programming density
   try / catch / throw / Error / Exception tokens per non-blank line.
"""

import re

from linesniff.detectors.patterns import COMMENT_RE

_LEADING_WS = re.compile(r"^\s*")
_DEFENSIVE_TOKEN = re.compile(r"try|catch|throw|Error|Exception")


def _indent_consistency(lines: list) -> float:
    """Fraction of lines whose indent agrees with the first indented line."""
    reference = ""
    consistent = 0
    for line in lines:
        indent = _LEADING_WS.match(line).group()
        if not reference and indent:
            reference = indent
        if indent == reference or indent == "" or indent.startswith(reference):
            consistent += 1
    return consistent / len(lines)


def analyze_structure(code: str) -> float:
    lines = [l for l in code.split("\n") if l.strip()]
    if not lines:
        return 0.0

    score = 0.0

    # Very consistent indentation
    if _indent_consistency(lines) > 0.9:
        score += 0.3

    # Overly comprehensive documentation
    if len(COMMENT_RE.findall(code)) / len(lines) > 0.3:
        score += 0.2

    # Excessive defensive programming
    if len(_DEFENSIVE_TOKEN.findall(code)) > len(lines) * 0.1:
        score += 0.2

    return min(score, 1.0)
