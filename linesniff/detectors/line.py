import re

from linesniff.detectors.models import Label, LineVerdict
from linesniff.detectors.patterns import GENERAL_PATTERNS, patterns_for

MIN_CONFIDENCE = 0.1
MAX_CONFIDENCE = 0.95
NEUTRAL_CONFIDENCE = 0.5

EMPTY_LINE_REASON = "Empty line - neutral"
NO_SIGNAL_REASON = "No significant patterns detected - neutral classification"

LONG_LINE_CHARS = 120
SHORT_LINE_CHARS = 20
PERFECT_SYNTAX_MIN_CHARS = 30

_CODE_PUNCTUATION = re.compile(r"[{}();,]")
# Anything outside ASCII word chars, any whitespace and plain code punctuation
_IMPERFECT_CHAR = re.compile(r"[^A-Za-z0-9_\s()\[\]{};:,.<>!@#$%^&*+=|\\?/-]")
_PLACEHOLDER_NAME = re.compile(r"\b(foo|bar|baz|qux|quirky|magic|hack|wtf)\b", re.IGNORECASE)


def clamp_confidence(value: float) -> float:
    return min(max(value, MIN_CONFIDENCE), MAX_CONFIDENCE)


def score_line(line: str, line_number: int, language: str) -> LineVerdict:
    """
    Weigh a single line against the pattern registry and a few standalone
    heuristics. AI wins only when its weight strictly exceeds the human weight.
    """
    content = line.strip()

    if not content:
        return LineVerdict(
            content=line,
            line_number=line_number,
            classification=Label.HUMAN,
            confidence=NEUTRAL_CONFIDENCE,
            justifications=[EMPTY_LINE_REASON],
            blank=True,
        )

    ai_score = 0.0
    human_score = 0.0
    reasons = []

    for pattern in GENERAL_PATTERNS + patterns_for(language):
        if pattern.matches(content):
            if pattern.polarity is Label.AI:
                ai_score += pattern.weight
            else:
                human_score += pattern.weight
            reasons.append(pattern.reason)

    if len(content) > LONG_LINE_CHARS:
        ai_score += 0.2
        reasons.append("Very long line length typical of AI generation")
    elif len(content) < SHORT_LINE_CHARS and not _CODE_PUNCTUATION.search(content):
        human_score += 0.1
        reasons.append("Short, concise line suggests human writing")

    if len(content) > PERFECT_SYNTAX_MIN_CHARS and not _IMPERFECT_CHAR.search(content):
        ai_score += 0.1
        reasons.append("Perfect syntax and structure")

    if _PLACEHOLDER_NAME.search(content):
        human_score += 0.3
        reasons.append("Uses creative or placeholder naming typical of humans")

    total = ai_score + human_score
    confidence = max(ai_score, human_score) / total if total > 0 else NEUTRAL_CONFIDENCE

    if not reasons:
        reasons.append(NO_SIGNAL_REASON)

    return LineVerdict(
        content=line,
        line_number=line_number,
        classification=Label.AI if ai_score > human_score else Label.HUMAN,
        confidence=clamp_confidence(confidence),
        justifications=reasons,
    )
