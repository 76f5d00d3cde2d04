import time

from linesniff.detectors.line import MAX_CONFIDENCE, NEUTRAL_CONFIDENCE, score_line
from linesniff.detectors.models import SnippetReport
from linesniff.detectors.structural import analyze_structure
from linesniff.logging import get_logger

logger = get_logger("scoring")

STRUCTURE_BOOST_THRESHOLD = 0.5
STRUCTURE_BOOST = 0.1


def analyze(code: str, language: str) -> SnippetReport:
    """
    Classify every line of `code` and fold the verdicts into a report.

    The structure scalar is computed once for the whole snippet; when it is
    high, lines already judged AI get a small confidence bump. Statistics
    cover non-blank lines only, while `line_verdicts` keeps every line in
    its original order.
    """
    started = time.perf_counter()

    structure_score = analyze_structure(code)
    lines = code.split("\n") if code else []

    verdicts = []
    for i, line in enumerate(lines):
        verdict = score_line(line, i + 1, language)
        if structure_score > STRUCTURE_BOOST_THRESHOLD and verdict.is_ai:
            verdict.confidence = min(verdict.confidence + STRUCTURE_BOOST, MAX_CONFIDENCE)
        verdicts.append(verdict)

    non_blank = [v for v in verdicts if not v.blank]
    total = len(non_blank)
    ai_lines = sum(1 for v in non_blank if v.is_ai)
    human_lines = total - ai_lines

    ai_pct = (ai_lines / total) * 100 if total else 0.0
    human_pct = (human_lines / total) * 100 if total else 0.0
    overall = sum(v.confidence for v in non_blank) / total if total else NEUTRAL_CONFIDENCE

    logger.debug(
        "Snippet analyzed",
        extra={
            "language": language,
            "total_lines": total,
            "ai_lines": ai_lines,
            "structure_score": structure_score,
            "duration_ms": round((time.perf_counter() - started) * 1000, 3),
        },
    )

    return SnippetReport(
        total_lines=total,
        ai_lines=ai_lines,
        human_lines=human_lines,
        ai_percentage=ai_pct,
        human_percentage=human_pct,
        overall_confidence=overall,
        line_verdicts=verdicts,
    )
