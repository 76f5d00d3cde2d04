"""
Verdict & Report Models
───────────────────────
Plain result containers produced by the detection engine. They are created
fresh for every `analyze()` call and carry no behaviour beyond JSON export.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class Label(str, Enum):
    """Which side a pattern argues for, and which side a line lands on."""
    AI = "ai"
    HUMAN = "human"


@dataclass
class LineVerdict:
    content: str                 # original, untrimmed line
    line_number: int             # 1-based, kept for traceability only
    classification: Label
    confidence: float            # [0.1, 0.95], blank lines fixed at 0.5
    justifications: List[str] = field(default_factory=list)
    blank: bool = False

    @property
    def is_ai(self) -> bool:
        return self.classification is Label.AI

    def to_dict(self) -> dict:
        return {
            "line": self.line_number,
            "content": self.content,
            "classification": self.classification.value,
            "confidence": round(self.confidence, 4),
            "justifications": list(self.justifications),
            "blank": self.blank,
        }


@dataclass
class SnippetReport:
    total_lines: int             # non-blank lines only
    ai_lines: int
    human_lines: int
    ai_percentage: float
    human_percentage: float
    overall_confidence: float
    line_verdicts: List[LineVerdict] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "total_lines": self.total_lines,
            "ai_lines": self.ai_lines,
            "human_lines": self.human_lines,
            "ai_percentage": round(self.ai_percentage, 2),
            "human_percentage": round(self.human_percentage, 2),
            "overall_confidence": round(self.overall_confidence, 4),
            "lines": [v.to_dict() for v in self.line_verdicts],
        }
