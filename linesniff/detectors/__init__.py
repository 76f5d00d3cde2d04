from linesniff.detectors.models import Label, LineVerdict, SnippetReport
from linesniff.detectors.scoring import analyze

__all__ = ["Label", "LineVerdict", "SnippetReport", "analyze"]
