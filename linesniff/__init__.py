"""Line-level AI-likelihood detection for source snippets."""

from linesniff.detectors import Label, LineVerdict, SnippetReport, analyze

__version__ = "1.0.0"

__all__ = ["Label", "LineVerdict", "SnippetReport", "analyze", "__version__"]
