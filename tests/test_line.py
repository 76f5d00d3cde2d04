import pytest

from linesniff.detectors.line import (
    EMPTY_LINE_REASON,
    NO_SIGNAL_REASON,
    clamp_confidence,
    score_line,
)
from linesniff.detectors.models import Label


class TestBlankLines:
    @pytest.mark.parametrize("line", ["", "   ", "\t", " \t \r"])
    def test_blank_sentinel(self, line):
        v = score_line(line, 1, "javascript")
        assert v.blank is True
        assert v.classification is Label.HUMAN
        assert v.confidence == 0.5
        assert v.justifications == [EMPTY_LINE_REASON]
        assert v.content == line


class TestScenarios:
    def test_self_assignment_is_ai(self):
        v = score_line("x = x;", 1, "javascript")
        assert v.classification is Label.AI
        assert v.confidence == 0.95
        assert v.justifications == ["Contains repetitive assignment patterns"]

    def test_todo_hack_comment_is_human(self):
        v = score_line("// TODO: fix this hack later", 1, "python")
        assert v.classification is Label.HUMAN
        assert v.confidence == pytest.approx(0.8 / 1.1)
        assert v.justifications == [
            "Contains verbose or generic comments typical of AI generation",
            "Contains TODO/FIXME comments suggesting human planning",
            "Uses creative or placeholder naming typical of humans",
        ]

    def test_no_signal_line_is_neutral(self):
        v = score_line("let total = count + 1;", 3, "javascript")
        assert v.classification is Label.HUMAN
        assert v.confidence == 0.5
        assert v.justifications == [NO_SIGNAL_REASON]
        assert v.line_number == 3

    def test_tie_goes_to_human(self):
        v = score_line("x(); // db", 1, "javascript")
        assert v.classification is Label.HUMAN
        assert v.confidence == pytest.approx(0.5)


class TestHeuristics:
    def test_very_long_line(self):
        line = "const " + "a" * 130 + ";"
        v = score_line(line, 1, "javascript")
        assert "Very long line length typical of AI generation" in v.justifications
        assert "Perfect syntax and structure" in v.justifications
        assert v.classification is Label.AI

    def test_short_line_without_code_punctuation(self):
        v = score_line("x", 1, "javascript")
        assert v.justifications == ["Short, concise line suggests human writing"]
        assert v.classification is Label.HUMAN
        assert v.confidence == 0.95

    def test_short_line_with_semicolon_gets_no_bonus(self):
        v = score_line("y = 2;", 1, "javascript")
        assert "Short, concise line suggests human writing" not in v.justifications

    def test_perfect_syntax(self):
        v = score_line("if (count > limit) { return count + 1; }", 1, "javascript")
        assert v.justifications == ["Perfect syntax and structure"]
        assert v.classification is Label.AI

    def test_quotes_break_perfect_syntax(self):
        v = score_line('const greeting = "hello there friend";', 1, "javascript")
        assert "Perfect syntax and structure" not in v.justifications

    def test_placeholder_names(self):
        v = score_line("console.log(foo)", 1, "javascript")
        assert "Uses creative or placeholder naming typical of humans" in v.justifications
        assert "Contains debug console.log statements" in v.justifications
        assert v.classification is Label.HUMAN

    def test_pattern_counted_once_per_line(self):
        v = score_line("data = data2 + data3", 1, "javascript")
        generic = "Uses generic variable names common in AI-generated code"
        assert v.justifications.count(generic) == 1


class TestLanguages:
    def test_python_print_only_in_python(self):
        py = score_line("print(x)", 1, "python")
        js = score_line("print(x)", 1, "javascript")
        assert py.classification is Label.HUMAN
        assert "Contains debug print statements" in py.justifications
        assert js.justifications == [NO_SIGNAL_REASON]

    def test_python_def(self):
        v = score_line("def compute(a, b):", 1, "python")
        assert v.classification is Label.AI
        assert "Uses function definitions" in v.justifications

    def test_typescript_annotation(self):
        v = score_line("let count: number = 0;", 1, "typescript")
        assert v.classification is Label.AI
        assert "Contains explicit type annotations" in v.justifications

    def test_javascript_function(self):
        v = score_line("function add(a, b) {", 1, "javascript")
        assert "Uses function declarations" in v.justifications

    def test_unknown_language_uses_general_patterns(self):
        assert score_line("x = x;", 1, "cobol") == score_line("x = x;", 1, "cobol")
        assert score_line("x = x;", 1, "cobol").classification is Label.AI
        assert score_line("print(x)", 1, "cobol").justifications == [NO_SIGNAL_REASON]


class TestConfidence:
    def test_clamp(self):
        assert clamp_confidence(1.0) == 0.95
        assert clamp_confidence(0.0) == 0.1
        assert clamp_confidence(0.7) == 0.7

    def test_content_is_untrimmed(self):
        v = score_line("    x = x;  ", 7, "javascript")
        assert v.content == "    x = x;  "
        assert v.classification is Label.AI

    @pytest.mark.parametrize("line", [
        "/[unclosed",
        "(((((",
        "\\\\\\",
        "a" * 500,
        "ünïcödé = ünïcödé;",
    ])
    def test_odd_input_is_handled(self, line):
        v = score_line(line, 1, "javascript")
        assert 0.1 <= v.confidence <= 0.95
        assert v.justifications

    def test_unicode_whitespace_keeps_perfect_syntax(self):
        v = score_line("if (count > limit)\u00a0{ return count + 1; }", 1, "javascript")
        assert v.justifications == ["Perfect syntax and structure"]

    def test_non_ascii_letters_break_perfect_syntax(self):
        v = score_line("if (größe > limit) { return größe + 1; }", 1, "javascript")
        assert "Perfect syntax and structure" not in v.justifications
