from linesniff.languages import (
    is_known,
    known_languages,
    language_from_path,
    normalize_language,
    resolve_language,
)


class TestNormalize:
    def test_aliases(self):
        assert normalize_language("js") == "javascript"
        assert normalize_language(" PY ") == "python"
        assert normalize_language("tsx") == "typescript"

    def test_unknown_passes_through(self):
        assert normalize_language("Rust") == "rust"
        assert not is_known("rust")

    def test_known_languages(self):
        assert known_languages() == ["javascript", "python", "typescript"]


class TestResolve:
    def test_extension(self):
        assert language_from_path("src/app.mjs") == "javascript"
        assert language_from_path("tool.PY") == "python"
        assert language_from_path("README.md") is None

    def test_explicit_wins(self):
        assert resolve_language("ts", "main.py", "javascript") == "typescript"

    def test_path_then_default(self):
        assert resolve_language(None, "main.py", "javascript") == "python"
        assert resolve_language(None, "notes.txt", "js") == "javascript"
        assert resolve_language(None, None, "python") == "python"
