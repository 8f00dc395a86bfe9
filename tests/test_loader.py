"""Tests for recursive documentation loading and the document table."""

from docqa.indexing.loader import Document, DocumentTable, load_documents, load_files


def _write(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


class TestLoadFiles:
    def test_recursive_with_suffix_filter(self, tmp_path):
        _write(tmp_path / "index.mdx", "Top\n")
        _write(tmp_path / "guide" / "deep" / "page.mdx", "Deep\n")
        _write(tmp_path / "guide" / "notes.md", "Ignored\n")

        files = load_files(tmp_path, ".mdx")

        assert files == [("guide/deep/page.mdx", "Deep\n"), ("index.mdx", "Top\n")]

    def test_missing_directory_returns_empty(self, tmp_path):
        assert load_files(tmp_path / "nope", ".mdx") == []

    def test_directories_matching_suffix_are_skipped(self, tmp_path):
        (tmp_path / "weird.mdx").mkdir()
        _write(tmp_path / "weird.mdx" / "real.mdx", "x\n")

        assert [path for path, _ in load_files(tmp_path, ".mdx")] == ["weird.mdx/real.mdx"]


class TestDocumentTable:
    def test_load_documents_segments_each_file(self, tmp_path):
        _write(tmp_path / "a.mdx", "---\ntitle: A\n---\n# A\n\nFirst.\n\nSecond.\n")

        table = load_documents(tmp_path, ".mdx")

        assert len(table) == 1
        assert table["a.mdx"].chunks == ("First.\n", "Second.\n")

    def test_get_contents_returns_raw_text(self):
        table = DocumentTable([Document.parse("x.mdx", "# X\n\nBody\n")])

        assert table.get_contents("x.mdx") == "# X\n\nBody\n"
        assert table.get_contents("missing.mdx") is None

    def test_lookup_is_exact(self):
        table = DocumentTable([Document.parse("guide/x.mdx", "Body\n")])

        assert table.get_contents("x.mdx") is None
        assert table.get_contents("guide/X.mdx") is None
        assert "guide/x.mdx" in table
