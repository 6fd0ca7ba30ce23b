"""Test excerpt generation."""

from sitesearch.search.excerpt import generate_excerpt, make_excerpt


class TestMakeExcerpt:
    """Test windowing and highlighting."""

    def test_basic_highlighting(self):
        """Should highlight the query inside short content."""
        result = make_excerpt("Senior engineer with cloud experience", "cloud")
        assert result == "Senior engineer with <mark>cloud</mark> experience"

    def test_window_near_end(self):
        """Match near the end gets a prefix ellipsis only."""
        content = "a" * 150 + "query" + "b" * 45
        assert len(content) == 200

        excerpt = generate_excerpt(content, "query")
        assert excerpt.plain_text == "..." + content[110:200]
        assert excerpt.text == "..." + "a" * 40 + "<mark>query</mark>" + "b" * 45
        assert not excerpt.text.endswith("...")

    def test_window_near_start(self):
        """Match at the start gets a suffix ellipsis only."""
        content = "query" + "c" * 100
        result = make_excerpt(content, "query")
        assert result == "<mark>query</mark>" + "c" * 60 + "..."

    def test_ellipsis_both_sides(self):
        """Match in the middle of long content gets both ellipses."""
        content = "x" * 100 + "needle" + "y" * 100
        excerpt = generate_excerpt(content, "needle")
        assert excerpt.plain_text.startswith("...")
        assert excerpt.plain_text.endswith("...")
        assert len(excerpt.plain_text) == 3 + 40 + 6 + 60 + 3

    def test_no_match_truncates(self):
        """Should return the leading 120 characters when there is no match."""
        content = "x" * 130
        assert make_excerpt(content, "zz") == "x" * 120 + "..."

    def test_no_match_short_content(self):
        """Short content without a match is returned unchanged."""
        assert make_excerpt("short text", "zz") == "short text"

    def test_empty_content(self):
        """Should return empty string for empty content."""
        assert make_excerpt("", "cloud") == ""

    def test_case_insensitive_highlight(self):
        """Should highlight every case variant of the query."""
        result = make_excerpt("Cloud first, cloud always, CLOUD forever", "cloud")
        assert result.count("<mark>") == 3
        assert "<mark>Cloud</mark>" in result
        assert "<mark>CLOUD</mark>" in result

    def test_keeps_original_accents(self):
        """Should locate accent-free queries but show the source text."""
        result = make_excerpt("El Café de la esquina", "cafe")
        assert "Café" in result

    def test_accented_highlight(self):
        """Should highlight accented text regardless of case."""
        result = make_excerpt("CAFÉ con leche", "Café")
        assert result == "<mark>CAFÉ</mark> con leche"

    def test_special_characters(self):
        """Regex metacharacters in the query are matched literally."""
        result = make_excerpt("Price is $100.99 (today)", "$100.99")
        assert result == "Price is <mark>$100.99</mark> (today)"
        result = make_excerpt("Price is $100.99 (today)", "(today)")
        assert result == "Price is $100.99 <mark>(today)</mark>"

    def test_offsets_map_through_decomposed_text(self):
        """Window is cut on the original text when normalization shortens it."""
        content = "e\u0301" * 50 + "target"
        excerpt = generate_excerpt(content, "target")
        assert excerpt.plain_text == "..." + "e\u0301" * 20 + "target"
        assert excerpt.text == "..." + "e\u0301" * 20 + "<mark>target</mark>"


class TestGenerateExcerpt:
    """Test excerpt options."""

    def test_without_highlight(self):
        """Should return identical text and plain_text."""
        excerpt = generate_excerpt("Senior engineer with cloud experience", "cloud", highlight=False)
        assert excerpt.text == excerpt.plain_text
        assert "<mark>" not in excerpt.text

    def test_custom_markers(self):
        """Should use the given highlight markers."""
        excerpt = generate_excerpt(
            "cloud native", "cloud", open_marker="[[", close_marker="]]"
        )
        assert excerpt.text == "[[cloud]] native"
        assert excerpt.plain_text == "cloud native"

    def test_custom_window(self):
        """Should honor custom window sizes."""
        content = "0123456789needle0123456789"
        excerpt = generate_excerpt(content, "needle", before=2, after=2)
        assert excerpt.plain_text == "...89needle01..."

    def test_ellipsis_not_highlighted(self):
        """Dots added for truncation are never highlighted."""
        content = "a" * 100 + "..." + "b" * 100
        excerpt = generate_excerpt(content, "...")
        assert excerpt.text.startswith("...")
        assert excerpt.text.count("<mark>") == 1

    def test_final_sigma_match(self):
        """Queries typed with final sigma find upper-case Greek text."""
        content = "x" * 100 + " ΔΡΟΜΟΣ ΕΙΝΑΙ"
        excerpt = generate_excerpt(content, "δρομος")
        assert excerpt.plain_text == "..." + content[61:]
