"""Tests for summary and key takeaway extraction."""

from __future__ import annotations

from undoc.extractors.summary import generate_summary
from undoc.extractors.takeaways import extract_key_takeaways

# ---------------------------------------------------------------------------
# Summarizer
# ---------------------------------------------------------------------------

class TestGenerateSummary:
    def test_first_three_long_sentences(self):
        text = (
            "Short one. This sentence is long enough to count. "
            "Another sentence that is long enough! Is this third sentence long enough? "
            "The fourth long sentence is never used."
        )
        assert generate_summary(text, "Doc") == (
            "This sentence is long enough to count. "
            "Another sentence that is long enough. "
            "Is this third sentence long enough."
        )

    def test_short_sentences_skipped(self):
        text = "Tiny. Also tiny. Here comes a sufficiently long sentence."
        assert generate_summary(text, "Doc") == "Here comes a sufficiently long sentence."

    def test_fallback_mentions_title(self):
        assert generate_summary("Hi. Ok.", "Widget SDK") == (
            "Documentation for Widget SDK. This page has been simplified for easier reading."
        )

    def test_empty_text_fallback(self):
        assert generate_summary("", "Documentation").startswith("Documentation for Documentation.")

    def test_exactly_twenty_chars_is_not_enough(self):
        assert generate_summary("a" * 20 + ".", "T").startswith("Documentation for T.")

    def test_twenty_one_chars_is_enough(self):
        assert generate_summary("a" * 21 + ".", "T") == "a" * 21 + "."


# ---------------------------------------------------------------------------
# Takeaway extractor
# ---------------------------------------------------------------------------

class TestExtractKeyTakeaways:
    def test_marker_words(self):
        text = "\n".join([
            "It is important to pin the client version in production.",
            "You must call init() before any other method is used.",
            "Plain line without any emphasis whatsoever in it here.",
        ])
        assert extract_key_takeaways(text) == [
            "It is important to pin the client version in production.",
            "You must call init() before any other method is used.",
        ]

    def test_markers_are_case_sensitive(self):
        # "Important" and "Must" are capitalized and do not count; fall back to sentences
        text = "Important configuration lives in the settings file at the root. Must be valid YAML"
        result = extract_key_takeaways(text)
        assert result == ["Important configuration lives in the settings file at the root"]

    def test_note_marker_lower_case_only(self):
        text = "note: the cache is cleared on every deploy of the service"
        assert extract_key_takeaways(text) == [text]

    def test_numbered_list_marker_stripped(self):
        text = "1. Install the command line tool with your package manager"
        assert extract_key_takeaways(text) == [
            "Install the command line tool with your package manager",
        ]

    def test_numbered_marker_requires_ascii_digits(self):
        # Arabic-Indic three is not a list number; nothing else qualifies either
        text = "٣. this line has no marker words! at all here, ok fine"
        assert extract_key_takeaways(text) == []

    def test_bulleted_list_marker_stripped(self):
        text = "- Configure the region before creating any resources\n* Keep credentials out of source control"
        assert extract_key_takeaways(text) == [
            "Configure the region before creating any resources",
            "Keep credentials out of source control",
        ]

    def test_length_bounds(self):
        too_short = "- short bullet line"
        too_long = "- " + "word " * 50
        assert extract_key_takeaways(f"{too_short}\n{too_long}") == []

    def test_stops_at_five(self):
        text = "\n".join(f"- bullet number {i} with enough text to qualify" for i in range(9))
        result = extract_key_takeaways(text)
        assert len(result) == 5
        assert result[0] == "bullet number 0 with enough text to qualify"
        assert result[-1] == "bullet number 4 with enough text to qualify"

    def test_fallback_sentences(self, plain_article_html):
        from undoc.extractors.main_content import extract_main_content

        result = extract_key_takeaways(extract_main_content(plain_article_html))
        assert result == [
            "This release focuses on stability across the whole storage layer and the network stack",
            "Startup time is now roughly half of what it was in the previous version",
            "The configuration loader was rewritten to report problems with precise line numbers",
        ]
        for takeaway in result:
            assert 40 < len(takeaway) < 200

    def test_fallback_caps_at_three(self):
        sentence = "This declarative sentence is comfortably longer than forty characters"
        text = ". ".join([sentence] * 6) + "."
        result = extract_key_takeaways(text)
        assert len(result) == 3

    def test_fallback_ignores_question_marks(self):
        text = "Why would anyone split on a question mark here? Nobody knows the answer to that one!"
        assert extract_key_takeaways(text) == [
            "Why would anyone split on a question mark here? Nobody knows the answer to that one",
        ]

    def test_empty(self):
        assert extract_key_takeaways("") == []
