"""Tests for entity decoding and markup stripping."""

from __future__ import annotations

from undoc.extractors.entities import decode_entities
from undoc.extractors.markup import (
    LEFT_ANGLE_QUOTE,
    RIGHT_ANGLE_QUOTE,
    html_to_text,
    neutralize_angle_brackets,
    strip_payloads,
)

# ---------------------------------------------------------------------------
# Entity decoding
# ---------------------------------------------------------------------------

class TestDecodeEntities:
    def test_named_entities(self):
        assert decode_entities("a&nbsp;b &lt;x&gt; &quot;q&quot; it&#39;s it&apos;s") == (
            "a b <x> \"q\" it's it's"
        )

    def test_amp_decoded(self):
        assert decode_entities("R&amp;D") == "R&D"

    def test_amp_lt_is_not_double_unescaped(self):
        assert decode_entities("&amp;lt;") == "&lt;"

    def test_amp_quot_is_not_double_unescaped(self):
        assert decode_entities("&amp;quot;") == "&quot;"

    def test_numeric_references_left_alone(self):
        assert decode_entities("&#169; &#x3C;") == "&#169; &#x3C;"

    def test_unknown_named_entity_left_alone(self):
        assert decode_entities("&copy;") == "&copy;"

    def test_empty(self):
        assert decode_entities("") == ""


# ---------------------------------------------------------------------------
# Payload stripping
# ---------------------------------------------------------------------------

class TestStripPayloads:
    def test_removes_script_block(self):
        assert strip_payloads("a<script>alert(1)</script>b") == "ab"

    def test_removes_style_block_case_insensitive(self):
        assert strip_payloads("a<STYLE type='text/css'>p{}</Style >b") == "ab"

    def test_removes_multiline_script(self):
        html = "x<script>\nvar a = 1;\nvar b = 2;\n</script>y"
        assert strip_payloads(html) == "xy"

    def test_removes_orphaned_opening_tag(self):
        assert strip_payloads("before<script src='x.js'>after") == "beforeafter"

    def test_removes_orphaned_closing_tag(self):
        assert strip_payloads("before</script>after") == "beforeafter"

    def test_nested_script_fragments(self):
        html = "<scr<script>x</script>ipt>alert(1)</script>"
        out = strip_payloads(html)
        assert "<script" not in out.lower()

    def test_deeply_repeated_unterminated_script_terminates(self):
        out = strip_payloads("<script>" * 1000)
        assert "<script" not in out

    def test_pass_limit_is_respected(self):
        # A single pass handles this; max_passes=1 must still return.
        assert strip_payloads("<script>x</script>", max_passes=1) == ""

    def test_unchanged_input(self):
        assert strip_payloads("<p>plain</p>") == "<p>plain</p>"


# ---------------------------------------------------------------------------
# html_to_text
# ---------------------------------------------------------------------------

class TestHtmlToText:
    def test_empty(self):
        assert html_to_text("") == ""

    def test_paragraphs_become_blank_line_separated(self):
        assert html_to_text("<p>One</p><p>Two</p>") == "One\n\nTwo"

    def test_br_variants(self):
        assert html_to_text("a<br>b<BR/>c<br />d") == "a\nb\nc\nd"

    def test_list_items_on_own_lines(self):
        assert html_to_text("<ul><li>a</li><li>b</li></ul>") == "a\nb"

    def test_headings_followed_by_blank_line(self):
        assert html_to_text("<h2>Title</h2>Body") == "Title\n\nBody"

    def test_div_boundaries(self):
        assert html_to_text("<div>a</div><div>b</div>") == "a\nb"

    def test_all_tags_removed(self):
        assert html_to_text('<span class="x"><a href="/y">link</a></span>') == "link"

    def test_scripts_and_styles_removed(self):
        html = "<style>p{color:red}</style><p>Visible</p><script>evil()</script>"
        assert html_to_text(html) == "Visible"

    def test_entities_decoded(self):
        assert html_to_text("<p>Tom &amp; Jerry</p>") == "Tom & Jerry"

    def test_encoded_markup_is_neutralized(self):
        out = html_to_text("<p>&lt;script&gt;alert(1)&lt;/script&gt;</p>")
        assert "<" not in out
        assert ">" not in out
        assert out == f"{LEFT_ANGLE_QUOTE}script{RIGHT_ANGLE_QUOTE}alert(1)" \
                      f"{LEFT_ANGLE_QUOTE}/script{RIGHT_ANGLE_QUOTE}"

    def test_stray_angle_brackets_neutralized(self):
        assert html_to_text("if a < b") == f"if a {LEFT_ANGLE_QUOTE} b"
        assert html_to_text("if a > b") == f"if a {RIGHT_ANGLE_QUOTE} b"

    def test_bracket_pair_looks_like_tag_and_is_stripped(self):
        assert html_to_text("1 < 2 and 3 > 2") == "1  2"

    def test_double_escaped_entity_stays_literal(self):
        assert html_to_text("<p>&amp;lt;b&amp;gt;</p>") == "&lt;b&gt;"

    def test_blank_line_runs_collapsed(self):
        out = html_to_text("<p>a</p><p></p><p></p><p>b</p>")
        assert "\n\n\n" not in out
        assert out == "a\n\nb"

    def test_trimmed(self):
        assert html_to_text("   <p>  hi  </p>   ") == "hi"

    def test_adversarial_script_input_is_safe(self):
        out = html_to_text("<script>" * 1000 + "<p>after</p>")
        assert "<script" not in out
        assert "<" not in out
        assert out == "after"

    def test_unclosed_tag_over_strips_without_raising(self):
        assert html_to_text("text <a href='x' unclosed") == "text " + \
            f"{LEFT_ANGLE_QUOTE}a href='x' unclosed"


class TestNeutralize:
    def test_replaces_both_brackets(self):
        assert neutralize_angle_brackets("<b>") == f"{LEFT_ANGLE_QUOTE}b{RIGHT_ANGLE_QUOTE}"

    def test_no_brackets_unchanged(self):
        assert neutralize_angle_brackets("plain") == "plain"
