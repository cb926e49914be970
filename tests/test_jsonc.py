"""Tests for JSON comment stripping"""
import json

from git_project_finder.utils.jsonc import strip_json_comments


class TestStripJsonComments:
    """Test comment and trailing comma removal."""

    def test_line_and_block_comments(self):
        text = '{\n  // projects\n  "a": 1, /* inline */ "b": 2\n}'
        assert json.loads(strip_json_comments(text)) == {"a": 1, "b": 2}

    def test_comment_markers_inside_strings_kept(self):
        text = '{"url": "https://example.com/*x*/", "path": "a//b"}'
        assert json.loads(strip_json_comments(text)) == {
            "url": "https://example.com/*x*/",
            "path": "a//b",
        }

    def test_escaped_quotes_in_strings(self):
        text = '{"a": "say \\"hi\\" // not a comment"}'
        assert json.loads(strip_json_comments(text)) == {"a": 'say "hi" // not a comment'}

    def test_trailing_commas(self):
        text = '{"projects": {"demo": {"root": "/r",},}, "list": [1, 2,],}'
        assert json.loads(strip_json_comments(text)) == {
            "projects": {"demo": {"root": "/r"}},
            "list": [1, 2],
        }

    def test_trailing_comma_before_comment(self):
        text = '{"a": 1, // last\n}'
        assert json.loads(strip_json_comments(text)) == {"a": 1}

    def test_trailing_commas_kept_when_disabled(self):
        assert strip_json_comments('[1,]', trailing_commas=False) == '[1,]'

    def test_preserves_line_numbers(self):
        text = '/* one\ntwo */\n{"a": 1}'
        assert strip_json_comments(text).count("\n") == text.count("\n")

    def test_unterminated_block_comment(self):
        assert strip_json_comments('{"a": 1} /* open').strip() == '{"a": 1}'
