"""Tests for strip_code_fences."""

from call_eval.judge.domain.payload import strip_code_fences


class TestStripCodeFences:
    def test_plain_json_is_returned_stripped(self) -> None:
        assert strip_code_fences('  {"a": 1}\n') == '{"a": 1}'

    def test_json_fence_is_removed(self) -> None:
        content = '```json\n{"a": 1}\n```'

        assert strip_code_fences(content) == '{"a": 1}'

    def test_bare_fence_is_removed(self) -> None:
        content = '```\n{"a": 1}\n```'

        assert strip_code_fences(content) == '{"a": 1}'

    def test_inner_backticks_are_left_alone(self) -> None:
        content = '{"feedback": "use `please` more"}'

        assert strip_code_fences(content) == content
