"""
Unit tests for the Subject catalog

Tests free-text parsing and comma-separated specialty lists.
"""

import pytest

from tuition.exceptions import InvalidSubjectError
from tuition.models.subject import Subject, parse_subjects


class TestSubjectCatalog:
    """Test the fixed set of subjects"""

    def test_six_subjects(self):
        """Test catalog has exactly the six tutoring subjects"""
        assert [s.name for s in Subject] == [
            "ENGLISH_COMPREHENSION",
            "ENGLISH_WRITING",
            "MATH",
            "NUMERICAL_REASONING",
            "VERBAL_REASONING",
            "NON_VERBAL_REASONING",
        ]

    def test_labels(self):
        assert Subject.MATH.label == "Math"
        assert Subject.NON_VERBAL_REASONING.label == "Non-Verbal Reasoning"

    def test_str_is_name(self):
        assert str(Subject.ENGLISH_WRITING) == "ENGLISH_WRITING"


class TestSubjectParse:
    """Test Subject.parse"""

    @pytest.mark.parametrize("text", ["math", "MATH", "Math", "  mAtH  "])
    def test_parse_any_case(self, text):
        """Test parsing ignores case and surrounding whitespace"""
        assert Subject.parse(text) is Subject.MATH

    def test_parse_underscored_name(self):
        assert Subject.parse("non_verbal_reasoning") is Subject.NON_VERBAL_REASONING

    def test_parse_unknown_subject_fails(self):
        """Test unknown subject raises instead of defaulting"""
        with pytest.raises(InvalidSubjectError, match="Invalid subject: 'chemistry'"):
            Subject.parse("chemistry")

    def test_parse_label_is_not_a_name(self):
        """Test display labels are not accepted in place of names"""
        with pytest.raises(InvalidSubjectError):
            Subject.parse("English Writing")

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_parse_empty_fails(self, text):
        with pytest.raises(InvalidSubjectError):
            Subject.parse(text)

    def test_error_is_value_error_with_choices(self):
        """Test error carries the rejected text and valid choices"""
        with pytest.raises(ValueError) as exc_info:
            Subject.parse("art")

        assert exc_info.value.text == "art"
        assert "MATH" in exc_info.value.choices
        assert len(exc_info.value.choices) == 6


class TestParseSubjects:
    """Test comma-separated subject lists"""

    def test_parse_list(self):
        assert parse_subjects("math, english_writing") == {Subject.MATH, Subject.ENGLISH_WRITING}

    def test_duplicates_collapse(self):
        assert parse_subjects("math,MATH, Math") == {Subject.MATH}

    def test_blank_items_ignored(self):
        assert parse_subjects("math,, ") == {Subject.MATH}
        assert parse_subjects("") == set()

    def test_bad_item_fails_whole_list(self):
        with pytest.raises(InvalidSubjectError):
            parse_subjects("math, chemistry")
