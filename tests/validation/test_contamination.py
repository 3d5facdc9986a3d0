"""Tests for the contamination analyzer."""

import pytest


class TestContaminates:
    def test_living_object(self):
        from qvalidator.core.models.validation import IssueType, Severity
        from qvalidator.validation.contamination import contaminates

        issue = contaminates("Are they alive?", "objects")
        assert issue is not None
        assert issue.type == IssueType.CategoryContamination
        assert issue.severity == Severity.Critical
        assert issue.conflicts_with == "objects.alive"
        assert "objects" in issue.description

    def test_always_true_for_animals(self):
        from qvalidator.validation.contamination import contaminates

        issue = contaminates("Is it alive?", "animals")
        assert issue is not None
        assert "always true" in issue.description

    @pytest.mark.parametrize("question,category", [
        ("Is it electronic?", "animals"),
        ("Does it hibernate?", "objects"),
        ("Do they have fur?", "world leaders"),
        ("Do they need batteries?", "nba players"),
        ("Are they a world leader?", "world leaders"),
        ("Do they play basketball?", "nba players"),
        ("Is he human?", "world leaders"),
        ("Do they breathe?", "cricket players"),
        ("Is it a person?", "animals"),
    ])
    def test_flagged(self, question, category):
        from qvalidator.validation.contamination import contaminates

        assert contaminates(question, category) is not None

    @pytest.mark.parametrize("question,category", [
        ("Is it a mammal?", "animals"),
        ("Is it used for cooking?", "objects"),
        ("Are they from Europe?", "world leaders"),
        ("Are they a bowler?", "cricket players"),
        ("Do they play basketball?", "cricket players"),
        ("Is it electronic?", "objects"),
        ("Is he a human rights activist?", "world leaders"),
        ("Was she a person of influence in Africa?", "world leaders"),
        ("Do they have blood relatives in politics?", "football players"),
        ("Is it a human-sized animal?", "animals"),
    ])
    def test_not_flagged(self, question, category):
        from qvalidator.validation.contamination import contaminates

        assert contaminates(question, category) is None

    def test_unknown_category(self):
        from qvalidator.validation.contamination import contaminates

        assert contaminates("Are they alive?", "unknown") is None


__all__ = []
