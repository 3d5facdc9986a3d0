"""Tests for the layered equivalence matcher."""

import itertools

import pytest


CORPUS = [
    "Is it big?",
    "Is it large?",
    "Is it expensive?",
    "Is it electronic?",
    "Does it use electricity?",
    "Is it fragile?",
    "Are they from Europe?",
    "Are they European?",
    "Are they alive?",
    "Are they living in Europe?",
    "Is it a living thing?",
    "Are they male?",
    "Are they female?",
    "Were they president?",
    "Did they serve as president?",
    "Did they start any wars?",
    "Did they serve during wartime?",
    "Were they popular with voters?",
    "Were they democratically elected?",
    "Does it eat meat?",
    "Is it carnivorous?",
    "Is it a batsman?",
    "Are they a batter?",
    "Are they currently active?",
    "Were they formerly active?",
    "Do people use it?",
    "Is it used by people?",
    "",
]


class TestLayers:
    def test_exact(self):
        from qvalidator.validation.equivalence import explain

        outcome = explain("Is it large?", "is it LARGE")
        assert outcome.equivalent
        assert outcome.step == "exact"

    def test_substring_on_token_boundary(self):
        from qvalidator.validation.equivalence import explain

        outcome = explain("Were they captain?", "Have they been captain?")
        assert outcome.equivalent
        assert outcome.step == "substring"

    def test_male_is_not_inside_female(self):
        from qvalidator.validation.equivalence import equivalent

        assert not equivalent("Are they male?", "Are they female?")

    def test_synonym_group(self):
        from qvalidator.validation.equivalence import explain

        outcome = explain("Is it big?", "Is it huge?")
        assert outcome.equivalent
        assert outcome.step == "synonym"
        assert outcome.detail == "size_large"

    def test_concept_mapping(self):
        from qvalidator.validation.equivalence import explain

        outcome = explain("Is it electronic?", "Does it use electricity?")
        assert outcome.equivalent
        assert outcome.step == "concept"

    def test_grammar_variation(self):
        from qvalidator.validation.equivalence import explain

        outcome = explain("Are they from Europe?", "Are they European?")
        assert outcome.equivalent
        assert outcome.step == "grammar"

    def test_token_overlap(self):
        from qvalidator.validation.equivalence import explain

        outcome = explain("Does it have black stripes?", "Does it have black and white stripes?")
        assert outcome.equivalent
        assert outcome.step in ("overlap", "grammar")

    def test_living_somewhere_is_not_alive(self):
        from qvalidator.validation.equivalence import explain

        outcome = explain("Are they living in Europe?", "Are they alive?")
        assert not outcome.equivalent
        assert outcome.step == "none"

    @pytest.mark.parametrize("question", ["Is it a living thing?", "Are they living?", "Are they still living?"])
    def test_living_as_alive(self, question):
        from qvalidator.validation.equivalence import explain

        outcome = explain(question, "Are they alive?")
        assert outcome.equivalent
        assert outcome.detail == "living_thing"

    def test_unrelated(self):
        from qvalidator.validation.equivalence import explain

        outcome = explain("Is it big?", "Is it expensive?")
        assert not outcome.equivalent
        assert outcome.step == "none"

    def test_empty_matches_nothing(self):
        from qvalidator.validation.equivalence import explain

        assert explain("", "Is it big?").step == "empty"
        assert not explain("Is it?", "Is it?").equivalent


class TestExclusionPrecedence:
    def test_war_start_vs_wartime(self):
        from qvalidator.validation.equivalence import explain

        outcome = explain("Did they start any wars?", "Did they serve as president during wartime?")
        assert not outcome.equivalent
        assert outcome.step == "exclusion"

    def test_popularity_vs_election(self):
        from qvalidator.validation.equivalence import explain

        outcome = explain("Were they popular with voters?", "Were they democratically elected?")
        assert not outcome.equivalent
        assert outcome.step == "exclusion"

    def test_exclusion_beats_concept_mapping(self):
        from qvalidator.validation.equivalence import explain

        # "during war" alone would link to "wartime" through the concept table
        outcome = explain("Did they start a war during wartime?", "Did they lead during war?")
        assert not outcome.equivalent
        assert outcome.step == "exclusion"


    def test_both_asking_about_starting_a_war(self):
        from qvalidator.validation.equivalence import explain

        outcome = explain("Did they start a war during wartime?", "Did they start a war in wartime?")
        assert outcome.equivalent
        assert outcome.step != "exclusion"


class TestSymmetry:
    @pytest.mark.parametrize("a,b", list(itertools.combinations(CORPUS, 2)))
    def test_symmetric(self, a, b):
        from qvalidator.validation.equivalence import equivalent

        assert equivalent(a, b) == equivalent(b, a)


class TestSimilarity:
    def test_identical(self):
        from qvalidator.validation.equivalence import similarity

        assert similarity("Does it eat meat?", "Does it eat meat?") == 1.0

    def test_partial(self):
        from qvalidator.validation.equivalence import similarity

        assert similarity("Is it found in Africa?", "Is it found in Asia?") == pytest.approx(1 / 3)

    def test_empty(self):
        from qvalidator.validation.equivalence import similarity

        assert similarity("", "Is it big?") == 0.0


class TestFindDuplicate:
    def test_returns_first_match(self):
        from qvalidator.validation.equivalence import find_duplicate

        found = find_duplicate("Is it big?", ["Is it fast?", "Is it large?", "Is it huge?"])
        assert found is not None
        previous, outcome = found
        assert previous == "Is it large?"
        assert outcome.step == "synonym"

    def test_none_when_clean(self):
        from qvalidator.validation.equivalence import find_duplicate

        assert find_duplicate("Is it a mammal?", ["Is it wild?", "Does it eat meat?"]) is None


__all__ = []
