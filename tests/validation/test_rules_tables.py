"""Integrity checks for the declarative synonym / concept / exclusion tables."""

import itertools

import pytest


class TestSynonymGroups:
    def test_groups_are_disjoint(self):
        from qvalidator.validation.rules import SYNONYM_GROUPS

        for a, b in itertools.combinations(SYNONYM_GROUPS, 2):
            overlap = a.words & b.words
            assert not overlap, f"{a.name} and {b.name} share {sorted(overlap)}"

    def test_group_names_unique(self):
        from qvalidator.validation.rules import SYNONYM_GROUPS

        names = [g.name for g in SYNONYM_GROUPS]
        assert len(names) == len(set(names))

    def test_no_stop_words_in_groups(self):
        from qvalidator.validation.normalizer import STOP_WORDS
        from qvalidator.validation.rules import SYNONYM_GROUPS

        for group in SYNONYM_GROUPS:
            assert not group.words & STOP_WORDS, group.name

    def test_words_survive_normalization(self):
        from qvalidator.validation.normalizer import normalize
        from qvalidator.validation.rules import SYNONYM_GROUPS

        for group in SYNONYM_GROUPS:
            for word in group.words:
                assert normalize(word) == word

    def test_shares_concept_needs_both_sides(self):
        from qvalidator.validation.rules import SYNONYM_GROUPS

        large = next(g for g in SYNONYM_GROUPS if g.name == "size_large")
        assert large.shares_concept({"big"}, {"huge"})
        assert not large.shares_concept({"big"}, {"fast"})


class TestConceptMappings:
    @pytest.mark.parametrize("name,a,b", [
        ("electronic_power", "electronic", "use electricity"),
        ("carnivore_diet", "carnivorous", "eat meat"),
        ("wartime", "serve in wartime", "lead during war"),
        ("daily_use", "most people use daily", "people use every day"),
        ("living_thing", "living creature", "alive"),
    ])
    def test_links_both_directions(self, name, a, b):
        from qvalidator.validation.rules import CONCEPT_MAPPINGS

        mapping = next(m for m in CONCEPT_MAPPINGS if m.name == name)
        assert mapping.links(a, b)
        assert mapping.links(b, a)

    def test_primary_alone_does_not_link(self):
        from qvalidator.validation.rules import CONCEPT_MAPPINGS

        mapping = next(m for m in CONCEPT_MAPPINGS if m.name == "active_career")
        assert not mapping.links("currently active", "formerly active")


class TestExclusionRules:
    @pytest.mark.parametrize("a,b", [
        ("start any wars", "serve as president during wartime"),
        ("win war", "serve in wartime"),
        ("popular with voters", "democratically elected"),
    ])
    def test_blocks_both_directions(self, a, b):
        from qvalidator.validation.rules import EXCLUSION_RULES

        assert any(r.blocks(a, b) for r in EXCLUSION_RULES)
        assert any(r.blocks(b, a) for r in EXCLUSION_RULES)

    def test_both_sides_excluded_not_blocked(self):
        from qvalidator.validation.rules import EXCLUSION_RULES

        assert not any(r.blocks("start war during wartime", "start war in wartime") for r in EXCLUSION_RULES)

    def test_unrelated_pair_not_blocked(self):
        from qvalidator.validation.rules import EXCLUSION_RULES

        assert not any(r.blocks("big", "large") for r in EXCLUSION_RULES)


__all__ = []
