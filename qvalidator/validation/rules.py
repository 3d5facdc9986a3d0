"""
Declarative equivalence tables: synonym groups, concept mappings, exclusions.

All patterns run against normalized text (see normalizer.normalize), so they
never mention articles, auxiliaries or pronouns. Tables are compiled once at
import and only read afterwards.
"""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class SynonymGroup:
    """Interchangeable surface forms for one concept."""

    name: str
    words: frozenset[str]

    def shares_concept(self, tokens_a: set[str], tokens_b: set[str]) -> bool:
        return bool(self.words & tokens_a) and bool(self.words & tokens_b)


@dataclass(frozen=True)
class ConceptMapping:
    """A question matching `primary` asks the same thing as one matching `related`."""

    name: str
    primary: re.Pattern
    related: re.Pattern

    def links(self, norm_a: str, norm_b: str) -> bool:
        # direction does not matter for equivalence
        return (
            (self.primary.search(norm_a) is not None and self.related.search(norm_b) is not None)
            or (self.primary.search(norm_b) is not None and self.related.search(norm_a) is not None)
        )


@dataclass(frozen=True)
class ExclusionRule:
    """Blocks a match: `excluded` and `excludes` look alike but ask different things."""

    name: str
    excluded: re.Pattern
    excludes: re.Pattern
    reason: str

    def blocks(self, norm_a: str, norm_b: str) -> bool:
        excluded_a = self.excluded.search(norm_a) is not None
        excluded_b = self.excluded.search(norm_b) is not None
        # both sides asking the excluded thing is not a conflict
        if excluded_a == excluded_b:
            return False
        if excluded_a:
            return self.excludes.search(norm_b) is not None
        return self.excludes.search(norm_a) is not None


def _group(name: str, *words: str) -> SynonymGroup:
    return SynonymGroup(name=name, words=frozenset(words))


def _mapping(name: str, primary: str, related: str) -> ConceptMapping:
    return ConceptMapping(name=name, primary=re.compile(primary), related=re.compile(related))


def _exclusion(name: str, excluded: str, excludes: str, reason: str) -> ExclusionRule:
    return ExclusionRule(
        name=name, excluded=re.compile(excluded), excludes=re.compile(excludes), reason=reason
    )


# groups must stay disjoint; hyphenated words appear joined ("battery-powered" -> "batterypowered")
SYNONYM_GROUPS: tuple[SynonymGroup, ...] = (
    _group("size_large", "big", "large", "huge", "massive", "enormous", "giant", "gigantic"),
    _group("size_small", "small", "tiny", "little", "mini", "miniature"),
    _group("electronic", "electronic", "digital", "computerized", "electrical"),
    _group("electricity", "electricity", "electric", "battery", "batteries", "batterypowered", "rechargeable"),
    _group("portable", "handheld", "portable", "holdable", "carry", "pocketsized"),
    _group("cost", "expensive", "costly", "pricey", "pricy"),
    _group("dead", "dead", "deceased"),
    _group("male", "male", "man", "masculine"),
    _group("female", "female", "woman", "feminine"),
    _group("presidency", "president", "presidency", "presidential"),
    _group("captaincy", "captain", "captaincy", "captained"),
    _group("batting", "batsman", "batsmen", "batter", "batters", "bat", "batting"),
    _group("wild", "wild", "untamed", "feral"),
    _group("domestic", "domestic", "domesticated", "tame", "pet"),
    _group("carnivore", "carnivore", "carnivores", "carnivorous", "predator", "predators", "predatory"),
    _group("herbivore", "herbivore", "herbivores", "herbivorous", "vegetarian"),
    _group("popularity", "popular", "wellliked"),
    _group("controversy", "controversial", "controversy", "divisive", "disputed"),
    _group("impeachment", "impeachment", "impeached", "impeach"),
    _group("fame", "famous", "wellknown", "renowned", "celebrity"),
    _group("speed", "fast", "quick", "speedy", "rapid"),
    _group("fragility", "fragile", "breakable", "delicate"),
    _group("endangered", "endangered", "threatened"),
    _group("daily", "daily", "everyday"),
    _group("aquatic", "aquatic", "marine"),
)


CONCEPT_MAPPINGS: tuple[ConceptMapping, ...] = (
    _mapping(
        "electronic_power",
        r"\b(?:electronic|digital|computerized|electrical)\b",
        r"\b(?:electricity|electric|battery|batteries|batterypowered|rechargeable|plugged|plug|power|powered)\b",
    ),
    _mapping(
        "holdable",
        r"\b(?:handheld|portable|holdable|carry|pocketsized)\b",
        r"\byou hold\b|\bhold in (?:your |one )?hands?\b|\bfits? in (?:your )?(?:hand|pocket)\b",
    ),
    _mapping(
        "carnivore_diet",
        r"\b(?:carnivor\w*|predator\w*)\b",
        r"\b(?:eat|eats|eating) meat\b|\bmeat eater\b|\bhunts?\b|\bprey\b",
    ),
    _mapping(
        "herbivore_diet",
        r"\b(?:herbivor\w*|vegetarian)\b",
        r"\b(?:eat|eats|eating) (?:only )?(?:plants|grass|vegetation|leaves)\b",
    ),
    _mapping(
        "active_career",
        r"\bactive\b",
        r"\bstill (?:play|plays|playing|compete|competes|competing)\b"
        r"|\b(?:play|plays|playing) (?:now|today|currently)\b"
        r"|\bcurrently (?:play|plays|playing)\b",
    ),
    _mapping(
        "daily_use",
        r"\b(?:daily|everyday)\b",
        r"\bevery day\b|\beach day\b|\bregularly\b",
    ),
    _mapping(
        "democratic_election",
        r"\bdemocratic(?:ally)?\b|\bdemocracy\b",
        r"\belected by (?:people|voters|public|citizens)\b|\bpeople elect(?:ed)?\b|\bpopular vote\b|\bfree elections?\b",
    ),
    _mapping(
        "living_thing",
        r"^(?:still )?living(?: (?:today|now))?$|\bliving (?:thing|creature|being|organism)s?\b",
        r"\balive\b",
    ),
    _mapping(
        "wartime",
        r"\bwartime\b",
        r"\b(?:during|in|at) wars?\b",
    ),
    _mapping(
        "aquatic",
        r"\b(?:aquatic|marine)\b",
        r"\b(?:live|lives|living) in (?:water|ocean|oceans|sea|seas)\b|\bunderwater\b",
    ),
)


_WAR_SERVICE = (
    r"\bwartime\b"
    r"|\b(?:during|in|through|at) wars?\b"
    r"|\b(?:serve|serves|served|serving)\b(?: \w+)? (?:during |in )?wars?\b"
)

EXCLUSION_RULES: tuple[ExclusionRule, ...] = (
    _exclusion(
        "war_initiation_vs_service",
        r"\b(?:start|starts|started|starting|begin|began|begun|initiate|initiated"
        r"|declare|declared|cause|caused)\b(?: \w+)? wars?\b",
        _WAR_SERVICE,
        "starting a war is not the same as serving during one",
    ),
    _exclusion(
        "war_victory_vs_service",
        r"\b(?:win|wins|won|winning|victorious)\b(?: \w+)? wars?\b|\bvictory in wars?\b",
        _WAR_SERVICE,
        "winning a war is not the same as serving during one",
    ),
    _exclusion(
        "popularity_vs_election",
        r"\bpopular(?:ity)? (?:with|among)\b|\bpopularity\b|\bwellliked\b",
        r"\belect(?:ed|ion|ions|oral)?\b|\bdemocratic(?:ally)?\b",
        "popularity is an opinion, being elected is a process",
    ),
)


__all__ = [
    "SynonymGroup",
    "ConceptMapping",
    "ExclusionRule",
    "SYNONYM_GROUPS",
    "CONCEPT_MAPPINGS",
    "EXCLUSION_RULES",
]
