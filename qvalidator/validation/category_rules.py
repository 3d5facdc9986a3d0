"""
Category rules table - per meta-category and per-category contamination rules.

A rule is either forbidden (the topic never applies to members of the
category) or constant (every member has the same answer, so the question
carries no information). Person-like categories share the "people" rules
and add only their own sport/role constants on top.

Patterns run against lowercased text with punctuation turned into spaces,
and accept any of the usual subject pronouns ("is it", "are they", ...).
"""

import re
from dataclasses import dataclass, field
from typing import Optional, Union

from ..core.models.category import (
    Category,
    META_ANIMALS,
    META_OBJECTS,
    META_PEOPLE,
    StrEnum,
    meta_category,
)


class RuleKind(StrEnum):
    Forbidden = "forbidden"
    AlwaysTrue = "always_true"
    AlwaysFalse = "always_false"


@dataclass(frozen=True)
class CategoryRule:
    rule_id: str
    scope: str  # meta-category or category value
    kind: RuleKind
    pattern: re.Pattern
    reason: str

    def matches(self, cleaned: str) -> bool:
        return self.pattern.search(cleaned) is not None


@dataclass(frozen=True)
class CategoryExamples:
    """Questions that must pass, and questions that must be caught, for one scope."""

    appropriate: tuple[str, ...] = field(default_factory=tuple)
    blocked: tuple[str, ...] = field(default_factory=tuple)


_PUNCT = re.compile(r"[^\w\s]|_")


def clean_question(text: str) -> str:
    """Lowercase, punctuation to spaces, single-spaced. Stop words are kept."""
    return " ".join(_PUNCT.sub(" ", str(text or "").lower()).split())


_SUBJ = r"(?:it|they|he|she|this|that)"
_BE = rf"\b(?:is|are|was|were) {_SUBJ}"
_DO = rf"\b(?:do|does|did|can|could|will|would) {_SUBJ}"
_LIVING = r"(?:alive|(?:a )?living(?: (?:thing|creature|being|organism))?)$"


def _rule(scope: str, name: str, kind: RuleKind, pattern: str, reason: str) -> CategoryRule:
    return CategoryRule(
        rule_id=f"{scope.replace(' ', '_')}.{name}",
        scope=scope,
        kind=kind,
        pattern=re.compile(pattern),
        reason=reason,
    )


_F = RuleKind.Forbidden

_ANIMAL_RULES: tuple[CategoryRule, ...] = (
    _rule(META_ANIMALS, "alive", RuleKind.AlwaysTrue, rf"{_BE} {_LIVING}",
          "All animals are alive by definition"),
    _rule(META_ANIMALS, "human", RuleKind.AlwaysFalse,
          rf"{_BE} (?:an? )?(?:human|humans|person|people|human beings?)$",
          "Humans are not in the animals category"),
    _rule(META_ANIMALS, "career", _F,
          rf"{_DO} have (?:a )?jobs?\b|{_BE} (?:employed|retired|unemployed)\b",
          "Animals do not have careers"),
    _rule(META_ANIMALS, "social_status", _F,
          rf"{_BE} (?:an? )?(?:famous|celebrity|celebrities|politicians?|wealthy|rich)\b",
          "Animals do not have human social status"),
    _rule(META_ANIMALS, "family", _F,
          rf"{_BE} married\b|{_DO} have (?:a )?(?:husband|wife|spouse|children)\b",
          "Animals do not have human family structures"),
    _rule(META_ANIMALS, "education", _F,
          rf"{_DO} speak (?:english|a language|languages|multiple languages)\b"
          rf"|{_DO} have (?:a )?(?:college |university )?degree\b|{_BE} (?:college )?educated\b",
          "Animals do not have human education or language"),
    _rule(META_ANIMALS, "birth_year", _F,
          rf"{_BE} born in \d{{4}}\b|{_BE} over \d+ years old\b",
          "Animals do not have human-style ages or birth years"),
    _rule(META_ANIMALS, "technology", _F,
          rf"{_BE} (?:an? )?(?:electronic|digital|manufactured|mechanical|machine|device|gadget)\b",
          "Animals are biological, not technological"),
    _rule(META_ANIMALS, "material", _F,
          rf"{_BE} made (?:of|from|out of) (?:metal|plastic|wood|glass)\b",
          "Animals are not manufactured"),
    _rule(META_ANIMALS, "power", _F,
          rf"{_DO} (?:need|use|require) (?:electricity|batteries|a battery|power|to be charged)\b"
          rf"|{_BE} (?:battery powered|rechargeable|plugged in)\b",
          "Animals do not require power sources"),
    _rule(META_ANIMALS, "commercial", _F,
          rf"{_BE} (?:expensive|waterproof|sold in stores)\b|{_BE} (?:a )?tools?\b",
          "Animals are not commercial products"),
    _rule(META_ANIMALS, "tech_features", _F,
          rf"{_DO} have (?:a )?(?:screens?|buttons|keyboard|wheels)\b|{_DO} break easily\b",
          "Animals do not have technological features"),
    _rule(META_ANIMALS, "human_activity", _F,
          rf"{_DO} (?:drive|use (?:a )?computers?|watch (?:tv|television)|cook|wear clothes|read books)\b",
          "Animals do not perform human activities"),
)

_OBJECT_RULES: tuple[CategoryRule, ...] = (
    _rule(META_OBJECTS, "alive", RuleKind.AlwaysFalse, rf"{_BE} {_LIVING}",
          "Objects are not living entities"),
    _rule(META_OBJECTS, "lives", _F, rf"{_DO} live\b",
          "Objects are not living entities"),
    _rule(META_OBJECTS, "biology", _F,
          rf"{_DO} (?:eat|breathe|sleep|reproduce|grow|age|die|bleed)\b",
          "Objects do not have biological functions"),
    _rule(META_OBJECTS, "cognition", _F,
          rf"{_BE} (?:born|conscious|sentient)\b"
          rf"|{_DO} (?:have parents|feel pain|have emotions|have feelings|think)\b",
          "Objects do not have biological or cognitive attributes"),
    _rule(META_OBJECTS, "gender", _F,
          rf"{_BE} (?:a )?(?:male|female)\b|{_DO} have (?:a )?gender\b",
          "Objects do not have gender"),
    _rule(META_OBJECTS, "offspring", _F,
          rf"{_DO} have (?:children|babies|offspring|kids|a name)\b",
          "Objects do not reproduce or have personal identity"),
    _rule(META_OBJECTS, "relationships", _F,
          rf"{_BE} married\b|{_DO} have (?:a )?(?:family|jobs?)\b",
          "Objects do not have relationships or careers"),
    _rule(META_OBJECTS, "social", _F,
          rf"{_BE} (?:famous|educated)\b|{_DO} vote\b",
          "Objects do not have social or political attributes"),
    _rule(META_OBJECTS, "animal_behavior", _F,
          rf"{_DO} (?:hunt|migrate|hibernate|mate)\b|{_DO} have (?:a )?(?:territory|territories)\b",
          "Objects do not have animal behaviors"),
    _rule(META_OBJECTS, "animal_traits", _F,
          rf"{_BE} (?:an? )?(?:wild|predators?|carnivorous|herbivorous|domesticated|nocturnal|mammals?)\b",
          "Objects do not have animal characteristics"),
)

_PEOPLE_RULES: tuple[CategoryRule, ...] = (
    _rule(META_PEOPLE, "human", RuleKind.AlwaysTrue,
          rf"{_BE} (?:an? )?(?:human|humans|person|human beings?)$|{_DO} (?:breathe|have blood)$",
          "Every person is human, breathes and has blood"),
    _rule(META_PEOPLE, "animal_behavior", _F,
          rf"{_DO} (?:hibernate|molt|lay eggs|live in packs)\b",
          "People do not have animal behaviors"),
    _rule(META_PEOPLE, "animal_traits", _F,
          rf"{_BE} (?:an? )?(?:domesticated|wild|predators?|nocturnal|territorial|mammals?"
          rf"|carnivorous|herbivorous)\b",
          "People are not classified as animals in this game"),
    _rule(META_PEOPLE, "animal_features", _F,
          rf"{_DO} have (?:fur|claws|feathers|scales|a tail|paws|fins|hooves)\b|{_DO} fly$",
          "People do not have animal physical features"),
    _rule(META_PEOPLE, "hunting", _F,
          rf"{_DO} hunt(?: prey)?$|{_DO} eat meat\b",
          "Ask about diet in human terms"),
    _rule(META_PEOPLE, "material", _F,
          rf"{_BE} made (?:of|from|out of) (?:metal|plastic|wood|glass)\b",
          "People are biological, not manufactured"),
    _rule(META_PEOPLE, "technology", _F,
          rf"{_DO} (?:need|use|require) (?:electricity|batteries|a battery|to be charged)\b"
          rf"|{_BE} (?:electronic|digital|manufactured|waterproof|battery powered|rechargeable)\b",
          "People are not electronic devices"),
    _rule(META_PEOPLE, "tech_features", _F,
          rf"{_DO} have (?:circuits|screens?|buttons|a battery)\b|{_DO} break (?:easily|down)\b",
          "People do not have technological features"),
    _rule(META_PEOPLE, "commercial", _F,
          rf"{_BE} (?:a )?tools?$|{_BE} expensive to buy\b",
          "People are not commercial products"),
)

_META_RULES: dict[str, tuple[CategoryRule, ...]] = {
    META_ANIMALS: _ANIMAL_RULES,
    META_OBJECTS: _OBJECT_RULES,
    META_PEOPLE: _PEOPLE_RULES,
}

# constants that only hold inside one person-like category
_CATEGORY_RULES: dict[Category, tuple[CategoryRule, ...]] = {
    Category.WorldLeaders: (
        _rule(Category.WorldLeaders.value, "leader", RuleKind.AlwaysTrue,
              rf"{_BE} (?:a )?(?:world |political )?leaders?$",
              "Every world leader is a leader"),
    ),
    Category.CricketPlayers: (
        _rule(Category.CricketPlayers.value, "sport", RuleKind.AlwaysTrue,
              rf"{_DO} play cricket$|{_BE} (?:a )?(?:cricketers?|cricket players?)$",
              "Every cricket player plays cricket"),
    ),
    Category.FootballPlayers: (
        _rule(Category.FootballPlayers.value, "sport", RuleKind.AlwaysTrue,
              rf"{_DO} play (?:football|soccer)$"
              rf"|{_BE} (?:a )?(?:footballers?|football players?|soccer players?)$",
              "Every football player plays football"),
    ),
    Category.NBAPlayers: (
        _rule(Category.NBAPlayers.value, "sport", RuleKind.AlwaysTrue,
              rf"{_DO} play (?:basketball|in (?:the )?nba)$"
              rf"|{_BE} (?:an? )?(?:basketball players?|nba players?)$",
              "Every NBA player plays basketball"),
    ),
}


_META_EXAMPLES: dict[str, CategoryExamples] = {
    META_ANIMALS: CategoryExamples(
        appropriate=(
            "Does it have four legs?",
            "Can it swim?",
            "Does it have stripes?",
            "Is it found in Africa?",
            "Is it larger than a dog?",
            "Is it native to Australia?",
            "Is it a human-sized animal?",
        ),
        blocked=(
            "Is it alive?",
            "Is it a human?",
            "Does it have a job?",
            "Is it famous?",
            "Is it married?",
            "Is it electronic?",
            "Is it made of metal?",
            "Does it need batteries?",
            "Is it expensive?",
            "Does it have a screen?",
            "Does it drive?",
        ),
    ),
    META_OBJECTS: CategoryExamples(
        appropriate=(
            "Is it found in a kitchen?",
            "Is it used for cooking?",
            "Is it bigger than a microwave?",
            "Is it used outdoors?",
            "Would you find it in an office?",
            "Can you hold it in one hand?",
        ),
        blocked=(
            "Are they alive?",
            "Does it eat?",
            "Does it breathe?",
            "Is it male?",
            "Does it have babies?",
            "Is it married?",
            "Does it hunt?",
            "Is it a predator?",
            "Is it nocturnal?",
            "Was it born?",
        ),
    ),
    META_PEOPLE: CategoryExamples(
        appropriate=(
            "Are they from Europe?",
            "Have they won a championship?",
            "Are they left-handed?",
            "Did they retire before 2010?",
            "Are they taller than six feet?",
            "Is he a human rights activist?",
            "Was she a person of influence in Africa?",
            "Do they have blood relatives in politics?",
        ),
        blocked=(
            "Do they hibernate?",
            "Are they domesticated?",
            "Do they have fur?",
            "Are they mammals?",
            "Are they made of metal?",
            "Do they need electricity?",
            "Are they electronic?",
            "Do they eat meat?",
            "Are they human?",
            "Do they breathe?",
            "Can they fly?",
        ),
    ),
}

_CATEGORY_EXAMPLES: dict[Category, CategoryExamples] = {
    Category.WorldLeaders: CategoryExamples(
        appropriate=("Were they president?", "Did they serve more than one term?"),
        blocked=("Are they a world leader?",),
    ),
    Category.CricketPlayers: CategoryExamples(
        appropriate=("Are they a bowler?", "Have they captained their country?"),
        blocked=("Do they play cricket?", "Are they a cricketer?"),
    ),
    Category.FootballPlayers: CategoryExamples(
        appropriate=("Are they a goalkeeper?", "Have they played in a World Cup?"),
        blocked=("Do they play football?", "Are they a soccer player?"),
    ),
    Category.NBAPlayers: CategoryExamples(
        appropriate=("Have they won an NBA championship?", "Are they a point guard?"),
        blocked=("Do they play basketball?", "Are they an NBA player?"),
    ),
}


def meta_rules(meta: str) -> tuple[CategoryRule, ...]:
    """Rules shared by every category in a meta-category."""
    return _META_RULES.get(meta, ())


def rules_for(category: Union[str, Category]) -> tuple[CategoryRule, ...]:
    """Shared meta-category rules followed by the category's own rules."""
    parsed = Category.parse(category)
    meta = meta_category(parsed)
    if meta is None:
        return ()
    return meta_rules(meta) + _CATEGORY_RULES.get(parsed, ())


def examples_for(category: Union[str, Category]) -> CategoryExamples:
    """Appropriate and blocked examples for a category, shared ones included."""
    parsed = Category.parse(category)
    meta = meta_category(parsed)
    if meta is None:
        return CategoryExamples()

    shared = _META_EXAMPLES[meta]
    own = _CATEGORY_EXAMPLES.get(parsed, CategoryExamples())
    return CategoryExamples(
        appropriate=shared.appropriate + own.appropriate,
        blocked=shared.blocked + own.blocked,
    )


def match_rule(question: str, category: Union[str, Category]) -> Optional[CategoryRule]:
    """First rule of the active category that the question trips, if any."""
    cleaned = clean_question(question)
    if not cleaned:
        return None
    for rule in rules_for(category):
        if rule.matches(cleaned):
            return rule
    return None


__all__ = [
    "RuleKind",
    "CategoryRule",
    "CategoryExamples",
    "clean_question",
    "meta_rules",
    "rules_for",
    "examples_for",
    "match_rule",
]
