"""
Labelled similarity scenarios for measuring the equivalence matcher.

Each scenario fixes a category and an already-asked list; every case says
whether the candidate should be flagged as a repeat of anything in it.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from ..validation.equivalence import equivalent

logger = logging.getLogger(__name__)

Matcher = Callable[[str, str], bool]


class CaseKind(str, Enum):
    """Why a case is (or is not) a repeat."""
    Synonym = "synonym"
    Grammar = "grammar"
    Concept = "concept"
    Different = "different"


@dataclass(frozen=True)
class ScenarioCase:
    question: str
    should_flag: bool
    kind: CaseKind
    reason: str = ""


@dataclass(frozen=True)
class SimilarityScenario:
    name: str
    description: str
    category: str
    already_asked: tuple[str, ...]
    cases: tuple[ScenarioCase, ...]


@dataclass
class CaseFailure:
    question: str
    expected: bool
    detected: bool
    reason: str


@dataclass
class ScenarioReport:
    """Outcome of running one scenario through a matcher."""
    scenario_name: str
    total_cases: int
    correct: int
    accuracy: float
    false_positive_rate: float
    false_negative_rate: float
    accuracy_by_kind: dict[str, float] = field(default_factory=dict)
    failures: list[CaseFailure] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.failures


def _flagged(question: str, already_asked: tuple[str, ...], matcher: Matcher) -> bool:
    return any(matcher(question, previous) for previous in already_asked)


def run_scenario(scenario: SimilarityScenario, matcher: Matcher = equivalent) -> ScenarioReport:
    """Run every case; rates are over the negative and positive cases respectively."""
    detections = [(case, _flagged(case.question, scenario.already_asked, matcher)) for case in scenario.cases]

    failures = [
        CaseFailure(question=case.question, expected=case.should_flag, detected=detected, reason=case.reason)
        for case, detected in detections
        if detected != case.should_flag
    ]

    negatives = [detected for case, detected in detections if not case.should_flag]
    positives = [detected for case, detected in detections if case.should_flag]
    false_positive_rate = sum(negatives) / len(negatives) if negatives else 0.0
    false_negative_rate = (len(positives) - sum(positives)) / len(positives) if positives else 0.0

    by_kind: dict[str, list[bool]] = {}
    for case, detected in detections:
        by_kind.setdefault(case.kind.value, []).append(detected == case.should_flag)

    total = len(detections)
    correct = total - len(failures)
    report = ScenarioReport(
        scenario_name=scenario.name,
        total_cases=total,
        correct=correct,
        accuracy=correct / total if total else 0.0,
        false_positive_rate=false_positive_rate,
        false_negative_rate=false_negative_rate,
        accuracy_by_kind={k: sum(v) / len(v) for k, v in by_kind.items()},
        failures=failures,
    )

    for failure in failures:
        logger.info(
            f"{scenario.name}: '{failure.question}' expected={failure.expected} "
            f"detected={failure.detected} ({failure.reason})"
        )
    return report


def _case(question: str, should_flag: bool, kind: CaseKind, reason: str = "") -> ScenarioCase:
    return ScenarioCase(question=question, should_flag=should_flag, kind=kind, reason=reason)


_S, _G, _C, _D = CaseKind.Synonym, CaseKind.Grammar, CaseKind.Concept, CaseKind.Different

SCENARIOS: tuple[SimilarityScenario, ...] = (
    SimilarityScenario(
        name="world_leaders_european_male",
        description="European male leaders: origin, gender and office",
        category="world leaders",
        already_asked=(
            "Are they from Europe?",
            "Are they male?",
            "Were they a president?",
            "Did they serve in wartime?",
        ),
        cases=(
            _case("Are they European?", True, _S, "European = from Europe"),
            _case("Do they come from Europe?", True, _G, "come from = from"),
            _case("Were they born in Europe?", True, _C, "birthplace = origin"),
            _case("Are they a man?", True, _S, "man = male"),
            _case("Were they president?", True, _G, "article dropped"),
            _case("Did they serve as president?", True, _G, "served as = were"),
            _case("Did they lead during war?", True, _C, "during war = wartime"),
            _case("Are they alive?", False, _D, "life status"),
            _case("Did they face impeachment?", False, _D, "legal proceedings"),
            _case("Did they win elections?", False, _D, "electoral success"),
        ),
    ),
    SimilarityScenario(
        name="animals_large_wild_carnivores",
        description="Large wild carnivores: size, wildness and diet",
        category="animals",
        already_asked=(
            "Is it large?",
            "Is it wild?",
            "Does it eat meat?",
            "Is it a mammal?",
        ),
        cases=(
            _case("Is it big?", True, _S, "big = large"),
            _case("Is it huge?", True, _S, "huge = large"),
            _case("Is it massive?", True, _S, "massive = large"),
            _case("Is it untamed?", True, _S, "untamed = wild"),
            _case("Is it feral?", True, _S, "feral = wild"),
            _case("Is it carnivorous?", True, _C, "carnivorous = eats meat"),
            _case("Is it a predator?", True, _C, "predator = eats meat"),
            _case("Is it fast?", False, _D, "speed"),
            _case("Does it hibernate?", False, _D, "behaviour"),
            _case("Can it climb trees?", False, _D, "ability"),
            _case("Is it endangered?", False, _D, "conservation status"),
        ),
    ),
    SimilarityScenario(
        name="objects_electronic_handheld",
        description="Electronic handheld devices: power, portability and use",
        category="objects",
        already_asked=(
            "Is it electronic?",
            "Can you hold it?",
            "Do most people use it daily?",
            "Does it need electricity?",
        ),
        cases=(
            _case("Is it digital?", True, _S, "digital = electronic"),
            _case("Does it use electricity?", True, _C, "uses = needs electricity"),
            _case("Is it battery-powered?", True, _C, "battery = electrical power"),
            _case("Is it handheld?", True, _C, "handheld = can hold"),
            _case("Is it portable?", True, _C, "portable = can hold"),
            _case("Can you carry it?", True, _C, "carry = hold"),
            _case("Do people use it every day?", True, _G, "every day = daily"),
            _case("Is it expensive?", False, _D, "cost"),
            _case("Is it fragile?", False, _D, "durability"),
            _case("Does it have a screen?", False, _D, "feature"),
            _case("Is it made of plastic?", False, _D, "material"),
        ),
    ),
    SimilarityScenario(
        name="cricket_active_indian_batsmen",
        description="Active Indian batsmen: career status, origin and role",
        category="cricket players",
        already_asked=(
            "Are they currently active?",
            "Are they Indian?",
            "Are they a batsman?",
            "Have they been captain?",
        ),
        cases=(
            _case("Are they still playing?", True, _C, "still playing = active"),
            _case("Do they play now?", True, _C, "play now = active"),
            _case("Are they from India?", True, _S, "from India = Indian"),
            _case("Do they represent India?", True, _C, "represent India = Indian"),
            _case("Do they bat?", True, _S, "bat = batsman"),
            _case("Are they a batter?", True, _S, "batter = batsman"),
            _case("Were they captain?", True, _G, "tense only"),
            _case("Did they captain the team?", True, _G, "verb vs noun"),
            _case("Are they fast?", False, _D, "bowling pace"),
            _case("Have they won awards?", False, _D, "achievements"),
            _case("Are they tall?", False, _D, "height"),
        ),
    ),
    SimilarityScenario(
        name="complex_grammar_variations",
        description="Rearranged and nominalised phrasings with look-alike traps",
        category="world leaders",
        already_asked=(
            "Did they serve as president during wartime?",
            "Were they democratically elected?",
            "Did they face impeachment proceedings?",
        ),
        cases=(
            _case("Were they president during a war?", True, _G, "rearranged"),
            _case("Did they hold the presidency in wartime?", True, _G, "nominal vs verbal form"),
            _case("Were they elected by the people?", True, _C, "elected by people = democratic"),
            _case("Were impeachment proceedings initiated against them?", True, _G, "active vs passive"),
            _case("Did they start any wars?", False, _D, "starting vs serving during war"),
            _case("Were they popular with voters?", False, _D, "popularity vs election"),
            _case("Are they studied in schools?", False, _D, "curriculum"),
        ),
    ),
)


def get_scenario(name: str) -> Optional[SimilarityScenario]:
    return next((s for s in SCENARIOS if s.name == name), None)


def run_all(matcher: Matcher = equivalent) -> list[ScenarioReport]:
    reports = [run_scenario(s, matcher) for s in SCENARIOS]
    overall = sum(r.correct for r in reports) / max(1, sum(r.total_cases for r in reports))
    logger.info(f"similarity benchmark: {len(reports)} scenarios, overall accuracy {overall:.2%}")
    return reports


__all__ = [
    "CaseKind",
    "ScenarioCase",
    "SimilarityScenario",
    "CaseFailure",
    "ScenarioReport",
    "SCENARIOS",
    "run_scenario",
    "get_scenario",
    "run_all",
]
