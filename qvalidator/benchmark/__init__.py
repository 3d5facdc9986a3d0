"""Labelled benchmark scenarios for the equivalence matcher."""

from .scenarios import SCENARIOS, ScenarioReport, SimilarityScenario, get_scenario, run_all, run_scenario

__all__ = [
    "SCENARIOS",
    "ScenarioReport",
    "SimilarityScenario",
    "get_scenario",
    "run_all",
    "run_scenario",
]
