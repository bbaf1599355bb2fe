from __future__ import annotations

from enum import Enum

from .evaluation import Score


class ScoreTier(str, Enum):
    LOW = "low"
    MID = "mid"
    HIGH = "high"

    @property
    def headline(self) -> str:
        return _HEADLINES[self]

    @property
    def title(self) -> str:
        return _SUMMARY[self][0]

    @property
    def message(self) -> str:
        return _SUMMARY[self][1]


_HEADLINES = {
    ScoreTier.HIGH: "Excellent Answer!",
    ScoreTier.MID: "Good Answer",
    ScoreTier.LOW: "Needs Improvement",
}

_SUMMARY = {
    ScoreTier.HIGH: ("Outstanding!", "You demonstrated excellent interview skills!"),
    ScoreTier.MID: ("Good Job!", "You showed solid interview performance."),
    ScoreTier.LOW: ("Keep Practicing!", "Practice makes perfect. Keep improving!"),
}


def score_tier(score: Score) -> ScoreTier:
    if score >= 8:
        return ScoreTier.HIGH
    if score >= 6:
        return ScoreTier.MID
    return ScoreTier.LOW
