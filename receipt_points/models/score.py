"""Data models for scoring results"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RuleAward:
    """Points a single rule contributed to a receipt's score"""
    rule: str
    points: int
    detail: str = ""


@dataclass(frozen=True)
class ScoreBreakdown:
    """Per-rule account of how a receipt's points were reached"""
    awards: tuple[RuleAward, ...] = field(default_factory=tuple)
    aborted: bool = False  # True when an unparseable total stopped scoring early

    @property
    def total(self) -> int:
        return sum(award.points for award in self.awards)

    def points_for(self, rule: str) -> int:
        """Points awarded by the named rule, zero if it did not run"""
        return sum(award.points for award in self.awards if award.rule == rule)

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "aborted": self.aborted,
            "rules": [
                {"rule": award.rule, "points": award.points, "detail": award.detail}
                for award in self.awards
            ],
        }
