"""
Engine configuration.

EngineConfig is a serializable (JSON-friendly) configuration holding the
product constants used by the route scorer, the valuation methods and the
action plan generator. The defaults are product decisions; change them only
with explicit sign-off.
"""

from dataclasses import asdict
from dataclasses import dataclass
import json
from typing import Any


@dataclass(frozen=True)
class EngineConfig:
  """
  Constants for one engine run.

  Attributes:
    hybrid_threshold: Score gap below which the hybrid route is recommended
    route_confidence_base: Base of the route confidence formula
    route_confidence_max: Upper bound of the route confidence
    route_confidence_min: Lower bound of the route confidence
    max_reasons: Number of ranked reasons kept in a route result
    berkus_cap_per_factor: EUR value of a Berkus factor scored 100
    scorecard_baseline: Average pre-seed pre-money valuation in EUR
    part_time_availability: Share of nominal weekly hours a founder who is
      not full-time can spend
    plan_baseline_months: Calendar months the plan templates assume
  """
  hybrid_threshold: float = 15
  route_confidence_base: float = 60
  route_confidence_max: int = 95
  route_confidence_min: int = 20
  max_reasons: int = 6
  berkus_cap_per_factor: float = 500_000
  scorecard_baseline: float = 1_500_000
  part_time_availability: float = 0.6
  plan_baseline_months: int = 6

  @classmethod
  def default(cls) -> 'EngineConfig':
    """Create the reference configuration."""
    return cls()

  def to_dict(self) -> dict[str, Any]:
    """Convert to dictionary."""
    return asdict(self)

  def to_json(self) -> str:
    """Serialize to JSON string."""
    return json.dumps(self.to_dict(), indent=2)

  @classmethod
  def from_dict(cls, data: dict[str, Any]) -> 'EngineConfig':
    """Create from dictionary."""
    return cls(**data)

  @classmethod
  def from_json(cls, json_str: str) -> 'EngineConfig':
    """Create from JSON string."""
    return cls.from_dict(json.loads(json_str))
