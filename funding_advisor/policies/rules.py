'''
Message rule tables.

Warnings, risk factors and confidence explanations are ordered lists of
(predicate, message) rules. evaluate_rules() returns the messages of every
rule whose predicate holds, in table order. Alternatives and success
metrics depend only on the route and are plain lookup tables.

New rules are appended to a table; the scoring math never changes.
'''

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from funding_advisor.domain.types import ConfidenceFactors
from funding_advisor.domain.types import DataSharingTier
from funding_advisor.domain.types import FounderInput
from funding_advisor.policies.factors import DEFAULT_RUNWAY_MONTHS


@dataclass(frozen=True)
class Rule:
  '''
  A message emitted when predicate(*args) is true.

  Attributes:
    predicate: Callable over the table's arguments
    message: Text emitted when the predicate holds
  '''
  predicate: Callable[..., bool]
  message: str


def evaluate_rules(rules: Sequence[Rule], *args: Any) -> Tuple[str, ...]:
  '''Messages of every matching rule, in table order.'''
  return tuple(rule.message for rule in rules if rule.predicate(*args))


def _runway(data: FounderInput) -> float:
  runway = data.personal_situation.runway_months
  return DEFAULT_RUNWAY_MONTHS if runway is None else runway


# ----------------------------
# Route warnings: predicate(data)
# ----------------------------

WARNING_RULES: Tuple[Rule, ...] = (
    Rule(
        lambda d: (d.personal_situation.runway_months is not None and
                   d.personal_situation.runway_months < 6),
        'With less than 6 months of runway you should act quickly',
    ),
    Rule(
        lambda d: (d.personal_situation.team_size == 'solo' and
                   d.goals.exit_goal == 'ipo'),
        'Solo founder with IPO ambitions: VCs typically expect a team',
    ),
    Rule(
        lambda d: (d.goals.control_importance is not None and
                   d.goals.control_importance >= 9 and
                   d.goals.growth_speed == 'hypergrowth'),
        'Hypergrowth with maximum control is a contradiction',
    ),
    Rule(
        lambda d: (d.personal_situation.commitment == 'side_project' and
                   d.goals.growth_speed in ('aggressive', 'hypergrowth')),
        'Aggressive growth is hard to deliver as a side project',
    ),
)

# ----------------------------
# Alternatives and success metrics: lookup by route
# ----------------------------

ALTERNATIVES: Dict[str, Tuple[str, ...]] = {
    'bootstrap': (
        'You can still bring in investors later once you have traction',
        'Crowdfunding as a middle ground between bootstrapping and VC',
        'Revenue-based financing as a non-dilutive alternative',
    ),
    'investor': (
        'An angel instead of a VC leaves you more control',
        'Bootstrap to the MVP, then raise at a better valuation',
        'Accelerator programs as an entry into the ecosystem',
    ),
    'hybrid': (
        'Start bootstrapped, validate, then raise strategically',
        'Find an angel as smart money rather than pure capital',
        'Grants and funding programs as non-dilutive financing',
    ),
}

SUCCESS_METRICS: Dict[str, Tuple[str, ...]] = {
    'bootstrap': (
        'Monthly MRR growth',
        'Customer lifetime value',
        'Time to profitability',
        'Net revenue retention',
    ),
    'investor': (
        'Funding milestones',
        'Team growth',
        'Market share development',
        'Burn rate vs. runway',
    ),
    'hybrid': (
        'Revenue and funding mix',
        'Valuation development',
        'Strategic partners',
        'Optionality score',
    ),
}

# ----------------------------
# Plan risk factors: predicate(data, route)
# ----------------------------

RISK_RULES: Tuple[Rule, ...] = (
    Rule(
        lambda d, r: d.personal_situation.team_size == 'solo',
        'As a solo founder: burnout risk and skill bottlenecks',
    ),
    Rule(
        lambda d, r: _runway(d) < 12,
        'Limited runway: time pressure on decisions',
    ),
    Rule(
        lambda d, r: r == 'investor',
        'The fundraising market can deteriorate',
    ),
    Rule(
        lambda d, r: r == 'investor',
        'Dilution across multiple rounds',
    ),
    Rule(
        lambda d, r: r == 'bootstrap',
        'Slower growth than VC-funded competitors',
    ),
    Rule(
        lambda d, r: r == 'bootstrap',
        'Personal financial risk',
    ),
)

# ----------------------------
# Confidence explanations
# ----------------------------

TIER_EXPLANATIONS: Dict[DataSharingTier, str] = {
    DataSharingTier.MINIMAL:
        'With minimal data we can only provide rough estimates',
    DataSharingTier.BASIC:
        'Basic information enables well-founded recommendations',
    DataSharingTier.DETAILED:
        'Detailed data allows more precise analyses',
    DataSharingTier.FULL:
        'Complete data enables the deepest analysis',
}

# predicate(factors)
CONFIDENCE_RULES: Tuple[Rule, ...] = (
    Rule(
        lambda f: f.data_completeness < 0.5,
        'Some important fields are not filled in yet',
    ),
    Rule(
        lambda f: f.data_completeness > 0.8,
        'The data is very complete - a good basis for analysis',
    ),
    Rule(
        lambda f: f.method_agreement < 0.5,
        'Valuation methods show diverging results',
    ),
    Rule(
        lambda f: f.method_agreement > 0.7,
        'Valuation methods agree well',
    ),
    Rule(
        lambda f: f.market_data_quality < 0.4,
        'More market data would improve the analysis',
    ),
)


def confidence_explanations(factors: ConfidenceFactors,
                            tier: DataSharingTier) -> Tuple[str, ...]:
  '''Tier sentence followed by the matching factor sentences.'''
  return (TIER_EXPLANATIONS[tier],) + evaluate_rules(CONFIDENCE_RULES, factors)
