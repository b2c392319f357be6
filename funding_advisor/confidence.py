'''
Overall confidence aggregation.

Combines four signals into one explainable 20-95 score:

  tier_factor * 0.35 + data_completeness * 0.25
  + method_agreement * 0.25 + market_data_quality * 0.15

Each signal lies in [0, 1]. Explanations come from the ordered template
table in policies/rules.py.
'''

from collections.abc import Sequence
import logging
from statistics import fmean
from statistics import pstdev
from typing import Any, Optional, Tuple

from funding_advisor.domain.numeric import clamp
from funding_advisor.domain.numeric import round_half_up
from funding_advisor.domain.types import ConfidenceExplanation
from funding_advisor.domain.types import ConfidenceFactors
from funding_advisor.domain.types import DataSharingTier
from funding_advisor.domain.types import FounderInput
from funding_advisor.domain.types import ValuationMethodResult
from funding_advisor.policies.rules import confidence_explanations

logger = logging.getLogger(__name__)

WEIGHTS = {
    'tier': 0.35,
    'completeness': 0.25,
    'agreement': 0.25,
    'market': 0.15,
}

MIN_CONFIDENCE = 20
MAX_CONFIDENCE = 95
DEFAULT_AGREEMENT = 0.5

COMPLETENESS_FIELDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ('project_basics',
     ('category', 'stage', 'target_customer', 'has_revenue', 'has_users')),
    ('personal_situation',
     ('team_size', 'has_relevant_experience', 'commitment', 'runway_months',
      'financial_situation', 'risk_tolerance')),
    ('goals',
     ('exit_goal', 'growth_speed', 'control_importance', 'time_horizon')),
)


def tier_factor(tier: DataSharingTier) -> float:
  '''Midpoint of the tier's confidence range as a fraction.'''
  low, high = tier.confidence_range
  return (low + high) / 2 / 100


def data_completeness(data: FounderInput) -> float:
  '''Share of the tracked optional fields that are filled in.'''
  filled = 0
  total = 0
  for group_name, field_names in COMPLETENESS_FIELDS:
    group = getattr(data, group_name)
    for name in field_names:
      total += 1
      if getattr(group, name) is not None:
        filled += 1
  return filled / total if total else 0.0


def method_agreement(
    results: Optional[Sequence[ValuationMethodResult]]) -> float:
  '''
  How closely valuation methods agree.

  1 - coefficient of variation of the positive values, clipped to
  [0.3, 0.9]; 0.5 when fewer than two positive values exist.
  '''
  if not results or len(results) < 2:
    return DEFAULT_AGREEMENT

  values = [r.value for r in results if r.value > 0]
  if len(values) < 2:
    return DEFAULT_AGREEMENT

  cv = pstdev(values) / fmean(values)
  return clamp(1 - cv, 0.3, 0.9)


def market_data_quality(data: FounderInput) -> float:
  '''Heuristic 0.5-1.0 score for how much market research was shared.'''
  market = data.market_analysis
  score = 0.5

  competitors = market.known_competitors or ()
  if len(competitors) > 0:
    score += 0.1
    if len(competitors) >= 3:
      score += 0.1

  if market.estimated_tam:
    score += 0.1
  if market.estimated_sam:
    score += 0.05
  if market.estimated_som:
    score += 0.05
  if market.market_timing:
    score += 0.05
  if market.market_type:
    score += 0.05

  return min(1.0, score)


def confidence_level(confidence: float) -> str:
  '''low (<50), medium (50-69) or high (>=70).'''
  if confidence >= 70:
    return 'high'
  if confidence >= 50:
    return 'medium'
  return 'low'


def compute_confidence(
    tier: Any,
    data: FounderInput,
    valuation_results: Optional[Sequence[ValuationMethodResult]] = None,
) -> ConfidenceExplanation:
  '''
  Aggregate the confidence signals for a founder.

  Args:
    tier: DataSharingTier or its name
    data: Founder input
    valuation_results: Optional results of any valuation methods

  Returns:
    ConfidenceExplanation with the score, the four factors and the
    ordered explanation sentences

  Raises:
    ValueError: If tier is not a known tier name
  '''
  tier = DataSharingTier.parse(tier)

  factors = ConfidenceFactors(
      tier_factor=tier_factor(tier),
      data_completeness=data_completeness(data),
      method_agreement=method_agreement(valuation_results),
      market_data_quality=market_data_quality(data),
  )

  raw = (factors.tier_factor * WEIGHTS['tier'] +
         factors.data_completeness * WEIGHTS['completeness'] +
         factors.method_agreement * WEIGHTS['agreement'] +
         factors.market_data_quality * WEIGHTS['market'])
  confidence = round_half_up(
      min(MAX_CONFIDENCE, max(MIN_CONFIDENCE, raw * 100)))

  logger.debug('confidence: %s raw=%.4f -> %d', factors, raw, confidence)

  return ConfidenceExplanation(
      confidence=confidence,
      factors=factors,
      explanations=confidence_explanations(factors, tier),
      level=confidence_level(confidence),
  )
