"""
Scorecard method.

Compares the startup with an average pre-seed company. Each factor carries
a weight and a 0-100 score; the weighted score becomes a multiplier on the
regional average pre-money valuation.
"""

import logging
from statistics import pvariance
from typing import Dict, List, Optional

from funding_advisor.config import EngineConfig
from funding_advisor.domain.numeric import clamp
from funding_advisor.domain.numeric import round_half_up
from funding_advisor.domain.types import ScorecardInput
from funding_advisor.domain.types import ValuationMethodResult

logger = logging.getLogger(__name__)

SCORECARD_FACTOR_NAMES: Dict[str, str] = {
    'team_strength': 'Team strength',
    'market_size': 'Market size',
    'product_tech': 'Product/technology',
    'competition': 'Competitive environment',
    'marketing_sales': 'Marketing/sales',
    'need_for_funding': 'Need for funding',
    'other': 'Other factors',
}

MIN_CONFIDENCE = 45
MAX_CONFIDENCE = 85


def calculate_scorecard(
    scorecard: ScorecardInput,
    config: Optional[EngineConfig] = None,
) -> ValuationMethodResult:
  """
  Compute a Scorecard valuation.

  multiplier = sum(weight/100 * score/100), renormalized when the weights
  do not add up to 100; value = baseline * multiplier.

  Args:
    scorecard: Factors and optional baseline
    config: Engine configuration (default: EngineConfig.default())

  Returns:
    ValuationMethodResult; zero value with a note when there are no
    weighted factors.
  """
  config = config or EngineConfig.default()
  baseline = (scorecard.baseline
              if scorecard.baseline is not None else config.scorecard_baseline)

  weighted_sum = 0.0
  total_weight = 0.0
  breakdown: Dict[str, float] = {}
  for name, factor in scorecard.factors.items():
    contribution = (factor.weight / 100) * (factor.score / 100)
    weighted_sum += contribution
    total_weight += factor.weight
    breakdown[name] = contribution * baseline

  inputs = {
      'baseline': baseline,
      'factors': {
          name: factor.to_dict() for name, factor in scorecard.factors.items()
      },
  }

  if total_weight <= 0:
    return ValuationMethodResult(
        method='scorecard',
        value=0,
        confidence=MIN_CONFIDENCE,
        inputs=inputs,
        breakdown=breakdown,
        notes=('No weighted factors provided',),
    )

  if total_weight == 100:
    multiplier = weighted_sum
  else:
    multiplier = weighted_sum / (total_weight / 100)

  value = round_half_up(baseline * multiplier)

  scores = [f.score for f in scorecard.factors.values()]
  variance = pvariance(scores)
  confidence = round_half_up(
      clamp(65 - variance / 50, MIN_CONFIDENCE, MAX_CONFIDENCE))

  notes: List[str] = []
  weak = [
      SCORECARD_FACTOR_NAMES.get(name, name)
      for name, f in scorecard.factors.items()
      if f.score < 40 and f.weight >= 10
  ]
  if weak:
    notes.append(f'Weak areas: {", ".join(weak)}')
  if multiplier > 1.2:
    notes.append('Above-average valuation compared to the market')
  elif multiplier < 0.8:
    notes.append('Below-average valuation - room for improvement')
  if total_weight != 100:
    notes.append(f'Weights summed to {total_weight:g} and were normalized')

  logger.debug('scorecard: multiplier=%.3f value=%d', multiplier, value)

  breakdown['multiplier'] = multiplier
  return ValuationMethodResult(
      method='scorecard',
      value=value,
      confidence=confidence,
      inputs=inputs,
      breakdown=breakdown,
      notes=tuple(notes),
  )
