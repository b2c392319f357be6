"""
Berkus method.

Pre-revenue valuation from five qualitative risk-reduction factors. Each
factor is scored 0-100 and is worth at most a fixed EUR cap, so a perfect
score on all five factors yields 5 x cap.
"""

import logging
from statistics import pvariance
from typing import Dict, List, Optional

from funding_advisor.config import EngineConfig
from funding_advisor.domain.numeric import clamp
from funding_advisor.domain.numeric import round_half_up
from funding_advisor.domain.types import BerkusInput
from funding_advisor.domain.types import ValuationMethodResult

logger = logging.getLogger(__name__)

BERKUS_FACTORS = (
    'sound_idea',
    'prototype',
    'quality_team',
    'strategic_relations',
    'product_rollout',
)

BERKUS_FACTOR_DEFINITIONS: Dict[str, Dict[str, str]] = {
    'sound_idea': {
        'name': 'Sound idea',
        'description': 'Is the basic idea solid and the problem real?',
        'reduces': 'product risk',
    },
    'prototype': {
        'name': 'Prototype / MVP',
        'description': 'A working prototype reduces technology risk',
        'reduces': 'technology risk',
    },
    'quality_team': {
        'name': 'Management team',
        'description': 'An experienced team reduces execution risk',
        'reduces': 'execution risk',
    },
    'strategic_relations': {
        'name': 'Strategic relationships',
        'description': 'Partners, advisors and customer ties reduce market '
                       'risk',
        'reduces': 'market risk',
    },
    'product_rollout': {
        'name': 'Product rollout',
        'description': 'Market presence and first sales reduce production '
                       'risk',
        'reduces': 'production risk',
    },
}

MIN_CONFIDENCE = 40
MAX_CONFIDENCE = 90
UPPER_RANGE_THRESHOLD = 1_500_000


def calculate_berkus(
    factors: BerkusInput,
    config: Optional[EngineConfig] = None,
) -> ValuationMethodResult:
  """
  Compute a Berkus valuation.

  Args:
    factors: Five factor scores, each 0-100 (out-of-range scores are
      clamped)
    config: Engine configuration (default: EngineConfig.default())

  Returns:
    ValuationMethodResult whose value is the sum of the factor
    contributions. Confidence falls as the factor scores diverge: an even
    profile is easier to defend than one strong factor carrying the rest.
  """
  config = config or EngineConfig.default()
  cap = config.berkus_cap_per_factor

  raw_scores = {name: float(getattr(factors, name)) for name in BERKUS_FACTORS}
  scores = {name: clamp(s, 0.0, 100.0) for name, s in raw_scores.items()}
  clamped = [name for name in BERKUS_FACTORS if scores[name] != raw_scores[name]]

  breakdown: Dict[str, float] = {}
  total = 0.0
  for name in BERKUS_FACTORS:
    contribution = (scores[name] / 100) * cap
    breakdown[name] = contribution
    total += contribution

  variance = pvariance(list(scores.values()))
  confidence = round_half_up(
      clamp(70 - variance / 100, MIN_CONFIDENCE, MAX_CONFIDENCE))

  notes: List[str] = []
  if scores['sound_idea'] < 50:
    notes.append('The idea should be validated further')
  if scores['quality_team'] < 50 and scores['prototype'] > 75:
    notes.append('Strong product, but a stronger team would raise the '
                 'valuation')
  if scores['product_rollout'] == 0:
    notes.append('Without market presence this is a purely '
                 'potential-based valuation')
  if total > UPPER_RANGE_THRESHOLD:
    notes.append('Valuation in the upper pre-revenue range - a good '
                 'starting position')
  if clamped:
    notes.append(f'Scores outside 0-100 were clamped: {", ".join(clamped)}')

  logger.debug('berkus: total=%.0f variance=%.1f confidence=%d', total,
               variance, confidence)

  return ValuationMethodResult(
      method='berkus',
      value=round_half_up(total),
      confidence=confidence,
      inputs={**scores, 'cap_per_factor': cap},
      breakdown=breakdown,
      notes=tuple(notes),
  )


def suggest_berkus_improvements(
    factors: BerkusInput,
    config: Optional[EngineConfig] = None,
) -> List[str]:
  """
  Suggest the two weakest factors worth improving.

  For each of the two lowest-scored factors still below 75, reports the
  EUR uplift of raising it to 75.
  """
  config = config or EngineConfig.default()
  scores = [(name, clamp(float(getattr(factors, name)), 0.0, 100.0))
            for name in BERKUS_FACTORS]
  weakest = sorted(scores, key=lambda item: item[1])[:2]

  suggestions = []
  for name, score in weakest:
    if score < 75:
      uplift = ((75 - score) / 100) * config.berkus_cap_per_factor
      label = BERKUS_FACTOR_DEFINITIONS[name]['name']
      suggestions.append(f'Improving {label} could add up to EUR {uplift:,.0f}')
  return suggestions
