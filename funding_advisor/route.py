'''
Funding route recommendation.

Runs every route factor over the founder input, combines the weighted
sub-scores into bootstrap/investor/hybrid scores, picks a recommendation
and attaches ranked reasons, warnings, alternatives and an action plan.

Usage:
  from funding_advisor.domain.types import FounderInput
  from funding_advisor.route import compute_route

  result = compute_route(FounderInput.from_dict(payload))
  print(result.recommendation, result.confidence)
'''

import logging
from typing import List, Optional, Tuple

from funding_advisor.config import EngineConfig
from funding_advisor.domain.numeric import round_half_up
from funding_advisor.domain.types import FactorScore
from funding_advisor.domain.types import FounderInput
from funding_advisor.domain.types import RouteReason
from funding_advisor.domain.types import RouteResult
from funding_advisor.domain.types import RouteScores
from funding_advisor.plan import generate_action_plan
from funding_advisor.policies.factors import ROUTE_FACTORS
from funding_advisor.policies.factors import RouteFactor
from funding_advisor.policies.rules import ALTERNATIVES
from funding_advisor.policies.rules import evaluate_rules
from funding_advisor.policies.rules import WARNING_RULES

logger = logging.getLogger(__name__)


def _impact(score: FactorScore) -> str:
  if score.bootstrap > score.investor:
    return 'positive'
  if score.bootstrap < score.investor:
    return 'negative'
  return 'neutral'


def compute_scores(
    data: FounderInput,
    factors: Tuple[RouteFactor, ...] = ROUTE_FACTORS,
) -> Tuple[RouteScores, List[RouteReason]]:
  '''
  Weighted route scores and the unranked per-factor reasons.

  Each factor contributes score/100 * weight; the totals are normalized by
  the sum of weights and scaled to 0-100.
  '''
  bootstrap_total = 0.0
  investor_total = 0.0
  reasons: List[RouteReason] = []

  for factor in factors:
    score = factor.compute(data)
    bootstrap_total += (score.bootstrap / 100) * factor.weight
    investor_total += (score.investor / 100) * factor.weight
    reasons.append(
        RouteReason(
            factor=factor.name,
            impact=_impact(score),
            explanation=score.reason,
            score=score.bootstrap - score.investor,
        ))

  weight_sum = sum(f.weight for f in factors)
  bootstrap = round_half_up(bootstrap_total / weight_sum * 100)
  investor = round_half_up(investor_total / weight_sum * 100)
  hybrid = round_half_up((bootstrap + investor) / 2)
  return RouteScores(bootstrap=bootstrap, investor=investor,
                     hybrid=hybrid), reasons


def recommend(scores: RouteScores, threshold: float) -> str:
  '''Hybrid when the scores are within threshold, else the higher route.'''
  if abs(scores.bootstrap - scores.investor) < threshold:
    return 'hybrid'
  if scores.bootstrap > scores.investor:
    return 'bootstrap'
  return 'investor'


def route_confidence(scores: RouteScores, data: FounderInput,
                     config: EngineConfig) -> int:
  '''
  min(95, round((60 + gap / 2) * tier multiplier)), held within [20, 95].
  '''
  gap = abs(scores.bootstrap - scores.investor)
  base = config.route_confidence_base + gap / 2
  confidence = min(config.route_confidence_max,
                   round_half_up(base * data.tier.route_multiplier))
  return max(config.route_confidence_min, confidence)


def rank_reasons(reasons: List[RouteReason], limit: int) -> Tuple[RouteReason,
                                                                   ...]:
  '''Strongest reasons first (by |bootstrap - investor|), ties keep order.'''
  ranked = sorted(reasons, key=lambda r: abs(r.score), reverse=True)
  return tuple(ranked[:limit])


def compute_route(
    data: FounderInput,
    config: Optional[EngineConfig] = None,
) -> RouteResult:
  '''
  Recommend a funding route.

  Never raises for incomplete input: every factor has a default branch.

  Args:
    data: Founder input
    config: Engine configuration (default: EngineConfig.default())

  Returns:
    RouteResult with scores, recommendation, confidence, up to six ranked
    reasons, warnings, alternatives and the action plan for the
    recommendation
  '''
  config = config or EngineConfig.default()

  scores, reasons = compute_scores(data)
  recommendation = recommend(scores, config.hybrid_threshold)
  confidence = route_confidence(scores, data, config)

  logger.debug('route: bootstrap=%d investor=%d -> %s (confidence %d)',
               scores.bootstrap, scores.investor, recommendation, confidence)

  return RouteResult(
      recommendation=recommendation,
      scores=scores,
      confidence=confidence,
      reasons=rank_reasons(reasons, config.max_reasons),
      warnings=evaluate_rules(WARNING_RULES, data),
      alternative_considerations=ALTERNATIVES[recommendation],
      action_plan=generate_action_plan(data, recommendation, config),
  )
