"""
Venture Capital method.

Works backwards from an expected exit value: the investor's target return
multiple (normalized to a five-year horizon) gives today's post-money
valuation, later-round dilution shrinks it, and the round size is
subtracted to get the pre-money valuation.
"""

import logging
from typing import List

from funding_advisor.domain.numeric import clamp
from funding_advisor.domain.numeric import round_half_up
from funding_advisor.domain.types import ValuationMethodResult
from funding_advisor.domain.types import VCMethodInput

logger = logging.getLogger(__name__)

HORIZON_YEARS = 5
BASE_CONFIDENCE = 60
MIN_CONFIDENCE = 35
MAX_CONFIDENCE = 80
LARGE_EXIT_VALUE = 100_000_000


def _confidence(data: VCMethodInput) -> int:
  confidence = BASE_CONFIDENCE
  if data.years_to_exit > 7:
    confidence -= 10
  if data.years_to_exit < 3:
    confidence -= 5
  if data.expected_return > 20:
    confidence -= 15
  if data.expected_exit_value > LARGE_EXIT_VALUE:
    confidence -= 10
  return int(clamp(confidence, MIN_CONFIDENCE, MAX_CONFIDENCE))


def calculate_vc_method(data: VCMethodInput) -> ValuationMethodResult:
  """
  Compute a VC method valuation.

  post_money = exit / multiple ** (years / 5)
  adjusted_post_money = post_money * (1 - dilution / 100)
  pre_money = max(0, adjusted_post_money - investment)
  implied_ownership = investment / adjusted_post_money * 100

  Args:
    data: Exit expectation, return target, round size and dilution

  Returns:
    ValuationMethodResult whose value is the pre-money valuation. A
    non-positive exit value or return multiple yields a zero value at the
    minimum confidence.
  """
  inputs = data.to_dict()

  if data.expected_exit_value <= 0 or data.expected_return <= 0:
    return ValuationMethodResult(
        method='vc_method',
        value=0,
        confidence=MIN_CONFIDENCE,
        inputs=inputs,
        notes=('Expected exit value and return multiple must be positive',),
    )

  horizon_factor = data.expected_return**(data.years_to_exit / HORIZON_YEARS)
  post_money = data.expected_exit_value / horizon_factor
  adjusted_post_money = post_money * (1 - data.dilution_assumption / 100)
  pre_money = max(0.0, adjusted_post_money - data.investment_amount)

  if adjusted_post_money > 0:
    implied_ownership = data.investment_amount / adjusted_post_money * 100
  else:
    implied_ownership = 0.0

  breakdown = {
      'expected_exit_value': data.expected_exit_value,
      'post_money_unadjusted': post_money,
      'post_money_valuation': adjusted_post_money,
      'pre_money_valuation': pre_money,
      'implied_ownership': implied_ownership,
      'dilution_adjustment': max(0.0, post_money - adjusted_post_money),
  }

  notes: List[str] = []
  if data.expected_return > 15:
    notes.append('Expected return is high - typical for seed/pre-seed')
  if data.years_to_exit > 7:
    notes.append('A long time horizon increases projection uncertainty')
  if implied_ownership > 30:
    notes.append('High ownership share for the investor - check the '
                 'negotiation room')
  if data.dilution_assumption > 40:
    notes.append('Heavy dilution assumed - plan for more funding rounds')
  if pre_money == 0:
    notes.append('The round size exceeds the post-money valuation')

  logger.debug('vc_method: post=%.0f adjusted=%.0f pre=%.0f', post_money,
               adjusted_post_money, pre_money)

  return ValuationMethodResult(
      method='vc_method',
      value=round_half_up(pre_money),
      confidence=_confidence(data),
      inputs=inputs,
      breakdown=breakdown,
      notes=tuple(notes),
  )


def suggest_vc_improvements(current_value: float,
                            target_value: float) -> List[str]:
  """Levers for closing the gap between a current and a target valuation."""
  if current_value <= 0 or target_value <= current_value:
    return []

  increase = (target_value - current_value) / current_value * 100
  return [
      f'To reach a {increase:.0f}% higher valuation:',
      '- Raise the exit value through market expansion',
      '- Shorten the time to exit through faster growth',
      '- Lower the return expectation with stronger traction',
  ]
