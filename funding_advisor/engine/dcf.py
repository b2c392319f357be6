"""
Discounted cash flow method.

The pure math functions (compute_*) take rates as fractions and return nan
when the model is undefined. calculate_dcf wraps them for founder input,
where rates are given in percent, and never raises.

Key functions:
  compute_enterprise_value: PV of explicit cash flows plus terminal value
  compute_pv_cash_flows: PV of the explicit forecast period
  compute_terminal_value: Gordon growth terminal value
  validate_dcf_input: Human-readable input errors
  calculate_dcf: Method result for the valuation library
"""

from collections.abc import Sequence
import logging
from math import isfinite
from typing import List, Tuple

from funding_advisor.domain.numeric import clamp
from funding_advisor.domain.numeric import round_half_up
from funding_advisor.domain.types import DCFInput
from funding_advisor.domain.types import ValuationMethodResult

logger = logging.getLogger(__name__)

MIN_PROJECTED_YEARS = 3
MIN_DISCOUNT_RATE = 10
MAX_DISCOUNT_RATE = 60
MAX_TERMINAL_GROWTH = 10

BASE_CONFIDENCE = 45
MIN_CONFIDENCE = 25
MAX_CONFIDENCE = 60


def compute_pv_cash_flows(
    cash_flows: Sequence[float],
    discount_rate: float,
) -> Tuple[float, List[float]]:
  """
  Compute present value of the explicit forecast period.

  Args:
    cash_flows: Annual cash flows [cf1, cf2, ..., cfN]
    discount_rate: Required return (r) as a fraction

  Returns:
    Tuple of (pv_total, yearly_pvs)
  """
  yearly_pvs = [
      cf / ((1.0 + discount_rate)**t) for t, cf in enumerate(cash_flows, start=1)
  ]
  return sum(yearly_pvs), yearly_pvs


def compute_terminal_value(
    final_cash_flow: float,
    g_terminal: float,
    discount_rate: float,
    final_year: int,
) -> Tuple[float, float]:
  """
  Compute terminal value using the Gordon Growth Model.

  Args:
    final_cash_flow: Cash flow in the final explicit year
    g_terminal: Terminal (perpetual) growth rate as a fraction
    discount_rate: Required return (r) as a fraction
    final_year: Number of years to discount back

  Returns:
    Tuple of (terminal_value, discounted_terminal_value); both nan if
    discount_rate <= g_terminal (model undefined)
  """
  if discount_rate <= g_terminal:
    return float('nan'), float('nan')

  tv = (final_cash_flow * (1.0 + g_terminal)) / (discount_rate - g_terminal)
  discounted_tv = tv / ((1.0 + discount_rate)**final_year)
  return tv, discounted_tv


def compute_enterprise_value(
    cash_flows: Sequence[float],
    g_terminal: float,
    discount_rate: float,
) -> Tuple[float, float, float]:
  """
  Compute enterprise value with a two-stage DCF model.

  Stage 1: Explicit projected cash flows
  Stage 2: Terminal value using Gordon Growth Model

  Args:
    cash_flows: Annual cash flows [cf1, cf2, ..., cfN]
    g_terminal: Perpetual terminal growth rate as a fraction
    discount_rate: Required return (r) as a fraction

  Returns:
    Tuple of (enterprise_value, pv_explicit, pv_terminal), all nan when
    the inputs are not finite, empty, or r <= g or r <= -1.
  """
  nan3 = float('nan'), float('nan'), float('nan')

  if not cash_flows or not all(isfinite(cf) for cf in cash_flows):
    return nan3

  if not isfinite(g_terminal) or not isfinite(discount_rate):
    return nan3

  if discount_rate <= g_terminal or discount_rate <= -1.0:
    return nan3

  pv_explicit, _ = compute_pv_cash_flows(cash_flows, discount_rate)
  _, pv_terminal = compute_terminal_value(cash_flows[-1], g_terminal,
                                          discount_rate, len(cash_flows))

  if not isfinite(pv_terminal):
    return nan3

  return pv_explicit + pv_terminal, pv_explicit, pv_terminal


def validate_dcf_input(data: DCFInput) -> List[str]:
  """
  Check DCF input for founder-facing errors.

  Returns:
    List of error messages; empty when the input is valid. Never raises.
  """
  errors: List[str] = []

  if len(data.projected_cash_flows) < MIN_PROJECTED_YEARS:
    errors.append(f'At least {MIN_PROJECTED_YEARS} years of projected cash '
                  'flows are required')

  if not MIN_DISCOUNT_RATE <= data.discount_rate <= MAX_DISCOUNT_RATE:
    errors.append(f'Discount rate should be between {MIN_DISCOUNT_RATE}% '
                  f'and {MAX_DISCOUNT_RATE}%')

  if data.terminal_growth_rate >= data.discount_rate:
    errors.append('Terminal growth rate must be lower than the discount rate')

  if data.terminal_growth_rate > MAX_TERMINAL_GROWTH:
    errors.append(f'Terminal growth above {MAX_TERMINAL_GROWTH}% is '
                  'unrealistic')

  return errors


def _confidence(data: DCFInput) -> int:
  confidence = BASE_CONFIDENCE
  if any(cf < 0 for cf in data.projected_cash_flows):
    confidence -= 10
  if data.discount_rate < 20:
    confidence -= 5
  if data.terminal_growth_rate > 5:
    confidence -= 10
  return int(clamp(confidence, MIN_CONFIDENCE, MAX_CONFIDENCE))


def calculate_dcf(data: DCFInput) -> ValuationMethodResult:
  """
  Compute a DCF valuation from percent-denominated founder input.

  Validation errors are appended to the notes. When the model is defined
  the value is still computed (best effort); when it is not (no cash
  flows, terminal growth >= discount rate) the result has value 0 and
  confidence 0.

  Args:
    data: Projected cash flows, discount rate and terminal growth in percent

  Returns:
    ValuationMethodResult whose value is max(0, enterprise value)
  """
  errors = validate_dcf_input(data)
  cash_flows = list(data.projected_cash_flows)
  r = data.discount_rate / 100
  g = data.terminal_growth_rate / 100

  ev, pv_explicit, pv_terminal = compute_enterprise_value(cash_flows, g, r)

  if not isfinite(ev):
    logger.debug('dcf: model undefined for %s', data)
    return ValuationMethodResult(
        method='dcf',
        value=0,
        confidence=0,
        inputs=data.to_dict(),
        notes=tuple(errors) or ('DCF model is undefined for these inputs',),
    )

  terminal_value, _ = compute_terminal_value(cash_flows[-1], g, r,
                                             len(cash_flows))
  breakdown = {
      'pv_operating_cash_flows': pv_explicit,
      'terminal_value': terminal_value,
      'pv_terminal_value': pv_terminal,
      'enterprise_value': ev,
  }

  notes: List[str] = [
      'DCF is less reliable for startups than other methods',
  ]
  if ev > 0 and pv_terminal / ev > 0.7:
    notes.append('Most of the value comes from the terminal value - high '
                 'uncertainty')
  if data.discount_rate < 25:
    notes.append('Low discount rate for a startup - 25-40% is typical for '
                 'early stage')
  if cash_flows[0] < 0:
    notes.append('Negative cash flows in early years are normal for '
                 'startups')
  notes.extend(errors)

  return ValuationMethodResult(
      method='dcf',
      value=round_half_up(max(0.0, ev)),
      confidence=_confidence(data),
      inputs=data.to_dict(),
      breakdown=breakdown,
      notes=tuple(notes),
  )


def default_dcf_input() -> DCFInput:
  """Typical early-stage projection used to prefill the form."""
  return DCFInput(
      projected_cash_flows=(-50_000, 0, 100_000, 200_000, 350_000),
      discount_rate=30,
      terminal_growth_rate=3,
  )
