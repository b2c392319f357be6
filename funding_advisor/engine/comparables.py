"""
Comparable transactions method.

Values the startup at the median valuation multiple of similar deals,
optionally adjusted by a premium or discount.
"""

import logging
from statistics import fmean
from statistics import median
from typing import List

from funding_advisor.domain.numeric import clamp
from funding_advisor.domain.numeric import round_half_up
from funding_advisor.domain.types import ComparableCompany
from funding_advisor.domain.types import ComparablesInput
from funding_advisor.domain.types import ValuationMethodResult

logger = logging.getLogger(__name__)

METRIC_LABELS = {
    'revenue': 'Revenue (MRR)',
    'arr': 'ARR',
    'users': 'Users',
    'gmv': 'GMV',
}

BASE_CONFIDENCE = 50
MIN_CONFIDENCE = 30
MAX_CONFIDENCE = 80

SAMPLE_COMPARABLES = (
    ComparableCompany(
        name='SaaS Startup A',
        valuation=5_000_000,
        metric=100_000,
        metric_type='arr',
        funding_stage='seed',
        region='DACH',
        date='2024-01',
    ),
    ComparableCompany(
        name='SaaS Startup B',
        valuation=3_000_000,
        metric=50_000,
        metric_type='arr',
        funding_stage='pre-seed',
        region='DACH',
        date='2024-03',
    ),
    ComparableCompany(
        name='Marketplace C',
        valuation=8_000_000,
        metric=500_000,
        metric_type='gmv',
        funding_stage='seed',
        region='EU',
        date='2024-02',
    ),
)


def metric_label(metric: str) -> str:
  """Display label for a metric type."""
  return METRIC_LABELS.get(metric, metric)


def _empty_result(data: ComparablesInput, note: str) -> ValuationMethodResult:
  return ValuationMethodResult(
      method='comparables',
      value=0,
      confidence=0,
      inputs=data.to_dict(),
      notes=(note,),
  )


def calculate_comparables(data: ComparablesInput) -> ValuationMethodResult:
  """
  Compute a comparables valuation.

  value = your_metric * median(valuation / metric) * adjustment_factor

  Only comparables with the selected metric type and a positive metric
  are used. An empty or non-matching set is not an error: the result has
  value 0, confidence 0 and a note saying why.
  """
  if not data.comparable_companies:
    return _empty_result(data, 'No comparable companies selected')

  if data.selected_metric not in METRIC_LABELS:
    return _empty_result(
        data, f"Unsupported metric '{data.selected_metric}'. "
        f'Available: {list(METRIC_LABELS)}')

  multiples: List[float] = [
      c.valuation / c.metric
      for c in data.comparable_companies
      if c.metric_type == data.selected_metric and c.metric > 0
  ]

  if not multiples:
    return _empty_result(
        data, 'No comparable companies with a matching metric found')

  median_multiple = median(multiples)
  mean_multiple = fmean(multiples)
  low_multiple = min(multiples)
  high_multiple = max(multiples)
  adjustment = data.adjustment_factor
  adjusted_multiple = median_multiple * adjustment

  breakdown = {
      'median_multiple': median_multiple,
      'mean_multiple': mean_multiple,
      'adjusted_multiple': adjusted_multiple,
      'low_valuation': round_half_up(data.your_metric * low_multiple *
                                     adjustment),
      'high_valuation': round_half_up(data.your_metric * high_multiple *
                                      adjustment),
      'comparables_used': len(multiples),
  }

  confidence = BASE_CONFIDENCE + min(20, len(multiples) * 5)
  # Adjusted range over the unadjusted median.
  if median_multiple > 0:
    spread = (high_multiple - low_multiple) * adjustment / median_multiple
  else:
    spread = float('inf')
  if spread < 0.5:
    confidence += 15
  elif spread > 2:
    confidence -= 15

  notes: List[str] = [
      f'Based on {len(multiples)} comparable companies',
      f'Median multiple: {median_multiple:.1f}x '
      f'{data.selected_metric.upper()}',
  ]
  if adjustment != 1:
    kind = 'premium' if adjustment > 1 else 'discount'
    notes.append(f'Adjustment factor {adjustment:g}x applied ({kind})')
  if spread > 1.5:
    notes.append('Wide spread among comparables - mind the valuation range')

  logger.debug('comparables: n=%d median=%.2f spread=%.2f', len(multiples),
               median_multiple, spread)

  return ValuationMethodResult(
      method='comparables',
      value=round_half_up(data.your_metric * adjusted_multiple),
      confidence=int(clamp(confidence, MIN_CONFIDENCE, MAX_CONFIDENCE)),
      inputs=data.to_dict(),
      breakdown=breakdown,
      notes=tuple(notes),
  )
