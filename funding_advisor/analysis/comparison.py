'''
Cross-method valuation comparison.

Turns a set of valuation method results into a comparison table and a
weighted low/mid/high valuation range.

Usage (Python API):
  from funding_advisor.analysis.comparison import aggregate_valuation
  from funding_advisor.analysis.comparison import method_comparison_frame

  df = method_comparison_frame([berkus, scorecard, vc])
  df.to_csv('methods.csv', index=False)
  low, mid, high = aggregate_valuation([berkus, scorecard, vc])
'''

from collections.abc import Sequence
import logging
from typing import Tuple

import pandas as pd

from funding_advisor.domain.numeric import round_half_up
from funding_advisor.domain.types import ValuationMethodResult
from funding_advisor.engine.registry import METHOD_INFO

logger = logging.getLogger(__name__)

METHOD_WEIGHTS = {
    'berkus': 0.3,
    'scorecard': 0.4,
    'vc_method': 0.5,
    'comparables': 0.5,
    'dcf': 0.4,
}
DEFAULT_METHOD_WEIGHT = 0.3
LOW_FACTOR = 0.7
HIGH_FACTOR = 1.4

COLUMNS = ['method', 'name', 'value', 'confidence', 'weight', 'notes']


def method_comparison_frame(
    results: Sequence[ValuationMethodResult]) -> pd.DataFrame:
  '''
  One row per method result.

  Columns: method, name, value, confidence, weight (in the aggregate
  range) and notes (joined with "; ").
  '''
  rows = [{
      'method': r.method,
      'name': METHOD_INFO.get(r.method, {}).get('name', r.method),
      'value': r.value,
      'confidence': r.confidence,
      'weight': METHOD_WEIGHTS.get(r.method, DEFAULT_METHOD_WEIGHT),
      'notes': '; '.join(r.notes),
  } for r in results]
  return pd.DataFrame(rows, columns=COLUMNS)


def aggregate_valuation(
    results: Sequence[ValuationMethodResult]) -> Tuple[int, int, int]:
  '''
  Weighted valuation range across methods.

  mid is the method-weighted mean of the values; low = 0.7 * mid and
  high = 1.4 * mid. Results with a zero value (e.g. comparables without
  matches) are left out.

  Returns:
    Tuple of (low, mid, high); all zero when no result has a value
  '''
  df = method_comparison_frame(results)
  df = df[df['value'] > 0]
  if df.empty:
    logger.debug('aggregate_valuation: no positive values')
    return 0, 0, 0

  mid_raw = (df['value'] * df['weight']).sum() / df['weight'].sum()
  mid = round_half_up(float(mid_raw))
  return (
      round_half_up(mid * LOW_FACTOR),
      mid,
      round_half_up(mid * HIGH_FACTOR),
  )
