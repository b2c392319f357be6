'''Rounding helpers shared by the scoring and valuation modules.'''

from math import floor


def round_half_up(x: float) -> int:
  '''
  Round to the nearest integer, ties toward positive infinity.

  Python's round() uses banker's rounding; all published product numbers
  (scores, confidences, plan durations) round .5 upward.
  '''
  return int(floor(x + 0.5))


def clamp(x: float, lower: float, upper: float) -> float:
  '''Clip x into [lower, upper].'''
  return max(lower, min(upper, x))
