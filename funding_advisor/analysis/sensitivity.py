"""
Sensitivity analysis for DCF valuation.

This module generates 2D sensitivity tables that show how the DCF value
varies across discount rates and terminal growth rates for a fixed set of
projected cash flows.

CLI Usage:
  python -m funding_advisor.analysis.sensitivity \\
      --cash-flows=-50000,0,100000,200000,350000 \\
      --discount-rates 20,30,40 \\
      --growth-rates 1,2,3,4
"""

import argparse
import logging
from collections.abc import Sequence

import pandas as pd

from funding_advisor.engine.dcf import compute_enterprise_value

logger = logging.getLogger(__name__)


class DCFSensitivityTableBuilder:
  """
  Build 2D sensitivity tables for DCF enterprise value.

  Varies discount rate and terminal growth rate while keeping the
  projected cash flows fixed. Rates are given in percent, as on the DCF
  input form.
  """

  def __init__(self, cash_flows: Sequence[float]):
    """
    Initialize sensitivity table builder.

    Args:
        cash_flows: Projected annual cash flows, year 1 first
    """
    if not cash_flows:
      raise ValueError('cash_flows cannot be empty')
    self.cash_flows = list(cash_flows)

    logger.info('Initialized DCFSensitivityTableBuilder')
    logger.info('  Years: %d', len(self.cash_flows))
    logger.info('  Final cash flow: EUR %s', f'{self.cash_flows[-1]:,.0f}')

  def build(
      self,
      discount_rates: list[float],
      terminal_growth_rates: list[float],
  ) -> pd.DataFrame:
    """
    Build 2D sensitivity table.

    Args:
        discount_rates: Discount rates in percent (e.g., [20, 30, 40])
        terminal_growth_rates: Terminal growth rates in percent
                               (e.g., [1, 2, 3])

    Returns:
        DataFrame with discount rates as index, terminal growth rates as
        columns and enterprise values as cells. Combinations where the
        model is undefined (growth >= discount rate) are NaN.
    """
    if not discount_rates:
      raise ValueError('discount_rates cannot be empty')
    if not terminal_growth_rates:
      raise ValueError('terminal_growth_rates cannot be empty')

    logger.info('Building sensitivity table: %d x %d', len(discount_rates),
                len(terminal_growth_rates))

    data_rows = []
    for r in discount_rates:
      row_data = []
      for g in terminal_growth_rates:
        ev, _, _ = compute_enterprise_value(self.cash_flows, g / 100, r / 100)
        row_data.append(ev)
      data_rows.append(row_data)

    r_labels = [f'{r:g}%' for r in discount_rates]
    g_labels = [f'{g:g}%' for g in terminal_growth_rates]

    df = pd.DataFrame(data_rows, index=r_labels, columns=g_labels)
    df.index.name = 'Discount Rate'
    df.columns.name = 'Terminal Growth'

    logger.info('Sensitivity table built successfully')
    return df


def _parse_float_list(s: str) -> list[float]:
  """Parse comma-separated float list."""
  return [float(x.strip()) for x in s.split(',')]


def main() -> None:
  """CLI entrypoint for sensitivity analysis."""
  parser = argparse.ArgumentParser(
      description='DCF Sensitivity Analysis',
      formatter_class=argparse.RawDescriptionHelpFormatter,
      epilog="""
Examples:
  python -m funding_advisor.analysis.sensitivity \\
      --cash-flows=-50000,0,100000,200000,350000 \\
      --discount-rates 20,25,30,35,40 \\
      --growth-rates 1,2,3,4,5
      """)
  parser.add_argument('--cash-flows',
                      type=_parse_float_list,
                      required=True,
                      help='Comma-separated projected cash flows')
  parser.add_argument('--discount-rates',
                      type=_parse_float_list,
                      default=[20.0, 30.0, 40.0],
                      help='Comma-separated discount rates in percent')
  parser.add_argument('--growth-rates',
                      type=_parse_float_list,
                      default=[1.0, 2.0, 3.0, 4.0],
                      help='Comma-separated terminal growth rates in percent')
  args = parser.parse_args()

  builder = DCFSensitivityTableBuilder(args.cash_flows)
  table = builder.build(args.discount_rates, args.growth_rates)

  logger.info('\n%s', table.round(0).to_string())


if __name__ == '__main__':
  logging.basicConfig(
      level=logging.INFO,
      format='%(message)s',
  )
  main()
