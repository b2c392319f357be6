'''
Valuation analysis utilities.

Note: To avoid RuntimeWarning when using -m flag, import directly:
  from funding_advisor.analysis.comparison import aggregate_valuation
  from funding_advisor.analysis.sensitivity import DCFSensitivityTableBuilder
'''

__all__ = [
    'aggregate_valuation',
    'method_comparison_frame',
    'DCFSensitivityTableBuilder',
]

# Direct imports for convenience (may cause RuntimeWarning with -m flag)
from funding_advisor.analysis.comparison import aggregate_valuation
from funding_advisor.analysis.comparison import method_comparison_frame
from funding_advisor.analysis.sensitivity import DCFSensitivityTableBuilder
