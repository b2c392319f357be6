'''Valuation method library: five independent pure calculators.'''

from funding_advisor.engine.berkus import calculate_berkus
from funding_advisor.engine.comparables import calculate_comparables
from funding_advisor.engine.dcf import calculate_dcf
from funding_advisor.engine.dcf import validate_dcf_input
from funding_advisor.engine.registry import applicable_methods
from funding_advisor.engine.registry import compute_valuation
from funding_advisor.engine.scorecard import calculate_scorecard
from funding_advisor.engine.vc_method import calculate_vc_method

__all__ = [
    'applicable_methods',
    'calculate_berkus',
    'calculate_comparables',
    'calculate_dcf',
    'calculate_scorecard',
    'calculate_vc_method',
    'compute_valuation',
    'validate_dcf_input',
]
