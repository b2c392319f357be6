"""
Route scoring policies and rule tables.

factors.py holds the weighted route factors, rules.py the ordered
(predicate, message) tables and plan_templates.py the static action plan
templates per route.

To add a factor:
1. Subclass RouteFactor in factors.py and implement compute()
2. Append an instance to ROUTE_FACTORS

Example:
  class RegulationFactor(RouteFactor):
    name = 'Regulation'
    weight = 6

    def compute(self, data: FounderInput) -> FactorScore:
      ...
"""

from funding_advisor.policies.factors import ROUTE_FACTORS
from funding_advisor.policies.factors import RouteFactor
from funding_advisor.policies.rules import evaluate_rules
from funding_advisor.policies.rules import Rule

__all__ = [
    'ROUTE_FACTORS',
    'RouteFactor',
    'Rule',
    'evaluate_rules',
]
