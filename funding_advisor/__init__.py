'''
Funding advisor decision and valuation engine.

Four pure, deterministic entry points turn structured founder input into a
funding route recommendation, valuation estimates, an overall confidence
score and a phased action plan. All inputs and outputs are frozen records
that convert to plain dicts via to_dict().

Usage:
  from funding_advisor import compute_route, compute_valuation
  from funding_advisor.domain.types import BerkusInput, FounderInput

  founder = FounderInput.from_dict(payload)
  route = compute_route(founder)
  berkus = compute_valuation('berkus', BerkusInput(sound_idea=80))
  confidence = compute_confidence(founder.tier, founder, [berkus])
'''

from funding_advisor.confidence import compute_confidence
from funding_advisor.engine.registry import compute_valuation
from funding_advisor.plan import generate_action_plan
from funding_advisor.route import compute_route

__all__ = [
    'compute_confidence',
    'compute_route',
    'compute_valuation',
    'generate_action_plan',
]
