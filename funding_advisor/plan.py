'''
Action plan generation.

Expands a funding route into a phased plan from the route's static
template, scaled to the founder's commitment level:

- calendar durations stretch by the commitment multiplier
  (full-time 1.0, part-time 1.5, side project 2.0),
- weekly hours shrink to 60% of nominal for anyone not full-time,
- totals, critical path, risks and success metrics are derived, never
  edited by hand.

Usage:
  from funding_advisor.plan import generate_action_plan

  plan = generate_action_plan(founder_input, 'bootstrap')
  print(plan.total_budget.min, plan.total_duration)
'''

from dataclasses import replace
import logging
import re
from typing import Optional

from funding_advisor.config import EngineConfig
from funding_advisor.domain.numeric import round_half_up
from funding_advisor.domain.types import ActionPhase
from funding_advisor.domain.types import ActionPlan
from funding_advisor.domain.types import BudgetRange
from funding_advisor.domain.types import FounderInput
from funding_advisor.domain.types import parse_route
from funding_advisor.domain.types import TimeRange
from funding_advisor.policies.plan_templates import PLAN_TEMPLATES
from funding_advisor.policies.rules import evaluate_rules
from funding_advisor.policies.rules import RISK_RULES
from funding_advisor.policies.rules import SUCCESS_METRICS

logger = logging.getLogger(__name__)

COMMITMENT_MULTIPLIERS = {
    'fulltime': 1.0,
    'parttime': 1.5,
    'side_project': 2.0,
}

_RANGE_PATTERN = re.compile(r'(\d+)-(\d+)')


def commitment_multiplier(commitment: Optional[str]) -> float:
  '''Calendar stretch for a commitment level; full-time when unknown.'''
  return COMMITMENT_MULTIPLIERS.get(commitment or 'fulltime', 1.0)


def scale_duration(duration: str, multiplier: float) -> str:
  '''Scale the first N-M range in a duration text, e.g. "Month 2-4".'''

  def _scale(match: re.Match) -> str:
    start = round_half_up(int(match.group(1)) * multiplier)
    end = round_half_up(int(match.group(2)) * multiplier)
    return f'{start}-{end}'

  return _RANGE_PATTERN.sub(_scale, duration, count=1)


def _scale_phase(
    phase: ActionPhase,
    multiplier: float,
    availability: float,
) -> ActionPhase:
  if multiplier == 1.0:
    return phase
  return replace(
      phase,
      duration=scale_duration(phase.duration, multiplier),
      time_per_week=TimeRange(
          min=round_half_up(phase.time_per_week.min * availability),
          max=round_half_up(phase.time_per_week.max * availability),
      ),
  )


def generate_action_plan(
    data: FounderInput,
    route: str,
    config: Optional[EngineConfig] = None,
) -> ActionPlan:
  '''
  Build the action plan for a route.

  Args:
    data: Founder input (commitment, team size and runway are used)
    route: bootstrap, investor or hybrid
    config: Engine configuration (default: EngineConfig.default())

  Returns:
    ActionPlan whose total budget is the per-field sum of its phases

  Raises:
    ValueError: If route is not a known route
  '''
  config = config or EngineConfig.default()
  route = parse_route(route)

  multiplier = commitment_multiplier(data.personal_situation.commitment)
  phases = tuple(
      _scale_phase(phase, multiplier, config.part_time_availability)
      for phase in PLAN_TEMPLATES[route])

  total_budget = BudgetRange(
      min=sum(p.budget.min for p in phases),
      max=sum(p.budget.max for p in phases),
  )
  months = round_half_up(config.plan_baseline_months * multiplier)
  critical_path = tuple(
      task.title
      for phase in phases
      for task in phase.tasks
      if task.priority == 'critical')

  logger.debug('%s plan: multiplier=%.1f phases=%d months=%d', route,
               multiplier, len(phases), months)

  return ActionPlan(
      route=route,
      phases=phases,
      total_budget=total_budget,
      total_duration=f'{months} months',
      critical_path=critical_path,
      risk_factors=evaluate_rules(RISK_RULES, data, route),
      success_metrics=SUCCESS_METRICS[route],
  )
