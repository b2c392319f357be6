'''
Route scoring factors.

Each factor looks at a few founder input fields and returns how well the
situation fits the bootstrap route and the investor route (0-100 each),
with a one-sentence rationale. Missing fields fall through to the factor's
default branch, so every factor is total.

To add a factor:
1. Subclass RouteFactor with a name, a weight and compute()
2. Append an instance to ROUTE_FACTORS

The route score normalizes by the total weight, so weights need not add up
to 100.
'''

from abc import ABC, abstractmethod
from typing import Tuple

from funding_advisor.domain.types import FactorScore
from funding_advisor.domain.types import FounderInput

DEFAULT_RUNWAY_MONTHS = 12
DEFAULT_CONTROL_IMPORTANCE = 5
DEFAULT_RISK_TOLERANCE = 5


class RouteFactor(ABC):
  '''
  Base class for route scoring factors.

  Attributes:
    name: Display name used in ranked reasons
    weight: Relative weight in the overall score
  '''
  name: str = ''
  weight: float = 0

  @abstractmethod
  def compute(self, data: FounderInput) -> FactorScore:
    '''
    Score the founder input.

    Args:
      data: Founder input

    Returns:
      FactorScore with bootstrap and investor fit and a rationale
    '''


class MarketTypeFactor(RouteFactor):
  '''Market structure and category capital intensity.'''
  name = 'Market type'
  weight = 15

  def compute(self, data: FounderInput) -> FactorScore:
    category = data.project_basics.category
    market_type = data.market_analysis.market_type

    if market_type == 'winner_takes_all':
      return FactorScore(20, 80,
                         'Winner-takes-all markets demand fast growth')
    if category in ('saas', 'marketplace'):
      return FactorScore(50, 65, 'Scalable models suit both routes')
    if category == 'service':
      return FactorScore(80, 30, 'Service businesses scale better organically')
    if category in ('hardware', 'fintech', 'healthtech'):
      return FactorScore(30, 75,
                         'Capital-intensive industries benefit from investors')
    return FactorScore(55, 55, 'The industry allows both routes')


class DevelopmentStageFactor(RouteFactor):
  name = 'Development stage'
  weight = 12

  def compute(self, data: FounderInput) -> FactorScore:
    stage = data.project_basics.stage
    has_revenue = data.project_basics.has_revenue

    if stage == 'idea':
      return FactorScore(70, 40, 'Idea stage: validate first, then decide')
    if stage == 'live' and has_revenue:
      return FactorScore(75, 60, 'With revenue you have options')
    if stage == 'scaling':
      return FactorScore(40, 80, 'The scaling phase benefits from capital')
    return FactorScore(60, 55, 'MVP/beta stage: a good time for either route')


class TeamSituationFactor(RouteFactor):
  name = 'Team situation'
  weight = 14

  def compute(self, data: FounderInput) -> FactorScore:
    team_size = data.personal_situation.team_size
    experienced = bool(data.personal_situation.has_relevant_experience)

    if team_size == 'solo' and not experienced:
      return FactorScore(65, 35,
                         'Solo without experience: investors expect a team')
    if team_size == 'solo':
      return FactorScore(70, 50, 'Solo with experience: bootstrapping works')
    if team_size == 'cofounders':
      return FactorScore(55, 70, 'Co-founder teams are more attractive to VCs')
    return FactorScore(50, 65, 'A team is in place: both routes are possible')


class FinancialRunwayFactor(RouteFactor):
  '''Months of personal runway; 12 months assumed when not given.'''
  name = 'Financial runway'
  weight = 16

  def compute(self, data: FounderInput) -> FactorScore:
    runway = data.personal_situation.runway_months
    if runway is None:
      runway = DEFAULT_RUNWAY_MONTHS
    situation = data.personal_situation.financial_situation

    if runway < 6:
      return FactorScore(30, 75, 'Short runway: capital needed to survive')
    if runway >= 18 and situation == 'comfortable':
      return FactorScore(85, 45, 'A long runway enables organic growth')
    if runway >= 12:
      return FactorScore(70, 55, 'Enough runway for both routes')
    return FactorScore(50, 65, 'Moderate runway: planning matters')


class ExitGoalFactor(RouteFactor):
  name = 'Exit goal'
  weight = 18

  def compute(self, data: FounderInput) -> FactorScore:
    exit_goal = data.goals.exit_goal

    if exit_goal == 'lifestyle':
      return FactorScore(95, 15, 'Lifestyle business: investors expect an exit')
    if exit_goal == 'ipo':
      return FactorScore(15, 90, 'IPO ambitions require the VC track')
    if exit_goal == 'acquisition':
      return FactorScore(55, 70, 'Acquisition: investors bring the network')
    return FactorScore(60, 55, 'Still undecided: both routes remain open')


class ControlPreferenceFactor(RouteFactor):
  '''Control importance on a 1-10 scale; 0 or missing counts as 5.'''
  name = 'Control preference'
  weight = 12

  def compute(self, data: FounderInput) -> FactorScore:
    control = data.goals.control_importance
    if not control:
      control = DEFAULT_CONTROL_IMPORTANCE

    if control >= 8:
      return FactorScore(90, 25,
                         'A strong need for control argues against investors')
    if control <= 4:
      return FactorScore(40, 70, 'Open to outside influence')
    return FactorScore(60, 55, 'Moderate need for control')


class GrowthSpeedFactor(RouteFactor):
  name = 'Growth speed'
  weight = 10

  def compute(self, data: FounderInput) -> FactorScore:
    speed = data.goals.growth_speed

    if speed == 'hypergrowth':
      return FactorScore(20, 90, 'Hypergrowth requires capital')
    if speed == 'slow_steady':
      return FactorScore(85, 30, 'Slow, steady growth is ideal for bootstrapping')
    if speed == 'aggressive':
      return FactorScore(35, 75, 'Aggressive growth needs resources')
    return FactorScore(60, 55, 'Moderate growth allows flexibility')


class RiskToleranceFactor(RouteFactor):
  '''Risk tolerance on a 1-10 scale; 0 or missing counts as 5.'''
  name = 'Risk tolerance'
  weight = 8

  def compute(self, data: FounderInput) -> FactorScore:
    risk = data.personal_situation.risk_tolerance
    if not risk:
      risk = DEFAULT_RISK_TOLERANCE

    if risk >= 8:
      return FactorScore(45, 70, 'High risk tolerance: the VC route is viable')
    if risk <= 3:
      return FactorScore(75, 40, 'Low risk tolerance: bootstrapping is safer')
    return FactorScore(55, 55, 'Moderate appetite for risk')


ROUTE_FACTORS: Tuple[RouteFactor, ...] = (
    MarketTypeFactor(),
    DevelopmentStageFactor(),
    TeamSituationFactor(),
    FinancialRunwayFactor(),
    ExitGoalFactor(),
    ControlPreferenceFactor(),
    GrowthSpeedFactor(),
    RiskToleranceFactor(),
)


def total_weight(factors: Tuple[RouteFactor, ...] = ROUTE_FACTORS) -> float:
  '''Sum of factor weights.'''
  return sum(f.weight for f in factors)
