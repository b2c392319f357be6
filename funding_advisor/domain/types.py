'''
Domain types for the funding advisor.

Every record is a frozen dataclass so a computation can never mutate the
caller's data. Records convert to plain nested dicts/lists via to_dict(),
which is what a persistence layer stores verbatim; input records can be
rebuilt from the same shape via from_dict().
'''

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import Any, Dict, Mapping, Optional, Tuple, Type, TypeVar

logger = logging.getLogger(__name__)

R = TypeVar('R', bound='Record')


def to_plain(obj: Any) -> Any:
  '''Convert records, enums and tuples into JSON-friendly structures.'''
  if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
    return {
        f.name: to_plain(getattr(obj, f.name))
        for f in dataclasses.fields(obj)
    }
  if isinstance(obj, Enum):
    return obj.value
  if isinstance(obj, Mapping):
    return {k: to_plain(v) for k, v in obj.items()}
  if isinstance(obj, (list, tuple)):
    return [to_plain(v) for v in obj]
  return obj


class Record:
  '''Mixin giving dataclasses dict (de)serialization.'''

  def to_dict(self) -> Dict[str, Any]:
    '''Convert to a plain dictionary.'''
    return to_plain(self)

  @classmethod
  def from_dict(cls: Type[R], data: Optional[Mapping[str, Any]]) -> R:
    '''
    Create from a dictionary, ignoring keys the record does not define.

    Nested records are not converted here; records with nested fields
    override this method.
    '''
    data = data or {}
    known = {f.name for f in dataclasses.fields(cls)}
    unknown = sorted(set(data) - known)
    if unknown:
      logger.debug('%s: ignoring unknown fields %s', cls.__name__, unknown)
    kwargs = {k: v for k, v in data.items() if k in known}
    return cls(**kwargs)


# ----------------------------
# Tiers
# ----------------------------


class DataSharingTier(Enum):
  '''
  How much optional detail the founder has disclosed.

  Tiers are ordered: MINIMAL < BASIC < DETAILED < FULL.
  '''
  MINIMAL = 'minimal'
  BASIC = 'basic'
  DETAILED = 'detailed'
  FULL = 'full'

  @classmethod
  def parse(cls, value: Any) -> 'DataSharingTier':
    '''Accept a tier or its string name.'''
    if isinstance(value, cls):
      return value
    try:
      return cls(str(value).lower())
    except ValueError as e:
      raise ValueError(f"Unknown data sharing tier: '{value}'. "
                       f'Available: {[t.value for t in cls]}') from e

  @property
  def rank(self) -> int:
    return _TIER_ORDER.index(self)

  @property
  def confidence_range(self) -> Tuple[int, int]:
    '''Fixed (low, high) confidence range expected at this tier.'''
    return TIER_CONFIDENCE_RANGES[self]

  @property
  def route_multiplier(self) -> float:
    '''Multiplier applied to the route recommendation confidence.'''
    return TIER_ROUTE_MULTIPLIERS[self]

  def __lt__(self, other: 'DataSharingTier') -> bool:
    if not isinstance(other, DataSharingTier):
      return NotImplemented
    return self.rank < other.rank

  def __le__(self, other: 'DataSharingTier') -> bool:
    if not isinstance(other, DataSharingTier):
      return NotImplemented
    return self.rank <= other.rank

  def __gt__(self, other: 'DataSharingTier') -> bool:
    if not isinstance(other, DataSharingTier):
      return NotImplemented
    return self.rank > other.rank

  def __ge__(self, other: 'DataSharingTier') -> bool:
    if not isinstance(other, DataSharingTier):
      return NotImplemented
    return self.rank >= other.rank


_TIER_ORDER = (
    DataSharingTier.MINIMAL,
    DataSharingTier.BASIC,
    DataSharingTier.DETAILED,
    DataSharingTier.FULL,
)

TIER_CONFIDENCE_RANGES: Dict[DataSharingTier, Tuple[int, int]] = {
    DataSharingTier.MINIMAL: (30, 50),
    DataSharingTier.BASIC: (50, 70),
    DataSharingTier.DETAILED: (70, 85),
    DataSharingTier.FULL: (85, 95),
}

TIER_ROUTE_MULTIPLIERS: Dict[DataSharingTier, float] = {
    DataSharingTier.MINIMAL: 0.6,
    DataSharingTier.BASIC: 0.75,
    DataSharingTier.DETAILED: 0.9,
    DataSharingTier.FULL: 1.0,
}

ROUTES = ('bootstrap', 'investor', 'hybrid')


def parse_route(route: str) -> str:
  '''Validate a route name.'''
  if route not in ROUTES:
    raise ValueError(f"Unknown route: '{route}'. Available: {list(ROUTES)}")
  return route


# ----------------------------
# Founder input
# ----------------------------


@dataclass(frozen=True)
class ProjectBasics(Record):
  '''
  What the founder is building and how far along it is.

  Attributes:
    category: saas, marketplace, ecommerce, content, service, hardware,
      fintech, healthtech, edtech or other
    stage: idea, mvp, beta, live or scaling
    target_customer: b2b, b2c, both or b2b2c
    has_revenue: Whether the product earns money today
    monthly_revenue: Monthly revenue in EUR
    revenue_growth_rate: Monthly revenue growth in percent
    has_users: Whether the product has users today
    user_count: Number of users
    user_growth_rate: Monthly user growth in percent
    launch_date: Launch date as free text (e.g. '2024-03')
  '''
  category: Optional[str] = None
  stage: Optional[str] = None
  target_customer: Optional[str] = None
  has_revenue: Optional[bool] = None
  monthly_revenue: Optional[float] = None
  revenue_growth_rate: Optional[float] = None
  has_users: Optional[bool] = None
  user_count: Optional[int] = None
  user_growth_rate: Optional[float] = None
  launch_date: Optional[str] = None


@dataclass(frozen=True)
class PersonalSituation(Record):
  '''
  The founder's team, time and money situation.

  Attributes:
    team_size: solo, cofounders, small_team or larger_team
    cofounders_count: Number of co-founders
    has_relevant_experience: Domain or startup experience
    years_experience: Years of relevant experience
    commitment: fulltime, parttime or side_project
    hours_per_week: Hours the founder can spend per week
    runway_months: Months the founder can live without income
    financial_situation: bootstrapped, some_savings, comfortable or
      significant
    risk_tolerance: 1 (averse) to 10 (seeking)
    has_other_income: Whether another income source exists
  '''
  team_size: Optional[str] = None
  cofounders_count: Optional[int] = None
  has_relevant_experience: Optional[bool] = None
  years_experience: Optional[float] = None
  commitment: Optional[str] = None
  hours_per_week: Optional[float] = None
  runway_months: Optional[float] = None
  financial_situation: Optional[str] = None
  risk_tolerance: Optional[float] = None
  has_other_income: Optional[bool] = None


@dataclass(frozen=True)
class Goals(Record):
  '''
  Where the founder wants to take the company.

  Attributes:
    exit_goal: lifestyle, acquisition, ipo or unsure
    target_exit_value: Hoped-for exit value in EUR
    growth_speed: slow_steady, moderate, aggressive or hypergrowth
    control_importance: 1 (indifferent) to 10 (must keep control)
    time_horizon: 1_year, 3_years, 5_years or 10_plus
    open_to_investors: Whether outside money is acceptable
    open_to_cofounders: Whether new co-founders are acceptable
    prioritize_profitability: Profit before growth
  '''
  exit_goal: Optional[str] = None
  target_exit_value: Optional[float] = None
  growth_speed: Optional[str] = None
  control_importance: Optional[float] = None
  time_horizon: Optional[str] = None
  open_to_investors: Optional[bool] = None
  open_to_cofounders: Optional[bool] = None
  prioritize_profitability: Optional[bool] = None


@dataclass(frozen=True)
class MarketAnalysis(Record):
  '''
  The founder's view of the market.

  Attributes:
    known_competitors: Names of known competitors
    competitor_strength: 1 (weak) to 10 (dominant)
    market_timing: early, growing, mature or declining
    market_type: winner_takes_all, fragmented or oligopoly
    regulatory_complexity: 1 (none) to 10 (heavy)
    estimated_tam: Total addressable market in EUR
    estimated_sam: Serviceable addressable market in EUR
    estimated_som: Serviceable obtainable market in EUR
  '''
  known_competitors: Optional[Tuple[str, ...]] = None
  competitor_strength: Optional[float] = None
  market_timing: Optional[str] = None
  market_type: Optional[str] = None
  regulatory_complexity: Optional[float] = None
  estimated_tam: Optional[float] = None
  estimated_sam: Optional[float] = None
  estimated_som: Optional[float] = None

  @classmethod
  def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'MarketAnalysis':
    data = dict(data or {})
    competitors = data.get('known_competitors')
    if competitors is not None:
      data['known_competitors'] = tuple(competitors)
    return super().from_dict(data)


@dataclass(frozen=True)
class FounderInput(Record):
  '''
  Everything the founder has told us, grouped by wizard step.

  Owned by the caller and never mutated by the engine.
  '''
  tier: DataSharingTier = DataSharingTier.MINIMAL
  project_basics: ProjectBasics = field(default_factory=ProjectBasics)
  personal_situation: PersonalSituation = field(
      default_factory=PersonalSituation)
  goals: Goals = field(default_factory=Goals)
  market_analysis: MarketAnalysis = field(default_factory=MarketAnalysis)

  def __post_init__(self):
    tier = DataSharingTier.MINIMAL if self.tier is None else self.tier
    object.__setattr__(self, 'tier', DataSharingTier.parse(tier))

  @classmethod
  def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'FounderInput':
    data = data or {}
    return cls(
        tier=data.get('tier') or DataSharingTier.MINIMAL,
        project_basics=ProjectBasics.from_dict(data.get('project_basics')),
        personal_situation=PersonalSituation.from_dict(
            data.get('personal_situation')),
        goals=Goals.from_dict(data.get('goals')),
        market_analysis=MarketAnalysis.from_dict(data.get('market_analysis')),
    )


# ----------------------------
# Route results
# ----------------------------


@dataclass(frozen=True)
class FactorScore:
  '''
  Output of one route factor.

  Attributes:
    bootstrap: How well the input fits the bootstrap route (0-100)
    investor: How well the input fits the investor route (0-100)
    reason: One-sentence rationale
  '''
  bootstrap: float
  investor: float
  reason: str


@dataclass(frozen=True)
class RouteReason(Record):
  '''
  A ranked rationale entry.

  Attributes:
    factor: Factor name
    impact: positive (favours bootstrap), negative (favours investor) or
      neutral
    explanation: The factor's rationale sentence
    score: Signed bootstrap minus investor sub-score
  '''
  factor: str
  impact: str
  explanation: str
  score: float


@dataclass(frozen=True)
class RouteScores(Record):
  bootstrap: int
  investor: int
  hybrid: int


@dataclass(frozen=True)
class BudgetRange(Record):
  min: int
  max: int
  currency: str = 'EUR'


@dataclass(frozen=True)
class TimeRange(Record):
  '''Hours per week.'''
  min: int
  max: int


@dataclass(frozen=True)
class ActionTask(Record):
  id: str
  title: str
  description: str
  priority: str
  estimated_hours: int
  tools: Tuple[str, ...] = ()
  tips: Tuple[str, ...] = ()


@dataclass(frozen=True)
class PlanResource(Record):
  name: str
  type: str
  cost: str
  description: str
  url: Optional[str] = None


@dataclass(frozen=True)
class ActionPhase(Record):
  '''
  One phase of an action plan.

  Attributes:
    title: Phase title
    duration: Month range text, e.g. 'Month 1-2'
    tasks: Ordered tasks
    budget: Budget range in EUR
    time_per_week: Expected hours per week
    milestones: What done looks like
    resources: Books, tools and services that help
  '''
  title: str
  duration: str
  tasks: Tuple[ActionTask, ...]
  budget: BudgetRange
  time_per_week: TimeRange
  milestones: Tuple[str, ...]
  resources: Tuple[PlanResource, ...] = ()


@dataclass(frozen=True)
class ActionPlan(Record):
  route: str
  phases: Tuple[ActionPhase, ...]
  total_budget: BudgetRange
  total_duration: str
  critical_path: Tuple[str, ...]
  risk_factors: Tuple[str, ...]
  success_metrics: Tuple[str, ...]


@dataclass(frozen=True)
class RouteResult(Record):
  '''
  Funding route recommendation.

  Attributes:
    recommendation: bootstrap, investor or hybrid
    scores: Normalized 0-100 scores per route
    confidence: 20-95
    reasons: Up to six ranked reasons
    warnings: Rule-based warnings about the input
    alternative_considerations: Other ways to reach the goal
    action_plan: Plan for the recommended route
  '''
  recommendation: str
  scores: RouteScores
  confidence: int
  reasons: Tuple[RouteReason, ...]
  warnings: Tuple[str, ...]
  alternative_considerations: Tuple[str, ...]
  action_plan: ActionPlan


# ----------------------------
# Valuation inputs and results
# ----------------------------


@dataclass(frozen=True)
class BerkusInput(Record):
  '''Five Berkus factor scores, each 0-100.'''
  sound_idea: float = 0.0
  prototype: float = 0.0
  quality_team: float = 0.0
  strategic_relations: float = 0.0
  product_rollout: float = 0.0


@dataclass(frozen=True)
class ScorecardFactor(Record):
  '''Weight (percent of total) and score (0-100, 50 = average).'''
  weight: float
  score: float


def default_scorecard_factors() -> Dict[str, ScorecardFactor]:
  '''Default Scorecard weights with every factor at market average.'''
  return {
      'team_strength': ScorecardFactor(weight=30, score=50),
      'market_size': ScorecardFactor(weight=25, score=50),
      'product_tech': ScorecardFactor(weight=15, score=50),
      'competition': ScorecardFactor(weight=10, score=50),
      'marketing_sales': ScorecardFactor(weight=10, score=50),
      'need_for_funding': ScorecardFactor(weight=5, score=50),
      'other': ScorecardFactor(weight=5, score=50),
  }


@dataclass(frozen=True)
class ScorecardInput(Record):
  '''
  Scorecard factors and the regional average pre-money baseline.

  A baseline of None uses EngineConfig.scorecard_baseline.
  '''
  factors: Mapping[str, ScorecardFactor] = field(
      default_factory=default_scorecard_factors)
  baseline: Optional[float] = None

  @classmethod
  def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'ScorecardInput':
    data = data or {}
    factors = data.get('factors')
    if factors is None:
      parsed = default_scorecard_factors()
    else:
      parsed = {
          name: ScorecardFactor.from_dict(value)
          for name, value in factors.items()
      }
    return cls(factors=parsed, baseline=data.get('baseline'))


@dataclass(frozen=True)
class VCMethodInput(Record):
  '''
  Attributes:
    expected_exit_value: Exit value in EUR
    years_to_exit: Years until exit
    expected_return: Investor's target return multiple (e.g. 10 for 10x)
    investment_amount: Size of the current round in EUR
    dilution_assumption: Dilution from later rounds in percent
  '''
  expected_exit_value: float = 0.0
  years_to_exit: float = 0.0
  expected_return: float = 0.0
  investment_amount: float = 0.0
  dilution_assumption: float = 20.0


@dataclass(frozen=True)
class DCFInput(Record):
  '''
  Attributes:
    projected_cash_flows: Annual free cash flows, year 1 first
    discount_rate: Annual discount rate in percent (e.g. 30)
    terminal_growth_rate: Perpetual growth after the last year in percent
  '''
  projected_cash_flows: Tuple[float, ...] = ()
  discount_rate: float = 0.0
  terminal_growth_rate: float = 0.0

  @classmethod
  def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'DCFInput':
    data = dict(data or {})
    data['projected_cash_flows'] = tuple(
        data.get('projected_cash_flows') or ())
    return super().from_dict(data)


@dataclass(frozen=True)
class ComparableCompany(Record):
  name: str = ''
  valuation: float = 0.0
  metric: float = 0.0
  metric_type: str = ''
  funding_stage: str = ''
  region: str = ''
  date: str = ''


@dataclass(frozen=True)
class ComparablesInput(Record):
  '''
  Attributes:
    comparable_companies: Candidate comparable deals
    selected_metric: revenue, arr, users or gmv
    your_metric: The founder's value for the selected metric
    adjustment_factor: Premium (>1) or discount (<1) on the median multiple
  '''
  comparable_companies: Tuple[ComparableCompany, ...] = ()
  selected_metric: str = 'revenue'
  your_metric: float = 0.0
  adjustment_factor: float = 1.0

  @classmethod
  def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'ComparablesInput':
    data = dict(data or {})
    data['comparable_companies'] = tuple(
        ComparableCompany.from_dict(c)
        for c in data.get('comparable_companies') or ())
    return super().from_dict(data)


@dataclass(frozen=True)
class ValuationMethodResult(Record):
  '''
  Result of one valuation method.

  Attributes:
    method: Method id (berkus, scorecard, vc_method, dcf, comparables)
    value: Valuation in EUR
    confidence: Method-specific confidence (0-90)
    inputs: Echo of the inputs used
    breakdown: Named intermediate values
    notes: Human-readable remarks
  '''
  method: str
  value: float
  confidence: int
  inputs: Mapping[str, Any] = field(default_factory=dict)
  breakdown: Mapping[str, float] = field(default_factory=dict)
  notes: Tuple[str, ...] = ()


# ----------------------------
# Confidence
# ----------------------------


@dataclass(frozen=True)
class ConfidenceFactors(Record):
  tier_factor: float
  data_completeness: float
  method_agreement: float
  market_data_quality: float


@dataclass(frozen=True)
class ConfidenceExplanation(Record):
  '''
  Overall trust signal with its ingredients.

  Attributes:
    confidence: 20-95
    factors: The four weighted signals, each 0-1
    explanations: Ordered human-readable sentences
    level: low, medium or high
  '''
  confidence: int
  factors: ConfidenceFactors
  explanations: Tuple[str, ...]
  level: str
