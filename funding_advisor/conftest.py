import pytest

from funding_advisor.domain.types import BerkusInput
from funding_advisor.domain.types import FounderInput


@pytest.fixture
def saas_founder() -> FounderInput:
  """Solo SaaS founder at MVP stage, still undecided about the exit.

  Route math (weights sum to 105):
    bootstrap = 60.20 / 105 * 100 = 57.33 -> 57
    investor  = 58.05 / 105 * 100 = 55.29 -> 55
  """
  return FounderInput.from_dict({
      'tier': 'basic',
      'project_basics': {
          'category': 'saas',
          'stage': 'mvp',
      },
      'personal_situation': {
          'team_size': 'solo',
          'commitment': 'fulltime',
          'runway_months': 9,
          'risk_tolerance': 5,
      },
      'goals': {
          'exit_goal': 'unsure',
          'growth_speed': 'moderate',
          'control_importance': 5,
      },
  })


@pytest.fixture
def lifestyle_founder() -> FounderInput:
  """Profitable solo service business with every tracked field filled in.

  Route math:
    bootstrap = 86.8 / 105 * 100 = 82.67 -> 83
    investor  = 37.8 / 105 * 100 = 36.00 -> 36
  """
  return FounderInput.from_dict({
      'tier': 'full',
      'project_basics': {
          'category': 'service',
          'stage': 'live',
          'target_customer': 'b2b',
          'has_revenue': True,
          'monthly_revenue': 12_000,
          'has_users': True,
          'user_count': 40,
      },
      'personal_situation': {
          'team_size': 'solo',
          'has_relevant_experience': True,
          'years_experience': 12,
          'commitment': 'fulltime',
          'runway_months': 24,
          'financial_situation': 'comfortable',
          'risk_tolerance': 2,
      },
      'goals': {
          'exit_goal': 'lifestyle',
          'growth_speed': 'slow_steady',
          'control_importance': 9,
          'time_horizon': '10_plus',
      },
      'market_analysis': {
          'known_competitors': ['Acme Consulting', 'Globex', 'Initech'],
          'market_timing': 'mature',
          'market_type': 'fragmented',
          'estimated_tam': 500_000_000,
          'estimated_sam': 50_000_000,
          'estimated_som': 2_000_000,
      },
  })


@pytest.fixture
def venture_founder() -> FounderInput:
  """Hardware co-founders chasing an IPO on three months of runway.

  Route math:
    bootstrap = 33.4 / 105 * 100 = 31.81 -> 32
    investor  = 82.6 / 105 * 100 = 78.67 -> 79
  """
  return FounderInput.from_dict({
      'tier': 'detailed',
      'project_basics': {
          'category': 'hardware',
          'stage': 'scaling',
      },
      'personal_situation': {
          'team_size': 'cofounders',
          'commitment': 'fulltime',
          'runway_months': 3,
          'risk_tolerance': 9,
      },
      'goals': {
          'exit_goal': 'ipo',
          'growth_speed': 'hypergrowth',
          'control_importance': 2,
      },
      'market_analysis': {
          'market_type': 'winner_takes_all',
      },
  })


@pytest.fixture
def empty_founder() -> FounderInput:
  """Nothing filled in; every factor falls through to its default."""
  return FounderInput()


@pytest.fixture
def perfect_berkus() -> BerkusInput:
  """Every Berkus factor at 100."""
  return BerkusInput(
      sound_idea=100,
      prototype=100,
      quality_team=100,
      strategic_relations=100,
      product_rollout=100,
  )
