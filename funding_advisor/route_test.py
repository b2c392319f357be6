import pytest

from funding_advisor.config import EngineConfig
from funding_advisor.domain.types import RouteScores
from funding_advisor.route import compute_route
from funding_advisor.route import compute_scores
from funding_advisor.route import recommend
from funding_advisor.route import route_confidence

FOUNDERS = ['saas_founder', 'lifestyle_founder', 'venture_founder',
            'empty_founder']


class TestComputeScores:
  """Weighted, normalized route scores."""

  @pytest.mark.parametrize('founder,expected', [
      ('saas_founder', (57, 55, 56)),
      ('lifestyle_founder', (83, 36, 60)),
      ('venture_founder', (32, 79, 56)),
      ('empty_founder', (59, 56, 58)),
  ])
  def test_scores(self, request, founder, expected):
    scores, _ = compute_scores(request.getfixturevalue(founder))
    assert (scores.bootstrap, scores.investor, scores.hybrid) == expected

  def test_one_reason_per_factor(self, saas_founder):
    _, reasons = compute_scores(saas_founder)
    assert len(reasons) == 8
    assert reasons[0].factor == 'Market type'
    assert reasons[0].impact == 'negative'
    assert reasons[0].score == -15


class TestRecommend:

  @pytest.mark.parametrize('bootstrap,investor,expected', [
      (57, 55, 'hybrid'),
      (64, 50, 'hybrid'),
      (65, 50, 'bootstrap'),
      (50, 65, 'investor'),
      (50, 50, 'hybrid'),
  ])
  def test_threshold(self, bootstrap, investor, expected):
    scores = RouteScores(bootstrap=bootstrap, investor=investor, hybrid=0)
    assert recommend(scores, 15) == expected


class TestRouteConfidence:

  def test_lower_bound(self, empty_founder):
    config = EngineConfig(route_confidence_base=0)
    scores = RouteScores(bootstrap=50, investor=50, hybrid=50)
    assert route_confidence(scores, empty_founder, config) == 20

  def test_upper_bound(self, lifestyle_founder):
    scores = RouteScores(bootstrap=100, investor=0, hybrid=50)
    assert route_confidence(scores, lifestyle_founder,
                            EngineConfig.default()) == 95


class TestComputeRoute:
  """Tests for compute_route."""

  def test_undecided_saas_founder(self, saas_founder):
    """Gap of 2 -> hybrid; confidence (60 + 1) * 0.75 = 45.75 -> 46."""
    result = compute_route(saas_founder)

    assert result.recommendation == 'hybrid'
    assert result.scores == RouteScores(bootstrap=57, investor=55, hybrid=56)
    assert result.confidence == 46
    assert result.warnings == ()
    assert result.action_plan.route == 'hybrid'
    assert result.alternative_considerations[0] == (
        'Start bootstrapped, validate, then raise strategically')

  def test_ranked_reasons(self, saas_founder):
    result = compute_route(saas_founder)

    assert [r.factor for r in result.reasons] == [
        'Team situation',
        'Market type',
        'Financial runway',
        'Development stage',
        'Exit goal',
        'Control preference',
    ]
    assert [r.score for r in result.reasons] == [30, -15, -15, 5, 5, 5]

  def test_lifestyle_founder_bootstraps(self, lifestyle_founder):
    """Gap 47 at full tier: 60 + 23.5 = 83.5 -> 84."""
    result = compute_route(lifestyle_founder)

    assert result.recommendation == 'bootstrap'
    assert result.confidence == 84
    assert result.action_plan.route == 'bootstrap'
    assert result.reasons[0].factor == 'Exit goal'
    assert result.reasons[0].impact == 'positive'

  def test_venture_founder_raises(self, venture_founder):
    """Gap 47 at detailed tier: 83.5 * 0.9 = 75.15 -> 75."""
    result = compute_route(venture_founder)

    assert result.recommendation == 'investor'
    assert result.confidence == 75
    assert result.warnings == (
        'With less than 6 months of runway you should act quickly',)

  def test_empty_input(self, empty_founder):
    """Gap 3 at minimal tier: 61.5 * 0.6 = 36.9 -> 37."""
    result = compute_route(empty_founder)

    assert result.recommendation == 'hybrid'
    assert result.confidence == 37
    assert result.action_plan.risk_factors == ()

  @pytest.mark.parametrize('founder', FOUNDERS)
  def test_invariants(self, request, founder):
    data = request.getfixturevalue(founder)
    result = compute_route(data)
    scores = result.scores

    for value in (scores.bootstrap, scores.investor, scores.hybrid):
      assert 0 <= value <= 100
    assert 20 <= result.confidence <= 95
    assert len(result.reasons) <= 6
    gap = abs(scores.bootstrap - scores.investor)
    assert (result.recommendation == 'hybrid') == (gap < 15)
    magnitudes = [abs(r.score) for r in result.reasons]
    assert magnitudes == sorted(magnitudes, reverse=True)

  @pytest.mark.parametrize('founder', FOUNDERS)
  def test_deterministic_and_pure(self, request, founder):
    data = request.getfixturevalue(founder)
    before = data.to_dict()

    assert compute_route(data) == compute_route(data)
    assert data.to_dict() == before

  def test_custom_threshold(self, saas_founder):
    result = compute_route(saas_founder, EngineConfig(hybrid_threshold=1))
    assert result.recommendation == 'bootstrap'

  def test_max_reasons(self, saas_founder):
    result = compute_route(saas_founder, EngineConfig(max_reasons=2))
    assert len(result.reasons) == 2

  def test_serializable(self, saas_founder):
    plain = compute_route(saas_founder).to_dict()
    assert plain['recommendation'] == 'hybrid'
    assert plain['action_plan']['total_budget'] == {
        'min': 3000,
        'max': 8000,
        'currency': 'EUR',
    }
