import pytest

from funding_advisor.config import EngineConfig
from funding_advisor.domain.types import FounderInput
from funding_advisor.plan import commitment_multiplier
from funding_advisor.plan import generate_action_plan
from funding_advisor.plan import scale_duration


def _with_commitment(commitment) -> FounderInput:
  return FounderInput.from_dict(
      {'personal_situation': {
          'commitment': commitment
      }})


class TestScaleDuration:

  @pytest.mark.parametrize('duration,multiplier,expected', [
      ('Month 2-4', 1.5, 'Month 3-6'),
      ('Month 1-2', 1.5, 'Month 2-3'),
      ('Month 1-3', 1.5, 'Month 2-5'),
      ('Month 4-6', 2.0, 'Month 8-12'),
      ('Month 4-6', 1.0, 'Month 4-6'),
      ('Ongoing', 2.0, 'Ongoing'),
  ])
  def test_scaling(self, duration, multiplier, expected):
    assert scale_duration(duration, multiplier) == expected

  def test_only_first_range_is_scaled(self):
    assert scale_duration('Month 1-2, then 3-4', 2.0) == (
        'Month 2-4, then 3-4')


class TestCommitmentMultiplier:

  @pytest.mark.parametrize('commitment,expected', [
      ('fulltime', 1.0),
      ('parttime', 1.5),
      ('side_project', 2.0),
      (None, 1.0),
      ('weekends', 1.0),
  ])
  def test_values(self, commitment, expected):
    assert commitment_multiplier(commitment) == expected


class TestGenerateActionPlan:
  """Tests for generate_action_plan."""

  @pytest.mark.parametrize('route,budget,phases', [
      ('bootstrap', (1000, 3500), 3),
      ('investor', (6500, 20000), 3),
      ('hybrid', (3000, 8000), 2),
  ])
  def test_budget_is_sum_of_phases(self, empty_founder, route, budget,
                                   phases):
    plan = generate_action_plan(empty_founder, route)

    assert plan.route == route
    assert len(plan.phases) == phases
    assert (plan.total_budget.min, plan.total_budget.max) == budget
    assert plan.total_budget.min == sum(p.budget.min for p in plan.phases)
    assert plan.total_budget.max == sum(p.budget.max for p in plan.phases)
    assert plan.total_budget.currency == 'EUR'

  def test_fulltime_keeps_template(self):
    plan = generate_action_plan(_with_commitment('fulltime'), 'bootstrap')

    assert [p.duration for p in plan.phases] == [
        'Month 1-2', 'Month 2-4', 'Month 4-6'
    ]
    assert (plan.phases[0].time_per_week.min,
            plan.phases[0].time_per_week.max) == (15, 25)
    assert plan.total_duration == '6 months'

  def test_part_time_stretches_plan(self):
    plan = generate_action_plan(_with_commitment('parttime'), 'bootstrap')

    assert [p.duration for p in plan.phases] == [
        'Month 2-3', 'Month 3-6', 'Month 6-9'
    ]
    # 15-25 and 25-40 hours at 60% availability
    assert (plan.phases[0].time_per_week.min,
            plan.phases[0].time_per_week.max) == (9, 15)
    assert (plan.phases[1].time_per_week.min,
            plan.phases[1].time_per_week.max) == (15, 24)
    assert plan.total_duration == '9 months'

  def test_side_project_doubles_duration(self):
    plan = generate_action_plan(_with_commitment('side_project'), 'investor')

    assert plan.phases[2].duration == 'Month 8-12'
    assert plan.total_duration == '12 months'

  def test_scaling_does_not_change_budget(self):
    fulltime = generate_action_plan(_with_commitment('fulltime'), 'hybrid')
    side = generate_action_plan(_with_commitment('side_project'), 'hybrid')
    assert fulltime.total_budget == side.total_budget

  def test_critical_path(self, empty_founder):
    plan = generate_action_plan(empty_founder, 'bootstrap')

    assert plan.critical_path == (
        'Run problem interviews',
        'Build the MVP',
        'Define pricing',
        'Integrate payments',
        'Win the first paying customers',
    )

  def test_hybrid_critical_path(self, empty_founder):
    plan = generate_action_plan(empty_founder, 'hybrid')

    assert plan.critical_path == (
        'Self-funded MVP',
        'Win the first customers',
        'Identify smart money',
        'Keep bootstrapping in parallel',
    )

  def test_risks_and_metrics(self, saas_founder):
    plan = generate_action_plan(saas_founder, 'investor')

    assert plan.risk_factors == (
        'As a solo founder: burnout risk and skill bottlenecks',
        'Limited runway: time pressure on decisions',
        'The fundraising market can deteriorate',
        'Dilution across multiple rounds',
    )
    assert plan.success_metrics[0] == 'Funding milestones'

  def test_custom_availability(self):
    config = EngineConfig(part_time_availability=0.5)
    plan = generate_action_plan(_with_commitment('parttime'), 'bootstrap',
                                config)
    assert (plan.phases[0].time_per_week.min,
            plan.phases[0].time_per_week.max) == (8, 13)

  def test_unknown_route(self, empty_founder):
    with pytest.raises(ValueError, match='Unknown route'):
      generate_action_plan(empty_founder, 'crowdfunding')
