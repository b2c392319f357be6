import pytest

from funding_advisor.config import EngineConfig
from funding_advisor.domain.types import BerkusInput
from funding_advisor.domain.types import VCMethodInput
from funding_advisor.engine.registry import applicable_methods
from funding_advisor.engine.registry import compute_valuation
from funding_advisor.engine.registry import list_methods
from funding_advisor.engine.registry import METHOD_INFO
from funding_advisor.engine.registry import VALUATION_METHODS


class TestComputeValuation:
  """Tests for compute_valuation dispatch."""

  def test_record_input(self, perfect_berkus):
    result = compute_valuation('berkus', perfect_berkus)
    assert result.method == 'berkus'
    assert result.value == 2_500_000

  def test_dict_input(self):
    result = compute_valuation(
        'vc_method', {
            'expected_exit_value': 10_000_000,
            'years_to_exit': 5,
            'expected_return': 10,
            'investment_amount': 500_000,
        })
    assert result.value == 300_000

  def test_dict_input_nested(self):
    result = compute_valuation(
        'comparables', {
            'comparable_companies': [{
                'name': 'A',
                'valuation': 2_000_000,
                'metric': 100_000,
                'metric_type': 'revenue',
            }],
            'selected_metric': 'revenue',
            'your_metric': 10_000,
        })
    assert result.value == 200_000

  def test_empty_scorecard_dict_uses_defaults(self):
    assert compute_valuation('scorecard', {}).value == 750_000

  @pytest.mark.parametrize('method,partial', [
      ('berkus', {}),
      ('vc_method', {}),
      ('vc_method', {'expected_exit_value': 50_000_000}),
      ('dcf', {}),
      ('dcf', {'projected_cash_flows': [1, 2, 3]}),
      ('dcf', {'projected_cash_flows': None}),
      ('comparables', {}),
      ('comparables', {'comparable_companies': [], 'selected_metric': 'arr'}),
      ('comparables', {'comparable_companies': [{'name': 'A'}]}),
      ('comparables', {'comparable_companies': None}),
  ])
  def test_incomplete_dict_degrades(self, method, partial):
    """Missing fields give a zero value with an explanatory note."""
    result = compute_valuation(method, partial)

    assert result.method == method
    assert result.value == 0
    assert result.notes

  def test_incomplete_vc_input_uses_minimum_confidence(self):
    result = compute_valuation('vc_method', {'expected_exit_value': 50_000_000})
    assert result.confidence == 35

  def test_config_is_passed_through(self, perfect_berkus):
    config = EngineConfig(berkus_cap_per_factor=100_000)
    assert compute_valuation('berkus', perfect_berkus,
                             config).value == 500_000

  def test_unknown_method(self):
    with pytest.raises(KeyError, match='Unknown valuation method'):
      compute_valuation('cost_to_duplicate', {})

  def test_wrong_record_type(self):
    with pytest.raises(TypeError, match='berkus expects BerkusInput'):
      compute_valuation(
          'berkus',
          VCMethodInput(expected_exit_value=1,
                        years_to_exit=1,
                        expected_return=1,
                        investment_amount=1))

  def test_deterministic(self):
    data = BerkusInput(sound_idea=55, prototype=70)
    assert compute_valuation('berkus', data) == compute_valuation(
        'berkus', data)


class TestApplicableMethods:

  def test_idea_stage(self):
    assert applicable_methods('idea') == ['berkus', 'scorecard']

  def test_live_stage(self):
    assert applicable_methods('live') == ['vc_method', 'comparables', 'dcf']

  @pytest.mark.parametrize('stage', [None, 'unknown'])
  def test_unknown_stage_returns_all(self, stage):
    assert sorted(applicable_methods(stage)) == sorted(METHOD_INFO)


def test_registry_and_info_agree():
  assert set(VALUATION_METHODS) == set(METHOD_INFO)
  assert list_methods()[0] == ('berkus', 'Berkus Method')
