from funding_advisor.domain.types import ConfidenceFactors
from funding_advisor.domain.types import DataSharingTier
from funding_advisor.domain.types import FounderInput
from funding_advisor.policies.rules import ALTERNATIVES
from funding_advisor.policies.rules import confidence_explanations
from funding_advisor.policies.rules import evaluate_rules
from funding_advisor.policies.rules import RISK_RULES
from funding_advisor.policies.rules import Rule
from funding_advisor.policies.rules import SUCCESS_METRICS
from funding_advisor.policies.rules import WARNING_RULES


def _founder(**groups) -> FounderInput:
  return FounderInput.from_dict(groups)


class TestEvaluateRules:

  def test_table_order_is_kept(self):
    rules = (
        Rule(lambda x: x > 1, 'greater than one'),
        Rule(lambda x: x > 100, 'greater than hundred'),
        Rule(lambda x: x % 2 == 0, 'even'),
    )
    assert evaluate_rules(rules, 4) == ('greater than one', 'even')
    assert evaluate_rules(rules, 1) == ()


class TestWarningRules:
  """Route warnings."""

  def test_no_warnings_for_empty_input(self, empty_founder):
    assert evaluate_rules(WARNING_RULES, empty_founder) == ()

  def test_short_runway(self):
    warnings = evaluate_rules(WARNING_RULES,
                              _founder(personal_situation={'runway_months': 4}))
    assert warnings == (
        'With less than 6 months of runway you should act quickly',)

  def test_zero_runway_counts_as_short(self):
    warnings = evaluate_rules(WARNING_RULES,
                              _founder(personal_situation={'runway_months': 0}))
    assert len(warnings) == 1

  def test_solo_ipo(self):
    warnings = evaluate_rules(
        WARNING_RULES,
        _founder(personal_situation={'team_size': 'solo'},
                 goals={'exit_goal': 'ipo'}))
    assert warnings == (
        'Solo founder with IPO ambitions: VCs typically expect a team',)

  def test_control_with_hypergrowth(self):
    warnings = evaluate_rules(
        WARNING_RULES,
        _founder(goals={
            'control_importance': 9,
            'growth_speed': 'hypergrowth',
        }))
    assert warnings == ('Hypergrowth with maximum control is a contradiction',)

  def test_side_project_with_aggressive_growth(self):
    warnings = evaluate_rules(
        WARNING_RULES,
        _founder(personal_situation={'commitment': 'side_project'},
                 goals={'growth_speed': 'aggressive'}))
    assert warnings == (
        'Aggressive growth is hard to deliver as a side project',)

  def test_multiple_warnings_in_order(self):
    warnings = evaluate_rules(
        WARNING_RULES,
        _founder(personal_situation={
            'team_size': 'solo',
            'runway_months': 2,
            'commitment': 'side_project',
        },
                 goals={
                     'exit_goal': 'ipo',
                     'control_importance': 10,
                     'growth_speed': 'hypergrowth',
                 }))
    assert len(warnings) == 4
    assert warnings[0].startswith('With less than 6 months')


class TestRiskRules:

  def test_bootstrap_solo_short_runway(self, saas_founder):
    risks = evaluate_rules(RISK_RULES, saas_founder, 'bootstrap')
    assert risks == (
        'As a solo founder: burnout risk and skill bottlenecks',
        'Limited runway: time pressure on decisions',
        'Slower growth than VC-funded competitors',
        'Personal financial risk',
    )

  def test_missing_runway_defaults_to_twelve_months(self, empty_founder):
    assert evaluate_rules(RISK_RULES, empty_founder, 'hybrid') == ()

  def test_investor_route(self, empty_founder):
    assert evaluate_rules(RISK_RULES, empty_founder, 'investor') == (
        'The fundraising market can deteriorate',
        'Dilution across multiple rounds',
    )


class TestLookupTables:

  def test_every_route_is_covered(self):
    for route in ('bootstrap', 'investor', 'hybrid'):
      assert len(ALTERNATIVES[route]) == 3
      assert len(SUCCESS_METRICS[route]) == 4


class TestConfidenceExplanations:

  def test_tier_sentence_comes_first(self):
    factors = ConfidenceFactors(tier_factor=0.4,
                                data_completeness=0.2,
                                method_agreement=0.2,
                                market_data_quality=0.3)
    explanations = confidence_explanations(factors, DataSharingTier.MINIMAL)

    assert explanations == (
        'With minimal data we can only provide rough estimates',
        'Some important fields are not filled in yet',
        'Valuation methods show diverging results',
        'More market data would improve the analysis',
    )

  def test_positive_sentences(self):
    factors = ConfidenceFactors(tier_factor=0.9,
                                data_completeness=0.9,
                                method_agreement=0.8,
                                market_data_quality=0.9)
    explanations = confidence_explanations(factors, DataSharingTier.FULL)

    assert explanations == (
        'Complete data enables the deepest analysis',
        'The data is very complete - a good basis for analysis',
        'Valuation methods agree well',
    )
