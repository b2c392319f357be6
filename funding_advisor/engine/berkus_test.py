import pytest

from funding_advisor.config import EngineConfig
from funding_advisor.domain.types import BerkusInput
from funding_advisor.engine.berkus import calculate_berkus
from funding_advisor.engine.berkus import suggest_berkus_improvements


class TestCalculateBerkus:
  """Tests for calculate_berkus."""

  def test_perfect_scores(self, perfect_berkus):
    """5 factors x 500,000 cap, zero variance -> confidence 70."""
    result = calculate_berkus(perfect_berkus)

    assert result.method == 'berkus'
    assert result.value == 2_500_000
    assert result.confidence == 70
    assert result.breakdown['sound_idea'] == pytest.approx(500_000)
    assert any('upper pre-revenue range' in n for n in result.notes)

  def test_all_zero(self):
    result = calculate_berkus(BerkusInput())

    assert result.value == 0
    assert result.confidence == 70
    assert 'The idea should be validated further' in result.notes
    assert any('purely potential-based' in n for n in result.notes)

  def test_mixed_profile(self):
    """Scores 80/60/40/20/0.

    Contributions: 400k + 300k + 200k + 100k + 0 = 1,000,000
    Variance: 800 -> confidence 70 - 8 = 62
    """
    result = calculate_berkus(
        BerkusInput(
            sound_idea=80,
            prototype=60,
            quality_team=40,
            strategic_relations=20,
            product_rollout=0,
        ))

    assert result.value == 1_000_000
    assert result.confidence == 62
    assert result.inputs['cap_per_factor'] == 500_000
    assert len(result.notes) == 1

  def test_strong_product_weak_team_note(self):
    result = calculate_berkus(
        BerkusInput(sound_idea=70,
                    prototype=90,
                    quality_team=30,
                    strategic_relations=50,
                    product_rollout=50))
    assert any('stronger team' in n for n in result.notes)

  def test_out_of_range_scores_are_clamped(self):
    result = calculate_berkus(
        BerkusInput(sound_idea=150,
                    prototype=-20,
                    quality_team=100,
                    strategic_relations=100,
                    product_rollout=100))

    assert result.inputs['sound_idea'] == 100
    assert result.inputs['prototype'] == 0
    assert result.value == 2_000_000
    assert any('sound_idea, prototype' in n for n in result.notes)

  def test_confidence_within_bounds(self):
    """Maximally uneven profile still stays within [40, 90]."""
    result = calculate_berkus(
        BerkusInput(sound_idea=100,
                    prototype=0,
                    quality_team=100,
                    strategic_relations=0,
                    product_rollout=100))
    # mean 60, variance 2400 -> 70 - 24 = 46
    assert result.confidence == 46

  def test_config_cap(self, perfect_berkus):
    config = EngineConfig(berkus_cap_per_factor=100_000)
    assert calculate_berkus(perfect_berkus, config).value == 500_000


class TestSuggestBerkusImprovements:

  def test_two_weakest_factors(self):
    suggestions = suggest_berkus_improvements(
        BerkusInput(sound_idea=80,
                    prototype=60,
                    quality_team=40,
                    strategic_relations=20,
                    product_rollout=0))

    assert suggestions == [
        'Improving Product rollout could add up to EUR 375,000',
        'Improving Strategic relationships could add up to EUR 275,000',
    ]

  def test_nothing_below_threshold(self, perfect_berkus):
    assert suggest_berkus_improvements(perfect_berkus) == []
