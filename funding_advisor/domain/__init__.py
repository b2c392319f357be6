"""Domain types for the funding advisor."""

from funding_advisor.domain.types import ActionPhase
from funding_advisor.domain.types import ActionPlan
from funding_advisor.domain.types import ActionTask
from funding_advisor.domain.types import BerkusInput
from funding_advisor.domain.types import BudgetRange
from funding_advisor.domain.types import ComparableCompany
from funding_advisor.domain.types import ComparablesInput
from funding_advisor.domain.types import ConfidenceExplanation
from funding_advisor.domain.types import ConfidenceFactors
from funding_advisor.domain.types import DataSharingTier
from funding_advisor.domain.types import DCFInput
from funding_advisor.domain.types import FactorScore
from funding_advisor.domain.types import FounderInput
from funding_advisor.domain.types import Goals
from funding_advisor.domain.types import MarketAnalysis
from funding_advisor.domain.types import PersonalSituation
from funding_advisor.domain.types import ProjectBasics
from funding_advisor.domain.types import RouteReason
from funding_advisor.domain.types import RouteResult
from funding_advisor.domain.types import RouteScores
from funding_advisor.domain.types import ScorecardFactor
from funding_advisor.domain.types import ScorecardInput
from funding_advisor.domain.types import ValuationMethodResult
from funding_advisor.domain.types import VCMethodInput

__all__ = [
    'ActionPhase',
    'ActionPlan',
    'ActionTask',
    'BerkusInput',
    'BudgetRange',
    'ComparableCompany',
    'ComparablesInput',
    'ConfidenceExplanation',
    'ConfidenceFactors',
    'DataSharingTier',
    'DCFInput',
    'FactorScore',
    'FounderInput',
    'Goals',
    'MarketAnalysis',
    'PersonalSituation',
    'ProjectBasics',
    'RouteReason',
    'RouteResult',
    'RouteScores',
    'ScorecardFactor',
    'ScorecardInput',
    'ValuationMethodResult',
    'VCMethodInput',
]
