"""
Valuation method registry.

Maps method ids (JSON friendly) to their input type and calculator, so
callers can dispatch on a string stored alongside the input.

To add a new method:
1. Implement the calculator in its own module under engine/
2. Add its input record to domain/types.py
3. Register it in VALUATION_METHODS and METHOD_INFO below
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Type, Union

from funding_advisor.config import EngineConfig
from funding_advisor.domain.types import BerkusInput
from funding_advisor.domain.types import ComparablesInput
from funding_advisor.domain.types import DCFInput
from funding_advisor.domain.types import Record
from funding_advisor.domain.types import ScorecardInput
from funding_advisor.domain.types import ValuationMethodResult
from funding_advisor.domain.types import VCMethodInput
from funding_advisor.engine.berkus import calculate_berkus
from funding_advisor.engine.comparables import calculate_comparables
from funding_advisor.engine.dcf import calculate_dcf
from funding_advisor.engine.scorecard import calculate_scorecard
from funding_advisor.engine.vc_method import calculate_vc_method

Calculator = Callable[[Any, EngineConfig], ValuationMethodResult]


@dataclass(frozen=True)
class MethodSpec:
  '''
  Registry entry.

  Attributes:
    input_type: Record type the calculator expects
    calculate: Calculator taking (input, config)
  '''
  input_type: Type[Record]
  calculate: Calculator


VALUATION_METHODS: Dict[str, MethodSpec] = {
    'berkus': MethodSpec(BerkusInput, calculate_berkus),
    'scorecard': MethodSpec(ScorecardInput, calculate_scorecard),
    'vc_method': MethodSpec(VCMethodInput,
                            lambda data, _: calculate_vc_method(data)),
    'dcf': MethodSpec(DCFInput, lambda data, _: calculate_dcf(data)),
    'comparables': MethodSpec(ComparablesInput,
                              lambda data, _: calculate_comparables(data)),
}

METHOD_INFO: Dict[str, Dict[str, Any]] = {
    'berkus': {
        'name': 'Berkus Method',
        'description': 'Pre-revenue valuation from five risk factors',
        'applicable_stages': ('idea', 'mvp'),
    },
    'scorecard': {
        'name': 'Scorecard Method',
        'description': 'Comparison with the average pre-seed valuation',
        'applicable_stages': ('idea', 'mvp', 'beta'),
    },
    'vc_method': {
        'name': 'VC Method',
        'description': 'Backwards calculation from the expected exit value',
        'applicable_stages': ('mvp', 'beta', 'live', 'scaling'),
    },
    'comparables': {
        'name': 'Comparable Transactions',
        'description': 'Based on similar deals in your industry',
        'applicable_stages': ('beta', 'live', 'scaling'),
    },
    'dcf': {
        'name': 'DCF (Discounted Cash Flow)',
        'description': 'Future cash flows discounted to today',
        'applicable_stages': ('live', 'scaling'),
    },
}


def compute_valuation(
    method: str,
    method_input: Union[Record, Mapping[str, Any]],
    config: Optional[EngineConfig] = None,
) -> ValuationMethodResult:
  """
  Run one valuation method.

  Args:
    method: Method id (berkus, scorecard, vc_method, dcf, comparables)
    method_input: The method's input record, or a dict of the same shape;
      missing fields take the record defaults and degrade to a zero value
    config: Engine configuration (default: EngineConfig.default())

  Returns:
    ValuationMethodResult

  Raises:
    KeyError: If the method id is not registered
    TypeError: If method_input is a record of another method's type
  """
  try:
    spec = VALUATION_METHODS[method]
  except KeyError as e:
    raise KeyError(f"Unknown valuation method: '{method}'. "
                   f'Available: {list(VALUATION_METHODS.keys())}') from e

  if isinstance(method_input, Mapping):
    data = spec.input_type.from_dict(method_input)
  elif isinstance(method_input, spec.input_type):
    data = method_input
  else:
    raise TypeError(f'{method} expects {spec.input_type.__name__}, '
                    f'got {type(method_input).__name__}')

  return spec.calculate(data, config or EngineConfig.default())


def applicable_methods(stage: Optional[str]) -> List[str]:
  """
  Methods that suit a development stage.

  An unknown or missing stage returns every method.
  """
  matching = [
      name for name, info in METHOD_INFO.items()
      if stage in info['applicable_stages']
  ]
  return matching or list(METHOD_INFO)


def list_methods() -> List[Tuple[str, str]]:
  """List (method id, display name) pairs in registry order."""
  return [(name, METHOD_INFO[name]['name']) for name in VALUATION_METHODS]
