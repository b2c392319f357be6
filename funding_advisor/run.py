'''
Founder analysis entrypoint.

This module runs the full analysis for one founder:
1. Computes the funding route recommendation (with its action plan)
2. Runs any valuation methods the founder provided input for
3. Aggregates the overall confidence and the valuation range
4. Returns everything as one plain dict, ready to be stored

Input file format (JSON):
  {
    "founder": {"tier": "basic", "project_basics": {...}, ...},
    "valuations": {"berkus": {...}, "dcf": {...}}
  }

A single valuation method can also be run on its own, with the method
input as the whole JSON document.

Usage:
  python -m funding_advisor.run --input founder.json --output result.json
  python -m funding_advisor.run --valuation dcf --valuation-input dcf.json
'''

import argparse
import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, Optional

from funding_advisor.analysis.comparison import aggregate_valuation
from funding_advisor.config import EngineConfig
from funding_advisor.confidence import compute_confidence
from funding_advisor.domain.types import FounderInput
from funding_advisor.engine.registry import compute_valuation
from funding_advisor.route import compute_route

logger = logging.getLogger(__name__)


def load_json(path: Path) -> Dict[str, Any]:
  '''Load a JSON document from disk.'''
  if not path.exists():
    raise FileNotFoundError(f'Input file not found: {path}')
  with path.open(encoding='utf-8') as f:
    return json.load(f)


def run_analysis(
    founder: FounderInput,
    valuation_inputs: Optional[Mapping[str, Any]] = None,
    config: Optional[EngineConfig] = None,
) -> Dict[str, Any]:
  '''
  Run route, valuation and confidence for one founder.

  Args:
    founder: Founder input
    valuation_inputs: Method id -> method input (record or dict)
    config: Engine configuration (default: EngineConfig.default())

  Returns:
    Dictionary with keys route, valuations, valuation_range and
    confidence, all plain data

  Raises:
    KeyError: If a valuation method id is unknown
  '''
  config = config or EngineConfig.default()
  valuation_inputs = valuation_inputs or {}

  route = compute_route(founder, config)
  valuations = [
      compute_valuation(method, method_input, config)
      for method, method_input in valuation_inputs.items()
  ]
  confidence = compute_confidence(founder.tier, founder, valuations or None)
  low, mid, high = aggregate_valuation(valuations)

  return {
      'route': route.to_dict(),
      'valuations': [v.to_dict() for v in valuations],
      'valuation_range': {
          'low': low,
          'mid': mid,
          'high': high,
      },
      'confidence': confidence.to_dict(),
  }


def _log_valuation(valuation: Dict[str, Any]) -> None:
  logger.info('  %-12s EUR %14s  (confidence %d)', valuation['method'],
              f"{valuation['value']:,.0f}", valuation['confidence'])
  for note in valuation['notes']:
    logger.info('      %s', note)


def _log_summary(result: Dict[str, Any]) -> None:
  route = result['route']
  separator = '=' * 70
  logger.info('\n%s', separator)
  logger.info('Funding Route: %s (confidence %d)', route['recommendation'],
              route['confidence'])
  logger.info('  Bootstrap: %d  Investor: %d  Hybrid: %d',
              route['scores']['bootstrap'], route['scores']['investor'],
              route['scores']['hybrid'])
  logger.info(separator)

  logger.info('\nTop Reasons:')
  for reason in route['reasons']:
    logger.info('  [%s] %s: %s', reason['impact'], reason['factor'],
                reason['explanation'])

  if route['warnings']:
    logger.info('\nWarnings:')
    for warning in route['warnings']:
      logger.info('  - %s', warning)

  plan = route['action_plan']
  logger.info('\nAction Plan (%s, EUR %s-%s):', plan['total_duration'],
              f"{plan['total_budget']['min']:,}",
              f"{plan['total_budget']['max']:,}")
  for phase in plan['phases']:
    logger.info('  %s (%s)', phase['title'], phase['duration'])

  if result['valuations']:
    logger.info('\nValuations:')
    for valuation in result['valuations']:
      _log_valuation(valuation)
    rng = result['valuation_range']
    logger.info('  Range: EUR %s / %s / %s', f"{rng['low']:,}",
                f"{rng['mid']:,}", f"{rng['high']:,}")

  confidence = result['confidence']
  logger.info('\nOverall Confidence: %d (%s)', confidence['confidence'],
              confidence['level'])
  for explanation in confidence['explanations']:
    logger.info('  - %s', explanation)
  logger.info('%s\n', separator)


def main() -> None:
  '''CLI entrypoint.'''
  parser = argparse.ArgumentParser(description='Run founder analysis')
  parser.add_argument('--input',
                      type=Path,
                      default=None,
                      help='Founder input JSON file')
  parser.add_argument('--valuation',
                      type=str,
                      default=None,
                      help='Run a single valuation method (e.g. berkus, dcf)')
  parser.add_argument('--valuation-input',
                      type=Path,
                      default=None,
                      help='Method input JSON file for --valuation')
  parser.add_argument('--config',
                      type=Path,
                      default=None,
                      help='Optional EngineConfig JSON file')
  parser.add_argument('--output',
                      type=Path,
                      default=None,
                      help='Write the full result as JSON to this path')
  args = parser.parse_args()

  if args.input is None and args.valuation is None:
    parser.error('one of --input or --valuation is required')
  if args.valuation and args.valuation_input is None:
    parser.error('--valuation requires --valuation-input')

  config = (EngineConfig.from_dict(load_json(args.config))
            if args.config else EngineConfig.default())

  if args.valuation:
    valuation = compute_valuation(args.valuation,
                                  load_json(args.valuation_input), config)
    _log_valuation(valuation.to_dict())
    result = valuation.to_dict()
  else:
    payload = load_json(args.input)
    founder = FounderInput.from_dict(payload.get('founder', {}))
    result = run_analysis(founder, payload.get('valuations'), config)
    _log_summary(result)

  if args.output:
    args.output.parent.mkdir(parents=True, exist_ok=True)
    with args.output.open('w', encoding='utf-8') as f:
      json.dump(result, f, indent=2)
    logger.info('Result written to %s', args.output)


if __name__ == '__main__':
  logging.basicConfig(
      level=logging.INFO,
      format='%(message)s',
  )
  main()
