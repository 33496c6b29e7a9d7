"""Command line interface for diffviz.

Runs one of the two demos and reports a summary of the generated data.
Configuration comes from the demo defaults, optionally a YAML file, and
finally overrides given on the command line as ``--key value`` pairs
(``--bridge.sigma_max 1.2`` style dotted keys are accepted too). For
example::

    python -m diffviz.cli.main --demo bridge --seed 0 \
        --model_type ddib --steps 100 --output out/bridge.pt

``--output`` stores :meth:`SimulationResult.to_dict` with ``torch.save``
so that a separate renderer can load it.
"""

from __future__ import annotations

import argparse
import logging
from typing import Any, Dict, List, Optional

from ..config import SimulationConfig, build_config, load_config
from ..simulation import SDESimulator, SimulationSession
from ..utils.io import save_result
from ..utils.logging import configure_logging
from ..utils.seed import set_seed

logger = logging.getLogger(__name__)


def parse_overrides(overrides: List[str]) -> Dict[str, Any]:
    """Parse ``--key value`` overrides from the CLI.

    Accepts a list like ``["--steps", "100", "--bridge.sigma_max", "1.2"]``
    and returns a dictionary mapping keys to values. Values are kept as
    strings; the configuration converts them.
    """
    result: Dict[str, Any] = {}
    it = iter(overrides)
    for key in it:
        if not key.startswith("--"):
            # Skip positional arguments
            continue
        k = key.lstrip("-")
        if "=" in k:
            k, v = k.split("=", 1)
        else:
            try:
                v = next(it)
            except StopIteration:
                raise ValueError(f"No value provided for override {key}")
        result[k] = v
    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="SDE and diffusion bridge simulations for visualisation")
    parser.add_argument("--demo", type=str, default=None, choices=["sde", "bridge"], help="Demo to run")
    parser.add_argument("--config", type=str, default=None, help="Path to a YAML config file")
    parser.add_argument("--seed", type=int, default=None, help="Random seed override")
    parser.add_argument("--output", type=str, default=None, help="Write the result to this file")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar while integrating")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def make_config(args: argparse.Namespace, overrides: Dict[str, Any]) -> SimulationConfig:
    if args.config is not None:
        config = load_config(args.config)
        if args.demo is not None and args.demo != config.demo:
            raise ValueError(f"--demo {args.demo} does not match config file demo {config.demo}")
    else:
        config = build_config(args.demo or "sde")
    if args.seed is not None:
        set_seed(args.seed)
        config.update("seed", args.seed)
    rejected = config.update_from_overrides(overrides)
    if rejected:
        logger.warning("Ignored unknown options: %s", ", ".join(rejected))
    return config


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    # Accept arbitrary overrides after the known args
    args, unknown = parser.parse_known_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)
    try:
        overrides = parse_overrides(unknown)
        config = make_config(args, overrides)
    except ValueError as exc:
        parser.error(str(exc))

    session = SimulationSession(config)
    if isinstance(session.simulator, SDESimulator):
        session.simulator.show_progress = args.progress
    result = session.regenerate()
    if result is None:
        logger.error("Simulation failed: %s", session.last_error)
        return 1

    logger.info(
        "%s demo (%s): %d paths x %d steps, density %s, max density %.4f",
        result.demo, result.process, result.num_paths, result.steps,
        tuple(result.density.shape), float(result.density.max()) if result.density.numel() else 0.0,
    )
    logger.info("start mean %.4f, end mean %.4f", result.start_mean, result.end_mean)
    if args.output is not None:
        path = save_result(args.output, result.to_dict())
        logger.info("Result saved to %s", path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
