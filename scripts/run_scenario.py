"""Run an announce scenario from a YAML file.

Usage:
  python3 scripts/run_scenario.py --scenario scenarios/barnyard.yaml

Without --scenario the canonical scenario runs, which prints the same line as
`python -m menagerie`.
"""
from pathlib import Path
import argparse
import logging

import yaml

from menagerie.scenario import CANONICAL, Scenario


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run an announce scenario")
    parser.add_argument("--scenario", "-s", default=None,
                        help="path to scenario YAML (default: the canonical scenario)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="log construction and dispatch to stderr")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.scenario is None:
        scenario = CANONICAL
    else:
        path = Path(args.scenario)
        if not path.is_file():
            print(f"Error: scenario file not found: {path}")
            raise SystemExit(2)
        try:
            scenario = Scenario.from_yaml(path)
        except (ValueError, yaml.YAMLError) as e:
            print(f"Error loading scenario from {path}: {e}")
            raise SystemExit(2)

    scenario.run()


if __name__ == "__main__":
    main()
