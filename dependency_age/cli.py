"""
Command-line interface for the dependency age tool.
"""

import argparse
import logging
import sys
from pathlib import Path

from .analyzer import DependencyAgeAnalyzer, ON_MISSING_POLICIES
from .maven import MavenDependencyLister
from .registry import DEFAULT_SEARCH_URL, MavenCentralClient
from .reporting import (
    export_dependency_csv,
    format_average,
    format_dependency_table,
    print_summary,
    save_results_json,
)


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute the average age in days of a Maven build's dependencies"
    )

    parser.add_argument(
        "--project-dir",
        default=".",
        help="Directory of the Maven project. Default: current directory"
    )

    parser.add_argument(
        "--mvn",
        default="mvn",
        help="Maven executable. Default: mvn"
    )

    parser.add_argument(
        "--search-url",
        default=DEFAULT_SEARCH_URL,
        help=f"Registry search endpoint. Default: {DEFAULT_SEARCH_URL}"
    )

    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Timeout in seconds for each registry request. Default: none"
    )

    parser.add_argument(
        "--on-missing",
        choices=ON_MISSING_POLICIES,
        default="skip",
        help="Skip dependencies unknown to the registry, or abort the run. Default: skip"
    )

    parser.add_argument(
        "--list",
        action="store_true",
        help="Print a table of every dated dependency before the average"
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Also write JSON and CSV results to this directory"
    )

    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable the lookup progress bar"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    return parser


def main(argv=None):
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    project_dir = Path(args.project_dir)
    analyzer = DependencyAgeAnalyzer(
        project_dir=project_dir,
        lister=MavenDependencyLister(project_dir, mvn_executable=args.mvn),
        registry=MavenCentralClient(search_url=args.search_url, timeout=args.timeout),
        on_missing=args.on_missing,
        show_progress=not args.no_progress,
    )

    try:
        results = analyzer.analyze()
        print_summary(results)

        if args.list:
            print(format_dependency_table(results['dependency_data']))

        if args.output_dir:
            output_dir = Path(args.output_dir)
            results_file = save_results_json(results, output_dir)
            logger.info("Results saved to: %s", results_file)
            deps_file = export_dependency_csv(results, output_dir)
            if deps_file:
                logger.info("Dependencies saved to: %s", deps_file)

        if results['average_age_days'] is not None:
            print(format_average(results['average_age_days']))

    except Exception as e:
        print(f"\nError during analysis: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
