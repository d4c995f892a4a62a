"""
Command-line entry point: plan collection rounds for every postal code.
"""
import logging
import time

import yaml

from bureaux_rounds.clustering import ClusteringSettings, build_groups, cluster_all_groups
from bureaux_rounds.utils.cli import parse_args, load_parameters, print_parameter_help
from bureaux_rounds.utils.data_processing import load_station_records
from bureaux_rounds.utils.logging import setup_logging, ProgressTracker, Colors
from bureaux_rounds.utils.save_results import (
    build_summary,
    cluster_size_statistics,
    save_clustering_results,
)

logger = logging.getLogger(__name__)


def main():
    """Run the round planning pipeline."""
    parser = parse_args()
    args = parser.parse_args()

    if args.help_params:
        print_parameter_help()

    setup_logging(verbose=args.verbose)

    try:
        params = load_parameters(args)
    except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
        parser.error(str(e))

    steps = [
        'Load Stations',
        'Group by Postal Code',
        'Build Rounds',
        'Save Results'
    ]
    start_time = time.time()

    with ProgressTracker(steps) as progress:
        # Step 1: Load station records
        try:
            records = load_station_records(params.input_file)
        except (OSError, ValueError) as e:  # JSONDecodeError is a ValueError
            parser.error(str(e))
        progress.advance(f"Loaded {Colors.BOLD}{len(records)}{Colors.RESET} station records")

        # Step 2: Group by postal code
        groups = build_groups(records, unknown_postal_code=params.unknown_postal_code)
        stations = sum(len(points) for points in groups.values())
        progress.advance(
            f"Grouped {Colors.BOLD}{stations}{Colors.RESET} stations into "
            f"{Colors.BOLD}{len(groups)}{Colors.RESET} postal codes"
        )

        # Step 3: Build rounds
        settings = ClusteringSettings.from_parameters(params)
        clusters_by_cp = cluster_all_groups(groups, settings)
        rounds = sum(len(clusters) for clusters in clusters_by_cp.values())
        progress.advance(f"Built {Colors.BOLD}{rounds}{Colors.RESET} rounds")

        # Step 4: Save results
        try:
            paths = save_clustering_results(clusters_by_cp, params)
        except OSError as e:
            parser.error(f"Could not write results to {params.output_dir}: {e}")
        progress.advance(f"Results saved {Colors.GRAY}(execution time: {time.time() - start_time:.1f}s){Colors.RESET}")
        progress.close()

    print(f"Clusters: {paths['clusters']}")
    print(f"Routes: {paths['routes']}")
    print(f"Summary: {paths['summary']}")

    summary = build_summary(clusters_by_cp)
    if params.summary_preview > 0 and not summary.empty:
        print(f"\n=== Summary (first {params.summary_preview}) ===")
        print(summary.head(params.summary_preview).to_string(index=False))

    if rounds:
        stats = cluster_size_statistics(clusters_by_cp)
        print("\n=== Round Statistics ===")
        print("Stations per Round:")
        print(f"  Min: {stats['Min']:.0f}")
        print(f"  Max: {stats['Max']:.0f}")
        print(f"  Avg: {stats['Avg']:.1f}")
        print(f"  Median: {stats['Median']:.1f}")


if __name__ == "__main__":
    main()
