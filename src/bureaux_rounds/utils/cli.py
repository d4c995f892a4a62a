from argparse import ArgumentParser, RawTextHelpFormatter
from typing import Dict, Any
import sys

from bureaux_rounds.config.parameters import Parameters
from bureaux_rounds.utils.logging import Colors

# CLI flags stored under the nested 'clustering' section of the parameters
CLUSTERING_KEYS = ('min_cluster_size', 'max_cluster_size', 'max_distance')

def print_parameter_help():
    """Display detailed help information about parameters"""
    help_text = f"""
{Colors.BOLD}Voting Station Round Planning Parameters{Colors.RESET}
{Colors.CYAN}════════════════════════════════════════{Colors.RESET}

{Colors.YELLOW}Round Constraints:{Colors.RESET}
  --min-cluster-size INT   Smallest acceptable round; stations of smaller
                           rounds join the round that stays tightest
                           Default: 2
                           Example: --min-cluster-size 3

  --max-cluster-size INT   Largest round built around a seed station
                           Default: 6
                           Example: --max-cluster-size 5

  --max-distance FLOAT     Maximum distance in meters between the two
                           farthest stations of a round
                           Default: 1000
                           Example: --max-distance 800

{Colors.YELLOW}Input/Output:{Colors.RESET}
  --input-file PATH        JSON export of the voting stations
                           Default: Defined in config file
                           Example: --input-file data/bureaux_votes_2026.json

  --output-dir PATH        Directory for clusters_by_cp.json, trajets_by_cp.txt
                           and summary_by_cp.csv
                           Default: Defined in config file
                           Example: --output-dir outputs

  --config PATH            Path to custom config file
                           Default: src/bureaux_rounds/config/default_config.yaml
                           Example: --config my_config.yaml

{Colors.YELLOW}Other Options:{Colors.RESET}
  --verbose               Enable verbose output
                           Default: False
                           Example: --verbose

{Colors.CYAN}Examples:{Colors.RESET}
  # Use custom config file
  bureaux-rounds --config my_config.yaml

  # Tighter rounds
  bureaux-rounds --max-distance 600 --max-cluster-size 4

  # Different input file with verbose output
  bureaux-rounds --input-file data/bureaux_votes_2027.json --verbose
"""
    print(help_text)
    sys.exit(0)

def parse_args() -> ArgumentParser:
    """Parse command line arguments for parameter overrides"""
    parser = ArgumentParser(
        prog='bureaux-rounds',
        description='Voting Station Round Planning',
        formatter_class=RawTextHelpFormatter
    )

    parser.add_argument(
        '--help-params',
        action='store_true',
        help='Show detailed parameter information and exit'
    )

    parser.add_argument('--config', type=str, help='Path to custom config file')
    parser.add_argument('--input-file', type=str, help='JSON file with the voting stations')
    parser.add_argument('--output-dir', type=str, help='Directory for the output files')
    parser.add_argument('--min-cluster-size', type=int, help='Minimum number of stations per round')
    parser.add_argument('--max-cluster-size', type=int, help='Maximum number of stations per seeded round')
    parser.add_argument('--max-distance', type=float, help='Maximum distance in meters within a round')
    parser.add_argument('--verbose', action='store_true', help='Enable verbose output')

    return parser

def get_parameter_overrides(args) -> Dict[str, Any]:
    """Extract parameter overrides from command line arguments"""
    # Convert args to dictionary, excluding None values
    overrides = {k: v for k, v in vars(args).items() if v is not None}

    # Remove non-parameter arguments
    for key in ['config', 'verbose', 'help_params']:
        overrides.pop(key, None)

    # Convert dashed args to underscores
    overrides = {k.replace('-', '_'): v for k, v in overrides.items()}

    return overrides

def load_parameters(args) -> Parameters:
    """Load parameters with optional command line overrides"""
    if args.config:
        params = Parameters.from_yaml(args.config)
    else:
        params = Parameters.from_yaml()

    overrides = get_parameter_overrides(args)

    # Handle nested parameters
    clustering = dict(params.clustering)
    for key in CLUSTERING_KEYS:
        if key in overrides:
            clustering[key] = overrides.pop(key)

    # Create new Parameters instance so overrides are validated
    data = params.__dict__.copy()
    data.update(overrides)
    data['clustering'] = clustering
    return Parameters(**data)
