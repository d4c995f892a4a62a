import json
import logging
from pathlib import Path
from typing import Dict, List, Mapping, Sequence

import pandas as pd

from bureaux_rounds.config.parameters import Parameters
from bureaux_rounds.core_types import Cluster

logger = logging.getLogger(__name__)

ROUTE_SEPARATOR = ' -> '


def clusters_to_dict(clusters_by_cp: Mapping[str, Sequence[Cluster]]) -> Dict[str, List[List[dict]]]:
    """Convert rounds to plain lists of station dictionaries, keyed by postal code."""
    return {
        cp: [cluster.to_list() for cluster in clusters]
        for cp, clusters in clusters_by_cp.items()
    }


def format_routes(clusters_by_cp: Mapping[str, Sequence[Cluster]]) -> str:
    """
    Render the rounds as text, one block per postal code.

    Rounds with a single station are left out; the other rounds keep their
    1-based position in the postal code's list.
    """
    lines = []
    for cp, clusters in clusters_by_cp.items():
        lines.append(cp)
        for idx, cluster in enumerate(clusters, start=1):
            if len(cluster) < 2:
                continue
            lines.append(f"Trajet {idx}:")
            lines.append(ROUTE_SEPARATOR.join(f"{p.adresse} ({p.lib})" for p in cluster))
        lines.append('')
    return '\n'.join(lines)


def build_summary(clusters_by_cp: Mapping[str, Sequence[Cluster]]) -> pd.DataFrame:
    """Number of rounds and stations per postal code."""
    rows = [
        {
            'cp': cp,
            'groups': len(clusters),
            'bureaux': sum(len(cluster) for cluster in clusters),
        }
        for cp, clusters in clusters_by_cp.items()
    ]
    return pd.DataFrame(rows, columns=['cp', 'groups', 'bureaux'])


def cluster_size_statistics(clusters_by_cp: Mapping[str, Sequence[Cluster]]) -> pd.Series:
    """Min, max, average and median number of stations per round."""
    sizes = pd.Series(
        [len(cluster) for clusters in clusters_by_cp.values() for cluster in clusters],
        dtype=float
    )
    return pd.Series({
        'Min': sizes.min(),
        'Max': sizes.max(),
        'Avg': sizes.mean(),
        'Median': sizes.median(),
    })


def save_clustering_results(
    clusters_by_cp: Mapping[str, Sequence[Cluster]],
    parameters: Parameters
) -> Dict[str, Path]:
    """
    Write the rounds as JSON, the route report as text and the per-postal-code summary as CSV.

    Returns:
        Dict with the 'clusters', 'routes' and 'summary' output paths
    """
    output_dir = Path(parameters.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    paths = {
        'clusters': parameters.clusters_path,
        'routes': parameters.routes_path,
        'summary': parameters.summary_path,
    }

    with open(paths['clusters'], 'w', encoding='utf-8') as f:
        json.dump(clusters_to_dict(clusters_by_cp), f, indent=2, ensure_ascii=False)
    logger.info(f"Clusters written to {paths['clusters']}")

    with open(paths['routes'], 'w', encoding='utf-8') as f:
        f.write(format_routes(clusters_by_cp))
    logger.info(f"Text routes written to {paths['routes']}")

    build_summary(clusters_by_cp).to_csv(paths['summary'], index=False)
    logger.info(f"Summary written to {paths['summary']}")

    return paths
