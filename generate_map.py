#!/usr/bin/env python3
"""
Queimadas - Generate Interactive Fire Map
Loads the biome outline and one month of fire detections and creates an
interactive map, optionally zoomed to (or filtered by) one biome.
"""
import argparse
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv()

from queimadas.biomes.bounds import DefaultView
from queimadas.biomes.correlator import FilterPolicy, count_by_biome, extract_biome_keys
from queimadas.core.config import settings
from queimadas.core.logging import setup_logging
from queimadas.ingestion.geojson_client import GeoJSONClient, load_datasets
from queimadas.visualization.map_generator import create_queimadas_map


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Generate the fire map by biome")
    parser.add_argument("--month", default=settings.default_month, help="Month key (YYYY-MM)")
    parser.add_argument("--bioma", default=None, help="Biome to zoom to (all biomes if omitted)")
    parser.add_argument(
        "--policy",
        choices=[p.value for p in FilterPolicy],
        default=settings.filter_policy.lower(),
        help="pass_through keeps every fire visible, strict hides other biomes",
    )
    parser.add_argument("--output", default="queimadas_map.html", help="Output HTML file")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging()

    print("=" * 60)
    print("Queimadas - Generating Fire Map")
    print("=" * 60)

    with GeoJSONClient() as client:
        if args.month not in client.month_paths:
            print(f"ERROR: no fire data for month {args.month}. Available: {', '.join(client.months)}")
            return 1

        print(f"\nLoading data for {args.month}...")
        datasets = load_datasets(args.month, client=client)

    if datasets.outline is None:
        print("ERROR: biome outline could not be loaded")
        return 1

    biomes = extract_biome_keys(
        datasets.outline,
        country_field=settings.country_field,
        country_sentinel=settings.country_sentinel,
        label_field=settings.biome_label_field,
    )
    print(f"\nBiomes: {', '.join(biomes) or '-'}")
    print(f"Fire detections: {datasets.fire_count}")

    counts = count_by_biome(datasets.fires, settings.fire_biome_field)
    for biome, count in sorted(counts.items(), key=lambda item: item[0] or ""):
        print(f"  - {biome or '(sem bioma)':<20} {count}")

    print("\nGenerating interactive map...")
    fire_map = create_queimadas_map(
        outline=datasets.outline,
        fire_collections=datasets.fires,
        selection=args.bioma,
        policy=FilterPolicy(args.policy),
        title=f"Mapa de Queimadas por Bioma ({args.month})",
        default_view=DefaultView.from_settings(settings),
        padding=settings.fit_padding_px,
        label_field=settings.biome_label_field,
        fire_label_field=settings.fire_biome_field,
        country_field=settings.country_field,
        country_sentinel=settings.country_sentinel,
    )
    fire_map.save(args.output)

    print(f"\nMap saved to: {args.output}")
    print("\nOpen the file in your browser to view the interactive map!")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
