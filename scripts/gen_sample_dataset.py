#!/usr/bin/env python3
"""Sample dataset generation for manual runs of the viewer.

Generates a synthetic restaurants workbook in the layout the viewer expects:
- Row 1: Header row (Name | Address | City | ... | Latitude | Longitude | ...)
- Row 2+: Data rows

Some rows are deliberately messy: decimal-comma coordinates, lowercase
header variants (via --lowercase-headers) and rows without coordinates.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd

CITIES = [
    # city, state, country, lat, lng
    ("San Francisco", "CA", "USA", 37.7749, -122.4194),
    ("Oakland", "CA", "USA", 37.8044, -122.2712),
    ("Portland", "OR", "USA", 45.5152, -122.6784),
    ("Lyon", "", "France", 45.7640, 4.8357),
    ("Osaka", "", "Japan", 34.6937, 135.5023),
]
CUISINES = ["Italian", "Thai", "Mexican", "Japanese", "French", "Vegan", "Burgers"]
STREETS = ["Main St", "Market St", "Rue de la République", "Broadway", "Shinsaibashi"]


def generate_restaurants(rows: int, seed: int = 42, missing_ratio: float = 0.2) -> pd.DataFrame:
    """Generate restaurant rows around a handful of cities.

    Args:
        rows: Number of data rows to generate
        seed: Random seed for reproducible data
        missing_ratio: Share of rows left without coordinates
    """
    rng = np.random.default_rng(seed)
    data: dict[str, list[Any]] = {
        "Name": [], "Address": [], "City": [], "State": [], "Country": [],
        "Latitude": [], "Longitude": [], "Phone": [], "Website": [], "Cuisine": [], "Notes": [],
    }
    for i in range(rows):
        city, state, country, lat, lng = CITIES[int(rng.integers(len(CITIES)))]
        cuisine = CUISINES[int(rng.integers(len(CUISINES)))]
        data["Name"].append(f"{cuisine} Place {i + 1}")
        data["Address"].append(f"{int(rng.integers(1, 999))} {STREETS[int(rng.integers(len(STREETS)))]}")
        data["City"].append(city)
        data["State"].append(state)
        data["Country"].append(country)
        if rng.random() < missing_ratio:
            data["Latitude"].append("")
            data["Longitude"].append("")
        else:
            jitter_lat, jitter_lng = np.round(rng.normal(0, 0.02, 2), 5)
            plat, plng = round(lat + jitter_lat, 5), round(lng + jitter_lng, 5)
            # European sheets often carry decimal commas
            if country == "France":
                data["Latitude"].append(str(plat).replace(".", ","))
                data["Longitude"].append(str(plng).replace(".", ","))
            else:
                data["Latitude"].append(plat)
                data["Longitude"].append(plng)
        data["Phone"].append(f"+1 555 {int(rng.integers(1000, 9999))}" if rng.random() < 0.7 else "")
        data["Website"].append(f"place{i + 1}.example.com" if rng.random() < 0.5 else "")
        data["Cuisine"].append(cuisine)
        data["Notes"].append("Reservations recommended" if rng.random() < 0.1 else "")
    return pd.DataFrame(data)


def create_workbook(output_path: Path, rows: int, seed: int = 42, lowercase_headers: bool = False) -> None:
    df = generate_restaurants(rows, seed)
    if lowercase_headers:
        df.columns = [c.lower() for c in df.columns]
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name="Restaurants", index=False)
    print(f"Created workbook: {output_path}")
    print(f"  Rows: {rows} (+ 1 header row)")


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Generate a synthetic restaurants workbook",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s data/restaurants.xlsx
  %(prog)s data/lower.xlsx --rows 500 --lowercase-headers --seed 7
        """,
    )
    parser.add_argument("output", type=Path, help="Output .xlsx path")
    parser.add_argument("--rows", type=int, default=200, help="Number of data rows (default: 200)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    parser.add_argument("--lowercase-headers", action="store_true", help="Write lowercase header variants")
    args = parser.parse_args()

    if args.rows <= 0:
        print("Error: --rows must be positive", file=sys.stderr)
        return 1

    try:
        create_workbook(args.output, args.rows, args.seed, args.lowercase_headers)
    except OSError as e:
        print(f"Error generating workbook: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
