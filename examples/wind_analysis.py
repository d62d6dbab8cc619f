"""
Wind volatility and storage sizing example.
This example demonstrates:
- Loading an analysis configuration from YAML
- Loading national wind output from the capacity factor files
- Printing the moving average and storage sizing tables
- Saving charts of both analyses
"""

import sys
from pathlib import Path

from windstore import AnalysisConfig, WindAnalysis
from windstore.reporting import render_results
from windstore.visualization import plot_storage, plot_volatility


def main():
    config_path = sys.argv[1] if len(sys.argv) > 1 else Path(__file__).parent / "wind_analysis.yaml"
    config = AnalysisConfig.load_from_file(config_path)

    print(f"Running analysis: {config.name}")
    analysis = WindAnalysis(config)
    results = analysis.run()

    print()
    print(render_results(results))

    plot_volatility(results.volatility).savefig("volatility.png")
    plot_storage(results.storage, results.backup_overbuild_factors).savefig("storage.png")
    print("\nCharts saved to volatility.png and storage.png")


if __name__ == "__main__":
    main()
