"""
Quick Monte Carlo Check

Runs the Monte Carlo simulation for a fixed seed and prints the most
frequent boxes, then a uniformity check of the generator.

Example:
    python run_monte_carlo_check.py
"""

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from pick3_predictor.evaluation.distribution import distribution_check
from pick3_predictor.rng.prng import Xorshift128Plus
from pick3_predictor.serving.engine import PredictionEngine

SEED = 12345


def main():
    print("=== Pick-3 Predictor: Monte Carlo Check ===")

    try:
        engine = PredictionEngine()
        engine.initialize(seed=SEED)

        result = engine.monte_carlo()
        print(f"Iterations: {result.iterations}")
        print("\n--- Top Combinations ---")
        for combo in result.top_combinations:
            print(f"{combo.digits}  count={combo.count}  {combo.probability:.3f}%")

        print(f"\nPrediction: {result.prediction}  checksum={result.checksum.combined}")

        report = distribution_check(Xorshift128Plus(SEED))
        print("\n--- Distribution (10,000 draws) ---")
        print(report.counts.to_string())
        print(f"chi-square={report.chi_square:.2f}  quality={report.quality}")

        print("\nSuccess! Monte Carlo ran correctly.")

    except Exception as e:
        print("\nERROR: Something went wrong during the simulation.\n")
        print(type(e).__name__, ":", str(e))


if __name__ == "__main__":
    main()
