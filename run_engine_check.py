"""
Quick Engine Check

Run this script to verify that the engine initializes, ranks digits and
produces predictions and a consensus.

Example:
    python run_engine_check.py --seed 12345
"""

import argparse
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from pick3_predictor.serving.engine import PredictionEngine
from pick3_predictor.models.sums import classify
from pick3_predictor.utils.log_config import configure_logging


def main():
    parser = argparse.ArgumentParser(description="Pick-3 engine check")
    parser.add_argument("--seed", type=int, default=None, help="Explicit PRNG seed (default: wall clock)")
    args = parser.parse_args()

    configure_logging()
    print("=== Pick-3 Predictor: Engine Check ===")

    try:
        engine = PredictionEngine()
        seed = engine.initialize(seed=args.seed)
        print(f"Seed: {seed}")

        print("\n--- IDA Rankings ---")
        print(engine.frequency.rankings_frame().round(2).to_string(index=False))
        print(f"\nIDA confidence: {engine.frequency.confidence():.2f}%")

        stats = engine.sums.statistics()
        print(f"\nSum average: {stats.average:.2f} (min {stats.min_sum}, max {stats.max_sum})")

        prediction = engine.generate_prediction()
        combo = classify(prediction.digits)
        print("\n--- Weighted Prediction ---")
        print(f"Digits: {prediction.digits} ({combo.name}, {combo.odds})")
        print(f"Checksum: {prediction.checksum}  verified={engine.verify(prediction)}")

        consensus = engine.run_all_strategies()
        print("\n--- Strategies ---")
        for result in consensus.strategies:
            print(f"{result.name:<22} {result.prediction}  {result.confidence:.1f}%")
        print(f"\nConsensus: {consensus.prediction}  {consensus.confidence:.1f}%  {consensus.checksum.combined}")

        print("\nSuccess! Engine ran correctly.")

    except Exception as e:
        print("\nERROR: Something went wrong while running the engine.\n")
        print(type(e).__name__, ":", str(e))


if __name__ == "__main__":
    main()
