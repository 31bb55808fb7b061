"""
Pick-3 strategies built on the shared generator and models.

Responsibilities
----------------
- context: the explicit engine state handed to every strategy.
- voting: result types, majority vote, uniform padding.
- suite: the named strategies and ``run_all_strategies`` consensus.
- monte_carlo: repeated uniform sampling and box tallies.

Usage example
-------------
    from pick3_predictor.serving.engine import PredictionEngine

    engine = PredictionEngine()
    engine.initialize(seed=12345)
    consensus = engine.run_all_strategies()
"""

# Intentionally keep this file light; import from the concrete modules.
