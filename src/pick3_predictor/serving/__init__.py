"""Engine entry points for presentation layers.

- engine: ``PredictionEngine`` (initialize, predictions, strategies, export)
- model_catalog: display labels attached to ``run_all_models`` output

Nothing here executes at import time.
"""

__all__: list[str] = []
