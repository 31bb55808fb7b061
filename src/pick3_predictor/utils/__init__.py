"""Shared helpers (logging setup).

Kept free of side effects at import time; call
``pick3_predictor.utils.log_config.configure_logging`` from entry points.
"""

__all__: list[str] = []
