"""Historical draw data.

The engine ships a fixed 20-draw table (``draws.HISTORICAL_DRAWS``); there
is no loader for external files.
"""
