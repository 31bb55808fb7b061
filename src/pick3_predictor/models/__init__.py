"""Statistical models over the draw history.

- frequency: per-digit counts and IDA hot/cold scores
- sums: digit-sum distribution, target-sum generation, box classification
- sampling: IDA-weighted sampling without replacement
"""

__all__: list[str] = []
