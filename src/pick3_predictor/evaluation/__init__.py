"""Generator quality checks (chi-square uniformity)."""

__all__: list[str] = []
