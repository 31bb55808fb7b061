"""
pick3_predictor

Core package for the seeded pick-3 prediction engine.

Structure:
- rng: bit mixer, Xorshift128+ generator, seed derivation
- data: the embedded historical draw table
- models: frequency (IDA) and digit-sum models, weighted sampling
- strategies: named strategies, Monte Carlo, majority-vote consensus
- integrity: CRC32 / Adler32 / FNV-1a prediction checksums
- evaluation: generator distribution checks
- serving: the engine context and the display model catalog
- utils: logging setup
"""

__all__ = ["config"]
