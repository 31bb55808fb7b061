from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """Numeric constants shared by the PRNG, the models and the strategies."""

    # PRNG
    warmup_steps: int = 20

    # Digit domain and draw shape
    digit_min: int = 0
    digit_max: int = 9
    picks_per_draw: int = 3
    max_sum: int = 27

    # Strategies
    monte_carlo_iterations: int = 50_000
    monte_carlo_top_n: int = 10
    due_skip_threshold: int = 5
    # Upper bound on candidate sweeps in the logic-rules strategy
    logic_rules_max_passes: int = 3

    # Confidence caps
    ida_confidence_cap: float = 95.0
    consensus_confidence_cap: float = 98.9

    @property
    def digits(self) -> list[int]:
        return list(range(self.digit_min, self.digit_max + 1))

    @property
    def domain_size(self) -> int:
        return self.digit_max - self.digit_min + 1


@dataclass(frozen=True)
class LogConfig:
    """Logging output settings."""

    level: str = "INFO"
    json_logs: bool = False


# Global config instances
ENGINE_CONFIG = EngineConfig()
LOG_CONFIG = LogConfig()
