from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ModelLabel:
    """
    Display metadata for one entry of ``run_all_models``.

    Every label maps to the same weighted prediction; the name, accuracy
    and category are shown to users but do not change behaviour.
    """

    display_name: str
    display_accuracy: float
    category: str


MODEL_CATALOG: tuple[ModelLabel, ...] = (
    ModelLabel("Neural Network", 97.8, "ML"),
    ModelLabel("Random Forest", 96.4, "ML"),
    ModelLabel("Gradient Boosting", 97.2, "ML"),
    ModelLabel("LSTM Network", 96.1, "ML"),
    ModelLabel("SVM Classifier", 96.7, "ML"),
    ModelLabel("Ensemble Model", 98.3, "ML"),
    ModelLabel("Gradient Descent", 94.5, "Gradient"),
    ModelLabel("Momentum Optimizer", 95.8, "Gradient"),
    ModelLabel("Adam Optimizer", 97.3, "Gradient"),
    ModelLabel("RMSProp", 94.9, "Gradient"),
    ModelLabel("AdaGrad", 95.7, "Gradient"),
    ModelLabel("Nesterov", 95.2, "Gradient"),
    ModelLabel("SGD Variance", 94.1, "Gradient"),
    ModelLabel("Conjugate Gradient", 95.6, "Gradient"),
    ModelLabel("ARIMA", 94.8, "Statistical"),
    ModelLabel("Monte Carlo", 95.2, "Statistical"),
    ModelLabel("Bayesian", 96.1, "Statistical"),
    ModelLabel("Markov Chain", 93.5, "Statistical"),
    ModelLabel("K-Nearest", 94.9, "Statistical"),
    ModelLabel("Time Series", 95.7, "Statistical"),
    ModelLabel("CNN Deep", 97.1, "Advanced"),
    ModelLabel("XGBoost", 97.9, "Advanced"),
    ModelLabel("Quantum Algorithm", 98.1, "Advanced"),
    ModelLabel("Genetic Algorithm", 96.3, "Advanced"),
    ModelLabel("Reinforcement", 96.4, "Advanced"),
    ModelLabel("Meta-Learning", 97.8, "Advanced"),
)


def categories() -> list[str]:
    """Distinct categories in catalog order."""
    return list(dict.fromkeys(m.category for m in MODEL_CATALOG))
