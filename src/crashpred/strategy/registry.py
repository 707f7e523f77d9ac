"""Strategy lookup by name."""

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import replace

from ..core.telemetry import PredictionObserver
from ..data import History
from .base_strategy import BaseStrategy
from .types import PredictionResult

logger = logging.getLogger(__name__)

_REGISTRY: dict[str, type[BaseStrategy]] = {}


def register_strategy(name: str) -> Callable[[type[BaseStrategy]], type[BaseStrategy]]:
    """Class decorator registering a strategy under ``name``.

    Raises:
        ValueError: If another class is already registered under the name
    """

    def decorator(cls: type[BaseStrategy]) -> type[BaseStrategy]:
        existing = _REGISTRY.get(name)
        if existing is not None and existing is not cls:
            raise ValueError(f"Strategy {name!r} already registered to {existing.__name__}")
        cls.default_name = name
        _REGISTRY[name] = cls
        return cls

    return decorator


def available_strategies() -> list[str]:
    """Registered strategy names, sorted."""
    return sorted(_REGISTRY)


def get_strategy_class(name: str) -> type[BaseStrategy]:
    try:
        return _REGISTRY[name]
    except KeyError:
        raise KeyError(
            f"Unknown strategy {name!r}; available: {', '.join(available_strategies())}"
        ) from None


def get_strategy(name: str, /, **kwargs) -> BaseStrategy:
    """Instantiate a registered strategy.

    Args:
        name: Registry name (e.g., "markov_chain")
        **kwargs: Passed to the strategy constructor (config, name, observer, rng, ...)

    Raises:
        KeyError: If no strategy is registered under ``name``
    """
    return get_strategy_class(name)(**kwargs)


def predict_all(
    history: History | Sequence,
    names: Iterable[str] | None = None,
    total_games: int | None = None,
    observer: PredictionObserver | None = None,
    seed: int | None = None,
) -> dict[str, PredictionResult]:
    """Run several strategies over the same history.

    Args:
        history: Any history encoding accepted by BaseStrategy.predict
        names: Strategies to run (None = all registered)
        total_games: Record count; required for a flat buffer
        observer: Telemetry sink shared by every strategy
        seed: Seed applied to randomized strategies

    Returns:
        Results keyed by strategy name, in the order requested
    """
    history = History.coerce(history, total_games)
    selected = list(names) if names is not None else available_strategies()

    results: dict[str, PredictionResult] = {}
    for name in selected:
        cls = get_strategy_class(name)
        config = cls.default_config()
        if seed is not None and hasattr(config, "seed"):
            config = replace(config, seed=seed)
        strategy = cls(config=config, observer=observer)
        results[name] = strategy.predict(history)
    logger.info(f"Ran {len(results)} strategies over {len(history)} games")
    return results
