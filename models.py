"""
Model registry: maps the model names used on the command line to their
generators and parameter lists.

    ER n p      Erdős–Rényi
    WS n k p    Watts–Strogatz
    SF n y      scale-free (y = disparity)
"""

from typing import Callable, Dict, List, NamedTuple, Optional, Tuple

from graph import Graph
from erdos import generate_erdos_renyi
from ws import generate_watts_strogatz
from scale_free import generate_scale_free


class ModelSpec(NamedTuple):
    name: str
    generator: Callable[..., Graph]
    # (parameter name, type) after n
    params: List[Tuple[str, type]]

    @property
    def usage(self) -> str:
        return " ".join([self.name, "n"] + [p for p, _ in self.params])


MODELS: Dict[str, ModelSpec] = {
    "ER": ModelSpec("ER", generate_erdos_renyi, [("p", float)]),
    "WS": ModelSpec("WS", generate_watts_strogatz, [("k", int), ("p", float)]),
    "SF": ModelSpec("SF", generate_scale_free, [("y", int)]),
}


def usage() -> str:
    return "\n".join(m.usage for m in MODELS.values())


def _convert(name: str, value, typ: type):
    """Cast a parameter, refusing to truncate non-integral numbers to int."""
    if typ is int and not isinstance(value, str) and not float(value).is_integer():
        raise ValueError(f"{name} must be an integer, got {value!r}")
    return typ(value)


def create_graph(model: str, n: int, *params, seed: Optional[int] = None) -> Graph:
    """
    Build a graph for `model` from its numeric parameters.

    Raises ValueError for an unknown model, the wrong number of parameters,
    or parameters the generator rejects.
    """
    if model not in MODELS:
        raise ValueError(f"Invalid graph type {model!r}, expected one of {sorted(MODELS)}")

    model_spec = MODELS[model]
    if len(params) != len(model_spec.params):
        raise ValueError(f"Usage: {model_spec.usage}")

    converted = [
        _convert(name, value, typ)
        for (name, typ), value in zip(model_spec.params, params)
    ]
    return model_spec.generator(_convert("n", n, int), *converted, seed=seed)
