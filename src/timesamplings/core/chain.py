"""Composition of samplers into a single multi-stage sampler."""

from __future__ import annotations

import logging
from functools import reduce
from typing import Any

from .base import Sampler

logger = logging.getLogger(__name__)


class SamplingChain(Sampler):
    """Chain of two or more samplers ordered ``parent, ..., self``.

    ``backward`` threads a base value through the stages from the parent to
    the last stage; ``forward`` applies each stage's ``forward`` in the
    opposite order.  Vector input is always converted element by element
    through the whole chain.

    A chain given as a stage is expanded in place, so
    ``SamplingChain(SamplingChain(a, b), c)`` has the stages ``(a, b, c)``.
    """

    def __init__(self, parent: Sampler, stage: Sampler, *stages: Sampler):
        flat: list[Sampler] = []
        for item in (parent, stage, *stages):
            if not isinstance(item, Sampler):
                raise TypeError(f"chain stages must be samplers, got {type(item).__name__}")
            if isinstance(item, SamplingChain):
                flat.extend(item.stages)
            else:
                flat.append(item)
        object.__setattr__(self, "_stages", tuple(flat))
        logger.debug(
            "SamplingChain created: %s",
            " -> ".join(type(s).__name__ for s in self._stages),
        )

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def from_stages(cls, stages: list[Sampler]) -> "SamplingChain":
        if len(stages) < 2:
            raise ValueError("a sampling chain needs at least two stages")
        return cls(*stages)

    @property
    def stages(self) -> tuple[Sampler, ...]:
        return self._stages

    @property
    def parent(self) -> Sampler:
        return self._stages[0]

    @property
    def self_stage(self) -> Sampler:
        return self._stages[-1]

    def __len__(self) -> int:
        return len(self._stages)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SamplingChain):
            return NotImplemented
        return self._stages == other._stages

    def __hash__(self) -> int:
        return hash(self._stages)

    def __repr__(self) -> str:
        return f"SamplingChain({', '.join(repr(s) for s in self._stages)})"

    def _fold_backward(self, value: Any) -> Any:
        return reduce(lambda acc, stage: stage.backward(acc), self._stages, value)

    def _fold_forward(self, value: Any) -> Any:
        return reduce(lambda acc, stage: stage.forward(acc), reversed(self._stages), value)

    _backward_scalar = _backward_interval = _backward_range = _fold_backward
    _forward_scalar = _forward_interval = _forward_range = _fold_forward


__all__ = ["SamplingChain"]
