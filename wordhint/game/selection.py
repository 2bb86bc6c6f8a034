"""
Secret-word choosers.

A chooser is a callable `dictionary -> word` carrying its own seeded RNG, so
a session can swap the selection policy without touching scoring. Classes
register themselves by `id` and are built through create_chooser().

Built in:
  - uniform     : any word, equal probability
  - plural_skip : words ending in `suffix` (default "s") are only kept with
                  probability `keep_probability` (default 1/3); otherwise the
                  draw is repeated. Keeps plural-looking secrets rare.
"""

from __future__ import annotations

import random
from typing import Dict, List, Sequence, Type

# ---- Global chooser registry ----
REGISTRY: Dict[str, Type["BaseChooser"]] = {}


def register(cls: Type["BaseChooser"]) -> Type["BaseChooser"]:
    """
    Decorator: @register on a chooser class adds it to REGISTRY by its `id`.
    """
    cid = getattr(cls, "id", None)
    if not cid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if cid in REGISTRY:
        raise ValueError(f"Duplicate chooser id: {cid}")
    REGISTRY[cid] = cls
    return cls


class BaseChooser:
    id = "base"
    name = "Base"

    def __init__(self, *, seed: int | None = None):
        self.rng = random.Random(seed)

    def choose(self, words: Sequence[str]) -> str:
        raise NotImplementedError("Override in subclass")

    def __call__(self, words: Sequence[str]) -> str:
        if not words:
            raise ValueError("cannot choose a secret from an empty dictionary")
        return self.choose(words)


@register
class UniformChooser(BaseChooser):
    id = "uniform"
    name = "Uniform"

    def choose(self, words: Sequence[str]) -> str:
        return words[self.rng.randrange(len(words))]


@register
class PluralSkipChooser(BaseChooser):
    id = "plural_skip"
    name = "Plural Skip"

    def __init__(self, *, seed: int | None = None, suffix: str = "s",
                 keep_probability: float = 1 / 3):
        super().__init__(seed=seed)
        # 0 would loop forever on a dictionary of nothing but plurals.
        if not 0.0 < keep_probability <= 1.0:
            raise ValueError(f"keep_probability must be in (0, 1]; got {keep_probability}")
        self.suffix = suffix.lower()
        self.keep_probability = keep_probability

    def choose(self, words: Sequence[str]) -> str:
        while True:
            option = words[self.rng.randrange(len(words))]
            if self.suffix and option.lower().endswith(self.suffix):
                if self.rng.random() > self.keep_probability:
                    continue
            return option


def create_chooser(chooser_id: str, **kwargs) -> BaseChooser:
    """
    Factory: instantiate a registered chooser by id.
    """
    try:
        cls = REGISTRY[chooser_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown chooser id: {chooser_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_chooser_ids() -> List[str]:
    """
    Return all registered chooser ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
