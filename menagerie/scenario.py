"""Scripted runs of the announce protocol.

A Scenario is an ordered list of steps. Each step names one of the known
variants and whether the constructed instance should announce itself. Running
a scenario builds every instance through `entity.create()` and calls
`announce()` on the ones marked for it, in order.

The YAML format accepted by `Scenario.from_yaml` is:

name: Optional scenario name
steps:
  - variant: animal
    announce: false
  - dog          # shorthand for {variant: dog, announce: true}
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

try:
    from menagerie.entity import Animal, create, variant_key
except ImportError:
    from .entity import Animal, create, variant_key

_logger = logging.getLogger(__name__)


@dataclass
class Step:
    """Construct one `variant`, optionally announcing it."""

    variant: str
    announce: bool = True

    def __post_init__(self) -> None:
        self.variant = variant_key(self.variant)
        if not isinstance(self.announce, bool):
            raise ValueError(f"announce must be true or false, got {self.announce!r}")

    @classmethod
    def from_value(cls, value: Union[str, Dict[str, Any]]) -> "Step":
        """Create a Step from a bare variant name or a mapping."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls(value)
        if isinstance(value, dict):
            if "variant" not in value:
                raise ValueError(f"step entry missing 'variant': {value!r}")
            return cls(value["variant"], value.get("announce", True))
        raise ValueError(f"step must be a variant name or a mapping, got {value!r}")


@dataclass
class Scenario:
    name: str
    steps: List[Step] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], default_name: str = "scenario") -> "Scenario":
        if not isinstance(data, dict):
            raise ValueError(f"scenario must be a mapping, got {type(data).__name__}")
        raw_steps = data.get("steps") or []
        if not isinstance(raw_steps, list):
            raise ValueError(f"steps must be a list of variant names or mappings, got {type(raw_steps).__name__}")
        steps = [Step.from_value(entry) for entry in raw_steps]
        return cls(name=data.get("name") or default_name, steps=steps)

    @classmethod
    def from_yaml(cls, filepath: Union[str, Path]) -> "Scenario":
        """Load a Scenario from a YAML file. An empty file gives an empty scenario."""
        try:
            import yaml
        except Exception as exc:  # pragma: no cover - dependency/platform
            raise RuntimeError("PyYAML is required to load scenario YAML") from exc

        p = Path(filepath)
        if not p.is_file():
            raise FileNotFoundError(f"Scenario YAML not found: {filepath}")

        with open(p, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
        return cls.from_dict(data, default_name=p.stem)

    def run(self) -> List[Animal]:
        """Construct each step's animal, announce the marked ones, and return them all."""
        _logger.debug("running scenario %r (%d steps)", self.name, len(self.steps))
        animals: List[Animal] = []
        for step in self.steps:
            animal: Animal = create(step.variant)
            if step.announce:
                _logger.debug("announcing %s", type(animal).__name__)
                animal.announce()
            animals.append(animal)
        return animals


# Same protocol as `python -m menagerie`.
CANONICAL = Scenario(
    name="canonical",
    steps=[Step("animal", announce=False), Step("dog")],
)
