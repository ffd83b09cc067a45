from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class Material:
    """
    Material de la viga.

    properties: {"EI": ..., "GA": ...}
      - EI en N·mm² (los analizadores lo pasan a kN·m²)

    Si falta la propiedad pedida, stiffness() devuelve NaN: el resultado
    queda inválido pero no se levanta error (validar antes de usar).
    """
    name: str
    properties: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self):
        # copia de solo lectura
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    def stiffness(self, key: str = "EI") -> float:
        value = self.properties.get(key)
        if value is None:
            return float("nan")
        return float(value)
