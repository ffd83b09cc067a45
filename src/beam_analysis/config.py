from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any, Mapping


@dataclass(frozen=True)
class AnalysisSettings:
    # factor de corrección de la flecha (antes se leía de la UI)
    correction_factor: float = 1.0

    stiffness_key: str = "EI"
    ei_unit_divisor: float = 1000.0 ** 3   # N·mm² -> kN·m²
    deflection_multiplier: float = 1000.0  # m -> mm

    # tolerancia para comparar x contra apoyos
    position_tol: float = 1e-9

    samples_per_segment: int = 50

    # logging (services/logging_setup.py)
    log_level: str = "INFO"
    log_dir: str = "logs"
    log_file: str = "beam_analysis.log"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "AnalysisSettings":
        """
        Arma settings desde un dict plano (p.ej. leído de un archivo).
        Claves desconocidas se ignoran.
        """
        kwargs = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            raw = data[f.name]
            default = f.default
            try:
                if isinstance(default, str):
                    kwargs[f.name] = str(raw).strip()
                elif isinstance(default, int):
                    kwargs[f.name] = int(raw)
                else:
                    kwargs[f.name] = float(str(raw).strip().replace(",", "."))
            except (TypeError, ValueError) as exc:
                raise ValueError(f"Valor inválido para {f.name}: {raw!r}") from exc

        settings = cls(**kwargs)
        if settings.ei_unit_divisor == 0:
            raise ValueError("ei_unit_divisor no puede ser 0.")
        if settings.samples_per_segment < 1:
            raise ValueError("samples_per_segment debe ser >= 1.")
        if not isinstance(logging.getLevelName(settings.log_level.upper()), int):
            raise ValueError(f"log_level inválido: {settings.log_level!r}")
        return settings
