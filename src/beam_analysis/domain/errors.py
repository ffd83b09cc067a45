from __future__ import annotations


class BeamAnalysisError(ValueError):
    """Base de los errores del paquete."""


class UnsupportedConditionError(BeamAnalysisError):
    def __init__(self, condition: object):
        self.condition = condition
        super().__init__(f"Condición no soportada: {condition!r}")


class OutOfDomainError(BeamAnalysisError):
    """Posición x fuera de [0, L_total] (o NaN)."""

    def __init__(self, x: float, total_span: float):
        self.x = x
        self.total_span = total_span
        super().__init__(f"x={x!r} fuera del dominio [0, {total_span:g}]")


class InvalidBeamError(BeamAnalysisError):
    pass


class MaterialCatalogError(BeamAnalysisError):
    pass
