# path: src/beam_analysis/services/logging_setup.py
from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from beam_analysis.config import AnalysisSettings

LOGGER_NAME = "beam_analysis"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _resolve_level(name: str) -> int:
    level = logging.getLevelName((name or "").strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Nivel de logging inválido: {name!r}")
    return level


def setup_logging(settings: Optional[AnalysisSettings] = None) -> logging.Logger:
    """
    Logger raíz del paquete: archivo rotativo + consola.
    Nivel, carpeta y nombre de archivo salen de AnalysisSettings.

    Si ya estaba configurado solo se actualiza el nivel (no se duplican handlers).
    """
    settings = settings or AnalysisSettings()
    level = _resolve_level(settings.log_level)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if logger.handlers:
        for h in logger.handlers:
            h.setLevel(level)
        return logger

    os.makedirs(settings.log_dir, exist_ok=True)
    log_path = os.path.join(settings.log_dir, settings.log_file)
    fmt = logging.Formatter(LOG_FORMAT)

    fh = RotatingFileHandler(log_path, maxBytes=2_000_000, backupCount=3, encoding="utf-8")
    sh = logging.StreamHandler()
    for h in (fh, sh):
        h.setLevel(level)
        h.setFormatter(fmt)
        logger.addHandler(h)

    logger.info("Logging %s inicializado. Archivo: %s", logging.getLevelName(level), log_path)
    return logger
