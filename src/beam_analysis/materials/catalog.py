from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

from beam_analysis.domain.errors import MaterialCatalogError
from beam_analysis.domain.material import Material

# columnas de texto (no son propiedades numéricas)
TEXT_COLUMNS = {"name", "notes"}


class MaterialCatalog:
    def __init__(self, materials: List[Material]):
        self.materials: List[Material] = list(materials)
        self.by_name: Dict[str, Material] = {self._key(m.name): m for m in self.materials if m.name.strip()}

    @staticmethod
    def _key(name: str) -> str:
        return (name or "").strip().upper()

    def names(self) -> List[str]:
        return [m.name for m in self.materials]

    def get(self, name: str) -> Optional[Material]:
        return self.by_name.get(self._key(name))

    @classmethod
    def from_txt(cls, path: str | Path) -> "MaterialCatalog":
        """
        TXT separado por ';' con encabezado. Ejemplo:

            name;EI;GA;notes
            IPE 200 S275;4.0803e12;;acero

        - EI en N·mm²
        - celdas vacías => la propiedad no se carga
        - '#' o '//' al inicio => comentario
        - se acepta ',' como separador decimal
        """
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f"No existe el archivo de materiales: {p}")

        rows: List[List[str]] = []
        for ln in p.read_text(encoding="utf-8", errors="replace").splitlines():
            t = ln.strip()
            if not t or t.startswith("#") or t.startswith("//"):
                continue
            rows.append([c.strip() for c in t.split(";")])

        if not rows:
            raise MaterialCatalogError("Archivo de materiales vacío o sin filas válidas.")

        header = [h.strip() for h in rows[0]]
        header_l = [h.lower() for h in header]
        if "name" not in header_l:
            raise MaterialCatalogError("Falta el encabezado con la columna 'name'.")
        i_name = header_l.index("name")

        mats: List[Material] = []
        for n_row, r in enumerate(rows[1:], start=2):
            name = r[i_name] if i_name < len(r) else ""
            if not name:
                continue

            props: Dict[str, float] = {}
            for i, col in enumerate(header):
                if col.lower() in TEXT_COLUMNS or i >= len(r):
                    continue
                cell = r[i].replace(",", ".")
                if cell == "":
                    continue
                try:
                    props[col] = float(cell)
                except ValueError:
                    raise MaterialCatalogError(
                        f"Valor no numérico en fila {n_row}, columna '{col}': {r[i]!r}"
                    ) from None

            mats.append(Material(name=name, properties=props))

        if not mats:
            raise MaterialCatalogError("No se pudieron cargar materiales.")

        # ordenar por nombre para listados estables
        mats.sort(key=lambda m: m.name.upper())
        return cls(mats)


def default_catalog_path() -> Path:
    """
    Ruta del catálogo incluido en el paquete:
      src/beam_analysis/data/materials.txt
    """
    here = Path(__file__).resolve()
    return here.parents[1] / "data" / "materials.txt"
