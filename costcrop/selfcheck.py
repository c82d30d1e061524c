from __future__ import annotations

import importlib
import tempfile
from dataclasses import dataclass
from pathlib import Path

import numpy as np

from .deck import run_deck_payload


@dataclass
class CheckRow:
    name: str
    ok: bool
    detail: str


@dataclass
class SelfCheckReport:
    rows: list[CheckRow]

    @property
    def ok(self) -> bool:
        return all(row.ok for row in self.rows)

    def to_text(self) -> str:
        lines: list[str] = []
        for row in self.rows:
            status = "OK" if row.ok else "FAIL"
            lines.append(f"[{status}] {row.name}: {row.detail}")
        lines.append(f"overall: {'OK' if self.ok else 'FAIL'}")
        return "\n".join(lines)


SMOKE_DECK = {
    "grid": {"width": 120, "height": 120, "fill": 0},
    "steps": [
        {"type": "disk", "center_x": 60, "center_y": 60, "radius": 30, "value": 250},
        {
            "type": "inflate",
            "region": {"x": 10, "y": 70, "w": 60, "h": 30},
            "occupied_value": 250,
            "inflated_value": 100,
            "kernel": {"shape": "gaussian", "size": 11, "sigma": 2.0},
        },
        {"type": "analyze", "save": {"json": True, "csv": False}},
        {"type": "export", "outdir": "outputs/selfcheck", "formats": ["npy", "png"]},
    ],
}


def run_selfcheck(*, smoke: bool = True) -> SelfCheckReport:
    rows: list[CheckRow] = []

    for module_name in ("numpy", "scipy", "yaml", "matplotlib"):
        try:
            mod = importlib.import_module(module_name)
            version = getattr(mod, "__version__", "unknown")
            rows.append(CheckRow(module_name, True, f"version={version}"))
        except Exception as exc:
            rows.append(CheckRow(module_name, False, str(exc)))

    if smoke and all(row.ok for row in rows):
        try:
            with tempfile.TemporaryDirectory(prefix="costcrop-selfcheck-") as tmp:
                outdir = Path(tmp) / "out"
                state = run_deck_payload(SMOKE_DECK, deck_path=Path(tmp) / "smoke.yaml", out_override=outdir)
                expected = [outdir / "grid.npy", outdir / "grid.png", outdir / "metrics.json"]
                missing = [path.name for path in expected if not path.exists()]
                inflated = int(np.count_nonzero(state.grid.cells == 100))
                if missing:
                    rows.append(CheckRow("smoke", False, f"missing artifacts: {', '.join(missing)}"))
                elif inflated == 0:
                    rows.append(CheckRow("smoke", False, "inflation produced no inflated cells"))
                else:
                    rows.append(
                        CheckRow(
                            "smoke",
                            True,
                            f"grid={state.grid.shape}, inflated={inflated}, exports={len(state.exports)}",
                        )
                    )
        except Exception as exc:
            rows.append(CheckRow("smoke", False, str(exc)))

    return SelfCheckReport(rows=rows)
