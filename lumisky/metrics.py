"""
Metrics and reporting helpers.

Responsibilities:
- Per-frame engine load (live rockets / particles, bursts, evictions, frame time)
- Run summary (mean / p95 frame time, peak particle load)
- Export to CSV/JSON at exit
"""
from __future__ import annotations

import csv
import json
from dataclasses import asdict, dataclass
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

import numpy as np

from . import config as C


@dataclass
class FrameRecord:
    frame: int
    rockets: int
    particles: int
    bursts_total: int
    evicted_total: int
    pending_launches: int
    frame_time_ms: float


class RunMetrics:
    """Capture per-frame engine metrics and export them as CSV/JSON."""

    def __init__(self, run_name: Optional[str] = None, run_tag: str = "") -> None:
        self.run_name = run_name or f"run_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        self.run_tag = run_tag
        self.records: List[FrameRecord] = []

    def record_frame(self, frame: int, *, engine, frame_time_ms: float) -> FrameRecord:
        record = FrameRecord(
            frame=frame,
            rockets=len(engine.rockets),
            particles=len(engine.particles),
            bursts_total=engine.bursts,
            evicted_total=engine.evicted,
            pending_launches=engine.pending_launches,
            frame_time_ms=frame_time_ms,
        )
        self.records.append(record)
        return record

    def summary(self) -> Dict[str, float]:
        if not self.records:
            return {
                "frames": 0,
                "mean_frame_ms": 0.0,
                "p95_frame_ms": 0.0,
                "max_frame_ms": 0.0,
                "peak_particles": 0,
                "mean_particles": 0.0,
                "bursts": 0,
                "evicted": 0,
            }

        frame_ms = np.fromiter((r.frame_time_ms for r in self.records), dtype=float)
        particles = np.fromiter((r.particles for r in self.records), dtype=float)
        last = self.records[-1]
        return {
            "frames": len(self.records),
            "mean_frame_ms": float(frame_ms.mean()),
            "p95_frame_ms": float(np.percentile(frame_ms, 95)),
            "max_frame_ms": float(frame_ms.max()),
            "peak_particles": int(particles.max()),
            "mean_particles": float(particles.mean()),
            "bursts": last.bursts_total,
            "evicted": last.evicted_total,
        }

    def export_csv(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=list(asdict(self.records[0]).keys()))
            writer.writeheader()
            for rec in self.records:
                writer.writerow(asdict(rec))

    def export_json(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        payload: Dict[str, object] = {
            "run_name": self.run_name,
            "run_tag": self.run_tag,
            "summary": self.summary(),
            "frames": [asdict(r) for r in self.records],
            "created_at": datetime.now().isoformat(),
        }
        with path.open("w") as f:
            json.dump(payload, f, indent=2)

    def finalize_and_export(
        self,
        *,
        out_dir: Path = C.REPORTS_DIR,
        export_csv: bool = True,
        export_json: bool = True,
    ) -> List[Path]:
        if not self.records:
            return []

        out_dir = Path(out_dir)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        base_name = f"{self.run_name}_{timestamp}"
        written = []
        if export_csv:
            written.append(out_dir / f"{base_name}.csv")
            self.export_csv(written[-1])
        if export_json:
            written.append(out_dir / f"{base_name}.json")
            self.export_json(written[-1])
        return written
