import csv
import json
import random

from headless_run import run_headless
from lumisky.engine import Engine
from lumisky.metrics import RunMetrics


def test_record_and_summarize(make_config):
    engine = Engine(800, 600, rng=random.Random(0), sparkle_probability=0.0)
    metrics = RunMetrics(run_name="unit")
    engine.spawn_burst(100, 100, make_config(count=30))

    metrics.record_frame(1, engine=engine, frame_time_ms=2.0)
    engine.update()
    metrics.record_frame(2, engine=engine, frame_time_ms=4.0)

    summary = metrics.summary()
    assert summary["frames"] == 2
    assert summary["mean_frame_ms"] == 3.0
    assert summary["max_frame_ms"] == 4.0
    assert summary["peak_particles"] == 30
    assert summary["bursts"] == 1


def test_empty_summary_and_export():
    metrics = RunMetrics()
    assert metrics.summary()["frames"] == 0
    assert metrics.finalize_and_export() == []


def test_export_csv_and_json(tmp_path):
    metrics = run_headless(120, width=400, height=300, seed=3)
    paths = metrics.finalize_and_export(out_dir=tmp_path)
    csv_path, json_path = paths

    with csv_path.open() as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 120
    assert set(rows[0]) >= {"frame", "rockets", "particles", "frame_time_ms"}

    payload = json.loads(json_path.read_text())
    assert payload["summary"]["frames"] == 120
    assert len(payload["frames"]) == 120


def test_headless_show_produces_bursts():
    metrics = run_headless(900, width=800, height=600, seed=7)
    summary = metrics.summary()
    assert summary["frames"] == 900
    assert summary["bursts"] >= 1
    assert summary["peak_particles"] > 0


def test_headless_without_autofire_stays_dark():
    metrics = run_headless(300, seed=1, autofire=False)
    assert metrics.summary()["peak_particles"] == 0


def test_headless_clicks_and_render():
    metrics = run_headless(200, width=320, height=240, seed=2, autofire=False, clicks_every=50, render=True)
    assert metrics.summary()["bursts"] >= 1


def test_headless_respects_particle_cap():
    metrics = run_headless(900, width=800, height=600, seed=4, clicks_every=5, max_particles=300)
    summary = metrics.summary()
    assert summary["peak_particles"] <= 300
    assert summary["evicted"] > 0
