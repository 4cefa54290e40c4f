"""
Headless firework run.

Steps the simulation on a simulated clock without opening a window (the
renderer can still be exercised off-screen with --render), records per-frame
engine load, and exports the metrics.
"""
import argparse
import logging
import random
import time
from typing import Optional

from lumisky import config as C
from lumisky.autofire import AutoFire
from lumisky.engine import Engine
from lumisky.logger_setup import setup_logging
from lumisky.metrics import RunMetrics
from lumisky.presets import vary_for_click
from lumisky.renderer import Renderer

logger = logging.getLogger("lumisky")


def run_headless(
    frames: int,
    *,
    width: int = C.WIDTH,
    height: int = C.HEIGHT,
    fps: int = C.FPS,
    seed: Optional[int] = None,
    autofire: bool = True,
    clicks_every: int = 0,
    render: bool = False,
    max_particles: int = C.MAX_LIVE_PARTICLES,
    log_every: int = 0,
    metrics: Optional[RunMetrics] = None,
) -> RunMetrics:
    """Run ``frames`` frames of the show and return the collected metrics."""
    rng = random.Random(seed)
    engine = Engine(width, height, rng=rng, max_particles=max_particles)
    show = AutoFire(engine, rng=rng)
    show.set_enabled(autofire, 0.0)

    renderer = Renderer(width, height) if render else None

    metrics = metrics or RunMetrics(run_tag="headless")
    frame_ms = 1000.0 / fps

    for frame in range(1, frames + 1):
        start = time.perf_counter()
        now = frame * frame_ms

        show.update(now)
        if clicks_every and frame % clicks_every == 0:
            target = (rng.uniform(0.2, 0.8) * width, rng.uniform(0.15, 0.5) * height)
            engine.launch(vary_for_click(rng), target=target)

        engine.update()
        if renderer is not None:
            renderer.render(engine)

        rec = metrics.record_frame(frame, engine=engine, frame_time_ms=(time.perf_counter() - start) * 1000)

        if log_every and frame % log_every == 0:
            logger.info(
                f"Frame {frame:05d}/{frames} | rockets={rec.rockets:<3d} | particles={rec.particles:<5d} "
                f"| bursts={rec.bursts_total} | {rec.frame_time_ms:.2f} ms"
            )

    show.cancel()
    return metrics


def main():
    parser = argparse.ArgumentParser(description="Headless firework simulation run")
    parser.add_argument("--frames", type=int, default=C.HEADLESS_FRAMES, help="Frames to simulate")
    parser.add_argument("--fps", type=int, default=C.FPS, help="Simulated frame rate (drives the auto-fire clock)")
    parser.add_argument("--width", type=int, default=C.WIDTH)
    parser.add_argument("--height", type=int, default=C.HEIGHT)
    parser.add_argument("--seed", type=int, default=None, help="Seed the random source")
    parser.add_argument("--no-autofire", action="store_true", dest="no_autofire", help="Disable the ambient show")
    parser.add_argument("--clicks-every", type=int, default=0, dest="clicks_every", help="Simulate a targeted click every N frames")
    parser.add_argument("--render", action="store_true", help="Also render each frame to an off-screen canvas")
    parser.add_argument("--max-particles", type=int, default=C.MAX_LIVE_PARTICLES, dest="max_particles")
    parser.add_argument("--log-every", type=int, default=600, dest="log_every", help="Log engine load every N frames")
    parser.add_argument("--log-level", type=str, default=C.LOG_LEVEL, dest="log_level")
    args = parser.parse_args()

    setup_logging(args.log_level)
    metrics = RunMetrics(run_tag="headless")
    try:
        run_headless(
            args.frames,
            width=args.width,
            height=args.height,
            fps=args.fps,
            seed=args.seed,
            autofire=not args.no_autofire,
            clicks_every=args.clicks_every,
            render=args.render,
            max_particles=args.max_particles,
            log_every=args.log_every,
            metrics=metrics,
        )
    except KeyboardInterrupt:
        logger.info("Run interrupted by user; exporting metrics...")
    finally:
        paths = metrics.finalize_and_export(
            out_dir=C.REPORTS_DIR,
            export_csv=C.EXPORT_CSV,
            export_json=C.EXPORT_JSON,
        )

    summary = metrics.summary()
    logger.info(
        f"{summary['frames']} frames | mean {summary['mean_frame_ms']:.2f} ms | p95 {summary['p95_frame_ms']:.2f} ms "
        f"| peak particles {summary['peak_particles']} | bursts {summary['bursts']} | evicted {summary['evicted']}"
    )
    for p in paths:
        logger.info(f"Wrote {p}")


if __name__ == "__main__":
    main()
