import argparse
import os
import sys
from datetime import datetime, timezone
from pathlib import Path


def _write_crash_log(exc: BaseException) -> None:
    """Best-effort crash log writer for failures before Qt is up."""
    import traceback
    here = os.path.dirname(os.path.abspath(__file__))
    logs = os.path.join(here, "user_data", "logs")
    try:
        os.makedirs(logs, exist_ok=True)
        ts = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
        path = os.path.join(logs, f"crash_{ts}.log")
        with open(path, "w", encoding="utf-8") as f:
            f.write("Mood Translator crash log\n")
            f.write(f"UTC: {ts}\n\n")
            f.write("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)))
        print(f"[Mood] Crash log written to: {path}", file=sys.stderr)
    except OSError:
        pass


def _parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Mood Translator: particle flow-field casual creator.")
    ap.add_argument("--seed", type=int, default=None, help="RNG seed (particles, marks, noise seed draws)")
    ap.add_argument("--out-dir", type=Path, default=None, help="where S saves PNG exports")
    ap.add_argument("--width", type=int, default=None)
    ap.add_argument("--height", type=int, default=None)
    ap.add_argument("--particles", type=int, default=None, help="base particle count")
    return ap.parse_args(argv)


def main(argv=None) -> None:
    from app.diagnostics import register_sim
    from qt.core_bridge import CoreBridge
    from qt.qt_app import run_qt

    a = _parse_args(argv)
    overrides = {k: v for k, v in (("width", a.width), ("height", a.height), ("base_particles", a.particles)) if v is not None}
    core = CoreBridge(seed=a.seed, config=overrides, out_dir=a.out_dir)
    register_sim(core.sim.stats)
    run_qt(core)


if __name__ == "__main__":
    try:
        main()
    except BaseException as e:
        _write_crash_log(e)
        raise
