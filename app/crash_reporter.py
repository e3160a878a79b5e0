from __future__ import annotations
import sys, time, traceback
from pathlib import Path
from typing import Optional

ROOT = Path(__file__).resolve().parents[1]

def _now_stamp() -> str:
    return time.strftime("%Y%m%d_%H%M%S", time.localtime())

def write_report(exc_type, exc, tb, outdir: Optional[Path] = None) -> Path:
    outdir = Path(outdir) if outdir is not None else ROOT / "out" / "crash_reports"
    outdir.mkdir(parents=True, exist_ok=True)
    p = outdir / f"crash_{_now_stamp()}.txt"

    from app.diagnostics import as_text as _diag
    from app.log_buffer import tail

    trace = "".join(traceback.format_exception(exc_type, exc, tb))

    p.write_text(
        "MOOD TRANSLATOR CRASH REPORT\n"
        f"timestamp={_now_stamp()}\n"
        f"argv={sys.argv}\n"
        "\n--- diagnostics ---\n"
        + _diag() +
        "\n--- recent log ---\n"
        + "".join(tail(250)) +
        "\n--- traceback ---\n"
        + trace,
        encoding="utf-8",
        errors="ignore",
    )
    return p

def install_global():
    def _hook(exc_type, exc, tb):
        try:
            rp = write_report(exc_type, exc, tb)
            sys.stderr.write(f"\n[Mood] Crash report written: {rp}\n")
        except OSError as e:
            sys.stderr.write(f"\n[Mood] Crash report failed: {e}\n")
        # also print default
        sys.__excepthook__(exc_type, exc, tb)
    sys.excepthook = _hook
