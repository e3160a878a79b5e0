from __future__ import annotations

from pathlib import Path
import tempfile

SMALL = {"width": 120, "height": 80, "base_particles": 10}


def _core(**kw):
    from qt.core_bridge import CoreBridge

    return CoreBridge(seed=2, config=SMALL, fixed_dt_ms=16.0, **kw)


def test_readouts_use_default_slider_values():
    core = _core()
    assert core.readouts() == {"energy": "Energy: 28%", "tension": "Tension: 20%", "warmth": "Warmth: 45%"}


def test_set_param_clamps_and_rejects_unknown():
    core = _core()
    core.set_param("energy", 1.5)
    assert core.params.energy == 1.0
    core.set_param("warmth", 0.9)
    assert core.params.warmth == 0.9
    try:
        core.set_param("volume", 0.5)
    except KeyError:
        return
    raise AssertionError("unknown parameter accepted")


def test_tick_and_events_reach_simulation():
    from runtime.draw_list_v1 import DrawList

    core = _core()
    assert core.pointer_move(10.0, 10.0)
    assert not core.pointer_move(500.0, 10.0)
    assert core.pointer_down(60.0, 40.0)
    dl = core.tick(DrawList(120, 80), wall_t=0.0)
    assert dl.count("circle") == 1
    assert core.sim.time_ms == 16.0
    core.reset()
    assert len(core.sim.ripples) == 0 and len(core.sim.lines) == 0


def test_export_paths_do_not_overwrite():
    from qt.core_bridge import next_export_path

    with tempfile.TemporaryDirectory() as d:
        out = Path(d)
        p1 = next_export_path(out)
        assert p1.name == "mood_expression.png"
        p1.write_bytes(b"x")
        p2 = next_export_path(out)
        assert p2.name == "mood_expression_1.png"
        core = _core(out_dir=out / "nested")
        assert core.export_target() == out / "nested" / "mood_expression.png"
