# Qt entry for `python -m app`
from app.diagnostics import register_sim
from qt.core_bridge import CoreBridge
from qt.qt_app import run_qt

def main() -> None:
    core = CoreBridge()
    register_sim(core.sim.stats)
    run_qt(core)

if __name__ == "__main__":
    main()
