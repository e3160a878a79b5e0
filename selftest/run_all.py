"""Run all selftests without pytest.

Usage:
  python -m selftest.run_all
"""

import importlib


TEST_MODULES = [
    'selftest.test_shader_math',
    'selftest.test_noise',
    'selftest.test_bounded_log',
    'selftest.test_integrators',
    'selftest.test_vector_fields',
    'selftest.test_mood_mapping',
    'selftest.test_params',
    'selftest.test_simulation',
    'selftest.test_headless',
    'selftest.test_core_bridge',
    'selftest.test_app_services',
]


def main():
    failures = []
    ran = 0
    for modname in TEST_MODULES:
        m = importlib.import_module(modname)
        for name in sorted(dir(m)):
            fn = getattr(m, name)
            if not name.startswith("test_") or not callable(fn):
                continue
            ran += 1
            try:
                fn()
            except Exception as e:
                failures.append((f"{modname}.{name}", e))

    if failures:
        print("\nFAILED:")
        for name, e in failures:
            print(f"- {name}: {e!r}")
        raise SystemExit(1)

    print(f"\nOK: all {ran} selftests passed")


if __name__ == "__main__":
    main()
