#!/usr/bin/env python3
import importlib, sys, traceback, io
from pathlib import Path

# --- Ensure the repo root is on sys.path ---
ROOT = Path(__file__).resolve().parent.parent  # repo root = parent of scripts/
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

OK = "\x1b[92mOK\x1b[0m"
BAD = "\x1b[91mERR\x1b[0m"

def check(name, fn):
    try:
        fn()
        print(f"[{OK}] {name}")
    except Exception as e:
        print(f"[{BAD}] {name}: {e}")
        traceback.print_exc()
        sys.exit(1)

def test_layouts():
    layouts = importlib.import_module("envs.layouts")
    for name in layouts.LAYOUTS:
        grid = layouts.get_layout(name)
        assert grid.shape == (12, 24)

def test_planner():
    A = importlib.import_module("planners.a_star").AStarPlanner()
    from envs.layouts import single_target_grid
    grid = single_target_grid()
    res = A.plan(grid, grid.find_start(), grid.find_goals()[0])
    assert isinstance(res, dict) and res["success"]

def test_missions():
    missions = importlib.import_module("missions")
    from envs.layouts import multi_target_grid
    out = missions.run_multi_target(multi_target_grid(), verbose=False)
    assert out.metrics.targets_reached == len(out.goals)

def test_render():
    from viz.terminal import TerminalRenderer, FrameSnapshot
    from envs.layouts import single_target_grid
    from eval.metrics import PerformanceMetrics
    buf = io.StringIO()
    TerminalRenderer(stream=buf, clear=False)(FrameSnapshot.capture(single_target_grid(), PerformanceMetrics()))
    assert "Performance Metrics" in buf.getvalue()

def test_cli_help():
    import subprocess
    for mod in ["cli.run_single", "cli.run_multi"]:
        r = subprocess.run([sys.executable, "-m", mod, "--help"], cwd=str(ROOT),
                           stdout=subprocess.PIPE, stderr=subprocess.STDOUT)
        assert r.returncode == 0, f"{mod} --help failed"

if __name__ == "__main__":
    check("envs.layouts", test_layouts)
    check("planners", test_planner)
    check("missions", test_missions)
    check("viz.terminal", test_render)
    check("CLIs --help", test_cli_help)
    print(f"[{OK}] All self-checks passed.")
