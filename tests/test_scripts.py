import os
import runpy

import pytest

SCRIPTS = os.path.join(os.path.dirname(__file__), "..", "scripts")


def test_compare_rejects_length_not_below_rows(monkeypatch):
    path = os.path.join(SCRIPTS, "compare_pandas_rolling.py")
    monkeypatch.setattr("sys.argv", [path, "--rows", "10", "--length", "10"])
    with pytest.raises(SystemExit, match=r"^\[X\] --length must be < --rows$"):
        runpy.run_path(path, run_name="__main__")
