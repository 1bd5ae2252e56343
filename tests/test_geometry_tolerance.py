from __future__ import annotations

import inspect
import re
from pathlib import Path

from smoothpath.geometry import tolerance
from smoothpath.geometry.tolerance import EPS_POS
from smoothpath.path import options, sampling


def test_tolerance_constants_exist() -> None:
    assert EPS_POS > 0.0


def test_modules_reference_shared_tolerance_symbols() -> None:
    assert sampling.EPS_POS == EPS_POS
    assert options.EPS_POS == EPS_POS
    assert inspect.signature(options.HullOptions).parameters["min_padding"].default == tolerance.EPS_POS


def test_package_has_no_inline_scientific_epsilon_literals() -> None:
    root = Path(__file__).resolve().parents[1] / "smoothpath"
    pattern = re.compile(r"\b1e-\d+\b")
    offenders: list[str] = []
    for p in sorted(root.rglob("*.py")):
        if p.name == "tolerance.py":
            continue
        text = p.read_text(encoding="utf-8")
        if pattern.search(text):
            offenders.append(str(p.relative_to(root.parent)))
    assert offenders == []
