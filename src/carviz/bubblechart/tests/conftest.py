"""
--------------------------------------------------------------------------------
<carviz project>
src/carviz/bubblechart/tests/conftest.py

Shared fixtures for bubblechart tests.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Callable

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402
import yaml  # noqa: E402

HEADER = ["Name", "Type", "Horsepower(HP)", "Retail Price", "Weight"]


def _car(name: str, type_: str, hp, price, weight) -> dict:
    return {"Name": name, "Type": type_, "Horsepower(HP)": hp, "Retail Price": price, "Weight": weight}


def _write_csv(path: Path, rows: list[dict], header: list[str] | None = None) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=header or HEADER, extrasaction="ignore")
        writer.writeheader()
        for row in rows:
            writer.writerow(row)
    return path


def _write_yaml(path: Path, payload: dict) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(payload, sort_keys=False))
    return path


@pytest.fixture
def make_car() -> Callable[..., dict]:
    return _car


@pytest.fixture
def write_csv() -> Callable[..., Path]:
    return _write_csv


@pytest.fixture
def write_yaml() -> Callable[..., Path]:
    return _write_yaml


@pytest.fixture
def car_rows() -> list[dict]:
    return [
        _car("Aveo", "Sedan", "103", "11690", "2370"),
        _car("Explorer", "SUV", "210", "29670", "4463"),
        _car("Camry", "Sedan", "157", "19560", "3086"),
        _car("911", "Sports Car", "315", "79165", "3135"),
        _car("Odyssey", "Minivan", "240", "24950", "4310"),
        _car("Titan", "Pickup", "305", "26650", ""),
        _car("H2", "SUV", "NaN", "49995", "6400"),
    ]


@pytest.fixture
def cars_csv(tmp_path, car_rows) -> Path:
    return _write_csv(tmp_path / "cars.csv", car_rows)


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


@pytest.fixture(autouse=True)
def _restore_root_logging():
    # the CLI callback swaps root handlers for one bound to the runner's stderr
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
