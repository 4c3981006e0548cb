"""Shared test fixtures for Bundlescope tests."""

import copy
import json
import os

import pytest

from bundlescope.analysis import load
from bundlescope.stats import normalize_stats

# Trimmed-down webpack stats: three script assets, a stylesheet and a
# source map, with a module shared between chunks plus runtime, external,
# delegated and extracted-css entries that must not count.
SAMPLE_STATS = {
    "hash": "4f2c1b0e9d",
    "version": "5.88.2",
    "time": 1432,
    "outputPath": "/srv/app/dist",
    "assetsByChunkName": {
        "main": ["main.js", "main.js.map"],
        "vendor": ["vendor.js"],
        "styles": ["styles.css"],
    },
    "assets": [
        {
            "type": "asset",
            "name": "main.js",
            "size": 5120,
            "chunks": [0],
            "chunkNames": ["main"],
            "emitted": True,
            "info": {"javascriptModule": False},
        },
        {"type": "asset", "name": "vendor.js", "size": 9216, "chunks": [1], "chunkNames": ["vendor"]},
        {"type": "asset", "name": "js/lazy.js", "size": 812, "chunks": [2, 1], "chunkNames": []},
        {"type": "asset", "name": "styles.css", "size": 310, "chunks": [3], "chunkNames": ["styles"]},
        {"type": "asset", "name": "main.js.map", "size": 20480, "chunks": [0], "chunkNames": ["main"]},
    ],
    "chunks": [
        {
            "id": 0,
            "size": 500,
            "names": ["main"],
            "entry": True,
            "modules": [
                {
                    "name": "./src/index.js",
                    "id": 1,
                    "size": 300,
                    "type": "module",
                    "moduleType": "javascript/auto",
                    "depth": 0,
                    "index": 0,
                    "chunks": [0],
                    "reasons": [{"type": "entry"}],
                    "source": "import './util/math'",
                },
                {"name": "./src/util/math.js", "id": 2, "size": 150, "moduleType": "javascript/auto", "depth": 1},
                {"name": "./src/util/format.js", "id": 3, "size": 50, "moduleType": "javascript/auto", "depth": 1},
                {"name": "webpack/runtime/define property getters", "id": "rt1", "size": 308, "moduleType": "runtime"},
                {"name": 'external "react"', "id": 4, "size": 42, "moduleType": "javascript/dynamic"},
            ],
        },
        {
            "id": 1,
            "size": 6150,
            "modules": [
                {"name": "./node_modules/lodash/lodash.js", "id": 10, "size": 5000, "depth": 2},
                {"name": "./node_modules/lodash/_base.js", "id": 11, "size": 1000, "depth": 3},
                {"name": "./src/util/math.js", "id": 2, "size": 150, "depth": 1},
            ],
        },
        {
            "id": 2,
            "size": 550,
            "modules": [
                {"name": "./src/lazy/page.js", "id": 20, "size": 400, "depth": 1},
                {"name": "./src/util/math.js", "id": 2, "size": 150, "depth": 1},
            ],
        },
        {
            "id": 3,
            "size": 120,
            "modules": [
                {"name": "css ./src/style.css", "id": 30, "size": 100, "moduleType": "css/mini-extract"},
                {"name": "./src/style.css", "id": 31, "size": 20},
            ],
        },
    ],
    "modules": [
        {"name": "./src/index.js", "id": 1, "size": 300, "moduleType": "javascript/auto", "issuer": None},
        {"name": "delegated ./shared.js from dll-reference vendor_lib", "id": 50, "size": 10},
        {"name": "./src/only-top.js", "id": 99, "size": 7},
    ],
}

# Expected stat sizes for SAMPLE_STATS
EXPECTED_STAT_SIZES = {
    "main.js": 300 + 150 + 50,
    "vendor.js": 5000 + 1000 + 150,
    "js/lazy.js": 400 + 150 + 5000 + 1000,
}


@pytest.fixture
def stats():
    """A fresh deep copy of the sample stats object."""
    return copy.deepcopy(SAMPLE_STATS)


@pytest.fixture
def payload(stats):
    """Normalized payload for the sample stats."""
    return normalize_stats(stats)


@pytest.fixture
def bundle(payload):
    """Loaded BundleData for the sample stats."""
    return load(payload)


@pytest.fixture
def expected_stat_sizes():
    return dict(EXPECTED_STAT_SIZES)


@pytest.fixture
def stats_file(tmp_path, stats):
    """Sample stats written to disk, with outputPath inside tmp_path."""
    stats["outputPath"] = str(tmp_path / "dist")
    path = tmp_path / "stats.json"
    path.write_text(json.dumps(stats), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user and project config files and BUNDLESCOPE_* variables out of tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("BUNDLESCOPE_"):
            monkeypatch.delenv(key)
