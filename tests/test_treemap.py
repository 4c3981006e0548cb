"""Tests for per-asset treemap data."""

import pytest

from bundlescope.visualization.treemap import (
    asset_label,
    asset_module_paths,
    build_asset_tree,
    build_treemap_data,
    select_assets,
    summarize_assets,
)


class TestSelectAssets:
    def test_none_selects_all(self, bundle):
        assert select_assets(bundle) == ["main.js", "vendor.js", "js/lazy.js"]

    def test_keeps_chunks_list_order(self, bundle):
        assert select_assets(bundle, ["js/lazy.js", "main.js"]) == ["main.js", "js/lazy.js"]

    def test_unknown_names_ignored(self, bundle):
        assert select_assets(bundle, ["nope.js", "vendor.js"]) == ["vendor.js"]

    def test_empty_selection(self, bundle):
        assert select_assets(bundle, []) == []
        assert build_treemap_data(bundle, []) == []


class TestAssetModulePaths:
    def test_strips_relative_prefix(self, bundle):
        assert asset_module_paths(bundle, "main.js") == [
            "src/index.js",
            "src/util/math.js",
            "src/util/format.js",
        ]

    def test_unique_across_chunks(self, bundle):
        paths = asset_module_paths(bundle, "js/lazy.js")
        assert paths.count("src/util/math.js") == 1
        assert len(paths) == 4

    def test_unknown_asset(self, bundle):
        with pytest.raises(KeyError):
            asset_module_paths(bundle, "missing.js")


class TestBuildAssetTree:
    def test_root_named_after_asset_file(self, bundle):
        root = build_asset_tree(bundle, "js/lazy.js")
        assert root.name == "lazy.js"
        assert root.path == "lazy.js"
        assert root.value is None

    def test_main_tree(self, bundle):
        root = build_asset_tree(bundle, "main.js")
        (src,) = root.children
        assert src.name == "src"
        index, util = src.children
        assert (index.name, index.value) == ("index.js", 300)
        assert util.name == "util"
        assert [(c.name, c.value) for c in util.children] == [("format.js", 50), ("math.js", 150)]

    def test_vendor_tree_is_compacted(self, bundle):
        root = build_asset_tree(bundle, "vendor.js")
        lodash, math = root.children
        assert (lodash.name, lodash.path) == ("node_modules/lodash", "node_modules/lodash")
        assert [c.name for c in lodash.children] == ["_base.js", "lodash.js"]
        assert (math.name, math.value) == ("src/util/math.js", 150)

    def test_leaf_total_matches_stat_size(self, bundle):
        for asset in bundle.assets:
            assert build_asset_tree(bundle, asset.name).leaf_total() == asset.stat_size


class TestBuildTreemapData:
    def test_one_root_per_asset(self, bundle):
        data = build_treemap_data(bundle)
        assert [root["name"] for root in data] == ["main.js", "vendor.js", "lazy.js"]

    def test_node_shape(self, bundle):
        (root,) = build_treemap_data(bundle, ["main.js"])
        assert set(root) == {"name", "path", "children"}
        leaf = root["children"][0]["children"][0]
        assert leaf == {"name": "index.js", "path": "src/index.js", "value": 300, "children": []}


class TestSummarizeAssets:
    def test_sorted_by_stat_size(self, bundle, expected_stat_sizes):
        rows = summarize_assets(bundle)
        assert [r.name for r in rows] == ["js/lazy.js", "vendor.js", "main.js"]
        assert [r.stat_size for r in rows] == sorted(expected_stat_sizes.values(), reverse=True)

    def test_entry_flags_and_labels(self, bundle):
        rows = {r.name: r for r in summarize_assets(bundle)}
        assert rows["main.js"].is_entry
        assert rows["vendor.js"].is_entry
        assert not rows["js/lazy.js"].is_entry
        assert rows["js/lazy.js"].label == "lazy.js"
        assert rows["vendor.js"].size == 9216


def test_asset_label():
    assert asset_label("static/js/main.3f2a.js") == "main.3f2a.js"
    assert asset_label("main.js") == "main.js"
