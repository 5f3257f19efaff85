"""Tests for handler metadata lookup and the inclusion filter."""

from __future__ import annotations

import unittest

from assettree.asset_model import (
    FILE_HANDLER_ID,
    Asset,
    AssetType,
    filter_included_file_assets,
    get_handler_metadata,
)


def _file_meta(include: bool) -> list[dict[str, object]]:
    return [{"id": FILE_HANDLER_ID, "include": include}]


class HandlerMetadataTests(unittest.TestCase):
    def test_returns_first_matching_entry(self) -> None:
        first = {"id": "A", "include": True, "size": 1}
        duplicate = {"id": "A", "include": False}
        metadata = [{"id": "B"}, first, duplicate]
        self.assertIs(get_handler_metadata("A", metadata), first)

    def test_missing_inputs_return_none(self) -> None:
        self.assertIsNone(get_handler_metadata("A", None))
        self.assertIsNone(get_handler_metadata("A", []))
        self.assertIsNone(get_handler_metadata(None, [{"id": "A"}]))
        self.assertIsNone(get_handler_metadata("   ", [{"id": "   "}]))

    def test_no_match_returns_none(self) -> None:
        self.assertIsNone(get_handler_metadata("C", [{"id": "A"}, {"id": "B"}]))

    def test_non_mapping_entries_are_skipped(self) -> None:
        entry = {"id": FILE_HANDLER_ID, "include": True}
        self.assertIs(get_handler_metadata(FILE_HANDLER_ID, ["junk", 3, None, entry]), entry)
        self.assertIsNone(get_handler_metadata(FILE_HANDLER_ID, ["junk"]))


class InclusionFilterTests(unittest.TestCase):
    def test_excluded_node_drops_entire_subtree(self) -> None:
        tree = Asset(
            uri="/proj",
            type=AssetType.DIRECTORY,
            children=[
                Asset(
                    uri="/proj/.cache",
                    type=AssetType.DIRECTORY,
                    metadata=_file_meta(False),
                    children=[Asset(uri="/proj/.cache/keep.txt", type=AssetType.FILE, metadata=_file_meta(True))],
                ),
                Asset(uri="/proj/a.py", type=AssetType.FILE, metadata=_file_meta(True)),
            ],
        )
        filtered = filter_included_file_assets(tree)
        self.assertEqual([child.uri for child in filtered.children], ["/proj/a.py"])

    def test_node_without_handler_metadata_is_kept(self) -> None:
        tree = Asset(
            uri="/proj",
            type=AssetType.DIRECTORY,
            children=[
                Asset(uri="/proj/new.py", type=AssetType.FILE),
                Asset(uri="/proj/other.py", type=AssetType.FILE, metadata=[{"id": "Other", "include": False}]),
            ],
        )
        filtered = filter_included_file_assets(tree)
        self.assertEqual([child.uri for child in filtered.children], ["/proj/new.py", "/proj/other.py"])

    def test_entry_without_include_flag_excludes(self) -> None:
        leaf = Asset(uri="/proj/a.py", type=AssetType.FILE, metadata=[{"id": FILE_HANDLER_ID}])
        self.assertIsNone(filter_included_file_assets(leaf))

    def test_excluded_root_returns_none(self) -> None:
        tree = Asset(uri="/proj", type=AssetType.DIRECTORY, metadata=_file_meta(False), children=[])
        self.assertIsNone(filter_included_file_assets(tree))
        self.assertIsNone(filter_included_file_assets(None))

    def test_preserves_survivor_order_at_every_level(self) -> None:
        tree = Asset(
            uri="/p",
            type=AssetType.DIRECTORY,
            children=[
                Asset(uri="/p/a", type=AssetType.FILE),
                Asset(uri="/p/b", type=AssetType.FILE, metadata=_file_meta(False)),
                Asset(
                    uri="/p/c",
                    type=AssetType.DIRECTORY,
                    children=[
                        Asset(uri="/p/c/x", type=AssetType.FILE, metadata=_file_meta(False)),
                        Asset(uri="/p/c/y", type=AssetType.FILE),
                        Asset(uri="/p/c/z", type=AssetType.FILE, metadata=_file_meta(True)),
                    ],
                ),
                Asset(uri="/p/d", type=AssetType.FILE),
            ],
        )
        filtered = filter_included_file_assets(tree)
        self.assertEqual([child.uri for child in filtered.children], ["/p/a", "/p/c", "/p/d"])
        self.assertEqual([child.uri for child in filtered.children[1].children], ["/p/c/y", "/p/c/z"])

    def test_does_not_modify_input(self) -> None:
        excluded = Asset(uri="/p/b", type=AssetType.FILE, metadata=_file_meta(False))
        tree = Asset(uri="/p", type=AssetType.DIRECTORY, children=[Asset(uri="/p/a", type=AssetType.FILE), excluded])
        original_children = tree.children

        filtered = filter_included_file_assets(tree)

        self.assertIsNot(filtered, tree)
        self.assertIs(tree.children, original_children)
        self.assertEqual(len(tree.children), 2)
        self.assertIs(tree.children[1], excluded)

    def test_leaf_without_children_is_returned_as_is(self) -> None:
        leaf = Asset(uri="/p/a.py", type=AssetType.FILE, metadata=_file_meta(True))
        self.assertIs(filter_included_file_assets(leaf), leaf)

    def test_empty_children_list_is_preserved(self) -> None:
        tree = Asset(uri="/p", type=AssetType.DIRECTORY, children=[])
        filtered = filter_included_file_assets(tree)
        self.assertEqual(filtered.children, [])
        self.assertIsNot(filtered, tree)


if __name__ == "__main__":
    unittest.main()
