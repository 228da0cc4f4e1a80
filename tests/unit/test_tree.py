"""
Unit tests for the drill-down view model.
"""

from activity_logs import (
    ExpansionState,
    LogRecord,
    action_path,
    build_tree,
    category_path,
    group_records,
    record_path,
)


def _view(raw_logs):
    return group_records([LogRecord.from_dict(r) for r in raw_logs])


class TestBuildTree:
    """Tests for disclosure at each level."""

    def test_collapsed_tree_lists_categories_only(self, raw_logs):
        """With nothing expanded only categories and their counts are shown."""
        tree = build_tree(_view(raw_logs), ExpansionState())

        assert [node.name for node in tree] == ["Administrative", "Uncategorized"]
        assert [node.count for node in tree] == [2, 1]
        assert all(node.actions == [] for node in tree)

    def test_expanded_category_lists_actions(self, raw_logs):
        """An expanded category lists its actions, collapsed."""
        state = ExpansionState()
        state.toggle_group(category_path("Administrative"))

        admin = build_tree(_view(raw_logs), state)[0]

        assert admin.expanded is True
        assert [(a.name, a.label, a.count) for a in admin.actions] == [("write", "Write", 2)]
        assert admin.actions[0].records == []

    def test_expanded_action_lists_records(self, raw_logs):
        """An expanded action lists its records without details."""
        state = ExpansionState()
        state.toggle_group(category_path("Administrative"))
        state.toggle_group(action_path("Administrative", "write"))

        records = build_tree(_view(raw_logs), state)[0].actions[0].records

        assert [r.index for r in records] == [0, 1]
        assert records[0].path == record_path("Administrative", "write", 0)
        assert records[0].details is None

    def test_expanded_record_has_details(self, raw_logs):
        """Only the expanded record carries detail fields."""
        state = ExpansionState()
        state.toggle_group(category_path("Administrative"))
        state.toggle_group(action_path("Administrative", "write"))
        state.toggle_record(record_path("Administrative", "write", 1))

        records = build_tree(_view(raw_logs), state)[0].actions[0].records

        assert records[0].expanded is False
        assert records[1].expanded is True
        assert records[1].details["caller"] == "bob@example.com"

    def test_reexpanding_restores_descendants(self, raw_logs):
        """Collapsing then re-expanding a category brings back its open action."""
        state = ExpansionState()
        state.toggle_group(category_path("Administrative"))
        state.toggle_group(action_path("Administrative", "write"))

        state.toggle_group(category_path("Administrative"))
        collapsed = build_tree(_view(raw_logs), state)[0]
        state.toggle_group(category_path("Administrative"))
        reopened = build_tree(_view(raw_logs), state)[0]

        assert collapsed.actions == []
        assert reopened.actions[0].expanded is True
        assert len(reopened.actions[0].records) == 2

    def test_action_open_under_collapsed_category_is_hidden(self, raw_logs):
        """An expanded action stays hidden while its category is collapsed."""
        state = ExpansionState()
        state.toggle_group(action_path("Administrative", "write"))

        admin = build_tree(_view(raw_logs), state)[0]

        assert admin.expanded is False
        assert admin.actions == []

    def test_lookalike_category_stays_collapsed(self):
        """Category "A|action:b" is not expanded by opening action "b" under "A"."""
        view = group_records([
            LogRecord.from_dict({"properties": {"eventCategory": "A", "message": "x/b"}}),
            LogRecord.from_dict({"properties": {"eventCategory": "A|action:b", "message": "x/c"}}),
        ])
        state = ExpansionState()
        state.toggle_group(category_path("A"))
        state.toggle_group(action_path("A", "b"))

        tree = build_tree(view, state)

        assert tree[0].expanded is True
        assert tree[1].name == "A|action:b"
        assert tree[1].expanded is False

    def test_empty_view(self):
        """An empty view builds an empty tree."""
        assert build_tree({}, ExpansionState()) == []

    def test_to_dict(self, raw_logs):
        """Nodes serialize to nested dicts."""
        state = ExpansionState()
        state.toggle_group(category_path("Uncategorized"))

        data = [node.to_dict() for node in build_tree(_view(raw_logs), state)]

        assert data[1]["name"] == "Uncategorized"
        assert data[1]["actions"][0]["name"] == "other"
        assert data[1]["actions"][0]["records"] == []
