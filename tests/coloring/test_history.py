"""Tests for snapshot history."""

from chromagraph.coloring.history import ColoringHistory
from chromagraph.coloring.recolor import recolor

RED = "#FF0000"
GREEN = "#00FF00"


class TestColoringHistory:
    def test_start(self, path_graph):
        history = ColoringHistory.start(path_graph)

        assert history.current is path_graph
        assert not history.can_undo
        assert not history.can_redo

    def test_record_and_undo(self, path_graph):
        history = ColoringHistory.start(path_graph)
        colored = recolor(path_graph, "a", RED)

        history = history.record(colored)
        assert history.current is colored

        history = history.undo()
        assert history.current is path_graph
        assert history.can_redo

    def test_redo(self, path_graph):
        colored = recolor(path_graph, "a", RED)
        history = ColoringHistory.start(path_graph).record(colored).undo()

        assert history.redo().current is colored

    def test_record_after_undo_drops_redo_tail(self, path_graph):
        first = recolor(path_graph, "a", RED)
        second = recolor(first, "b", GREEN)
        history = ColoringHistory.start(path_graph).record(first).record(second)

        branch = recolor(first, "c", GREEN)
        history = history.undo().record(branch)

        assert history.snapshots == (path_graph, first, branch)
        assert not history.can_redo

    def test_operations_do_not_mutate(self, path_graph):
        history = ColoringHistory.start(path_graph)
        history.record(recolor(path_graph, "a", RED))

        assert len(history.snapshots) == 1

    def test_undo_and_redo_at_bounds_are_noops(self, path_graph):
        history = ColoringHistory.start(path_graph)

        assert history.undo() is history
        assert history.redo() is history

    def test_recording_same_snapshot_is_noop(self, path_graph):
        history = ColoringHistory.start(path_graph)

        assert history.record(recolor(path_graph, "missing", RED)) is history

    def test_reset(self, path_graph):
        history = ColoringHistory.start(path_graph).record(
            recolor(path_graph, "a", RED)
        )

        reset = history.reset()
        assert reset.snapshots == (path_graph,)
        assert reset.current is path_graph
