"""Unit tests for RangePlanner."""

from chat_pager.config import PaginationSettings
from chat_pager.infra.synthetic.generator import generate_messages
from chat_pager.models.range import LoadRange, PageBounds
from chat_pager.models.window import MergeDirection
from chat_pager.services.message_window import MessageWindow
from chat_pager.services.range_planner import RangePlanner


class TestViewportRanges:
    """Tests for initial, near-bottom and near-top ranges."""

    def test_initial_range(self, planner: RangePlanner) -> None:
        assert planner.initial() == LoadRange(start=1, end=20)

    def test_initial_range_uses_settings(self, window: MessageWindow) -> None:
        settings = PaginationSettings(initial_load_count=50, first_message_id=100)
        planner = RangePlanner(window, settings)

        assert planner.initial() == LoadRange(start=100, end=149)

    def test_after_on_empty_window(self, planner: RangePlanner) -> None:
        assert planner.after(20) == LoadRange(start=21, end=40)

    def test_after_skips_loaded_ids(self, window: MessageWindow, planner: RangePlanner) -> None:
        window.merge(generate_messages(1, 20), MergeDirection.APPEND)

        assert planner.after(15) == LoadRange(start=21, end=40)

    def test_after_stops_before_next_loaded(
        self,
        window: MessageWindow,
        planner: RangePlanner,
    ) -> None:
        window.merge(generate_messages(1, 20), MergeDirection.APPEND)
        window.merge(generate_messages(30, 11), MergeDirection.APPEND)

        assert planner.after(20) == LoadRange(start=21, end=29)

    def test_after_fills_gap_from_visible_edge(
        self,
        window: MessageWindow,
        planner: RangePlanner,
    ) -> None:
        window.merge(generate_messages(1, 20), MergeDirection.APPEND)
        window.merge(generate_messages(990, 21), MergeDirection.APPEND)

        assert planner.after(20) == LoadRange(start=21, end=40)
        assert planner.after(1010) == LoadRange(start=1011, end=1030)

    def test_before_goes_past_origin(self, window: MessageWindow, planner: RangePlanner) -> None:
        window.merge(generate_messages(1, 20), MergeDirection.APPEND)

        assert planner.before(1) == LoadRange(start=-19, end=0)

    def test_before_stops_after_previous_loaded(
        self,
        window: MessageWindow,
        planner: RangePlanner,
    ) -> None:
        window.merge(generate_messages(1, 20), MergeDirection.APPEND)
        window.merge(generate_messages(30, 11), MergeDirection.APPEND)

        assert planner.before(30) == LoadRange(start=21, end=29)

    def test_before_on_empty_window(self, planner: RangePlanner) -> None:
        assert planner.before(990) == LoadRange(start=970, end=989)


class TestJumpRange:
    """Tests for the bounding range around a jump target."""

    def test_around_target(self, planner: RangePlanner) -> None:
        assert planner.around(1000) == LoadRange(start=990, end=1010)

    def test_around_clamps_lower_bound(self, planner: RangePlanner) -> None:
        load_range = planner.around(5)

        assert load_range == LoadRange(start=1, end=15)

    def test_around_never_starts_below_one(self, planner: RangePlanner) -> None:
        for target in range(-9, 12):
            load_range = planner.around(target)
            assert load_range is not None
            assert load_range.start >= 1

    def test_around_far_below_origin(self, planner: RangePlanner) -> None:
        assert planner.around(-50) is None

    def test_around_uses_radius(self, window: MessageWindow) -> None:
        planner = RangePlanner(window, PaginationSettings(jump_radius=3))

        assert planner.around(100) == LoadRange(start=97, end=103)


class TestPageBounds:
    """Tests for page bounds of a range."""

    def test_page_bounds_for_jump(self, planner: RangePlanner) -> None:
        bounds = planner.page_bounds_for(LoadRange(start=990, end=1010))

        assert bounds == PageBounds(lower_page=49, upper_page=50)

    def test_page_bounds_clamped_at_zero(self, planner: RangePlanner) -> None:
        bounds = planner.page_bounds_for(LoadRange(start=-19, end=0))

        assert bounds == PageBounds(lower_page=0, upper_page=0)
