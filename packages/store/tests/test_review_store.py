"""Tests for the in-memory review store."""

from __future__ import annotations

import copy
from datetime import datetime, timezone

import pytest

from leadstream_core.models import ReviewStatus, TriagedComment
from leadstream_store.filters import LeadFilter, StatusFilter
from leadstream_store.memory import ReviewStore


def _make_comment(external_id="c1", is_lead=True, status=ReviewStatus.UNREAD):
    return TriagedComment(
        external_id=external_id,
        author_name=f"author-{external_id}",
        text="Do you know a good buyer agent?",
        item_label="Top 5 Neighborhoods",
        published_at=datetime(2024, 5, 1, tzinfo=timezone.utc),
        avatar_ref="",
        is_lead=is_lead,
        rationale="Asks for an agent.",
        suggested_reply="Happy to help!",
        review_status=status,
    )


def _mixed_store() -> ReviewStore:
    store = ReviewStore()
    store.replace_all(
        [
            _make_comment("lead-unread-1"),
            _make_comment("lead-replied", status=ReviewStatus.REPLIED),
            _make_comment("general-unread", is_lead=False),
            _make_comment("lead-unread-2"),
        ]
    )
    return store


# ---------------------------------------------------------------------------
# replace_all
# ---------------------------------------------------------------------------


class TestReplaceAll:
    def test_view_returns_batch_in_order(self):
        batch = [_make_comment("b"), _make_comment("a"), _make_comment("c")]
        store = ReviewStore()
        store.replace_all(batch)
        assert store.view(StatusFilter.ANY, LeadFilter.ANY) == batch

    def test_empty_batch(self):
        store = _mixed_store()
        store.replace_all([])
        assert store.view() == []
        assert len(store) == 0

    def test_replaces_rather_than_merges(self):
        store = _mixed_store()
        store.replace_all([_make_comment("fresh")])
        assert [c.external_id for c in store.view()] == ["fresh"]

    def test_duplicate_ids_rejected_and_store_untouched(self):
        store = _mixed_store()
        before = store.view()
        with pytest.raises(ValueError):
            store.replace_all([_make_comment("x"), _make_comment("x")])
        assert store.view() == before

    def test_accepts_any_iterable(self):
        store = ReviewStore()
        store.replace_all(_make_comment(str(i)) for i in range(3))
        assert len(store) == 3

    def test_later_batch_wins(self):
        store = ReviewStore()
        store.replace_all([_make_comment("first-run")])
        store.replace_all([_make_comment("second-run")])
        assert store.get("first-run") is None
        assert store.get("second-run") is not None


# ---------------------------------------------------------------------------
# toggle_replied
# ---------------------------------------------------------------------------


class TestToggleReplied:
    def test_flips_status(self):
        store = _mixed_store()
        updated = store.toggle_replied("lead-unread-1")
        assert updated.review_status is ReviewStatus.REPLIED
        assert store.get("lead-unread-1").review_status is ReviewStatus.REPLIED

    def test_twice_restores_original_status(self):
        store = _mixed_store()
        for external_id in ("lead-unread-1", "lead-replied"):
            original = store.get(external_id).review_status
            store.toggle_replied(external_id)
            store.toggle_replied(external_id)
            assert store.get(external_id).review_status is original

    def test_absent_id_is_noop(self):
        store = _mixed_store()
        before = copy.deepcopy(store.view())
        assert store.toggle_replied("does-not-exist") is None
        assert store.view() == before

    def test_only_target_changes_and_order_kept(self):
        store = _mixed_store()
        before = store.view()
        store.toggle_replied("general-unread")
        after = store.view()
        assert [c.external_id for c in after] == [c.external_id for c in before]
        assert [a == b for a, b in zip(before, after)] == [True, True, False, True]

    def test_previously_returned_records_are_not_mutated(self):
        store = _mixed_store()
        held = store.get("lead-unread-1")
        store.toggle_replied("lead-unread-1")
        assert held.review_status is ReviewStatus.UNREAD

    def test_toggle_after_reload_of_other_batch_is_noop(self):
        store = _mixed_store()
        store.replace_all([_make_comment("fresh")])
        assert store.toggle_replied("lead-unread-1") is None
        assert store.get("fresh").review_status is ReviewStatus.UNREAD


# ---------------------------------------------------------------------------
# view / count
# ---------------------------------------------------------------------------


class TestView:
    def test_unread_leads_only(self):
        store = _mixed_store()
        result = store.view(StatusFilter.UNREAD, LeadFilter.LEADS)
        assert [c.external_id for c in result] == ["lead-unread-1", "lead-unread-2"]

    def test_replied(self):
        store = _mixed_store()
        assert [c.external_id for c in store.view(StatusFilter.REPLIED)] == ["lead-replied"]

    def test_leads_any_status(self):
        store = _mixed_store()
        result = store.view(lead=LeadFilter.LEADS)
        assert [c.external_id for c in result] == ["lead-unread-1", "lead-replied", "lead-unread-2"]

    def test_view_reflects_live_store(self):
        store = _mixed_store()
        store.toggle_replied("lead-unread-1")
        result = store.view(StatusFilter.UNREAD, LeadFilter.LEADS)
        assert [c.external_id for c in result] == ["lead-unread-2"]

    def test_view_returns_a_copy(self):
        store = _mixed_store()
        store.view().clear()
        assert len(store) == 4


class TestCount:
    def test_count_all(self):
        assert _mixed_store().count() == 4

    def test_count_predicate(self):
        assert _mixed_store().count(lambda c: not c.is_lead) == 1

    def test_unread_leads_tracks_toggles(self):
        store = _mixed_store()
        assert store.unread_leads() == 2
        store.toggle_replied("lead-unread-2")
        assert store.unread_leads() == 1
        store.toggle_replied("lead-replied")
        assert store.unread_leads() == 2

    def test_empty_store(self):
        store = ReviewStore()
        assert store.count() == 0
        assert store.unread_leads() == 0
