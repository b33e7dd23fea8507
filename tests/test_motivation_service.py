"""Tests for motivational message selection."""

import random
from dataclasses import replace

import pytest

from weight_tracker.domain.motivation import Mood
from weight_tracker.domain.stats import Stats
from weight_tracker.services.motivation import (
    GOAL_ACHIEVED_MESSAGE,
    MESSAGE_POOLS,
    MotivationService,
    choose_moods,
    draw_template,
    render,
)
from tests.conftest import NOW, make_profile


def _stats(**overrides: object) -> Stats:
    base = Stats(
        current_weight=78.0,
        total_change=-2.0,
        days_tracked=14,
        weekly_trend=-1.0,
        goal_progress=20.0,
        streak=4,
        start_weight=80.0,
        goal_weight=70.0,
        remaining_to_goal=8.0,
        entry_count=10,
        latest_entry_date=NOW,
    )
    return replace(base, **overrides)


def test_not_logged_today_is_neutral() -> None:
    assert choose_moods(_stats(), make_profile(), logged_today=False) == (Mood.NEUTRAL,)


def test_goal_reached_wins_over_trend() -> None:
    stats = _stats(current_weight=69.5, weekly_trend=0.5)

    assert choose_moods(stats, make_profile(), logged_today=True) == (
        Mood.GOAL_ACHIEVED,
    )


def test_losing_draws_from_celebrate_and_good() -> None:
    moods = choose_moods(_stats(weekly_trend=-0.4), make_profile(), logged_today=True)

    assert moods == (Mood.CELEBRATE, Mood.GOOD)


def test_gaining_with_goal_warns() -> None:
    moods = choose_moods(_stats(weekly_trend=0.3), make_profile(), logged_today=True)

    assert moods == (Mood.WARNING,)


@pytest.mark.parametrize(
    ("trend", "goal"),
    [(0.3, None), (0.0, 70.0), (0.0, None)],
)
def test_otherwise_good_or_neutral(trend: float, goal: float | None) -> None:
    stats = _stats(weekly_trend=trend, goal_weight=goal)

    moods = choose_moods(stats, make_profile(goal_weight=goal), logged_today=True)

    assert moods == (Mood.GOOD, Mood.NEUTRAL)


def test_goal_achieved_message_is_fixed() -> None:
    mood, template = draw_template((Mood.GOAL_ACHIEVED,), random.Random(3))

    assert mood is Mood.GOAL_ACHIEVED
    assert template == GOAL_ACHIEVED_MESSAGE


def test_draw_stays_within_selected_pools() -> None:
    rng = random.Random(11)
    allowed = set(MESSAGE_POOLS[Mood.CELEBRATE]) | set(MESSAGE_POOLS[Mood.GOOD])

    drawn = {draw_template((Mood.CELEBRATE, Mood.GOOD), rng) for _ in range(200)}

    assert {template for _, template in drawn} <= allowed
    assert {mood for mood, _ in drawn} == {Mood.CELEBRATE, Mood.GOOD}


def test_every_template_renders() -> None:
    stats = _stats()
    profile = make_profile()
    for templates in MESSAGE_POOLS.values():
        for template in templates:
            assert "{" not in render(template, stats, profile)
    assert "70.0" in render(GOAL_ACHIEVED_MESSAGE, stats, profile)


def test_render_without_goal() -> None:
    stats = _stats(goal_weight=None, remaining_to_goal=None)
    profile = make_profile(goal_weight=None)

    for template in MESSAGE_POOLS[Mood.WARNING]:
        assert render(template, stats, profile)


def test_motivate_returns_none_without_stats() -> None:
    service = MotivationService(rng=random.Random(0))

    assert service.motivate(None, make_profile(), logged_today=True) is None
    assert service.motivate(_stats(), None, logged_today=True) is None


def test_motivate_is_reproducible_with_seeded_rng() -> None:
    first = MotivationService(rng=random.Random(5)).motivate(
        _stats(), make_profile(), logged_today=True
    )
    second = MotivationService(rng=random.Random(5)).motivate(
        _stats(), make_profile(), logged_today=True
    )

    assert first == second
    assert first is not None
    assert first.mood in {Mood.CELEBRATE, Mood.GOOD}
