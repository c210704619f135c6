"""
Service tests for green scoring and leaderboard ranking.
"""

import asyncio
from types import SimpleNamespace

import pytest

from app.pydantic_models.leaderboard import ScoredCompany
from app.services.rankers.green_score_ranker import (
    GreenScoreRanker,
    compute_green_score,
    rank_entries,
)


def make_profile(user_id, total_distance=1000.0, load_efficiency=0.8, renewable_share=0.5):
    return SimpleNamespace(
        user_id=user_id,
        company_name=f"{user_id} Logistics",
        sector="Road freight",
        total_distance=total_distance,
        load_efficiency=load_efficiency,
        renewable_share=renewable_share,
    )


def make_lookup(records: dict):
    async def lookup(user_id):
        await asyncio.sleep(0)
        record = records.get(user_id)
        if isinstance(record, Exception):
            raise record
        return record

    return lookup


def record(optimized_total):
    return SimpleNamespace(optimized_total=optimized_total)


def test_compute_green_score_example():
    assert compute_green_score(10, 1000, 0.8, 0.5) == pytest.approx(120)


@pytest.mark.parametrize(
    "co2, distance",
    [(0, 1000), (10, 0), (0, 0)],
)
def test_compute_green_score_zero_guard(co2, distance):
    assert compute_green_score(co2, distance, 0.9, 0.7) == 0


def test_compute_green_score_rewards_lower_emissions():
    assert compute_green_score(5, 1000, 0.8, 0.5) > compute_green_score(10, 1000, 0.8, 0.5)


def test_compute_green_score_rewards_renewables():
    assert compute_green_score(10, 1000, 0.8, 0.9) > compute_green_score(10, 1000, 0.8, 0.1)


def test_rank_entries_orders_and_numbers():
    entries = [
        ScoredCompany(
            user_id=name,
            company_name=name,
            sector="Road freight",
            green_score=score,
            co2_emissions=1.0,
            total_distance=1.0,
            load_efficiency=1.0,
            renewable_share=0.0,
        )
        for name, score in [("a", 5.0), ("b", 50.0), ("c", 5.0), ("d", 0.0)]
    ]

    ranked = rank_entries(entries)

    assert [entry.user_id for entry in ranked] == ["b", "a", "c", "d"]
    assert [entry.rank for entry in ranked] == [1, 2, 3, 4]


def test_rank_entries_empty():
    assert rank_entries([]) == []


@pytest.mark.asyncio
async def test_build_leaderboard_excludes_profiles_without_record():
    profiles = [make_profile("alpha"), make_profile("beta"), make_profile("gamma")]
    lookup = make_lookup({"alpha": record(10.0), "gamma": record(5.0)})

    leaderboard = await GreenScoreRanker().build_leaderboard(profiles, lookup)

    assert len(leaderboard) == 2
    assert "beta" not in [entry.user_id for entry in leaderboard]


@pytest.mark.asyncio
async def test_build_leaderboard_is_sorted_with_contiguous_ranks():
    profiles = [
        make_profile("alpha", total_distance=5000),
        make_profile("beta", total_distance=1000, renewable_share=0.9),
        make_profile("gamma", total_distance=20000, load_efficiency=0.6),
        make_profile("delta", total_distance=800),
    ]
    lookup = make_lookup(
        {
            "alpha": record(12.0),
            "beta": record(2.5),
            "gamma": record(40.0),
            "delta": record(0.0),
        }
    )

    leaderboard = await GreenScoreRanker().build_leaderboard(profiles, lookup)

    scores = [entry.green_score for entry in leaderboard]
    assert scores == sorted(scores, reverse=True)
    assert [entry.rank for entry in leaderboard] == list(range(1, len(profiles) + 1))
    assert leaderboard[-1].user_id == "delta"
    assert leaderboard[-1].green_score == 0


@pytest.mark.asyncio
async def test_build_leaderboard_entry_fields():
    profiles = [make_profile("alpha", total_distance=1000, load_efficiency=0.8, renewable_share=0.5)]
    lookup = make_lookup({"alpha": record(10.0)})

    [entry] = await GreenScoreRanker().build_leaderboard(profiles, lookup)

    assert entry.user_id == "alpha"
    assert entry.company_name == "alpha Logistics"
    assert entry.sector == "Road freight"
    assert entry.green_score == pytest.approx(120)
    assert entry.co2_emissions == 10.0
    assert entry.total_distance == 1000
    assert entry.load_efficiency == 0.8
    assert entry.renewable_share == 0.5
    assert entry.rank == 1


@pytest.mark.asyncio
async def test_build_leaderboard_survives_failed_lookup():
    profiles = [make_profile("alpha"), make_profile("broken"), make_profile("gamma")]
    lookup = make_lookup(
        {
            "alpha": record(10.0),
            "broken": ConnectionError("store unavailable"),
            "gamma": record(20.0),
        }
    )

    leaderboard = await GreenScoreRanker().build_leaderboard(profiles, lookup)

    assert [entry.user_id for entry in leaderboard] == ["alpha", "gamma"]


@pytest.mark.asyncio
async def test_build_leaderboard_is_deterministic():
    profiles = [make_profile(f"company-{i}", total_distance=1000 + i) for i in range(10)]
    lookup = make_lookup({f"company-{i}": record(5.0 + i % 3) for i in range(10)})
    ranker = GreenScoreRanker()

    first = await ranker.build_leaderboard(profiles, lookup)
    second = await ranker.build_leaderboard(profiles, lookup)

    assert first == second


@pytest.mark.asyncio
async def test_build_leaderboard_limits_concurrent_lookups():
    in_flight = 0
    peak = 0

    async def lookup(user_id):
        nonlocal in_flight, peak
        in_flight += 1
        peak = max(peak, in_flight)
        await asyncio.sleep(0.01)
        in_flight -= 1
        return record(1.0)

    profiles = [make_profile(f"company-{i}") for i in range(12)]

    leaderboard = await GreenScoreRanker(max_concurrent_lookups=3).build_leaderboard(
        profiles, lookup
    )

    assert len(leaderboard) == 12
    assert peak == 3


@pytest.mark.asyncio
async def test_build_leaderboard_without_profiles():
    assert await GreenScoreRanker().build_leaderboard([], make_lookup({})) == []


def test_ranker_rejects_invalid_concurrency():
    with pytest.raises(ValueError):
        GreenScoreRanker(max_concurrent_lookups=0)
