"""
Green score computation and leaderboard ranking.

Green Score = load_efficiency * (1 + renewable_share) / (co2_tons / distance_km)

Companies with lower emissions per kilometre, fuller vehicles and more
renewable energy score higher.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Iterable, Optional, Protocol, Sequence

from app.pydantic_models.leaderboard import LeaderboardEntry, ScoredCompany
from app.utils.constants import DEFAULT_MAX_CONCURRENT_LOOKUPS

logger = logging.getLogger(__name__)


class ProfileLike(Protocol):
    user_id: str
    company_name: str
    sector: str
    total_distance: float
    load_efficiency: float
    renewable_share: float


class RecordLike(Protocol):
    optimized_total: float


RecordLookup = Callable[[str], Awaitable[Optional[RecordLike]]]


def compute_green_score(
    co2_emissions_tons: float,
    total_distance_km: float,
    load_efficiency: float,
    renewable_share: float,
) -> float:
    """
    Compute the green score of one company.

    Returns 0 when either the distance or the emissions are zero: a company
    without measurable emissions has no score rather than an infinite one.

    Example:
        >>> round(compute_green_score(10, 1000, 0.8, 0.5), 6)
        120.0
    """
    if total_distance_km == 0 or co2_emissions_tons == 0:
        return 0.0

    emissions_per_km = co2_emissions_tons / total_distance_km
    return (load_efficiency * (1 + renewable_share)) / emissions_per_km


def rank_entries(entries: Iterable[ScoredCompany]) -> list[LeaderboardEntry]:
    """
    Sort scored companies by green score (highest first) and number them.

    The sort is stable, so companies with equal scores keep their input order.
    """
    ordered = sorted(entries, key=lambda entry: entry.green_score, reverse=True)
    return [
        LeaderboardEntry(**entry.model_dump(), rank=position)
        for position, entry in enumerate(ordered, start=1)
    ]


class GreenScoreRanker:
    """
    Builds the cross-company leaderboard.

    Latest records are fetched concurrently through ``record_lookup``; the
    number of lookups in flight is capped by ``max_concurrent_lookups``.
    """

    def __init__(self, max_concurrent_lookups: int = DEFAULT_MAX_CONCURRENT_LOOKUPS):
        if max_concurrent_lookups < 1:
            raise ValueError("max_concurrent_lookups must be at least 1")
        self.max_concurrent_lookups = max_concurrent_lookups

    async def build_leaderboard(
        self,
        profiles: Sequence[ProfileLike],
        record_lookup: RecordLookup,
    ) -> list[LeaderboardEntry]:
        """
        Score every profile against its owner's latest record and rank them.

        Profiles whose lookup returns None are left out. A lookup that raises
        is logged and treated the same way, so one company's data problem
        never blocks the rest of the leaderboard.

        Args:
            profiles: Company profiles to rank
            record_lookup: Coroutine function returning the latest record of a
                user id, or None

        Returns:
            Leaderboard entries ordered by green score, ranks starting at 1
        """
        semaphore = asyncio.Semaphore(self.max_concurrent_lookups)

        async def lookup(user_id: str) -> Any:
            async with semaphore:
                return await record_lookup(user_id)

        records = await asyncio.gather(
            *(lookup(profile.user_id) for profile in profiles),
            return_exceptions=True,
        )

        scored = []
        for profile, record in zip(profiles, records):
            if isinstance(record, BaseException):
                if not isinstance(record, Exception):
                    raise record
                logger.warning(
                    f"Latest record lookup failed for user {profile.user_id}, "
                    f"excluding from leaderboard: {record!r}"
                )
                continue
            if record is None:
                logger.debug(
                    f"No emission record for user {profile.user_id}, "
                    "excluding from leaderboard"
                )
                continue
            scored.append(self.score_profile(profile, record))

        leaderboard = rank_entries(scored)
        logger.info(
            f"Built leaderboard with {len(leaderboard)} of {len(profiles)} companies"
        )
        return leaderboard

    @staticmethod
    def score_profile(profile: ProfileLike, record: RecordLike) -> ScoredCompany:
        """Combine a profile and its latest record into a scored company."""
        return ScoredCompany(
            user_id=profile.user_id,
            company_name=profile.company_name,
            sector=profile.sector,
            green_score=compute_green_score(
                record.optimized_total,
                profile.total_distance,
                profile.load_efficiency,
                profile.renewable_share,
            ),
            co2_emissions=record.optimized_total,
            total_distance=profile.total_distance,
            load_efficiency=profile.load_efficiency,
            renewable_share=profile.renewable_share,
        )
