"""Writing statistics and note resurfacing."""

from collections import Counter
from datetime import date, datetime, time, timedelta, timezone
from typing import Dict, Iterable, List, Optional, Set, Union
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ...config import get_settings
from ..logging import get_logger
from ..models.base import as_utc
from ..redis_client import get_redis_client
from ..repositories.note_repository import NoteRepository
from ..repositories.version_repository import VersionRepository
from ..schemas.notes import NoteListItem, NoteResponse, StatsResponse
from .interfaces import IStatsService
from .note_service import note_to_list_item, note_to_response

logger = get_logger("services.stats")

HEATMAP_DAYS = 365


def build_heatmap(timestamps: Iterable[datetime]) -> Dict[str, int]:
    """Count activity per UTC day, keyed ``YYYY-MM-DD``."""
    counts = Counter(as_utc(ts).date().isoformat() for ts in timestamps)
    return dict(sorted(counts.items()))


def compute_streak(active_days: Set[date], today: date) -> int:
    """Consecutive active days ending today, or yesterday when today is still empty."""
    day = today if today in active_days else today - timedelta(days=1)
    streak = 0
    while day in active_days:
        streak += 1
        day -= timedelta(days=1)
    return streak


class StatsService(IStatsService):
    """Stats are cached per user in Redis; note writes drop the cache."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.note_repo = NoteRepository(session)
        self.version_repo = VersionRepository(session)
        self.redis = get_redis_client()
        self.settings = get_settings()

    async def get_stats(self, user_id: UUID) -> StatsResponse:
        cached = await self.redis.get_cached_stats(user_id)
        if cached:
            logger.debug(f"Stats cache hit for user {user_id}")
            return StatsResponse(**cached)

        today = datetime.now(timezone.utc).date()
        since = datetime.combine(today - timedelta(days=HEATMAP_DAYS - 1), time.min, tzinfo=timezone.utc)

        timestamps = await self.note_repo.creation_dates_since(user_id, since)
        timestamps += await self.version_repo.snapshot_dates_since(user_id, since)
        heatmap = build_heatmap(timestamps)

        live_notes = await self.note_repo.list_live_notes(user_id)

        stats = StatsResponse(
            heatmap=heatmap,
            streak=compute_streak({date.fromisoformat(d) for d in heatmap}, today),
            total_notes=len(live_notes),
            total_chars=sum(note.char_count for note in live_notes),
        )
        await self.redis.cache_stats(
            user_id, stats.model_dump(), expire=self.settings.stats_cache_ttl_seconds
        )
        return stats

    async def resurface(
        self, user_id: UUID, mode: str = "random"
    ) -> Union[Optional[NoteResponse], List[NoteListItem]]:
        """One random note, or the notes written on this day in earlier years."""
        if mode == "thisday":
            today = datetime.now(timezone.utc).date()
            notes = await self.note_repo.list_live_notes(user_id)
            return [
                note_to_list_item(note)
                for note in notes
                if self._same_day_earlier_year(as_utc(note.created_at).date(), today)
            ]

        note = await self.note_repo.get_random_note(user_id)
        return note_to_response(note) if note else None

    @staticmethod
    def _same_day_earlier_year(created: date, today: date) -> bool:
        return (created.month, created.day) == (today.month, today.day) and created.year < today.year
