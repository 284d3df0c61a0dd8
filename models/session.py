from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, List, Optional

from models.enums import OnboardingState


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def iso_timestamp(moment: Optional[datetime] = None) -> str:
    """ISO-8601 в UTC с миллисекундами и суффиксом Z"""
    moment = moment or utc_now()
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class Profile:
    """Сохраненные настройки пользователя (одна строка в таблице)"""
    user_id: int
    chat_id: int
    niche: str
    keywords: str
    country: str

    def to_row(self, now: Optional[str] = None) -> List[Any]:
        # created_at и updated_at пишутся одинаковыми при каждом сохранении
        now = now or iso_timestamp()
        return [
            self.user_id,
            self.chat_id,
            self.niche,
            self.keywords,
            self.country,
            now,
            now,
        ]


@dataclass
class OnboardingSession:
    chat_id: int
    user_id: Optional[int] = None

    state: Optional[OnboardingState] = None

    # answers
    niche: Optional[str] = None
    keywords: Optional[str] = None
    country: Optional[str] = None

    # meta
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    # -------------------------
    # lifecycle helpers
    # -------------------------
    def touch(self) -> None:
        self.updated_at = utc_now()

    def reset(self) -> None:
        self.niche = None
        self.keywords = None
        self.country = None
        self.touch()

    @property
    def is_active(self) -> bool:
        return self.state is not None

    # -------------------------
    # answers
    # -------------------------
    def store_answer(self, field_name: str, value: str) -> None:
        setattr(self, field_name, value)
        self.touch()

    def to_profile(self) -> Profile:
        return Profile(
            user_id=self.user_id,
            chat_id=self.chat_id,
            niche=self.niche or "",
            keywords=self.keywords or "",
            country=self.country or "",
        )

