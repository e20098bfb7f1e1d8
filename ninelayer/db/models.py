from sqlmodel import SQLModel, Field
from datetime import datetime


def _now() -> datetime:
    return datetime.utcnow()


class LotteryDraw(SQLModel, table=True):
    id: int | None = Field(default=None, primary_key=True)
    number: str = Field(max_length=3, index=True)  # canonical last three digits
    original_number: str | None = None
    period: str | None = Field(default=None, index=True)
    game_time: datetime = Field(default_factory=_now, index=True)
    created_at: datetime = Field(default_factory=_now)


class LotteryScore(SQLModel, table=True):
    id: int | None = Field(default=None, primary_key=True)
    number: str = Field(max_length=3, unique=True, index=True)
    sum: int
    span: int
    sum_score: str
    span_score: str
    hot_cold_score: str
    hit_score: str
    total_score: str
    contains_key_code: int = 0
    is_edge_value: int = 0
    updated_at: datetime = Field(default_factory=_now)


class LayerSnapshot(SQLModel, table=True):
    id: int | None = Field(default=None, primary_key=True)
    layer_id: str = Field(max_length=2, index=True)  # 'L9' .. 'L1'
    numbers: str  # JSON array of candidate numbers, in layer order
    count: int
    updated_at: datetime = Field(default_factory=_now)


class HitRecord(SQLModel, table=True):
    id: int | None = Field(default=None, primary_key=True)
    layer_id: str = Field(default="L6", max_length=2, index=True)
    draw_number: str = Field(max_length=3)
    is_hit: int  # 0 | 1
    draw_time: datetime = Field(default_factory=_now)
    created_at: datetime = Field(default_factory=_now, index=True)
