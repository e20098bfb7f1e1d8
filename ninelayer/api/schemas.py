from pydantic import BaseModel, Field
from typing import Optional


class DrawIn(BaseModel):
    number: str = Field(min_length=1)
    id: Optional[int] = None
    drawDate: Optional[str] = None
    period: Optional[str] = None


class DrawsIn(BaseModel):
    draws: list[DrawIn]


class IngestOut(BaseModel):
    stored: int
    skipped: int
    source: Optional[str] = None


class SyncIn(BaseModel):
    url: Optional[str] = None


class AnalysisOut(BaseModel):
    hot: list[int]
    cold: list[int]
    key: list[int]
    freq: dict[str, int]
    layers: dict[str, int]


class LayerInfo(BaseModel):
    layer_id: str
    name: str
    description: str
    ratio: float
    count: int
    updated_at: Optional[str]


class LayerOut(BaseModel):
    layer_id: str
    name: str
    count: int
    numbers: list[str]


class HitTestIn(BaseModel):
    number: str
    drawDate: Optional[str] = None


class HitStatsOut(BaseModel):
    total: int
    hits: int
    rate: float


class HitTestOut(BaseModel):
    layer_id: str
    number: str
    hit: bool
    stats: HitStatsOut


class HitItem(BaseModel):
    id: int
    layer_id: str
    draw_number: str
    is_hit: int
    draw_time: str
    ts: str


class HitHistoryOut(BaseModel):
    items: list[HitItem]
