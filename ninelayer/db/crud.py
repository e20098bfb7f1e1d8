import json
import logging
from datetime import datetime
from typing import Iterable

from sqlmodel import Session, select

from ninelayer.db.models import LotteryDraw, LotteryScore, LayerSnapshot, HitRecord
from ninelayer.analytics.hits import HitStatistic

logger = logging.getLogger(__name__)


def insert_draws(session: Session, rows: Iterable[LotteryDraw]) -> int:
    n = 0
    for d in rows:
        session.add(d)
        n += 1
    session.commit()
    return n


def clear_draws(session: Session) -> int:
    rows = session.exec(select(LotteryDraw)).all()
    for d in rows:
        session.delete(d)
    session.commit()
    return len(rows)


def known_periods(session: Session) -> set[str]:
    rows = session.exec(select(LotteryDraw.period).where(LotteryDraw.period.is_not(None))).all()
    return set(rows)


def latest_draws(session: Session, limit: int = 10) -> list[LotteryDraw]:
    return session.exec(
        select(LotteryDraw).order_by(LotteryDraw.game_time.desc(), LotteryDraw.id.desc()).limit(limit)
    ).all()


def save_scores(session: Session, records: Iterable[dict]) -> int:
    """Upsert score records by number."""
    existing = {s.number: s for s in session.exec(select(LotteryScore)).all()}
    now = datetime.utcnow()
    n = 0
    for rec in records:
        row = existing.get(rec['number'])
        if row is None:
            row = LotteryScore(**rec)
        else:
            for k, v in rec.items():
                setattr(row, k, v)
        row.updated_at = now
        session.add(row)
        n += 1
    session.commit()
    return n


def get_score(session: Session, number: str) -> LotteryScore | None:
    return session.exec(select(LotteryScore).where(LotteryScore.number == number)).first()


def save_layer(session: Session, layer_id: str, numbers: list[str]) -> LayerSnapshot:
    # one snapshot per layer: replace whatever the previous run stored
    for old in session.exec(select(LayerSnapshot).where(LayerSnapshot.layer_id == layer_id)).all():
        session.delete(old)
    snap = LayerSnapshot(layer_id=layer_id, numbers=json.dumps(numbers), count=len(numbers))
    session.add(snap)
    session.commit()
    session.refresh(snap)
    return snap


def get_layer_snapshot(session: Session, layer_id: str) -> LayerSnapshot | None:
    return session.exec(select(LayerSnapshot).where(LayerSnapshot.layer_id == layer_id).limit(1)).first()


def get_layer_numbers(session: Session, layer_id: str) -> list[str]:
    snap = get_layer_snapshot(session, layer_id)
    if not snap:
        return []
    try:
        return json.loads(snap.numbers)
    except ValueError:
        logger.warning("layer %s snapshot is not valid JSON", layer_id)
        return []


def insert_hit(session: Session, rec: HitRecord) -> HitRecord:
    session.add(rec)
    session.commit()
    session.refresh(rec)
    return rec


def hit_history(session: Session, layer_id: str = "L6", limit: int = 50) -> list[HitRecord]:
    return session.exec(
        select(HitRecord)
        .where(HitRecord.layer_id == layer_id)
        .order_by(HitRecord.created_at.desc(), HitRecord.id.desc())
        .limit(limit)
    ).all()


def hit_statistic(session: Session, layer_id: str = "L6") -> HitStatistic:
    rows = session.exec(select(HitRecord.is_hit).where(HitRecord.layer_id == layer_id)).all()
    return HitStatistic(total=len(rows), hits=sum(1 for h in rows if h == 1))
