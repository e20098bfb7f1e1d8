import logging
from datetime import datetime
from typing import Iterable

from sqlmodel import Session

from ninelayer.config import settings
from ninelayer.core.digits import extract_digits
from ninelayer.core.draws import Draw
from ninelayer.core.validation import is_valid_candidate, parse_layer_id
from ninelayer.analytics.hits import test_hit, HitStatistic
from ninelayer.analytics.layers import LayerId
from ninelayer.analytics.pipeline import run_analysis
from ninelayer.db.models import LotteryDraw, HitRecord
from ninelayer.db.crud import (
    insert_draws, clear_draws, known_periods, latest_draws, save_scores, save_layer,
    get_layer_snapshot, get_layer_numbers, insert_hit, hit_history, hit_statistic,
)
from ninelayer.sources import load_draws

logger = logging.getLogger(__name__)


def _parse_time(s: str | None) -> datetime:
    if s:
        try:
            return datetime.fromisoformat(s)
        except ValueError:
            logger.warning("unparseable draw date %r, using now", s)
    return datetime.utcnow()


class LayerNotReady(LookupError):
    """The layer has not been produced by an analysis run yet."""


def reference_layer() -> LayerId:
    lid = parse_layer_id(settings.reference_layer)
    if lid is None:
        raise ValueError(f"REFERENCE_LAYER must be one of L1..L9, got {settings.reference_layer!r}")
    return lid


def ingest_draws(session: Session, draws: Iterable[Draw]) -> dict:
    """Store new draws; repeats of a known period and unusable numbers are skipped."""
    seen = known_periods(session)
    rows, skipped = [], 0
    for d in draws:
        canon = extract_digits(d.number)
        if not is_valid_candidate(canon):
            logger.warning("skipping draw %r: no 3-digit number", d.number)
            skipped += 1
            continue
        if d.period and d.period in seen:
            skipped += 1
            continue
        if d.period:
            seen.add(d.period)
        rows.append(LotteryDraw(
            number=canon,
            original_number=d.number,
            period=d.period,
            game_time=_parse_time(d.draw_date),
        ))
    stored = insert_draws(session, rows)
    return {'stored': stored, 'skipped': skipped}


def sync_draws(session: Session, url: str | None = None) -> dict:
    """Replace the stored draw set with what the source delivers now."""
    draws, source = load_draws(url)
    removed = clear_draws(session)
    logger.info("sync from %s: replacing %d stored draws", source, removed)
    out = ingest_draws(session, draws)
    out['source'] = source
    return out


def run_and_store(session: Session, limit: int | None = None):
    """Analyse the latest stored draws and persist scores and all nine layers."""
    rows = latest_draws(session, limit=limit or settings.history_limit)
    result = run_analysis([r.number for r in rows], key_code_count=settings.key_code_count)
    save_scores(session, (c.as_record() for c in result.scored.values()))
    for layer_id, layer in result.layers.items():
        save_layer(session, layer_id.name, [c.num for c in layer])
    logger.info("analysed %d draws: hot=%s cold=%s key=%s", len(rows), result.hot, result.cold, result.key)
    return result


def analysis_summary(result) -> dict:
    return {
        'hot': list(result.hot),
        'cold': list(result.cold),
        'key': list(result.key),
        'freq': {str(k): v for k, v in result.freq.items()},
        'layers': {lid.name: len(layer) for lid, layer in result.layers.items()},
    }


def layer_summary(session: Session) -> list[dict]:
    out = []
    for lid in LayerId:
        snap = get_layer_snapshot(session, lid.name)
        out.append({
            'layer_id': lid.name,
            'name': lid.title,
            'description': lid.description,
            'ratio': lid.ratio,
            'count': snap.count if snap else 0,
            'updated_at': snap.updated_at.isoformat() if snap else None,
        })
    return out


def get_layer(session: Session, layer_id: LayerId) -> dict:
    numbers = get_layer_numbers(session, layer_id.name)
    return {'layer_id': layer_id.name, 'name': layer_id.title, 'count': len(numbers), 'numbers': numbers}


def check_draw(session: Session, number: str, draw_date: str | None = None) -> dict:
    """Test one draw against the stored reference layer and record the outcome."""
    lid = reference_layer()
    # no snapshot yet: nothing to test against, and nothing is recorded
    if get_layer_snapshot(session, lid.name) is None:
        raise LayerNotReady(f"layer {lid.name} has not been analysed yet")
    hit = test_hit(number, get_layer_numbers(session, lid.name))
    insert_hit(session, HitRecord(
        layer_id=lid.name,
        draw_number=extract_digits(number),
        is_hit=1 if hit else 0,
        draw_time=_parse_time(draw_date),
    ))
    stats = hit_statistic(session, lid.name)
    return {'layer_id': lid.name, 'number': extract_digits(number), 'hit': hit, 'stats': stats.as_dict()}


def get_hit_stats(session: Session) -> HitStatistic:
    return hit_statistic(session, reference_layer().name)


def get_hit_history(session: Session, limit: int = 50) -> list[dict]:
    rows = hit_history(session, reference_layer().name, limit=limit)
    def to_dict(r):
        return {
            'id': r.id,
            'layer_id': r.layer_id,
            'draw_number': r.draw_number,
            'is_hit': r.is_hit,
            'draw_time': r.draw_time.isoformat(),
            'ts': r.created_at.isoformat(),
        }
    return [to_dict(x) for x in rows]
