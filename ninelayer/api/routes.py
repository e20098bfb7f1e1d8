from fastapi import APIRouter, Depends, HTTPException, Header
from sqlmodel import Session
from ninelayer.db.base import get_session
from ninelayer.api.schemas import (
    DrawsIn, IngestOut, SyncIn, AnalysisOut, LayerInfo, LayerOut,
    HitTestIn, HitTestOut, HitStatsOut, HitHistoryOut,
)
from ninelayer.services import (
    ingest_draws, sync_draws, run_and_store, analysis_summary, layer_summary,
    get_layer, check_draw, get_hit_stats, get_hit_history, LayerNotReady,
)
from ninelayer.config import settings
from ninelayer.core.draws import Draw
from ninelayer.core.validation import is_valid_draw_number, parse_layer_id

router = APIRouter()


def _auth(api_key_header: str | None = Header(default=None, alias="X-API-Key")):
    if settings.api_key and api_key_header != settings.api_key:
        raise HTTPException(status_code=401, detail="Invalid API key")

@router.post('/draws', response_model=IngestOut)
async def post_draws(data: DrawsIn, session: Session = Depends(get_session), ok=Depends(_auth)):
    for d in data.draws:
        if not is_valid_draw_number(d.number):
            raise HTTPException(400, detail=f"bad draw number: {d.number!r}")
    draws = [Draw(number=d.number, id=d.id, draw_date=d.drawDate, period=d.period) for d in data.draws]
    return ingest_draws(session, draws)

@router.post('/sync', response_model=IngestOut)
async def sync(data: SyncIn | None = None, session: Session = Depends(get_session), ok=Depends(_auth)):
    return sync_draws(session, url=data.url if data else None)

@router.post('/analyze', response_model=AnalysisOut)
async def analyze(limit: int | None = None, session: Session = Depends(get_session), ok=Depends(_auth)):
    if limit is not None and limit <= 0:
        raise HTTPException(400, detail="limit must be positive")
    return analysis_summary(run_and_store(session, limit=limit))

@router.get('/layers', response_model=list[LayerInfo])
async def layers(session: Session = Depends(get_session)):
    return layer_summary(session)

@router.get('/layers/{layer_id}', response_model=LayerOut)
async def layer(layer_id: str, session: Session = Depends(get_session)):
    lid = parse_layer_id(layer_id)
    if lid is None:
        raise HTTPException(404, detail="layer must be L1..L9")
    return get_layer(session, lid)

@router.post('/hits/test', response_model=HitTestOut)
async def hit_test(data: HitTestIn, session: Session = Depends(get_session), ok=Depends(_auth)):
    if not is_valid_draw_number(data.number):
        raise HTTPException(400, detail="draw number must be 'd,d,d,d' or at least 3 digits")
    try:
        return check_draw(session, data.number, draw_date=data.drawDate)
    except LayerNotReady as e:
        raise HTTPException(409, detail=str(e))

@router.get('/hits', response_model=HitStatsOut)
async def hits(session: Session = Depends(get_session)):
    return get_hit_stats(session).as_dict()

@router.get('/hits/history', response_model=HitHistoryOut)
async def hits_history(limit: int = 50, session: Session = Depends(get_session)):
    return {'items': get_hit_history(session, limit=limit)}
