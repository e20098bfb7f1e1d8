"""Where draws come from: the remote results API, or generated sample data."""
from __future__ import annotations

import logging
import random
from datetime import date, timedelta

import requests

from ninelayer.config import settings
from ninelayer.core.draws import Draw, draws_from_payload

logger = logging.getLogger(__name__)

SAMPLE_PERIOD_BASE = 2024032000


class DrawSourceError(RuntimeError):
    pass


def fetch_draws(url: str | None = None, timeout: float | None = None) -> list[Draw]:
    url = url or settings.draws_url
    try:
        r = requests.get(url, timeout=timeout or settings.fetch_timeout)
    except requests.RequestException as e:
        raise DrawSourceError(f"fetch failed: {e}") from e
    if not r.ok:
        raise DrawSourceError(f"fetch failed: HTTP {r.status_code}")
    try:
        payload = r.json()
    except ValueError as e:
        raise DrawSourceError("response is not JSON") from e
    return draws_from_payload(payload)


def sample_draws(count: int | None = None, seed: int | None = None, today: date | None = None) -> list[Draw]:
    """Random comma-joined 4-digit draws, newest first, one per day."""
    count = settings.sample_size if count is None else count
    rng = random.Random(seed)
    today = today or date.today()
    out = []
    for i in range(count):
        number = ",".join(str(rng.randrange(10)) for _ in range(4))
        out.append(Draw(
            number=number,
            id=i,
            draw_date=(today - timedelta(days=i)).isoformat(),
            period=str(SAMPLE_PERIOD_BASE + i),
        ))
    return out


def load_draws(url: str | None = None, fallback: bool = True) -> tuple[list[Draw], str]:
    """Fetch remote draws; on failure (or an empty answer) use sample data.

    Returns the draws and the name of the source that produced them.
    """
    try:
        draws = fetch_draws(url)
    except DrawSourceError as e:
        if not fallback:
            raise
        logger.warning("draw fetch failed, using sample data: %s", e)
        return sample_draws(), "sample"
    if not draws and fallback:
        logger.warning("draw source returned nothing, using sample data")
        return sample_draws(), "sample"
    logger.info("fetched %d draws", len(draws))
    return draws, "remote"
