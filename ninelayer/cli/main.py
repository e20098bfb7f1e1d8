import json
import typer
import requests
import os

from ninelayer.analytics.pipeline import run_analysis
from ninelayer.core.draws import draws_from_payload


app = typer.Typer()
BASE = os.getenv("API_BASE", "http://127.0.0.1:8000")
API_KEY = os.getenv("API_KEY")


def _headers():
    h = {}
    if API_KEY:
        h["X-API-Key"] = API_KEY
    return h


@app.command()
def sync(url: str = typer.Option(None)):
    r = requests.post(f"{BASE}/sync", json={"url": url}, headers=_headers())
    typer.echo(r.json())


@app.command()
def analyze(limit: int = typer.Option(None)):
    r = requests.post(f"{BASE}/analyze", params={"limit": limit} if limit else {}, headers=_headers())
    typer.echo(r.json())


@app.command()
def layer(layer_id: str = typer.Argument("L6")):
    r = requests.get(f"{BASE}/layers/{layer_id}", headers=_headers())
    typer.echo(r.json())


@app.command("test-hit")
def test_hit(number: str, draw_date: str = typer.Option(None)):
    r = requests.post(f"{BASE}/hits/test", json={"number": number, "drawDate": draw_date}, headers=_headers())
    typer.echo(r.json())


@app.command()
def stats():
    r = requests.get(f"{BASE}/hits", headers=_headers())
    typer.echo(r.json())


@app.command()
def offline(path: str, key_codes: int = typer.Option(3), show: str = typer.Option(None)):
    """Run the analysis on a local JSON draw file, no server needed."""
    with open(path, encoding="utf-8") as f:
        draws = draws_from_payload(json.load(f))
    res = run_analysis(draws, key_code_count=key_codes)
    typer.echo(f"draws={len(draws)} hot={list(res.hot)} cold={list(res.cold)} key={list(res.key)}")
    for lid, items in res.layers.items():
        typer.echo(f"{lid.name} {lid.title:<16} {len(items)}")
    if show:
        picked = [lid for lid in res.layers if lid.name == show.upper()]
        if not picked:
            raise typer.BadParameter("layer must be L1..L9", param_hint="--show")
        typer.echo(" ".join(c.num for c in res.layers[picked[0]]))


if __name__ == "__main__":
    app()
