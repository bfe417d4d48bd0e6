"""Flask based web interface for the flight finder."""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Callable, Dict, Optional

from flask import Flask, jsonify, render_template, request

from flight_finder import (
    FinderConfig,
    FinderResult,
    SnapshotFetchError,
    create_config_from_env,
    create_config_from_form,
    run_finder_workflow,
)
from flight_finder.reporter import (
    DISCLAIMER,
    EMPTY_STATE,
    display_host,
    format_converted_price,
    traveller_notes,
    trip_line,
)

LOGGER = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)

app = Flask(__name__)
app.config["FINDER_CONFIG"] = create_config_from_env()
app.config["SNAPSHOT_FETCHER"] = None


def _request_config() -> FinderConfig:
    """Process-wide config, overridden by any route fields in the query string."""

    base: FinderConfig = app.config["FINDER_CONFIG"]
    overrides = {key: value for key, value in request.args.items() if value}
    if not overrides:
        return base

    form_data: Dict[str, Any] = {
        "origin": base.origin,
        "destination": base.destination,
        "departure_date": base.departure_date.isoformat() if base.departure_date else None,
        "return_date": base.return_date.isoformat() if base.return_date else None,
        "travellers": base.travellers,
        "cabin": base.cabin,
        "query": base.query,
        "limit": base.display_limit,
    }
    form_data.update(overrides)
    parsed = create_config_from_form(form_data)
    return replace(
        base,
        origin=parsed.origin,
        destination=parsed.destination,
        departure_date=parsed.departure_date,
        return_date=parsed.return_date,
        travellers=parsed.travellers,
        cabin=parsed.cabin,
        query=parsed.query,
        display_limit=parsed.display_limit,
    )


def _run(config: FinderConfig) -> FinderResult:
    fetcher: Optional[Callable[[FinderConfig], str]] = app.config.get("SNAPSHOT_FETCHER")
    return run_finder_workflow(config, fetcher=fetcher)


def _offer_view(offer, reference_currency: str) -> Dict[str, Any]:
    return {
        "title": offer.title,
        "url": offer.url,
        "host": display_host(offer.url),
        "raw_price": offer.raw_price,
        "converted": format_converted_price(offer, reference_currency),
        "snippet": offer.snippet,
    }


@app.route("/")
def index():
    config = _request_config()
    try:
        outcome = _run(config)
    except SnapshotFetchError as exc:
        LOGGER.error("Snapshot fetch failed: %s", exc)
        return render_template("error.html", message=str(exc)), 502

    best = outcome.result.best_offer
    return render_template(
        "index.html",
        config=config,
        trip=trip_line(config),
        best=_offer_view(best, config.reference_currency) if best else None,
        notes=traveller_notes(outcome.result.summary),
        offers=[_offer_view(offer, config.reference_currency) for offer in outcome.result.offers],
        empty_state=EMPTY_STATE,
        disclaimer=DISCLAIMER,
    )


@app.route("/api/offers")
def offers_api():
    config = _request_config()
    try:
        outcome = _run(config)
    except SnapshotFetchError as exc:
        LOGGER.error("Snapshot fetch failed: %s", exc)
        return jsonify({"error": str(exc)}), 502
    return jsonify(outcome.to_dict())


if __name__ == "__main__":
    app.run(debug=True)
