#!/usr/bin/env python3
"""Fetch lookup dictionaries and DPD tables into the data directory.

Dictionaries come from the SuttaCentral API and are saved in compact form
(``{headword: {"d": ..., "g": ..., "x": ..., "p": ...}}``). The DPD
inflection and deconstructor tables are published as JavaScript modules
(``export const dpd_i2h = {...}``) and are converted to JSON.

Usage:
  python scripts/fetch_dictionaries.py
  python scripts/fetch_dictionaries.py --only dpd --data-dir /app/data
"""

import argparse
import json
import re
import sys
from pathlib import Path
from typing import Any

import httpx
import structlog

project_root = Path(__file__).resolve().parent.parent
sys.path.append(str(project_root / "src"))

from config import settings  # noqa: E402
from logging_config import configure_logging  # noqa: E402
from services.data import AVAILABLE_LOOKUPS, CHINESE  # noqa: E402
from services.tables import DECOMPOSITIONS, INFLECTIONS, dictionary_name  # noqa: E402

logger = structlog.get_logger()

DPD_TABLES = {
    "dpd_i2h": INFLECTIONS,
    "dpd_deconstructor": DECOMPOSITIONS,
}

_JS_EXPORT = re.compile(r"^\s*export\s+const\s+\w+\s*=\s*", re.MULTILINE)


def compact_entries(records: list[dict[str, Any]], from_lang: str) -> dict[str, dict[str, Any]]:
    """Reduce API records to ``{entry: {d, g?, x?, p?}}``."""
    compact: dict[str, dict[str, Any]] = {}
    for record in records:
        headword = record.get("entry")
        if not headword:
            continue
        obj: dict[str, Any] = {"d": record.get("definition") or ""}
        if record.get("grammar"):
            obj["g"] = record["grammar"]
        if record.get("xr"):
            obj["x"] = record["xr"]
        if from_lang == CHINESE and record.get("pronunciation"):
            obj["p"] = record["pronunciation"]
        compact[headword] = obj
    return compact


def parse_js_export(source: str) -> Any:
    """Parse ``export const name = {...};`` as JSON."""
    body = _JS_EXPORT.sub("", source, count=1).strip()
    if body.endswith(";"):
        body = body[:-1]
    return json.loads(body)


def fetch_dict(client: httpx.Client, from_lang: str, to_lang: str, fallback: bool = False) -> dict[str, dict[str, Any]]:
    """Fetch one dictionary; returns {} on an HTTP error."""
    url = f"{settings.SUTTACENTRAL_API_URL}/dictionaries/lookup"
    params = {"from": from_lang, "to": to_lang, "fallback": str(fallback).lower()}
    response = client.get(url, params=params)
    if response.is_error:
        logger.error("dictionary_fetch_failed", url=str(response.url), status=response.status_code)
        return {}
    return compact_entries(response.json(), from_lang)


def write_table(data_dir: Path, name: str, data: Any) -> None:
    path = data_dir / f"{name}.json"
    text = json.dumps(data, ensure_ascii=False, separators=(",", ":"))
    path.write_text(text, encoding="utf-8")
    logger.info("table_saved", file=path.name, entries=len(data), size_kb=round(len(text.encode()) / 1024))


def fetch_dictionaries(client: httpx.Client, data_dir: Path, only: str | None = None) -> None:
    for from_lang, targets in AVAILABLE_LOOKUPS.items():
        if only and only != from_lang:
            continue
        for to_lang in targets:
            logger.info("dictionary_fetching", pair=f"{from_lang}-{to_lang}")
            compact = fetch_dict(client, from_lang, to_lang)

            # Chinese: merge the broader fallback dictionary underneath
            if from_lang == CHINESE:
                added = 0
                for key, value in fetch_dict(client, from_lang, to_lang, fallback=True).items():
                    if key not in compact:
                        compact[key] = value
                        added += 1
                logger.info("fallback_merged", pair=f"{from_lang}-{to_lang}", added=added)

            write_table(data_dir, dictionary_name(from_lang, to_lang), compact)


def fetch_dpd(client: httpx.Client, data_dir: Path) -> None:
    for source_name, table_name in DPD_TABLES.items():
        url = f"{settings.DPD_BASE_URL}/{source_name}.js"
        logger.info("dpd_fetching", url=url)
        response = client.get(url)
        if response.is_error:
            logger.error("dpd_fetch_failed", url=url, status=response.status_code)
            continue
        try:
            data = parse_js_export(response.text)
        except ValueError as e:
            logger.error("dpd_parse_failed", url=url, error=str(e))
            continue
        write_table(data_dir, table_name, data)


def main() -> int:
    parser = argparse.ArgumentParser(description="Fetch lookup dictionaries and DPD tables")
    parser.add_argument("--data-dir", type=Path, default=settings.DATA_DIR, help="Output directory")
    parser.add_argument("--only", choices=sorted(AVAILABLE_LOOKUPS) + ["dpd"], help="Fetch a single group")
    args = parser.parse_args()

    configure_logging()
    args.data_dir.mkdir(parents=True, exist_ok=True)

    with httpx.Client(timeout=300, follow_redirects=True, headers={"User-Agent": settings.APP_NAME}) as client:
        if args.only != "dpd":
            fetch_dictionaries(client, args.data_dir, args.only)
        if args.only in (None, "dpd"):
            fetch_dpd(client, args.data_dir)

    logger.info("fetch_done", data_dir=str(args.data_dir))
    return 0


if __name__ == "__main__":
    sys.exit(main())
