from __future__ import annotations

import argparse
import asyncio
import json
import os
import sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))
from core.logging.config import bootstrap_logging, shutdown_logging
from config import settings
from domain.enums import Region
from domain.exceptions import RankProgressError
from infrastructure import MatchHistoryRepository, RankAnchorRepository, RiotAPIClient
from application.services import ProgressCache
from application.use_cases import ComputeRankProgressUseCase, RankProgressRequest


def _parse(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Reconstruct and cache a player's recent LP trajectory.")
    p.add_argument("puuid")
    p.add_argument("--region", default=settings.DEFAULT_REGION)
    p.add_argument("--tier", help="current tier; omit to read the current rank from Riot")
    p.add_argument("--division")
    p.add_argument("--lp")
    return p.parse_args(argv)


async def _run(args: argparse.Namespace) -> dict:
    region = Region.from_string(args.region)
    cache = ProgressCache(settings.cache_db_path)
    try:
        async with RiotAPIClient(settings.RIOT_API_KEY) as api:
            use_case = ComputeRankProgressUseCase(
                history=MatchHistoryRepository(api),
                cache=cache,
                anchors=RankAnchorRepository(api),
                default_region=region,
            )
            if args.tier is None:
                result = await use_case.execute_live(region, args.puuid)
            else:
                result = await use_case.execute(RankProgressRequest(
                    args.puuid, args.tier, args.division, args.lp, region
                ))
    finally:
        cache.close()
    return result.to_dict()


def main(argv: list[str]) -> int:
    args = _parse(argv)
    bootstrap_logging(service="rank-progress", level=settings.LOG_LEVEL, log_dir=settings.LOG_DIR, log_file_name="rank_progress.jsonl")
    try:
        settings.validate()
        settings.create_directories()
        print(json.dumps(asyncio.run(_run(args)), indent=2))
        return 0
    except (RankProgressError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
