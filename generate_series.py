#!/usr/bin/env python3
"""
Baseball Series Builder — Data Generator

Reads Retrosheet game logs for every configured list, splits them into
series and writes the JSON files the site's page builder consumes. By
default writes to public/data/ for local dev. With --r2, uploads to
Cloudflare R2 storage.

Usage:
    python generate_series.py                       # Build from series.json
    python generate_series.py --config lists.json   # Use another config file
    python generate_series.py --r2                  # Also upload to R2
"""

from __future__ import annotations

import argparse
import asyncio
import functools
import os
import sys
from pathlib import Path

from series_builder import SeriesListResult
from series_builder.config import load_build_configs
from series_builder.export import write_series_output
from series_builder.gamelogs import generate_games
from series_builder.notify import format_error_report, send_error_notification
from series_builder.series import build_series_list

BUCKET_NAME = "baseball-series-data"
R2_ENV_VARS = ("CF_ACCOUNT_ID", "R2_ACCESS_KEY_ID", "R2_SECRET_ACCESS_KEY")


def create_r2_client():
    """Create an S3 client for Cloudflare R2 from the R2_ENV_VARS credentials."""
    import boto3

    missing = [name for name in R2_ENV_VARS if not os.environ.get(name)]
    if missing:
        raise KeyError(f"missing R2 credentials: {', '.join(missing)}")

    account_id, access_key, secret_key = (os.environ[name] for name in R2_ENV_VARS)
    return boto3.client(
        "s3",
        endpoint_url=f"https://{account_id}.r2.cloudflarestorage.com",
        aws_access_key_id=access_key,
        aws_secret_access_key=secret_key,
        region_name="auto",
    )


def upload_outputs(s3_client, outputs: list[tuple[str, str]], bucket: str = BUCKET_NAME) -> list[str]:
    """Upload every (key, json) pair; return one message per failed upload."""
    print(f"\nUploading {len(outputs)} files to R2...")
    errors: list[str] = []
    for key, data in outputs:
        try:
            s3_client.put_object(
                Bucket=bucket,
                Key=key,
                Body=data.encode("utf-8"),
                ContentType="application/json",
            )
        except Exception as e:
            error_msg = f"Failed to upload {key} to R2: {e}"
            print(f"  ERROR: {error_msg}")
            errors.append(error_msg)
        else:
            print(f"  Uploaded {key}")
    print("R2 upload complete")
    return errors


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build series lists from Retrosheet game logs.")
    parser.add_argument("--config", default="series.json", help="list configuration file")
    parser.add_argument("--output", default="public/data", help="output directory")
    parser.add_argument("--cache", default="cache", help="game-log download cache directory")
    parser.add_argument("--r2", action="store_true", help="upload outputs to Cloudflare R2")
    return parser.parse_args(argv)


def print_summary(result: SeriesListResult) -> None:
    for series_data in result.series_summaries:
        print(f"\n{series_data.name} ({len(series_data.series)} series)")
        for s in series_data.series:
            label = s.series_name or f"{s.visiting_team} at {s.home_team}"
            print(f"    {s.start_date} to {s.end_date}  {label}")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    s3_client = None

    if args.r2:
        try:
            s3_client = create_r2_client()
            print("R2 upload enabled")
        except Exception as e:
            print(f"ERROR: Failed to create R2 client: {e}")
            return 1

    configs = load_build_configs(args.config)
    output_dir = Path(args.output)
    output_dir.mkdir(parents=True, exist_ok=True)
    cache_dir = Path(args.cache)
    cache_dir.mkdir(exist_ok=True)

    print(f"Building {len(configs)} list(s) from {args.config}...")
    games = functools.partial(generate_games, cache_dir=cache_dir)

    # Any generation failure aborts the whole batch; nothing is written.
    try:
        result = asyncio.run(build_series_list(configs, generate_games=games))
    except Exception as e:
        error_msg = f"Failed to build series lists: {e}"
        print(f"  ERROR: {error_msg}")
        send_error_notification(format_error_report([error_msg]))
        return 1

    print_summary(result)

    try:
        outputs = write_series_output(result, output_dir)
    except ValueError as e:
        error_msg = f"Failed to write series output: {e}"
        print(f"  ERROR: {error_msg}")
        send_error_notification(format_error_report([error_msg]))
        return 1
    print(f"\nSaved {len(outputs)} file(s) to {output_dir}")
    print(f"  {len(result.lists)} list(s), {len(result.series_games)} series, {len(result.all_games)} game(s)")

    errors: list[str] = []
    if s3_client is not None:
        errors = upload_outputs(s3_client, outputs)

    if errors:
        print(f"\nErrors encountered: {len(errors)}")
        for err in errors:
            print(f"  - {err}")
        send_error_notification(format_error_report(errors, context="Series upload"))
        return 1

    print("\nDone — all series data generated successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
