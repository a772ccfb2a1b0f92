from __future__ import annotations

import argparse

from .client import JobClientError, JobStatusClient
from .errors import JobError, validate_timeout
from .status import derive


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="job-tracker")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("serve", help="Run the HTTP API")

    r = sub.add_parser("resolve", help="Print the status derived for a pending job")
    r.add_argument("--timeout", type=int, required=True, help="milliseconds")
    r.add_argument("--elapsed", type=int, required=True, help="milliseconds")

    w = sub.add_parser("watch", help="Start a job on a running API and poll it")
    w.add_argument("--url", default="http://127.0.0.1:8000")
    w.add_argument("--interval", type=float, default=2.0, help="seconds")
    w.add_argument("--max-retries", type=int, default=10)
    w.add_argument(
        "--set-timeout", type=int, default=None, help="global timeout (ms) first"
    )

    return p


def main(argv: list[str] | None = None, client: JobStatusClient | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.cmd == "serve":
        from .api.main import main as serve

        serve()
        return 0

    if args.cmd == "resolve":
        try:
            timeout = validate_timeout(args.timeout)
        except JobError as e:
            print(f"ERROR,{e.kind.value},{e.message}")
            return 2
        print(f"STATUS,{derive(args.elapsed, timeout).value}")
        return 0

    if args.cmd == "watch":
        client = client or JobStatusClient(
            args.url, poll_interval=args.interval, max_retries=args.max_retries
        )
        try:
            if args.set_timeout is not None:
                print(f"MESSAGE,{client.set_global_timeout(args.set_timeout)}")
            job_id = client.start_job()
            print(f"JOB,{job_id}")
            final = client.poll(on_status=lambda s: print(f"POLL,{s}"))
        except JobClientError as e:
            print(f"ERROR,{e.status_code or ''},{e}")
            return 1
        print(f"FINAL,{final}")
        return 0

    return 2
