from __future__ import annotations

import argparse
import logging

from domain.errors import CaptureUnavailableError, RegionOutOfBoundsError
from pydantic import ValidationError
from shared.config.loader import load_fisher_settings

from apps.fisher.compose import FisherApp


def main() -> int:
    ap = argparse.ArgumentParser(prog="pixel-fisher")
    ap.add_argument("--profile", help="Settings profile under configs/profiles (default: dev).")
    snap = ap.add_mutually_exclusive_group()
    snap.add_argument("--snapshot", metavar="PATH", help="Write the fishing area PNG here at startup.")
    snap.add_argument("--no-snapshot", action="store_true", help="Skip the startup PNG.")
    verbosity = ap.add_mutually_exclusive_group()
    verbosity.add_argument("--quiet", action="store_true", help="Only warnings and errors.")
    verbosity.add_argument("--verbose", action="store_true", help="Log state transitions.")
    args = ap.parse_args()

    try:
        settings = load_fisher_settings(profile=args.profile)
    except (RuntimeError, ValidationError) as ex:
        print(f"[fisher] bad settings: {ex}")
        return 2

    overrides: dict[str, object] = {}
    if args.snapshot:
        overrides["snapshot_path"] = args.snapshot
    if args.no_snapshot:
        overrides["snapshot_path"] = None
    if overrides:
        settings = settings.model_copy(update=overrides)

    level = "WARNING" if args.quiet else "DEBUG" if args.verbose else settings.log_level
    logging.basicConfig(level=level, format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    log = logging.getLogger("fisher")

    try:
        app = FisherApp(settings)
    except ImportError as ex:  # pynput without a display backend, or mss missing
        log.error("input backend unavailable: %s", ex)
        return 1

    try:
        app.start()
        app.run()
    except KeyboardInterrupt:
        log.info("shutting down...")
    except (CaptureUnavailableError, RegionOutOfBoundsError) as ex:
        log.error("fatal: %s", ex)
        return 1
    finally:
        app.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
