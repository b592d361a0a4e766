import json
import logging
import signal
import sys
import threading
import argparse

from pydantic import ValidationError

from jobmatch.config_loader import load_config, RankOptions
from jobmatch.exceptions import MatchingError
from jobmatch.matcher_service import MatchService
from jobmatch.schema_models import parse_date
from jobmatch.stores import InMemoryPostingStore, InMemoryProfileStore, load_postings, load_profiles

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Set on SIGINT/SIGTERM so an in-flight ranking stops early
stop_event = threading.Event()


def signal_handler(sig, frame):
    logger.info("Shutdown signal received")
    stop_event.set()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rank job postings for a candidate profile")
    parser.add_argument('--profile', required=True, help='JSON/YAML file with one or more profile documents')
    parser.add_argument('--postings', required=True, help='JSON/YAML file with posting documents')
    parser.add_argument('--profile-id', default=None, help='Profile to rank for (default: first in file)')
    parser.add_argument('--config', default='config.yaml', help='Config file (default: config.yaml)')
    parser.add_argument('--limit', type=int, default=None, help='Maximum number of results')
    parser.add_argument('--min-score', type=float, default=None, help='Minimum score in [0, 1]')
    parser.add_argument('--location', default=None, help='Only postings whose location contains this text')
    parser.add_argument('--remote-only', action='store_true', help='Only remote postings')
    parser.add_argument('--workers', type=int, default=None, help='Score postings with N threads')
    parser.add_argument('--now', default=None, help='Reference date for ongoing work periods (YYYY-MM-DD)')
    return parser


def run(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
        if args.workers is not None:
            config.ranking.max_workers = args.workers

        defaults = config.ranking.defaults
        options = RankOptions(
            limit=args.limit if args.limit is not None else defaults.limit,
            min_score=args.min_score if args.min_score is not None else defaults.min_score,
            location_filter=args.location or defaults.location_filter,
            remote_only=args.remote_only or defaults.remote_only,
        )

        profiles = load_profiles(args.profile)
        if not profiles:
            logger.error(f"No profiles found in {args.profile}")
            return 1
        profile_id = args.profile_id or profiles[0].id

        service = MatchService(
            InMemoryProfileStore(profiles),
            InMemoryPostingStore(load_postings(args.postings)),
            config
        )
        matches = service.find_matching_jobs(
            profile_id,
            options=options,
            stop_event=stop_event,
            now=parse_date(args.now)
        )
    except (MatchingError, ValidationError, ValueError) as e:
        logger.error(f"Matching failed: {e}")
        return 1
    except InterruptedError:
        logger.warning("Matching interrupted")
        return 130
    except OSError as e:
        logger.error(f"Could not read input: {e}")
        return 1

    json.dump([m.to_dict() for m in matches], sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


def main():
    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)
    sys.exit(run())


if __name__ == "__main__":
    main()
