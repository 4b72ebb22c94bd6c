#!/usr/bin/env python3
import argparse
import os
import sys
from importlib import resources
from service_tagger.repositories import ServiceRepository
from service_tagger.repositories.service_repository import bundled_services_file
from service_tagger.services.tag_executor import TagExecutor
from service_tagger.services.tagging_session import TaggingSession
from service_tagger.services.version_extractor import VersionExtractor
from service_tagger.utils.logging import setup_logger
from service_tagger.utils.version_parsers import get_version_parser

AUDIT_LOG_NAME = "tag-microservices_audit.log"


def parse_skip_list(value: str) -> list[str]:
    return [name.strip() for name in value.split(",") if name.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Interactive git tagger for microservices', allow_abbrev=False)
    parser.add_argument('--dry-run', action='store_true', help='Run in dry-run mode without executing any git tag or push')
    parser.add_argument('--skip-all', action='store_true', help='Skip every microservice and exit')
    parser.add_argument('--skip', type=parse_skip_list, default=[], metavar='NAMES',
                        help='Comma-separated microservices to skip, e.g. --skip=ui,payment')
    return parser


def default_services_file(services_root: str, bundled: str) -> str:
    local = os.path.join(services_root, "services.yaml")
    return local if os.path.isfile(local) else bundled


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logger = setup_logger("TagMicroservices")

    try:
        services_root = os.environ.get("SERVICES_ROOT", os.getcwd())
        audit_log_file = os.environ.get("AUDIT_LOG_FILE", os.path.join(services_root, AUDIT_LOG_NAME))
        parser = get_version_parser(os.environ.get("METADATA_PARSER", "json"))
        with resources.as_file(bundled_services_file()) as bundled:
            services_file = os.environ.get("SERVICES_FILE", default_services_file(services_root, str(bundled)))
            logger.debug(f"Starting tagging session with services file: {services_file}")
            services = ServiceRepository(services_file, services_root, required=True).find_all()
        if not services:
            raise ValueError(f"No services configured in {services_file}")

        session = TaggingSession(
            services,
            audit_log_file,
            extractor=VersionExtractor(parser),
            executor=TagExecutor(),
            dry_run=args.dry_run,
            skip_all=args.skip_all,
            skip=args.skip,
        )
        session.run()
        return 0
    except KeyboardInterrupt:
        logger.error("Tagging session interrupted")
        return 130
    except Exception as e:
        logger.error(f"Tagging session failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
