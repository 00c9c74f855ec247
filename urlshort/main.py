import argparse
import logging
import sys

import uvicorn

from .app import create_app
from .chain import build_chain
from .config import Settings, settings
from .errors import ConfigError

logger = logging.getLogger("urlshort")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Redirect request paths to configured URLs")
    parser.add_argument(
        "--yaml", dest="yaml_path", default=None,
        help="Path to a YAML file that contains redirects",
    )
    parser.add_argument(
        "--json", dest="json_path", default=None,
        help="Path to a JSON file that contains redirects",
    )
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--log-level", default="info", choices=["debug", "info", "warning", "error"])
    return parser.parse_args(argv)


def load_settings(args: argparse.Namespace) -> Settings:
    """Flags take precedence over URLSHORT_YAML / URLSHORT_JSON."""
    base = Settings.from_env(settings)
    return base.model_copy(update={
        "yaml_path": args.yaml_path or base.yaml_path,
        "json_path": args.json_path or base.json_path,
    })


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_settings(args)
    try:
        chain = build_chain(config)
    except ConfigError as exc:
        logger.error("Could not build redirects: %s", exc)
        return 1

    logger.info("Static redirects: %d", len(config.redirects))
    if config.yaml_path:
        logger.info("YAML redirects from %s", config.yaml_path)
    if config.json_path:
        logger.info("JSON redirects from %s", config.json_path)

    logger.info("Starting the server on %s:%d", args.host, args.port)
    uvicorn.run(create_app(chain), host=args.host, port=args.port, log_level=args.log_level)
    return 0


if __name__ == "__main__":
    sys.exit(main())
