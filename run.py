import argparse
import sys

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

import uvicorn

from pms.config import CONFIG, reload_config
from pms.logger import log


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Serve the PMS API. Defaults come from the HOST and PORT environment variables.",
    )
    parser.add_argument("--host", default=None, help="Bind address")
    parser.add_argument("--port", type=int, default=None, help="Listening port")
    parser.add_argument(
        "--reload",
        action="store_true",
        default=None,
        help="Restart on code changes (on by default when ENV=dev)",
    )
    return parser


def main(argv: list[str] | None = None):
    reload_config()

    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        # argparse exits 0 for --help and 2 on bad input
        return 0 if exc.code in (0, None) else 1

    host = args.host or CONFIG.host
    port = args.port if args.port is not None else CONFIG.port
    reload_enabled = CONFIG.is_development if args.reload is None else args.reload

    log(f"[server] PMS API listening on http://{host}:{port}")
    uvicorn.run("pms.api.main:app", host=host, port=port, reload=reload_enabled)
    return 0

if __name__ == "__main__":
    sys.exit(main())
