"""Development server for the MSA validator API."""

import argparse
from typing import Optional, Sequence

from webapp import create_app


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=5000)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    app = create_app()
    debug_mode = bool(app.config.get("DEBUG", False))
    app.logger.info(
        f"[STARTUP] Serving on {args.host}:{args.port} (debug={debug_mode})"
    )
    app.run(host=args.host, port=args.port, debug=debug_mode)


if __name__ == "__main__":
    main()
