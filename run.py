"""Image Maze CLI entry point.

Provides subcommands for running the web server and for generating a maze
PNG from an image file. Accepts configuration via flags and environment
variables, with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import os
import signal
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

_color_init()
# Disable colors if output is not a real terminal (e.g., during pytest capture)
_COLOR_ENABLED = sys.stdout.isatty()


def _load_version() -> str:
    try:
        with open(os.path.join(os.path.dirname(os.path.abspath(__file__)), "VERSION"), "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        return "0.1.0"


__version__ = _load_version()


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    Image Maze

    Turn an image into a perfect maze whose corridors follow the picture's
    brightness. Run the web front end, or generate a maze PNG straight from
    an image file. If both CLI flags and environment variables are present,
    CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          HOST                   Bind address for the web server (default: 0.0.0.0)
          PORT                   Port for the web server (default: 5000)
          MAZE_MAX_UPLOAD_BYTES  Upload size cap in bytes (default: 2097152)
          MAZE_LOG_LEVEL         debug | info | warn | error (default: info)

        Examples:
          # Run the server on the default host and port
          python run.py server

          # Run the server on a custom port
          python run.py server --port 8080

          # Load variables from .env then run the server
          python run.py --env-file .env server

          # Write a 101-pixel wide maze of photo.jpg to maze.png
          python run.py generate photo.jpg --width 101 -o maze.png
        """
    )

    parser = argparse.ArgumentParser(
        prog="imagemaze",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )

    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Image Maze {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    server_parser = subparsers.add_parser(
        "server",
        help="Run the web server",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Run the Flask maze generator web front end",
    )
    server_parser.add_argument(
        "--host",
        default=None,
        help="Host interface to bind (default: env HOST or 0.0.0.0)",
    )
    server_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (default: env PORT or 5000)",
    )
    server_parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable Flask debug mode with verbose error pages",
    )
    server_parser.set_defaults(command="server")

    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate a maze PNG from an image file",
        formatter_class=argparse.RawTextHelpFormatter,
        description=dedent(
            """
            Generate a maze from IMAGE. Without --width/--height the maze
            follows the image width (clamped to 11..501) and keeps the aspect
            ratio. Giving one side derives the other; sizes are made odd.
            """
        ),
    )
    gen_parser.add_argument("image", help="Path to the source image")
    gen_parser.add_argument("--width", type=int, default=None, help="Maze width in cells")
    gen_parser.add_argument("--height", type=int, default=None, help="Maze height in cells")
    gen_parser.add_argument(
        "-o",
        "--output",
        default="maze.png",
        help="PNG file to write (default: maze.png)",
    )
    gen_parser.add_argument(
        "--data-uri",
        action="store_true",
        help="Print a base64 data URI instead of writing a file",
    )
    gen_parser.set_defaults(command="generate")

    # If no subcommand provided, default to server
    if len(argv) == 0:
        argv = ["server"]

    args = parser.parse_args(argv)
    return args


def generate(args: argparse.Namespace) -> int:
    from imagemaze.imaging import ImageDecodeError, decode_image
    from imagemaze.logging_utils import log
    from imagemaze.maze import Maze, resolve_dimensions

    path = args.image
    if not os.path.exists(path):
        print(f"[ERROR] File not found: {path}")
        return 1
    try:
        with open(path, "rb") as f:
            img = decode_image(f, max_bytes=os.path.getsize(path))
    except ImageDecodeError as e:
        print(f"[ERROR] {e}")
        return 1
    except OSError as e:
        print(f"[ERROR] Cannot read {path}: {e.strerror or e}")
        return 1

    custom = args.width is not None or args.height is not None
    width, height = resolve_dimensions(img.width, img.height, custom, args.width, args.height)
    maze = Maze.from_image(img, width, height)
    maze.generate()
    log.info(event="maze_generated", source=path, width=width, height=height, runtime_ms=maze.metrics["runtime_ms"])

    if args.data_uri:
        print(maze.to_data_uri())
        return 0
    with open(args.output, "wb") as out:
        out.write(maze.to_png())
    print(f"Wrote {width}x{height} maze to {args.output}")
    return 0


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    mode = (getattr(args, "command", None) or "server").lower()
    if mode == "generate":
        return generate(args)

    env_host = os.getenv("HOST", "0.0.0.0")
    env_port = int(os.getenv("PORT", "5000"))
    host = getattr(args, "host", None) or env_host
    port = int(getattr(args, "port", None) or env_port)
    debug = bool(getattr(args, "debug", False) or os.getenv("FLASK_DEBUG") == "1")

    def handle_sigint(sig, frame):
        print("\n[INFO] Shutting down server...")
        sys.exit(0)

    signal.signal(signal.SIGINT, handle_sigint)

    # Import server entrypoints only after environment is ready
    from imagemaze.logging_utils import log
    from imagemaze.server import start_server

    title = (
        f"{Fore.CYAN}{Style.BRIGHT}Image Maze Server Bootup{Style.RESET_ALL}"
        if _COLOR_ENABLED
        else "Image Maze Server Bootup"
    )

    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if _COLOR_ENABLED else text

    def value(val: str | int) -> str:
        return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if _COLOR_ENABLED else str(val)

    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if _COLOR_ENABLED else "=" * 40
    lines = [
        divider,
        f"  {title}",
        divider,
        f"  {label('Version:'):12} {value(__version__)}",
        f"  {label('Host:'):12} {value(host)}",
        f"  {label('Port:'):12} {value(port)}",
        f"  {label('Debug:'):12} {value('YES' if debug else 'NO')}",
        divider,
        "",
    ]
    print("\n".join(lines))
    log.info(event="startup", mode=mode, host=host, port=port)

    info_prefix = f"{Fore.CYAN}[INFO]{Style.RESET_ALL}" if _COLOR_ENABLED else "[INFO]"
    print(f"{info_prefix} Listening for connections... Press Ctrl+C to stop.")
    log.info(event="listen", host=host, port=port, debug=debug)
    start_server(host=host, port=port, debug=debug)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
