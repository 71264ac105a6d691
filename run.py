#!/usr/bin/env python3
"""Simple runner script for Instagram Downloader."""

import sys


def main():
    overrides = []

    # Parse simple args
    args = sys.argv[1:]
    if "--help" in args or "-h" in args:
        print("""
Instagram Downloader - resolve Instagram posts to direct media URLs

Usage:
    python run.py [options]

Options:
    --host HOST     Address to bind (default: 0.0.0.0)
    --port PORT     Server port (default: $PORT or 5000)
    -h, --help      Show this help

Examples:
    python run.py
    PORT=3000 python run.py
    python run.py --port 8080
""")
        return

    for i, arg in enumerate(args):
        if arg == "--host" and i + 1 < len(args):
            overrides.append(f"server.host={args[i + 1]}")
        elif arg == "--port" and i + 1 < len(args):
            if not args[i + 1].isdigit():
                print(f"Invalid port: {args[i + 1]}")
                sys.exit(2)
            overrides.append(f"server.port={args[i + 1]}")

    # Import and run
    try:
        from insta_downloader.config import load_config
        from insta_downloader.api import run_server
    except ImportError as e:
        print(f"Failed to import insta_downloader: {e}")
        print("\nInstall with:")
        print("  pip install -e .")
        sys.exit(1)

    cfg = load_config(overrides)
    print(f"""
Instagram Downloader API
  Server:       http://localhost:{cfg.server.port}
  Health check: http://localhost:{cfg.server.port}/api/health
""")
    run_server(cfg)


if __name__ == "__main__":
    main()
