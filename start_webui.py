#!/usr/bin/env python3
"""
Startup script for Media Title Corrector Web API
"""

import uvicorn
import sys
import socket
import argparse
from pathlib import Path


def is_port_in_use(port: int) -> bool:
    """Check if a port is already in use"""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        return s.connect_ex(('localhost', port)) == 0


def find_free_port(start_port: int = 8000, max_attempts: int = 10) -> int:
    """Find a free port starting from start_port"""
    for port in range(start_port, start_port + max_attempts):
        if not is_port_in_use(port):
            return port
    raise RuntimeError(f"Could not find a free port in range {start_port}-{start_port + max_attempts - 1}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Start Media Title Corrector Web API")
    parser.add_argument("--port", type=int, default=8000, help="Port to run the server on (default: 8000)")
    parser.add_argument("--host", type=str, default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
    parser.add_argument("--auto-port", action="store_true",
                        help="Automatically find a free port if the specified port is in use")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args()

    # Flat modules (pattern, tmdb, ...) are imported from the project root
    sys.path.insert(0, str(Path(__file__).parent))

    port = args.port
    if is_port_in_use(port):
        if not args.auto_port:
            print(f"ERROR: Port {port} is already in use, pass --port or --auto-port")
            sys.exit(1)
        port = find_free_port(port)
        print(f"Port {args.port} is in use, using port {port} instead")

    print("Starting Media Title Corrector Web API...")
    print(f"API: http://{args.host}:{port}")
    print(f"API Docs: http://{args.host}:{port}/docs")

    uvicorn.run("webui.main:app", host=args.host, port=port, reload=args.reload)
