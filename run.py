"""
NAC Bookkeeper
Application Runner
"""

import uvicorn
import argparse
from bookkeeper.config import config


def main():
    parser = argparse.ArgumentParser(description="NAC Bookkeeper")
    parser.add_argument("--host", default=config.api.host, help="Host to bind")
    parser.add_argument("--port", type=int, default=config.api.port, help="Port to bind")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")

    args = parser.parse_args()

    print(f"""
    ============================================================
    |                  NAC Bookkeeper v1.0.0                   |
    ============================================================
    |  Server:   http://{args.host}:{args.port}
    |  Docs:     http://{args.host}:{args.port}/docs
    |  Database: {config.database.path}
    ============================================================
    """)

    uvicorn.run(
        "bookkeeper.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload
    )


if __name__ == "__main__":
    main()
