"""
Run the NyayBuddy API locally.

Usage:
    python -m nyaybuddy                 # 127.0.0.1:8000
    python -m nyaybuddy --port 9000 --reload
"""

import argparse

import uvicorn


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the NyayBuddy API")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--reload", action="store_true")
    args = parser.parse_args()

    uvicorn.run("nyaybuddy.main:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
