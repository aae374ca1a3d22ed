#!/usr/bin/env python3
"""
Wishlist API Runner
===================

Easy-to-use script to run the Wishlist API in different modes.

Usage:
    python run_app.py                    # Development server with auto-reload
    python run_app.py --mode prod        # Production mode
    python run_app.py --port 8001        # Custom port
    python run_app.py --host 127.0.0.1   # Custom host
    python run_app.py --init-db          # Create tables and exit
"""

import argparse
import asyncio
import os
import sys

def check_environment():
    """Report which configuration sources are present"""
    print("\n🔍 Checking environment...")

    if os.path.exists(".env"):
        print("✅ .env file found")
    else:
        print("⚠️  .env file not found, using defaults")

    return True

def init_database():
    """Create all tables and exit"""
    from wishlist_api.core.database import init_db, close_db

    async def _run():
        await init_db()
        await close_db()

    asyncio.run(_run())
    print("✅ Database tables created")

def run_app(host="0.0.0.0", port=8000, reload=True, workers=1):
    """Run the FastAPI application"""
    print(f"\n🚀 Starting Wishlist API on {host}:{port}")
    print(f"📖 API Docs: http://{host}:{port}/api/docs")
    print("\n" + "=" * 50)

    import uvicorn
    uvicorn.run(
        "wishlist_api.main:app",
        host=host,
        port=port,
        reload=reload,
        workers=None if reload else workers,
        log_level="info"
    )

def main():
    parser = argparse.ArgumentParser(
        description="Wishlist API Runner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--mode",
        choices=["dev", "prod"],
        default="dev",
        help="Server mode (default: dev)"
    )
    parser.add_argument(
        "--host",
        default="0.0.0.0",
        help="Host to bind to (default: 0.0.0.0)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to bind to (default: 8000)"
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=4,
        help="Worker processes in prod mode (default: 4)"
    )
    parser.add_argument(
        "--init-db",
        action="store_true",
        help="Create database tables and exit"
    )

    args = parser.parse_args()

    check_environment()

    if args.init_db:
        init_database()
        return 0

    run_app(args.host, args.port, reload=args.mode == "dev", workers=args.workers)
    return 0

if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n👋 Server stopped by user")
        sys.exit(0)
