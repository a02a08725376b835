#!/usr/bin/env python3
"""
Startup script for the LingoAssist backend.

This script starts the FastAPI server with proper configuration.
"""

import os
import sys
import uvicorn

def main():
    """Start the FastAPI backend server."""

    host = os.getenv("LINGOASSIST_HOST", "0.0.0.0")
    port = int(os.getenv("LINGOASSIST_PORT", "8000"))

    print("🚀 Starting LingoAssist Backend...")
    print(f"🌐 Server will be available at: http://localhost:{port}")
    print(f"📖 API documentation will be available at: http://localhost:{port}/docs")
    print("\n" + "="*60)

    try:
        uvicorn.run(
            "backend.app.main:app",
            host=host,
            port=port,
            log_level="info"
        )
    except KeyboardInterrupt:
        print("\n🛑 Server stopped by user")
    except Exception as e:
        print(f"\n❌ Server failed to start: {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()
