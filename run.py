#!/usr/bin/env python3
"""
Spinboard Roulette Tracker - Entry Point
Start the Flask + SocketIO server.
"""

import os
import sys

# Ensure project root is in path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config import HOST, PORT, DEBUG, DEFAULT_VARIANT, ROLE_HEADER

from spinboard import create_app, socketio

app = create_app()

if __name__ == '__main__':
    print("=" * 60)
    print("  Spinboard Roulette Tracker v1.0")
    print("=" * 60)
    print(f"  Server:      http://localhost:{PORT}")
    print(f"  Variant:     {DEFAULT_VARIANT}")
    print(f"  Role header: {ROLE_HEADER}")
    print(f"  Debug:       {DEBUG}")
    print("=" * 60)
    print()

    socketio.run(app, host=HOST, port=PORT, debug=DEBUG, use_reloader=False)
