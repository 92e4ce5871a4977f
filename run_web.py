"""
PadCalc Web Portal Launcher
Simple script to start the web server
"""
import logging
import os
import sys

# Add current directory to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import config


def main():
    logging.basicConfig(level=config.LOG_LEVEL,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    print("Starting PadCalc Web Portal...")
    print()

    try:
        from api import app
    except ImportError as e:
        print(f"Error importing modules: {e}")
        print("\nMake sure you have installed the required dependencies:")
        print("  pip install -e .")
        sys.exit(1)

    print(f"Serving on http://{config.WEB_HOST}:{config.WEB_PORT}")
    try:
        app.run(host=config.WEB_HOST, port=config.WEB_PORT, debug=False)
    except OSError as e:
        print(f"Error starting server: {e}")
        print("\nTroubleshooting:")
        print("1. Check if another application is using the port")
        print("2. Set PADCALC_WEB_PORT to a free port")
        sys.exit(1)


if __name__ == "__main__":
    main()
