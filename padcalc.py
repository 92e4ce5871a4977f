"""
PadCalc
Main application entry point
"""
import atexit
import logging
import os
import socket
import subprocess
import sys
import tkinter as tk

import config
from gui import PadCalcGUI

# Global variable to track API process
api_process = None


def get_local_ip():
    try:
        s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        # doesn't even have to be reachable
        s.connect(('10.255.255.255', 1))
        IP = s.getsockname()[0]
        s.close()
    except OSError:
        IP = '127.0.0.1'
    return IP


def start_api_server():
    """Start the Flask web portal in a separate process"""
    global api_process
    script_dir = os.path.dirname(os.path.abspath(__file__))
    api_path = os.path.join(script_dir, 'api.py')
    try:
        api_process = subprocess.Popen(
            [sys.executable, api_path],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            creationflags=subprocess.CREATE_NEW_CONSOLE if sys.platform == 'win32' else 0
        )
    except OSError as e:
        print(f"Failed to start API server: {e}")
        return

    print(f"API server started (PID: {api_process.pid})")
    print("="*60)
    print("PADCALC WEB PORTAL IS LIVE")
    print(f"Access on this PC:    http://localhost:{config.WEB_PORT}")
    if config.WEB_HOST == '0.0.0.0':
        print(f"Access on your Phone: http://{get_local_ip()}:{config.WEB_PORT}")
    print("="*60)


def cleanup_api_server():
    """Terminate the API server when the main application exits"""
    global api_process
    if api_process:
        try:
            api_process.terminate()
            api_process.wait(timeout=5)
            print("API server stopped")
        except (OSError, subprocess.TimeoutExpired) as e:
            print(f"Error stopping API server: {e}")
        api_process = None


def main():
    logging.basicConfig(level=config.LOG_LEVEL,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if config.WEB_PORTAL_ENABLED:
        start_api_server()
        atexit.register(cleanup_api_server)

    root = tk.Tk()
    app = PadCalcGUI(root)
    root.mainloop()

    cleanup_api_server()


if __name__ == "__main__":
    main()
