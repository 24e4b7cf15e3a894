#!/usr/bin/env python3
"""
Nearby Places Backend - Run Script
This script starts the FastAPI places server
"""

import os
import sys
import subprocess
import socket
from pathlib import Path

def print_colored(message, color="blue"):
    """Print colored output"""
    colors = {
        "red": "\033[91m",
        "green": "\033[92m",
        "yellow": "\033[93m",
        "blue": "\033[94m",
        "reset": "\033[0m"
    }
    print(f"{colors.get(color, '')}{message}{colors['reset']}")

def check_file_exists(filepath, error_message):
    """Check if a file exists"""
    if not Path(filepath).exists():
        print_colored(f"❌ Error: {error_message}", "red")
        sys.exit(1)

def check_port_open(host, port):
    """Check if a port is open"""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.settimeout(2)
    result = sock.connect_ex((host, port))
    sock.close()
    return result == 0

def main():
    print_colored("🚀 Starting Nearby Places Backend...", "blue")

    check_file_exists("nearby_places/main.py", "nearby_places/main.py not found. Please run this script from the backend directory.")

    if not Path(".env").exists() and not Path("../.env").exists():
        print_colored("⚠️  No .env file found, using built-in defaults.", "yellow")
        print("Override any of these if needed:")
        print("  PLACES_API_BASE_URL=http://localhost:8080/places/v1")
        print("  NEARBY_PLACES_RANGE=100")
        print("  NEARBY_PLACES_LIMIT=10")
        print("  LOGGER=20")

    port = int(os.environ.get("PORT", "8000"))
    if check_port_open("localhost", port):
        print_colored(f"❌ Port {port} is already in use.", "red")
        sys.exit(1)

    print_colored("✅ All checks passed!", "green")
    print_colored("🌐 Starting Uvicorn server...", "blue")
    print(f"📍 Places endpoint: http://localhost:{port}/places")
    print(f"📍 API Health check: http://localhost:{port}/health")
    print()

    try:
        subprocess.run([
            sys.executable, "-m", "uvicorn",
            "nearby_places.main:app",
            "--reload",
            "--host", "0.0.0.0",
            "--port", str(port)
        ], check=True)
    except KeyboardInterrupt:
        print_colored("\n👋 Places server stopped.", "yellow")
    except subprocess.CalledProcessError as e:
        print_colored(f"\n❌ Error starting server: {e}", "red")
        sys.exit(1)

if __name__ == "__main__":
    main()
