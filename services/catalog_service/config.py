import os

HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "5000"))

# Simulated network latency for the products listing
PRODUCTS_DELAY_SECONDS = float(os.environ.get("PRODUCTS_DELAY_SECONDS", "0.8"))

VERBOSE = os.environ.get("VERBOSE", "").lower() in ("1", "true", "yes")
QUIET = os.environ.get("QUIET", "").lower() in ("1", "true", "yes")
LOG_FILE = os.environ.get("LOG_FILE") or None
