# =============================================================================
# app/__main__.py - Server Entry Point
# =============================================================================
# Usage:
#   python -m app
# =============================================================================

from app.main import run


if __name__ == "__main__":
    run()
