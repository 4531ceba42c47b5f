# =============================================================================
# tests/ - Test Suite
# =============================================================================
# - test_users.py: Users controller and its two endpoints
# - test_findings.py: Seeded findings manifest and its endpoint
# - test_app.py: Settings, error handling, root and health endpoints
#
# Run tests with: pytest
# =============================================================================
