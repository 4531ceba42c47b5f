# =============================================================================
# core/ - Framework-Independent Code
# =============================================================================
# - findings.py: The answer key of problems planted in the users controller
# =============================================================================
