# =============================================================================
# app/routers/fixture.py - Fixture Metadata Endpoints
# =============================================================================
# Exposes the seeded findings manifest so review tools can fetch the answer
# key from a running instance.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Query
from pydantic import BaseModel

from app.exceptions import UnknownCategoryError
from core.findings import FindingCategory, SeededFinding, get_seeded_findings

logger = logging.getLogger(__name__)

router = APIRouter()


class FindingsResponse(BaseModel):
    """Seeded findings, optionally filtered by category."""
    total: int
    findings: list[SeededFinding]


@router.get("/fixture/findings", response_model=FindingsResponse)
async def list_findings(
    category: Annotated[str | None, Query(description="Limit to one category")] = None
):
    """
    List the problems planted in the users controller.
    """
    try:
        findings = get_seeded_findings(category)
    except ValueError:
        raise UnknownCategoryError(category, [c.value for c in FindingCategory]) from None

    logger.debug(f"Returning {len(findings)} seeded findings (category={category})")
    return FindingsResponse(total=len(findings), findings=findings)
