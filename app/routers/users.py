# =============================================================================
# app/routers/users.py - Users Controller
# =============================================================================
# Two user endpoints backed by a single controller class.
#
# This module is a review target: it is seeded on purpose with the problems
# listed in core/findings.py (raw SQL concatenation, no input validation, no
# permission check, a wasteful loop, duplicated prints). Keep them intact.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse

from app.config import settings

logger = logging.getLogger(__name__)

router = APIRouter()


class UserController:
    """
    Request handling for /api/users.

    Both handlers return fixed strings; the private helpers only simulate
    a database and a processing step.
    """

    def __init__(self, loop_count: int | None = None):
        self.loop_count = settings.CREATE_LOOP_COUNT if loop_count is None else loop_count

    def get_user(self, id: str) -> str:
        # No input validation, and the id goes straight into the SQL text
        sql = "SELECT * FROM users WHERE id = " + id
        logger.debug(f"Built query: {sql}")

        # No exception handling
        return self._execute_query(sql)

    def create_user(self, user_data: str) -> str:
        # No parameter validation
        # No permission check

        for i in range(self.loop_count):
            # Inefficient loop
            self._process_user_data(user_data + str(i))

        return "User created"

    # Long, repetitive method
    def complex_method(self) -> None:
        a = 1
        b = 2
        c = 3
        print(a + b + c)
        print(a + b + c)
        print(a + b + c)
        print(a + b + c)
        print(a + b + c)

    def _execute_query(self, sql: str) -> str:
        # Simulated database query
        return "result"

    def _process_user_data(self, data: str) -> None:
        # Simulated processing
        pass


_controller = UserController()


def get_user_controller() -> UserController:
    """Return the shared controller instance."""
    return _controller


# Type alias for dependency injection
UserControllerDep = Annotated[UserController, Depends(get_user_controller)]


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/users/{id}", response_class=PlainTextResponse)
async def get_user(id: str, controller: UserControllerDep):
    """
    Look up a user by id.

    Always answers with the placeholder query result.
    """
    return controller.get_user(id)


@router.post("/users", response_class=PlainTextResponse)
async def create_user(request: Request, controller: UserControllerDep):
    """
    Create a user from the raw request body.

    The body is read as text with no schema and no content-type check.
    Like any required request body, a missing one is rejected with 400
    before the controller runs.
    """
    body = await request.body()
    if not body:
        raise HTTPException(status_code=400, detail="Required request body is missing")

    return controller.create_user(body.decode("utf-8", errors="replace"))
