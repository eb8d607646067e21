"""Business logic for authentication, such as user creation and retrieval."""
from typing import Optional
from . import models

async def get_user_by_username(username: str) -> Optional[models.User]:
    """Retrieves a user by their username.

    Args:
        username: The username of the user to retrieve.

    Returns:
        The User object if found, otherwise None.
    """
    return await models.User.get_or_none(username=username)

async def create_user(user_in: dict, hashed_password_val: str, role: str = "agent") -> models.User:
    """Creates a new user in the database.

    Args:
        user_in: A dictionary containing the user data (excluding password).
        hashed_password_val: The hashed password for the new user.
        role: "agent" or "admin".

    Returns:
        The newly created User object.
    """
    return await models.User.create(
        **user_in,
        hashed_password=hashed_password_val,
        role=role,
    )

async def link_user_to_agent(user: models.User, agent_id: int) -> models.User:
    """Lets the user file reports as this agent. Only reachable from the admin CLI."""
    user.agent_id = agent_id
    await user.save(update_fields=["agent_id"])
    return user
