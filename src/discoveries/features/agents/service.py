"""Business logic for agents."""
from typing import Optional
from . import models


async def get_agent_by_call_sign(call_sign: str) -> Optional[models.Agent]:
    """Retrieves an agent by call sign, or None if there is no such agent."""
    return await models.Agent.get_or_none(call_sign=call_sign)


async def create_agent(call_sign: str, given_name: str, family_name: str) -> models.Agent:
    return await models.Agent.create(
        call_sign=call_sign, given_name=given_name, family_name=family_name
    )
