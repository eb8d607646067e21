import asyncio
import logging
import typer
from tortoise import Tortoise
from tortoise.exceptions import IntegrityError

from discoveries.main import TORTOISE_ORM_CONFIG
from discoveries.features.auth.security import get_password_hash
from discoveries.features.auth.models import User as AuthUser
from discoveries.features.auth import service as auth_service
from discoveries.features.agents import service as agent_service
from discoveries.features.locations import service as location_service

logger = logging.getLogger(__name__)

app = typer.Typer(name="discoveries-cli", help="CLI for seeding Agent Discoveries data.")

# Shared async context manager for database connection
class DBConnection:
    async def __aenter__(self):
        await Tortoise.init(config=TORTOISE_ORM_CONFIG)
        await Tortoise.generate_schemas(safe=True) # Generate schema if it doesn't exist
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await Tortoise.close_connections()

# User management commands
user_app = typer.Typer(name="users", help="Manage user accounts.")
app.add_typer(user_app)

agent_app = typer.Typer(name="agents", help="Manage agents.")
app.add_typer(agent_app)

location_app = typer.Typer(name="locations", help="Manage locations.")
app.add_typer(location_app)

@user_app.command("create-admin")
def create_admin_user_command(
    username: str = typer.Option(..., prompt=True, help="Username for the new admin."),
    password: str = typer.Option(..., prompt=True, hide_input=True, confirmation_prompt=True, help="Password for the new admin.")
):
    """Creates a new admin user."""
    asyncio.run(_create_admin_user(username, password))

async def _create_admin_user(username: str, password: str):
    async with DBConnection():
        typer.echo(f"Attempting to create admin user: {username}...")
        if await AuthUser.filter(username=username).exists():
            typer.secho(f"Error: User with username '{username}' already exists.", fg=typer.colors.RED)
            raise typer.Exit(code=1)

        admin_user = await AuthUser.create(
            username=username,
            hashed_password=get_password_hash(password),
            role="admin",
            is_active=True
        )
        typer.secho(f"Admin user '{admin_user.username}' created successfully with ID: {admin_user.id}", fg=typer.colors.GREEN)

@user_app.command("link-agent")
def link_agent_command(
    username: str = typer.Argument(..., help="The user who will file reports."),
    call_sign: str = typer.Argument(..., help="Call sign of the agent the user reports as."),
):
    """Links a user account to an agent so it may file that agent's reports."""
    asyncio.run(_link_agent(username, call_sign))

async def _link_agent(username: str, call_sign: str):
    async with DBConnection():
        user = await AuthUser.get_or_none(username=username)
        if not user:
            typer.secho(f"Error: User with username '{username}' not found.", fg=typer.colors.RED)
            raise typer.Exit(code=1)

        agent = await agent_service.get_agent_by_call_sign(call_sign)
        if not agent:
            typer.secho(f"Error: Agent '{call_sign}' not found.", fg=typer.colors.RED)
            raise typer.Exit(code=1)

        await auth_service.link_user_to_agent(user, agent.id)
        typer.secho(f"User '{username}' now files reports as agent '{call_sign}'.", fg=typer.colors.GREEN)

@agent_app.command("create")
def create_agent_command(
    call_sign: str = typer.Argument(..., help="Unique call sign, e.g. ALPHA1."),
    given_name: str = typer.Option(..., prompt=True),
    family_name: str = typer.Option(..., prompt=True),
):
    """Creates a new agent."""
    asyncio.run(_create_agent(call_sign, given_name, family_name))

async def _create_agent(call_sign: str, given_name: str, family_name: str):
    async with DBConnection():
        try:
            agent = await agent_service.create_agent(call_sign, given_name, family_name)
        except IntegrityError as e:
            typer.secho(f"Error: could not create agent '{call_sign}': {e}", fg=typer.colors.RED)
            raise typer.Exit(code=1)
        typer.secho(f"Agent '{agent.call_sign}' created with ID: {agent.id}", fg=typer.colors.GREEN)

@location_app.command("create")
def create_location_command(
    site_name: str = typer.Argument(..., help="Name of the site."),
    location: str = typer.Option(..., prompt=True, help="Where the site is, e.g. a city."),
    time_zone: str = typer.Option("UTC", help="IANA zone name used to display report times."),
):
    """Creates a new location."""
    asyncio.run(_create_location(site_name, location, time_zone))

async def _create_location(site_name: str, location: str, time_zone: str):
    async with DBConnection():
        try:
            new_location = await location_service.create_location(site_name, location, time_zone)
        except ValueError as e:
            typer.secho(f"Error: {e}", fg=typer.colors.RED)
            raise typer.Exit(code=1)
        typer.secho(f"Location '{new_location.site_name}' created with ID: {new_location.id}", fg=typer.colors.GREEN)

if __name__ == "__main__":
    app()
