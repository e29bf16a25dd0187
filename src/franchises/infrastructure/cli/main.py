import click
import uvicorn

from franchises.infrastructure.cli.branch_commands import branch_add, branch_rename
from franchises.infrastructure.cli.franchise_commands import (
    franchise_add,
    franchise_delete,
    franchise_list,
    franchise_rename,
    franchise_set_address,
    franchise_set_description,
    franchise_show,
    franchise_top_stock,
)
from franchises.infrastructure.cli.product_commands import (
    product_add,
    product_remove,
    product_rename,
    product_set_price,
    product_set_stock,
)
from franchises.domain.exceptions import StoreError
from franchises.infrastructure.config import get_settings
from franchises.infrastructure.logging_config import configure_logging


class FranchisesGroup(click.Group):
    """Root group that reports store failures as ``Error: ...`` lines."""

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except StoreError as exc:
            raise click.ClickException(str(exc)) from exc


@click.group(cls=FranchisesGroup)
def cli() -> None:
    """Franchise, branch and product management."""
    configure_logging(get_settings())


@cli.group()
def franchise() -> None:
    """Manage franchises."""


@cli.group()
def branch() -> None:
    """Manage branches of a franchise."""


@cli.group()
def product() -> None:
    """Manage products of a branch."""


@cli.command()
@click.option("--host", default=None, help="Host to bind (defaults to settings).")
@click.option("--port", default=None, type=int, help="Port to listen on (defaults to settings).")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development.")
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Run the HTTP API."""
    settings = get_settings()
    uvicorn.run(
        "franchises.infrastructure.api.app:create_app",
        factory=True,
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


# Register subcommands
franchise.add_command(franchise_add)
franchise.add_command(franchise_delete)
franchise.add_command(franchise_list)
franchise.add_command(franchise_rename)
franchise.add_command(franchise_set_address)
franchise.add_command(franchise_set_description)
franchise.add_command(franchise_show)
franchise.add_command(franchise_top_stock)
branch.add_command(branch_add)
branch.add_command(branch_rename)
product.add_command(product_add)
product.add_command(product_remove)
product.add_command(product_rename)
product.add_command(product_set_price)
product.add_command(product_set_stock)
