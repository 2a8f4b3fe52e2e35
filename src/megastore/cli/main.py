"""Main CLI entry point."""

import click
from megastore.database.factories import create_sqlite_database

# Import and register all commands at module level
from megastore.cli.commands import catalog, serve


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides MEGASTORE_DB_PATH environment variable)",
    envvar="MEGASTORE_DB_PATH",
)
@click.pass_context
def cli(ctx, db_path: str | None):
    """Megastore - catalog management for categories, colors and branches.

    Names are validated and stored capitalized; deleting a record only marks
    it as deleted, so it can be restored later.
    """
    ctx.ensure_object(dict)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db


# Register all commands
catalog.register_commands(cli)
serve.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
