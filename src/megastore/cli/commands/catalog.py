"""Catalog management commands.

One command group is registered per entity kind (category, color, branch),
each with the same list/show/create/rename/delete/restore commands.
"""

import click

from megastore.cli.error_handling import handle_domain_error
from megastore.domain.catalog import service_for
from megastore.domain.entities import CatalogEntry, EntityKind
from megastore.domain.errors import DomainError


def format_status(entry: CatalogEntry) -> str:
    if entry.deleted_at is None:
        return "active"
    return f"deleted {entry.deleted_at:%Y-%m-%d %H:%M:%S}"


def build_group(kind: EntityKind) -> click.Group:
    """Create the command group for one entity kind."""

    @click.group(help=f"Manage {kind.plural}.")
    def group():
        pass

    @group.command("list")
    @click.pass_context
    def list_entries(ctx):
        """List all records, deleted ones included."""
        service = service_for(ctx.obj["db"], kind)

        entries = service.list_entries()
        if not entries:
            click.echo(f"No {kind.plural} found.")
            return

        click.echo(f"\n{kind.plural.capitalize()}:")
        click.echo("-" * 60)
        for entry in entries:
            click.echo(f"ID: {entry.id:3d} | {entry.name:20s} | {format_status(entry)}")

    @group.command("show")
    @click.argument("entry_id", metavar="ID", type=int)
    @click.pass_context
    def show_entry(ctx, entry_id: int):
        """Show an active record."""
        service = service_for(ctx.obj["db"], kind)

        try:
            entry = service.get_entry(entry_id)
        except DomainError as e:
            handle_domain_error(ctx, e)
        click.echo(f"ID: {entry.id}")
        click.echo(f"Name: {entry.name}")
        click.echo(f"Created: {entry.created_at:%Y-%m-%d %H:%M:%S}")

    @group.command("create")
    @click.argument("name")
    @click.pass_context
    def create_entry(ctx, name: str):
        """Create a record. The name is stored capitalized."""
        service = service_for(ctx.obj["db"], kind)

        try:
            entry = service.create_entry(name)
        except DomainError as e:
            handle_domain_error(ctx, e)
        click.echo(f"Created {kind.label} '{entry.name}' (ID: {entry.id})")

    @group.command("rename")
    @click.argument("entry_id", metavar="ID", type=int)
    @click.argument("new_name", metavar="NEW_NAME")
    @click.pass_context
    def rename_entry(ctx, entry_id: int, new_name: str):
        """Rename an active record."""
        service = service_for(ctx.obj["db"], kind)

        try:
            entry = service.update_entry(entry_id, new_name)
        except DomainError as e:
            handle_domain_error(ctx, e)
        click.echo(f"Renamed {kind.label} {entry.id} to '{entry.name}'")

    @group.command("delete")
    @click.argument("entry_id", metavar="ID", type=int)
    @click.pass_context
    def delete_entry(ctx, entry_id: int):
        """Soft-delete a record. It can be brought back with 'restore'."""
        service = service_for(ctx.obj["db"], kind)

        try:
            entry = service.delete_entry(entry_id)
        except DomainError as e:
            handle_domain_error(ctx, e)
        click.echo(f"Deleted {kind.label} '{entry.name}' (ID: {entry.id})")

    @group.command("restore")
    @click.argument("entry_id", metavar="ID", type=int)
    @click.pass_context
    def restore_entry(ctx, entry_id: int):
        """Restore a deleted record."""
        service = service_for(ctx.obj["db"], kind)

        try:
            entry = service.restore_entry(entry_id)
        except DomainError as e:
            handle_domain_error(ctx, e)
        click.echo(f"Restored {kind.label} '{entry.name}' (ID: {entry.id})")

    return group


def register_commands(cli):
    """Register catalog commands with main CLI."""
    for kind in EntityKind:
        cli.add_command(build_group(kind), name=kind.value)
