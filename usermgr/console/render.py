"""Rich rendering for users, posts and statistics."""

from __future__ import annotations

from typing import Sequence
import os
import platform
import sys

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from usermgr.domain.models import User, UserStats
from usermgr.repositories.json_storage import StoreInfo

MENU_OPTIONS = (
    ("1", "List All Users"),
    ("2", "View User Details"),
    ("3", "Add New User"),
    ("4", "Edit User"),
    ("5", "Delete User"),
    ("6", "Search Users"),
    ("7", "Statistics"),
    ("8", "Reload from File"),
    ("9", "Exit"),
)
PREVIEW_CHARS = 42


def _short_id(value: str, width: int) -> str:
    return value if len(value) <= width else value[:width] + "..."


class Renderer:
    """Prints records and messages; never touches the data model."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def intro(self) -> None:
        self.console.print(
            Panel(
                "[cyan]USER MANAGEMENT SYSTEM[/]\n"
                f"Platform: [green]{sys.platform}[/]\n"
                f"Python: [green]{platform.python_version()}[/]\n"
                f"Process ID: [green]{os.getpid()}[/]",
                border_style="blue",
            )
        )

    def menu(self) -> None:
        body = "\n".join(f"{key}. {label}" for key, label in MENU_OPTIONS)
        self.console.print()
        self.console.print(Panel(body, title="[white on blue] USER MANAGEMENT SYSTEM [/]", border_style="grey50"))

    def info(self, message: str) -> None:
        self.console.print(f"[cyan]{message}[/]")

    def success(self, message: str) -> None:
        self.console.print(f"[green]{message}[/]")

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]{message}[/]")

    def error(self, message: str) -> None:
        self.console.print(f"[red]{message}[/]")

    def user_table(self, rows: Sequence[tuple[User, int]], title: str, *, with_created: bool = True) -> None:
        table = Table(title=title, title_style="cyan")
        table.add_column("ID", style="dim")
        table.add_column("Username")
        table.add_column("Email")
        table.add_column("Posts", justify="right", style="green")
        if with_created:
            table.add_column("Created At")
        for user, post_count in rows:
            row = [escape(_short_id(user.id, 16)), escape(user.username), escape(user.email), str(post_count)]
            if with_created:
                row.append(user.created_at.astimezone().strftime("%Y-%m-%d"))
            table.add_row(*row)
        self.console.print(table)

    def user_details(self, user: User) -> None:
        self.console.print(
            Panel(
                f"ID: {escape(user.id)}\n"
                f"Username: [green]{escape(user.username)}[/]\n"
                f"Email: [green]{escape(user.email)}[/]\n"
                f"Created At: [green]{user.created_at.astimezone():%Y-%m-%d %H:%M:%S}[/]\n"
                f"Total Posts: [green]{len(user.posts)}[/]",
                title="[cyan]USER DETAILS[/]",
            )
        )
        if not user.posts:
            self.warning("No posts found for this user.")
            return
        for index, post in enumerate(user.posts, start=1):
            preview = post.content[:PREVIEW_CHARS] + ("..." if len(post.content) > PREVIEW_CHARS else "")
            self.console.print(
                Panel(
                    f"Tag: [yellow]{escape(post.tag)}[/]\n"
                    f"Created: [green]{post.created_at.astimezone():%Y-%m-%d}[/]\n"
                    f"[grey50]{escape(preview)}[/]",
                    title=f"[bold]{index}. {escape(post.title)}[/]",
                    title_align="left",
                )
            )

    def user_summary(self, user: User, title: str) -> None:
        self.console.print(
            Panel(f"ID: {escape(user.id)}\nUsername: {escape(user.username)}\nEmail: {escape(user.email)}", title=title)
        )

    def delete_warning(self, user: User) -> None:
        self.console.print(
            Panel(
                "[red]WARNING: This action cannot be undone![/]\n"
                f"You are about to delete user: [red]{escape(user.username)}[/]\n"
                f"This will also delete [red]{len(user.posts)}[/] posts.",
                border_style="red",
            )
        )

    def statistics(self, stats: UserStats) -> None:
        self.console.print(
            Panel(
                f"Total Users: [cyan]{stats.total_users}[/]\n"
                f"Total Posts: [cyan]{stats.total_posts}[/]\n"
                f"Users with Posts: [cyan]{stats.users_with_posts}[/]\n"
                f"Average Posts per User: [cyan]{stats.average_posts:.2f}[/]\n"
                f"New Users (last 7 days): [green]{stats.new_users_last_7_days}[/]",
                title="[green]STATISTICS[/]",
            )
        )

    def file_info(self, info: StoreInfo) -> None:
        self.console.print(f"[blue]Data File:[/] {escape(str(info.path))}")
        self.console.print(f"[blue]Loaded Users:[/] {info.user_count}")
