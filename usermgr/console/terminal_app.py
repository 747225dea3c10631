"""
Menu-driven session over the user directory.

One prompt is pending at a time: show the menu, read a line, dispatch on the
trimmed choice, render the outcome and loop until exit or end of input.
"""

from __future__ import annotations

from typing import Callable, Optional
import logging

from rich.markup import escape

from usermgr.console.render import Renderer
from usermgr.core.config import get_settings
from usermgr.domain.models import UserInput
from usermgr.services.user_service import UserService, ValidationError

logger = logging.getLogger(__name__)

DELETE_CONFIRMATION = "DELETE"


class PromptReader:
    """Reads one line per prompt from the console until closed."""

    def __init__(self, ask: Callable[[str], str]) -> None:
        self._ask = ask
        self.closed = False

    def __call__(self, prompt: str) -> str:
        if self.closed:
            raise EOFError("input reader is closed")
        return self._ask(prompt)

    def close(self) -> None:
        self.closed = True


class TerminalApp:
    """Interactive controller translating menu choices into UserService calls."""

    def __init__(
        self,
        service_factory: Callable[[], UserService] = UserService,
        renderer: Renderer | None = None,
        reader: Optional[PromptReader] = None,
        *,
        pause: bool | None = None,
    ) -> None:
        self.service_factory = service_factory
        self.service = service_factory()
        self.renderer = renderer or Renderer()
        self.reader = reader or PromptReader(self.renderer.console.input)
        self.pause = get_settings().pause if pause is None else pause
        self.is_running = True
        self.actions: dict[str, Callable[[], None]] = {
            "1": self.list_all_users,
            "2": self.view_user_details,
            "3": self.add_user,
            "4": self.edit_user,
            "5": self.delete_user,
            "6": self.search_users,
            "7": self.show_statistics,
            "8": self.reload_from_file,
            "9": self.exit,
        }

    def question(self, prompt: str) -> str:
        return self.reader(f"[yellow]{prompt}[/]")

    def wait_for_enter(self) -> None:
        if self.pause:
            self.reader("[grey50]\nPress Enter to continue...[/]")

    def start(self) -> None:
        if self.pause:
            self.renderer.intro()
            try:
                self.wait_for_enter()
            except EOFError:
                self.exit()
                return
        self.renderer.success("Welcome to User Management System!")
        while self.is_running:
            self.renderer.menu()
            try:
                choice = self.question("\nChoose an option (1-9) : ").strip()
            except EOFError:
                self.exit()
                break
            logger.debug("Menu choice %r", choice)
            action = self.actions.get(choice)
            if action is None:
                self.renderer.error("Invalid option! Please choose 1-9.")
                continue
            try:
                action()
            except EOFError:
                self.exit()

    # -------------------------------------- actions --------------------------------------
    def list_all_users(self) -> None:
        rows = self.service.users_with_post_count()
        if not rows:
            self.renderer.warning("No users found.")
            return
        self.renderer.user_table(rows, "ALL USERS")
        self.wait_for_enter()

    def view_user_details(self) -> None:
        user_id = self.question("Enter User ID : ").strip()
        user = self.service.find_by_id(user_id)
        if not user:
            self.renderer.error("User not found!")
            return
        self.renderer.user_details(user)
        self.wait_for_enter()

    def add_user(self) -> None:
        self.renderer.info("ADD NEW USER")
        username = self.question("Username : ").strip()
        email = self.question("Email : ").strip()
        password = self.question("Password : ")
        if not (username and email and password.strip()):
            self.renderer.error("All fields are required!")
            return
        try:
            created = self.service.create(UserInput(username=username, email=email, password=password))
        except ValidationError as exc:
            self.renderer.error(exc.message)
            return
        self.renderer.success("User created successfully!")
        self.renderer.user_summary(created, "NEW USER")
        self.wait_for_enter()

    def edit_user(self) -> None:
        user_id = self.question("Enter User ID to edit : ").strip()
        user = self.service.find_by_id(user_id)
        if not user:
            self.renderer.error("User not found!")
            return
        self.renderer.info("EDIT USER (leave blank to keep current value)")
        answers = {
            "username": self.question(f"Username ({escape(user.username)}) : ").strip(),
            "email": self.question(f"Email ({escape(user.email)}) : ").strip(),
            "password": self.question("Password (leave blank to keep) : "),
        }
        changes = {name: value for name, value in answers.items() if value.strip()}
        if not changes:
            self.renderer.warning("No changes made.")
            return
        updated = self.service.update(user_id, changes)
        if updated is None:
            self.renderer.error("Failed to update user!")
        else:
            self.renderer.success("User updated successfully!")
            self.renderer.user_summary(updated, "UPDATED USER")
        self.wait_for_enter()

    def delete_user(self) -> None:
        user_id = self.question("Enter User ID to delete : ").strip()
        user = self.service.find_by_id(user_id)
        if not user:
            self.renderer.error("User not found!")
            return
        self.renderer.delete_warning(user)
        confirm = self.question(f"Type '{DELETE_CONFIRMATION}' to confirm : ")
        if confirm.strip().upper() == DELETE_CONFIRMATION:
            if self.service.delete(user_id):
                self.renderer.success("User deleted successfully!")
            else:
                self.renderer.error("Failed to delete user!")
        else:
            self.renderer.warning("Deletion cancelled.")
        self.wait_for_enter()

    def search_users(self) -> None:
        query = self.question("Search by username or email : ").strip()
        if not query:
            self.renderer.error("Please enter a search query!")
            return
        results = self.service.search(query)
        if not results:
            self.renderer.warning("No users found matching your search.")
            return
        self.renderer.user_table([(user, len(user.posts)) for user in results], f"SEARCH RESULTS ({len(results)} found)", with_created=False)
        self.wait_for_enter()

    def show_statistics(self) -> None:
        self.renderer.statistics(self.service.aggregate())
        self.wait_for_enter()

    def reload_from_file(self) -> None:
        self.service = self.service_factory()
        info = self.service.file_info()
        self.renderer.info(f"Reloading data from {escape(info.path.name)}...")
        outcome = self.service.store.load_outcome()
        if outcome.failed:
            reason = escape(outcome.error or "")
            self.renderer.error(f"Could not read {escape(str(info.path))}: {reason}")
        else:
            self.renderer.success(f"Reloaded {len(outcome.users)} users from file")
        self.renderer.file_info(info)
        self.wait_for_enter()

    def exit(self) -> None:
        self.renderer.success("\nThank you for using User Management System!")
        self.is_running = False
        self.reader.close()
