"""Interactive menus for users and the administrator."""
from __future__ import annotations

import logging
from typing import Callable, List

from sentiment import session
from sentiment.console import forms, render
from sentiment.errors import SentimentError
from sentiment.services import SortDirection, Storage
from sentiment.session import Actor

logger = logging.getLogger("sentiment.console")


class ConsoleApp:
    """Main menu, user menu and admin menu over one ``Storage``."""

    def __init__(self, storage: Storage):
        self.storage = storage

    # --- helpers ---

    def _retry(self, action: Callable[[], None]) -> None:
        """Run ``action`` until it succeeds or the user stops retrying."""
        while True:
            try:
                action()
                return
            except SentimentError as e:
                print(e)
            if not forms.confirm_form("Do you want to try again?"):
                return

    # --- main menu ---

    def run(self) -> None:
        while True:
            render.print_title("Sentiment Analysis Comment Desk")
            choice = render.print_menu("Choose menu", ["Login", "Register", "Admin", "Exit"])
            if choice == 1:
                actor = self.login_view()
                if actor:
                    self.user_menu(actor)
            elif choice == 2:
                self.register_view()
            elif choice == 3:
                actor = self.admin_login_view()
                if actor:
                    self.admin_menu(actor)
            else:
                print("Goodbye!")
                return

    def login_view(self) -> Actor | None:
        render.print_breadcrumbs(["Login"])
        render.print_title("LOGIN")
        result: List[Actor] = []

        def attempt():
            username, password = forms.login_form()
            result.append(session.login(self.storage.users, username, password))
            print("Login successful!")

        self._retry(attempt)
        return result[0] if result else None

    def register_view(self) -> None:
        render.print_breadcrumbs(["Register"])
        render.print_title("REGISTER")

        def attempt():
            session.register(self.storage.users, *forms.register_form())
            print("Registration successful!")

        self._retry(attempt)

    def admin_login_view(self) -> Actor | None:
        render.print_breadcrumbs(["Admin"])
        render.print_title("ADMIN LOGIN")
        result: List[Actor] = []

        def attempt():
            username, password = forms.login_form()
            result.append(session.admin_login(username, password))
            print("Welcome, administrator!")

        self._retry(attempt)
        return result[0] if result else None

    # --- user menu ---

    def user_menu(self, actor: Actor) -> None:
        options = [
            "New comment",
            "All comments",
            "My comments",
            "Search comments",
            "Sort comments",
            "Edit my comment",
            "Delete my comment",
            "Logout",
        ]
        while True:
            render.print_breadcrumbs(["User Menu"])
            render.print_title(f"WELCOME, {actor.username.upper()}")
            choice = render.print_menu("Choose menu", options)
            if choice == len(options):
                logger.info("User %s logged out", actor.username)
                return
            self._comment_action(actor, choice, ["User Menu", options[choice - 1]])

    def _comment_action(self, actor: Actor, choice: int, crumbs: List[str]) -> None:
        comments = self.storage.comments
        render.print_breadcrumbs(crumbs)
        if choice == 1:
            self._retry(lambda: self._create_comment(actor))
        elif choice == 2:
            render.print_comments(comments.list_all())
        elif choice == 3:
            render.print_comments(session.editable_comments(actor, comments))
        elif choice == 4:
            self._retry(lambda: render.print_comments(comments.search_by_text(forms.search_form())))
        elif choice == 5:
            render.print_comments(comments.sort_by_id(SortDirection(forms.sort_form())))
        elif choice == 6:
            self._retry(lambda: self._edit_comment(actor))
        elif choice == 7:
            self._retry(lambda: self._delete_comment(actor))

    def _create_comment(self, actor: Actor) -> None:
        text, category = forms.comment_form(self.storage.comments.categories)
        comment_id = self.storage.comments.create_comment(actor.user_id, text, category)
        print(f"Comment {comment_id} saved.")

    def _edit_comment(self, actor: Actor) -> None:
        comments = self.storage.comments
        render.print_comments(session.editable_comments(actor, comments))
        comment = comments.find_by_id(forms.id_form("Comment"))
        session.ensure_can_modify(actor, comment)
        text, category = forms.edit_comment_form(comments.categories)
        comments.edit_comment(comment.id, text, category)
        print(f"Comment {comment.id} updated.")

    def _delete_comment(self, actor: Actor) -> None:
        comments = self.storage.comments
        render.print_comments(session.editable_comments(actor, comments))
        comment = comments.find_by_id(forms.id_form("Comment"))
        session.ensure_can_modify(actor, comment)
        if forms.confirm_form(f"Delete comment {comment.id}?"):
            comments.delete_comment(comment.id)
            print(f"Comment {comment.id} deleted.")

    # --- admin menu ---

    def admin_menu(self, actor: Actor) -> None:
        options = ["Manage users", "Manage comments", "Category statistics", "Logout"]
        while True:
            render.print_breadcrumbs(["Admin Menu"])
            render.print_title("ADMIN MENU")
            choice = render.print_menu("Choose menu", options)
            if choice == 1:
                self.admin_users_menu()
            elif choice == 2:
                self.admin_comments_menu(actor)
            elif choice == 3:
                render.print_breadcrumbs(["Admin Menu", "Category Statistics"])
                render.print_category_counts(self.storage.comments.count_categories())
            else:
                logger.info("Admin logged out")
                return

    def admin_users_menu(self) -> None:
        users = self.storage.users
        options = ["List users", "Search users", "Sort users", "Create user", "Edit user", "Delete user", "Back"]
        while True:
            render.print_breadcrumbs(["Admin Menu", "Users"])
            render.print_title("MANAGE USERS")
            choice = render.print_menu("Choose menu", options)
            if choice == 1:
                render.print_users(users.list_all())
            elif choice == 2:
                self._retry(lambda: render.print_users(users.search_by_username(forms.search_form())))
            elif choice == 3:
                render.print_users(users.sort_by_id(SortDirection(forms.sort_form())))
            elif choice == 4:
                self._retry(self._create_user)
            elif choice == 5:
                self._retry(self._edit_user)
            elif choice == 6:
                self._retry(self._delete_user)
            else:
                return

    def _create_user(self) -> None:
        username, password, confirm = forms.register_form()
        session.register(self.storage.users, username, password, confirm)
        print(f"User '{username}' created.")

    def _edit_user(self) -> None:
        users = self.storage.users
        render.print_users(users.list_all())
        user = users.find_by_id(forms.id_form("User"))
        username, password = forms.edit_user_form()
        users.edit_user(user.id, username, password)
        print(f"User {user.id} updated.")

    def _delete_user(self) -> None:
        users = self.storage.users
        render.print_users(users.list_all())
        user = users.find_by_id(forms.id_form("User"))
        if forms.confirm_form(f"Delete user '{user.username}'?"):
            users.delete_user(user.id)
            print(f"User {user.id} deleted.")

    def admin_comments_menu(self, actor: Actor) -> None:
        options = [
            "New comment",
            "All comments",
            "Search comments",
            "Sort comments",
            "Edit comment",
            "Delete comment",
            "Back",
        ]
        # Map onto the shared comment actions (1, 2, 4, 5, 6, 7)
        actions = [1, 2, 4, 5, 6, 7]
        while True:
            render.print_breadcrumbs(["Admin Menu", "Comments"])
            render.print_title("MANAGE COMMENTS")
            choice = render.print_menu("Choose menu", options)
            if choice == len(options):
                return
            self._comment_action(actor, actions[choice - 1], ["Admin Menu", "Comments", options[choice - 1]])
