"""Interactive console menu over the ArticleService."""

import datetime as dt
import logging
import sys
from collections.abc import Callable

from news_agency.application.services import ArticleService
from news_agency.domain.entities import Article, ArticleStatus
from news_agency.domain.exceptions import EntityNotFoundError, PersistenceError
from news_agency.presentation.console import formatting

logger = logging.getLogger(__name__)

_STATUS_CHOICES: dict[int, ArticleStatus] = {
    1: ArticleStatus.DRAFT,
    2: ArticleStatus.PUBLISHED,
    3: ArticleStatus.PENDING,
    4: ArticleStatus.ARCHIVED,
}
_KEEP_STATUS_CHOICE = 5


def _print_error(message: str) -> None:
    print(message, file=sys.stderr)


class ConsoleMenu:
    """Menu loop for one interactive user.

    ``input_func``/``output``/``error_output`` default to the terminal and
    are swapped for scripted callables in tests.
    """

    def __init__(
        self,
        service: ArticleService,
        input_func: Callable[[str], str] | None = None,
        output: Callable[[str], None] = print,
        error_output: Callable[[str], None] = _print_error,
        today: Callable[[], dt.date] = dt.date.today,
    ):
        self._service = service
        self._input = input_func or input
        self._out = output
        self._err = error_output
        self._today = today
        self.running = True
        self._actions: dict[int, Callable[[], None]] = {
            1: self.view_all_articles,
            2: self.view_published_articles,
            3: self.create_article,
            4: self.edit_article,
            5: self.delete_article,
            6: self.search_articles,
            7: self.view_statistics,
            8: self.view_regions_and_languages,
            9: self.exit,
        }

    def run(self) -> None:
        """Show the menu until the user exits or input ends."""
        while self.running:
            self._out(formatting.main_menu())
            try:
                choice = self._read_int("Enter your choice: ")
            except EOFError:
                break
            self.handle_choice(choice)

    def handle_choice(self, choice: int) -> None:
        action = self._actions.get(choice)
        if action is None:
            self._out("Invalid choice! Please try again.")
            return
        try:
            action()
        except PersistenceError as exc:
            logger.debug("Operation %d failed", choice, exc_info=exc)
            self._err(formatting.failure(f"Database error: {exc}"))
        except EOFError:
            self.running = False

    # ── Prompts ─────────────────────────────────────────────────────

    def _ask(self, prompt: str) -> str:
        return self._input(prompt)

    def _read_int(self, prompt: str) -> int:
        while True:
            raw = self._input(prompt)
            try:
                return int(raw.strip())
            except ValueError:
                self._out("Please enter a valid number.")

    def _read_date(self, prompt: str) -> dt.date | None:
        """Blank → None; unparsable → ValueError."""
        raw = self._ask(prompt).strip()
        if not raw:
            return None
        return dt.date.fromisoformat(raw)

    def _choose_status(self, allow_keep: bool) -> int:
        """Print the status options and return the number typed."""
        self._out("Select status:" if not allow_keep else "Select new status:")
        for number, status in _STATUS_CHOICES.items():
            self._out(f"{number}. {status.value.capitalize()}")
        if allow_keep:
            self._out(f"{_KEEP_STATUS_CHOICE}. Keep current")
            return self._read_int(f"Enter status choice (1-{_KEEP_STATUS_CHOICE}): ")
        return self._read_int("Enter status choice (1-4): ")

    # ── Actions ─────────────────────────────────────────────────────

    def view_all_articles(self) -> None:
        self._out(formatting.heading("ALL ARTICLES"))
        articles = self._service.list_articles()
        if not articles:
            self._out("No articles found.")
            return
        self._out(formatting.article_table(articles, show_status=True))

    def view_published_articles(self) -> None:
        self._out(formatting.heading("PUBLISHED ARTICLES"))
        articles = self._service.list_published()
        if not articles:
            self._out("No published articles found.")
            return
        self._out(formatting.article_table(articles, show_status=False))

    def create_article(self) -> None:
        self._out(formatting.heading("CREATE NEW ARTICLE"))
        article = Article()
        article.title = self._ask("Enter title: ")

        author = self._ask("Enter author (optional): ")
        if author.strip():
            article.author = author
        category = self._ask("Enter category (optional): ")
        if category.strip():
            article.category = category

        article.content = self._ask("Enter content: ")
        article.region = self._ask("Enter region: ")
        article.language = self._ask("Enter language: ")

        try:
            article.date = self._read_date("Enter date (YYYY-MM-DD) or press Enter for today: ") or self._today()
        except ValueError:
            self._out("Invalid date format. Using today's date.")
            article.date = self._today()

        status = _STATUS_CHOICES.get(self._choose_status(allow_keep=False))
        if status is None:
            self._out("Invalid choice. Setting status to Draft.")
            status = ArticleStatus.DRAFT
        article.status = status

        if not article.is_valid():
            self._err(formatting.failure(f"Article validation failed: {article.validation_errors()}"))
            return

        created = self._service.create_article(article)
        self._out(formatting.success(f"Article created successfully with ID: {created.id}"))

    def edit_article(self) -> None:
        self._out(formatting.heading("EDIT ARTICLE"))
        article_id = self._read_int("Enter article ID to edit: ")
        article = self._service.find_article(article_id)
        if article is None:
            self._out(f"Article not found with ID: {article_id}")
            return

        self._out("\nCurrent Article:")
        self._out(formatting.article_details(article))
        self._out("\nEnter new values (press Enter to keep current value):")

        prompts = [
            ("title", f"Title [{article.title}]: "),
            ("author", f"Author [{article.author or 'None'}]: "),
            ("category", f"Category [{article.category or 'None'}]: "),
            ("content", f"Content [{article.truncated_content(50)}]: "),
            ("region", f"Region [{article.region}]: "),
            ("language", f"Language [{article.language}]: "),
        ]
        for field_name, prompt in prompts:
            value = self._ask(prompt)
            if value.strip():
                setattr(article, field_name, value)

        try:
            new_date = self._read_date(f"Date [{article.formatted_date}] (YYYY-MM-DD): ")
        except ValueError:
            self._out("Invalid date format. Keeping current date.")
        else:
            if new_date is not None:
                article.date = new_date

        self._out(f"Current status: {article.status.value if article.status else 'None'}")
        choice = self._choose_status(allow_keep=True)
        if choice in _STATUS_CHOICES:
            article.status = _STATUS_CHOICES[choice]
        elif choice != _KEEP_STATUS_CHOICE:
            self._out("Invalid choice. Keeping current status.")

        if not article.is_valid():
            self._err(formatting.failure(f"Article validation failed: {article.validation_errors()}"))
            return

        try:
            self._service.update_article(article)
        except EntityNotFoundError:
            self._err(formatting.failure("Failed to update article."))
            return
        self._out(formatting.success("Article updated successfully!"))

    def delete_article(self) -> None:
        self._out(formatting.heading("DELETE ARTICLE"))
        article_id = self._read_int("Enter article ID to delete: ")
        article = self._service.find_article(article_id)
        if article is None:
            self._out(f"Article not found with ID: {article_id}")
            return

        self._out("\nArticle to delete:")
        self._out(formatting.article_details(article))
        confirmation = self._ask("\nAre you sure you want to delete this article? (y/N): ")
        if confirmation.strip().lower() not in ("y", "yes"):
            self._out("Deletion cancelled.")
            return

        try:
            self._service.delete_article(article_id)
        except EntityNotFoundError:
            self._err(formatting.failure("Failed to delete article."))
            return
        self._out(formatting.success("Article deleted successfully!"))

    def search_articles(self) -> None:
        self._out(formatting.heading("SEARCH ARTICLES"))
        term = self._ask("Enter search term: ")
        if not term.strip():
            self._out("Search term cannot be empty.")
            return
        articles = self._service.search_articles(term)
        if not articles:
            self._out(f"No articles found matching: {term}")
            return
        self._out(f"\nFound {len(articles)} article(s) matching: {term}")
        self._out(formatting.article_table(articles, show_status=True))

    def view_statistics(self) -> None:
        self._out(formatting.heading("ARTICLE STATISTICS"))
        stats = self._service.get_statistics()
        regions, languages = self._service.get_filter_options()
        self._out(formatting.statistics_block(stats, regions, languages))

    def view_regions_and_languages(self) -> None:
        self._out(formatting.heading("REGIONS & LANGUAGES"))
        regions, languages = self._service.get_filter_options()
        self._out(formatting.numbered_list("Available Regions", regions))
        self._out("")
        self._out(formatting.numbered_list("Available Languages", languages))

    def exit(self) -> None:
        self._out("Thank you for using News Agency Management System!")
        self.running = False
