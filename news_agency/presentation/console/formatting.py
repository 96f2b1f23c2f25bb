"""Text rendering of articles for the console menu."""

from news_agency.domain.entities import Article, ArticleStatistics
from news_agency.infrastructure.logging.colored_logger import Colors

TABLE_WIDTH = 120
DETAIL_WIDTH = 80
TITLE_WIDTH = 30


def success(message: str) -> str:
    return f"{Colors.GREEN}✓ {message}{Colors.RESET}"


def failure(message: str) -> str:
    return f"{Colors.RED}✗ {message}{Colors.RESET}"


def heading(title: str) -> str:
    return f"\n--- {title} ---"


def main_menu() -> str:
    rule = "=" * 50
    return "\n".join([
        "",
        rule,
        "           NEWS AGENCY MANAGEMENT",
        rule,
        "1. View All Articles",
        "2. View Published Articles",
        "3. Create New Article",
        "4. Edit Article",
        "5. Delete Article",
        "6. Search Articles",
        "7. View Statistics",
        "8. Manage Regions & Languages",
        "9. Exit",
        rule,
    ])


def _clip_title(title: str | None) -> str:
    title = title or ""
    if len(title) > TITLE_WIDTH:
        return title[: TITLE_WIDTH - 3] + "..."
    return title


def article_table(articles: list[Article], show_status: bool = True) -> str:
    """Tabular listing; the last column is the status or the author."""
    rule = "-" * TABLE_WIDTH
    last_header = "Status" if show_status else "Author"
    lines = [
        "",
        rule,
        f"{'ID':<5} {'Title':<30} {'Region':<15} {'Language':<15} {'Date':<15} {last_header:<15}"
        + (" Author" if show_status else ""),
        rule,
    ]
    for article in articles:
        row = (
            f"{article.id!s:<5} {_clip_title(article.title):<30} {article.region or '':<15} "
            f"{article.language or '':<15} {article.formatted_date:<15} "
        )
        if show_status:
            status = article.status.value if article.status else ""
            row += f"{status:<15} {article.author or ''}"
        else:
            row += f"{article.author or '':<15}"
        lines.append(row.rstrip())
    lines.append(rule)
    lines.append(f"Total: {len(articles)} articles")
    return "\n".join(lines)


def article_details(article: Article) -> str:
    return "\n".join([
        "",
        "=" * DETAIL_WIDTH,
        f"Article ID: {article.id}",
        f"Title: {article.title}",
        f"Author: {article.author or 'Not specified'}",
        f"Category: {article.category or 'Not specified'}",
        f"Region: {article.region}",
        f"Language: {article.language}",
        f"Date: {article.formatted_date}",
        f"Status: {article.status.value if article.status else ''}",
        f"Created: {article.formatted_created_at}",
        "-" * DETAIL_WIDTH,
        "Content:",
        article.content or "",
        "=" * DETAIL_WIDTH,
    ])


def statistics_block(stats: ArticleStatistics, regions: list[str], languages: list[str]) -> str:
    return "\n".join([
        f"Total Articles: {stats.total}",
        f"Published: {stats.published}",
        f"Draft: {stats.draft}",
        f"Pending: {stats.pending}",
        f"Archived: {stats.archived}",
        f"Regions: {len(regions)}",
        f"Languages: {len(languages)}",
        "",
        f"Regions: {', '.join(regions)}",
        f"Languages: {', '.join(languages)}",
    ])


def numbered_list(title: str, values: list[str]) -> str:
    lines = [f"{title} ({len(values)}):"]
    lines.extend(f"{index}. {value}" for index, value in enumerate(values, start=1))
    return "\n".join(lines)
