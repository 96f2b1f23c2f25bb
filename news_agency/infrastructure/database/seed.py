"""Demo articles inserted into an empty articles table."""

import datetime as dt

from news_agency.application.interfaces import ArticleRepository
from news_agency.domain.entities import Article, ArticleStatus
from news_agency.infrastructure.logging.colored_logger import OperationLogger, StoreStage

_log = OperationLogger(__name__)

SAMPLE_ARTICLES: list[dict] = [
    {
        "title": "Technology Revolution in Indian Cities",
        "content": (
            "India is witnessing a technological revolution with cities like Bangalore, "
            "Hyderabad, and Pune emerging as major IT hubs. The adoption of artificial "
            "intelligence, machine learning, and blockchain technologies is transforming "
            "various sectors including healthcare, education, and finance."
        ),
        "region": "National",
        "language": "English",
        "date": dt.date(2024, 1, 15),
    },
    {
        "title": "हैदराबाद में नई मेट्रो लाइन का उद्घाटन",
        "content": (
            "हैदराबाद मेट्रो रेल की नई लाइन का आज उद्घाटन हुआ। इससे शहर के यातायात की "
            "समस्या में काफी राहत मिलने की उम्मीद है।"
        ),
        "region": "Telangana",
        "language": "Hindi",
        "date": dt.date(2024, 1, 14),
    },
    {
        "title": "సాంకేతిక పరిజ్ఞానంలో కొత్త పురోగతి",
        "content": (
            "కృత్రిమ మేధస్సు రంగంలో భారతీయ కంపెనీలు కొత్త మైలురాయిని సాధించాయి. ఈ "
            "పరిజ్ఞానం ఆరోగ్య రంగంలో విప్లవాత్మక మార్పులను తీసుకురానుంది."
        ),
        "region": "Andhra Pradesh",
        "language": "Telugu",
        "date": dt.date(2024, 1, 13),
    },
    {
        "title": "National Education Policy Implementation Update",
        "content": (
            "The Ministry of Education announced significant progress in implementing the "
            "New Education Policy across all states. Universities are adapting their "
            "curricula to meet the new guidelines."
        ),
        "region": "National",
        "language": "English",
        "date": dt.date(2024, 1, 12),
    },
    {
        "title": "Climate Change Summit Results",
        "content": (
            "World leaders concluded the climate summit with ambitious targets for carbon "
            "neutrality. India pledged to increase renewable energy capacity significantly "
            "by 2030."
        ),
        "region": "National",
        "language": "English",
        "date": dt.date(2024, 1, 11),
    },
]


def seed_sample_articles(repository: ArticleRepository) -> int:
    """Insert the published demo articles when the table is empty.

    Idempotent — returns the number of articles inserted (0 when the table
    already had rows).
    """
    if repository.get_statistics().total > 0:
        _log.detail("Articles table not empty, skipping sample data")
        return 0

    with _log.timed_step(StoreStage.SEED, "Inserting sample articles", count=len(SAMPLE_ARTICLES)):
        for fields in SAMPLE_ARTICLES:
            repository.create(Article(status=ArticleStatus.PUBLISHED, **fields))
    return len(SAMPLE_ARTICLES)
