"""
Article service for creating and reading articles.
"""
import logging
import uuid

from quill.core.errors import ValidationError
from quill.database.store import DocumentStore
from quill.models.article import Article
from quill.schemas.article import ArticleInput

logger = logging.getLogger(__name__)


class ArticleService:
    """Service for article operations."""

    def __init__(self, articles: DocumentStore):
        self.articles = articles

    async def create(self, author_id: str, request: ArticleInput) -> Article:
        """
        Create an article owned by `author_id`.

        The author id must come from a verified token subject; the input
        schema has no author field.

        Raises:
            ValidationError: If title or content is empty
        """
        missing = [name for name in ("title", "content") if not getattr(request, name)]
        if missing:
            raise ValidationError(
                f"missing required fields: {', '.join(missing)}",
                details={"fields": missing},
            )

        article = Article(
            id=str(uuid.uuid4()),
            title=request.title,
            content=request.content,
            author_id=author_id,
        )
        await self.articles.insert(article.to_document())
        logger.info("Author %s created article %s", author_id, article.id)
        return article

    async def get(self, article_id: str) -> Article:
        return Article.model_validate(await self.articles.get(article_id))

    async def list_articles(self) -> list[Article]:
        return [Article.model_validate(doc) for doc in await self.articles.list_all()]
