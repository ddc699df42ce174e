"""
Article query and mutation resolvers.
"""
from typing import Any

from graphql import GraphQLResolveInfo

from quill.models.article import Article
from quill.resolvers.base import request_context
from quill.schemas.article import ArticleInput
from quill.services.article_service import ArticleService
from quill.services.gate import Capability, ResolverGate


class ListArticles:
    def __init__(self, articles: ArticleService):
        self.articles = articles

    async def __call__(self, root: Any, info: GraphQLResolveInfo) -> list[Article]:
        return await self.articles.list_articles()


class GetArticle:
    def __init__(self, articles: ArticleService):
        self.articles = articles

    async def __call__(self, root: Any, info: GraphQLResolveInfo, id: str) -> Article:
        return await self.articles.get(id)


class CreateArticle:
    """
    createArticle(article: ArticleInput!)

    The author is always the verified token subject.
    """

    def __init__(self, articles: ArticleService, gate: ResolverGate):
        self.articles = articles
        self.gate = gate

    async def __call__(
        self, root: Any, info: GraphQLResolveInfo, article: dict[str, Any]
    ) -> Article:
        author_id = self.gate.authorize(request_context(info), Capability.CREATE_ARTICLE)
        return await self.articles.create(author_id, ArticleInput.model_validate(article))
