"""
GraphQL schema wiring.

Types are declared here; every field's behaviour lives in a resolver
object built by `build_schema` from the injected services.
"""
from typing import Optional

from graphql import (
    GraphQLArgument,
    GraphQLField,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLString,
)

from quill.resolvers.articles import CreateArticle, GetArticle, ListArticles
from quill.resolvers.authors import DeleteAuthor, GetAuthor, ListAuthors, UpdateAuthor
from quill.resolvers.base import Resolver
from quill.services.article_service import ArticleService
from quill.services.credential_service import CredentialService
from quill.services.gate import ResolverGate

# The password hash is never exposed.
author_type = GraphQLObjectType(
    "Author",
    lambda: {
        "id": GraphQLField(GraphQLString),
        "firstname": GraphQLField(GraphQLString),
        "lastname": GraphQLField(GraphQLString),
        "username": GraphQLField(GraphQLString),
    },
)

author_input_type = GraphQLInputObjectType(
    "AuthorInput",
    {
        "id": GraphQLInputField(GraphQLNonNull(GraphQLString)),
        "firstname": GraphQLInputField(GraphQLString),
        "lastname": GraphQLInputField(GraphQLString),
        "username": GraphQLInputField(GraphQLString),
        "password": GraphQLInputField(GraphQLString),
    },
)

article_type = GraphQLObjectType(
    "Article",
    lambda: {
        "id": GraphQLField(GraphQLString),
        "title": GraphQLField(GraphQLString),
        "content": GraphQLField(GraphQLString),
        "authorId": GraphQLField(
            GraphQLString, resolve=lambda article, info: article.author_id
        ),
    },
)

# No author field: the author always comes from the verified token.
article_input_type = GraphQLInputObjectType(
    "ArticleInput",
    {
        "title": GraphQLInputField(GraphQLNonNull(GraphQLString)),
        "content": GraphQLInputField(GraphQLNonNull(GraphQLString)),
    },
)

_id_argument = {"id": GraphQLArgument(GraphQLNonNull(GraphQLString))}


def _field(output_type, resolver: Resolver, args: Optional[dict] = None) -> GraphQLField:
    return GraphQLField(output_type, args=args, resolve=resolver)


def build_schema(
    credentials: CredentialService,
    articles: ArticleService,
    gate: ResolverGate,
) -> GraphQLSchema:
    """Bind one resolver object per field and assemble the schema."""
    query = GraphQLObjectType(
        "Query",
        {
            "authors": _field(GraphQLList(author_type), ListAuthors(credentials)),
            "author": _field(author_type, GetAuthor(credentials), _id_argument),
            "articles": _field(GraphQLList(article_type), ListArticles(articles)),
            "article": _field(article_type, GetArticle(articles), _id_argument),
        },
    )

    mutation = GraphQLObjectType(
        "Mutation",
        {
            "deleteAuthor": _field(
                GraphQLString, DeleteAuthor(credentials, gate), _id_argument
            ),
            "updateAuthor": _field(
                author_type,
                UpdateAuthor(credentials, gate),
                {"author": GraphQLArgument(GraphQLNonNull(author_input_type))},
            ),
            "createArticle": _field(
                article_type,
                CreateArticle(articles, gate),
                {"article": GraphQLArgument(GraphQLNonNull(article_input_type))},
            ),
        },
    )

    return GraphQLSchema(query=query, mutation=mutation)
