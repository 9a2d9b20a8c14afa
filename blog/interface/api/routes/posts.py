"""Post and comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials

from blog.application.usecase.comment import AddCommentRequest, AddCommentUseCase
from blog.application.usecase.common import CamelModel, PostResponse
from blog.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from blog.config import PaginationSettings
from blog.domain.error import ValidationFailedError
from blog.domain.service import IdentityService
from blog.domain.value import Capability, parse_identifier
from blog.interface.api.envelope import Envelope, PageEnvelope
from blog.interface.api.security import bearer_scheme, require_identity

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(CamelModel):
    """API request for creating a post.

    The author is always the caller; it is never read from the body.
    """

    title: str
    content: str
    category: str
    excerpt: str | None = None
    featured_image: str | None = None
    tags: str | list[str] | None = None
    is_published: bool = False


class UpdatePostAPIRequest(CamelModel):
    """API request for updating a post.

    Omitted fields are left unchanged.
    """

    title: str | None = None
    content: str | None = None
    category: str | None = None
    excerpt: str | None = None
    featured_image: str | None = None
    tags: str | list[str] | None = None
    is_published: bool | None = None


class AddCommentAPIRequest(CamelModel):
    """API request for commenting on a post."""

    content: str


@router.get("", response_model=PageEnvelope[PostResponse])
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    pagination: FromDishka[PaginationSettings],
    page: int = 1,
    limit: int | None = None,
    category: str | None = None,
    published: bool | None = None,
) -> PageEnvelope[PostResponse]:
    """List posts newest first.

    Args:
        page: 1-based page number
        limit: Page size (defaults to the configured size, capped at the maximum)
        category: Only posts in this category ID
        published: Only published (true) or draft (false) posts
    """
    if page < 1:
        raise ValidationFailedError("page: must be a positive integer")
    if limit is None:
        limit = pagination.default_limit
    if limit < 1:
        raise ValidationFailedError("limit: must be a positive integer")
    limit = min(limit, pagination.max_limit)

    result = await list_posts_use_case.execute(
        ListPostsRequest(
            page=page, limit=limit, category_id=category, published=published
        )
    )
    return PageEnvelope(
        count=len(result.items),
        total=result.total,
        current_page=result.current_page,
        total_pages=result.total_pages,
        data=result.items,
    )


@router.get("/{id_or_slug}", response_model=Envelope[PostResponse])
async def get_post(
    id_or_slug: str,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> Envelope[PostResponse]:
    """Get a post by ID or slug. Each fetch counts as one view."""
    result = await get_post_use_case.execute(
        GetPostRequest(identifier=parse_identifier(id_or_slug))
    )
    return Envelope(data=result)


@router.post(
    "",
    response_model=Envelope[PostResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    identity_service: FromDishka[IdentityService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Envelope[PostResponse]:
    """Create a post authored by the caller. Requires authentication."""
    identity = require_identity(credentials, identity_service, Capability.WRITE_POSTS)
    result = await create_post_use_case.execute(
        CreatePostRequest(
            author_id=identity.user_id,
            title=request.title,
            content=request.content,
            category_id=request.category,
            excerpt=request.excerpt,
            featured_image=request.featured_image,
            tags=request.tags,
            is_published=request.is_published,
        )
    )
    logfire.info("Post created via API", post_id=result.id, author_id=identity.user_id)
    return Envelope(data=result)


@router.put("/{post_id}", response_model=Envelope[PostResponse])
async def update_post(
    post_id: str,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    identity_service: FromDishka[IdentityService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Envelope[PostResponse]:
    """Update a post. Only its author may do this."""
    identity = require_identity(credentials, identity_service, Capability.WRITE_POSTS)

    changes = request.model_dump(exclude_unset=True)
    if "category" in changes:
        changes["category_id"] = changes.pop("category")

    result = await update_post_use_case.execute(
        UpdatePostRequest(post_id=post_id, user_id=identity.user_id, changes=changes)
    )
    return Envelope(data=result)


@router.delete("/{post_id}", response_model=Envelope[dict])
async def delete_post(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    identity_service: FromDishka[IdentityService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Envelope[dict]:
    """Delete a post and its comments. Only its author may do this."""
    identity = require_identity(credentials, identity_service, Capability.WRITE_POSTS)
    await delete_post_use_case.execute(
        DeletePostRequest(post_id=post_id, user_id=identity.user_id)
    )
    return Envelope(data={})


@router.post(
    "/{post_id}/comments",
    response_model=Envelope[PostResponse],
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    post_id: str,
    request: AddCommentAPIRequest,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    identity_service: FromDishka[IdentityService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Envelope[PostResponse]:
    """Comment on any post. Requires authentication."""
    identity = require_identity(credentials, identity_service, Capability.COMMENT)
    result = await add_comment_use_case.execute(
        AddCommentRequest(
            post_id=post_id, user_id=identity.user_id, content=request.content
        )
    )
    return Envelope(data=result)
