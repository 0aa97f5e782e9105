# src/curtain_call/api/v1/endpoints/users.py
"""User pages."""

from fastapi import APIRouter
from fastapi.responses import Response

from curtain_call.api.v1.dependencies import CurrentUserDep, EntityId, PostRepoDep, UserRepoDep
from curtain_call.api.v1.responder import not_found, render
from curtain_call.schemas.post import PostResponse
from curtain_call.schemas.user import UserResponse

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/{user_id}")
async def show_user(
    user_id: EntityId,
    current_user: CurrentUserDep,
    users: UserRepoDep,
    posts: PostRepoDep,
) -> Response:
    """Show a user and every post they have written."""
    user = users.fetch_by_id(user_id)
    if user is None:
        not_found("User not found")

    return render("users/show", {
        "user": UserResponse.model_validate(user),
        "posts": [PostResponse.model_validate(post) for post in posts.fetch_all_by_user(user.id)],
        "is_self": user.id == current_user["id"],
    })
