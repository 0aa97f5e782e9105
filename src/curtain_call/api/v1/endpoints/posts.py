# src/curtain_call/api/v1/endpoints/posts.py
"""Post lifecycle actions: new, create, show, edit, update, destroy, timeline.

Every action needs a signed-in user. Mutating actions only accept POST and a
form token for the form they came from; destroy is the exception, see
``destroy_post``.
"""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import Response
from pydantic import ValidationError

from curtain_call.api.v1.dependencies import (
    CsrfDep,
    CurrentUserDep,
    EntityId,
    PerformanceRepoDep,
    PostRepoDep,
    SessionDep,
)
from curtain_call.api.v1.responder import not_found, redirect, render
from curtain_call.repositories.performance_repo import PerformanceRepository
from curtain_call.schemas.performance import PerformanceResponse
from curtain_call.schemas.post import PostForm, PostResponse
from curtain_call.services.post_validation import validate_contents

router = APIRouter(prefix="/posts", tags=["posts"])
logger = logging.getLogger(__name__)

NEW_FORM_SCOPE = "posts/new"
EDIT_FORM_SCOPE = "posts/edit"


async def _read_form(request: Request) -> PostForm:
    if request.method != "POST":
        not_found()
    try:
        return PostForm.from_form(await request.form())
    except ValidationError:
        not_found("Malformed form")


def _performance_list(performances: PerformanceRepository) -> list[PerformanceResponse]:
    return [PerformanceResponse.model_validate(p) for p in performances.fetch_all()]


@router.get("")
async def timeline(current_user: CurrentUserDep, posts: PostRepoDep) -> Response:
    """Show the signed-in user's posts and the posts of users they follow."""
    timeline_posts = posts.fetch_timeline(current_user["id"])
    return render("posts/index", {
        "posts": [PostResponse.model_validate(post) for post in timeline_posts],
    })


@router.get("/new")
async def new_post(
    current_user: CurrentUserDep,
    performances: PerformanceRepoDep,
    csrf: CsrfDep,
) -> Response:
    """Show an empty post form."""
    return render("posts/new", {
        "performances": _performance_list(performances),
        "contents": "",
        "_token": csrf.generate(NEW_FORM_SCOPE),
    })


@router.api_route("/create", methods=["GET", "POST"])
async def create_post(
    request: Request,
    current_user: CurrentUserDep,
    db: SessionDep,
    posts: PostRepoDep,
    performances: PerformanceRepoDep,
    csrf: CsrfDep,
) -> Response:
    """Create a post from the new-post form.

    Valid input is stored and the user is sent to their page. Invalid input
    re-renders the form with the errors and what the user typed; a stale or
    forged token sends the user back to an empty form.
    """
    form = await _read_form(request)
    if form.performance is None:
        not_found("Performance is required")
    if performances.fetch_by_id(form.performance) is None:
        not_found("Performance not found")

    if not csrf.verify(NEW_FORM_SCOPE, form.token):
        logger.info("Token mismatch on post creation by user %s", current_user["id"])
        return redirect("/posts/new")

    errors = validate_contents(form.contents)
    if not errors:
        post = posts.insert(current_user["id"], form.contents, form.performance)
        db.commit()
        logger.info("User %s created post %s", current_user["id"], post.id)
        return redirect(f"/users/{current_user['id']}")

    return render("posts/new", {
        "errors": errors,
        "contents": form.contents,
        "performances": _performance_list(performances),
        "selected_performance": form.performance,
        "_token": csrf.generate(NEW_FORM_SCOPE),
    })


@router.get("/{post_id}")
async def show_post(post_id: EntityId, current_user: CurrentUserDep, posts: PostRepoDep) -> Response:
    post = posts.fetch_by_id(post_id)
    if post is None:
        not_found("Post not found")

    return render("posts/show", {
        "post": PostResponse.model_validate(post),
        "user": current_user,
    })


@router.get("/{post_id}/edit")
async def edit_post(
    post_id: EntityId,
    current_user: CurrentUserDep,
    posts: PostRepoDep,
    performances: PerformanceRepoDep,
    csrf: CsrfDep,
) -> Response:
    """Show the edit form for one of the user's posts."""
    post = posts.fetch_by_id(post_id)
    if post is None or post.user_id != current_user["id"]:
        not_found("Post not found")

    performance = performances.fetch_by_id(post.performance_id)
    if performance is None:
        not_found("Performance not found")

    return render("posts/edit", {
        "post": PostResponse.model_validate(post),
        "performance": PerformanceResponse.model_validate(performance),
        "_token": csrf.generate(EDIT_FORM_SCOPE),
    })


@router.api_route("/{post_id}/update", methods=["GET", "POST"])
async def update_post(
    post_id: EntityId,
    request: Request,
    current_user: CurrentUserDep,
    db: SessionDep,
    posts: PostRepoDep,
    csrf: CsrfDep,
) -> Response:
    """Replace the contents of a post.

    On invalid input the edit form is shown again with the rejected text in
    place of the stored one; nothing is written.
    """
    form = await _read_form(request)
    post = posts.fetch_by_id(post_id)
    if post is None or post.user_id != current_user["id"]:
        not_found("Post not found")

    if not csrf.verify(EDIT_FORM_SCOPE, form.token):
        logger.info("Token mismatch on update of post %s", post_id)
        return redirect(f"/posts/{post.id}/edit")

    # Redisplay copy only; the ORM row keeps its stored contents.
    edited = PostResponse.model_validate(post).model_copy(update={"contents": form.contents})

    errors = validate_contents(edited.contents)
    if not errors:
        posts.update(post.id, edited.contents)
        db.commit()
        logger.info("User %s updated post %s", current_user["id"], post.id)
        return redirect(f"/posts/{post.id}")

    return render("posts/edit", {
        "post": edited,
        "errors": errors,
        "_token": csrf.generate(EDIT_FORM_SCOPE),
    })


@router.api_route("/{post_id}/destroy", methods=["GET", "POST"])
async def destroy_post(
    post_id: EntityId,
    current_user: CurrentUserDep,
    db: SessionDep,
    posts: PostRepoDep,
) -> Response:
    """Delete a post and return to the user's page.

    Known gap: delete links are plain anchors, so this accepts GET and checks
    no form token. Another user's post is not found; an id that matches no
    post still redirects.
    """
    post = posts.fetch_by_id(post_id)
    if post is not None and post.user_id != current_user["id"]:
        not_found("Post not found")

    posts.delete(post_id)
    db.commit()
    logger.info("User %s deleted post %s", current_user["id"], post_id)
    return redirect(f"/users/{current_user['id']}")
