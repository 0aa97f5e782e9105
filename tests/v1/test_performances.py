# mypy: ignore-errors
# tests/v1/test_performances.py
"""Tests for performance pages and the wanna toggle."""

from fastapi import status
from sqlalchemy import func, select

from curtain_call.models import Wanna
from curtain_call.repositories.wanna_repo import WannaRepository


def _show(client, headers, performance_id):
    r = client.get(f"/performances/{performance_id}", headers=headers)
    assert r.status_code == status.HTTP_200_OK
    return r.json()["data"]


def _wanna_rows(db_session) -> int:
    return db_session.execute(select(func.count(Wanna.id))).scalar_one()


def test_show_performance(client, auth_token, performance) -> None:
    data = _show(client, auth_token, performance.id)
    assert data["performance"]["title"] == "Hamlet"
    assert data["performance"]["performed_on"] == "2026-09-12"
    assert data["wanna"] is False
    assert data["_token"]


def test_show_missing_performance(client, auth_token) -> None:
    r = client.get("/performances/9999", headers=auth_token)
    assert r.status_code == status.HTTP_404_NOT_FOUND


def test_wanna_then_unwanna(client, db_session, test_user, auth_token, performance) -> None:
    token = _show(client, auth_token, performance.id)["_token"]

    r = client.post(
        f"/performances/{performance.id}/wanna", data={"_token": token}, headers=auth_token
    )
    assert r.status_code == status.HTTP_302_FOUND
    assert r.headers["location"] == f"/performances/{performance.id}"
    assert WannaRepository(db_session).exists(test_user.id, performance.id) is True

    data = _show(client, auth_token, performance.id)
    assert data["wanna"] is True

    r = client.post(
        f"/performances/{performance.id}/unwanna",
        data={"_token": data["_token"]},
        headers=auth_token,
    )
    assert r.status_code == status.HTTP_302_FOUND
    assert WannaRepository(db_session).exists(test_user.id, performance.id) is False


def test_wanna_twice_keeps_one_row(client, db_session, auth_token, performance) -> None:
    for _ in range(2):
        token = _show(client, auth_token, performance.id)["_token"]
        client.post(
            f"/performances/{performance.id}/wanna", data={"_token": token}, headers=auth_token
        )

    assert _wanna_rows(db_session) == 1


def test_wanna_bad_token(client, db_session, auth_token, performance) -> None:
    r = client.post(
        f"/performances/{performance.id}/wanna", data={"_token": "forged"}, headers=auth_token
    )
    assert r.status_code == status.HTTP_302_FOUND
    assert _wanna_rows(db_session) == 0


def test_wanna_missing_performance(client, auth_token) -> None:
    r = client.post("/performances/9999/wanna", data={"_token": "x"}, headers=auth_token)
    assert r.status_code == status.HTTP_404_NOT_FOUND


def test_wanna_requires_session(client, db_session, performance) -> None:
    r = client.post(f"/performances/{performance.id}/wanna", data={"_token": "x"})
    assert r.status_code == status.HTTP_404_NOT_FOUND
    assert _wanna_rows(db_session) == 0


def test_out_of_range_performance_id(client, db_session, auth_token) -> None:
    for method, path in (
        ("GET", "/performances/99999999999999999999"),
        ("POST", "/performances/99999999999999999999/wanna"),
        ("POST", "/performances/99999999999999999999/unwanna"),
    ):
        r = client.request(method, path, data={"_token": "x"}, headers=auth_token)
        assert r.status_code == status.HTTP_404_NOT_FOUND
    assert _wanna_rows(db_session) == 0
