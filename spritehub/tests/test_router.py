from __future__ import annotations

from dataclasses import dataclass

import pytest

from spritehub.client.router import (
    Allow,
    NavigationError,
    Redirect,
    Route,
    RouteMeta,
    Router,
    guard_navigation,
)

ROUTES = [
    Route("home", "/"),
    Route("login", "/login", RouteMeta(requires_guest=True)),
    Route("register", "/register", RouteMeta(requires_guest=True)),
    Route("dashboard", "/dashboard", RouteMeta(requires_auth=True)),
]


@dataclass
class FakeSession:
    is_authenticated: bool = False


def test_protected_route_redirects_to_login_with_target() -> None:
    decision = guard_navigation(ROUTES[3], FakeSession(False))

    assert decision == Redirect("login", {"redirect": "/dashboard"})


def test_guest_route_redirects_authenticated_user() -> None:
    decision = guard_navigation(ROUTES[1], FakeSession(True))

    assert decision == Redirect("dashboard")


@pytest.mark.parametrize(
    ("route", "authenticated"),
    [(ROUTES[0], False), (ROUTES[0], True), (ROUTES[1], False), (ROUTES[3], True)],
)
def test_allowed_navigation(route: Route, authenticated: bool) -> None:
    assert guard_navigation(route, FakeSession(authenticated)) == Allow()


def test_custom_route_names() -> None:
    decision = guard_navigation(
        ROUTES[3], FakeSession(False), login_route="signin", landing_route="home"
    )

    assert decision == Redirect("signin", {"redirect": "/dashboard"})


def test_router_follows_redirects() -> None:
    router = Router(ROUTES, FakeSession(False))

    location = router.push("/dashboard")

    assert location.name == "login"
    assert location.query == {"redirect": "/dashboard"}
    assert router.current == location


def test_router_reevaluates_on_every_push() -> None:
    session = FakeSession(False)
    router = Router(ROUTES, session)

    assert router.push("/dashboard").name == "login"
    session.is_authenticated = True
    assert router.push("/dashboard").name == "dashboard"
    assert router.push("register").name == "dashboard"
    session.is_authenticated = False
    assert router.push("/register").name == "register"


def test_router_unknown_route() -> None:
    with pytest.raises(NavigationError):
        Router(ROUTES, FakeSession()).push("/missing")
