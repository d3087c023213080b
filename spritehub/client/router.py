# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


class SessionView(Protocol):
    @property
    def is_authenticated(self) -> bool: ...


@dataclass(slots=True, frozen=True)
class RouteMeta:
    requires_auth: bool = False
    requires_guest: bool = False


@dataclass(slots=True, frozen=True)
class Route:
    name: str
    path: str
    meta: RouteMeta = field(default_factory=RouteMeta)


@dataclass(slots=True, frozen=True)
class Allow:
    pass


@dataclass(slots=True, frozen=True)
class Redirect:
    name: str
    query: dict[str, str] = field(default_factory=dict)


def guard_navigation(
    target: Route,
    session: SessionView,
    *,
    login_route: str = "login",
    landing_route: str = "dashboard",
) -> Allow | Redirect:
    if target.meta.requires_auth and not session.is_authenticated:
        return Redirect(login_route, {"redirect": target.path})
    if target.meta.requires_guest and session.is_authenticated:
        return Redirect(landing_route)
    return Allow()


class NavigationError(Exception):
    pass


@dataclass(slots=True, frozen=True)
class Location:
    route: Route
    query: dict[str, str] = field(default_factory=dict)

    @property
    def name(self) -> str:
        return self.route.name


class Router:
    """Name/path lookup plus the guard, evaluated again on every push."""

    max_redirects = 10

    def __init__(
        self,
        routes: list[Route],
        session: SessionView,
        *,
        login_route: str = "login",
        landing_route: str = "dashboard",
    ) -> None:
        self._by_name = {route.name: route for route in routes}
        self._by_path = {route.path: route for route in routes}
        self._session = session
        self._login_route = login_route
        self._landing_route = landing_route
        self.current: Location | None = None

    def resolve(self, target: str) -> Route:
        route = self._by_path.get(target) or self._by_name.get(target)
        if route is None:
            raise NavigationError(f"Unknown route: {target}")
        return route

    def push(self, target: str, query: dict[str, str] | None = None) -> Location:
        route = self.resolve(target)
        query = dict(query or {})
        for _ in range(self.max_redirects):
            decision = guard_navigation(
                route,
                self._session,
                login_route=self._login_route,
                landing_route=self._landing_route,
            )
            if isinstance(decision, Allow):
                self.current = Location(route, query)
                return self.current
            route = self.resolve(decision.name)
            query = dict(decision.query)
        raise NavigationError(f"Too many redirects navigating to {target}")


__all__ = [
    "Allow",
    "Location",
    "NavigationError",
    "Redirect",
    "Route",
    "RouteMeta",
    "Router",
    "guard_navigation",
]
