"""Template catalog: which assets are written where.

The catalog is a static table.  ``select_templates`` walks it for one
``GenerationConfig`` and returns the entries in the order they are written:
database and container files first, then the chosen stack.
"""

from __future__ import annotations

from typing import NamedTuple

from .models import GenerationConfig, Stack


class CatalogError(Exception):
    """Raised when the catalog is asked for a stack it does not know."""


class TemplateEntry(NamedTuple):
    """One file to emit: output path (relative to the project root) and asset name."""

    path: str
    template: str


class TemplateGroup(NamedTuple):
    """Entries written together, and the message printed once they are done."""

    entries: tuple[TemplateEntry, ...]
    message: str


# ---------------------------------------------------------------------------
# Database and container definitions
# ---------------------------------------------------------------------------

DATABASE_FILES: tuple[TemplateEntry, ...] = (
    TemplateEntry("backend/prisma/schema.prisma", "database/schema.prisma"),
    TemplateEntry("backend/.env.local", "database/env.local"),
)

DOCKER_FILES: tuple[TemplateEntry, ...] = (
    TemplateEntry("backend/Dockerfile", "docker/backend.Dockerfile"),
    TemplateEntry("frontend/Dockerfile", "docker/frontend.Dockerfile"),
    TemplateEntry("docker-compose.yml", "docker/docker-compose.yml"),
)


# ---------------------------------------------------------------------------
# React Vite frontend
# ---------------------------------------------------------------------------

_REACT_VITE_COMMON: tuple[TemplateEntry, ...] = (
    TemplateEntry("frontend/tsconfig.json", "react_vite/tsconfig.json"),
    TemplateEntry("frontend/vite.config.ts", "react_vite/vite.config.ts"),
    TemplateEntry("frontend/index.html", "react_vite/index.html"),
    TemplateEntry("frontend/src/main.tsx", "react_vite/main.tsx"),
)

REACT_VITE_FILES: dict[bool, tuple[TemplateEntry, ...]] = {
    True: (
        TemplateEntry("frontend/package.json", "react_vite/auth/package.json"),
        *_REACT_VITE_COMMON,
        TemplateEntry("frontend/src/App.tsx", "react_vite/auth/App.tsx"),
        TemplateEntry("frontend/src/firebaseConfig.ts", "firebase/firebaseConfig.ts"),
        TemplateEntry("frontend/src/Auth.tsx", "react_vite/auth/Auth.tsx"),
    ),
    False: (
        TemplateEntry("frontend/package.json", "react_vite/plain/package.json"),
        *_REACT_VITE_COMMON,
        TemplateEntry("frontend/src/App.tsx", "react_vite/plain/App.tsx"),
        TemplateEntry("frontend/src/App.css", "react_vite/plain/App.css"),
    ),
}


# ---------------------------------------------------------------------------
# Express backend
# ---------------------------------------------------------------------------

EXPRESS_FILES: dict[bool, tuple[TemplateEntry, ...]] = {
    True: (
        TemplateEntry("backend/package.json", "express/auth/package.json"),
        TemplateEntry("backend/tsconfig.json", "express/tsconfig.json"),
        TemplateEntry("backend/src/index.ts", "express/auth/index.ts"),
    ),
    False: (
        TemplateEntry("backend/package.json", "express/plain/package.json"),
        TemplateEntry("backend/tsconfig.json", "express/tsconfig.json"),
        TemplateEntry("backend/src/index.ts", "express/plain/index.ts"),
    ),
}


# ---------------------------------------------------------------------------
# Next.js frontend
# ---------------------------------------------------------------------------

NEXTJS_FILES: dict[bool, tuple[TemplateEntry, ...]] = {
    True: (
        TemplateEntry("frontend/package.json", "nextjs/auth/package.json"),
        TemplateEntry("frontend/tsconfig.json", "nextjs/auth/tsconfig.json"),
        TemplateEntry("frontend/src/firebaseConfig.ts", "firebase/firebaseConfig.ts"),
        TemplateEntry("frontend/pages/index.tsx", "nextjs/auth/index.tsx"),
    ),
    False: (
        TemplateEntry("frontend/package.json", "nextjs/plain/package.json"),
    ),
}


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------


def select_groups(
    config: GenerationConfig, include_auth: bool = True
) -> list[TemplateGroup]:
    """Return the template groups to emit for *config*, in write order."""
    include_auth = bool(include_auth)
    groups: list[TemplateGroup] = []
    if config.needs_database:
        groups.append(TemplateGroup(DATABASE_FILES, "Prisma and database setup created."))
        groups.append(TemplateGroup(DOCKER_FILES, "Docker files created."))

    if config.stack is Stack.REACT_VITE_EXPRESS:
        groups.append(
            TemplateGroup(
                REACT_VITE_FILES[include_auth],
                _created("React Vite frontend", "Firebase Authentication", include_auth),
            )
        )
        groups.append(
            TemplateGroup(
                EXPRESS_FILES[include_auth],
                _created("Express backend", "JWT Authentication", include_auth),
            )
        )
    elif config.stack is Stack.NEXTJS:
        groups.append(
            TemplateGroup(
                NEXTJS_FILES[include_auth],
                _created("Next.js frontend", "Firebase Authentication", include_auth),
            )
        )
    else:
        raise CatalogError(f"No templates for stack {config.stack!r}")
    return groups


def select_templates(
    config: GenerationConfig, include_auth: bool = True
) -> list[TemplateEntry]:
    """Return every entry to emit for *config*, in write order."""
    return [
        entry
        for group in select_groups(config, include_auth)
        for entry in group.entries
    ]


def _created(what: str, auth: str, include_auth: bool) -> str:
    if include_auth:
        return f"{what} with {auth} created."
    return f"{what} created."
