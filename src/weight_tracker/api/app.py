"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from weight_tracker.api.models import EntryCreate, EntryUpdate, ProfileCreate
from weight_tracker.app_logging import configure_logging
from weight_tracker.containers import AppContainer
from weight_tracker.domain.errors import (
    EntryAlreadyLoggedError,
    EntryCollisionError,
    InvalidInputError,
    NotFoundError,
    ProfileNotFoundError,
    StoreError,
)
from weight_tracker.domain.models import UserProfile, WeightEntry
from weight_tracker.domain.motivation import Motivation
from weight_tracker.domain.session import SessionContext
from weight_tracker.domain.stats import ChartPoint, Stats


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(InvalidInputError)
    async def invalid_input(_: Request, exc: InvalidInputError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"error": str(exc)},
        )

    @app.exception_handler(EntryCollisionError)
    async def collision(_: Request, exc: EntryCollisionError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT, content={"error": str(exc)}
        )

    @app.exception_handler(EntryAlreadyLoggedError)
    async def already_logged(_: Request, exc: EntryAlreadyLoggedError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"error": str(exc), "entry": _serialize_entry(exc.entry)},
        )

    @app.exception_handler(NotFoundError)
    async def not_found(_: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"error": str(exc)}
        )

    @app.exception_handler(StoreError)
    async def store_failure(request: Request, exc: StoreError) -> JSONResponse:
        logger.exception("Store operation failed: %s %s", request.method, request.url)
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"error": "Store operation failed", "details": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/health/store")
    async def store_health(request: Request) -> JSONResponse:
        """Report whether the database answers."""
        state_container: AppContainer = request.app.state.container
        if state_container.profile_service.check_store():
            return JSONResponse({"status": "ok"})
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unavailable"},
        )

    @app.post("/profiles", status_code=status.HTTP_201_CREATED)
    async def create_profile(
        payload: ProfileCreate, request: Request
    ) -> dict[str, object]:
        """Create a profile with its starting-point entry."""
        state_container: AppContainer = request.app.state.container
        result = state_container.dashboard_service.setup(
            SessionContext(),
            name=payload.name,
            start_weight=payload.start_weight,
            goal_weight=payload.goal_weight,
            target_weeks=payload.target_weeks,
        )
        return {
            "profile": _serialize_profile(result.profile),
            "entry": _serialize_entry(result.entry),
        }

    @app.get("/profiles/{profile_id}")
    async def get_profile(profile_id: int, request: Request) -> dict[str, object]:
        """Return a profile."""
        state_container: AppContainer = request.app.state.container
        profile = state_container.dashboard_service.select(
            SessionContext(), profile_id
        )
        return _serialize_profile(profile)

    @app.delete("/profiles/{profile_id}")
    async def reset_profile(profile_id: int, request: Request) -> dict[str, str]:
        """Delete a profile and all of its entries."""
        state_container: AppContainer = request.app.state.container
        state_container.dashboard_service.reset(SessionContext(profile_id))
        return {"status": "ok"}

    @app.get("/profiles/{profile_id}/entries")
    async def list_entries(profile_id: int, request: Request) -> dict[str, object]:
        """Return entries newest first."""
        state_container: AppContainer = request.app.state.container
        state_container.profile_service.get_profile(profile_id)
        entries = state_container.entry_service.list_entries(profile_id)
        return {"entries": [_serialize_entry(entry) for entry in entries]}

    @app.post("/profiles/{profile_id}/entries", status_code=status.HTTP_201_CREATED)
    async def log_today(
        profile_id: int, payload: EntryCreate, request: Request
    ) -> dict[str, object]:
        """Log today's weight; 409 with the existing entry when already logged."""
        state_container: AppContainer = request.app.state.container
        state_container.profile_service.get_profile(profile_id)
        entry = state_container.entry_service.log_today(
            profile_id, payload.weight, payload.note
        )
        return _serialize_entry(entry)

    @app.put("/profiles/{profile_id}/entries/today")
    async def record_today(
        profile_id: int, payload: EntryCreate, request: Request
    ) -> dict[str, object]:
        """Log today's weight, editing today's entry when it exists."""
        state_container: AppContainer = request.app.state.container
        state_container.profile_service.get_profile(profile_id)
        entry, created = state_container.entry_service.record_today(
            profile_id, payload.weight, payload.note
        )
        return {"entry": _serialize_entry(entry), "created": created}

    @app.put("/profiles/{profile_id}/entries/{entry_id}")
    async def edit_entry(
        profile_id: int, entry_id: int, payload: EntryUpdate, request: Request
    ) -> dict[str, object]:
        """Edit weight, note or date of an entry."""
        state_container: AppContainer = request.app.state.container
        entry = state_container.entry_service.edit_entry(
            profile_id,
            entry_id,
            weight=payload.weight,
            note=payload.note,
            date=payload.date,
        )
        return _serialize_entry(entry)

    @app.delete("/profiles/{profile_id}/entries/{entry_id}")
    async def delete_entry(
        profile_id: int, entry_id: int, request: Request
    ) -> dict[str, str]:
        """Delete one entry."""
        state_container: AppContainer = request.app.state.container
        state_container.entry_service.delete_entry(profile_id, entry_id)
        return {"status": "ok"}

    @app.delete("/profiles/{profile_id}/entries")
    async def delete_all_entries(profile_id: int, request: Request) -> dict[str, str]:
        """Delete every entry of a profile, keeping the profile."""
        state_container: AppContainer = request.app.state.container
        state_container.profile_service.get_profile(profile_id)
        state_container.entry_service.delete_all_entries(profile_id)
        return {"status": "ok"}

    @app.get("/profiles/{profile_id}/stats")
    async def get_stats(profile_id: int, request: Request) -> dict[str, object]:
        """Return derived statistics, or null without entries."""
        state_container: AppContainer = request.app.state.container
        state_container.profile_service.get_profile(profile_id)
        stats = state_container.stats_service.get_stats(profile_id)
        return {"stats": _serialize_stats(stats) if stats else None}

    @app.get("/profiles/{profile_id}/chart")
    async def get_chart(profile_id: int, request: Request) -> dict[str, object]:
        """Return the weight series, oldest first."""
        state_container: AppContainer = request.app.state.container
        state_container.profile_service.get_profile(profile_id)
        points = state_container.stats_service.get_chart(profile_id)
        return {"chart": [_serialize_point(point) for point in points]}

    @app.get("/profiles/{profile_id}/motivation")
    async def get_motivation(profile_id: int, request: Request) -> dict[str, object]:
        """Draw a fresh motivational message."""
        state_container: AppContainer = request.app.state.container
        session = SessionContext(profile_id)
        motivation = state_container.dashboard_service.refresh_motivation(session)
        if not session.is_bound:
            raise ProfileNotFoundError(profile_id)
        return {
            "motivation": _serialize_motivation(motivation) if motivation else None
        }

    @app.get("/profiles/{profile_id}/dashboard")
    async def get_dashboard(profile_id: int, request: Request) -> dict[str, object]:
        """Return profile, entries, stats, motivation and chart in one call."""
        state_container: AppContainer = request.app.state.container
        view = state_container.dashboard_service.load(SessionContext(profile_id))
        if view is None:
            raise ProfileNotFoundError(profile_id)
        return {
            "profile": _serialize_profile(view.profile),
            "entries": [_serialize_entry(entry) for entry in view.entries],
            "stats": _serialize_stats(view.stats) if view.stats else None,
            "motivation": _serialize_motivation(view.motivation)
            if view.motivation
            else None,
            "logged_today": view.logged_today,
            "chart": [_serialize_point(point) for point in view.chart],
        }

    return app


def _serialize_profile(profile: UserProfile) -> dict[str, object]:
    return {
        "id": profile.id,
        "name": profile.name,
        "start_weight": profile.start_weight,
        "goal_weight": profile.goal_weight,
        "start_date": profile.start_date.isoformat(),
        "target_date": profile.target_date.isoformat()
        if profile.target_date
        else None,
    }


def _serialize_entry(entry: WeightEntry) -> dict[str, object]:
    return {
        "id": entry.id,
        "user_id": entry.user_id,
        "date": entry.date.isoformat(),
        "weight": entry.weight,
        "note": entry.note,
        "created_at": entry.created_at.isoformat(),
    }


def _serialize_stats(stats: Stats) -> dict[str, object]:
    return {
        "current_weight": stats.current_weight,
        "total_change": round(stats.total_change, 2),
        "days_tracked": stats.days_tracked,
        "weekly_trend": round(stats.weekly_trend, 2),
        "goal_progress": round(stats.goal_progress, 1),
        "streak": stats.streak,
        "start_weight": stats.start_weight,
        "goal_weight": stats.goal_weight,
        "remaining_to_goal": stats.remaining_to_goal,
        "entry_count": stats.entry_count,
        "latest_entry_date": stats.latest_entry_date.isoformat(),
    }


def _serialize_motivation(motivation: Motivation) -> dict[str, str]:
    return {"mood": motivation.mood.value, "message": motivation.message}


def _serialize_point(point: ChartPoint) -> dict[str, object]:
    return {
        "day": point.day.isoformat(),
        "weight": point.weight,
        "label": point.label,
    }
