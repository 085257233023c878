"""REST API for roster normalization and submission export."""

from __future__ import annotations

import json
import logging

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.responses import Response

from rosterslots.api.schemas import (
    NormalizeRequest,
    NormalizeResponse,
    OverflowPhaseResponse,
    ProfileResponse,
    RosterEntryPayload,
    SubmissionResponse,
)
from rosterslots.config import SportProfile, get_profile, get_profile_by_key, iter_profiles
from rosterslots.export import SubmissionTable, build_submission_table, serialize_lineups
from rosterslots.ingest import DEFAULT_ROSTER_MAPPING, parse_roster_csv
from rosterslots.models import RosterEntry
from rosterslots.normalize import normalize_roster


logger = logging.getLogger(__name__)


def _profile_to_response(profile: SportProfile) -> ProfileResponse:
    return ProfileResponse(
        key=profile.key,
        site=profile.site.value,
        sport=profile.sport.value,
        roster_size=profile.roster_size,
        pass_through=profile.is_pass_through,
        phases=[
            OverflowPhaseResponse(capacities=dict(phase.capacities), wildcard=phase.wildcard)
            for phase in profile.phases
        ],
        slot_order=list(profile.slot_order),
    )


def _table_to_response(table: SubmissionTable) -> SubmissionResponse:
    return SubmissionResponse(
        headers=list(table.headers),
        rows=table.rows,
        lineup_ids=table.lineup_ids,
    )


def _parse_mapping(mapping_str: str | None) -> dict[str, str]:
    if not mapping_str:
        return {}
    try:
        mapping = json.loads(mapping_str)
    except json.JSONDecodeError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid mapping JSON: {exc}") from exc
    if not isinstance(mapping, dict):
        raise HTTPException(status_code=400, detail="Mapping JSON must be an object")
    unknown = sorted(set(mapping) - set(DEFAULT_ROSTER_MAPPING))
    if unknown:
        raise HTTPException(status_code=400, detail=f"Unknown mapping keys: {', '.join(unknown)}")
    return mapping


def create_app() -> FastAPI:
    app = FastAPI(title="rosterslots")

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/profiles", response_model=list[ProfileResponse])
    async def profiles() -> list[ProfileResponse]:
        return [_profile_to_response(profile) for profile in iter_profiles()]

    @app.get("/profiles/{profile_key}", response_model=ProfileResponse)
    async def profile_detail(profile_key: str) -> ProfileResponse:
        try:
            profile = get_profile_by_key(profile_key)
        except ValueError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return _profile_to_response(profile)

    @app.post("/normalize", response_model=NormalizeResponse)
    async def normalize(request: NormalizeRequest) -> NormalizeResponse:
        entries = [RosterEntry(**entry.model_dump()) for entry in request.entries]
        try:
            profile = get_profile(request.site, request.sport)
            normalized = normalize_roster(entries, site=profile.site, sport=profile.sport)
            table = build_submission_table(serialize_lineups(normalized), strict=request.strict)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

        return NormalizeResponse(
            site=profile.site.value,
            sport=profile.sport.value,
            entries=[RosterEntryPayload(**entry.model_dump()) for entry in normalized],
            submission=_table_to_response(table),
        )

    @app.post("/export")
    async def export_csv(
        roster: UploadFile = File(...),
        site: str = Form("draftkings"),
        sport: str = Form("nfl"),
        roster_mapping: str | None = Form(None),
        strict: bool | None = Form(None),
    ) -> Response:
        contents = await roster.read()
        if not contents:
            raise HTTPException(status_code=400, detail="roster file is empty")
        mapping = _parse_mapping(roster_mapping)

        try:
            profile = get_profile(site, sport)
            entries = parse_roster_csv(contents.decode("utf-8-sig"), mapping=mapping or None)
            normalized = normalize_roster(entries, site=profile.site, sport=profile.sport)
            table = build_submission_table(serialize_lineups(normalized), strict=strict)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

        logger.info("Exported %d lineups for %s", len(table.rows), profile.key)
        return Response(
            content=table.to_csv(),
            media_type="text/csv",
            headers={"Content-Disposition": f"attachment; filename={profile.key}.csv"},
        )

    return app


__all__ = ["create_app"]
