"""FastAPI endpoints for login, room listing and appointment booking."""

from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, Header, Request, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from .engine import parse_instant
from .errors import SchedulerError, UnauthenticatedError
from .gate import SessionGate
from .models import Appointment, Room, User
from .store import AppointmentStore, IdentityStore, RoomCatalog, SchedulerStores, create_stores

logger = logging.getLogger(__name__)


class LoginRequest(BaseModel):
    username: str
    password: str


class LoginResponse(BaseModel):
    token: str


class RoomResponse(BaseModel):
    id: str
    name: str
    capacity: int


class CreateAppointmentRequest(BaseModel):
    roomId: str = Field(min_length=1)
    startTime: str = Field(min_length=1)
    endTime: str = Field(min_length=1)


class AppointmentResponse(BaseModel):
    id: str
    roomId: str
    userId: str
    startTime: str
    endTime: str


class HealthResponse(BaseModel):
    status: str


def _room_response(room: Room) -> RoomResponse:
    return RoomResponse(**room.to_dict())


def _appointment_response(appointment: Appointment) -> AppointmentResponse:
    return AppointmentResponse(**appointment.to_dict())


def create_app(stores: SchedulerStores | None = None) -> FastAPI:
    app = FastAPI(title="Meeting Room Scheduler API", version="1.0.0")
    scheduler_stores = stores if stores is not None else create_stores()
    gate = SessionGate(identity=scheduler_stores.identity)
    app.state.stores = scheduler_stores

    @app.exception_handler(SchedulerError)
    async def handle_scheduler_error(request: Request, exc: SchedulerError) -> JSONResponse:
        headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, UnauthenticatedError) else None
        return JSONResponse(status_code=int(exc.status_code), content=exc.to_dict(), headers=headers)

    def get_identity() -> IdentityStore:
        return scheduler_stores.identity

    def get_rooms() -> RoomCatalog:
        return scheduler_stores.rooms

    def get_appointments() -> AppointmentStore:
        return scheduler_stores.appointments

    def get_current_user(authorization: str | None = Header(default=None)) -> User:
        return gate.authenticate(authorization)

    @app.get("/healthz", response_model=HealthResponse)
    def healthz() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/login", response_model=LoginResponse)
    def login(
        payload: LoginRequest,
        identity: IdentityStore = Depends(get_identity),
    ) -> LoginResponse:
        user = identity.validate_credentials(username=payload.username, password=payload.password)
        if user is None:
            logger.info("Failed login for username %r", payload.username)
            raise UnauthenticatedError(reason="invalid_credentials", message="Invalid credentials")
        logger.info("User %s logged in", user.id)
        return LoginResponse(token=identity.issue_token(user))

    @app.get("/rooms", response_model=list[RoomResponse])
    def list_rooms(
        _: User = Depends(get_current_user),
        catalog: RoomCatalog = Depends(get_rooms),
    ) -> list[RoomResponse]:
        return [_room_response(room) for room in catalog.list_rooms()]

    @app.post("/appointments", response_model=AppointmentResponse, status_code=201)
    def create_appointment(
        payload: CreateAppointmentRequest,
        user: User = Depends(get_current_user),
        appointments: AppointmentStore = Depends(get_appointments),
    ) -> AppointmentResponse:
        start_time = parse_instant(payload.startTime, field="startTime")
        end_time = parse_instant(payload.endTime, field="endTime")
        created = appointments.create(room_id=payload.roomId, start_time=start_time, end_time=end_time, user=user)
        return _appointment_response(created)

    @app.get("/appointments", response_model=list[AppointmentResponse])
    def list_appointments(
        _: User = Depends(get_current_user),
        appointments: AppointmentStore = Depends(get_appointments),
    ) -> list[AppointmentResponse]:
        return [_appointment_response(appointment) for appointment in appointments.list()]

    @app.delete("/appointments/{appointment_id}", status_code=204)
    def cancel_appointment(
        appointment_id: str,
        user: User = Depends(get_current_user),
        appointments: AppointmentStore = Depends(get_appointments),
    ) -> Response:
        appointments.cancel(appointment_id=appointment_id, user=user)
        return Response(status_code=204)

    return app


app = create_app()
