"""Error taxonomy shared by the scheduling backend and its HTTP boundary."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any


class SchedulerError(Exception):
    code = "scheduler_error"
    status_code = HTTPStatus.BAD_REQUEST
    message = "Request could not be processed"

    def __init__(self, message: str | None = None, context: dict[str, Any] | None = None) -> None:
        if message is not None:
            self.message = message
        self.context = context
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.code, "message": self.message}
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class UnauthenticatedError(SchedulerError):
    code = "unauthenticated"
    status_code = HTTPStatus.UNAUTHORIZED
    message = "Authentication required"

    def __init__(self, reason: str, message: str | None = None) -> None:
        self.reason = reason
        super().__init__(message=message, context={"reason": reason})


class RoomNotFoundError(SchedulerError):
    code = "room_not_found"
    message = "Room not found"

    def __init__(self, room_id: str) -> None:
        super().__init__(context={"roomId": room_id})


class InvalidRangeError(SchedulerError):
    code = "invalid_range"
    message = "Start time must be before end time"


class MalformedInputError(SchedulerError):
    code = "malformed_input"
    message = "Malformed timestamp"

    def __init__(self, field: str, value: str) -> None:
        super().__init__(context={"field": field, "value": value})


class ConflictError(SchedulerError):
    code = "conflict"
    status_code = HTTPStatus.CONFLICT
    message = "Room is already booked for an overlapping time window"

    def __init__(self, room_id: str, conflicting_id: str) -> None:
        super().__init__(context={"roomId": room_id, "conflictingAppointmentId": conflicting_id})


class AppointmentNotFoundError(SchedulerError):
    code = "not_found"
    status_code = HTTPStatus.NOT_FOUND
    message = "Appointment not found"

    def __init__(self, appointment_id: str) -> None:
        super().__init__(context={"appointmentId": appointment_id})


class ForbiddenError(SchedulerError):
    code = "forbidden"
    status_code = HTTPStatus.FORBIDDEN
    message = "Only the creator may cancel this appointment"

    def __init__(self, appointment_id: str) -> None:
        super().__init__(context={"appointmentId": appointment_id})
