from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.exc import DBAPIError, IntegrityError

from backend.app.core.errors import InvalidReservationInput, ReservationValidationError
from backend.app.models.reservation import Reservation
from backend.app.routers.schemas import ReservationCreateIn, ReservationCreateOut
from backend.app.services.reservations import ReservationService


router = APIRouter()


def get_reservation_service(request: Request) -> ReservationService:
    return request.app.state.reservation_service


@router.post("/reservations", response_model=ReservationCreateOut, status_code=status.HTTP_201_CREATED)
async def create_endpoint(
    payload: ReservationCreateIn,
    service: ReservationService = Depends(get_reservation_service),
) -> ReservationCreateOut:
    reservation = Reservation.from_mapping(payload.model_dump())

    try:
        reservation_id = await service.create(reservation)
    except InvalidReservationInput as exc:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except ReservationValidationError as exc:
        raise HTTPException(
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": str(exc), "errors": exc.errors},
        ) from exc
    except IntegrityError as exc:
        raise HTTPException(status.HTTP_409_CONFLICT, detail="Reservation conflicts with stored data") from exc
    except DBAPIError as exc:
        raise HTTPException(status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Database error") from exc

    return ReservationCreateOut(id=reservation_id)
