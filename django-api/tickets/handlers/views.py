"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain errors to the exception handler
- Never contain business logic
"""

from django.utils import timezone
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from tickets.dependencies import get_ticket_service
from tickets.domain.policy import HALL_CONFIG, price_tier_for
from tickets.domain.slot_grid import generate_daily_slots
from tickets.handlers.serializers import (
    DateQuerySerializer,
    GroupTicketSerializer,
    HeadcountQuerySerializer,
    SlotCandidateSerializer,
    TicketCreateSerializer,
    TicketUpdateSerializer,
    UserInfoSerializer,
)


class SlotGridView(APIView):
    """Handler for GET /api/slots?date=YYYY-MM-DD"""

    def get(self, request: Request) -> Response:
        query = DateQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        day = query.validated_data.get("date") or timezone.localdate()
        return Response(
            {
                "date": day.isoformat(),
                "halls": [
                    {
                        "hall_type": hall.value,
                        "label": config.label,
                        "capacity": config.capacity,
                    }
                    for hall, config in HALL_CONFIG.items()
                ],
                "slots": SlotCandidateSerializer(generate_daily_slots(day), many=True).data,
            }
        )


class PriceTierView(APIView):
    """Handler for GET /api/price-tier?headcount=N"""

    def get(self, request: Request) -> Response:
        query = HeadcountQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        headcount = query.validated_data["headcount"]
        return Response({"headcount": headcount, "price_tier": price_tier_for(headcount)})


class TicketListView(APIView):
    """Handler for GET and POST /api/tickets"""

    def get(self, request: Request) -> Response:
        tickets = get_ticket_service().list_tickets()
        return Response(GroupTicketSerializer(tickets, many=True).data)

    def post(self, request: Request) -> Response:
        body = TicketCreateSerializer(data=request.data)
        body.is_valid(raise_exception=True)
        ticket = get_ticket_service().create_ticket(**body.validated_data)
        return Response(GroupTicketSerializer(ticket).data, status=status.HTTP_201_CREATED)


class TicketDetailView(APIView):
    """Handler for GET and PUT /api/tickets/{ticket_id}"""

    def get(self, request: Request, ticket_id: str) -> Response:
        ticket = get_ticket_service().get_ticket(ticket_id)
        return Response(GroupTicketSerializer(ticket).data)

    def put(self, request: Request, ticket_id: str) -> Response:
        body = TicketUpdateSerializer(data=request.data)
        body.is_valid(raise_exception=True)
        ticket = get_ticket_service().edit_ticket(ticket_id, **body.validated_data)
        return Response(GroupTicketSerializer(ticket).data)


class SeatView(APIView):
    """Handler for PUT and DELETE
    /api/tickets/{ticket_id}/slots/{slot_index}/seats/{seat_index}
    """

    def put(
        self, request: Request, ticket_id: str, slot_index: int, seat_index: int
    ) -> Response:
        body = UserInfoSerializer(data=request.data)
        body.is_valid(raise_exception=True)
        ticket = get_ticket_service().occupy_seat(
            ticket_id, slot_index, seat_index, body.to_user_info()
        )
        return Response(GroupTicketSerializer(ticket).data)

    def delete(
        self, request: Request, ticket_id: str, slot_index: int, seat_index: int
    ) -> Response:
        ticket = get_ticket_service().release_seat(ticket_id, slot_index, seat_index)
        return Response(GroupTicketSerializer(ticket).data)
