from django.urls import path

from tickets.handlers import (
    PriceTierView,
    SeatView,
    SlotGridView,
    TicketDetailView,
    TicketListView,
)

urlpatterns = [
    path("slots", SlotGridView.as_view(), name="slot-grid"),
    path("price-tier", PriceTierView.as_view(), name="price-tier"),
    path("tickets", TicketListView.as_view(), name="ticket-list"),
    path("tickets/<str:ticket_id>", TicketDetailView.as_view(), name="ticket-detail"),
    path(
        "tickets/<str:ticket_id>/slots/<int:slot_index>/seats/<int:seat_index>",
        SeatView.as_view(),
        name="ticket-seat",
    ),
]
