from tickets.handlers.views import (
    PriceTierView,
    SeatView,
    SlotGridView,
    TicketDetailView,
    TicketListView,
)

__all__ = [
    "PriceTierView",
    "SeatView",
    "SlotGridView",
    "TicketDetailView",
    "TicketListView",
]
