"""Serializers for transforming domain models to API responses and parsing
request bodies into domain inputs.
"""

from rest_framework import serializers

from tickets.domain import (
    DEFAULT_HEADCOUNT,
    DEFAULT_PACKAGE_NAME,
    Gender,
    HallType,
    SlotChoice,
    UserInfo,
)
from tickets.domain.value_objects import TIME_FORMAT

GENDER_CHOICES = [gender.value for gender in Gender]
HALL_CHOICES = [hall.value for hall in HallType]


class UserInfoSerializer(serializers.Serializer):
    """Serializer for UserInfo; builds the value object on input."""

    name = serializers.CharField()
    gender = serializers.ChoiceField(choices=GENDER_CHOICES)
    phone = serializers.CharField()

    def to_representation(self, instance: UserInfo) -> dict:
        return {
            "name": instance.name,
            "gender": instance.gender.value,
            "phone": instance.phone,
        }

    def to_user_info(self) -> UserInfo:
        data = self.validated_data
        return UserInfo(
            name=data["name"], gender=Gender(data["gender"]), phone=data["phone"]
        )


class SeatSerializer(serializers.Serializer):
    """Serializer for Seat domain model."""

    id = serializers.CharField()
    index = serializers.IntegerField()
    occupant = UserInfoSerializer(allow_null=True)


class TimeSlotSerializer(serializers.Serializer):
    """Serializer for TimeSlot domain model."""

    id = serializers.CharField()
    date = serializers.DateField(source="slot_date")
    time = serializers.TimeField(source="start_time", format=TIME_FORMAT)
    hall_type = serializers.CharField(source="hall_type.value")
    capacity = serializers.IntegerField()
    occupied_count = serializers.IntegerField()
    seats = SeatSerializer(many=True)


class GroupTicketSerializer(serializers.Serializer):
    """Serializer for GroupTicket domain model."""

    id = serializers.UUIDField(source="id.value")
    package_name = serializers.CharField()
    headcount = serializers.IntegerField()
    price_tier = serializers.CharField()
    selected_date = serializers.DateField()
    total_capacity = serializers.IntegerField()
    slots = TimeSlotSerializer(many=True)
    remarks = serializers.CharField()
    remark_image = serializers.CharField(allow_null=True)
    created_at = serializers.DateTimeField()


class SlotCandidateSerializer(serializers.Serializer):
    """Serializer for SlotCandidate grid entries."""

    id = serializers.CharField()
    time = serializers.TimeField(source="start_time", format=TIME_FORMAT)


class SlotChoiceSerializer(serializers.Serializer):
    time = serializers.TimeField(input_formats=[TIME_FORMAT])
    hall_type = serializers.ChoiceField(choices=HALL_CHOICES)

    def to_internal_value(self, data) -> SlotChoice:
        values = super().to_internal_value(data)
        return SlotChoice(
            start_time=values["time"], hall_type=HallType(values["hall_type"])
        )


class TicketCreateSerializer(serializers.Serializer):
    """Request body for creating a ticket.

    An empty slot list passes here so the service reports it as a rule
    violation.
    """

    slots = SlotChoiceSerializer(many=True, allow_empty=True)
    headcount = serializers.IntegerField(default=DEFAULT_HEADCOUNT)
    selected_date = serializers.DateField(required=False)
    remarks = serializers.CharField(allow_blank=True, default="")
    remark_image = serializers.CharField(allow_null=True, default=None)
    package_name = serializers.CharField(default=DEFAULT_PACKAGE_NAME)


class TicketUpdateSerializer(serializers.Serializer):
    """Request body for editing a ticket's selection and headcount.

    Omitted remarks and image are kept; a null image removes it.
    """

    slots = SlotChoiceSerializer(many=True, allow_empty=True)
    headcount = serializers.IntegerField()
    selected_date = serializers.DateField()
    remarks = serializers.CharField(allow_blank=True, required=False)
    remark_image = serializers.CharField(allow_null=True, required=False)


class DateQuerySerializer(serializers.Serializer):
    date = serializers.DateField(required=False)


class HeadcountQuerySerializer(serializers.Serializer):
    headcount = serializers.IntegerField(min_value=0)
