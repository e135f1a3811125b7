import logging
from datetime import datetime, time
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import List, Optional, Union

from metro_planner.config import settings
from metro_planner.exceptions import InvalidFareInputException
from metro_planner.routes.schemas import (
    FareBreakdown, FareOption, FareOptionsResponse, FareSlab, TicketType
)

logger = logging.getLogger(__name__)

# (inclusive upper bound in km, fare); evaluated in ascending order, None is open-ended
FARE_SLABS = [
    (Decimal("2"), Decimal("10")),
    (Decimal("4"), Decimal("20")),
    (Decimal("6"), Decimal("30")),
    (Decimal("8"), Decimal("40")),
    (Decimal("10"), Decimal("50")),
    (Decimal("15"), Decimal("60")),
    (Decimal("20"), Decimal("70")),
    (Decimal("25"), Decimal("80")),
    (None, Decimal("90")),
]

SMART_TICKET_TYPES = {TicketType.CARD, TicketType.QR, TicketType.NCMC}
STANDARD_DISCOUNT_RATE = Decimal("0.05")
OFF_PEAK_DISCOUNT_RATE = Decimal("0.10")

# Weekday off-peak windows as [start, end); None means end of day
OFF_PEAK_WINDOWS = [
    (time(0, 0), time(8, 0)),
    (time(12, 0), time(16, 0)),
    (time(21, 0), None),
]

# (month, day) fixed every year
FIXED_HOLIDAYS = {(1, 26), (8, 15), (10, 2)}

SUNDAY = 6


class FareCalculationService:
    """
    Distance-slab fare engine with smart-ticket discounts.

    TOKEN tickets always pay the slab fare. CARD, QR and NCMC tickets get 5%
    off, or 10% off when travelling off-peak or on a fixed holiday. The
    discounted amount is rounded to the nearest whole rupee with halves
    rounded up, and the applied discount is taken from the rounded fare so
    the two always add back up to the base fare.
    """

    def calculate_fare(
        self,
        distance_km: Union[Decimal, float, int],
        travel_time: Optional[datetime] = None,
        ticket_type: Optional[Union[TicketType, str]] = None
    ) -> FareBreakdown:
        distance = self._parse_distance(distance_km)
        ticket = self.parse_ticket_type(ticket_type)
        if travel_time is None:
            travel_time = datetime.now()

        base_fare = self.get_base_fare(distance)
        off_peak = self.is_off_peak(travel_time)
        holiday = self.is_holiday(travel_time)
        discount_rate = self.get_discount_rate(ticket, off_peak or holiday)

        final_fare = (base_fare * (Decimal("1") - discount_rate)).quantize(
            Decimal("1"), rounding=ROUND_HALF_UP
        )
        logger.debug(
            "Fare for %s km (%s, %s): base %s, final %s",
            distance, ticket.value, travel_time.isoformat(), base_fare, final_fare
        )

        return FareBreakdown(
            distance_km=distance,
            base_fare=base_fare,
            final_fare=final_fare,
            applied_discount=base_fare - final_fare,
            discount_rate=discount_rate,
            ticket_type=ticket,
            travel_time=travel_time,
            is_off_peak=off_peak,
            is_holiday=holiday
        )

    def _parse_distance(self, distance_km) -> Decimal:
        if isinstance(distance_km, bool):
            raise InvalidFareInputException(f"Distance must be a number, got {distance_km!r}")
        try:
            distance = Decimal(str(distance_km))
        except (InvalidOperation, ValueError):
            raise InvalidFareInputException(f"Distance must be a number, got {distance_km!r}")

        if not distance.is_finite():
            raise InvalidFareInputException(f"Distance must be finite, got {distance_km!r}")
        if distance < 0:
            raise InvalidFareInputException(f"Distance cannot be negative, got {distance_km!r}")
        return distance

    @staticmethod
    def parse_ticket_type(ticket_type: Optional[Union[TicketType, str]]) -> TicketType:
        """Match a ticket type case-insensitively; None falls back to the configured default"""
        if isinstance(ticket_type, TicketType):
            return ticket_type
        if ticket_type is None:
            ticket_type = settings.DEFAULT_TICKET_TYPE
        try:
            return TicketType(str(ticket_type).strip().upper())
        except ValueError:
            valid = ", ".join(t.value for t in TicketType)
            raise InvalidFareInputException(
                f"Ticket type must be one of: {valid}; got {ticket_type!r}"
            )

    @staticmethod
    def get_base_fare(distance_km: Decimal) -> Decimal:
        for max_distance, fare in FARE_SLABS:
            if max_distance is None or distance_km <= max_distance:
                return fare
        return FARE_SLABS[-1][1]

    @staticmethod
    def get_discount_rate(ticket_type: TicketType, reduced_rate_period: bool) -> Decimal:
        if ticket_type not in SMART_TICKET_TYPES:
            return Decimal("0")
        if reduced_rate_period:
            return OFF_PEAK_DISCOUNT_RATE
        return STANDARD_DISCOUNT_RATE

    @staticmethod
    def is_off_peak(travel_time: datetime) -> bool:
        """Sundays are off-peak all day; other days only inside the off-peak windows"""
        if travel_time.weekday() == SUNDAY:
            return True

        clock = travel_time.time().replace(tzinfo=None)
        for start, end in OFF_PEAK_WINDOWS:
            if clock >= start and (end is None or clock < end):
                return True
        return False

    @staticmethod
    def is_holiday(travel_time: datetime) -> bool:
        return (travel_time.month, travel_time.day) in FIXED_HOLIDAYS

    def compare_ticket_types(
        self,
        distance_km: Union[Decimal, float, int],
        travel_time: Optional[datetime] = None
    ) -> FareOptionsResponse:
        """Fare for every ticket type at the same distance and time"""
        if travel_time is None:
            travel_time = datetime.now()

        options = [
            FareOption(
                ticket_type=ticket,
                fare=self.calculate_fare(distance_km, travel_time, ticket)
            )
            for ticket in TicketType
        ]
        cheapest = min(options, key=lambda option: option.fare.final_fare)

        return FareOptionsResponse(
            distance_km=options[0].fare.distance_km,
            travel_time=travel_time,
            options=options,
            cheapest_ticket_type=cheapest.ticket_type
        )

    @staticmethod
    def get_fare_slabs() -> List[FareSlab]:
        return [
            FareSlab(max_distance_km=max_distance, fare=fare)
            for max_distance, fare in FARE_SLABS
        ]
