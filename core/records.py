from dataclasses import dataclass
from typing import Any, Optional

from utils.formatters import format_date_time, nested_get, or_na


@dataclass
class TokenRecord:
    """
    One row of the updated tokens listing, as returned by the API.
    """
    token_no: Any
    driver_name: Any
    vehicle_no: Any
    vehicle_type: Any
    vehicle_rate: Any
    quantity: Any
    place: Any
    route: Any
    operator: Optional[str]
    challan_pin: Any
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_api(cls, row: dict) -> "TokenRecord":
        return cls(
            token_no=row.get("tokenNo"),
            driver_name=row.get("driverName"),
            vehicle_no=row.get("vehicleNo"),
            # populated vehicle document when the flat field is missing
            vehicle_type=row.get("vehicleType") or nested_get(row, "vehicleId.vehicleType"),
            vehicle_rate=row.get("vehicleRate"),
            quantity=row.get("quantity"),
            place=row.get("place"),
            route=row.get("route"),
            operator=nested_get(row, "userId.username"),
            challan_pin=row.get("challanPin"),
            created_at=row.get("createdAt"),
            updated_at=row.get("updatedAt"),
        )

    @property
    def last_updated(self):
        return self.updated_at or self.created_at

    def to_display_row(self, serial_no: int) -> list:
        """Values in REPORT_COLUMNS order."""
        return [
            serial_no,
            format_date_time(self.last_updated),
            self.token_no,
            self.driver_name,
            self.vehicle_no,
            or_na(self.vehicle_type),
            or_na(self.vehicle_rate),
            self.quantity,
            self.place,
            or_na(self.route),
            or_na(self.operator),
            or_na(self.challan_pin),
        ]
