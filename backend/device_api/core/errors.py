class DeviceApiError(Exception):
    """Base class for failures reported to the client as plain text."""

    status_code = 500


class DeviceQueryError(DeviceApiError):
    """The fixed device query could not be executed."""


class RowDecodeError(DeviceApiError):
    """A result row could not be scanned into a device record."""

    def __init__(self, position: int, reason: str):
        super().__init__(f"row {position}: {reason}")
        self.position = position
        self.reason = reason
