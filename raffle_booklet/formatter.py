"""Zero-padded ticket number formatting."""

from .models import Ticket


class TicketFormatter:
    """Formats ticket numbers to the digit width of the largest number in the range."""

    def __init__(self, max_value: int):
        self.digit_width = len(str(max_value))

    def format(self, value: int) -> str:
        """
        Left-pad `value` with zeros to `digit_width` characters.

        Example:
            >>> TicketFormatter(9999).format(7)
            '0007'
        """
        return str(value).zfill(self.digit_width)

    def ticket(self, value: int) -> Ticket:
        return Ticket(value=value, text=self.format(value))
