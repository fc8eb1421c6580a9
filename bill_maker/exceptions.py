# exceptions.py
class BillMakerError(Exception):
    pass


class EmptyBillError(BillMakerError):
    """Raised when a document is requested for a bill without entries."""

    def __init__(self, message: str = "Please add at least one entry."):
        super().__init__(message)


# CLI navigation signals (raised by get_input)
class CancelAction(Exception):
    pass


class GoBackAction(Exception):
    pass
