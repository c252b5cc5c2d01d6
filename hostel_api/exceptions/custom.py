class HostelStoreError(Exception):
    def __init__(self, message: str, detail: str | None = None):
        self.message = message
        self.detail = detail
        super().__init__(message)


class InvalidRatingError(Exception):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid rating value provided: {token!r}")


class HostelNotFoundError(Exception):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Hostel not found: {name!r}")
