class GameClientError(Exception):
    """Base exception for game client API calls."""

    def __init__(self, endpoint: str, message: str) -> None:
        self.endpoint = endpoint
        super().__init__(f"{endpoint}: {message}")


class GameClientHTTPError(GameClientError):
    """Raised when the request fails or the client answers with an error status."""

    pass


class GameClientResponseError(GameClientError):
    """Raised when the response body is not the expected JSON."""

    pass
