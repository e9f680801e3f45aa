from starlette.exceptions import HTTPException

NOT_FOUND_MESSAGE = "The requested page does not exist."


class PageNotFound(HTTPException):
    """No page matches the requested alias, route, locale and status."""

    def __init__(self, detail: str | None = None):
        super().__init__(status_code=404, detail=detail or NOT_FOUND_MESSAGE)
