"""Error taxonomy for the API.

Every failure a handler anticipates is raised as one of the ``ApiError``
variants below. The error normalizer in ``utils.error_handler`` is the only
place these become HTTP responses.
"""


class ApiError(Exception):
    status_code = 500
    message = "Internal Server Error"

    def __init__(self, message=None, detail=None):
        if message is not None:
            self.message = message
        # raw underlying message, echoed only when error detail is exposed
        self.detail = detail if detail is not None else self.message
        super().__init__(self.message)


class ValidationFailure(ApiError):
    """Missing or malformed input, or a broken invariant such as date ordering."""

    status_code = 400

    def __init__(self, messages, detail=None):
        if isinstance(messages, str):
            messages = [messages]
        self.messages = list(messages)
        super().__init__(", ".join(self.messages), detail=detail)

    @classmethod
    def from_pydantic(cls, exc):
        messages = []
        for err in exc.errors():
            field = ".".join(str(part) for part in err.get("loc", ()))
            msg = err.get("msg", "Invalid value")
            messages.append(f"{field}: {msg}" if field else msg)
        return cls(messages, detail=str(exc))


class DuplicateKey(ApiError):
    status_code = 400

    def __init__(self, field, detail=None):
        self.field = field
        super().__init__(f"{field[:1].upper()}{field[1:]} already exists", detail=detail)


class MalformedId(ApiError):
    status_code = 400
    message = "Invalid ID format"


class NotFound(ApiError):
    status_code = 404
    message = "Not found"


class InternalFailure(ApiError):
    status_code = 500
    message = "Internal Server Error"
