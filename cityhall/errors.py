from fastapi import HTTPException, status


class IntranetError(HTTPException):
    """Base for handler failures; ``detail`` carries the message callers match on."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str):
        super().__init__(status_code=self.status_code, detail=detail)

    def __str__(self) -> str:
        return self.detail


class NotFoundError(IntranetError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(IntranetError):
    status_code = status.HTTP_409_CONFLICT


class InvalidCredentialsError(IntranetError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, detail: str = "Invalid email or password"):
        super().__init__(detail)


class InactiveAccountError(IntranetError):
    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, detail: str = "Account is inactive"):
        super().__init__(detail)


class PermissionDeniedError(IntranetError):
    status_code = status.HTTP_403_FORBIDDEN


class ConstraintViolationError(IntranetError):
    status_code = 422
