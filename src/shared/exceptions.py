# src/shared/exceptions.py
from fastapi import HTTPException, status


# Integration Exceptions
class ApiResolutionError(HTTPException):
    def __init__(
        self,
        message: str = (
            "Could not resolve onboarding api. Please make sure that the "
            "PowerOfficeGo integration is configured correctly"
        ),
    ) -> None:
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message
        )


class DownstreamExchangeError(HTTPException):
    def __init__(self, message: str = "PowerOfficeGo request failed") -> None:
        super().__init__(status_code=status.HTTP_502_BAD_GATEWAY, detail=message)


# Onboarding Session Exceptions
class UnknownSessionError(HTTPException):
    def __init__(self, message: str = "Unknown onboarding session") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=message)
